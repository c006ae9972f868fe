"""
Node labels and dimensions.

Each node carries two renderings: a compact collapsed label shown by default
and an expanded label shown when the node is focused. Node sizes are derived
from the label text alone, so the layout engine can reserve room for labels
without measuring fonts.
"""

from typing import Iterable

from ..config import LabelOptions
from ..core.types import AuditAlert, FileAudit, SymbolAudit
from .elements import LabelBox

ALERT_MARKER = "⚠️"
SUCCESS_MARKER = "🎉"
ELLIPSIS = "..."


def dimensions_of(label: str, options: LabelOptions | None = None) -> tuple[float, float]:
    """
    Compute (width, height) for a label.

    Width follows the longest line, height the number of lines. Character
    counts are code points; no attempt is made to account for wide glyphs.
    """
    options = options or LabelOptions.default()
    lines = label.split("\n")

    height = max(
        len(lines) * options.font_size * options.line_height + 2 * options.padding,
        options.min_height,
    )
    width = max(
        max(len(line) * options.font_size + 2 * options.padding for line in lines),
        options.min_width,
    )
    return width, height


def label_box(label: str, options: LabelOptions | None = None) -> LabelBox:
    width, height = dimensions_of(label, options)
    return LabelBox(label=label, width=width, height=height)


def _alerts(audit: FileAudit | SymbolAudit | None) -> list[AuditAlert]:
    if audit is None:
        return []
    return list(audit.alerts.values())


def _alert_lines(alerts: Iterable[AuditAlert]) -> list[str]:
    return [f"{ALERT_MARKER} {alert.message.short}" for alert in alerts]


def collapsed_file_label(
    file_name: str,
    audit: FileAudit | None,
    options: LabelOptions | None = None,
) -> str:
    """Truncated file name plus an alert counter when the file has alerts."""
    options = options or LabelOptions.default()
    max_length = options.file_name_max_length

    label = file_name
    if len(file_name) > max_length:
        label = f"{ELLIPSIS}{file_name[-max_length:]}" if max_length else ELLIPSIS

    alerts = _alerts(audit)
    if alerts:
        label += f"\n{ALERT_MARKER}({len(alerts)})"
    return label


def expanded_file_label(file_name: str, audit: FileAudit | None) -> str:
    """Full file name followed by one line per alert."""
    alerts = _alerts(audit)
    if not alerts:
        return f"{file_name}\n{SUCCESS_MARKER} No issues found"
    return "\n".join([file_name, *_alert_lines(alerts)])


def collapsed_symbol_label(symbol_name: str, symbol_type: str) -> str:
    return f"{symbol_name} ({symbol_type})"


def expanded_symbol_label(
    symbol_name: str,
    symbol_type: str,
    file_name: str,
    audit: SymbolAudit | None,
) -> str:
    """
    Symbol header, source file, and alerts.

    The alert section is left out entirely when there is no audit entry,
    which is always the case for external symbols.
    """
    lines = [collapsed_symbol_label(symbol_name, symbol_type), f"Source: {file_name}"]
    if audit is not None:
        alerts = _alerts(audit)
        if alerts:
            lines.extend(_alert_lines(alerts))
        else:
            lines.append(f"{SUCCESS_MARKER} No issues")
    return "\n".join(lines)
