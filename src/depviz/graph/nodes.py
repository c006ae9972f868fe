"""
Node factories shared by the project, file and symbol builders.
"""

from ..config import LabelOptions
from ..core.resolution import FileResolution, Internal
from ..core.types import (
    UNKNOWN_SYMBOL_TYPE,
    AuditManifest,
    FileAudit,
    SymbolAudit,
    compute_node_id,
)
from .elements import NodeData
from .labels import (
    collapsed_file_label,
    collapsed_symbol_label,
    expanded_file_label,
    expanded_symbol_label,
    label_box,
)
from .severity import resolve_severity


def file_node(file_id: str, audit: FileAudit | None, options: LabelOptions) -> NodeData:
    return NodeData(
        id=compute_node_id(file_id),
        file_name=file_id,
        is_external=False,
        metrics_severity=resolve_severity(audit),
        expanded=label_box(expanded_file_label(file_id, audit), options),
        collapsed=label_box(collapsed_file_label(file_id, audit, options), options),
    )


def symbol_node(
    file_id: str,
    symbol_id: str,
    symbol_type: str,
    is_external: bool,
    audit: SymbolAudit | None,
    options: LabelOptions,
) -> NodeData:
    return NodeData(
        id=compute_node_id(file_id, symbol_id),
        file_name=file_id,
        is_external=is_external,
        symbol_name=symbol_id,
        symbol_type=symbol_type,
        metrics_severity=resolve_severity(audit),
        expanded=label_box(
            expanded_symbol_label(symbol_id, symbol_type, file_id, audit), options
        ),
        collapsed=label_box(collapsed_symbol_label(symbol_id, symbol_type), options),
    )


def symbol_audit(audit_manifest: AuditManifest, file_id: str, symbol_id: str) -> SymbolAudit | None:
    file_audit = audit_manifest.get(file_id)
    if file_audit is None:
        return None
    return file_audit.symbols.get(symbol_id)


def neighbour_node(
    resolution: FileResolution,
    symbol_id: str,
    audit_manifest: AuditManifest,
    options: LabelOptions,
) -> NodeData:
    """
    Node for a symbol reached through a dependency or dependent entry.

    Symbols of files outside the manifest get the `unknown` type, no audit
    data, and are flagged external.
    """
    symbol_type = UNKNOWN_SYMBOL_TYPE
    audit = None
    if isinstance(resolution, Internal):
        symbol = resolution.file.symbols.get(symbol_id)
        if symbol is not None:
            symbol_type = symbol.type.value
        audit = symbol_audit(audit_manifest, resolution.file_id, symbol_id)

    return symbol_node(
        file_id=resolution.file_id,
        symbol_id=symbol_id,
        symbol_type=symbol_type,
        is_external=resolution.is_external(),
        audit=audit,
        options=options,
    )
