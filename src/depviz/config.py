"""
Global Configuration and Defaults.

This module centralizes the defaults used when building graph views:
label sizing, traversal depths, theme and metric colouring. A project can
override them in a `depviz.toml` file (top-level keys) or in the
`[tool.depviz]` table of its `pyproject.toml`.

The configuration is constructed once (by the CLI or the view adapter) and
passed down explicitly; builders never merge partial option objects.
"""

import logging
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Optional

from .core.exceptions import ConfigError
from .core.types import Metric

logger = logging.getLogger(__name__)

# --- Label sizing ---
FONT_SIZE = 10
LINE_HEIGHT = 1.5
PADDING = 10
MIN_HEIGHT = 60
MIN_WIDTH = 60

# Collapsed file labels keep only the tail of long paths
FILE_NAME_MAX_LENGTH = 25

# --- Symbol view traversal ---
DEFAULT_DEPENDENCY_DEPTH = 3
DEFAULT_DEPENDENT_DEPTH = 2

THEMES = ("light", "dark")
DEFAULT_THEME = "light"

CONFIG_FILE_NAME = "depviz.toml"


@dataclass(frozen=True)
class LabelOptions:
    """Text metrics used to derive node sizes from label text."""
    font_size: float
    line_height: float
    padding: float
    min_height: float
    min_width: float
    file_name_max_length: int

    @classmethod
    def default(cls) -> "LabelOptions":
        return cls(
            font_size=FONT_SIZE,
            line_height=LINE_HEIGHT,
            padding=PADDING,
            min_height=MIN_HEIGHT,
            min_width=MIN_WIDTH,
            file_name_max_length=FILE_NAME_MAX_LENGTH,
        )


@dataclass(frozen=True)
class DepvizConfig:
    """Complete configuration for one view instance."""
    label: LabelOptions
    dependency_depth: int
    dependent_depth: int
    theme: str
    target_metric: Optional[Metric]

    @classmethod
    def default(cls) -> "DepvizConfig":
        return cls(
            label=LabelOptions.default(),
            dependency_depth=DEFAULT_DEPENDENCY_DEPTH,
            dependent_depth=DEFAULT_DEPENDENT_DEPTH,
            theme=DEFAULT_THEME,
            target_metric=None,
        )

    def with_overrides(self, **changes: Any) -> "DepvizConfig":
        return replace(self, **changes)


def _require_depth(name: str, value: Any) -> int:
    if not isinstance(value, int) or isinstance(value, bool) or value < 0:
        raise ConfigError(f"{name} must be a non-negative integer, got {value!r}")
    return value


def _require_number(name: str, value: Any) -> float:
    if not isinstance(value, (int, float)) or isinstance(value, bool) or value < 0:
        raise ConfigError(f"{name} must be a non-negative number, got {value!r}")
    return value


def parse_config(data: Dict[str, Any]) -> DepvizConfig:
    """Build a DepvizConfig from a raw table, falling back to defaults."""
    config = DepvizConfig.default()

    label_data = data.get("label", {})
    if not isinstance(label_data, dict):
        raise ConfigError("[label] must be a table")

    label = config.label
    for key in ("font_size", "line_height", "padding", "min_height", "min_width"):
        if key in label_data:
            label = replace(label, **{key: _require_number(f"label.{key}", label_data[key])})
    if "file_name_max_length" in label_data:
        label = replace(
            label,
            file_name_max_length=_require_depth(
                "label.file_name_max_length", label_data["file_name_max_length"]
            ),
        )

    changes: Dict[str, Any] = {"label": label}

    if "dependency_depth" in data:
        changes["dependency_depth"] = _require_depth("dependency_depth", data["dependency_depth"])
    if "dependent_depth" in data:
        changes["dependent_depth"] = _require_depth("dependent_depth", data["dependent_depth"])

    if "theme" in data:
        if data["theme"] not in THEMES:
            raise ConfigError(f"theme must be one of {', '.join(THEMES)}, got {data['theme']!r}")
        changes["theme"] = data["theme"]

    if "target_metric" in data:
        try:
            changes["target_metric"] = Metric(data["target_metric"])
        except ValueError as e:
            raise ConfigError(f"Unknown target_metric: {data['target_metric']!r}") from e

    return config.with_overrides(**changes)


def _read_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e


def load_config(path: str | Path | None = None) -> DepvizConfig:
    """
    Load the configuration.

    Args:
        path: Explicit config file. When omitted, `depviz.toml` and then
            `pyproject.toml` ([tool.depviz]) in the working directory are tried.

    Returns:
        The parsed configuration, or the defaults when no file is found.
    """
    if path is not None:
        path = Path(path)
        if not path.exists():
            raise ConfigError(f"Config file not found: {path}")
        data = _read_toml(path)
        if path.name == "pyproject.toml":
            data = data.get("tool", {}).get("depviz", {})
        return parse_config(data)

    candidate = Path.cwd() / CONFIG_FILE_NAME
    if candidate.exists():
        logger.debug(f"Using config {candidate}")
        return parse_config(_read_toml(candidate))

    pyproject = Path.cwd() / "pyproject.toml"
    if pyproject.exists():
        table = _read_toml(pyproject).get("tool", {}).get("depviz")
        if table is not None:
            logger.debug(f"Using [tool.depviz] from {pyproject}")
            return parse_config(table)

    return DepvizConfig.default()
