"""
Stylesheet hints for the rendering sink.

The stylesheet is a list of `{"selector": ..., "style": {...}}` entries using
data selectors, so it can be serialised and handed to any renderer that
understands them. `node_style` computes the same values for a single node,
for sinks that style node by node.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping

from ..config import DEFAULT_THEME
from ..core.types import Metric, SymbolType
from .elements import NodeData

StyleRule = Dict[str, Any]

SEVERITY_LEVELS = range(0, 6)


@dataclass(frozen=True)
class Palette:
    text_default: str
    text_selected: str
    text_external: str
    background_default: str
    background_selected: str
    background_external: str
    background_highlighted: str
    border_default: str
    severity: Mapping[int, str]
    edge_default: str
    edge_dependency: str
    edge_dependent: str


PALETTES: Dict[str, Palette] = {
    "light": Palette(
        text_default="#3B0764",
        text_selected="#FFFFFF",
        text_external="#3B0764",
        background_default="#F3E8FF",
        background_selected="#A259D9",
        background_external="#F1F5F9",
        background_highlighted="#eab308",
        border_default="#A259D9",
        severity={
            0: "#A259D9",
            1: "#65a30d",
            2: "#ca8a04",
            3: "#d97706",
            4: "#ea580c",
            5: "#dc2626",
        },
        edge_default="#1a1a1a",
        edge_dependency="#0284c7",
        edge_dependent="#9333ea",
    ),
    "dark": Palette(
        text_default="#FFFFFF",
        text_selected="#3B0764",
        text_external="#FFFFFF",
        background_default="#6D28D9",
        background_selected="#CBA6F7",
        background_external="#334155",
        background_highlighted="#facc15",
        border_default="#CBA6F7",
        severity={
            0: "#CBA6F7",
            1: "#a3e635",
            2: "#facc15",
            3: "#fbbf24",
            4: "#fb923c",
            5: "#f87171",
        },
        edge_default="#ffffff",
        edge_dependency="#38bdf8",
        edge_dependent="#a78bfa",
    ),
}

NODE_BORDER_WIDTH = 5
NODE_BORDER_WIDTH_HIGHLIGHTED = 10
EDGE_WIDTH = 1
EDGE_WIDTH_HIGHLIGHTED = 3

SYMBOL_SHAPES: Dict[str, str] = {
    SymbolType.CLASS: "hexagon",
    SymbolType.INTERFACE: "hexagon",
    SymbolType.STRUCT: "hexagon",
    SymbolType.ENUM: "hexagon",
    SymbolType.RECORD: "hexagon",
    SymbolType.FUNCTION: "roundrectangle",
    SymbolType.DELEGATE: "roundrectangle",
    SymbolType.VARIABLE: "ellipse",
}
DEFAULT_SYMBOL_SHAPE = "ellipse"
EXTERNAL_SHAPE = "octagon"
FILE_SHAPE = "roundrectangle"


def palette_for(theme: str) -> Palette:
    return PALETTES.get(theme, PALETTES[DEFAULT_THEME])


def severity_color(level: int, theme: str = DEFAULT_THEME) -> str:
    """Border colour for a severity level; unknown levels use the default border."""
    palette = palette_for(theme)
    return palette.severity.get(level, palette.border_default)


def node_shape(node: NodeData) -> str:
    if not node.is_symbol:
        return FILE_SHAPE
    if node.is_external:
        return EXTERNAL_SHAPE
    return SYMBOL_SHAPES.get(node.symbol_type or "", DEFAULT_SYMBOL_SHAPE)


def node_style(node: NodeData, target_metric: Metric | None = None, theme: str = DEFAULT_THEME) -> StyleRule:
    """Resolved border, background, text colour and shape of one node."""
    palette = palette_for(theme)
    external = node.is_symbol and node.is_external

    if target_metric is not None:
        border_color = severity_color(node.severity(target_metric), theme)
    else:
        border_color = palette.border_default

    return {
        "shape": node_shape(node),
        "border-color": border_color,
        "border-style": "dashed" if external else "solid",
        "background-color": palette.background_external if external else palette.background_default,
        "color": palette.text_external if external else palette.text_default,
    }


def _severity_rules(target_metric: Metric | None, palette: Palette) -> List[StyleRule]:
    if target_metric is None:
        return []
    return [
        {
            "selector": f"node[metricsSeverity.{target_metric.value} = {level}]",
            "style": {"border-color": palette.severity[level]},
        }
        for level in SEVERITY_LEVELS
    ]


def _shape_rules() -> List[StyleRule]:
    rules: List[StyleRule] = [{"selector": "node.file", "style": {"shape": FILE_SHAPE}}]
    for symbol_type, shape in SYMBOL_SHAPES.items():
        rules.append({
            "selector": f'node.symbol[symbolType = "{symbol_type}"]',
            "style": {"shape": shape},
        })
    return rules


def build_stylesheet(target_metric: Metric | None = None, theme: str = DEFAULT_THEME) -> List[StyleRule]:
    """
    Build the full stylesheet for a theme and optional target metric.

    Rule order matters: later rules override earlier ones for the same
    property, so class rules come after data rules.
    """
    palette = palette_for(theme)

    rules: List[StyleRule] = [
        {
            "selector": "node",
            "style": {
                "text-wrap": "wrap",
                "color": palette.text_default,
                "border-width": NODE_BORDER_WIDTH,
                "border-color": palette.border_default,
                "background-color": palette.background_default,
                "shape": DEFAULT_SYMBOL_SHAPE,
                "text-valign": "center",
                "text-halign": "center",
                "width": 20,
                "height": 20,
                "opacity": 0.9,
            },
        },
    ]
    rules += _severity_rules(target_metric, palette)
    rules += _shape_rules()
    rules += [
        {
            "selector": "node.symbol[?isExternal]",
            "style": {
                "shape": EXTERNAL_SHAPE,
                "border-style": "dashed",
                "background-color": palette.background_external,
                "color": palette.text_external,
            },
        },
        {
            "selector": "node.collapsed",
            "style": {
                "label": "data(collapsed.label)",
                "width": "data(collapsed.width)",
                "height": "data(collapsed.height)",
                "z-index": 1000,
            },
        },
        {
            "selector": "node.expanded",
            "style": {
                "label": "data(expanded.label)",
                "width": "data(expanded.width)",
                "height": "data(expanded.height)",
                "z-index": 2000,
            },
        },
        {
            "selector": "node.highlighted",
            "style": {
                "border-width": NODE_BORDER_WIDTH_HIGHLIGHTED,
                "background-color": palette.background_highlighted,
            },
        },
        {
            "selector": "node.selected",
            "style": {
                "background-color": palette.background_selected,
                "color": palette.text_selected,
            },
        },
        {
            "selector": "edge",
            "style": {
                "width": EDGE_WIDTH,
                "line-color": palette.edge_default,
                "target-arrow-color": palette.edge_default,
                "target-arrow-shape": "triangle",
                "curve-style": "bezier",
            },
        },
        {
            "selector": "edge.dependency",
            "style": {
                "width": EDGE_WIDTH_HIGHLIGHTED,
                "line-color": palette.edge_dependency,
                "target-arrow-color": palette.edge_dependency,
            },
        },
        {
            "selector": "edge.dependent",
            "style": {
                "width": EDGE_WIDTH_HIGHLIGHTED,
                "line-color": palette.edge_dependent,
                "target-arrow-color": palette.edge_dependent,
            },
        },
        {"selector": ".background", "style": {"opacity": 0.1}},
        {"selector": ".hidden", "style": {"opacity": 0}},
    ]
    return rules
