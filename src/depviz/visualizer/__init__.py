"""
Interactive view layer: state machine, indexed view graph and the adapter
that drives a rendering sink.
"""

from .adapter import GraphView, RenderSink, ViewAdapter
from .graph import ViewGraph
from .state import (
    DrillInto,
    ElementClass,
    LayoutRequest,
    OpenContextMenu,
    Position,
    ViewKind,
    VisibilityFilter,
    VisualizationState,
)

__all__ = [
    "DrillInto",
    "ElementClass",
    "GraphView",
    "LayoutRequest",
    "OpenContextMenu",
    "Position",
    "RenderSink",
    "ViewAdapter",
    "ViewGraph",
    "ViewKind",
    "VisibilityFilter",
    "VisualizationState",
]
