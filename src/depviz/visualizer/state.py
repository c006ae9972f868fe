"""
Visualization State Machine.

Holds the interactive state of one open view (theme, target metric,
selection, visibility filter, highlight) and derives the class set of every
rendered element from it. Transitions never touch topology: the elements a
state is created with stay the same until the adapter rebuilds.

Element classes:
- kind: `file` on project nodes, `symbol` on file and symbol view nodes
- selection: collapsed, expanded, selected, background, dependency, dependent
- presentation masks: hidden, highlighted
"""

import logging
from dataclasses import dataclass, field, replace
from enum import StrEnum
from typing import Dict, FrozenSet, Iterable, List, NamedTuple, Optional, Set

from ..config import DEFAULT_THEME, THEMES
from ..core.types import Metric, SymbolType, compute_node_id
from ..graph.elements import Elements, NodeData
from ..graph.styles import StyleRule, build_stylesheet
from .graph import ViewGraph

logger = logging.getLogger(__name__)


class ViewKind(StrEnum):
    PROJECT = "project"
    FILE = "file"
    SYMBOL = "symbol"


class ElementClass(StrEnum):
    FILE = "file"
    SYMBOL = "symbol"
    COLLAPSED = "collapsed"
    EXPANDED = "expanded"
    SELECTED = "selected"
    BACKGROUND = "background"
    DEPENDENCY = "dependency"
    DEPENDENT = "dependent"
    HIDDEN = "hidden"
    HIGHLIGHTED = "highlighted"


SELECTION_CLASSES = frozenset({
    ElementClass.COLLAPSED,
    ElementClass.EXPANDED,
    ElementClass.SELECTED,
    ElementClass.BACKGROUND,
    ElementClass.DEPENDENCY,
    ElementClass.DEPENDENT,
})


class Position(NamedTuple):
    """Render-space pointer position."""
    x: float
    y: float


@dataclass(frozen=True)
class LayoutRequest:
    """Re-layout only these elements; everything else keeps its position."""
    element_ids: FrozenSet[str]


@dataclass(frozen=True)
class DrillInto:
    file_id: str
    symbol_id: Optional[str] = None


@dataclass(frozen=True)
class OpenContextMenu:
    file_id: str
    symbol_id: Optional[str]
    position: Position


@dataclass(frozen=True)
class VisibilityFilter:
    """
    Which symbol nodes are shown.

    External nodes and each symbol type can be toggled independently. Nodes
    of the `unknown` type are only affected by the external toggle.
    """
    show_external: bool = True
    hidden_symbol_types: FrozenSet[SymbolType] = field(default_factory=frozenset)

    @classmethod
    def show_all(cls) -> "VisibilityFilter":
        return cls()

    def shows_type(self, symbol_type: SymbolType) -> bool:
        return symbol_type not in self.hidden_symbol_types

    def with_type(self, symbol_type: SymbolType, shown: bool) -> "VisibilityFilter":
        if shown:
            hidden = self.hidden_symbol_types - {symbol_type}
        else:
            hidden = self.hidden_symbol_types | {symbol_type}
        return replace(self, hidden_symbol_types=frozenset(hidden))

    def with_external(self, shown: bool) -> "VisibilityFilter":
        return replace(self, show_external=shown)

    def rejects(self, node: NodeData) -> bool:
        """True when the predicate fails for the node."""
        if node.is_external and not self.show_external:
            return True
        return node.is_symbol and node.symbol_type in self.hidden_symbol_types


class VisualizationState:
    """
    Interactive state of one view instance.

    Args:
        elements: The current build; kept until the adapter rebuilds.
        view: Which kind of view is displayed.
        focal_file_id: Focal file of a file or symbol view.
        focal_symbol_id: Root symbol of a symbol view.
    """

    def __init__(
        self,
        elements: Elements,
        view: ViewKind,
        focal_file_id: Optional[str] = None,
        focal_symbol_id: Optional[str] = None,
        theme: str = DEFAULT_THEME,
        target_metric: Optional[Metric] = None,
        visibility_filter: Optional[VisibilityFilter] = None,
    ):
        self.elements = elements
        self.view = ViewKind(view)
        self.focal_file_id = focal_file_id
        self.focal_symbol_id = focal_symbol_id
        self.graph = ViewGraph.from_elements(elements)

        self.target_metric = target_metric
        self.theme = DEFAULT_THEME
        self.set_theme(theme)
        self.selected_node_id: Optional[str] = None
        self.highlighted_node_id: Optional[str] = None
        self.visibility_filter = visibility_filter or VisibilityFilter.show_all()
        self.hidden_ids: FrozenSet[str] = frozenset()

        self._classes: Dict[str, Set[str]] = {
            element.id: set() for element in elements.iter_elements()
        }
        kind = ElementClass.FILE if self.view is ViewKind.PROJECT else ElementClass.SYMBOL
        for node in elements.nodes:
            self._classes[node.id].add(kind)

        self._apply_default_selection()
        self._apply_visibility()

    # -------------------------------------------------------------------------
    # Derived views of the state
    # -------------------------------------------------------------------------

    @property
    def classes(self) -> Dict[str, FrozenSet[str]]:
        """Current classes of every element, keyed by element id."""
        return {element_id: frozenset(names) for element_id, names in self._classes.items()}

    def classes_of(self, element_id: str) -> FrozenSet[str]:
        return frozenset(self._classes.get(element_id, ()))

    @property
    def focal_node_ids(self) -> FrozenSet[str]:
        """Nodes that are never hidden and the only selectable ones in a file view."""
        if self.view is ViewKind.FILE:
            return frozenset(
                node.id for node in self.elements.nodes if node.file_name == self.focal_file_id
            )
        if self.view is ViewKind.SYMBOL and self.focal_file_id and self.focal_symbol_id:
            root_id = compute_node_id(self.focal_file_id, self.focal_symbol_id)
            if self.graph.has_node(root_id):
                return frozenset({root_id})
        return frozenset()

    def is_selectable(self, node_id: str) -> bool:
        if self.graph.get_node(node_id) is None:
            return False
        if self.view is ViewKind.FILE:
            return node_id in self.focal_node_ids
        return True

    def stylesheet(self) -> List[StyleRule]:
        return build_stylesheet(self.target_metric, self.theme)

    # -------------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------------

    def tap(self, node_id: str) -> Optional[LayoutRequest]:
        """
        Select a node, or clear the selection when it is already selected.

        Returns a layout request scoped to the node's closed neighbourhood
        when a node becomes selected; None otherwise.
        """
        if not self.is_selectable(node_id):
            logger.debug(f"Ignoring tap on {node_id}")
            return None

        self._clear(SELECTION_CLASSES)

        if node_id == self.selected_node_id:
            self.selected_node_id = None
            self._apply_default_selection()
            return None

        self.selected_node_id = node_id
        neighbourhood = self.graph.closed_neighborhood(node_id)
        dependency_edges = self.graph.in_edge_ids(node_id)
        dependent_edges = self.graph.out_edge_ids(node_id)
        focused = neighbourhood | set(dependency_edges) | set(dependent_edges)

        for element_id, names in self._classes.items():
            if element_id not in focused:
                names.add(ElementClass.BACKGROUND)
        for neighbour_id in neighbourhood - {node_id}:
            self._add(neighbour_id, ElementClass.COLLAPSED)
        self._add(node_id, ElementClass.EXPANDED)
        self._add(node_id, ElementClass.SELECTED)
        for edge_id in dependency_edges:
            self._add(edge_id, ElementClass.DEPENDENCY)
        for edge_id in dependent_edges:
            self._add(edge_id, ElementClass.DEPENDENT)

        return LayoutRequest(frozenset(element_id for element_id in focused if element_id in self._classes))

    def double_tap(self, node_id: str) -> Optional[DrillInto]:
        node = self.graph.get_node(node_id)
        if node is None or node.is_external:
            return None
        return DrillInto(file_id=node.file_name, symbol_id=node.symbol_name)

    def right_click(self, node_id: str, position: Position) -> Optional[OpenContextMenu]:
        node = self.graph.get_node(node_id)
        if node is None or node.is_external:
            return None
        return OpenContextMenu(file_id=node.file_name, symbol_id=node.symbol_name, position=position)

    def set_target_metric(self, metric: Optional[Metric]) -> List[StyleRule]:
        """Change the metric driving border colours; returns the new stylesheet."""
        self.target_metric = Metric(metric) if metric is not None else None
        return self.stylesheet()

    def set_theme(self, theme: str) -> List[StyleRule]:
        if theme not in THEMES:
            raise ValueError(f"Unknown theme: {theme!r}")
        self.theme = theme
        return self.stylesheet()

    def set_visibility_filter(self, visibility_filter: VisibilityFilter) -> FrozenSet[str]:
        """Replace the filter; returns the ids of every hidden element."""
        self.visibility_filter = visibility_filter
        self._apply_visibility()
        return self.hidden_ids

    def highlight(self, file_id: str, symbol_id: Optional[str] = None) -> bool:
        """
        Highlight the node of a file or symbol.

        Returns False, leaving any current highlight in place, when the
        node is not part of this view.
        """
        node_id = compute_node_id(file_id, symbol_id)
        if not self.graph.has_node(node_id):
            return False
        self._clear({ElementClass.HIGHLIGHTED})
        self._add(node_id, ElementClass.HIGHLIGHTED)
        self.highlighted_node_id = node_id
        return True

    def unhighlight(self) -> None:
        self._clear({ElementClass.HIGHLIGHTED})
        self.highlighted_node_id = None

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _add(self, element_id: str, name: ElementClass) -> None:
        if element_id in self._classes:
            self._classes[element_id].add(name)

    def _clear(self, names: Iterable[ElementClass]) -> None:
        names = set(names)
        for element_classes in self._classes.values():
            element_classes -= names

    def _apply_default_selection(self) -> None:
        if self.view is ViewKind.PROJECT:
            for node in self.elements.nodes:
                self._add(node.id, ElementClass.COLLAPSED)
        elif self.view is ViewKind.FILE:
            for node_id in self.focal_node_ids:
                self._add(node_id, ElementClass.COLLAPSED)
        else:
            focal = self.focal_node_ids
            for node in self.elements.nodes:
                self._add(node.id, ElementClass.EXPANDED if node.id in focal else ElementClass.COLLAPSED)

    def _apply_visibility(self) -> None:
        focal = self.focal_node_ids
        hidden_nodes = {
            node.id for node in self.elements.nodes
            if node.id not in focal and self.visibility_filter.rejects(node)
        }
        hidden = hidden_nodes | self.graph.connected_edge_ids(hidden_nodes)

        self._clear({ElementClass.HIDDEN})
        for element_id in hidden:
            self._add(element_id, ElementClass.HIDDEN)
        self.hidden_ids = frozenset(element_id for element_id in hidden if element_id in self._classes)
