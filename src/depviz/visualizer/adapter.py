"""
Rendering adapter.

Connects the pure graph builders to a rendering sink. The adapter owns the
sink handle and one VisualizationState; sink events go into the state
machine and the resulting classes, styles and layout requests go back out to
the sink. User code observes the view through three callbacks.
"""

import logging
from dataclasses import dataclass, replace
from typing import Any, Callable, Collection, Dict, FrozenSet, List, Optional, Protocol

from ..config import DepvizConfig
from ..core.loader import ManifestPair
from ..core.types import Metric
from ..graph.elements import Elements
from ..graph.file import build_file_elements
from ..graph.project import build_project_elements
from ..graph.symbol import build_symbol_elements
from .state import Position, ViewKind, VisibilityFilter, VisualizationState

logger = logging.getLogger(__name__)

SelectCallback = Callable[[Optional[str]], None]
DrillIntoCallback = Callable[[str, Optional[str]], None]
ContextMenuCallback = Callable[[str, Optional[str], Position], None]


class RenderSink(Protocol):
    """What the adapter needs from a renderer."""

    def mount(self, elements: Elements) -> None:
        """Replace every rendered element with `elements`."""
        ...

    def apply_classes(self, classes: Dict[str, FrozenSet[str]]) -> None:
        ...

    def apply_style(self, stylesheet: List[Dict[str, Any]]) -> None:
        ...

    def run_layout(self, element_ids: Optional[Collection[str]] = None) -> None:
        """Lay out the given elements, or the whole graph when None."""
        ...


@dataclass(frozen=True)
class GraphView:
    """Which graph is displayed and around what."""
    kind: ViewKind
    file_id: Optional[str] = None
    symbol_id: Optional[str] = None
    dependency_depth: Optional[int] = None
    dependent_depth: Optional[int] = None

    @classmethod
    def project(cls) -> "GraphView":
        return cls(kind=ViewKind.PROJECT)

    @classmethod
    def file(cls, file_id: str) -> "GraphView":
        return cls(kind=ViewKind.FILE, file_id=file_id)

    @classmethod
    def symbol(
        cls,
        file_id: str,
        symbol_id: str,
        dependency_depth: Optional[int] = None,
        dependent_depth: Optional[int] = None,
    ) -> "GraphView":
        return cls(
            kind=ViewKind.SYMBOL,
            file_id=file_id,
            symbol_id=symbol_id,
            dependency_depth=dependency_depth,
            dependent_depth=dependent_depth,
        )

    def build(self, manifests: ManifestPair, config: DepvizConfig) -> Elements:
        """Run the builder for this view. Unset depths come from the config."""
        if self.kind is ViewKind.PROJECT:
            return build_project_elements(
                manifests.dependency_manifest, manifests.audit_manifest, config.label
            )

        if self.file_id is None:
            raise ValueError(f"{self.kind} view requires a file id")

        if self.kind is ViewKind.FILE:
            return build_file_elements(
                self.file_id, manifests.dependency_manifest, manifests.audit_manifest, config.label
            )

        if self.symbol_id is None:
            raise ValueError("symbol view requires a symbol id")

        return build_symbol_elements(
            self.file_id,
            self.symbol_id,
            self.dependency_depth if self.dependency_depth is not None else config.dependency_depth,
            self.dependent_depth if self.dependent_depth is not None else config.dependent_depth,
            manifests.dependency_manifest,
            manifests.audit_manifest,
            config.label,
        )


class ViewAdapter:
    """
    Owns a render sink and the state machine of the view shown in it.

    Callbacks:
        on_select: called with the selected node id, or None when the
            selection was cleared.
        on_drill_into: called with the file id and optional symbol id of a
            double-tapped, non-external node.
        on_context_menu: called with the identity and pointer position of a
            right-clicked, non-external node.
    """

    def __init__(
        self,
        sink: RenderSink,
        manifests: ManifestPair,
        view: GraphView,
        config: Optional[DepvizConfig] = None,
        on_select: Optional[SelectCallback] = None,
        on_drill_into: Optional[DrillIntoCallback] = None,
        on_context_menu: Optional[ContextMenuCallback] = None,
    ):
        self.sink = sink
        self.manifests = manifests
        self.view = view
        self.config = config or DepvizConfig.default()
        self.on_select = on_select
        self.on_drill_into = on_drill_into
        self.on_context_menu = on_context_menu

        self.state = self._new_state(
            view.build(manifests, self.config),
            theme=self.config.theme,
            target_metric=self.config.target_metric,
            visibility_filter=None,
        )
        self._render()

    def _new_state(
        self,
        elements: Elements,
        theme: str,
        target_metric: Optional[Metric],
        visibility_filter: Optional[VisibilityFilter],
    ) -> VisualizationState:
        return VisualizationState(
            elements,
            self.view.kind,
            focal_file_id=self.view.file_id,
            focal_symbol_id=self.view.symbol_id,
            theme=theme,
            target_metric=target_metric,
            visibility_filter=visibility_filter,
        )

    def _render(self) -> None:
        self.sink.mount(self.state.elements)
        self.sink.apply_style(self.state.stylesheet())
        self.sink.apply_classes(self.state.classes)
        self.sink.run_layout(None)

    @property
    def elements(self) -> Elements:
        return self.state.elements

    # -------------------------------------------------------------------------
    # Sink events
    # -------------------------------------------------------------------------

    def on_tap(self, node_id: str) -> None:
        if not self.state.is_selectable(node_id):
            return

        request = self.state.tap(node_id)
        self.sink.apply_classes(self.state.classes)
        if request is not None:
            self.sink.run_layout(request.element_ids)
        if self.on_select:
            self.on_select(self.state.selected_node_id)

    def on_double_tap(self, node_id: str) -> None:
        signal = self.state.double_tap(node_id)
        if signal is not None and self.on_drill_into:
            self.on_drill_into(signal.file_id, signal.symbol_id)

    def on_right_click(self, node_id: str, position: Position) -> None:
        signal = self.state.right_click(node_id, Position(*position))
        if signal is not None and self.on_context_menu:
            self.on_context_menu(signal.file_id, signal.symbol_id, signal.position)

    # -------------------------------------------------------------------------
    # User actions
    # -------------------------------------------------------------------------

    def set_target_metric(self, metric: Optional[Metric]) -> None:
        self.sink.apply_style(self.state.set_target_metric(metric))

    def set_theme(self, theme: str) -> None:
        self.sink.apply_style(self.state.set_theme(theme))

    def set_visibility_filter(self, visibility_filter: VisibilityFilter) -> None:
        self.state.set_visibility_filter(visibility_filter)
        self.sink.apply_classes(self.state.classes)

    def highlight(self, file_id: str, symbol_id: Optional[str] = None) -> None:
        if self.state.highlight(file_id, symbol_id):
            self.sink.apply_classes(self.state.classes)

    def unhighlight(self) -> None:
        self.state.unhighlight()
        self.sink.apply_classes(self.state.classes)

    def rebuild(
        self,
        view: Optional[GraphView] = None,
        manifests: Optional[ManifestPair] = None,
        dependency_depth: Optional[int] = None,
        dependent_depth: Optional[int] = None,
    ) -> None:
        """
        Replace the displayed graph.

        The new elements are built before anything is swapped, so a failing
        build leaves the current view untouched. Theme, target metric and
        visibility filter carry over; selection and highlight do not.
        """
        view = view or self.view
        if dependency_depth is not None:
            view = replace(view, dependency_depth=dependency_depth)
        if dependent_depth is not None:
            view = replace(view, dependent_depth=dependent_depth)
        manifests = manifests or self.manifests

        elements = view.build(manifests, self.config)
        previous = self.state

        self.view = view
        self.manifests = manifests
        self.state = self._new_state(
            elements,
            theme=previous.theme,
            target_metric=previous.target_metric,
            visibility_filter=previous.visibility_filter,
        )
        logger.debug(
            f"Rebuilt {view.kind} view: {len(elements.nodes)} nodes, {len(elements.edges)} edges"
        )
        self._render()
