"""
Unit tests for the rendering adapter.
"""

from unittest.mock import MagicMock

import pytest

from depviz.config import DepvizConfig
from depviz.core.loader import ManifestPair
from depviz.core.types import Metric, SymbolType
from depviz.visualizer.adapter import GraphView, ViewAdapter
from depviz.visualizer.state import Position, ViewKind, VisibilityFilter

from ..helpers import dep, file, manifest, sym, used_by


@pytest.fixture
def manifests():
    return ManifestPair(
        dependency_manifest=manifest(
            file("a.ts", symbols=[sym("f", dependencies=[dep("b.ts", "g")])], dependencies=[dep("b.ts")]),
            file("b.ts", symbols=[
                sym("g", SymbolType.CLASS, dependencies=[dep("c.ts", "k")], dependents=[used_by("a.ts", "f")]),
            ], dependencies=[dep("c.ts")]),
            file("c.ts", symbols=[sym("k", dependents=[used_by("b.ts", "g")])]),
        ),
        audit_manifest={},
    )


@pytest.fixture
def sink():
    return MagicMock()


class TestGraphView:
    def test_depths_default_from_config(self, manifests):
        config = DepvizConfig.default().with_overrides(dependency_depth=1, dependent_depth=0)
        elements = GraphView.symbol("a.ts", "f").build(manifests, config)

        assert sorted(elements.node_ids()) == ["a.ts:f", "b.ts:g"]

    def test_explicit_depth_wins(self, manifests):
        config = DepvizConfig.default().with_overrides(dependency_depth=0)
        elements = GraphView.symbol("a.ts", "f", dependency_depth=2).build(manifests, config)

        assert sorted(elements.node_ids()) == ["a.ts:f", "b.ts:g", "c.ts:k"]

    def test_file_view_needs_file_id(self, manifests):
        with pytest.raises(ValueError):
            GraphView(kind=ViewKind.FILE).build(manifests, DepvizConfig.default())


class TestViewAdapter:
    def test_initial_render(self, sink, manifests):
        adapter = ViewAdapter(sink, manifests, GraphView.project())

        sink.mount.assert_called_once_with(adapter.elements)
        sink.apply_style.assert_called_once()
        sink.apply_classes.assert_called_once_with(adapter.state.classes)
        sink.run_layout.assert_called_once_with(None)

    def test_tap_reports_selection(self, sink, manifests):
        on_select = MagicMock()
        adapter = ViewAdapter(sink, manifests, GraphView.project(), on_select=on_select)
        sink.reset_mock()

        adapter.on_tap("b.ts")
        adapter.on_tap("b.ts")

        assert on_select.call_args_list[0].args == ("b.ts",)
        assert on_select.call_args_list[1].args == (None,)
        layout_ids = sink.run_layout.call_args_list[0].args[0]
        assert layout_ids == {"a.ts", "b.ts", "c.ts", "a.ts->b.ts", "b.ts->c.ts"}
        assert sink.run_layout.call_count == 1

    def test_tap_on_foreign_node_is_silent(self, sink, manifests):
        on_select = MagicMock()
        adapter = ViewAdapter(sink, manifests, GraphView.file("a.ts"), on_select=on_select)
        sink.reset_mock()

        adapter.on_tap("b.ts:g")

        on_select.assert_not_called()
        sink.apply_classes.assert_not_called()

    def test_drill_into_and_context_menu(self, sink, manifests):
        on_drill_into = MagicMock()
        on_context_menu = MagicMock()
        adapter = ViewAdapter(
            sink, manifests, GraphView.file("a.ts"),
            on_drill_into=on_drill_into, on_context_menu=on_context_menu,
        )

        adapter.on_double_tap("b.ts:g")
        adapter.on_right_click("a.ts:f", (3, 4))

        on_drill_into.assert_called_once_with("b.ts", "g")
        on_context_menu.assert_called_once_with("a.ts", "f", Position(3, 4))

    def test_restyle_and_filter(self, sink, manifests):
        adapter = ViewAdapter(sink, manifests, GraphView.file("a.ts"))
        sink.reset_mock()

        adapter.set_target_metric(Metric.LINES_COUNT)
        adapter.set_theme("dark")
        adapter.set_visibility_filter(VisibilityFilter().with_type(SymbolType.CLASS, False))

        assert sink.apply_style.call_count == 2
        sink.mount.assert_not_called()
        assert "hidden" in sink.apply_classes.call_args.args[0]["b.ts:g"]

    def test_highlight_unknown_node_does_not_render(self, sink, manifests):
        adapter = ViewAdapter(sink, manifests, GraphView.project())
        sink.reset_mock()

        adapter.highlight("zzz.ts")
        sink.apply_classes.assert_not_called()

        adapter.highlight("a.ts")
        assert "highlighted" in sink.apply_classes.call_args.args[0]["a.ts"]

    def test_rebuild_keeps_presentation(self, sink, manifests):
        adapter = ViewAdapter(sink, manifests, GraphView.symbol("a.ts", "f", 1, 0))
        adapter.set_theme("dark")
        adapter.set_target_metric(Metric.CYCLOMATIC_COMPLEXITY)
        visibility = VisibilityFilter(show_external=False)
        adapter.set_visibility_filter(visibility)
        adapter.on_tap("a.ts:f")

        adapter.rebuild(dependency_depth=2)

        assert sorted(adapter.elements.node_ids()) == ["a.ts:f", "b.ts:g", "c.ts:k"]
        assert adapter.state.theme == "dark"
        assert adapter.state.target_metric is Metric.CYCLOMATIC_COMPLEXITY
        assert adapter.state.visibility_filter == visibility
        assert adapter.state.selected_node_id is None
        sink.mount.assert_called_with(adapter.elements)

    def test_failed_rebuild_keeps_current_view(self, sink, manifests):
        adapter = ViewAdapter(sink, manifests, GraphView.project())
        before = adapter.state

        with pytest.raises(ValueError):
            adapter.rebuild(GraphView(kind=ViewKind.SYMBOL, file_id="a.ts"))

        assert adapter.state is before
        assert adapter.view == GraphView.project()
