"""
Unit tests for severity resolution and label formatting.
"""

import pytest

from depviz.config import LabelOptions
from depviz.core.types import Metric
from depviz.graph.labels import (
    collapsed_file_label,
    collapsed_symbol_label,
    dimensions_of,
    expanded_file_label,
    expanded_symbol_label,
    label_box,
)
from depviz.graph.severity import resolve_severity

from ..helpers import alert, file_audit, symbol_audit


class TestResolveSeverity:
    def test_missing_audit_gives_all_zero(self):
        severity = resolve_severity(None)

        assert set(severity) == set(Metric)
        assert all(level == 0 for level in severity.values())

    def test_alert_sets_its_metric(self):
        audit = file_audit("a.ts", alert("linesCount", 4), alert("cyclomaticComplexity", 2))
        severity = resolve_severity(audit)

        assert severity[Metric.LINES_COUNT] == 4
        assert severity[Metric.CYCLOMATIC_COMPLEXITY] == 2
        assert severity[Metric.DEPENDENCY_COUNT] == 0

    def test_unknown_metric_is_ignored(self):
        severity = resolve_severity(symbol_audit("f", alert("halsteadVolume", 5)))

        assert len(severity) == 7
        assert max(severity.values()) == 0


class TestDimensions:
    @pytest.mark.parametrize("label", ["", "x", "a\nb", "\n\n"])
    def test_never_below_minimums(self, label):
        options = LabelOptions.default()
        width, height = dimensions_of(label, options)

        assert width >= options.min_width
        assert height >= options.min_height

    def test_width_follows_longest_line(self):
        options = LabelOptions.default()
        width, height = dimensions_of("short\n" + "x" * 40, options)

        assert width == 40 * options.font_size + 2 * options.padding
        assert height == max(2 * options.font_size * options.line_height + 2 * options.padding, options.min_height)

    def test_label_box_carries_label(self):
        box = label_box("abc")
        assert box.label == "abc"
        assert (box.width, box.height) == dimensions_of("abc")


class TestFileLabels:
    def test_short_name_is_kept(self):
        assert collapsed_file_label("src/a.ts", None) == "src/a.ts"

    def test_long_name_keeps_tail(self):
        name = "src/components/visualizer/GraphCanvas.tsx"
        label = collapsed_file_label(name, None)

        assert label == "..." + name[-25:]

    def test_alert_counter(self):
        audit = file_audit("a.ts", alert("linesCount", 2), alert("characterCount", 1))
        assert collapsed_file_label("a.ts", audit) == "a.ts\n⚠️(2)"

    def test_expanded_without_alerts(self):
        assert expanded_file_label("a.ts", None) == "a.ts\n🎉 No issues found"

    def test_expanded_lists_alerts(self):
        audit = file_audit("a.ts", alert("linesCount", 2, short="Too many lines"))
        assert expanded_file_label("a.ts", audit) == "a.ts\n⚠️ Too many lines"


class TestSymbolLabels:
    def test_collapsed(self):
        assert collapsed_symbol_label("f", "function") == "f (function)"

    def test_expanded_without_audit_omits_alert_section(self):
        label = expanded_symbol_label("g", "unknown", "lib", None)
        assert label == "g (unknown)\nSource: lib"

    def test_expanded_with_clean_audit(self):
        label = expanded_symbol_label("f", "function", "a.ts", symbol_audit("f"))
        assert label.endswith("🎉 No issues")

    def test_expanded_with_alerts(self):
        audit = symbol_audit("f", alert("cyclomaticComplexity", 5, short="Too complex"))
        label = expanded_symbol_label("f", "function", "a.ts", audit)

        assert label.splitlines() == ["f (function)", "Source: a.ts", "⚠️ Too complex"]
