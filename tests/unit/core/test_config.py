"""Unit tests for configuration loading."""

import pytest

from depviz.config import (
    DEFAULT_DEPENDENCY_DEPTH,
    DEFAULT_DEPENDENT_DEPTH,
    DepvizConfig,
    LabelOptions,
    load_config,
    parse_config,
)
from depviz.core.exceptions import ConfigError
from depviz.core.types import Metric


class TestParseConfig:
    def test_empty_table_gives_defaults(self):
        assert parse_config({}) == DepvizConfig.default()

    def test_overrides(self):
        config = parse_config({
            "dependency_depth": 5,
            "dependent_depth": 0,
            "theme": "dark",
            "target_metric": "cyclomaticComplexity",
            "label": {"font_size": 12, "file_name_max_length": 10},
        })

        assert config.dependency_depth == 5
        assert config.dependent_depth == 0
        assert config.theme == "dark"
        assert config.target_metric is Metric.CYCLOMATIC_COMPLEXITY
        assert config.label.font_size == 12
        assert config.label.file_name_max_length == 10
        assert config.label.min_width == LabelOptions.default().min_width

    @pytest.mark.parametrize("data", [
        {"dependency_depth": -1},
        {"dependent_depth": "two"},
        {"theme": "sepia"},
        {"target_metric": "bogus"},
        {"label": {"padding": -3}},
        {"label": "big"},
    ])
    def test_invalid_values_raise(self, data):
        with pytest.raises(ConfigError):
            parse_config(data)


class TestLoadConfig:
    def test_defaults_without_files(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        config = load_config()

        assert config.dependency_depth == DEFAULT_DEPENDENCY_DEPTH
        assert config.dependent_depth == DEFAULT_DEPENDENT_DEPTH

    def test_reads_depviz_toml(self, tmp_path, monkeypatch):
        (tmp_path / "depviz.toml").write_text("dependency_depth = 1\ntheme = \"dark\"\n")
        monkeypatch.chdir(tmp_path)

        config = load_config()

        assert config.dependency_depth == 1
        assert config.theme == "dark"

    def test_reads_pyproject_tool_table(self, tmp_path, monkeypatch):
        (tmp_path / "pyproject.toml").write_text("[tool.depviz]\ndependent_depth = 4\n")
        monkeypatch.chdir(tmp_path)

        assert load_config().dependent_depth == 4

    def test_explicit_missing_path_raises(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "nope.toml")

    def test_invalid_toml_raises(self, tmp_path):
        path = tmp_path / "depviz.toml"
        path.write_text("dependency_depth = = 3")

        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_config(path)
