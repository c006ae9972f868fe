"""Unit tests for CLI utilities."""

import logging

import click
import pytest
from rich.logging import RichHandler

from depviz.cli.utils import (
    configure_logging,
    echo_error,
    echo_success,
    get_config,
    load_manifests,
    load_manifests_or_exit,
    print_elements_summary,
)
from depviz.config import DepvizConfig
from depviz.core.exceptions import ManifestLoadError
from depviz.graph.elements import Elements


class TestLoadManifests:
    def test_loads_both(self, manifest_files):
        manifests = load_manifests(*manifest_files)

        assert sorted(manifests.dependency_manifest) == ["src/app.ts", "src/models/user.ts"]
        assert manifests.audit_manifest["src/app.ts"].alerts["linesCount"].severity == 3

    def test_audit_is_optional(self, manifest_files):
        assert load_manifests(manifest_files[0]).audit_manifest == {}

    def test_invalid_json(self, tmp_path):
        bad = tmp_path / "bad.json"
        bad.write_text("{not json")

        with pytest.raises(ManifestLoadError, match="invalid JSON"):
            load_manifests(str(bad))

    def test_or_exit(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc:
            load_manifests_or_exit(str(tmp_path / "missing.json"))

        assert exc.value.code == 1
        assert "Failed to load manifest" in capsys.readouterr().err


class TestEcho:
    def test_success_goes_to_stdout(self, capsys):
        echo_success("done")
        assert "done" in capsys.readouterr().out

    def test_error_goes_to_stderr(self, capsys):
        echo_error("broken")
        captured = capsys.readouterr()
        assert "broken" in captured.err
        assert captured.out == ""


class TestConfigureLogging:
    def test_levels(self):
        configure_logging(verbose=True)
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert any(isinstance(h, RichHandler) for h in root.handlers)

        configure_logging(verbose=False)
        assert logging.getLogger().level == logging.WARNING


class TestSummary:
    def test_empty_elements_warns(self, capsys):
        print_elements_summary(Elements.empty(), "Nothing")
        assert "No elements to display" in capsys.readouterr().out


class TestGetConfig:
    def test_uses_group_config(self):
        config = DepvizConfig.default().with_overrides(theme="dark")
        ctx = click.Context(click.Command("x"), obj={"config": config})

        assert get_config(ctx) is config

    def test_falls_back_to_working_directory(self, tmp_path):
        (tmp_path / "depviz.toml").write_text('theme = "dark"\n')
        ctx = click.Context(click.Command("x"))

        assert get_config(ctx).theme == "dark"
