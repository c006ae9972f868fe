"""
CLI Utilities - Shared helper functions for command line operations.

This module provides common functionality used across the CLI commands:
formatted printing, logging setup, manifest loading and element summaries.
"""

import logging
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from ..config import DepvizConfig, load_config
from ..core.exceptions import ConfigError, ManifestLoadError
from ..core.loader import ManifestPair, load_audit_manifest, load_dependency_manifest
from ..core.types import AuditManifest
from ..graph.elements import Elements

console = Console()


def echo_success(message: str) -> None:
    """
    Print a success message with a green checkmark.

    Args:
        message (str): The message to display.
    """
    click.echo(click.style(f"✅ {message}", fg="green"))


def echo_error(message: str) -> None:
    """
    Print an error message with a red cross.

    Args:
        message (str): The error message to display.
    """
    click.echo(click.style(f"❌ {message}", fg="red"), err=True)


def echo_warning(message: str) -> None:
    click.echo(click.style(f"⚠️  {message}", fg="yellow"))


def echo_info(message: str) -> None:
    click.echo(click.style(f"   {message}", dim=True))


def configure_logging(verbose: bool = False) -> None:
    """
    Route log records to stderr through rich.

    DEBUG with --verbose, WARNING otherwise.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=verbose, show_path=verbose)],
        force=True,
    )


def load_manifests(dependency_path: str, audit_path: Optional[str] = None) -> ManifestPair:
    """
    Load a dependency manifest and its audit manifest.

    Args:
        dependency_path (str): Path to the dependency manifest JSON file.
        audit_path (str | None): Path to the audit manifest JSON file. When
            omitted, every node renders without alerts.

    Raises:
        ManifestLoadError: If either file cannot be read or validated.
    """
    dependency_manifest = load_dependency_manifest(dependency_path)
    audit_manifest: AuditManifest = load_audit_manifest(audit_path) if audit_path else {}
    return ManifestPair(dependency_manifest, audit_manifest)


def load_manifests_or_exit(dependency_path: str, audit_path: Optional[str] = None) -> ManifestPair:
    """Like load_manifests, but prints the error and exits with status 1."""
    try:
        return load_manifests(dependency_path, audit_path)
    except ManifestLoadError as e:
        echo_error(str(e))
        raise SystemExit(1) from e


def print_elements_summary(elements: Elements, title: str) -> None:
    """Render the nodes of a build as a rich table."""
    if elements.is_empty():
        echo_warning("No elements to display")
        return

    table = Table(title=title)
    table.add_column("Node")
    table.add_column("Kind")
    table.add_column("Worst severity", justify="right")
    table.add_column("Label")

    for node in elements.nodes:
        if node.is_external:
            kind = "external"
        elif node.is_symbol:
            kind = node.symbol_type or ""
        else:
            kind = "file"
        worst = max(node.metrics_severity.values(), default=0)
        table.add_row(node.id, kind, str(worst), node.collapsed.label.replace("\n", " "))

    console.print(table)
    echo_info(f"{len(elements.nodes)} nodes, {len(elements.edges)} edges")


def get_config(ctx: click.Context) -> DepvizConfig:
    """The config loaded by the group, or the one found from the working directory."""
    if ctx.obj and "config" in ctx.obj:
        return ctx.obj["config"]
    try:
        return load_config()
    except ConfigError as e:
        echo_error(str(e))
        raise SystemExit(1) from e
