"""
Symbol Command - Bounded traversal around one symbol.
"""

import logging
from typing import Optional

import click

from ...core.exceptions import DepvizError, ManifestNotFoundError
from ...graph.symbol import build_symbol_elements
from ..renderers import JsonRenderer
from ..utils import echo_error, get_config, load_manifests, print_elements_summary

logger = logging.getLogger(__name__)


@click.command()
@click.argument("dependency_manifest", type=click.Path(dir_okay=False))
@click.argument("audit_manifest", type=click.Path(dir_okay=False))
@click.argument("file_id")
@click.argument("symbol_id")
@click.option("--dependency-depth", type=click.IntRange(min=0), default=None,
              help="Hops along dependencies (default from config)")
@click.option("--dependent-depth", type=click.IntRange(min=0), default=None,
              help="Hops along dependents (default from config)")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def symbol(
    ctx: click.Context,
    dependency_manifest: str,
    audit_manifest: str,
    file_id: str,
    symbol_id: str,
    dependency_depth: Optional[int],
    dependent_depth: Optional[int],
    as_json: bool,
) -> None:
    """
    Build the symbol graph around SYMBOL_ID in FILE_ID.
    """
    config = get_config(ctx)
    if dependency_depth is None:
        dependency_depth = config.dependency_depth
    if dependent_depth is None:
        dependent_depth = config.dependent_depth

    renderer = JsonRenderer("symbol")
    try:
        manifests = load_manifests(dependency_manifest, audit_manifest)
        file_manifest = manifests.dependency_manifest.get(file_id)
        if file_manifest is None:
            raise ManifestNotFoundError(file_id)
        if symbol_id not in file_manifest.symbols:
            raise ManifestNotFoundError(file_id, symbol_id)

        elements = build_symbol_elements(
            file_id,
            symbol_id,
            dependency_depth,
            dependent_depth,
            manifests.dependency_manifest,
            manifests.audit_manifest,
            config.label,
        )
    except DepvizError as e:
        if as_json:
            renderer.render_error(e)
        else:
            echo_error(str(e))
        ctx.exit(1)
        return

    if as_json:
        renderer.render_success(elements.to_dict())
    else:
        print_elements_summary(
            elements,
            f"Symbol graph: {file_id}:{symbol_id} "
            f"(dependencies {dependency_depth}, dependents {dependent_depth})",
        )
