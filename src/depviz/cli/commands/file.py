"""
File Command - Symbols of one file and their direct neighbours.
"""

import logging

import click

from ...core.exceptions import DepvizError, ManifestNotFoundError
from ...core.loader import ManifestPair
from ...graph.elements import Elements
from ...graph.file import build_file_elements
from ..renderers import JsonRenderer
from ..utils import echo_error, get_config, load_manifests, print_elements_summary

logger = logging.getLogger(__name__)


def _build(manifests: ManifestPair, file_id: str, ctx: click.Context) -> Elements:
    if file_id not in manifests.dependency_manifest:
        raise ManifestNotFoundError(file_id)
    return build_file_elements(
        file_id,
        manifests.dependency_manifest,
        manifests.audit_manifest,
        get_config(ctx).label,
    )


@click.command("file")
@click.argument("dependency_manifest", type=click.Path(dir_okay=False))
@click.argument("audit_manifest", type=click.Path(dir_okay=False))
@click.argument("file_id")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def file_view(
    ctx: click.Context,
    dependency_manifest: str,
    audit_manifest: str,
    file_id: str,
    as_json: bool,
) -> None:
    """
    Build the file graph of FILE_ID (one hop in each direction).
    """
    renderer = JsonRenderer("file")
    try:
        manifests = load_manifests(dependency_manifest, audit_manifest)
        elements = _build(manifests, file_id, ctx)
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
        print_elements_summary(elements, f"File graph: {file_id}")
