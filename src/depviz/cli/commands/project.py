"""
Project Command - File-level dependency graph of the whole project.
"""

import logging

import click

from ...core.exceptions import DepvizError
from ...graph.project import build_project_elements
from ..renderers import JsonRenderer
from ..utils import get_config, load_manifests, load_manifests_or_exit, print_elements_summary

logger = logging.getLogger(__name__)


@click.command()
@click.argument("dependency_manifest", type=click.Path(dir_okay=False))
@click.argument("audit_manifest", type=click.Path(dir_okay=False))
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def project(ctx: click.Context, dependency_manifest: str, audit_manifest: str, as_json: bool) -> None:
    """
    Build the project graph: one node per file, one edge per internal dependency.
    """
    config = get_config(ctx)

    if not as_json:
        manifests = load_manifests_or_exit(dependency_manifest, audit_manifest)
        elements = build_project_elements(
            manifests.dependency_manifest, manifests.audit_manifest, config.label
        )
        print_elements_summary(elements, "Project graph")
        return

    renderer = JsonRenderer("project")
    try:
        manifests = load_manifests(dependency_manifest, audit_manifest)
        elements = build_project_elements(
            manifests.dependency_manifest, manifests.audit_manifest, config.label
        )
    except DepvizError as e:
        renderer.render_error(e)
        ctx.exit(1)
        return
    renderer.render_success(elements.to_dict())
