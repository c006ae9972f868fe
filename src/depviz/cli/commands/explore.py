"""
Explore Command - Browse the folder / file / symbol tree.

Without options the whole tree is shown. `--search` does a text search over
file names and symbol ids. The filter options run smart-filter queries and
intersect their results; the tree then lists only the matching symbols.
"""

import logging
from typing import Any, Dict, Optional, Tuple

import click
from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from ...analysis.smart_filter import ComparisonOperator, MatchType, SetOperation, SmartFilter
from ...core.exceptions import DepvizError
from ...core.types import Metric, SymbolType
from ...graph.explorer import ExplorerNode, ExplorerNodeKind, build_explorer_tree, search_explorer_tree
from ..renderers import JsonRenderer
from ..utils import echo_error, echo_warning, load_manifests

logger = logging.getLogger(__name__)

console = Console()

NO_MATCHES_MESSAGE = "No matching files found"

_ICONS = {
    ExplorerNodeKind.FOLDER: "📁",
    ExplorerNodeKind.FILE: "📄",
    ExplorerNodeKind.SYMBOL: "🔹",
}


def _add_children(branch: Tree, node: ExplorerNode) -> None:
    for child in node.children.values():
        _add_children(branch.add(f"{_ICONS[child.kind]} {escape(child.display_name)}"), child)


def render_tree(root: ExplorerNode) -> Tree:
    tree = Tree(f"{_ICONS[root.kind]} [bold]{escape(root.display_name)}[/bold]")
    _add_children(tree, root)
    return tree


def tree_to_dict(node: ExplorerNode) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        "id": node.id,
        "displayName": node.display_name,
        "kind": node.kind.value,
    }
    if node.file_id is not None:
        data["fileId"] = node.file_id
    if node.symbol_id is not None:
        data["symbolId"] = node.symbol_id
    data["children"] = [tree_to_dict(child) for child in node.children.values()]
    return data


def _smart_filter(
    smart_filter: SmartFilter,
    symbol_types: Tuple[str, ...],
    metric: Optional[str],
    op: Optional[str],
    value: Optional[float],
    file_level: bool,
    path: Optional[str],
    match_type: str,
) -> SmartFilter:
    operation = SetOperation.REPLACE

    if symbol_types:
        by_type = SmartFilter(smart_filter.manifest)
        for symbol_type in symbol_types:
            by_type.by_type(SymbolType(symbol_type), SetOperation.UNION)
        smart_filter.apply(by_type.result or frozenset(), operation)
        operation = SetOperation.INTERSECTION

    if metric is not None:
        if op is None or value is None:
            raise click.UsageError("--metric requires --op and --value")
        if file_level:
            smart_filter.by_file_metric(Metric(metric), ComparisonOperator(op), value, operation)
        else:
            smart_filter.by_metric(Metric(metric), ComparisonOperator(op), value, operation)
        operation = SetOperation.INTERSECTION

    if path is not None:
        smart_filter.by_file_pattern(path, MatchType(match_type), operation)

    return smart_filter


@click.command()
@click.argument("dependency_manifest", type=click.Path(dir_okay=False))
@click.option("-s", "--search", default=None, help="Case-insensitive text search")
@click.option("-t", "--type", "symbol_types", multiple=True,
              type=click.Choice([t.value for t in SymbolType]),
              help="Keep symbols of this type (repeatable)")
@click.option("--metric", type=click.Choice([m.value for m in Metric]), default=None,
              help="Metric to compare")
@click.option("--op", type=click.Choice([o.value for o in ComparisonOperator]), default=None,
              help="Comparison operator for --metric")
@click.option("--value", type=float, default=None, help="Threshold for --metric")
@click.option("--file-level", is_flag=True, help="Compare the file metric instead of the symbol metric")
@click.option("--path", default=None, help="File path pattern")
@click.option("--match-type", type=click.Choice([m.value for m in MatchType]),
              default=MatchType.CONTAINS.value, show_default=True, help="How --path matches")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def explore(
    ctx: click.Context,
    dependency_manifest: str,
    search: Optional[str],
    symbol_types: Tuple[str, ...],
    metric: Optional[str],
    op: Optional[str],
    value: Optional[float],
    file_level: bool,
    path: Optional[str],
    match_type: str,
    as_json: bool,
) -> None:
    """
    Show the explorer tree of a dependency manifest.
    """
    filtering = bool(symbol_types) or metric is not None or path is not None
    if search and filtering:
        raise click.UsageError("--search cannot be combined with filter options")

    renderer = JsonRenderer("explore")
    try:
        manifests = load_manifests(dependency_manifest)
    except DepvizError as e:
        if as_json:
            renderer.render_error(e)
        else:
            echo_error(str(e))
        ctx.exit(1)
        return
    manifest = manifests.dependency_manifest

    if search:
        root = search_explorer_tree(manifest, search)
    elif filtering:
        smart_filter = _smart_filter(
            SmartFilter(manifest), symbol_types, metric, op, value, file_level, path, match_type
        )
        root = build_explorer_tree(manifest, smart_filter.result)
    else:
        root = build_explorer_tree(manifest)

    if as_json:
        renderer.render_success(tree_to_dict(root) if root is not None else None)
        return

    if root is None:
        echo_warning(NO_MATCHES_MESSAGE)
        return
    console.print(render_tree(root))
