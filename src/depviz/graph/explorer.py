"""
Explorer tree: the folder / file / symbol hierarchy shown next to the graph.

The tree is built from file paths split on "/". Single-child folder chains are
then flattened so "src/pkg" shows as one entry instead of two nested ones.
Builders return None when a filter is active but nothing matched, which lets
callers tell "no results" apart from an unfiltered tree.
"""

import logging
from dataclasses import dataclass, field, replace
from enum import StrEnum
from typing import AbstractSet, Callable, Dict, Iterator, Optional

from ..core.types import DependencyManifest, FileManifest, SymbolRef

logger = logging.getLogger(__name__)

ROOT_ID = "root"
ROOT_DISPLAY_NAME = "Project"
PATH_SEPARATOR = "/"


class ExplorerNodeKind(StrEnum):
    FOLDER = "folder"
    FILE = "file"
    SYMBOL = "symbol"


@dataclass
class ExplorerNode:
    id: str
    display_name: str
    file_id: Optional[str] = None
    symbol_id: Optional[str] = None
    children: Dict[str, "ExplorerNode"] = field(default_factory=dict)

    @property
    def kind(self) -> ExplorerNodeKind:
        if self.symbol_id is not None:
            return ExplorerNodeKind.SYMBOL
        if self.file_id is not None:
            return ExplorerNodeKind.FILE
        return ExplorerNodeKind.FOLDER

    @property
    def is_folder(self) -> bool:
        return self.kind is ExplorerNodeKind.FOLDER

    def walk(self) -> Iterator["ExplorerNode"]:
        """Pre-order iteration over this node and all descendants."""
        yield self
        for child in self.children.values():
            yield from child.walk()

    def find(self, node_id: str) -> Optional["ExplorerNode"]:
        return next((node for node in self.walk() if node.id == node_id), None)


def explorer_node_id(file_path: str, symbol_id: str | None = None) -> str:
    if symbol_id is None:
        return file_path
    return f"{file_path}#{symbol_id}"


def _file_path(file_manifest: FileManifest) -> str:
    return file_manifest.file_path or file_manifest.id


def _insert_file(root: ExplorerNode, file_manifest: FileManifest, symbol_ids: list[str]) -> None:
    file_path = _file_path(file_manifest)

    current = root
    for part in file_path.split(PATH_SEPARATOR):
        current = current.children.setdefault(part, ExplorerNode(id=part, display_name=part))
    current.file_id = file_manifest.id

    for symbol_id in symbol_ids:
        node_id = explorer_node_id(file_path, symbol_id)
        current.children[node_id] = ExplorerNode(
            id=node_id,
            display_name=symbol_id,
            file_id=file_manifest.id,
            symbol_id=symbol_id,
        )


def _build(
    dependency_manifest: DependencyManifest,
    select_symbols: Callable[[FileManifest], Optional[list[str]]],
) -> Optional[ExplorerNode]:
    """
    Shared tree construction.

    `select_symbols` returns the symbols to show for a file, or None to leave
    the file out entirely. Returns None when every file was left out.
    """
    root = ExplorerNode(id=ROOT_ID, display_name=ROOT_DISPLAY_NAME)
    matched = 0
    for file_manifest in dependency_manifest.values():
        symbol_ids = select_symbols(file_manifest)
        if symbol_ids is None:
            continue
        matched += 1
        _insert_file(root, file_manifest, symbol_ids)

    if not matched:
        return None
    return flatten_tree(root)


def build_explorer_tree(
    dependency_manifest: DependencyManifest,
    symbol_filter: AbstractSet[SymbolRef] | None = None,
) -> Optional[ExplorerNode]:
    """
    Build the flattened explorer tree.

    Args:
        dependency_manifest: The manifest to display.
        symbol_filter: Symbols to keep, typically a smart-filter result.
            None shows everything. An empty set is an active filter that
            matches nothing.

    Returns:
        The root node, or None when a filter is active and no file matched.
    """
    if symbol_filter is None:
        root = _build(dependency_manifest, lambda file_manifest: list(file_manifest.symbols))
        return root or flatten_tree(ExplorerNode(id=ROOT_ID, display_name=ROOT_DISPLAY_NAME))

    def select(file_manifest: FileManifest) -> Optional[list[str]]:
        kept = [
            symbol_id for symbol_id in file_manifest.symbols
            if SymbolRef(file_manifest.id, symbol_id) in symbol_filter
        ]
        return kept or None

    root = _build(dependency_manifest, select)
    if root is None:
        logger.debug(f"Explorer filter of {len(symbol_filter)} symbols matched no files")
    return root


def search_explorer_tree(dependency_manifest: DependencyManifest, term: str) -> Optional[ExplorerNode]:
    """
    Case-insensitive text search over file names and symbol ids.

    A file is kept when its name or one of its symbol ids contains the term;
    only the matching symbols are listed under it.
    """
    if not term:
        return build_explorer_tree(dependency_manifest)

    needle = term.lower()

    def select(file_manifest: FileManifest) -> Optional[list[str]]:
        file_name = _file_path(file_manifest).split(PATH_SEPARATOR)[-1]
        matching = [symbol_id for symbol_id in file_manifest.symbols if needle in symbol_id.lower()]
        if needle not in file_name.lower() and not matching:
            return None
        return matching

    return _build(dependency_manifest, select)


def flatten_tree(node: ExplorerNode) -> ExplorerNode:
    """
    Merge single-child folder chains, bottom-up.

    Children are ordered folders first, keeping their relative order. A node
    whose only child is a file or symbol is left alone so leaves stay
    selectable. Returns a new tree; the input is not modified.
    """
    flattened = [(key, flatten_tree(child)) for key, child in node.children.items()]
    ordered = [(key, child) for key, child in flattened if child.is_folder]
    ordered += [(key, child) for key, child in flattened if not child.is_folder]

    merged = replace(node, children=dict(ordered))
    while len(merged.children) == 1:
        (child,) = merged.children.values()
        if not child.is_folder:
            break
        merged = replace(
            merged,
            id=child.id,
            display_name=f"{merged.display_name}{PATH_SEPARATOR}{child.display_name}",
            children=child.children,
        )
    return merged
