"""
Symbol view: bounded, cycle-safe traversal around one symbol.

Starting from a root symbol, two independent expansions run outward:
dependencies (edges point neighbour -> current) up to `dependency_depth` hops
and dependents (edges point current -> neighbour) up to `dependent_depth`
hops. Both share one visited set seeded with the root.

Termination does not rely on the depth bounds. A neighbour already visited
still receives its edge (so diamonds and cycles show every connection) but is
never expanded a second time. External neighbours are added and never
expanded.

The traversal uses an explicit stack of neighbour iterators instead of
recursion, visiting in the same depth-first pre-order a recursive walk would,
so large depth values cannot exhaust the interpreter stack.
"""

import logging
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Dict, Iterator, List, Set, Tuple

from ..config import LabelOptions
from ..core.exceptions import ManifestNotFoundError
from ..core.resolution import FileResolution, Internal, resolve_file
from ..core.types import (
    AuditManifest,
    DependencyManifest,
    SymbolManifest,
    compute_node_id,
)
from .elements import EdgeData, Elements, NodeData
from .nodes import neighbour_node, symbol_audit, symbol_node

logger = logging.getLogger(__name__)


class Direction(StrEnum):
    DEPENDENCIES = "dependencies"
    DEPENDENTS = "dependents"


# (resolution of the neighbour's file, neighbour symbol id)
Neighbour = Tuple[FileResolution, str]


@dataclass
class _Traversal:
    """Mutable state of one build, discarded once the Elements are produced."""
    dependency_manifest: DependencyManifest
    audit_manifest: AuditManifest
    options: LabelOptions
    nodes: Dict[str, NodeData] = field(default_factory=dict)
    edges: Dict[str, EdgeData] = field(default_factory=dict)
    visited: Set[str] = field(default_factory=set)

    def neighbours(self, symbol: SymbolManifest, direction: Direction) -> Iterator[Neighbour]:
        if direction is Direction.DEPENDENCIES:
            for dependency in symbol.dependencies.values():
                resolution = resolve_file(
                    self.dependency_manifest, dependency.id, dependency.is_external
                )
                for symbol_id in dependency.symbols:
                    yield resolution, symbol_id
        else:
            for dependent in symbol.dependents.values():
                resolution = resolve_file(self.dependency_manifest, dependent.id)
                for symbol_id in dependent.symbols:
                    yield resolution, symbol_id

    def add_edge(self, current_id: str, neighbour_id: str, direction: Direction) -> None:
        if direction is Direction.DEPENDENCIES:
            edge = EdgeData.between(neighbour_id, current_id)
        else:
            edge = EdgeData.between(current_id, neighbour_id)
        self.edges[edge.id] = edge

    def expand(self, root: SymbolManifest, root_id: str, direction: Direction, max_depth: int) -> None:
        if max_depth <= 0:
            return

        stack: List[Tuple[Iterator[Neighbour], str, int]] = [
            (self.neighbours(root, direction), root_id, 0)
        ]
        while stack:
            pending, current_id, depth = stack[-1]
            try:
                resolution, symbol_id = next(pending)
            except StopIteration:
                stack.pop()
                continue

            neighbour_id = compute_node_id(resolution.file_id, symbol_id)
            self.add_edge(current_id, neighbour_id, direction)

            if neighbour_id in self.visited:
                continue
            self.visited.add(neighbour_id)
            self.nodes[neighbour_id] = neighbour_node(
                resolution, symbol_id, self.audit_manifest, self.options
            )

            if depth + 1 >= max_depth or not isinstance(resolution, Internal):
                continue
            neighbour = resolution.file.symbols.get(symbol_id)
            if neighbour is not None:
                stack.append((self.neighbours(neighbour, direction), neighbour_id, depth + 1))


def _lookup_symbol(
    dependency_manifest: DependencyManifest, file_id: str, symbol_id: str
) -> SymbolManifest:
    file_manifest = dependency_manifest.get(file_id)
    if file_manifest is None:
        raise ManifestNotFoundError(file_id)
    symbol = file_manifest.symbols.get(symbol_id)
    if symbol is None:
        raise ManifestNotFoundError(file_id, symbol_id)
    return symbol


def build_symbol_elements(
    file_id: str,
    symbol_id: str,
    dependency_depth: int,
    dependent_depth: int,
    dependency_manifest: DependencyManifest,
    audit_manifest: AuditManifest,
    options: LabelOptions | None = None,
) -> Elements:
    """
    Build the depth-limited neighbourhood of a symbol.

    Args:
        file_id: File owning the root symbol.
        symbol_id: Root symbol id within that file.
        dependency_depth: Maximum hops along dependencies (0 disables).
        dependent_depth: Maximum hops along dependents (0 disables).

    Returns:
        The root, every reached symbol once, and every traversed edge once.
        Empty when the file or symbol is missing from the manifest.
    """
    if dependency_depth < 0 or dependent_depth < 0:
        raise ValueError("Traversal depths must be non-negative")

    options = options or LabelOptions.default()
    try:
        root = _lookup_symbol(dependency_manifest, file_id, symbol_id)
    except ManifestNotFoundError as e:
        logger.error(str(e))
        return Elements.empty()

    traversal = _Traversal(dependency_manifest, audit_manifest, options)
    root_id = compute_node_id(file_id, symbol_id)
    traversal.visited.add(root_id)
    traversal.nodes[root_id] = symbol_node(
        file_id=file_id,
        symbol_id=symbol_id,
        symbol_type=root.type.value,
        is_external=False,
        audit=symbol_audit(audit_manifest, file_id, symbol_id),
        options=options,
    )

    traversal.expand(root, root_id, Direction.DEPENDENCIES, dependency_depth)
    traversal.expand(root, root_id, Direction.DEPENDENTS, dependent_depth)

    logger.debug(
        f"Built symbol graph for {root_id} "
        f"(deps={dependency_depth}, dependents={dependent_depth}): "
        f"{len(traversal.nodes)} nodes, {len(traversal.edges)} edges"
    )
    return Elements.from_iterables(traversal.nodes.values(), traversal.edges.values())
