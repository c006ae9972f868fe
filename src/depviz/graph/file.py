"""
File view: the symbols of one file and their direct neighbours.

The view answers "what touches this file directly". It performs exactly one
hop outward from every symbol of the focal file, in both directions, and
never follows the dependencies of dependencies. Multi-hop exploration is the
symbol view's job (see graph.symbol).
"""

import logging
from typing import Dict

from ..config import LabelOptions
from ..core.exceptions import ManifestNotFoundError
from ..core.resolution import resolve_file
from ..core.types import AuditManifest, DependencyManifest, FileManifest, compute_node_id
from .elements import EdgeData, Elements, NodeData
from .nodes import neighbour_node, symbol_audit, symbol_node

logger = logging.getLogger(__name__)


def _lookup_file(dependency_manifest: DependencyManifest, file_id: str) -> FileManifest:
    file_manifest = dependency_manifest.get(file_id)
    if file_manifest is None:
        raise ManifestNotFoundError(file_id)
    return file_manifest


def build_file_elements(
    file_id: str,
    dependency_manifest: DependencyManifest,
    audit_manifest: AuditManifest,
    options: LabelOptions | None = None,
) -> Elements:
    """
    Build the symbol-level graph of a single file.

    A missing file reflects stale view state rather than a programming
    error: it is logged and an empty element set is returned.
    """
    options = options or LabelOptions.default()
    try:
        file_manifest = _lookup_file(dependency_manifest, file_id)
    except ManifestNotFoundError as e:
        logger.error(str(e))
        return Elements.empty()

    nodes: Dict[str, NodeData] = {}
    edges: Dict[str, EdgeData] = {}

    # First pass: the file's own symbols
    for symbol in file_manifest.symbols.values():
        node = symbol_node(
            file_id=file_id,
            symbol_id=symbol.id,
            symbol_type=symbol.type.value,
            is_external=False,
            audit=symbol_audit(audit_manifest, file_id, symbol.id),
            options=options,
        )
        nodes[node.id] = node

    # Second pass: one hop to dependencies and dependents
    for symbol in file_manifest.symbols.values():
        symbol_node_id = compute_node_id(file_id, symbol.id)

        for dependency in symbol.dependencies.values():
            resolution = resolve_file(dependency_manifest, dependency.id, dependency.is_external)
            for dependency_symbol_id in dependency.symbols:
                neighbour_id = compute_node_id(dependency.id, dependency_symbol_id)
                if neighbour_id not in nodes:
                    nodes[neighbour_id] = neighbour_node(
                        resolution, dependency_symbol_id, audit_manifest, options
                    )
                edge = EdgeData.between(neighbour_id, symbol_node_id)
                edges[edge.id] = edge

        for dependent in symbol.dependents.values():
            resolution = resolve_file(dependency_manifest, dependent.id)
            for dependent_symbol_id in dependent.symbols:
                neighbour_id = compute_node_id(dependent.id, dependent_symbol_id)
                if neighbour_id not in nodes:
                    nodes[neighbour_id] = neighbour_node(
                        resolution, dependent_symbol_id, audit_manifest, options
                    )
                edge = EdgeData.between(symbol_node_id, neighbour_id)
                edges[edge.id] = edge

    logger.debug(f"Built file graph for {file_id}: {len(nodes)} nodes, {len(edges)} edges")
    return Elements.from_iterables(nodes.values(), edges.values())
