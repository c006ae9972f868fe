"""
Project view: one node per file, one edge per internal file dependency.
"""

import logging
from typing import List

from ..config import LabelOptions
from ..core.types import AuditManifest, DependencyManifest
from .elements import EdgeData, Elements, NodeData
from .nodes import file_node

logger = logging.getLogger(__name__)


def build_project_elements(
    dependency_manifest: DependencyManifest,
    audit_manifest: AuditManifest,
    options: LabelOptions | None = None,
) -> Elements:
    """
    Build the file-level graph of the whole project.

    External dependencies and self-references are skipped. Each file is
    visited once and its dependencies are keyed by target id, so the edge list
    cannot contain duplicates.
    """
    options = options or LabelOptions.default()
    nodes: List[NodeData] = []
    edges: List[EdgeData] = []

    for file_manifest in dependency_manifest.values():
        nodes.append(file_node(file_manifest.id, audit_manifest.get(file_manifest.id), options))

        for dependency in file_manifest.dependencies.values():
            if dependency.is_external:
                continue
            if dependency.id == file_manifest.id:
                # ignore self-references
                continue
            edges.append(EdgeData.between(file_manifest.id, dependency.id))

    logger.debug(f"Built project graph: {len(nodes)} nodes, {len(edges)} edges")
    return Elements.from_iterables(nodes, edges)
