"""
Graph builders for depviz.

Pure functions from a manifest pair and view parameters to an immutable
`Elements` value:
- project: one node per file
- file: one file's symbols and their direct neighbours
- symbol: bounded traversal around one symbol
- explorer: folder / file / symbol tree for navigation
- styles: stylesheet hints for the rendering sink
"""

from .elements import EdgeData, Elements, LabelBox, NodeData, compute_edge_id
from .explorer import ExplorerNode, build_explorer_tree, flatten_tree, search_explorer_tree
from .file import build_file_elements
from .labels import dimensions_of
from .project import build_project_elements
from .severity import resolve_severity
from .styles import build_stylesheet, node_style, severity_color
from .symbol import build_symbol_elements

__all__ = [
    # Elements
    "EdgeData", "Elements", "LabelBox", "NodeData", "compute_edge_id",
    # Builders
    "build_file_elements", "build_project_elements", "build_symbol_elements",
    # Explorer
    "ExplorerNode", "build_explorer_tree", "flatten_tree", "search_explorer_tree",
    # Presentation
    "build_stylesheet", "dimensions_of", "node_style", "resolve_severity", "severity_color",
]
