"""
Graph elements handed to the rendering sink.

Every builder returns an immutable `Elements` value: a tuple of nodes and a
tuple of edges whose ids are unique. Serialisation uses the camelCase field
names the rendering side expects (`fileName`, `metricsSeverity`, ...).
"""

from typing import Any, Dict, Iterable, Iterator, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..core.types import Metric

# Separator between source and target node ids in an edge id.
EDGE_ID_SEPARATOR = "->"


def compute_edge_id(source_id: str, target_id: str) -> str:
    """Direction-sensitive edge id: `a->b` and `b->a` are different edges."""
    return f"{source_id}{EDGE_ID_SEPARATOR}{target_id}"


class ElementModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class LabelBox(ElementModel):
    """A label with the node size needed to display it."""
    label: str
    width: float
    height: float


class NodeData(ElementModel):
    """
    A file or symbol node.

    File nodes leave `symbol_name` and `symbol_type` unset.
    """
    id: str
    file_name: str
    is_external: bool = False
    symbol_name: Optional[str] = None
    symbol_type: Optional[str] = None
    metrics_severity: Dict[Metric, int] = Field(default_factory=dict)
    expanded: LabelBox
    collapsed: LabelBox

    @property
    def is_symbol(self) -> bool:
        return self.symbol_name is not None

    def severity(self, metric: Metric) -> int:
        return self.metrics_severity.get(metric, 0)


class EdgeData(ElementModel):
    id: str
    source: str
    target: str

    @classmethod
    def between(cls, source_id: str, target_id: str) -> "EdgeData":
        return cls(id=compute_edge_id(source_id, target_id), source=source_id, target=target_id)


class Elements(ElementModel):
    """Node and edge collection produced by a single build."""
    nodes: Tuple[NodeData, ...] = ()
    edges: Tuple[EdgeData, ...] = ()

    @classmethod
    def empty(cls) -> "Elements":
        return cls()

    @classmethod
    def from_iterables(cls, nodes: Iterable[NodeData], edges: Iterable[EdgeData]) -> "Elements":
        return cls(nodes=tuple(nodes), edges=tuple(edges))

    def is_empty(self) -> bool:
        return not self.nodes and not self.edges

    def node_ids(self) -> list[str]:
        return [node.id for node in self.nodes]

    def edge_ids(self) -> list[str]:
        return [edge.id for edge in self.edges]

    def get_node(self, node_id: str) -> Optional[NodeData]:
        return next((node for node in self.nodes if node.id == node_id), None)

    def iter_elements(self) -> Iterator[NodeData | EdgeData]:
        yield from self.nodes
        yield from self.edges

    def to_dict(self) -> Dict[str, Any]:
        """Serialise for the rendering sink (camelCase keys, unset fields dropped)."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
