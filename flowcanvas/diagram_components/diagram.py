from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from .core import DiagramKind, Direction
from .edge import Edge
from .node import Node


@dataclass(frozen=True)
class ParsedDiagram:
    kind: DiagramKind
    nodes: Tuple[Node, ...]
    edges: Tuple[Edge, ...] = ()
    direction: Direction = Direction.TB
    _index: Dict[str, Node] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_index", {node.node_id: node for node in self.nodes})

    @property
    def root(self) -> Optional[Node]:
        return self.nodes[0] if self.nodes else None

    @property
    def node_ids(self) -> Tuple[str, ...]:
        return tuple(node.node_id for node in self.nodes)

    def get(self, node_id: str) -> Optional[Node]:
        return self._index.get(node_id)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._index
