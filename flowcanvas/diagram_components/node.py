from dataclasses import dataclass, replace

from .core import ShapeKind


@dataclass(frozen=True)
class Node:
    node_id: str
    label: str
    shape_kind: ShapeKind = ShapeKind.PLAIN
    declared: bool = False

    @classmethod
    def implicit(cls, node_id: str) -> "Node":
        return cls(node_id=node_id, label=node_id)

    def declare(self, label: str, shape_kind: ShapeKind) -> "Node":
        return replace(self, label=label, shape_kind=shape_kind, declared=True)
