from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from .diagram import ParsedDiagram
from .node import Node

EdgeKey = Tuple[str, str, Optional[str]]


@dataclass
class DiffResult:
    added_nodes: List[str]
    removed_nodes: List[str]
    changed_nodes: List[Tuple[str, str, str]]
    added_edges: List[EdgeKey]
    removed_edges: List[EdgeKey]

    def has_changes(self) -> bool:
        return any(
            [
                self.added_nodes,
                self.removed_nodes,
                self.changed_nodes,
                self.added_edges,
                self.removed_edges,
            ]
        )


def _describe(node: Node) -> str:
    return f"{node.label} ({node.shape_kind.value})"


def _edge_counts(diagram: ParsedDiagram) -> Counter:
    return Counter((edge.source, edge.target, edge.label) for edge in diagram.edges)


def _expand(counter: Counter) -> List[EdgeKey]:
    keys: List[EdgeKey] = []
    for key in sorted(counter, key=lambda item: (item[0], item[1], item[2] or "")):
        keys.extend([key] * counter[key])
    return keys


def diff(diagram_a: ParsedDiagram, diagram_b: ParsedDiagram) -> DiffResult:
    nodes_a: Dict[str, Node] = {node.node_id: node for node in diagram_a.nodes}
    nodes_b: Dict[str, Node] = {node.node_id: node for node in diagram_b.nodes}

    added_nodes = [node_id for node_id in nodes_b if node_id not in nodes_a]
    removed_nodes = [node_id for node_id in nodes_a if node_id not in nodes_b]
    changed_nodes: List[Tuple[str, str, str]] = []
    for node_id, node_a in nodes_a.items():
        node_b = nodes_b.get(node_id)
        if node_b is None:
            continue
        if node_a.label != node_b.label or node_a.shape_kind != node_b.shape_kind:
            changed_nodes.append((node_id, _describe(node_a), _describe(node_b)))

    edges_a = _edge_counts(diagram_a)
    edges_b = _edge_counts(diagram_b)

    return DiffResult(
        added_nodes=added_nodes,
        removed_nodes=removed_nodes,
        changed_nodes=changed_nodes,
        added_edges=_expand(edges_b - edges_a),
        removed_edges=_expand(edges_a - edges_b),
    )
