import logging
import random
from typing import Dict, List, Mapping, Optional, Sequence

from ..config import LayoutConfig
from .core import ElementKind, ElementStyle, Point, ShapeKind
from .edge import Edge
from .elements import ConnectorElement, DiagramElement, ShapeElement
from .node import Node

logger = logging.getLogger(__name__)

SEED_LIMIT = 1_000_000

_ELEMENT_KINDS: Dict[ShapeKind, ElementKind] = {
    ShapeKind.DIAMOND: ElementKind.DIAMOND,
    ShapeKind.ELLIPSE: ElementKind.ELLIPSE,
}


class ElementSynthesizer:

    def __init__(
        self,
        config: Optional[LayoutConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._config = config or LayoutConfig()
        self._rng = rng if rng is not None else random.SystemRandom()

    def _nonce(self) -> int:
        return self._rng.randrange(SEED_LIMIT)

    def shape_for(self, node: Node, position: Optional[Point]) -> ShapeElement:
        config = self._config
        if position is None:
            position = Point(config.fallback_x, config.fallback_y)
        return ShapeElement(
            id=node.node_id,
            kind=_ELEMENT_KINDS.get(node.shape_kind, ElementKind.RECTANGLE),
            x=position.x,
            y=position.y,
            width=config.node_width,
            height=config.node_height,
            text=node.label,
            style=ElementStyle.for_shape(node.shape_kind),
            seed=self._nonce(),
            version_nonce=self._nonce(),
        )

    def connector_for(self, edge: Edge, element_id: str, start: Point, end: Point) -> ConnectorElement:
        half_w = self._config.node_width / 2
        half_h = self._config.node_height / 2
        return ConnectorElement(
            id=element_id,
            start=Point(start.x + half_w, start.y + half_h),
            end=Point(end.x + half_w, end.y + half_h),
            text=edge.label or None,
            seed=self._nonce(),
            version_nonce=self._nonce(),
        )

    def synthesize(
        self,
        nodes: Sequence[Node],
        edges: Sequence[Edge],
        positions: Mapping[str, Point],
    ) -> List[DiagramElement]:
        elements: List[DiagramElement] = [
            self.shape_for(node, positions.get(node.node_id)) for node in nodes
        ]

        pair_counts: Dict[str, int] = {}
        for edge in edges:
            start = positions.get(edge.source)
            end = positions.get(edge.target)
            if start is None or end is None:
                logger.debug("Dropping connector %s -> %s: endpoint has no position", edge.source, edge.target)
                continue

            base_id = f"arrow-{edge.source}-{edge.target}"
            repeat = pair_counts.get(base_id, 0)
            pair_counts[base_id] = repeat + 1
            element_id = base_id if repeat == 0 else f"{base_id}-{repeat}"
            elements.append(self.connector_for(edge, element_id, start, end))

        return elements


def synthesize_elements(
    nodes: Sequence[Node],
    edges: Sequence[Edge],
    positions: Mapping[str, Point],
    *,
    config: Optional[LayoutConfig] = None,
    rng: Optional[random.Random] = None,
) -> List[DiagramElement]:
    return ElementSynthesizer(config, rng).synthesize(nodes, edges, positions)
