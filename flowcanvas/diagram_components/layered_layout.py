import logging
from collections import deque
from dataclasses import dataclass
from typing import Deque, Dict, List, Optional, Tuple

from ..config import LayoutConfig
from .core import Point
from .diagram import ParsedDiagram

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LayoutResult:
    levels: Dict[str, int]
    positions: Dict[str, Point]
    rows: Tuple[Tuple[str, ...], ...]

    def position_of(self, node_id: str) -> Optional[Point]:
        return self.positions.get(node_id)

    def level_of(self, node_id: str) -> Optional[int]:
        return self.levels.get(node_id)


class LayeredLayout:

    def __init__(self, diagram: ParsedDiagram, config: Optional[LayoutConfig] = None) -> None:
        if not isinstance(diagram, ParsedDiagram):
            raise TypeError("diagram must be a ParsedDiagram instance")
        self._diagram = diagram
        self._config = config or LayoutConfig()

    def assign_levels(self) -> Dict[str, int]:
        """Breadth-first levels from the first declared node.

        A node keeps the level at which it is first dequeued. Nodes the
        traversal never reaches are left out of the mapping.
        """
        diagram = self._diagram
        if diagram.root is None:
            return {}

        children: Dict[str, List[str]] = {}
        for edge in diagram.edges:
            children.setdefault(edge.source, []).append(edge.target)

        levels: Dict[str, int] = {}
        queue: Deque[Tuple[str, int]] = deque([(diagram.root.node_id, 0)])
        while queue:
            node_id, level = queue.popleft()
            if node_id in levels:
                continue
            levels[node_id] = level
            for child in children.get(node_id, []):
                if child not in levels:
                    queue.append((child, level + 1))

        unreached = len(diagram.nodes) - len(levels)
        if unreached:
            logger.debug("%d node(s) unreachable from %r have no level", unreached, diagram.root.node_id)
        return levels

    def apply(self) -> LayoutResult:
        levels = self.assign_levels()
        grouped: Dict[int, List[str]] = {}
        for node_id, level in levels.items():
            grouped.setdefault(level, []).append(node_id)

        rows = tuple(tuple(grouped[level]) for level in sorted(grouped))
        positions: Dict[str, Point] = {}
        for level, row in enumerate(rows):
            for index, node_id in enumerate(row):
                positions[node_id] = self._place(level, index, len(row))

        return LayoutResult(levels=levels, positions=positions, rows=rows)

    def _row_start(self, count: int, step: float) -> float:
        config = self._config
        row_width = count * step
        return max(config.min_margin, (config.canvas_width - row_width) / 2)

    def _place(self, level: int, index: int, count: int) -> Point:
        config = self._config
        step = config.column_step
        x = self._row_start(count, step) + index * step
        y = level * config.level_height + config.top_margin
        return Point(x, y)


def layout_diagram(diagram: ParsedDiagram, config: Optional[LayoutConfig] = None) -> LayoutResult:
    return LayeredLayout(diagram, config).apply()
