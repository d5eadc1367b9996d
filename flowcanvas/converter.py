import logging
import random
from typing import List, Optional

from .config import LayoutConfig
from .diagram_components import (
    DiagramElement,
    GraphBuilder,
    LayoutResult,
    ParsedDiagram,
    layout_diagram,
    synthesize_elements,
    tokenize,
)

logger = logging.getLogger(__name__)


def parse_diagram(text: str, *, builder: Optional[GraphBuilder] = None) -> ParsedDiagram:
    tokenized = tokenize(text)
    return (builder or GraphBuilder()).build(tokenized)


def convert_diagram_text(
    text: str,
    *,
    config: Optional[LayoutConfig] = None,
    rng: Optional[random.Random] = None,
) -> List[DiagramElement]:
    """Convert flowchart text into shape and connector elements.

    Shapes come first in node order, followed by connectors in edge order.
    Raises ``EmptyInputError`` or ``NoNodesFoundError``; individual malformed
    lines are skipped.
    """
    config = config or LayoutConfig()
    diagram = parse_diagram(text)
    layout: LayoutResult = layout_diagram(diagram, config)
    elements = synthesize_elements(diagram.nodes, diagram.edges, layout.positions, config=config, rng=rng)
    logger.debug(
        "Converted %s diagram: %d nodes, %d edges, %d elements",
        diagram.kind.value,
        len(diagram.nodes),
        len(diagram.edges),
        len(elements),
    )
    return elements
