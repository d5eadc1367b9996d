from .converter import convert_diagram_text, parse_diagram
from .config import LayoutConfig
from .diagram_components import (
    ConnectorElement,
    DiagramKind,
    Edge,
    ElementStyle,
    Node,
    ParsedDiagram,
    ShapeElement,
    ShapeKind,
    diff,
    layout_diagram,
    render_preview,
)
from .errors import *

__version__ = "0.1.0"
__all__ = [
    "convert_diagram_text",
    "parse_diagram",
    "layout_diagram",
    "render_preview",
    "diff",
    "LayoutConfig",
    "ConnectorElement",
    "DiagramKind",
    "Edge",
    "ElementStyle",
    "Node",
    "ParsedDiagram",
    "ShapeElement",
    "ShapeKind",
    "DiagramError",
    "ConfigurationError",
    "EmptyInputError",
    "NoNodesFoundError",
    "LayoutOverflowError",
]
