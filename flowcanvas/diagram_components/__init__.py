from .core import BoxChars, DiagramKind, Direction, ElementKind, ElementStyle, Point, ShapeKind
from .edge import ConnectorKind, Edge
from .node import Node
from .diagram import ParsedDiagram
from .tokenizer import TokenizedText, tokenize
from .builder import ConnectorRule, GraphBuilder, ShapeRule
from .layered_layout import LayeredLayout, LayoutResult, layout_diagram
from .elements import ConnectorElement, DiagramElement, ShapeElement
from .synthesizer import ElementSynthesizer, synthesize_elements
from .diff import diff, DiffResult
from .canvas import Canvas
from .preview import render_preview

__all__ = [
    "BoxChars",
    "DiagramKind",
    "Direction",
    "ElementKind",
    "ElementStyle",
    "Point",
    "ShapeKind",
    "ConnectorKind",
    "Edge",
    "Node",
    "ParsedDiagram",
    "TokenizedText",
    "tokenize",
    "ConnectorRule",
    "GraphBuilder",
    "ShapeRule",
    "LayeredLayout",
    "LayoutResult",
    "layout_diagram",
    "ConnectorElement",
    "DiagramElement",
    "ShapeElement",
    "ElementSynthesizer",
    "synthesize_elements",
    "diff",
    "DiffResult",
    "Canvas",
    "render_preview",
]
