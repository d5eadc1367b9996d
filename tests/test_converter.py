import pytest

from flowcanvas import (
    ConnectorElement,
    EmptyInputError,
    NoNodesFoundError,
    ShapeElement,
    convert_diagram_text,
    layout_diagram,
    parse_diagram,
)
from flowcanvas.diagram_components import ElementKind


def test_decision_flow_end_to_end(decision_flow):
    elements = convert_diagram_text(decision_flow)
    shapes = [element for element in elements if isinstance(element, ShapeElement)]
    connectors = [element for element in elements if isinstance(element, ConnectorElement)]

    assert [shape.id for shape in shapes] == ["A", "B", "C", "D", "E"]
    assert [shape.kind for shape in shapes] == [
        ElementKind.RECTANGLE,
        ElementKind.DIAMOND,
        ElementKind.RECTANGLE,
        ElementKind.RECTANGLE,
        ElementKind.RECTANGLE,
    ]
    assert len(connectors) == 5
    labels = {connector.id: connector.text for connector in connectors}
    assert labels["arrow-B-C"] == "Yes"
    assert labels["arrow-B-D"] == "No"

    levels = layout_diagram(parse_diagram(decision_flow)).levels
    assert levels == {"A": 0, "B": 1, "C": 2, "D": 2, "E": 3}


def test_single_declaration_yields_a_shape():
    elements = convert_diagram_text("graph TD\nA[Only]")
    assert len(elements) == 1
    assert isinstance(elements[0], ShapeElement)


def test_empty_string_raises():
    with pytest.raises(EmptyInputError):
        convert_diagram_text("")


def test_comments_only_raises():
    with pytest.raises(EmptyInputError):
        convert_diagram_text("%% nothing here\n   \n")


def test_header_only_raises():
    with pytest.raises(NoNodesFoundError):
        convert_diagram_text("graph TD")


def test_errors_carry_readable_messages():
    with pytest.raises(NoNodesFoundError, match="No nodes found"):
        convert_diagram_text("graph TD\n???")


def test_connector_count_never_exceeds_edge_lines():
    text = "graph TD\nA --> B\nB --> C\nX --> Y\nnot an edge"
    connectors = [e for e in convert_diagram_text(text) if isinstance(e, ConnectorElement)]
    assert len(connectors) <= 3


def test_reconversion_reproduces_structure_and_positions(decision_flow):
    first = convert_diagram_text(decision_flow)
    second = convert_diagram_text(decision_flow)
    assert [(e.id, e.x, e.y, e.width, e.height, e.text) for e in first] == [
        (e.id, e.x, e.y, e.width, e.height, e.text) for e in second
    ]
