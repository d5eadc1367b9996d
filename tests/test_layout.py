import pytest

from flowcanvas import LayoutConfig, layout_diagram, parse_diagram
from flowcanvas.diagram_components import LayeredLayout, Point


def test_levels_follow_breadth_first_discovery(decision_flow):
    layout = layout_diagram(parse_diagram(decision_flow))
    assert layout.levels == {"A": 0, "B": 1, "C": 2, "D": 2, "E": 3}
    assert layout.rows == (("A",), ("B",), ("C", "D"), ("E",))


def test_positions_are_centered_rows(decision_flow):
    layout = layout_diagram(parse_diagram(decision_flow))
    assert layout.positions == {
        "A": Point(290, 50),
        "B": Point(290, 200),
        "C": Point(180, 350),
        "D": Point(400, 350),
        "E": Point(290, 500),
    }


def test_wide_rows_clamp_to_min_margin():
    layout = layout_diagram(parse_diagram("graph TD\nR --> A\nR --> B\nR --> C\nR --> D"))
    xs = [layout.position_of(node_id).x for node_id in ("A", "B", "C", "D")]
    assert xs == [50, 270, 490, 710]


def test_root_is_always_level_zero():
    layout = layout_diagram(parse_diagram("graph TD\nZ[Root]\nA --> Z\nZ --> B"))
    assert layout.level_of("Z") == 0
    assert layout.level_of("B") == 1


def test_cycles_terminate_and_keep_first_level():
    layout = layout_diagram(parse_diagram("graph TD\nA --> B\nB --> C\nC --> A\nC --> B"))
    assert layout.levels == {"A": 0, "B": 1, "C": 2}


def test_shortcut_edge_keeps_discovery_depth():
    layout = layout_diagram(parse_diagram("graph TD\nA --> B\nB --> C\nA --> C"))
    assert layout.level_of("C") == 1


def test_disconnected_nodes_get_no_level_or_position():
    # Unreached nodes are left for the synthesizer to place at the fallback.
    layout = layout_diagram(parse_diagram("graph TD\nA --> B\nC --> D"))
    assert set(layout.levels) == {"A", "B"}
    assert layout.position_of("C") is None
    assert layout.level_of("D") is None


def test_backward_only_nodes_are_unreached():
    layout = layout_diagram(parse_diagram("graph TD\nA[Root]\nB --> A"))
    assert layout.levels == {"A": 0}
    assert layout.position_of("B") is None


def test_layout_is_deterministic(decision_flow):
    first = layout_diagram(parse_diagram(decision_flow))
    second = layout_diagram(parse_diagram(decision_flow))
    assert first == second


def test_custom_config_changes_geometry():
    config = LayoutConfig(level_height=100, top_margin=0)
    layout = layout_diagram(parse_diagram("graph TD\nA --> B"), config)
    assert layout.position_of("A").y == 0
    assert layout.position_of("B").y == 100


def test_header_direction_does_not_change_geometry(decision_flow):
    top_down = layout_diagram(parse_diagram(decision_flow))
    for header in ("graph LR", "graph BT", "flowchart RL"):
        text = decision_flow.replace("graph TD", header, 1)
        layout = layout_diagram(parse_diagram(text))
        assert layout.positions == top_down.positions
    assert layout_diagram(parse_diagram("graph LR\nA --> B")).position_of("A") == Point(290, 50)


def test_layout_requires_parsed_diagram():
    with pytest.raises(TypeError):
        LayeredLayout("graph TD\nA --> B")
