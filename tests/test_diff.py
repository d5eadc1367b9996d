from flowcanvas import diff, parse_diagram


def test_identical_text_has_no_changes(decision_flow):
    result = diff(parse_diagram(decision_flow), parse_diagram(decision_flow))
    assert not result.has_changes()


def test_label_and_shape_changes():
    before = parse_diagram("graph TD\nA[Start] --> B{Check}")
    after = parse_diagram("graph TD\nA[Begin] --> B[Check]")
    result = diff(before, after)
    assert result.changed_nodes == [
        ("A", "Start (rectangle)", "Begin (rectangle)"),
        ("B", "Check (diamond)", "Check (rectangle)"),
    ]
    assert result.added_edges == []
    assert result.removed_edges == []


def test_added_and_removed_nodes_and_edges():
    before = parse_diagram("graph TD\nA --> B\nB --> C")
    after = parse_diagram("graph TD\nA --> B\nB -->|ok| D")
    result = diff(before, after)
    assert result.added_nodes == ["D"]
    assert result.removed_nodes == ["C"]
    assert result.added_edges == [("B", "D", "ok")]
    assert result.removed_edges == [("B", "C", None)]


def test_duplicate_edges_are_counted():
    before = parse_diagram("graph TD\nA --> B")
    after = parse_diagram("graph TD\nA --> B\nA --> B")
    assert diff(before, after).added_edges == [("A", "B", None)]
