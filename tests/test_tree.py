import pytest

from drillbook.tree import Node, Record, TreeError, build


def _ids(node):
    return [node.id] + [i for child in node.children for i in _ids(child)]


def test_no_records_gives_none():
    assert build([]) is None


def test_single_root():
    assert build([Record(0, 0)]) == Node(0)


def test_flat_tree_in_order():
    root = build([Record(2, 0), Record(0, 0), Record(1, 0)])
    assert [child.id for child in root.children] == [1, 2]
    assert all(child.children == [] for child in root.children)


def test_nested_tree():
    records = [Record(0, 0), Record(1, 0), Record(2, 0), Record(3, 1), Record(4, 1), Record(5, 2)]
    root = build(records)
    assert root == Node(0, [Node(1, [Node(3), Node(4)]), Node(2, [Node(5)])])


def test_record_order_does_not_matter():
    records = [Record(0, 0), Record(1, 0), Record(2, 1), Record(3, 2)]
    assert build(list(reversed(records))) == build(records)


def test_input_is_not_reordered():
    records = [Record(1, 0), Record(0, 0)]
    build(records)
    assert records == [Record(1, 0), Record(0, 0)]


def test_every_id_appears_once():
    records = [Record(i, max(0, i - 2)) for i in range(10)]
    assert sorted(_ids(build(records))) == list(range(10))


@pytest.mark.parametrize(
    "records, message",
    [
        ([Record(0, 1)], "Invalid root"),
        ([Record(1, 0)], "Invalid root"),
        ([Record(0, 0), Record(2, 0)], "Non-continuous Tree"),
        ([Record(0, 0), Record(1, 0), Record(1, 0)], "Non-continuous Tree"),
        ([Record(0, 0), Record(1, 1)], "Invalid Child ID"),
        ([Record(0, 0), Record(1, 2), Record(2, 0)], "Invalid Child ID"),
        ([Record(0, 0), Record(1, -1)], "Invalid Child ID"),
    ],
)
def test_invalid_records(records, message):
    with pytest.raises(TreeError, match=message):
        build(records)


def test_add_attaches_to_deep_parent():
    root = Node(0, [Node(1, [Node(2)])])
    root.add(Record(3, 2))
    assert root == Node(0, [Node(1, [Node(2, [Node(3)])])])


def test_add_rejects_duplicate_child():
    root = Node(0, [Node(1)])
    with pytest.raises(TreeError, match="Duplicate Child ID"):
        root.add(Record(1, 0))


def test_add_rejects_missing_parent():
    root = Node(0, [Node(1)])
    with pytest.raises(TreeError, match="Parent not found"):
        root.add(Record(5, 3))


def test_add_rejects_child_not_above_parent():
    node = Node(4)
    with pytest.raises(TreeError, match="Invalid Child ID"):
        node.add(Record(3, 4))
    assert node.children == []