from dskit.splay_tree import SplayTree


def build(values):
    tree = SplayTree()
    for value in values:
        tree.insert(value)
    return tree


def test_empty_tree():
    tree = SplayTree()
    assert len(tree) == 0
    assert tree.root_value() is None
    assert tree.describe() == "-- empty --\n"
    tree.delete(5)
    assert list(tree) == []


def test_inserted_value_becomes_root():
    tree = SplayTree()
    for value in [67, 45, 183, 23, 59]:
        tree.insert(value)
        assert tree.root_value() == value


def test_scenario_from_example():
    tree = build([67])
    assert tree.describe() == "67 < \n"
    tree.insert(45)
    tree.insert(183)
    assert list(tree) == [45, 67, 183]
    tree.insert(23)
    tree.insert(59)
    assert list(tree) == [23, 45, 59, 67, 183]

    tree.delete(23)
    tree.delete(183)
    tree.delete(67)
    assert list(tree) == [45, 59]
    assert tree.describe() == "45 < 59 < \n"

    tree.delete(45)
    tree.delete(59)
    assert len(tree) == 0
    assert tree.describe() == "-- empty --\n"


def test_duplicate_insert_is_ignored():
    tree = build([10, 20, 30])
    tree.insert(20)
    assert list(tree) == [10, 20, 30]
    assert len(tree) == 3
    assert tree.root_value() == 20


def test_delete_missing_keeps_contents():
    values = [50, 20, 80, 10, 30]
    tree = build(values)
    tree.delete(99)
    assert list(tree) == sorted(values)
    assert len(tree) == len(values)


def test_iteration_sorted_after_many_operations():
    values = [41, 7, 93, 12, 7, 55, 3, 88, 41, 60, 19, 72]
    tree = build(values)
    assert list(tree) == sorted(set(values))
    assert len(tree) == len(set(values))

    expected = set(values)
    for value in [12, 88, 3, 100, 41]:
        tree.delete(value)
        expected.discard(value)
        assert list(tree) == sorted(expected)
        assert len(tree) == len(expected)


def test_ascending_inserts_then_delete_all():
    values = list(range(1, 40))
    tree = build(values)
    assert list(tree) == values
    for value in reversed(values):
        tree.delete(value)
    assert len(tree) == 0
    assert tree.root_value() is None