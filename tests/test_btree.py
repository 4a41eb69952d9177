import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from tree234.btree import (
    BTree,
    BTreeStats,
    benchmark_insertion,
    benchmark_removal,
    create_number_file,
    save_insertion_stats,
    save_removal_stats,
)


def _check_invariants(tree):
    """Walk the tree, assert 2-3-4 invariants and return the number of nodes."""
    leaf_depths = set()
    count = 0

    def visit(node, depth, low, high, is_root):
        nonlocal count
        count += 1
        if not is_root:
            assert 1 <= len(node.keys) <= 3
        assert len(node.keys) <= 3
        assert node.keys == sorted(node.keys)
        for key in node.keys:
            assert low is None or key > low
            assert high is None or key < high
        if node.leaf:
            leaf_depths.add(depth)
            return
        assert len(node.children) == len(node.keys) + 1
        bounds = [low] + node.keys + [high]
        for i, child in enumerate(node.children):
            visit(child, depth + 1, bounds[i], bounds[i + 1], False)

    visit(tree.root, 0, None, None, True)
    assert len(leaf_depths) == 1
    assert leaf_depths.pop() + 1 == tree.height()
    return count


def _build(values):
    tree = BTree()
    for value in values:
        tree.insert(value)
    return tree


def test_render_after_first_split():
    tree = _build([1, 2, 3, 4])
    assert tree.render() == "|-- [2]\n  |-- [1]\n  |-- [3, 4]\n"
    assert tree.stats.splits == 1


def test_duplicates_are_ignored():
    tree = _build([5, 3, 8, 1, 4, 7, 9, 2, 6])
    assert tree.insert(5) is False
    assert tree.insert(2) is False
    assert tree.keys() == [1, 2, 3, 4, 5, 6, 7, 8, 9]
    assert len(tree) == 9


def test_contains_and_iteration():
    values = [40, 10, 30, 20, 50, 60, 70]
    tree = _build(values)
    assert list(tree) == sorted(values)
    for value in values:
        assert value in tree
    assert 35 not in tree


def test_remove_missing_key_returns_false():
    tree = _build(range(1, 20))
    assert tree.remove(100) is False
    assert tree.keys() == list(range(1, 20))
    _check_invariants(tree)


def test_remove_everything_collapses_to_leaf_root():
    tree = _build(range(1, 50))
    for value in range(1, 50):
        assert tree.remove(value) is True
        _check_invariants(tree)
    assert tree.keys() == []
    assert tree.root.leaf
    assert tree.height() == 1
    assert tree.stats.merges > 0


def test_removal_can_borrow_from_siblings():
    tree = _build(range(1, 100))
    for value in range(99, 0, -3):
        tree.remove(value)
    expected = [v for v in range(1, 100) if v not in set(range(99, 0, -3))]
    assert tree.keys() == expected
    assert tree.stats.rotations + tree.stats.merges > 0
    _check_invariants(tree)


def test_count_nodes_matches_walk():
    tree = _build(range(200))
    assert tree.count_nodes() == _check_invariants(tree)


def test_render_has_one_line_per_node():
    tree = _build(range(50))
    lines = tree.render().splitlines()
    assert len(lines) == tree.count_nodes()
    assert all(line.lstrip().startswith("|-- [") for line in lines)


@settings(max_examples=60)
@given(st.lists(st.integers(min_value=-1000, max_value=1000), max_size=200))
def test_insert_keeps_sorted_distinct_keys(values):
    tree = _build(values)
    assert tree.keys() == sorted(set(values))
    assert len(tree) == len(set(values))
    _check_invariants(tree)


@settings(max_examples=60)
@given(
    st.lists(st.integers(min_value=0, max_value=300), max_size=150),
    st.lists(st.integers(min_value=0, max_value=300), max_size=150),
)
def test_remove_keeps_invariants(values, removals):
    tree = _build(values)
    remaining = set(values)
    for value in removals:
        assert tree.remove(value) == (value in remaining)
        remaining.discard(value)
    assert tree.keys() == sorted(remaining)
    _check_invariants(tree)


def test_stats_reset():
    stats = BTreeStats(splits=3, merges=2, height=4, blocks=9, rotations=1, removal_percent=50.0)
    stats.reset()
    assert stats == BTreeStats()


def test_insertion_stats_reflect_shape():
    tree = _build(range(30))
    stats = tree.insertion_stats()
    assert stats.height == tree.height()
    assert stats.blocks == tree.count_nodes()


def test_removal_stats_record_percent():
    tree = _build(range(30))
    stats = tree.removal_stats(20)
    assert stats.removal_percent == 20
    assert stats.blocks == tree.count_nodes()
    assert stats.height == tree.height()


def test_save_insertion_stats_line(tmp_path):
    path = tmp_path / "insert.txt"
    tree = _build([1, 2, 3, 4])
    save_insertion_stats(path, 4, tree.insertion_stats())
    assert path.read_text() == "4,1,2,3\n"


def test_save_removal_stats_appends(tmp_path):
    path = tmp_path / "remove.txt"
    tree = _build(range(40))
    for value in range(0, 40, 2):
        tree.remove(value)
    stats = tree.removal_stats(35)
    save_removal_stats(path, stats)
    save_removal_stats(path, stats)
    lines = path.read_text().splitlines()
    assert len(lines) == 2
    percent, rotations, merges, height, blocks = lines[0].split(",")
    assert percent == "35%"
    assert [int(rotations), int(merges), int(height), int(blocks)] == [
        stats.rotations,
        stats.merges,
        stats.height,
        stats.blocks,
    ]


def test_benchmark_insertion_writes_current_stats(tmp_path):
    path = tmp_path / "bench.txt"
    tree = _build(range(100))
    stats = benchmark_insertion(tree, 100, path)
    fields = [int(part) for part in path.read_text().strip().split(",")]
    assert fields == [100, stats.splits, tree.height(), tree.count_nodes()]


def test_benchmark_removal_writes_current_stats(tmp_path):
    path = tmp_path / "bench.txt"
    tree = _build(range(100))
    for value in range(50):
        tree.remove(value)
    stats = benchmark_removal(tree, 50, path)
    parts = path.read_text().strip().split(",")
    assert parts[0] == "50%"
    assert [int(p) for p in parts[1:]] == [
        stats.rotations,
        stats.merges,
        tree.height(),
        tree.count_nodes(),
    ]


def test_create_number_file_is_deterministic(tmp_path):
    first = tmp_path / "a.txt"
    second = tmp_path / "b.txt"
    numbers = create_number_file(first, 250, 7)
    create_number_file(second, 250, 7)
    assert first.read_text() == second.read_text()
    written = [int(line) for line in first.read_text().splitlines()]
    assert written == numbers
    assert len(written) == 250
    assert all(0 <= n < 100000 for n in written)


def test_create_number_file_bad_path_raises(tmp_path):
    with pytest.raises(OSError):
        create_number_file(tmp_path / "missing" / "numbers.txt", 5, 1)