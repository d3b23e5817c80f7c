import pytest

from dskit.graphs import (
    DIRECTED_EDGES,
    UNDIRECTED_EDGES,
    DirectedGraph,
    UndirectedGraph,
    main,
)


@pytest.fixture
def ugraph():
    graph = UndirectedGraph(9)
    for src, dest in UNDIRECTED_EDGES:
        graph.add_edge(src, dest)
    return graph


@pytest.fixture
def digraph():
    graph = DirectedGraph(9)
    for src, dest in DIRECTED_EDGES:
        graph.add_edge(src, dest)
    return graph


def test_undirected_edges_stored_both_ways(ugraph):
    assert ugraph.edges == 2 * len(UNDIRECTED_EDGES)
    for src, dest in UNDIRECTED_EDGES:
        assert dest in ugraph.neighbors(src)
        assert src in ugraph.neighbors(dest)


def test_undirected_neighbors_keep_insertion_order():
    graph = UndirectedGraph(4)
    graph.add_edge(0, 3)
    graph.add_edge(0, 1)
    graph.add_edge(2, 0)
    assert graph.neighbors(0) == [3, 1, 2]


def test_undirected_dfs_visits_connected_graph_once(ugraph):
    order = ugraph.dfs(0)
    assert order[0] == 0
    assert sorted(order) == list(range(9))


def test_undirected_dfs_order(ugraph):
    assert ugraph.dfs(0) == [0, 1, 2, 3, 4, 5, 6, 7, 8]


def test_undirected_dfs_steps_follow_edges_or_backtrack(ugraph):
    order = ugraph.dfs(4)
    seen = {order[0]}
    for vertex in order[1:]:
        assert any(vertex in ugraph.neighbors(v) for v in seen)
        seen.add(vertex)


def test_undirected_dfs_stays_in_component():
    graph = UndirectedGraph(5)
    graph.add_edge(0, 1)
    graph.add_edge(3, 4)
    assert sorted(graph.dfs(0)) == [0, 1]
    assert sorted(graph.dfs(4)) == [3, 4]


@pytest.mark.parametrize("src, dest", [(1, 1), (-1, 2), (0, 9), (9, 0)])
def test_undirected_rejects_bad_edges(src, dest):
    graph = UndirectedGraph(9)
    with pytest.raises(ValueError):
        graph.add_edge(src, dest)


def test_directed_edge_count_and_targets(digraph):
    assert digraph.edges == len(DIRECTED_EDGES)
    assert digraph.targets(0) == [1, 5]
    assert digraph.targets(2) == [4, 6]
    assert digraph.targets(8) == []


def test_directed_edges_are_one_way():
    graph = DirectedGraph(3)
    graph.add_edge(0, 1)
    assert graph.targets(0) == [1]
    assert graph.targets(1) == []


def test_directed_dfs_tree_edges_are_real_edges(digraph):
    steps = digraph.dfs()
    tree_edges = [(v, t) for v, t in steps if t is not None]
    for src, dest in tree_edges:
        assert dest in digraph.targets(src)
    targets = [dest for _, dest in tree_edges]
    assert len(targets) == len(set(targets))


def test_directed_dfs_enters_each_vertex_as_start_and_per_tree_edge(digraph):
    steps = digraph.dfs()
    entries = [v for v, t in steps if t is None]
    tree_edges = [(v, t) for v, t in steps if t is not None]
    assert len(entries) == digraph.vertices + len(tree_edges)
    assert set(entries) == set(range(digraph.vertices))


def test_directed_dfs_enters_target_right_after_edge(digraph):
    steps = digraph.dfs()
    for position, (vertex, target) in enumerate(steps):
        if target is not None:
            assert steps[position + 1] == (target, None)


def test_directed_dfs_starts_at_zero(digraph):
    steps = digraph.dfs()
    assert steps[:2] == [(0, None), (0, 1)]


@pytest.mark.parametrize("src, dest", [(2, 2), (0, -1), (9, 1)])
def test_directed_rejects_bad_edges(src, dest):
    graph = DirectedGraph(9)
    with pytest.raises(ValueError):
        graph.add_edge(src, dest)


def test_targets_out_of_range():
    with pytest.raises(ValueError):
        DirectedGraph(3).targets(3)


def test_main_prints_both_graphs(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Undirected graph with 9 vertices:" in out
    assert "Directed graph with 9 vertices:" in out
    assert out.splitlines()[1].startswith("0 -> 1 -> ")
    assert "\t0 -> 1, " in out