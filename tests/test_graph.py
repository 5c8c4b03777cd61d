import io

import pytest

from dsakit.graph import Graph, main


def _matrix(size, edges):
    rows = [[0] * size for _ in range(size)]
    for a, b in edges:
        rows[a][b] = 1
        rows[b][a] = 1
    return rows


TREE = Graph(_matrix(5, [(1, 2), (1, 3), (2, 4)]))


def test_bfs_order():
    assert TREE.bfs(1) == [1, 2, 3, 4]


def test_dfs_order():
    assert TREE.dfs(1) == [1, 2, 4, 3]


@pytest.mark.parametrize("start", [1, 2, 3, 4])
def test_traversals_start_at_start_and_cover_component(start):
    bfs, dfs = TREE.bfs(start), TREE.dfs(start)
    assert bfs[0] == start and dfs[0] == start
    assert set(bfs) == set(dfs) == {1, 2, 3, 4}
    assert len(bfs) == len(set(bfs))


def test_disconnected_vertex_not_reached():
    graph = Graph(_matrix(5, [(1, 2)]))
    assert set(graph.bfs(1)) == {1, 2}
    assert graph.dfs(3) == [3]


def test_column_zero_is_not_followed():
    graph = Graph(_matrix(3, [(0, 1), (1, 2)]))
    assert 0 not in graph.bfs(1)
    assert 0 not in graph.dfs(1)


def test_dfs_is_independent_between_calls():
    first = TREE.dfs(1)
    second = TREE.dfs(1)
    assert first == [1, 2, 4, 3]
    assert second == [1, 2, 4, 3]


@pytest.mark.parametrize("start", [-1, 5])
def test_start_out_of_range(start):
    with pytest.raises(IndexError):
        TREE.bfs(start)
    with pytest.raises(IndexError):
        TREE.dfs(start)


def test_has_edges():
    graph = Graph(_matrix(4, [(1, 2)]))
    assert graph.has_edges(1) is True
    assert graph.has_edges(3) is False
    assert graph.has_edges(10) is False
    assert graph.has_edges(-1) is False


def test_matrix_must_be_square():
    with pytest.raises(ValueError):
        Graph([[0, 1], [1]])


def test_main_search(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n0 0 0\n0 0 1\n0 1 0\n3\n1\n3\n0\n4\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Vertex 1 is found in the graph." in out
    assert "Vertex 0 is not found in the graph." in out
    assert out.rstrip().endswith("Exiting")


def test_main_traversal_matches_graph(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("5\n" + "\n".join(
        " ".join(map(str, row)) for row in _matrix(5, [(1, 2), (1, 3), (2, 4)])
    ) + "\n1\n1\n2\n1\n4\n"))
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert " ".join(map(str, TREE.bfs(1))) in lines
    assert " ".join(map(str, TREE.dfs(1))) in lines


def test_main_truncated_matrix(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n0 0\n"))
    assert main([]) == 1
    assert "unexpected end of input" in capsys.readouterr().err