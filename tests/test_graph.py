import itertools

import pytest

from coregraph.graph import Graph, ensure_parent_directory


def graph_from(edges):
    graph = Graph()
    for u, v in edges:
        graph.add_edge(u, v)
    return graph


def cores(graph):
    return {node: graph.coreness(node) for node in graph.node_ids()}


def complete_edges(nodes):
    return list(itertools.combinations(nodes, 2))


def test_from_file_skips_header_comments_and_bad_lines(tmp_path):
    path = tmp_path / "edges.txt"
    path.write_text(
        "7 8\n"
        "# a comment\n"
        "\n"
        "   1 2\n"
        "2 3\n"
        "3 3\n"
        "2 1\n"
        "garbage line\n"
        "3 1 extra\n"
    )
    graph = Graph.from_file(path)
    assert not graph.has_node(7)
    assert graph.node_ids() == [1, 2, 3]
    assert graph.edge_count() == 3
    assert graph.neighbors(1) == frozenset({2, 3})


def test_from_empty_file(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("")
    graph = Graph.from_file(path)
    assert graph.node_count() == 0
    assert graph.average_degree() == 0.0
    assert graph.density() == 0.0


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        Graph.from_file(tmp_path / "absent.txt")


def test_self_loops_and_duplicates_ignored():
    graph = graph_from([(5, 5), (5, 6), (6, 5), (5, 6)])
    assert graph.edge_count() == 1
    assert graph.degree(5) == 1
    assert graph.degree(42) == 0
    assert not graph.has_node(42)


def test_triangle_statistics():
    graph = graph_from(complete_edges([1, 2, 3]))
    assert graph.average_degree() == 2.0
    assert graph.density() == 1.0


def test_edges_lists_each_edge_once():
    edge_list = [(10, 20), (20, 30), (30, 10), (30, 40)]
    graph = graph_from(edge_list)
    listed = graph.edges()
    assert len(listed) == graph.edge_count()
    assert {frozenset(e) for e in listed} == {frozenset(e) for e in edge_list}


def test_remove_edge_updates_counts():
    graph = graph_from([(1, 2), (2, 3)])
    graph.remove_edge(1, 2)
    graph.remove_edge(1, 3)
    graph.remove_edge(1, 99)
    assert graph.edge_count() == 1
    assert graph.degree(1) == 0
    assert graph.has_node(1)


def test_coreness_zero_before_decomposition():
    graph = graph_from(complete_edges([1, 2, 3]))
    assert graph.coreness(1) == 0
    assert graph.coreness(99) == 0


@pytest.mark.parametrize("size", [2, 3, 4, 6])
def test_complete_graph_coreness(size):
    graph = graph_from(complete_edges(range(size)))
    graph.run_k_core_decomposition()
    assert set(cores(graph).values()) == {size - 1}


def test_clique_with_pendant():
    graph = graph_from(complete_edges([0, 1, 2, 3]) + [(3, 9)])
    graph.run_k_core_decomposition()
    assert graph.coreness(9) == 1
    assert all(graph.coreness(n) == 3 for n in range(4))


def test_coreness_never_exceeds_degree():
    graph = graph_from(complete_edges(range(5)) + [(4, 5), (5, 6), (6, 7), (7, 5)])
    graph.run_k_core_decomposition()
    for node in graph.node_ids():
        assert 0 <= graph.coreness(node) <= graph.degree(node)


def test_incremental_add_matches_fresh_decomposition():
    edges = complete_edges([0, 1, 2])
    graph = graph_from(edges)
    graph.run_k_core_decomposition()
    graph.add_edge(0, 3)
    fresh = graph_from(edges + [(0, 3)])
    fresh.run_k_core_decomposition()
    assert cores(graph) == cores(fresh)


def test_incremental_remove_matches_fresh_decomposition():
    graph = graph_from(complete_edges([0, 1, 2]))
    graph.run_k_core_decomposition()
    graph.remove_edge(0, 1)
    fresh = graph_from([(0, 2), (1, 2)])
    fresh.run_k_core_decomposition()
    assert cores(graph) == cores(fresh)


def test_write_k_core(tmp_path):
    graph = graph_from(complete_edges([4, 5, 6]) + [(6, 7)])
    path = tmp_path / "out" / "nested" / "kcore.txt"
    graph.write_k_core(path)
    lines = path.read_text().splitlines()
    assert lines[0].endswith(" ms")
    written = {int(a): int(b) for a, b in (line.split() for line in lines[1:])}
    assert written == cores(graph)
    assert list(written) == graph.node_ids()


def test_ensure_parent_directory(tmp_path):
    target = tmp_path / "a" / "b" / "file.txt"
    ensure_parent_directory(target)
    assert target.parent.is_dir()
    ensure_parent_directory(target)
    assert target.parent.is_dir()