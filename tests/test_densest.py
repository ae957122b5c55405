import pytest

from coregraph.densest import (
    densest_subgraph_approx,
    densest_subgraph_exact,
    write_densest_approx,
    write_densest_exact,
)
from coregraph.graph import Graph

K4_DENSITY = 1.5


def _graph(edges):
    graph = Graph()
    for u, v in edges:
        graph.add_edge(u, v)
    return graph


@pytest.fixture
def k4_with_pendant():
    return _graph([(1, 2), (1, 3), (1, 4), (2, 3), (2, 4), (3, 4), (4, 5)])


def _induced_density(graph, nodes):
    members = set(nodes)
    inside = sum(1 for u, v in graph.edges() if u in members and v in members)
    return inside / len(members)


def test_exact_finds_k4(k4_with_pendant):
    result = densest_subgraph_exact(k4_with_pendant)
    assert set(result.nodes) == {1, 2, 3, 4}
    assert result.density == pytest.approx(K4_DENSITY, abs=1e-6)


def test_approx_finds_k4(k4_with_pendant):
    result = densest_subgraph_approx(k4_with_pendant)
    assert sorted(result.nodes) == [1, 2, 3, 4]
    assert result.density == K4_DENSITY


def test_approx_density_matches_its_nodes(k4_with_pendant):
    result = densest_subgraph_approx(k4_with_pendant)
    assert _induced_density(k4_with_pendant, result.nodes) == result.density


def test_approx_within_factor_two_of_exact():
    graph = _graph([(1, 2), (2, 3), (3, 1), (3, 4), (4, 5), (5, 6), (6, 4), (4, 1)])
    exact = densest_subgraph_exact(graph)
    approx = densest_subgraph_approx(graph)
    assert approx.density >= exact.density / 2 - 1e-9
    assert _induced_density(graph, exact.nodes) >= approx.density - 1e-6


def test_empty_graph_gives_none():
    assert densest_subgraph_exact(Graph()) is None
    assert densest_subgraph_approx(Graph()) is None


def test_write_exact(tmp_path, k4_with_pendant):
    path = tmp_path / "res" / "exact.txt"
    write_densest_exact(k4_with_pendant, path)
    lines = path.read_text().splitlines()
    assert lines[0].endswith(" ms")
    assert float(lines[1]) == pytest.approx(K4_DENSITY, abs=1e-5)
    assert sorted(int(x) for x in lines[2].split()) == [1, 2, 3, 4]


def test_write_approx(tmp_path, k4_with_pendant):
    path = tmp_path / "approx.txt"
    write_densest_approx(k4_with_pendant, path)
    lines = path.read_text().splitlines()
    assert lines[1] == "1.5"
    assert lines[2] == "1 2 3 4"


def test_write_skips_empty_graph(tmp_path):
    path = tmp_path / "empty.txt"
    write_densest_approx(Graph(), path)
    assert not path.exists()