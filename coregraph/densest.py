"""Densest subgraph: exact (Goldberg's flow method) and greedy peeling."""

from __future__ import annotations

import math
import time
from dataclasses import dataclass, field

from coregraph.dinic import Dinic
from coregraph.graph import ensure_parent_directory

_EPSILON = 1e-9
_ITERATIONS = 100


@dataclass
class DensestSubgraph:
    """A subgraph's edge-per-node density and its node ids."""

    density: float
    nodes: list[int] = field(default_factory=list)


def _network(node_count, pairs, guess):
    size = node_count + len(pairs) + 2
    source, sink = size - 2, size - 1
    network = Dinic(size, _EPSILON)
    for node in range(node_count):
        network.add_edge(node, sink, guess)
    for edge_node, (u, v) in enumerate(pairs, start=node_count):
        network.add_edge(source, edge_node, 1.0)
        network.add_edge(edge_node, u, math.inf)
        network.add_edge(edge_node, v, math.inf)
    return network, source, sink


def densest_subgraph_exact(graph):
    """Find a maximum-density subgraph; ``None`` for a graph without nodes."""
    ids = graph.node_ids()
    n = len(ids)
    if n == 0:
        return None
    index = {node: i for i, node in enumerate(ids)}
    pairs = [(index[u], index[v]) for u, v in graph.edges()]
    m = len(pairs)

    low, high = 0.0, float(m)
    for _ in range(_ITERATIONS):
        guess = (low + high) / 2.0
        if guess < _EPSILON:
            break
        network, source, sink = _network(n, pairs, guess)
        flow = network.max_flow(source, sink)
        if m - flow > _EPSILON:
            low = guess
        else:
            high = guess

    guess = low
    network, source, sink = _network(n, pairs, guess)
    network.max_flow(source, sink)

    source_side = [node for node in network.min_cut_nodes(source) if node < n]
    sink_side = set(network.t_side_nodes(sink))
    not_sink_side = [node for node in range(n) if node not in sink_side]

    def score(nodes):
        if not nodes:
            return -math.inf
        members = set(nodes)
        inside = sum(1 for u, v in pairs if u in members and v in members)
        return inside - guess * len(nodes)

    chosen = source_side if score(source_side) > score(not_sink_side) else not_sink_side
    best = [ids[i] for i in chosen]

    if not best:
        best = [max(ids, key=graph.degree)]
    return DensestSubgraph(low, best)


def densest_subgraph_approx(graph):
    """Greedy peeling of minimum-degree nodes; ``None`` for a graph without nodes."""
    ids = graph.node_ids()
    n = len(ids)
    if n == 0:
        return None
    index = {node: i for i, node in enumerate(ids)}
    neighbors = [[index[v] for v in graph.neighbors(node)] for node in ids]
    degrees = [len(adj) for adj in neighbors]
    removed = [False] * n
    remaining = n
    edges = graph.edge_count()

    best_density = 0.0
    best: list[int] = []
    for _ in range(n):
        if remaining > 0:
            current = edges / remaining
            if current > best_density:
                best_density = current
                best = [ids[i] for i in range(n) if not removed[i]]

        alive = [i for i in range(n) if not removed[i]]
        if not alive:
            break
        victim = min(alive, key=degrees.__getitem__)
        removed[victim] = True
        remaining -= 1
        edges -= degrees[victim]
        for neighbor in neighbors[victim]:
            if not removed[neighbor]:
                degrees[neighbor] -= 1
    return DensestSubgraph(best_density, best)


def _write(graph, path, solve) -> None:
    ensure_parent_directory(path)
    if graph.node_count() == 0:
        return
    with open(path, "w", encoding="utf-8") as out:
        started = time.perf_counter()
        result = solve(graph)
        elapsed_ms = (time.perf_counter() - started) * 1000.0
        out.write(f"{elapsed_ms:g} ms\n")
        out.write(f"{result.density:g}\n")
        out.write(" ".join(str(node) for node in result.nodes) + "\n")


def write_densest_exact(graph, path):
    """Write timing, density and nodes of the exact densest subgraph."""
    _write(graph, path, densest_subgraph_exact)


def write_densest_approx(graph, path):
    """Write timing, density and nodes of the peeled densest subgraph."""
    _write(graph, path, densest_subgraph_approx)