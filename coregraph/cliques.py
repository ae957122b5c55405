"""Maximal cliques, k-cliques and k-clique decomposition."""

from __future__ import annotations

import time
from itertools import combinations

from coregraph.graph import ensure_parent_directory


def _adjacency(graph) -> dict[int, frozenset[int]]:
    return {node: graph.neighbors(node) for node in graph.node_ids()}


def _bron_kerbosch(adjacency, clique, candidates, excluded, found) -> None:
    if not candidates and not excluded:
        found.append(clique)
        return
    if not candidates:
        return
    pivot = max(candidates | excluded, key=lambda u: len(candidates & adjacency[u]))
    pivot_neighbors = adjacency[pivot]
    for v in [node for node in candidates if node not in pivot_neighbors]:
        neighbors = adjacency[v]
        _bron_kerbosch(
            adjacency,
            clique + [v],
            candidates & neighbors,
            excluded & neighbors,
            found,
        )
        candidates.discard(v)
        excluded.add(v)


def maximal_cliques(graph):
    """Every maximal clique of ``graph`` as a list of node ids."""
    adjacency = _adjacency(graph)
    found: list[list[int]] = []
    _bron_kerbosch(adjacency, [], set(adjacency), set(), found)
    return found


def _check_k(k: int) -> None:
    if k < 0:
        raise ValueError("clique size must not be negative")


def k_cliques(graph, k):
    """All distinct cliques of exactly ``k`` nodes, as sorted tuples in sorted order."""
    _check_k(k)
    unique: set[tuple[int, ...]] = set()
    for clique in maximal_cliques(graph):
        if len(clique) >= k:
            unique.update(tuple(sorted(combo)) for combo in combinations(clique, k))
    return sorted(unique)


def _is_subset(sub: list[int], sup: list[int]) -> bool:
    return set(sub) <= set(sup)


def k_clique_decomposition(graph, k):
    """Maximal cliques with at least ``k`` nodes, largest first, each sorted."""
    _check_k(k)
    candidates = [sorted(clique) for clique in maximal_cliques(graph) if len(clique) >= k]
    candidates.sort(key=len, reverse=True)
    kept: list[list[int]] = []
    for clique in candidates:
        if not any(_is_subset(clique, chosen) for chosen in kept):
            kept.append(clique)
    return kept


def _write_cliques(path, compute) -> None:
    ensure_parent_directory(path)
    with open(path, "w", encoding="utf-8") as out:
        started = time.perf_counter()
        cliques = compute()
        elapsed_ms = (time.perf_counter() - started) * 1000.0
        out.write(f"{elapsed_ms:g} ms\n")
        for clique in cliques:
            out.write(" ".join(str(node) for node in clique) + "\n")


def write_k_cliques(graph, k, path):
    """Write the timing line followed by one k-clique per line."""
    _check_k(k)
    _write_cliques(path, lambda: k_cliques(graph, k))


def write_k_clique_decomposition(graph, k, path):
    """Write the timing line followed by one decomposition clique per line."""
    _check_k(k)
    _write_cliques(path, lambda: k_clique_decomposition(graph, k))