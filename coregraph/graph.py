"""Undirected simple graph with k-core decomposition and its incremental upkeep."""

from __future__ import annotations

import os
import time
from collections import deque


def ensure_parent_directory(path):
    """Create the directory that will hold ``path`` if it has one."""
    parent = os.path.dirname(os.fspath(path))
    if parent:
        os.makedirs(parent, exist_ok=True)


class Graph:
    """An undirected graph over arbitrary integer node ids.

    Self-loops and repeated edges are ignored. Once
    :meth:`run_k_core_decomposition` has been called, core numbers are kept
    up to date as edges are added and removed.
    """

    def __init__(self):
        self._adj: list[set[int]] = []
        self._index: dict[int, int] = {}
        self._ids: list[int] = []
        self._edge_count = 0
        self._coreness: list[int] = []
        self._vert: list[int] = []
        self._pos: list[int] = []
        self._deg: list[int] = []

    @classmethod
    def from_file(cls, path):
        """Load an edge list; the first line is a header and ``#`` starts a comment line."""
        graph = cls()
        with open(path, encoding="utf-8") as handle:
            if not handle.readline():
                return graph
            for line in handle:
                line = line.lstrip(" \t\n\r")
                if not line or line.startswith("#"):
                    continue
                fields = line.split()
                try:
                    u, v = int(fields[0]), int(fields[1])
                except (IndexError, ValueError):
                    continue
                graph.add_edge(u, v)
        return graph

    def _intern(self, node: int) -> int:
        internal = self._index.get(node)
        if internal is not None:
            return internal
        internal = len(self._ids)
        self._index[node] = internal
        self._ids.append(node)
        self._adj.append(set())
        if self._coreness:
            self._coreness.append(0)
            self._deg.append(0)
            self._pos.append(len(self._vert))
            self._vert.append(internal)
        return internal

    def add_edge(self, u, v):
        """Add an undirected edge, creating its endpoints as needed."""
        if u == v:
            return
        ui = self._intern(u)
        vi = self._intern(v)
        if vi in self._adj[ui]:
            return
        self._adj[ui].add(vi)
        self._adj[vi].add(ui)
        self._edge_count += 1
        if self._coreness:
            self._raise_cores(ui, vi)

    def _raise_cores(self, ui: int, vi: int) -> None:
        coreness, pos, vert, deg = self._coreness, self._pos, self._vert, self._deg
        deg[ui] += 1
        deg[vi] += 1
        if coreness[ui] > coreness[vi]:
            ui, vi = vi, ui
        self._reorder(pos[ui])
        self._reorder(pos[vi])

        k = coreness[ui]
        members = [ui]
        seen = {ui}
        queue = deque([ui])
        while queue:
            current = queue.popleft()
            for neighbor in self._adj[current]:
                if coreness[neighbor] == k and neighbor not in seen:
                    seen.add(neighbor)
                    members.append(neighbor)
                    queue.append(neighbor)

        start = min(pos[node] for node in members)
        for i in range(start, len(self._ids)):
            p = vert[i]
            if coreness[p] > k:
                break
            count = sum(
                1
                for neighbor in self._adj[p]
                if coreness[neighbor] > k or (coreness[neighbor] == k and pos[neighbor] > i)
            )
            if count > k:
                coreness[p] += 1

    def remove_edge(self, u, v):
        """Remove an edge if present; unknown nodes or edges are ignored."""
        if u not in self._index or v not in self._index:
            return
        ui = self._index[u]
        vi = self._index[v]
        if vi not in self._adj[ui]:
            return
        self._adj[ui].discard(vi)
        self._adj[vi].discard(ui)
        self._edge_count -= 1
        if self._coreness:
            self._lower_cores(ui, vi)

    def _lower_cores(self, ui: int, vi: int) -> None:
        coreness, pos, deg = self._coreness, self._pos, self._deg
        deg[ui] -= 1
        deg[vi] -= 1
        if coreness[ui] > coreness[vi]:
            ui, vi = vi, ui
        self._reorder(pos[ui])
        self._reorder(pos[vi])

        k = coreness[ui]
        queued: set[int] = set()
        queue: deque[int] = deque()
        remaining = list(deg)
        for node in (ui, vi):
            if deg[node] < k and node not in queued:
                queue.append(node)
                queued.add(node)

        while queue:
            current = queue.popleft()
            coreness[current] -= 1
            self._reorder(pos[current])
            for neighbor in self._adj[current]:
                if coreness[neighbor] == coreness[current] + 1:
                    remaining[neighbor] -= 1
                    if remaining[neighbor] < coreness[neighbor] and neighbor not in queued:
                        queue.append(neighbor)
                        queued.add(neighbor)

    def _reorder(self, start: int) -> None:
        """Bubble the vertex at ``start`` into place by (coreness, degree)."""
        coreness, deg, vert, pos = self._coreness, self._deg, self._vert, self._pos
        n = len(self._ids)
        for i in range(start, n - 1):
            a, b = vert[i], vert[i + 1]
            if coreness[a] > coreness[b] or (coreness[a] == coreness[b] and deg[a] > deg[b]):
                vert[i], vert[i + 1] = b, a
                pos[a] = i + 1
                pos[b] = i
            else:
                break
        for i in range(start, 0, -1):
            a, b = vert[i], vert[i - 1]
            if coreness[a] < coreness[b] or (coreness[a] == coreness[b] and deg[a] < deg[b]):
                vert[i], vert[i - 1] = b, a
                pos[a] = i - 1
                pos[b] = i
            else:
                break

    def average_degree(self):
        """Mean node degree, 0.0 for an empty graph."""
        if not self._ids:
            return 0.0
        return 2 * self._edge_count / len(self._ids)

    def density(self):
        """Fraction of possible edges present, 0.0 with fewer than two nodes."""
        n = len(self._ids)
        if n <= 1:
            return 0.0
        return 2 * self._edge_count / (n * (n - 1))

    def node_count(self):
        return len(self._ids)

    def edge_count(self):
        return self._edge_count

    def has_node(self, node):
        return node in self._index

    def degree(self, node):
        """Degree of ``node``, 0 if it is unknown."""
        internal = self._index.get(node)
        return 0 if internal is None else len(self._adj[internal])

    def neighbors(self, node):
        """The ids adjacent to ``node``; empty if it is unknown."""
        internal = self._index.get(node)
        if internal is None:
            return frozenset()
        return frozenset(self._ids[i] for i in self._adj[internal])

    def coreness(self, node):
        """Core number of ``node``, 0 if unknown or not yet decomposed."""
        internal = self._index.get(node)
        if internal is None or internal >= len(self._coreness):
            return 0
        return self._coreness[internal]

    def node_ids(self):
        """All node ids in order of first appearance."""
        return list(self._ids)

    def edges(self):
        """Each edge once, as ``(u, v)`` with ``u`` appearing before ``v``."""
        return [
            (self._ids[i], self._ids[j])
            for i, neighbors in enumerate(self._adj)
            for j in neighbors
            if i < j
        ]

    def run_k_core_decomposition(self):
        """Compute every node's core number (Batagelj-Zaversnik bucket method)."""
        n = len(self._ids)
        if n == 0:
            return
        deg = [len(neighbors) for neighbors in self._adj]
        max_degree = max(deg)

        bins = [0] * (max_degree + 1)
        for d in deg:
            bins[d] += 1
        start = 0
        for d, count in enumerate(bins):
            bins[d] = start
            start += count

        pos = [0] * n
        vert = [0] * n
        for node, d in enumerate(deg):
            pos[node] = bins[d]
            vert[pos[node]] = node
            bins[d] += 1
        bins[1:] = bins[:-1]
        bins[0] = 0

        coreness = [0] * n
        for i in range(n):
            u = vert[i]
            coreness[u] = deg[u]
            for v in self._adj[u]:
                if deg[v] > coreness[u]:
                    dv = deg[v]
                    pv = pos[v]
                    pw = bins[dv]
                    w = vert[pw]
                    if v != w:
                        vert[pv], vert[pw] = w, v
                        pos[v], pos[w] = pw, pv
                    bins[dv] += 1
                    deg[v] -= 1

        self._deg = deg
        self._coreness = coreness
        self._vert = vert
        self._pos = pos

    def write_k_core(self, path):
        """Run the decomposition and write the timing and ``id coreness`` lines to ``path``."""
        ensure_parent_directory(path)
        with open(path, "w", encoding="utf-8") as out:
            started = time.perf_counter()
            self.run_k_core_decomposition()
            elapsed_ms = (time.perf_counter() - started) * 1000.0
            out.write(f"{elapsed_ms:g} ms\n")
            for node, core in zip(self._ids, self._coreness):
                out.write(f"{node} {core}\n")