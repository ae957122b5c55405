"""Maximum flow and minimum cut with Dinic's algorithm."""

from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass


@dataclass(slots=True)
class _Edge:
    to: int
    capacity: float
    rev: int


class Dinic:
    """A directed flow network on nodes ``0 .. size - 1``.

    Capacities not greater than ``epsilon`` count as saturated, which lets
    the same code serve integer networks (``epsilon=0``) and floating-point
    ones (a small positive ``epsilon``).
    """

    def __init__(self, size, epsilon=0):
        if size < 0:
            raise ValueError("network size must not be negative")
        self.size = size
        self.epsilon = epsilon
        self._adj: list[list[_Edge]] = [[] for _ in range(size)]
        self._level: list[int] = []
        self._iter: list[int] = []

    def _check(self, node: int) -> None:
        if not 0 <= node < self.size:
            raise IndexError(f"node {node} is outside the network of size {self.size}")

    def add_edge(self, source, target, capacity):
        """Add a directed edge together with its zero-capacity residual twin."""
        self._check(source)
        self._check(target)
        forward = _Edge(target, capacity, len(self._adj[target]))
        backward = _Edge(source, 0, len(self._adj[source]))
        self._adj[source].append(forward)
        self._adj[target].append(backward)

    def _bfs(self, source: int, sink: int) -> bool:
        level = [-1] * self.size
        level[source] = 0
        queue = deque([source])
        while queue:
            u = queue.popleft()
            for edge in self._adj[u]:
                if edge.capacity > self.epsilon and level[edge.to] < 0:
                    level[edge.to] = level[u] + 1
                    queue.append(edge.to)
        self._level = level
        return level[sink] != -1

    def _augment(self, source: int, sink: int):
        """Push flow along one path of the level graph; return the amount."""
        adj, level, position, eps = self._adj, self._level, self._iter, self.epsilon
        path: list[_Edge] = []
        visited: list[int] = []
        u = source
        while u != sink:
            edges = adj[u]
            i = position[u]
            chosen = None
            while i < len(edges):
                edge = edges[i]
                if edge.capacity > eps and level[u] < level[edge.to]:
                    chosen = edge
                    break
                i += 1
            position[u] = i
            if chosen is not None:
                path.append(chosen)
                visited.append(u)
                u = chosen.to
            else:
                if not path:
                    return 0
                path.pop()
                u = visited.pop()
                position[u] += 1
        bottleneck = min((edge.capacity for edge in path), default=math.inf)
        for edge in path:
            edge.capacity -= bottleneck
            adj[edge.to][edge.rev].capacity += bottleneck
        return bottleneck

    def max_flow(self, source, sink):
        """Return the value of a maximum flow from ``source`` to ``sink``."""
        self._check(source)
        self._check(sink)
        if source == sink:
            raise ValueError("source and sink must be different nodes")
        flow = 0
        while self._bfs(source, sink):
            self._iter = [0] * self.size
            while (pushed := self._augment(source, sink)) > self.epsilon:
                flow += pushed
        return flow

    def min_cut_nodes(self, source):
        """Nodes reachable from ``source`` in the residual network, in BFS order."""
        self._check(source)
        visited = [False] * self.size
        visited[source] = True
        queue = deque([source])
        order: list[int] = []
        while queue:
            u = queue.popleft()
            order.append(u)
            for edge in self._adj[u]:
                if edge.capacity > self.epsilon and not visited[edge.to]:
                    visited[edge.to] = True
                    queue.append(edge.to)
        return order

    def t_side_nodes(self, sink):
        """Nodes that can still reach ``sink`` in the residual network, in BFS order."""
        self._check(sink)
        reverse: list[list[int]] = [[] for _ in range(self.size)]
        for u, edges in enumerate(self._adj):
            for edge in edges:
                if edge.capacity > self.epsilon:
                    reverse[edge.to].append(u)
        visited = [False] * self.size
        visited[sink] = True
        queue = deque([sink])
        order: list[int] = []
        while queue:
            u = queue.popleft()
            order.append(u)
            for v in reverse[u]:
                if not visited[v]:
                    visited[v] = True
                    queue.append(v)
        return order

    def reachable_nodes(self, source):
        """A flag per node: reachable from ``source`` over positive residual capacity."""
        self._check(source)
        reachable = [False] * self.size
        reachable[source] = True
        queue = deque([source])
        while queue:
            u = queue.popleft()
            for edge in self._adj[u]:
                if not reachable[edge.to] and edge.capacity > 0:
                    reachable[edge.to] = True
                    queue.append(edge.to)
        return reachable