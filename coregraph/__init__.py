"""Undirected graph analysis: k-cores, densest subgraphs, cliques, max flow and DOT export."""

__version__ = "0.1.0"

__all__ = ["cli", "cliques", "densest", "dinic", "dot", "graph"]