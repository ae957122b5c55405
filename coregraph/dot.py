"""Graphviz DOT export."""

from __future__ import annotations

from coregraph.graph import ensure_parent_directory


def render_dot(graph, node_styles=None, edge_styles=None):
    """Return the DOT text of ``graph`` with optional node and edge attributes.

    Edge styles are keyed by ``(min(u, v), max(u, v))``.
    """
    node_styles = node_styles or {}
    edge_styles = edge_styles or {}
    lines = [
        "graph G {",
        "  node [shape=circle, fontsize=10, width=0.5];",
        "  edge [len=1.5];",
        "",
    ]
    for node in graph.node_ids():
        style = node_styles.get(node)
        lines.append(f"  {node} [{style}];" if style is not None else f"  {node};")
    lines.append("")
    for u, v in graph.edges():
        style = edge_styles.get((min(u, v), max(u, v)))
        text = f"  {u} -- {v}"
        lines.append(f"{text} [{style}];" if style is not None else f"{text};")
    lines.append("}")
    return "\n".join(lines) + "\n"


def export_to_dot(graph, path, node_styles=None, edge_styles=None):
    """Write the DOT text of ``graph`` to ``path``."""
    ensure_parent_directory(path)
    with open(path, "w", encoding="utf-8") as out:
        out.write(render_dot(graph, node_styles, edge_styles))