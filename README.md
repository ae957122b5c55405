# coregraph

Tools for analysing simple, undirected graphs given as edge lists:

- **k-core decomposition** (`coregraph.graph.Graph`): the coreness of
  every node. Once the decomposition has run, coreness is kept up to date
  as edges are added or removed.
- **Densest subgraph** (`coregraph.densest`): an exact solution by a
  parametric max-flow search on Dinic's algorithm, and an approximate
  one that peels off the node of lowest degree, one at a time.
- **Cliques** (`coregraph.cliques`): maximal cliques by Bron–Kerbosch
  with pivoting, every clique of exactly k nodes, and a decomposition
  into maximal cliques of at least k nodes.
- **Graphviz export** (`coregraph.dot`): DOT text with optional styles
  for each node and each edge.
- **Max flow** (`coregraph.dinic.Dinic`): the flow solver on its own.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Input format

`Graph.from_file` reads a plain text edge list. The first line is a
header and is always skipped. Blank lines and lines starting with `#`
are ignored. Every other line starts with two integer node ids separated
by whitespace. A line that does not start that way is skipped.

```
header line
# comment
1 2
2 3
3 1
```

Self-loops are dropped. Duplicate edges are counted once.

## Library use

```python
from coregraph.graph import Graph
from coregraph.cliques import k_cliques, k_clique_decomposition
from coregraph.densest import densest_subgraph_exact, densest_subgraph_approx
from coregraph.dot import export_to_dot, render_dot

g = Graph.from_file("data/CondMat.txt")
print(g.node_count(), g.edge_count(), g.average_degree(), g.density())

g.run_k_core_decomposition()
print(g.coreness(42))        # 0 for an unknown node or before decomposition

# Coreness is maintained incrementally after the decomposition has run.
g.add_edge(42, 7)
g.remove_edge(42, 7)

triangles = k_cliques(g, 3)              # sorted list of sorted tuples
big = k_clique_decomposition(g, 5)       # sorted lists, largest first

best = densest_subgraph_approx(g)        # DensestSubgraph(density, nodes)
print(best.density, best.nodes)

export_to_dot(g, "results/graph.dot",
              node_styles={42: "style=filled, fillcolor=red"},
              edge_styles={(7, 42): "color=blue"})
```

Edge styles are keyed by `(min(u, v), max(u, v))`. `render_dot` returns
the same DOT text as a string instead of writing it.

Density in `coregraph.densest` is edges per node. Both densest-subgraph
functions return `None` for a graph without nodes.

A graph can also be built in memory:

```python
g = Graph()
g.add_edge(1, 2)
g.add_edge(2, 3)
print(g.neighbors(2))   # frozenset({1, 3})
print(g.edges())        # [(1, 2), (2, 3)]
```

A negative `k` in the clique functions raises `ValueError`. In `Dinic`,
a node outside the network raises `IndexError`. `max_flow` raises
`ValueError` when the source and the sink are the same node.

### Report files

Each analysis has a function that writes a report file:

- `Graph.write_k_core(path)`: one `id coreness` line per node
- `write_k_cliques(graph, k, path)` and
  `write_k_clique_decomposition(graph, k, path)`: one clique per line,
  with the node ids separated by spaces
- `write_densest_exact(graph, path)` and `write_densest_approx(graph, path)`:
  the density on one line, then the node ids on the next. Nothing is
  written for a graph without nodes.

The first line of every report is the elapsed time in milliseconds.
Missing parent directories are created.

## Command line

```
coregraph --help
coregraph CondMat.txt Amazon.txt --data-dir data --results-dir results
```

The `coregraph` command takes dataset file names. With none given, it
uses `CondMat.txt`, `Amazon.txt` and `Gowalla.txt`. Each dataset is
read from `--data-dir`, which defaults to `../data`. The command prints
the dataset's node count, edge count, average degree, density and
largest coreness. It then writes `<name>_kcore.dot` to `--results-dir`,
which defaults to `../results`. In that file, nodes whose coreness is
above half the maximum are filled on a gradient from yellow to red and
labelled with their coreness. If a dataset cannot be read, the command
reports it on standard error and goes on to the next dataset.

## What it does not do

The command runs only the k-core analysis. Densest subgraphs and cliques
are available only through the library functions and report writers
above. The package draws no pictures itself: it writes DOT files for
Graphviz or another tool to render.