# navigate

Shortest-path planning with Dijkstra's algorithm over graphs you describe
with a function rather than a data structure.

You supply a start node, a `neighbors` function returning `(neighbor, cost)`
pairs for a node, and a `goal` predicate. Nodes can be any hashable value.
Costs can be any values that can be added to `0` and compared, such as
integers, floats or `fractions.Fraction`.

## Installation

```
pip install .
```

## Finding a path

```python
from navigate.dijkstra import dijkstra, NoPathFound

graph = {
    "A": [("B", 1), ("C", 3)],
    "B": [("D", 5)],
    "C": [("D", 1)],
    "D": [],
}

path = dijkstra("A", lambda n: graph.get(n, []), lambda n: n == "D")
print(path)  # ['A', 'C', 'D']
```

Nodes are expanded cheapest first, and the search stops at the first node
that satisfies `goal`. If no reachable node does, `NoPathFound` is raised.
`NoPathFound` and `GoalFailure` are both subclasses of `PathPlannerError`.

## Exploring costs

`dijkstra_nodes_partial(start, neighbors, goal)` returns the nodes discovered
up to the moment the goal was reached. `dijkstra_nodes_full(start, neighbors)`
explores every node reachable from `start`. Both return a dict, in discovery
order, mapping each node to a `(parent_index, cost)` pair. `parent_index` is
the position of the parent node in the dict, and is `None` for the start node.

`dijkstra_path(node_map, goal_index)` follows the parent indices in such a
dict back to the start and returns the path from the start to the node at
position `goal_index`. It raises `NoPathFound` if an index is out of range or
the parent links do not lead back to a start node.

```python
from navigate.dijkstra import dijkstra_nodes_full, dijkstra_path

node_map = dijkstra_nodes_full("A", lambda n: graph.get(n, []))
costs = {node: cost for node, (_, cost) in node_map.items()}
print(costs)  # {'A': 0, 'B': 1, 'C': 3, 'D': 4}

print(dijkstra_path(node_map, 3))  # ['A', 'C', 'D']
```

## Scope

The package is a library only: it offers Dijkstra's algorithm and nothing
else. It has no command-line tool, and no other search algorithms such as A*.

## Running the tests

```
pip install .[test]
pytest
```