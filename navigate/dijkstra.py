"""Shortest-path search over implicit graphs using Dijkstra's algorithm.

Graphs are described by a ``neighbors`` callable that, given a node, returns an
iterable of ``(neighbor, edge_cost)`` pairs.  Nodes must be hashable and costs
must support addition with ``0`` and ordering.

The search builds an insertion-ordered node map of the form
``{node: (parent_index, cost)}``, where ``parent_index`` is the position of the
parent node within the map, or ``None`` for the start node.
"""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Callable, Hashable, Iterable
from typing import Any, TypeVar

__all__ = [
    "PathPlannerError",
    "NoPathFound",
    "GoalFailure",
    "dijkstra",
    "dijkstra_nodes_partial",
    "dijkstra_nodes_full",
    "dijkstra_path",
]

N = TypeVar("N", bound=Hashable)
C = Any

NodeMap = dict  # {node: (parent_index | None, cost)}, insertion ordered


class PathPlannerError(Exception):
    """Base class for path planning failures."""


class NoPathFound(PathPlannerError):
    """Unable to find a path to the goal."""


class GoalFailure(PathPlannerError):
    """The goal is unreachable."""


def _build_graph(
    start: N,
    neighbors: Callable[[N], Iterable[tuple[N, C]]],
    goal: Callable[[N], bool],
) -> tuple[dict[N, tuple[int | None, C]], int | None]:
    """Expand nodes cheapest-first until ``goal`` accepts one.

    Returns the node map and the index of the goal node, or ``None`` when the
    reachable graph was exhausted without meeting the goal.
    """
    zero = 0
    node_map: dict[N, tuple[int | None, C]] = {start: (None, zero)}
    keys: list[N] = [start]
    positions: dict[N, int] = {start: 0}

    counter = itertools.count()
    queue: list[tuple[C, int, int]] = [(zero, next(counter), 0)]

    while queue:
        cost, _, index = heapq.heappop(queue)
        node = keys[index]
        best = node_map[node][1]

        # A cheaper route to this node was already expanded.
        if cost > best:
            continue

        if goal(node):
            return node_map, index

        for neighbor, edge_cost in neighbors(node):
            new_cost = edge_cost + best

            if neighbor in node_map:
                if not node_map[neighbor][1] > new_cost:
                    continue
                neighbor_index = positions[neighbor]
            else:
                neighbor_index = len(keys)
                keys.append(neighbor)
                positions[neighbor] = neighbor_index

            node_map[neighbor] = (index, new_cost)
            heapq.heappush(queue, (new_cost, next(counter), neighbor_index))

    return node_map, None


def dijkstra(
    start: N,
    neighbors: Callable[[N], Iterable[tuple[N, C]]],
    goal: Callable[[N], bool],
) -> list[N]:
    """Return the cheapest path from ``start`` to the first node meeting ``goal``.

    Raises :class:`NoPathFound` when no reachable node satisfies ``goal``.
    """
    node_map, goal_index = _build_graph(start, neighbors, goal)
    if goal_index is None:
        raise NoPathFound("no reachable node satisfies the goal")
    return dijkstra_path(node_map, goal_index)


def dijkstra_nodes_partial(
    start: N,
    neighbors: Callable[[N], Iterable[tuple[N, C]]],
    goal: Callable[[N], bool],
) -> dict[N, tuple[int | None, C]]:
    """Return the node map explored up to the point the goal is reached."""
    node_map, _ = _build_graph(start, neighbors, goal)
    return node_map


def dijkstra_nodes_full(
    start: N,
    neighbors: Callable[[N], Iterable[tuple[N, C]]],
) -> dict[N, tuple[int | None, C]]:
    """Return the node map of every node reachable from ``start``."""
    node_map, _ = _build_graph(start, neighbors, lambda _node: False)
    return node_map


def dijkstra_path(
    node_map: dict[N, tuple[int | None, C]],
    goal_index: int,
) -> list[N]:
    """Rebuild the path from the start node to the node at ``goal_index``.

    Raises :class:`NoPathFound` if an index does not refer to a node in the
    map or the parent links do not lead back to a start node.
    """
    entries = list(node_map.items())
    path: list[N] = []
    current: int | None = goal_index

    while current is not None:
        if not 0 <= current < len(entries) or len(path) >= len(entries):
            raise NoPathFound(f"invalid parent link at index {current}")
        node, (parent, _cost) = entries[current]
        path.append(node)
        current = parent

    if not path:
        raise NoPathFound("empty path")

    path.reverse()
    return path