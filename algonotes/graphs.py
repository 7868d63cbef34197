"""Graph algorithms: bipartiteness, shortest paths, spanning trees, topological order and a maze walk."""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Callable, Iterable, Sequence
from operator import attrgetter
from typing import NamedTuple

NO_EDGE = 99999
"""Weight that marks a missing edge in the shortest-path cost matrix."""


class Edge(NamedTuple):
    """A weighted edge between two 0-based vertices."""

    source: int
    target: int
    weight: int


def _square(matrix: Sequence[Sequence[int]]) -> int:
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("the matrix must be square")
    return size


def _edges(vertex_count: int, edges: Iterable[Iterable[int]]) -> list[Edge]:
    result = [Edge(*edge) for edge in edges]
    for edge in result:
        for vertex in (edge.source, edge.target):
            if not 0 <= vertex < vertex_count:
                raise ValueError(f"vertex {vertex} out of range 0..{vertex_count - 1}")
    return result


def _adjacency(vertex_count: int, edges: Iterable[Iterable[int]]) -> list[list[tuple[int, int]]]:
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(vertex_count)]
    for edge in _edges(vertex_count, edges):
        adjacency[edge.source].append((edge.target, edge.weight))
        adjacency[edge.target].append((edge.source, edge.weight))
    return adjacency


def is_bipartite(adjacency: Sequence[Iterable[int]], source: int = 0) -> bool:
    """Two-colour the component reachable from ``source`` by breadth-first search.

    Only that component is examined; other components do not affect the answer.
    """
    colour: dict[int, int] = {source: 0}
    queue = deque([source])
    while queue:
        vertex = queue.popleft()
        for neighbour in adjacency[vertex]:
            if neighbour not in colour:
                colour[neighbour] = 1 - colour[vertex]
                queue.append(neighbour)
            elif colour[neighbour] == colour[vertex]:
                return False
    return True


def dijkstra(matrix: Sequence[Sequence[int]], source: int) -> list[int]:
    """Return shortest distances from ``source`` over a cost matrix.

    Entries equal to ``NO_EDGE`` mean there is no edge; unreachable vertices keep ``NO_EDGE``.
    """
    size = _square(matrix)
    if not 0 <= source < size:
        raise ValueError(f"source {source} out of range 0..{size - 1}")
    distance = [NO_EDGE] * size
    chosen = [False] * size
    distance[source] = 0
    chosen[source] = True
    current = source
    while not all(chosen):
        for vertex, weight in enumerate(matrix[current]):
            if not chosen[vertex] and weight != NO_EDGE:
                distance[vertex] = min(distance[vertex], distance[current] + weight)
        following = min(
            (v for v in range(size) if not chosen[v] and distance[v] < NO_EDGE),
            key=distance.__getitem__,
            default=None,
        )
        if following is None:
            break
        chosen[following] = True
        current = following
    return distance


def kruskal(vertex_count: int, edges: Iterable[Iterable[int]]) -> tuple[int, list[Edge]]:
    """Return (total weight, chosen edges) of a minimum spanning forest by Kruskal's algorithm."""
    parent = list(range(vertex_count))
    rank = [0] * vertex_count

    def find(vertex: int) -> int:
        root = vertex
        while parent[root] != root:
            root = parent[root]
        while parent[vertex] != root:
            parent[vertex], vertex = root, parent[vertex]
        return root

    chosen: list[Edge] = []
    cost = 0
    for edge in sorted(_edges(vertex_count, edges), key=attrgetter("weight")):
        a, b = find(edge.source), find(edge.target)
        if a == b:
            continue
        chosen.append(edge)
        cost += edge.weight
        if rank[a] < rank[b]:
            parent[a] = b
        elif rank[b] < rank[a]:
            parent[b] = a
        else:
            parent[b] = a
            rank[a] += 1
    return cost, chosen


def prim_parents(vertex_count: int, edges: Iterable[Iterable[int]]) -> list[int | None]:
    """Return each vertex's parent in a minimum spanning tree rooted at 0 (None for the root
    and for vertices that cannot be reached), scanning all keys on each step."""
    adjacency = _adjacency(vertex_count, edges)
    key = [math.inf] * vertex_count
    parent: list[int | None] = [None] * vertex_count
    in_tree = [False] * vertex_count
    if vertex_count == 0:
        return parent
    key[0] = 0
    for _ in range(vertex_count):
        vertex = min(
            (v for v in range(vertex_count) if not in_tree[v] and key[v] < math.inf),
            key=key.__getitem__,
            default=None,
        )
        if vertex is None:
            break
        in_tree[vertex] = True
        for neighbour, weight in adjacency[vertex]:
            if not in_tree[neighbour] and weight < key[neighbour]:
                key[neighbour] = weight
                parent[neighbour] = vertex
    return parent


def prim_parents_heap(vertex_count: int, edges: Iterable[Iterable[int]]) -> list[int | None]:
    """Like :func:`prim_parents`, but picks the next vertex from a priority queue."""
    adjacency = _adjacency(vertex_count, edges)
    key = [math.inf] * vertex_count
    parent: list[int | None] = [None] * vertex_count
    in_tree = [False] * vertex_count
    if vertex_count == 0:
        return parent
    key[0] = 0
    queue = [(0, 0)]
    while queue:
        _, vertex = heapq.heappop(queue)
        if in_tree[vertex]:
            continue
        in_tree[vertex] = True
        for neighbour, weight in adjacency[vertex]:
            if not in_tree[neighbour] and weight < key[neighbour]:
                key[neighbour] = weight
                parent[neighbour] = vertex
                heapq.heappush(queue, (weight, neighbour))
    return parent


def prim_matrix(matrix: Sequence[Sequence[int]]) -> tuple[list[Edge], int]:
    """Return (edges in the order added, total weight) of a minimum spanning tree.

    Positive matrix entries are edge weights; zero or negative means no edge.
    """
    size = _square(matrix)
    cost = [math.inf] * size
    parent: list[int | None] = [None] * size
    in_tree = [False] * size
    added: list[Edge] = []
    if size == 0:
        return added, 0
    cost[0] = 0
    for _ in range(size):
        vertex = min(
            (v for v in range(size) if not in_tree[v] and cost[v] < math.inf),
            key=cost.__getitem__,
            default=None,
        )
        if vertex is None:
            raise ValueError("the graph is not connected")
        in_tree[vertex] = True
        origin = parent[vertex]
        if origin is not None:
            added.append(Edge(origin, vertex, int(cost[vertex])))
        for neighbour, weight in enumerate(matrix[vertex]):
            if weight > 0 and weight < cost[neighbour] and not in_tree[neighbour]:
                cost[neighbour] = weight
                parent[neighbour] = vertex
    return added, int(sum(cost))


def _topological_order(
    count: int, neighbours: Callable[[int], Iterable[int]], reject_cycles: bool
) -> list[int]:
    state = [0] * count  # 0 unseen, 1 on the current path, 2 finished
    finished: list[int] = []
    for start in range(count):
        if state[start]:
            continue
        state[start] = 1
        stack = [(start, iter(neighbours(start)))]
        while stack:
            vertex, pending = stack[-1]
            for following in pending:
                if state[following] == 0:
                    state[following] = 1
                    stack.append((following, iter(neighbours(following))))
                    break
                if state[following] == 1 and reject_cycles:
                    raise ValueError("the graph has a cycle")
            else:
                stack.pop()
                state[vertex] = 2
                finished.append(vertex)
    finished.reverse()
    return finished


def topological_sort_matrix(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Return the vertices in topological order; a positive entry ``matrix[u][v]`` is an edge u -> v."""
    size = _square(matrix)
    return _topological_order(
        size,
        lambda vertex: (v for v, weight in enumerate(matrix[vertex]) if weight > 0),
        reject_cycles=True,
    )


class Graph:
    """A directed graph on vertices 0..vertex_count-1 stored as adjacency lists."""

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("vertex count must not be negative")
        self.vertex_count = vertex_count
        self.adjacency: list[list[int]] = [[] for _ in range(vertex_count)]

    def add_edge(self, source: int, target: int) -> None:
        """Add a directed edge ``source -> target``."""
        for vertex in (source, target):
            if not 0 <= vertex < self.vertex_count:
                raise ValueError(f"vertex {vertex} out of range 0..{self.vertex_count - 1}")
        self.adjacency[source].append(target)

    def topological_sort(self) -> list[int]:
        """Return the vertices ordered by reverse depth-first finishing time."""
        return _topological_order(
            self.vertex_count, self.adjacency.__getitem__, reject_cycles=False
        )


def rat_in_maze(maze: Sequence[Sequence[int]]) -> bool:
    """Report whether the top-left cell reaches the bottom-right one moving only down or right
    through cells equal to 1; the destination cell itself is not checked."""
    last = _square(maze) - 1
    stack = [(0, 0)]
    seen: set[tuple[int, int]] = set()
    while stack:
        row, column = stack.pop()
        if row == last and column == last:
            return True
        if (row, column) in seen:
            continue
        seen.add((row, column))
        if row <= last and column <= last and maze[row][column] == 1:
            stack.append((row, column + 1))
            stack.append((row + 1, column))
    return False