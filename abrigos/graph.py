"""Graph algorithms over connected shelters."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence

from .geometry import Shelter

Graph = list[list[int]]


def build_graph(shelters: Sequence[Shelter]) -> Graph:
    """Build an adjacency list linking every pair of overlapping shelters."""
    graph: Graph = [[] for _ in shelters]
    for i, first in enumerate(shelters):
        for j in range(i + 1, len(shelters)):
            if first.overlaps(shelters[j]):
                graph[i].append(j)
                graph[j].append(i)
    return graph


def bfs_farthest(graph: Sequence[Sequence[int]], start: int) -> tuple[int, int]:
    """Return (distance, node) of the first node found farthest from start."""
    distance = {start: 0}
    queue = deque([start])
    max_dist = 0
    farthest = start
    while queue:
        current = queue.popleft()
        for neighbour in graph[current]:
            if neighbour not in distance:
                distance[neighbour] = distance[current] + 1
                queue.append(neighbour)
                if distance[neighbour] > max_dist:
                    max_dist = distance[neighbour]
                    farthest = neighbour
    return max_dist, farthest


def _component(graph: Sequence[Sequence[int]], start: int) -> set[int]:
    seen = {start}
    queue = deque([start])
    while queue:
        current = queue.popleft()
        for neighbour in graph[current]:
            if neighbour not in seen:
                seen.add(neighbour)
                queue.append(neighbour)
    return seen


def max_diameter(graph: Sequence[Sequence[int]]) -> int:
    """Largest double-sweep BFS distance over all connected components."""
    visited: set[int] = set()
    largest = 0
    for node in range(len(graph)):
        if node in visited:
            continue
        _, far = bfs_farthest(graph, node)
        diameter, _ = bfs_farthest(graph, far)
        largest = max(largest, diameter)
        visited |= _component(graph, node)
    return largest


def critical_shelters(graph: Sequence[Sequence[int]]) -> list[int]:
    """Return the articulation points of the graph, in ascending order."""
    n = len(graph)
    discovery = [-1] * n
    low = [-1] * n
    critical = [False] * n
    clock = 0

    for root in range(n):
        if discovery[root] != -1:
            continue
        discovery[root] = low[root] = clock
        clock += 1
        root_children = 0
        stack = [(root, -1, iter(graph[root]))]
        while stack:
            node, parent, neighbours = stack[-1]
            for neighbour in neighbours:
                if discovery[neighbour] == -1:
                    if node == root:
                        root_children += 1
                    discovery[neighbour] = low[neighbour] = clock
                    clock += 1
                    stack.append((neighbour, node, iter(graph[neighbour])))
                    break
                if neighbour != parent:
                    low[node] = min(low[node], discovery[neighbour])
            else:
                stack.pop()
                if stack:
                    above, above_parent, _ = stack[-1]
                    low[above] = min(low[above], low[node])
                    if above_parent != -1 and low[node] >= discovery[above]:
                        critical[above] = True
        if root_children > 1:
            critical[root] = True

    return [index for index, flag in enumerate(critical) if flag]


def shortest_hops(
    graph: Sequence[Sequence[int]],
    sources: Iterable[int],
    targets: Iterable[int],
) -> int | None:
    """Fewest edges from any source to any target, or None if unreachable."""
    goal = set(targets)
    distance: dict[int, int] = {}
    queue: deque[int] = deque()
    for source in sources:
        distance[source] = 0
        queue.append(source)
    while queue:
        current = queue.popleft()
        if current in goal:
            return distance[current]
        for neighbour in graph[current]:
            if neighbour not in distance:
                distance[neighbour] = distance[current] + 1
                queue.append(neighbour)
    return None