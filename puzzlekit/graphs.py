"""Shortest-path and breadth-first-search puzzles."""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Sequence

FRESH = 1
ROTTEN = 2
_DIRECTIONS = ((0, 1), (0, -1), (1, 0), (-1, 0))


def min_cost(
    max_time: int, edges: Sequence[Sequence[int]], passing_fees: Sequence[int]
) -> int:
    """Cheapest total fee from city 0 to city n-1 within ``max_time``, or -1."""
    n = len(passing_fees)
    graph: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for a, b, duration in edges:
        graph[a].append((b, duration))
        graph[b].append((a, duration))

    best_cost = [math.inf] * n
    best_time = [math.inf] * n
    best_time[0] = 0
    heap = [(passing_fees[0], 0, 0)]
    while heap:
        cost, node, elapsed = heapq.heappop(heap)
        if node == n - 1:
            return cost
        for neighbour, duration in graph[node]:
            new_cost = cost + passing_fees[neighbour]
            new_time = elapsed + duration
            if new_time > max_time:
                continue
            if new_cost < best_cost[neighbour] or new_time < best_time[neighbour]:
                best_cost[neighbour] = new_cost
                best_time[neighbour] = new_time
                heapq.heappush(heap, (new_cost, neighbour, new_time))
    return -1


def num_buses_to_destination(
    routes: Sequence[Sequence[int]], source: int, target: int
) -> int:
    """Fewest buses to ride from ``source`` to ``target``, or -1."""
    if source == target:
        return 0

    graph: list[list[int]] = [[] for _ in routes]
    stops: list[set[int]] = []
    source_routes: list[int] = []
    target_routes: set[int] = set()
    for i, route in enumerate(routes):
        for stop in route:
            if stop == source:
                source_routes.append(i)
            if stop == target:
                target_routes.add(i)
            for j, earlier in enumerate(stops):
                if stop in earlier:
                    graph[i].append(j)
                    graph[j].append(i)
        if source_routes and source_routes[-1] in target_routes:
            return 1
        stops.append(set(route))

    visited = [False] * len(routes)
    queue: deque[tuple[int, int]] = deque()
    for route in source_routes:
        queue.append((route, 1))
        visited[route] = True

    while queue:
        route, buses = queue.popleft()
        for neighbour in graph[route]:
            if neighbour in target_routes:
                return buses + 1
            if not visited[neighbour]:
                visited[neighbour] = True
                queue.append((neighbour, buses + 1))
    return -1


def oranges_rotting(grid: Sequence[Sequence[int]]) -> int:
    """Minutes until no fresh orange remains, or -1 if some never rot."""
    cells = [list(row) for row in grid]
    rows = len(cells)
    cols = len(cells[0]) if rows else 0
    fresh = sum(row.count(FRESH) for row in cells)
    frontier = [
        (r, c) for r, row in enumerate(cells) for c, cell in enumerate(row) if cell == ROTTEN
    ]

    minutes = 0
    while fresh and frontier:
        minutes += 1
        spread = []
        for r, c in frontier:
            for dr, dc in _DIRECTIONS:
                nr, nc = r + dr, c + dc
                if 0 <= nr < rows and 0 <= nc < cols and cells[nr][nc] == FRESH:
                    cells[nr][nc] = ROTTEN
                    fresh -= 1
                    spread.append((nr, nc))
        frontier = spread
    return minutes if fresh == 0 else -1