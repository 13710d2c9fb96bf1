from __future__ import annotations

import heapq
from math import inf
from typing import Dict, List, Set, Tuple

from ..types import (
    AlgorithmSpec,
    Coordinate,
    Grid,
    RunOptions,
    SearchResult,
    finish,
    record_visit,
)

ALGORITHM = AlgorithmSpec(
    id="dijkstra",
    name="Dijkstra",
    description="Dijkstra's algorithm with unit step cost. Ties settle in row-major order.",
)


def run(grid: Grid, start: Coordinate, goal: Coordinate, options: RunOptions) -> SearchResult:
    dist: Dict[Coordinate, float] = {c: inf for c in grid.traversable_cells()}
    dist[start] = 0
    parents: Dict[Coordinate, Coordinate] = {}
    closed: Set[Coordinate] = set()

    # (dist, row, col): equal distances pop in row-major order.
    pq: List[Tuple[float, int, int]] = [(0, start.row, start.col)]
    visited_out: List[Coordinate] = []
    expanded = 0

    while pq:
        d, row, col = heapq.heappop(pq)
        cur = Coordinate(row, col)
        if cur in closed:
            continue
        closed.add(cur)

        expanded += 1
        record_visit(visited_out, cur, options)

        if cur == goal:
            return finish(visited_out, parents, start, goal, expanded, found=True)

        for nxt in grid.neighbors(cur):
            if nxt in closed:
                continue
            nd = d + 1
            if nd < dist[nxt]:
                dist[nxt] = nd
                parents[nxt] = cur
                heapq.heappush(pq, (nd, nxt.row, nxt.col))

    return finish(visited_out, parents, start, goal, expanded, found=False)
