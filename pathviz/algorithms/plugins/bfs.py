from __future__ import annotations

from collections import deque
from typing import Deque, Dict, List, Set

from ..types import (
    AlgorithmSpec,
    Coordinate,
    Grid,
    RunOptions,
    SearchNode,
    SearchResult,
    finish,
    record_visit,
)

ALGORITHM = AlgorithmSpec(
    id="bfs",
    name="BFS",
    description="Breadth-first search. Shortest path on an unweighted grid.",
)


def run(grid: Grid, start: Coordinate, goal: Coordinate, options: RunOptions) -> SearchResult:
    parents: Dict[Coordinate, Coordinate] = {}
    discovered: Set[Coordinate] = {start}
    q: Deque[SearchNode] = deque([SearchNode(start, 0)])

    visited_out: List[Coordinate] = []
    expanded = 0

    while q:
        cur = q.popleft()
        expanded += 1
        record_visit(visited_out, cur.coord, options)

        if cur.coord == goal:
            return finish(visited_out, parents, start, goal, expanded, found=True)

        # Marked at enqueue time so each cell is queued at its shallowest depth only.
        for nxt in grid.neighbors(cur.coord):
            if nxt in discovered:
                continue
            discovered.add(nxt)
            parents[nxt] = cur.coord
            q.append(SearchNode(nxt, cur.cost + 1, parent=cur.coord))

    return finish(visited_out, parents, start, goal, expanded, found=False)
