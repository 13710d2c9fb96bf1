from __future__ import annotations

import heapq
from itertools import count
from typing import Dict, List, Set, Tuple

from ..types import (
    AlgorithmSpec,
    Coordinate,
    Grid,
    RunOptions,
    SearchNode,
    SearchResult,
    finish,
    manhattan,
    record_visit,
)

ALGORITHM = AlgorithmSpec(
    id="astar",
    name="A*",
    description="A* with the Manhattan distance heuristic (admissible on a 4-connected unit grid).",
)


def run(grid: Grid, start: Coordinate, goal: Coordinate, options: RunOptions) -> SearchResult:
    g: Dict[Coordinate, int] = {start: 0}
    parents: Dict[Coordinate, Coordinate] = {}
    closed: Set[Coordinate] = set()
    tie = count()

    # (f, h, insertion order, node). Stale entries are dropped on pop.
    h0 = manhattan(start, goal)
    pq: List[Tuple[int, int, int, SearchNode]] = [(h0, h0, next(tie), SearchNode(start, 0, h0))]

    visited_out: List[Coordinate] = []
    expanded = 0

    while pq:
        _f, _h, _seq, node = heapq.heappop(pq)
        cur = node.coord
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
            ng = node.cost + 1
            if nxt not in g or ng < g[nxt]:
                g[nxt] = ng
                parents[nxt] = cur
                h = manhattan(nxt, goal)
                heapq.heappush(pq, (ng + h, h, next(tie), SearchNode(nxt, ng, h, cur)))

    return finish(visited_out, parents, start, goal, expanded, found=False)
