from __future__ import annotations

from typing import Dict, List, Set

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
    id="dfs",
    name="DFS",
    description="Depth-first search. Finds a path, not necessarily the shortest.",
)


def run(grid: Grid, start: Coordinate, goal: Coordinate, options: RunOptions) -> SearchResult:
    parents: Dict[Coordinate, Coordinate] = {}
    visited_flags: Set[Coordinate] = set()
    stack: List[SearchNode] = [SearchNode(start, 0)]

    visited_out: List[Coordinate] = []
    expanded = 0

    while stack:
        cur = stack.pop()
        # A cell can sit on the stack several times; only its first pop counts.
        if cur.coord in visited_flags:
            continue
        visited_flags.add(cur.coord)
        if cur.parent is not None:
            parents[cur.coord] = cur.parent

        expanded += 1
        record_visit(visited_out, cur.coord, options)

        if cur.coord == goal:
            return finish(visited_out, parents, start, goal, expanded, found=True)

        # Pushed in reverse so the up neighbor is popped first.
        for nxt in reversed(grid.neighbors(cur.coord)):
            if nxt in visited_flags:
                continue
            stack.append(SearchNode(nxt, cur.cost + 1, parent=cur.coord))

    return finish(visited_out, parents, start, goal, expanded, found=False)
