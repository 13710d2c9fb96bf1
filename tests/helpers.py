from collections import deque
from typing import Dict

from pathviz.algorithms.types import CellKind, Coordinate, Grid

ALGORITHM_IDS = ["bfs", "dfs", "dijkstra", "astar"]

SYMBOLS = {".": CellKind.EMPTY, "#": CellKind.WALL, "S": CellKind.START, "E": CellKind.END}


def parse_grid(text: str) -> Grid:
    """Build a grid from an ASCII picture: '.' empty, '#' wall, 'S' start, 'E' end."""
    rows = [tuple(SYMBOLS[ch] for ch in line.strip()) for line in text.strip().splitlines()]
    return Grid(cells=tuple(rows))


def bfs_distances(grid: Grid, start: Coordinate) -> Dict[Coordinate, int]:
    """Reference distances from ``start`` to every reachable cell."""
    dist = {start: 0}
    q = deque([start])
    while q:
        cur = q.popleft()
        for nxt in grid.neighbors(cur):
            if nxt not in dist:
                dist[nxt] = dist[cur] + 1
                q.append(nxt)
    return dist


def assert_valid_path(grid: Grid, path, start: Coordinate, goal: Coordinate) -> None:
    assert path[0] == start
    assert path[-1] == goal
    for c in path:
        assert grid.is_traversable(c.row, c.col)
    for a, b in zip(path, path[1:]):
        assert abs(a.row - b.row) + abs(a.col - b.col) == 1


def endpoints(grid: Grid):
    return grid.find(CellKind.START)[0], grid.find(CellKind.END)[0]
