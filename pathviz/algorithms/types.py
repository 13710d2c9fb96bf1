from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from math import inf
from typing import Dict, Iterable, List, NamedTuple, Optional, Sequence, Tuple

from .errors import InvalidRequestError, PathReconstructionError


@dataclass(frozen=True)
class AlgorithmSpec:
    """Metadata for an algorithm plugin."""

    id: str
    name: str
    description: str = ""


class CellKind(str, Enum):
    EMPTY = "empty"
    WALL = "wall"
    START = "start"
    END = "end"


class Coordinate(NamedTuple):
    """A (row, col) cell position. Tuple ordering is row-major."""

    row: int
    col: int

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"


# up, down, left, right. Every strategy's tie-breaking depends on this order.
DIRECTIONS = ((-1, 0), (1, 0), (0, -1), (0, 1))


@dataclass
class RunOptions:
    # Caps the recorded trace only; the search itself is unaffected.
    max_visited: Optional[int] = None


@dataclass(frozen=True)
class Grid:
    """A rectangular board of cell kinds.

    Notes
    -----
    - Rows are indexed top to bottom, columns left to right, both from 0.
    - The grid is 4-connected: up, down, left, right. No diagonals.
    - Every traversable step costs 1.

    The engine never mutates a grid; edits happen between searches by
    building a new one.
    """

    cells: Tuple[Tuple[CellKind, ...], ...]

    def __post_init__(self) -> None:
        if not self.cells or not self.cells[0]:
            raise InvalidRequestError("grid must have at least one row and one column")
        width = len(self.cells[0])
        for r, row in enumerate(self.cells):
            if len(row) != width:
                raise InvalidRequestError(
                    f"grid is not rectangular: row {r} has {len(row)} columns, expected {width}"
                )

    @classmethod
    def from_tags(cls, rows: Sequence[Sequence[str]]) -> "Grid":
        """Build a grid from nested lists of wire tags ("empty", "wall", ...)."""
        out = []
        for r, row in enumerate(rows):
            kinds = []
            for c, tag in enumerate(row):
                try:
                    kinds.append(CellKind(str(tag).lower()))
                except ValueError:
                    raise InvalidRequestError(f"unknown cell tag {tag!r} at ({r}, {c})") from None
            out.append(tuple(kinds))
        return cls(cells=tuple(out))

    @property
    def height(self) -> int:
        return len(self.cells)

    @property
    def width(self) -> int:
        return len(self.cells[0])

    def size(self) -> int:
        return self.width * self.height

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def cell_kind(self, coord: Coordinate) -> CellKind:
        return self.cells[coord.row][coord.col]

    def is_traversable(self, row: int, col: int) -> bool:
        return self.in_bounds(row, col) and self.cells[row][col] is not CellKind.WALL

    def neighbors(self, coord: Coordinate) -> List[Coordinate]:
        """Traversable 4-neighbors of ``coord`` in up, down, left, right order."""
        out = []
        for dr, dc in DIRECTIONS:
            r = coord.row + dr
            c = coord.col + dc
            if self.is_traversable(r, c):
                out.append(Coordinate(r, c))
        return out

    def traversable_cells(self) -> Iterable[Coordinate]:
        """Yield every non-wall coordinate in row-major order."""
        for r, row in enumerate(self.cells):
            for c, kind in enumerate(row):
                if kind is not CellKind.WALL:
                    yield Coordinate(r, c)

    def find(self, kind: CellKind) -> List[Coordinate]:
        return [
            Coordinate(r, c)
            for r, row in enumerate(self.cells)
            for c, k in enumerate(row)
            if k is kind
        ]


class SearchNode(NamedTuple):
    """Frontier record. ``parent`` is a back-reference used only for reconstruction."""

    coord: Coordinate
    cost: int
    heuristic: int = 0
    parent: Optional[Coordinate] = None


@dataclass
class SearchResult:
    visited: List[Coordinate] = field(default_factory=list)
    path: List[Coordinate] = field(default_factory=list)
    found: bool = False
    expanded: int = 0
    cost: float = inf


def manhattan(a: Coordinate, b: Coordinate) -> int:
    return abs(a.row - b.row) + abs(a.col - b.col)


def record_visit(visited: List[Coordinate], coord: Coordinate, options: RunOptions) -> None:
    if options.max_visited is None or len(visited) < options.max_visited:
        visited.append(coord)


def reconstruct_path(
    parents: Dict[Coordinate, Coordinate], start: Coordinate, goal: Coordinate
) -> List[Coordinate]:
    if goal == start:
        return [start]
    out: List[Coordinate] = [goal]
    cur = goal
    # A valid chain has at most one step per parent entry.
    for _ in range(len(parents)):
        cur = parents.get(cur)
        if cur is None:
            raise PathReconstructionError(f"parent chain from {goal} broke before reaching {start}")
        out.append(cur)
        if cur == start:
            out.reverse()
            return out
    raise PathReconstructionError(f"parent chain from {goal} does not reach {start}")


def finish(
    visited: List[Coordinate],
    parents: Dict[Coordinate, Coordinate],
    start: Coordinate,
    goal: Coordinate,
    expanded: int,
    found: bool,
) -> SearchResult:
    """Package a strategy's trace and parent map into a SearchResult."""
    if not found:
        return SearchResult(visited=visited, path=[], found=False, expanded=expanded, cost=inf)
    path = reconstruct_path(parents, start, goal)
    return SearchResult(visited=visited, path=path, found=True, expanded=expanded, cost=float(len(path) - 1))
