"""Validated entry point into the search strategies.

Callers hand over a grid, two coordinates and an algorithm id; the engine
checks the request, runs the selected plugin to completion and returns its
SearchResult. Nothing is cached between calls.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Dict, Optional

from .errors import InvalidRequestError, UnknownAlgorithmError
from .loader import LoadedAlgorithm, load_plugins
from .types import Coordinate, Grid, RunOptions, SearchResult

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def default_registry() -> Dict[str, LoadedAlgorithm]:
    return load_plugins()


def resolve_algorithm(algorithm: str, registry: Dict[str, LoadedAlgorithm]) -> LoadedAlgorithm:
    if not isinstance(algorithm, str):
        raise InvalidRequestError(f"algorithm must be a string, got {algorithm!r}")
    algo = registry.get(algorithm.strip().lower())
    if algo is None:
        raise UnknownAlgorithmError(algorithm)
    return algo


def to_coordinate(value, label: str) -> Coordinate:
    try:
        row, col = value
    except (TypeError, ValueError):
        raise InvalidRequestError(f"{label} must be a (row, col) pair, got {value!r}") from None
    if any(isinstance(v, bool) or not isinstance(v, int) for v in (row, col)):
        raise InvalidRequestError(f"{label} must have integer row and col, got {value!r}")
    return Coordinate(row, col)


def validate_request(grid: Grid, start: Coordinate, goal: Coordinate) -> None:
    for label, coord in (("start", start), ("end", goal)):
        if not grid.in_bounds(coord.row, coord.col):
            raise InvalidRequestError(
                f"{label} {coord} is outside the {grid.height}x{grid.width} grid"
            )
        if not grid.is_traversable(coord.row, coord.col):
            raise InvalidRequestError(f"{label} {coord} is a wall")


def find_path(
    grid: Grid,
    start: Coordinate,
    goal: Coordinate,
    algorithm: str,
    options: Optional[RunOptions] = None,
    registry: Optional[Dict[str, LoadedAlgorithm]] = None,
) -> SearchResult:
    if registry is None:
        registry = default_registry()
    algo = resolve_algorithm(algorithm, registry)
    start = to_coordinate(start, "start")
    goal = to_coordinate(goal, "end")
    validate_request(grid, start, goal)

    result = algo.run(grid, start, goal, options or RunOptions())
    logger.debug(
        "%s on %dx%d grid %s -> %s: found=%s expanded=%d path_len=%d",
        algo.spec.id,
        grid.height,
        grid.width,
        start,
        goal,
        result.found,
        result.expanded,
        len(result.path),
    )
    return result
