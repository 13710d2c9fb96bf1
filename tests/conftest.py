"""
Pytest configuration and shared fixtures.

Boards are written as ASCII pictures: '.' empty, '#' wall, 'S' start, 'E' end.
"""

import pytest

from helpers import parse_grid
from pathviz.algorithms.loader import load_plugins
from pathviz.algorithms.types import Grid


@pytest.fixture(scope="session")
def registry():
    return load_plugins()


@pytest.fixture
def open_3x3() -> Grid:
    return parse_grid(
        """
        ...
        ...
        ...
        """
    )


@pytest.fixture
def maze() -> Grid:
    return parse_grid(
        """
        S....#....
        .###.#.##.
        .#...#..#.
        .#.####.#.
        .#......#.
        .######.#.
        ........#E
        """
    )


@pytest.fixture
def walled_in() -> Grid:
    """End cell in the bottom-right corner, sealed off by walls."""
    return parse_grid(
        """
        S....
        .....
        ...##
        ...#E
        """
    )
