"""Tests for request validation and dispatch in the engine."""

import pytest

from helpers import parse_grid
from pathviz.algorithms.engine import default_registry, find_path, resolve_algorithm
from pathviz.algorithms.errors import InvalidRequestError, UnknownAlgorithmError
from pathviz.algorithms.types import Coordinate, Grid

C = Coordinate


@pytest.fixture
def grid() -> Grid:
    return parse_grid(
        """
        S.#
        ...
        ..E
        """
    )


class TestDispatch:
    def test_default_registry_is_shared(self):
        assert default_registry() is default_registry()

    def test_algorithm_id_case_insensitive(self, grid):
        result = find_path(grid, C(0, 0), C(2, 2), " BFS ")
        assert result.found
        assert len(result.path) == 5

    def test_plain_tuples_accepted(self, grid):
        result = find_path(grid, (0, 0), (2, 2), "astar")
        assert result.path[0] == C(0, 0)
        assert result.path[-1] == C(2, 2)

    def test_unknown_algorithm(self, grid, registry):
        with pytest.raises(UnknownAlgorithmError) as exc_info:
            resolve_algorithm("greedy", registry)
        assert exc_info.value.algorithm_id == "greedy"

    def test_unknown_algorithm_is_invalid_request(self, grid):
        with pytest.raises(InvalidRequestError, match="Unknown algorithm: jps"):
            find_path(grid, C(0, 0), C(2, 2), "jps")

    def test_explicit_registry(self, grid, registry):
        result = find_path(grid, C(0, 0), C(2, 2), "dijkstra", registry=registry)
        assert result.found


class TestValidation:
    """Malformed requests are rejected before any search runs."""

    @pytest.mark.parametrize("start", [C(-1, 0), C(0, 3), C(3, 0)])
    def test_start_out_of_bounds(self, grid, start):
        with pytest.raises(InvalidRequestError, match="start .* outside"):
            find_path(grid, start, C(2, 2), "bfs")

    def test_end_out_of_bounds(self, grid):
        with pytest.raises(InvalidRequestError, match="end .* outside"):
            find_path(grid, C(0, 0), C(5, 5), "bfs")

    def test_start_on_wall(self, grid):
        with pytest.raises(InvalidRequestError, match="start .* wall"):
            find_path(grid, C(0, 2), C(2, 2), "dfs")

    def test_end_on_wall(self, grid):
        with pytest.raises(InvalidRequestError, match="end .* wall"):
            find_path(grid, C(0, 0), C(0, 2), "dfs")

    def test_untagged_endpoints_allowed(self, grid):
        """Start and end need not carry start/end tags."""
        result = find_path(grid, C(1, 0), C(1, 2), "bfs")
        assert result.path == [C(1, 0), C(1, 1), C(1, 2)]

    @pytest.mark.parametrize("algorithm", [None, 3, ["bfs"]])
    def test_non_string_algorithm(self, grid, algorithm):
        with pytest.raises(InvalidRequestError, match="algorithm must be a string"):
            find_path(grid, C(0, 0), C(2, 2), algorithm)

    @pytest.mark.parametrize("start", [(0,), (0, 1, 2), None, 7, "ab", (0.5, 1), (True, 0)])
    def test_malformed_start(self, grid, start):
        with pytest.raises(InvalidRequestError, match="start must"):
            find_path(grid, start, C(2, 2), "bfs")

    def test_malformed_end(self, grid):
        with pytest.raises(InvalidRequestError, match="end must"):
            find_path(grid, C(0, 0), (2,), "astar")
