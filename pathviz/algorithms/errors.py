from __future__ import annotations


class PathfindingError(Exception):
    """Base class for errors raised by the pathfinding engine."""


class InvalidRequestError(PathfindingError, ValueError):
    """The request was malformed and no search was attempted."""


class UnknownAlgorithmError(InvalidRequestError):
    def __init__(self, algorithm_id: str):
        super().__init__(f"Unknown algorithm: {algorithm_id}")
        self.algorithm_id = algorithm_id


class PathReconstructionError(PathfindingError, RuntimeError):
    """The parent chain did not lead back to start. This is an engine defect."""
