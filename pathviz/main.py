from __future__ import annotations

import logging
import time
from typing import List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from . import config
from .algorithms.engine import find_path
from .algorithms.errors import InvalidRequestError
from .algorithms.loader import list_algorithms, load_plugins
from .algorithms.types import CellKind, Coordinate, Grid, RunOptions, SearchResult

logger = logging.getLogger(__name__)

VERSION = "1.0.0"

app = FastAPI(title="Pathfinding Visualizer Backend", version=VERSION)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

REGISTRY = load_plugins()


class AlgorithmInfo(BaseModel):
    id: str
    name: str
    description: str = ""


class CoordinateModel(BaseModel):
    row: int = Field(ge=0)
    col: int = Field(ge=0)


# No bounds here; validate_request rejects off-grid coordinates.
class RequestCoordinateModel(BaseModel):
    row: int
    col: int


class PathfindRequestModel(BaseModel):
    grid: List[List[str]]
    start: Optional[RequestCoordinateModel] = None
    end: Optional[RequestCoordinateModel] = None
    algorithm: str


class PathfindResponseModel(BaseModel):
    visitedNodes: List[CoordinateModel]
    path: List[CoordinateModel]
    success: bool
    message: str
    expanded: int
    runtimeMs: float


@app.get("/")
def root():
    return {
        "service": "Pathfinding Visualizer Backend",
        "version": VERSION,
        "status": "running",
        "endpoints": {
            "health": "/api/health",
            "algorithms": "/api/algorithms",
            "pathfind": "/api/pathfind (POST)",
        },
    }


@app.get("/api/health")
def health():
    return {"ok": True, "algorithms": len(REGISTRY)}


@app.get("/api/algorithms", response_model=list[AlgorithmInfo])
def algorithms() -> list[AlgorithmInfo]:
    out: list[AlgorithmInfo] = []
    for spec in list_algorithms(REGISTRY):
        out.append(AlgorithmInfo(id=spec.id, name=spec.name, description=spec.description))
    return out


def _endpoint(grid: Grid, given: Optional[RequestCoordinateModel], kind: CellKind) -> Coordinate:
    """Use the explicit coordinate if sent, else the single cell tagged ``kind``."""
    if given is not None:
        return Coordinate(given.row, given.col)
    tagged = grid.find(kind)
    if len(tagged) != 1:
        raise InvalidRequestError(
            f"{kind.value} not given and grid has {len(tagged)} '{kind.value}' cells (need exactly 1)"
        )
    return tagged[0]


def _to_models(coords: List[Coordinate]) -> List[CoordinateModel]:
    return [CoordinateModel(row=c.row, col=c.col) for c in coords]


@app.post("/api/pathfind", response_model=PathfindResponseModel)
def pathfind(req: PathfindRequestModel) -> PathfindResponseModel:
    try:
        grid = Grid.from_tags(req.grid)
        if grid.size() > config.MAX_CELLS:
            raise InvalidRequestError(f"grid has {grid.size()} cells, limit is {config.MAX_CELLS}")
        start = _endpoint(grid, req.start, CellKind.START)
        end = _endpoint(grid, req.end, CellKind.END)

        t0 = time.perf_counter()
        result: SearchResult = find_path(
            grid,
            start,
            end,
            req.algorithm,
            options=RunOptions(max_visited=config.MAX_VISITED),
            registry=REGISTRY,
        )
        t1 = time.perf_counter()
    except InvalidRequestError as e:
        logger.warning("Rejected pathfind request: %s", e)
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("Algorithm %s crashed", req.algorithm)
        raise HTTPException(status_code=500, detail=f"Algorithm crashed: {type(e).__name__}: {e}")

    name = REGISTRY[req.algorithm.strip().lower()].spec.name
    message = f"Path found using {name}" if result.found else f"No path found using {name}"

    return PathfindResponseModel(
        visitedNodes=_to_models(result.visited),
        path=_to_models(result.path),
        success=result.found,
        message=message,
        expanded=int(result.expanded),
        runtimeMs=(t1 - t0) * 1000.0,
    )


def serve() -> None:
    import uvicorn

    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
    uvicorn.run("pathviz.main:app", host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    serve()
