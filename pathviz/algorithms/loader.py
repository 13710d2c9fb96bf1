from __future__ import annotations

import importlib
import logging
import pkgutil
from dataclasses import dataclass
from typing import Callable, Dict, List

from .types import AlgorithmSpec, Coordinate, Grid, RunOptions, SearchResult

logger = logging.getLogger(__name__)


@dataclass
class LoadedAlgorithm:
    spec: AlgorithmSpec
    run: Callable[[Grid, Coordinate, Coordinate, RunOptions], SearchResult]


def load_plugins() -> Dict[str, LoadedAlgorithm]:
    """Discover and import all algorithms from pathviz/algorithms/plugins.

    Each plugin module must define:
      - ALGORITHM: AlgorithmSpec
      - run(grid: Grid, start: Coordinate, goal: Coordinate, options: RunOptions) -> SearchResult

    A plugin settles cells one at a time, records each settled cell once via
    ``record_visit``, stops as soon as it settles ``goal`` and hands its
    parent map to ``finish``. Modules whose name starts with ``_`` are skipped.

    Returns
    -------
    dict mapping algorithm_id -> LoadedAlgorithm
    """

    registry: Dict[str, LoadedAlgorithm] = {}

    # loader.py lives in the `pathviz.algorithms` package.
    # Plugins live in `pathviz.algorithms.plugins`.
    package_name = __package__ + '.plugins'
    package = importlib.import_module(package_name)

    for m in pkgutil.iter_modules(package.__path__):
        if m.name.startswith('_'):
            continue
        module = importlib.import_module(f"{package_name}.{m.name}")
        spec = getattr(module, 'ALGORITHM', None)
        run_fn = getattr(module, 'run', None)
        if spec is None or run_fn is None:
            logger.debug("Skipping plugin module %s: no ALGORITHM/run", m.name)
            continue
        register_plugin(registry, m.name, spec, run_fn)

    logger.info("Loaded %d algorithm plugins: %s", len(registry), ", ".join(sorted(registry)))
    return registry


def register_plugin(registry: Dict[str, LoadedAlgorithm], module_name: str, spec, run_fn) -> None:
    if not isinstance(spec, AlgorithmSpec):
        raise TypeError(f"Plugin {module_name} ALGORITHM must be AlgorithmSpec")
    if not callable(run_fn):
        raise TypeError(f"Plugin {module_name} run must be callable")
    if spec.id in registry:
        raise ValueError(f"Duplicate algorithm id: {spec.id}")
    registry[spec.id] = LoadedAlgorithm(spec=spec, run=run_fn)


def list_algorithms(registry: Dict[str, LoadedAlgorithm]) -> List[AlgorithmSpec]:
    return [registry[k].spec for k in sorted(registry.keys())]
