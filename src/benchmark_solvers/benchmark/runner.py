import logging
import time
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Type

import pandas as pd

from benchmark_solvers.config import Settings
from benchmark_solvers.tsp import BruteForceSolver, DistanceMatrix, HeldKarpSolver, TooLargeError
from benchmark_solvers.tsp.base import TSPSolverBase

logger = logging.getLogger(__name__)


@dataclass
class RunResult:
    matrix: str
    solver: str
    run: int
    n: int
    cost: Optional[int]
    time_sec: float
    route: List[int] = field(default_factory=list)
    skipped: bool = False


def size_limit(solver_cls: Type[TSPSolverBase], settings: Settings) -> Optional[int]:
    """Plafond configuré pour un solveur exact, None pour les heuristiques."""
    if issubclass(solver_cls, BruteForceSolver):
        return settings.brute_force_max_n
    if issubclass(solver_cls, HeldKarpSolver):
        return settings.held_karp_max_n
    return None


class BenchmarkRunner:
    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or Settings()
        self.results: List[RunResult] = []

    def run_on_matrix(
        self,
        matrix_name: str,
        matrix,
        solver_classes: Sequence[Type[TSPSolverBase]],
        repeat: int = 1,
    ) -> List[RunResult]:
        matrix = DistanceMatrix(matrix)
        n = matrix.size()

        for solver_cls in solver_classes:
            solver = solver_cls(matrix, max_size=size_limit(solver_cls, self.settings))
            logger.info("[%s] %s sur %d villes (%d runs)", matrix_name, solver.name, n, repeat)

            for r in range(1, repeat + 1):
                t0 = time.perf_counter()
                try:
                    route, cost = solver.solve()
                except TooLargeError as exc:
                    logger.warning("[%s] %s ignoré : %s", matrix_name, solver.name, exc)
                    self.results.append(
                        RunResult(matrix=matrix_name, solver=solver.name, run=r, n=n,
                                  cost=None, time_sec=0.0, skipped=True)
                    )
                    # inutile de répéter : le plafond ne change pas d'un run à l'autre
                    break
                t1 = time.perf_counter()

                self.results.append(
                    RunResult(
                        matrix=matrix_name,
                        solver=solver.name,
                        run=r,
                        n=n,
                        cost=cost,
                        time_sec=t1 - t0,
                        route=route,
                    )
                )

        return self.results

    def run_on_multiple_matrices(
        self,
        matrices: Dict[str, DistanceMatrix],
        solver_classes: Sequence[Type[TSPSolverBase]],
        repeat: int = 1,
    ) -> List[RunResult]:
        for name, matrix in matrices.items():
            self.run_on_matrix(name, matrix, solver_classes, repeat)
        return self.results

    def to_dataframe(self) -> pd.DataFrame:
        columns = list(RunResult.__dataclass_fields__)
        return pd.DataFrame([r.__dict__ for r in self.results], columns=columns)
