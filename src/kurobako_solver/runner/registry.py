from __future__ import annotations

import logging

from kurobako_solver.errors import CapabilityError
from kurobako_solver.solver.base import Solver, SolverFactory
from kurobako_solver.solver.types import ProblemSpec

logger = logging.getLogger(__name__)


class SolverRegistry:
    def __init__(self, factory: SolverFactory) -> None:
        self.factory = factory
        self._solvers: dict[int, Solver] = {}

    def __len__(self) -> int:
        return len(self._solvers)

    def __contains__(self, solver_id: object) -> bool:
        return solver_id in self._solvers

    def create(self, solver_id: int, seed: int, problem: ProblemSpec) -> Solver:
        try:
            solver = self.factory.create_solver(seed, problem)
        except Exception as exc:
            raise CapabilityError("create_solver", exc) from exc
        if solver_id in self._solvers:
            logger.info("registry replace solver_id=%s", solver_id)
        self._solvers[solver_id] = solver
        return solver

    def drop(self, solver_id: int) -> bool:
        return self._solvers.pop(solver_id, None) is not None

    def get(self, solver_id: int) -> Solver | None:
        return self._solvers.get(solver_id)

    def ids(self) -> list[int]:
        return sorted(self._solvers)
