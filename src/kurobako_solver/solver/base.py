from __future__ import annotations

from typing import Protocol, runtime_checkable

from kurobako_solver.solver.idgen import TrialIdGenerator
from kurobako_solver.solver.spec import SolverSpec
from kurobako_solver.solver.types import EvaluatedTrial, NextTrial, ProblemSpec


@runtime_checkable
class Solver(Protocol):
    def ask(self, idg: TrialIdGenerator) -> NextTrial:
        ...

    def tell(self, trial: EvaluatedTrial) -> None:
        ...


@runtime_checkable
class SolverFactory(Protocol):
    def specification(self) -> SolverSpec:
        ...

    def create_solver(self, seed: int, problem: ProblemSpec) -> Solver:
        ...
