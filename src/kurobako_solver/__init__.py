from __future__ import annotations

from kurobako_solver.runner.controller import SolverRunner, run_solver
from kurobako_solver.solver import (
    Capability,
    EvaluatedTrial,
    NextTrial,
    ProblemSpec,
    Solver,
    SolverFactory,
    SolverSpec,
    TrialIdGenerator,
)

__all__ = [
    "Capability",
    "EvaluatedTrial",
    "NextTrial",
    "ProblemSpec",
    "Solver",
    "SolverFactory",
    "SolverRunner",
    "SolverSpec",
    "TrialIdGenerator",
    "run_solver",
]
