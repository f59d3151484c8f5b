from __future__ import annotations

from kurobako_solver.solver.base import Solver, SolverFactory
from kurobako_solver.solver.idgen import IdAllocation, TrialIdGenerator
from kurobako_solver.solver.spec import Capability, SolverSpec, all_capabilities
from kurobako_solver.solver.types import EvaluatedTrial, NextTrial, ProblemSpec

__all__ = [
    "Capability",
    "EvaluatedTrial",
    "IdAllocation",
    "NextTrial",
    "ProblemSpec",
    "Solver",
    "SolverFactory",
    "SolverSpec",
    "TrialIdGenerator",
    "all_capabilities",
]
