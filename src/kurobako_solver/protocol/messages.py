from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, Field, TypeAdapter

from kurobako_solver.solver.spec import SolverSpec
from kurobako_solver.solver.types import EvaluatedTrial, NextTrial, ProblemSpec, Uint64


class SolverSpecCast(BaseModel):
    type: Literal["SOLVER_SPEC_CAST"] = "SOLVER_SPEC_CAST"
    spec: SolverSpec


class AskReply(BaseModel):
    type: Literal["ASK_REPLY"] = "ASK_REPLY"
    trial: NextTrial
    next_trial_id: Uint64


class TellReply(BaseModel):
    type: Literal["TELL_REPLY"] = "TELL_REPLY"


class CreateSolverCast(BaseModel):
    type: Literal["CREATE_SOLVER_CAST"] = "CREATE_SOLVER_CAST"
    solver_id: Uint64
    random_seed: Uint64
    problem: ProblemSpec


class DropSolverCast(BaseModel):
    type: Literal["DROP_SOLVER_CAST"] = "DROP_SOLVER_CAST"
    solver_id: Uint64


class AskCall(BaseModel):
    type: Literal["ASK_CALL"] = "ASK_CALL"
    solver_id: Uint64
    next_trial_id: Uint64


class TellCall(BaseModel):
    type: Literal["TELL_CALL"] = "TELL_CALL"
    solver_id: Uint64
    trial: EvaluatedTrial


InboundMessage = Annotated[
    CreateSolverCast | DropSolverCast | AskCall | TellCall,
    Field(discriminator="type"),
]
OutboundMessage = Annotated[
    SolverSpecCast | AskReply | TellReply,
    Field(discriminator="type"),
]

INBOUND_ADAPTER: TypeAdapter[InboundMessage] = TypeAdapter(InboundMessage)
OUTBOUND_ADAPTER: TypeAdapter[OutboundMessage] = TypeAdapter(OutboundMessage)

INBOUND_TYPES = frozenset(
    {"CREATE_SOLVER_CAST", "DROP_SOLVER_CAST", "ASK_CALL", "TELL_CALL"}
)
OUTBOUND_TYPES = frozenset({"SOLVER_SPEC_CAST", "ASK_REPLY", "TELL_REPLY"})
