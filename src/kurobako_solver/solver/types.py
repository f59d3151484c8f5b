from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

UINT64_MAX = 2**64 - 1

Uint64 = Annotated[int, Field(ge=0, le=UINT64_MAX, strict=True)]


def to_signed64(value: int) -> int:
    if not 0 <= value <= UINT64_MAX:
        raise ValueError(f"value out of uint64 range: {value}")
    return value - 2**64 if value >= 2**63 else value


class ProblemSpec(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str = ""
    attrs: dict[str, str] = Field(default_factory=dict)


class NextTrial(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: Uint64


class EvaluatedTrial(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: Uint64
