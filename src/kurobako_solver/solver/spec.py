from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Capability(str, Enum):
    UNIFORM_CONTINUOUS = "UNIFORM_CONTINUOUS"
    UNIFORM_DISCRETE = "UNIFORM_DISCRETE"
    LOG_UNIFORM_CONTINUOUS = "LOG_UNIFORM_CONTINUOUS"
    LOG_UNIFORM_DISCRETE = "LOG_UNIFORM_DISCRETE"
    CATEGORICAL = "CATEGORICAL"
    CONDITIONAL = "CONDITIONAL"
    MULTI_OBJECTIVE = "MULTI_OBJECTIVE"
    CONCURRENT = "CONCURRENT"


def all_capabilities() -> list[Capability]:
    return list(Capability)


class SolverSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    attrs: dict[str, str] = Field(default_factory=dict)
    capabilities: list[Capability] = Field(default_factory=all_capabilities)

    @classmethod
    def new(cls, name: str) -> SolverSpec:
        return cls(name=name)

    @field_validator("capabilities")
    @classmethod
    def _normalize_capabilities(cls, value: list[Capability]) -> list[Capability]:
        present = set(value)
        return [item for item in Capability if item in present]

    def supports(self, capability: Capability) -> bool:
        return capability in self.capabilities
