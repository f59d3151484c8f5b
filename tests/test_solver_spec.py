from __future__ import annotations

import pytest
from pydantic import ValidationError

from kurobako_solver.solver.spec import Capability, SolverSpec, all_capabilities
from kurobako_solver.solver.types import EvaluatedTrial, NextTrial, ProblemSpec, to_signed64


def test_new_spec_declares_all_capabilities() -> None:
    spec = SolverSpec.new("random")
    assert spec.name == "random"
    assert spec.attrs == {}
    assert spec.capabilities == all_capabilities()
    assert spec.model_dump(mode="json")["capabilities"][0] == "UNIFORM_CONTINUOUS"


def test_capabilities_deduplicated_in_declaration_order() -> None:
    spec = SolverSpec(
        name="x",
        capabilities=["CONCURRENT", "CATEGORICAL", "CONCURRENT"],
    )
    assert spec.capabilities == [Capability.CATEGORICAL, Capability.CONCURRENT]
    assert spec.supports(Capability.CATEGORICAL)
    assert not spec.supports(Capability.MULTI_OBJECTIVE)


def test_unknown_capability_rejected() -> None:
    with pytest.raises(ValidationError):
        SolverSpec(name="x", capabilities=["TELEPORT"])


def test_spec_is_immutable() -> None:
    spec = SolverSpec.new("random")
    with pytest.raises(ValidationError):
        spec.name = "other"


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, 0),
        (42, 42),
        (2**63 - 1, 2**63 - 1),
        (2**63, -(2**63)),
        (2**64 - 1, -1),
    ],
)
def test_to_signed64(value: int, expected: int) -> None:
    assert to_signed64(value) == expected


def test_to_signed64_rejects_out_of_range() -> None:
    with pytest.raises(ValueError):
        to_signed64(2**64)


def test_trial_payloads_keep_unknown_fields() -> None:
    trial = NextTrial.model_validate({"id": 3, "params": [0.5, None], "next_step": 10})
    assert trial.id == 3
    assert trial.model_dump() == {"id": 3, "params": [0.5, None], "next_step": 10}

    evaluated = EvaluatedTrial.model_validate({"id": 3, "values": [1.25], "current_step": 10})
    assert evaluated.model_dump()["values"] == [1.25]

    problem = ProblemSpec.model_validate({"name": "sphere", "params_domain": [{"name": "x"}]})
    assert problem.attrs == {}
    assert problem.model_dump()["params_domain"] == [{"name": "x"}]


def test_trial_id_must_be_uint64() -> None:
    with pytest.raises(ValidationError):
        NextTrial(id=-1)
