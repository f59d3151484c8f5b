from __future__ import annotations

import pytest

import fake_solvers
from kurobako_solver.solver.loader import load_factory, parse_factory_ref


def test_parse_factory_ref() -> None:
    assert parse_factory_ref("pkg.mod:Factory") == ("pkg.mod", "Factory")
    assert parse_factory_ref(" pkg:a.b ") == ("pkg", "a.b")


@pytest.mark.parametrize("ref", ["pkg.mod", ":Factory", "pkg.mod:", ""])
def test_parse_factory_ref_rejects(ref: str) -> None:
    with pytest.raises(ValueError):
        parse_factory_ref(ref)


def test_load_instance() -> None:
    assert load_factory("fake_solvers:FACTORY") is fake_solvers.FACTORY


def test_load_class_constructs_instance() -> None:
    factory = load_factory("fake_solvers:CountingFactory")
    assert isinstance(factory, fake_solvers.CountingFactory)


def test_load_zero_arg_function() -> None:
    factory = load_factory("fake_solvers:make_factory")
    assert isinstance(factory, fake_solvers.CountingFactory)
    assert factory.ids_per_ask == 2


@pytest.mark.parametrize(
    "ref, message",
    [
        ("no_such_module_for_tests:Factory", "cannot import"),
        ("fake_solvers:Missing", "no attribute"),
        ("fake_solvers:NOT_A_FACTORY", "does not provide"),
        ("fake_solvers:NeedsArgsFactory", "cannot construct factory"),
        ("fake_solvers:failing_constructor", "license check failed"),
    ],
)
def test_load_failures(ref: str, message: str) -> None:
    with pytest.raises(ValueError, match=message):
        load_factory(ref)
