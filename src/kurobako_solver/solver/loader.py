from __future__ import annotations

import importlib
import logging
from typing import Any

from kurobako_solver.solver.base import SolverFactory

logger = logging.getLogger(__name__)


def parse_factory_ref(ref: str) -> tuple[str, str]:
    module_name, sep, attr_path = ref.strip().partition(":")
    if not sep or not module_name or not attr_path:
        raise ValueError(f"factory reference must look like 'package.module:attr', got {ref!r}")
    return module_name, attr_path


def load_factory(ref: str) -> SolverFactory:
    module_name, attr_path = parse_factory_ref(ref)
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise ValueError(f"cannot import factory module {module_name!r}: {exc}") from exc
    target: Any = module
    for part in attr_path.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as exc:
            raise ValueError(f"{module_name!r} has no attribute {attr_path!r}") from exc
    if _is_factory(target):
        logger.info("factory loaded ref=%s kind=instance", ref)
        return target
    if callable(target):
        try:
            factory = target()
        except Exception as exc:
            raise ValueError(f"cannot construct factory {ref!r}: {exc}") from exc
        if _is_factory(factory):
            logger.info("factory loaded ref=%s kind=constructed", ref)
            return factory
    raise ValueError(f"{ref!r} does not provide specification() and create_solver()")


def _is_factory(value: Any) -> bool:
    # Classes satisfy the structural check too; only instances count.
    return not isinstance(value, type) and isinstance(value, SolverFactory)
