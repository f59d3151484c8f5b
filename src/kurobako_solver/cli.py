from __future__ import annotations

import json
import logging

import typer
from rich.console import Console

from kurobako_solver.config import default_config, parse_log_level
from kurobako_solver.errors import RunnerError
from kurobako_solver.runner.controller import run_solver
from kurobako_solver.runtime import configure_logging
from kurobako_solver.solver.base import SolverFactory
from kurobako_solver.solver.loader import load_factory
from kurobako_solver.solver.spec import SolverSpec
from kurobako_solver.ui.render import render_spec

app = typer.Typer(help="kurobako solver plugin host")

console = Console()
err_console = Console(stderr=True)
logger = logging.getLogger(__name__)

FACTORY_OPTION = typer.Option(None, "--factory", "-f", help="module:attr of the solver factory")
LOG_LEVEL_OPTION = typer.Option(None, "--log-level")
JSON_OPTION = typer.Option(False, "--json")


def _resolve_factory(ref: str | None, default_ref: str | None) -> SolverFactory:
    target = (ref or "").strip() or default_ref
    if not target:
        raise typer.BadParameter("no factory given; pass --factory or set KUROBAKO_SOLVER_FACTORY")
    try:
        return load_factory(target)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _setup_logging(log_level: str | None, default_level: int) -> None:
    try:
        level = parse_log_level(log_level, default=default_level)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    configure_logging(level)


@app.command("run")
def run_command(
    factory: str | None = FACTORY_OPTION,
    log_level: str | None = LOG_LEVEL_OPTION,
) -> None:
    config = default_config()
    _setup_logging(log_level, config.log_level)
    solver_factory = _resolve_factory(factory, config.factory)
    logger.info("solver runner start factory=%s", factory or config.factory)
    try:
        summary = run_solver(solver_factory, trace=config.trace_messages)
    except RunnerError as exc:
        err_console.print(f"Solver runner failed: {exc}")
        raise typer.Exit(code=1) from exc
    logger.info("solver runner complete handled=%s", summary.total)


@app.command("spec")
def spec_command(
    factory: str | None = FACTORY_OPTION,
    as_json: bool = JSON_OPTION,
    log_level: str | None = LOG_LEVEL_OPTION,
) -> None:
    config = default_config()
    _setup_logging(log_level, config.log_level)
    solver_factory = _resolve_factory(factory, config.factory)
    try:
        spec = SolverSpec.model_validate(solver_factory.specification())
    except Exception as exc:
        err_console.print(f"Specification failed: {exc}")
        raise typer.Exit(code=1) from exc
    if as_json:
        console.print_json(json.dumps(spec.model_dump(mode="json")))
        return
    render_spec(spec, console)


if __name__ == "__main__":
    app()
