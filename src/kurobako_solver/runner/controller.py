from __future__ import annotations

import logging
import sys
from typing import BinaryIO

from pydantic import BaseModel

from kurobako_solver.errors import CapabilityError, RunnerError, UnknownSolverError
from kurobako_solver.protocol.codec import decode_inbound, encode_message
from kurobako_solver.protocol.messages import (
    AskCall,
    AskReply,
    CreateSolverCast,
    DropSolverCast,
    SolverSpecCast,
    TellCall,
    TellReply,
)
from kurobako_solver.protocol.transport import LineTransport
from kurobako_solver.runner.registry import SolverRegistry
from kurobako_solver.runner.types import RunnerState, RunSummary
from kurobako_solver.solver.base import Solver, SolverFactory
from kurobako_solver.solver.idgen import TrialIdGenerator
from kurobako_solver.solver.spec import SolverSpec
from kurobako_solver.solver.types import NextTrial, to_signed64

logger = logging.getLogger(__name__)


class SolverRunner:
    """Drives one solver factory over a line-delimited JSON stream.

    The runner announces the factory's spec, then handles create/drop casts
    and ask/tell calls until end-of-stream. Any failure is raised as a
    ``RunnerError`` and leaves the runner in ``RunnerState.FAILED``.
    """

    def __init__(self, factory: SolverFactory, transport: LineTransport) -> None:
        self.factory = factory
        self.transport = transport
        self.registry = SolverRegistry(factory)
        self.state: RunnerState | None = None

    def run(self) -> RunSummary:
        if self.state is not None:
            raise RuntimeError(f"solver runner already used state={self.state.value}")
        self.state = RunnerState.RUNNING
        summary = RunSummary()
        try:
            self._cast_solver_spec()
            while self._run_once(summary):
                pass
        except RunnerError as exc:
            self.state = RunnerState.FAILED
            logger.error("runner failed handled=%s error=%s", summary.total, exc)
            raise
        self.state = RunnerState.STOPPED
        summary.live_solvers = len(self.registry)
        logger.info(
            "runner stopped handled=%s live_solvers=%s solver_ids=%s",
            summary.total,
            summary.live_solvers,
            self.registry.ids(),
        )
        return summary

    def _run_once(self, summary: RunSummary) -> bool:
        line = self.transport.read_line()
        if line is None:
            return False
        message = decode_inbound(line)
        if isinstance(message, CreateSolverCast):
            self._handle_create_solver_cast(message)
        elif isinstance(message, DropSolverCast):
            self._handle_drop_solver_cast(message)
        elif isinstance(message, AskCall):
            self._handle_ask_call(message)
        else:
            self._handle_tell_call(message)
        summary.handled[message.type] += 1
        return True

    def _handle_create_solver_cast(self, message: CreateSolverCast) -> None:
        seed = to_signed64(message.random_seed)
        self.registry.create(message.solver_id, seed, message.problem)
        logger.info("solver created solver_id=%s seed=%s", message.solver_id, seed)

    def _handle_drop_solver_cast(self, message: DropSolverCast) -> None:
        dropped = self.registry.drop(message.solver_id)
        logger.info("solver dropped solver_id=%s present=%s", message.solver_id, dropped)

    def _handle_ask_call(self, message: AskCall) -> None:
        solver = self._lookup(message.solver_id)
        idg = TrialIdGenerator(message.next_trial_id)
        try:
            raw_trial = solver.ask(idg)
            trial = NextTrial.model_validate(raw_trial)
        except Exception as exc:
            raise CapabilityError("ask", exc) from exc
        finally:
            allocation = idg.close()
        logger.debug(
            "solver ask solver_id=%s trial_id=%s start=%s consumed=%s next_trial_id=%s",
            message.solver_id,
            trial.id,
            allocation.start,
            allocation.consumed,
            allocation.next_id,
        )
        self._send(AskReply(trial=trial, next_trial_id=allocation.next_id))

    def _handle_tell_call(self, message: TellCall) -> None:
        solver = self._lookup(message.solver_id)
        try:
            solver.tell(message.trial)
        except Exception as exc:
            raise CapabilityError("tell", exc) from exc
        logger.debug("solver tell solver_id=%s trial_id=%s", message.solver_id, message.trial.id)
        self._send(TellReply())

    def _lookup(self, solver_id: int) -> Solver:
        solver = self.registry.get(solver_id)
        if solver is None:
            raise UnknownSolverError(solver_id)
        return solver

    def _cast_solver_spec(self) -> None:
        try:
            spec = SolverSpec.model_validate(self.factory.specification())
        except Exception as exc:
            raise CapabilityError("specification", exc) from exc
        logger.info("solver spec name=%s capabilities=%s", spec.name, len(spec.capabilities))
        self._send(SolverSpecCast(spec=spec))

    def _send(self, message: BaseModel) -> None:
        self.transport.write_line(encode_message(message))


def run_solver(
    factory: SolverFactory,
    *,
    stdin: BinaryIO | None = None,
    stdout: BinaryIO | None = None,
    trace: bool = False,
) -> RunSummary:
    transport = LineTransport(
        stdin if stdin is not None else sys.stdin.buffer,
        stdout if stdout is not None else sys.stdout.buffer,
        trace=trace,
    )
    return SolverRunner(factory, transport).run()


__all__ = ["SolverRunner", "run_solver"]
