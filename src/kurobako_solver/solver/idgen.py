from __future__ import annotations

from dataclasses import dataclass

from kurobako_solver.solver.types import UINT64_MAX


@dataclass(frozen=True)
class IdAllocation:
    start: int
    consumed: int
    next_id: int


class TrialIdGenerator:
    def __init__(self, start: int) -> None:
        if not 0 <= start <= UINT64_MAX:
            raise ValueError(f"starting trial id out of uint64 range: {start}")
        self._start = start
        self._next_id = start
        self._closed = False

    @property
    def next_id(self) -> int:
        return self._next_id

    def generate(self) -> int:
        if self._closed:
            raise RuntimeError("trial id generator used after its ask call finished")
        if self._next_id >= UINT64_MAX:
            raise OverflowError("trial id space exhausted")
        trial_id = self._next_id
        self._next_id += 1
        return trial_id

    def close(self) -> IdAllocation:
        self._closed = True
        return IdAllocation(
            start=self._start,
            consumed=self._next_id - self._start,
            next_id=self._next_id,
        )
