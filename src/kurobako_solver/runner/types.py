from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum


class RunnerState(str, Enum):
    RUNNING = "running"
    STOPPED = "stopped"
    FAILED = "failed"


@dataclass
class RunSummary:
    handled: Counter[str] = field(default_factory=Counter)
    live_solvers: int = 0

    @property
    def total(self) -> int:
        return sum(self.handled.values())
