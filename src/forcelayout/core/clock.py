"""
Delta-time providers for the host loop.

The engine never reads a clock itself: the host asks a provider how much
time passed since the previous tick and passes that into Graph.advance().
Each host loop owns its own provider instance.
"""

from __future__ import annotations
import time
from dataclasses import dataclass, field
from typing import Callable, Protocol


class DeltaTimeProvider(Protocol):
    """Protocol for anything that can supply per-tick elapsed time."""

    def get_delta(self) -> float:
        """Seconds elapsed since the last restart."""
        ...

    def restart(self) -> float:
        """Start a new interval, returning the one that just ended."""
        ...


class Clock:
    """
    Wall-clock delta-time provider.

    get_delta() reports seconds since construction or the last restart().
    The time source is injectable for testing.
    """

    def __init__(self, time_source: Callable[[], float] = time.perf_counter):
        self._now = time_source
        self._start = self._now()

    def get_delta(self) -> float:
        return max(0.0, self._now() - self._start)

    def restart(self) -> float:
        now = self._now()
        elapsed = max(0.0, now - self._start)
        self._start = now
        return elapsed


@dataclass
class FixedClock:
    """Deterministic provider that always reports the same delta."""

    dt: float = 1.0 / 60.0
    restarts: int = field(default=0, init=False)

    def __post_init__(self):
        if not self.dt >= 0:
            raise ValueError(f"dt must be non-negative, got {self.dt!r}")

    def get_delta(self) -> float:
        return self.dt

    def restart(self) -> float:
        self.restarts += 1
        return self.dt
