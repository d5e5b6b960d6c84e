"""
Simulation: the host-side tick loop around a Graph.

Each tick:
1. Ask the delta-time provider for elapsed time (or use an explicit dt)
2. graph.advance(dt)
3. Clamp node positions to the viewport, if one is set
4. Restart the provider for the next interval
5. Optionally record a position snapshot

The engine has no convergence detection; the loop runs for as many ticks
as the caller asks for.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

from forcelayout.analysis.metrics import link_lengths, positions_array
from forcelayout.core.clock import Clock, FixedClock

if TYPE_CHECKING:
    from forcelayout.core.clock import DeltaTimeProvider
    from forcelayout.core.graph import Graph
    from forcelayout.host.viewport import Viewport

logger = logging.getLogger(__name__)


@dataclass
class SimulationConfig:
    """Configuration for a host run."""

    n_ticks: int = 500  # Ticks to run
    dt: float | None = 0.1  # Fixed delta per tick; None means wall clock
    viewport: "Viewport | None" = None  # Boundary clamp applied after each tick
    record_history: bool = False  # Keep a position snapshot per tick

    def __post_init__(self):
        if self.n_ticks < 0:
            raise ValueError(f"n_ticks must be non-negative, got {self.n_ticks}")
        if self.dt is not None and not self.dt >= 0:
            raise ValueError(f"dt must be non-negative, got {self.dt!r}")

    def make_clock(self) -> "DeltaTimeProvider":
        return Clock() if self.dt is None else FixedClock(self.dt)


@dataclass
class Simulation:
    """
    Drives a Graph one tick at a time.

    The simulation does not own the graph: destroying it is up to the caller.
    """

    graph: "Graph"
    clock: "DeltaTimeProvider" = field(default_factory=Clock)
    viewport: "Viewport | None" = None
    record_history: bool = False

    # Run state
    current_tick: int = field(default=0, init=False)
    total_time: float = field(default=0.0, init=False)
    last_displacement: np.ndarray = field(default_factory=lambda: np.zeros(0), init=False)

    # Per-tick records, kept only when record_history is set
    history: list[np.ndarray] = field(default_factory=list, init=False)
    displacements: list[np.ndarray] = field(default_factory=list, init=False)

    def __post_init__(self):
        if self.record_history:
            self.history.append(self.positions())

    @classmethod
    def from_config(cls, graph: "Graph", config: SimulationConfig) -> Simulation:
        return cls(
            graph=graph,
            clock=config.make_clock(),
            viewport=config.viewport,
            record_history=config.record_history,
        )

    def positions(self) -> np.ndarray:
        """Current node positions as an (N, 2) array in node order."""
        return positions_array(self.graph)

    def step(self, dt: float | None = None) -> float:
        """
        Run one tick.

        Args:
            dt: Explicit elapsed time; if None, ask the clock

        Returns:
            The dt that was used
        """
        if dt is None:
            dt = self.clock.get_delta()

        before = self.positions()
        self.graph.advance(dt)
        if self.viewport is not None:
            self.viewport.clamp(self.graph)
        self.clock.restart()

        after = self.positions()
        self.last_displacement = np.linalg.norm(after - before, axis=1)
        if self.record_history:
            self.history.append(after)
            self.displacements.append(self.last_displacement)

        self.current_tick += 1
        self.total_time += dt
        return dt

    def run(self, n_ticks: int, dt: float | None = None) -> dict:
        """
        Run the simulation for n ticks.

        Args:
            n_ticks: Number of ticks
            dt: Fixed dt for every tick; if None, ask the clock each tick

        Returns:
            Statistics dictionary
        """
        logger.debug("Running %d ticks on %r", n_ticks, self.graph)
        moved_sum = 0.0
        moved_count = 0
        moved_max = 0.0
        last_max = 0.0
        for _ in range(n_ticks):
            self.step(dt)
            moved = self.last_displacement
            if moved.size:
                last_max = float(moved.max())
                moved_sum += float(moved.sum())
                moved_count += moved.size
                moved_max = max(moved_max, last_max)

        lengths = link_lengths(self.graph)

        stats = {
            "n_ticks": n_ticks,
            "total_time": self.total_time,
            "mean_displacement": moved_sum / moved_count if moved_count else 0.0,
            "max_displacement": moved_max,
            "last_max_displacement": last_max,
            "mean_link_length": float(lengths.mean()) if lengths.size else 0.0,
        }
        logger.debug("Run finished: %s", stats)
        return stats
