"""
Host layer: what a windowed application would do around the engine.

- Viewport: clamp node positions to a drawable rectangle after each tick
- Simulation / SimulationConfig: the tick loop feeding dt into advance()
"""

from forcelayout.host.viewport import Viewport
from forcelayout.host.runner import Simulation, SimulationConfig

__all__ = [
    "Viewport",
    "Simulation",
    "SimulationConfig",
]
