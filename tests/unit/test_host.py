"""Unit tests for the host layer: Viewport and Simulation."""

import numpy as np
import pytest

from forcelayout.core.clock import FixedClock
from forcelayout.core.graph import Graph
from forcelayout.core.vector import Vector2
from forcelayout.host.runner import Simulation, SimulationConfig
from forcelayout.host.viewport import Viewport


class TestViewport:
    """Tests for the boundary clamp."""

    def test_defaults(self):
        vp = Viewport()
        assert (vp.width, vp.height) == (800.0, 600.0)
        assert vp.center == Vector2(400.0, 300.0)

    def test_clamp_point(self):
        vp = Viewport(width=800, height=600)
        assert vp.clamp_point(Vector2(-5.0, 700.0)) == Vector2(0.0, 600.0)
        assert vp.clamp_point(Vector2(900.0, -1.0)) == Vector2(800.0, 0.0)
        assert vp.clamp_point(Vector2(10.0, 10.0)) == Vector2(10.0, 10.0)

    def test_clamp_graph(self):
        graph = Graph()
        inside = graph.create_node((100.0, 100.0))
        outside = graph.create_node((-50.0, 1000.0))
        moved = Viewport(width=800, height=600).clamp(graph)
        assert moved == 1
        assert inside.position == Vector2(100.0, 100.0)
        assert outside.position == Vector2(0.0, 600.0)

    def test_offset_origin(self):
        vp = Viewport(width=10, height=10, origin_x=-5, origin_y=-5)
        assert vp.contains(Vector2(0.0, 0.0))
        assert not vp.contains(Vector2(6.0, 0.0))
        assert vp.clamp_point(Vector2(100.0, -100.0)) == Vector2(5.0, -5.0)

    def test_negative_size_rejected(self):
        with pytest.raises(ValueError):
            Viewport(width=-1, height=10)


class TestSimulationConfig:
    """Tests for SimulationConfig."""

    def test_defaults(self):
        cfg = SimulationConfig()
        assert cfg.n_ticks == 500
        assert cfg.dt == 0.1
        assert cfg.viewport is None
        assert isinstance(cfg.make_clock(), FixedClock)

    def test_invalid(self):
        with pytest.raises(ValueError):
            SimulationConfig(n_ticks=-1)
        with pytest.raises(ValueError):
            SimulationConfig(dt=-0.5)


class TestSimulation:
    """Tests for the host tick loop."""

    def test_step_uses_clock(self, chain_graph):
        clock = FixedClock(0.1)
        sim = Simulation(chain_graph, clock=clock)
        assert sim.step() == 0.1
        assert clock.restarts == 1
        assert sim.current_tick == 1
        assert chain_graph.tick_count == 1

    def test_explicit_dt_overrides_clock(self, chain_graph):
        sim = Simulation(chain_graph, clock=FixedClock(0.5))
        assert sim.step(0.01) == 0.01

    def test_run_matches_direct_advance(self, chain_graph):
        from forcelayout.io import parse_graph

        reference = parse_graph("3\n0 0\n10 0\n20 0\n1 2\n2 3\n")
        for _ in range(50):
            reference.advance(0.1)

        sim = Simulation(chain_graph, clock=FixedClock(0.1))
        stats = sim.run(50)

        assert stats["n_ticks"] == 50
        assert stats["total_time"] == pytest.approx(5.0)
        assert np.array_equal(sim.positions(), np.array([n.position.as_tuple() for n in reference]))

    def test_run_reports_convergence(self, chain_graph):
        sim = Simulation(chain_graph, clock=FixedClock(0.1))
        stats = sim.run(300)
        assert stats["last_max_displacement"] < 1e-6
        assert stats["mean_link_length"] == pytest.approx(50.0, abs=1e-3)

    def test_viewport_clamp_applied(self):
        graph = Graph()
        graph.create_node((1.0, 1.0))
        graph.create_node((2.0, 1.0))
        sim = Simulation(graph, clock=FixedClock(0.1), viewport=Viewport(width=10, height=10))
        sim.run(100)
        pos = sim.positions()
        assert np.all(pos >= 0.0)
        assert np.all(pos <= 10.0)

    def test_history(self, chain_graph):
        sim = Simulation(chain_graph, clock=FixedClock(0.1), record_history=True)
        sim.run(10)
        assert len(sim.history) == 11
        assert sim.history[0].shape == (3, 2)
        assert not np.array_equal(sim.history[0], sim.history[-1])

    def test_from_config(self, chain_graph):
        cfg = SimulationConfig(n_ticks=5, dt=0.2, viewport=Viewport(), record_history=True)
        sim = Simulation.from_config(chain_graph, cfg)
        assert sim.viewport is cfg.viewport
        assert sim.clock.get_delta() == 0.2
        sim.run(cfg.n_ticks)
        assert len(sim.history) == 6

    def test_empty_graph(self):
        sim = Simulation(Graph(), clock=FixedClock(0.1))
        stats = sim.run(3)
        assert stats["mean_displacement"] == 0.0
        assert sim.positions().shape == (0, 2)

    def test_long_run_without_history_keeps_no_per_tick_records(self, chain_graph):
        sim = Simulation(chain_graph, clock=FixedClock(0.1), record_history=False)
        stats = sim.run(5000)
        assert sim.displacements == []
        assert sim.history == []
        assert sim.last_displacement.shape == (3,)
        assert stats["n_ticks"] == 5000
        assert stats["last_max_displacement"] < 1e-6
        assert stats["max_displacement"] >= stats["mean_displacement"] > 0.0

    def test_running_stats_match_recorded_displacements(self, chain_graph):
        sim = Simulation(chain_graph, clock=FixedClock(0.1), record_history=True)
        stats = sim.run(20)
        assert len(sim.displacements) == 20
        moved = np.concatenate(sim.displacements)
        assert stats["mean_displacement"] == pytest.approx(float(moved.mean()))
        assert stats["max_displacement"] == pytest.approx(float(moved.max()))
        assert stats["last_max_displacement"] == pytest.approx(float(sim.displacements[-1].max()))

    def test_stats_cover_only_the_latest_run(self, chain_graph):
        sim = Simulation(chain_graph, clock=FixedClock(0.1))
        first = sim.run(10)
        second = sim.run(10)
        assert second["max_displacement"] < first["max_displacement"]
