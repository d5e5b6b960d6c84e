#!/usr/bin/env python3
"""
Demo: Chain Equilibrium

Shows how a linked chain settles to its equilibrium spacing:
1. Load three colinear nodes linked 1-2-3
2. Advance with a fixed dt until the layout stops moving
3. Compare the final gap to the balance of repulsion and attraction
4. Plot trajectories and convergence

Each link pulls with attraction_force / 2 while a neighbour closer than
repulsion_distance pushes back with repulsion_force * (D - d) / D, so the
gap settles where the two are equal.
"""

from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np

from forcelayout.analysis import compute_layout_stats, is_colinear, is_monotonic
from forcelayout.core import FixedClock
from forcelayout.host import Simulation
from forcelayout.io import parse_graph
from forcelayout.viz import plot_convergence, plot_graph, plot_trajectories, save_figure


def main():
    print("=" * 60)
    print("  CHAIN EQUILIBRIUM")
    print("=" * 60)

    graph = parse_graph("3\n0 0\n10 0\n20 0\n1 2\n2 3\n")
    cfg = graph.config
    dt = 0.1
    n_ticks = 200

    print(f"\n1. Setup:")
    print(f"   Nodes: {len(graph)}, links: {len(graph.get_links())}")
    print(f"   repulsion_distance={cfg.repulsion_distance}, repulsion_force={cfg.repulsion_force}")
    print(f"   attraction_force={cfg.attraction_force}, dt={dt}")

    print(f"\n2. Running {n_ticks} ticks...")
    sim = Simulation(graph, clock=FixedClock(dt), record_history=True)
    stats = sim.run(n_ticks)
    print(f"   Mean displacement:      {stats['mean_displacement']:.4f}")
    print(f"   Last tick max movement: {stats['last_max_displacement']:.2e}")

    expected_gap = cfg.repulsion_distance * (1 - cfg.attraction_force / (2 * cfg.repulsion_force))
    gaps = np.diff(sim.positions()[:, 0])
    print(f"\n3. Spacing:")
    print(f"   Final gaps:    {gaps}")
    print(f"   Expected gap:  {expected_gap:.3f}")
    print(f"   Colinear:      {is_colinear(graph)}")
    print(f"   Ordered by x:  {is_monotonic(graph, axis=0)}")

    layout = compute_layout_stats(graph)
    print(f"   Bounds:        {layout.bounds}")

    print("\n4. Creating visualization...")
    output_dir = Path("output/demo_chain")
    output_dir.mkdir(parents=True, exist_ok=True)

    fig, _ = plot_graph(graph, title="Chain after convergence", show_labels=True)
    save_figure(fig, output_dir / "layout.png")
    plt.close(fig)

    fig = plot_trajectories(sim.history, graph=graph, title="Chain trajectories")
    save_figure(fig, output_dir / "trajectories.png")
    plt.close(fig)

    fig = plot_convergence(sim.history, title="Chain convergence")
    save_figure(fig, output_dir / "convergence.png")
    plt.close(fig)
    print(f"   Saved to: {output_dir}")

    graph.destroy()
    print("=" * 60)


if __name__ == "__main__":
    main()
