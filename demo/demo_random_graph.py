#!/usr/bin/env python3
"""
Demo: Random Graph in a Window

Mimics an interactive host without a window:
1. Scatter nodes randomly inside an 800x600 viewport
2. Link each node to a couple of random earlier nodes
3. Run the tick loop with viewport clamping after every advance
4. Save before/after layouts and the adjacency list of the result
"""

from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np

from forcelayout.analysis import compute_layout_stats
from forcelayout.core import FixedClock, Graph
from forcelayout.host import Simulation, Viewport
from forcelayout.io import save_graph
from forcelayout.viz import plot_convergence, plot_graph, save_figure


def build_random_graph(n_nodes: int, links_per_node: int, viewport: Viewport, rng) -> Graph:
    graph = Graph()
    xs = rng.uniform(viewport.min_x, viewport.max_x, size=n_nodes)
    ys = rng.uniform(viewport.min_y, viewport.max_y, size=n_nodes)
    nodes = [graph.create_node((x, y)) for x, y in zip(xs, ys)]

    for i in range(1, n_nodes):
        targets = rng.choice(i, size=min(i, links_per_node), replace=False)
        for j in targets:
            graph.connect(nodes[i], nodes[int(j)])
    return graph


def main():
    rng = np.random.default_rng(seed=42)

    print("=" * 60)
    print("  RANDOM GRAPH LAYOUT")
    print("=" * 60)

    viewport = Viewport(width=800, height=600)
    graph = build_random_graph(n_nodes=40, links_per_node=2, viewport=viewport, rng=rng)
    print(f"\n1. Setup: {len(graph)} nodes, {len(graph.get_links())} links")

    output_dir = Path("output/demo_random_graph")
    output_dir.mkdir(parents=True, exist_ok=True)

    fig, _ = plot_graph(graph, viewport=viewport, title="Initial layout")
    save_figure(fig, output_dir / "before.png")
    plt.close(fig)

    print("\n2. Running 600 ticks at 60 fps...")
    sim = Simulation(graph, clock=FixedClock(1.0 / 60.0), viewport=viewport, record_history=True)
    stats = sim.run(600)
    print(f"   Simulated time:       {stats['total_time']:.1f} s")
    print(f"   Last tick max motion: {stats['last_max_displacement']:.4f}")
    print(f"   Mean link length:     {stats['mean_link_length']:.2f}")

    layout = compute_layout_stats(graph)
    print(f"\n3. Result:")
    print(f"   Min separation: {layout.min_separation:.2f}")
    print(f"   Bounds:         {layout.bounds}")
    print(f"   All finite:     {layout.finite}")

    fig, _ = plot_graph(graph, viewport=viewport, title="After 600 ticks")
    save_figure(fig, output_dir / "after.png")
    plt.close(fig)

    fig = plot_convergence(sim.history)
    save_figure(fig, output_dir / "convergence.png")
    plt.close(fig)

    save_graph(graph, output_dir / "layout.txt")
    print(f"\n4. Saved to: {output_dir}")

    graph.destroy()
    print("=" * 60)


if __name__ == "__main__":
    main()
