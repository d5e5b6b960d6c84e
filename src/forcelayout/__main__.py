"""Command line entry point: lay out a graph file headlessly."""

import argparse
import logging
import sys
from pathlib import Path

from forcelayout.analysis.metrics import compute_layout_stats
from forcelayout.core.graph import LayoutConfig
from forcelayout.errors import ForceLayoutError
from forcelayout.host.runner import Simulation, SimulationConfig
from forcelayout.host.viewport import Viewport
from forcelayout.io.loader import load_graph, save_graph

logger = logging.getLogger("forcelayout")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        prog="forcelayout",
        description="Force-directed 2D layout of an adjacency-list graph file",
    )
    parser.add_argument("input", type=Path, help="Graph file (node count, coordinates, 1-based link pairs)")
    parser.add_argument("--ticks", type=int, default=500, metavar="N", help="Ticks to simulate (default: 500)")
    parser.add_argument("--dt", type=float, default=1.0 / 60.0, metavar="S", help="Seconds per tick (default: 1/60)")
    parser.add_argument("--width", type=float, default=800.0, help="Viewport width (default: 800)")
    parser.add_argument("--height", type=float, default=600.0, help="Viewport height (default: 600)")
    parser.add_argument("--no-clamp", action="store_true", help="Do not clamp nodes to the viewport")
    parser.add_argument("--repulsion-distance", type=float, default=100.0, metavar="D")
    parser.add_argument("--repulsion-force", type=float, default=200.0, metavar="F")
    parser.add_argument("--attraction-force", type=float, default=200.0, metavar="F")
    parser.add_argument("--max-speed", type=float, default=300.0, metavar="V")
    parser.add_argument("--output", type=Path, default=None, metavar="PNG", help="Render the final layout to an image")
    parser.add_argument("--save", type=Path, default=None, metavar="FILE", help="Write the final layout as a graph file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code
    """
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        layout_config = LayoutConfig(
            repulsion_distance=args.repulsion_distance,
            repulsion_force=args.repulsion_force,
            attraction_force=args.attraction_force,
            max_speed=args.max_speed,
        )
        viewport = None if args.no_clamp else Viewport(width=args.width, height=args.height)
        sim_config = SimulationConfig(n_ticks=args.ticks, dt=args.dt, viewport=viewport)
    except ValueError as e:
        logger.error("Invalid option: %s", e)
        return 1

    try:
        graph = load_graph(args.input, config=layout_config)
    except (ForceLayoutError, OSError) as e:
        logger.error("%s", e)
        return 1

    with graph:
        sim = Simulation.from_config(graph, sim_config)
        stats = sim.run(sim_config.n_ticks, dt=sim_config.dt)
        logger.info(
            "%d ticks: mean displacement %.4f, last max displacement %.4f, mean link length %.2f",
            stats["n_ticks"], stats["mean_displacement"],
            stats["last_max_displacement"], stats["mean_link_length"],
        )
        layout = compute_layout_stats(graph)
        logger.info("Bounds %s, min separation %.2f", layout.bounds, layout.min_separation)

        if args.save is not None:
            save_graph(graph, args.save)
            logger.info("Saved layout to %s", args.save)

        if args.output is not None:
            from forcelayout.viz.layout import plot_graph, save_figure

            fig, _ = plot_graph(graph, viewport=viewport, title=args.input.name)
            save_figure(fig, args.output)
            logger.info("Rendered layout to %s", args.output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
