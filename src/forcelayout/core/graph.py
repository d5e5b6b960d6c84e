"""
Graph: the layout engine.

The graph owns every node and link and advances the simulation one tick
at a time:

1. Repulsion: every ordered pair of distinct nodes (A, B) contributes the
   force A feels from B, decaying linearly to zero at repulsion_distance.
2. Attraction: every link pulls its endpoints together with a constant
   magnitude, equal and opposite on the two ends.
3. Apply: each node integrates its own force list (speed-capped Euler step).

All forces are computed from the positions at the start of the tick, so the
result does not depend on the order nodes are visited in.

The engine has no clock, no viewport and no renderer. The host passes the
elapsed time into advance() and reads positions back out afterwards.
"""

from __future__ import annotations
import logging
import math
from dataclasses import dataclass, field
from typing import Iterable, Iterator

import numpy as np

from forcelayout.core.link import Link
from forcelayout.core.node import DEFAULT_MAX_SPEED, Node
from forcelayout.core.vector import Vector2
from forcelayout.errors import ConfigError, GraphDestroyedError, InvalidReferenceError

logger = logging.getLogger(__name__)

# Distances at or below this are treated as coincident (zero force).
# Single-precision epsilon keeps the threshold meaningful for float32 input.
COINCIDENCE_EPSILON = float(np.finfo(np.float32).eps)


@dataclass
class LayoutConfig:
    """Force model constants for the layout engine."""

    repulsion_distance: float = 100.0  # Cutoff beyond which nodes do not repel
    repulsion_force: float = 200.0  # Repulsion strength at zero distance
    attraction_force: float = 200.0  # Attraction strength along each link
    epsilon: float = field(default=COINCIDENCE_EPSILON)  # Coincidence threshold
    max_speed: float = DEFAULT_MAX_SPEED  # Speed cap for nodes created by the graph

    def __post_init__(self):
        for name in ("repulsion_distance", "repulsion_force", "attraction_force", "max_speed"):
            value = getattr(self, name)
            if not (math.isfinite(value) and value > 0):
                raise ConfigError(name, value, "a positive finite number")
        if not (math.isfinite(self.epsilon) and self.epsilon >= 0):
            raise ConfigError("epsilon", self.epsilon, "a non-negative finite number")


class Graph:
    """
    Owns the nodes and links of a layout and advances the simulation.

    Lifecycle: populated -> advancing -> destroyed. Once destroy() has been
    called the graph is empty and every further call raises
    GraphDestroyedError.
    """

    def __init__(self, config: LayoutConfig | None = None):
        self.config = config or LayoutConfig()
        self._nodes: list[Node] = []
        self._links: list[Link] = []
        self._members: set[Node] = set()
        self._destroyed = False
        self.tick_count = 0

    # ═══════════════════════════════════════════════════════════════
    # MEMBERSHIP
    # ═══════════════════════════════════════════════════════════════

    @property
    def nodes(self) -> tuple[Node, ...]:
        return tuple(self._nodes)

    @property
    def links(self) -> tuple[Link, ...]:
        return tuple(self._links)

    @property
    def is_destroyed(self) -> bool:
        return self._destroyed

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def __contains__(self, node: object) -> bool:
        return node in self._members

    def get_nodes(self) -> list[Node]:
        """
        The live node list.

        Hosts read and write positions through it (rendering, clamping).
        Adding or removing entries directly bypasses membership checks;
        use add_nodes() for that.
        """
        self._check_alive("access nodes")
        return self._nodes

    def get_links(self) -> list[Link]:
        self._check_alive("access links")
        return self._links

    def node_index(self, node: Node) -> int:
        """0-based position of a node in insertion order."""
        if node not in self._members:
            raise ValueError(f"{node!r} is not a member of this graph")
        return self._nodes.index(node)

    def add_nodes(self, nodes: Iterable[Node]) -> None:
        """Append nodes. A node can belong to the graph only once."""
        self._check_alive("add nodes")
        batch = list(nodes)
        seen: set[Node] = set()
        for node in batch:
            if node in self._members or node in seen:
                raise ValueError(f"{node!r} is already in the graph")
            seen.add(node)

        self._nodes.extend(batch)
        self._members.update(batch)
        logger.debug("Added %d nodes (total %d)", len(batch), len(self._nodes))

    def add_links(self, links: Iterable[Link]) -> None:
        """
        Append links.

        Both endpoints of every link must already be members of this graph.
        The batch is validated as a whole: on error nothing is appended.
        """
        self._check_alive("add links")
        batch = list(links)
        for link in batch:
            for endpoint in link.endpoints():
                if endpoint not in self._members:
                    raise InvalidReferenceError(endpoint, len(self._nodes))

        self._links.extend(batch)
        logger.debug("Added %d links (total %d)", len(batch), len(self._links))

    def create_node(
        self,
        position: Vector2 | tuple[float, float],
        max_speed: float | None = None,
    ) -> Node:
        """Create a node owned by this graph and return it."""
        node = Node(position, self.config.max_speed if max_speed is None else max_speed)
        self.add_nodes([node])
        return node

    def connect(self, first: Node, second: Node) -> Link:
        """Create a link between two member nodes and return it."""
        link = Link(first, second)
        self.add_links([link])
        return link

    # ═══════════════════════════════════════════════════════════════
    # FORCE MODEL
    # ═══════════════════════════════════════════════════════════════

    def repulsive_force(self, node: Node, other: Node, dt: float) -> Vector2:
        """
        Force that `node` experiences from `other`.

        Points away from `other` and decays linearly from repulsion_force
        at zero distance to nothing at repulsion_distance. Coincident nodes
        and nodes beyond the cutoff contribute nothing.
        """
        cfg = self.config
        delta = node.position - other.position
        dist = delta.magnitude()
        if dist > cfg.repulsion_distance or dist <= cfg.epsilon:
            return Vector2.zero()

        direction = delta / dist
        falloff = (cfg.repulsion_distance - dist) / cfg.repulsion_distance
        return direction * (cfg.repulsion_force * falloff * dt)

    def attraction_force(self, link: Link, dt: float) -> Vector2:
        """
        Attraction along a link, as seen by its second endpoint.

        Points from `second` towards `first`; the first endpoint receives
        the negation. The magnitude does not depend on the distance.
        """
        first, second = link.endpoints()
        delta = first.position - second.position
        dist = delta.magnitude()
        if dist <= self.config.epsilon:
            return Vector2.zero()

        direction = delta / dist
        return direction * (self.config.attraction_force * 0.5 * dt)

    def compute_forces(self, dt: float) -> dict[Node, list[Vector2]]:
        """
        Accumulate the force list of every node for one tick.

        Every node gets an entry, possibly empty. Positions are not touched.
        """
        self._check_alive("compute forces")
        self._check_dt(dt)

        node_forces: dict[Node, list[Vector2]] = {node: [] for node in self._nodes}

        # Repulsion: both orderings of every pair, each into its own list
        for node in self._nodes:
            forces = node_forces[node]
            for other in self._nodes:
                if other is not node:
                    forces.append(self.repulsive_force(node, other, dt))

        # Attraction: equal and opposite on the two endpoints
        for link in self._links:
            force = self.attraction_force(link, dt)
            node_forces[link.first].append(-force)
            node_forces[link.second].append(force)

        return node_forces

    def advance(self, dt: float) -> None:
        """
        Advance the layout by one tick.

        Args:
            dt: Elapsed time for this tick in seconds (finite, >= 0)
        """
        node_forces = self.compute_forces(dt)
        for node in self._nodes:
            node.apply_forces(node_forces[node])
        self.tick_count += 1

    # ═══════════════════════════════════════════════════════════════
    # TEARDOWN
    # ═══════════════════════════════════════════════════════════════

    def destroy(self) -> None:
        """
        Release all nodes and links. The graph cannot be used afterwards.

        Calling destroy() twice is allowed.
        """
        if self._destroyed:
            return
        logger.debug("Destroying graph: %d nodes, %d links", len(self._nodes), len(self._links))
        self._links.clear()
        self._nodes.clear()
        self._members.clear()
        self._destroyed = True

    def __enter__(self) -> Graph:
        self._check_alive("enter graph context")
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.destroy()

    def _check_alive(self, operation: str) -> None:
        if self._destroyed:
            raise GraphDestroyedError(operation)

    @staticmethod
    def _check_dt(dt: float) -> None:
        if not (math.isfinite(dt) and dt >= 0):
            raise ValueError(f"dt must be a finite non-negative number, got {dt!r}")

    def __repr__(self) -> str:
        state = "destroyed" if self._destroyed else f"{len(self._nodes)} nodes, {len(self._links)} links"
        return f"Graph({state})"
