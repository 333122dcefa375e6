"""Obstacle layouts and continuous sources for driving a solver.

Scenario configs (``conf/scenario/*.yaml``) describe obstacles and sources as
plain lists of mappings; this module turns them into solver mutations.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Sequence

log = logging.getLogger(__name__)


# =============================================================================
# Sources
# =============================================================================


@dataclass
class Source:
    """Emitter that injects density and velocity into a square patch of cells."""

    x: int
    y: int
    density: float = 0.0
    velocity: Sequence[float] = (0.0, 0.0)
    radius: int = 0

    def apply(self, solver):
        dx, dy = self.velocity
        for cx in range(self.x - self.radius, self.x + self.radius + 1):
            for cy in range(self.y - self.radius, self.y + self.radius + 1):
                if self.density:
                    solver.add_density(cx, cy, self.density)
                if dx or dy:
                    solver.add_velocity(cx, cy, dx, dy)


class SourceInjector:
    """Run callback applying every source before each step."""

    def __init__(self, sources: Iterable[Source], until_step: int = None):
        self.sources = list(sources)
        self.until_step = until_step

    def __call__(self, solver, step_index: int):
        if self.until_step is not None and step_index >= self.until_step:
            return
        for source in self.sources:
            source.apply(solver)


def sources_from_config(entries) -> List[Source]:
    """Build Source objects from a list of mappings."""
    sources = []
    for entry in entries or []:
        entry = dict(entry)
        if "velocity" in entry:
            entry["velocity"] = tuple(entry["velocity"])
        sources.append(Source(**entry))
    return sources


# =============================================================================
# Obstacles
# =============================================================================


def add_perimeter_wall(solver):
    """Mark every edge cell solid."""
    n = solver.get_size()
    for i in range(n):
        solver.set_obstacle(i, 0)
        solver.set_obstacle(i, n - 1)
        solver.set_obstacle(0, i)
        solver.set_obstacle(n - 1, i)


def add_disc(solver, cx: int, cy: int, radius: float):
    """Mark cells whose centre lies within ``radius`` of (cx, cy)."""
    r = int(radius)
    for x in range(cx - r, cx + r + 1):
        for y in range(cy - r, cy + r + 1):
            if (x - cx) ** 2 + (y - cy) ** 2 <= radius * radius:
                solver.set_obstacle(x, y)


def add_rectangle(solver, x0: int, y0: int, x1: int, y1: int):
    """Mark the inclusive rectangle [x0, x1] x [y0, y1]."""
    for x in range(min(x0, x1), max(x0, x1) + 1):
        for y in range(min(y0, y1), max(y0, y1) + 1):
            solver.set_obstacle(x, y)


_OBSTACLE_BUILDERS = {
    "perimeter": add_perimeter_wall,
    "disc": add_disc,
    "rectangle": add_rectangle,
}


def build_obstacles(solver, entries):
    """Apply obstacle entries of the form ``{shape: ..., **kwargs}``."""
    for entry in entries or []:
        entry = dict(entry)
        shape = entry.pop("shape", None)
        builder = _OBSTACLE_BUILDERS.get(shape)
        if builder is None:
            raise ValueError(
                f"Unknown obstacle shape '{shape}'. Expected one of {sorted(_OBSTACLE_BUILDERS)}"
            )
        builder(solver, **entry)
        log.debug(f"Added {shape} obstacle {entry}")
