# revmesh/budget.py
"""
Turn a requested vertex budget into a ring layout.

A closed surface of revolution is stored as

    top pole, ring 0, ring 1, ..., ring (ring_count - 1), bottom pole

where every ring holds ``ring_size`` (k) vertices. The solvers below pick k so
that the total vertex count lands as close as the shape allows to what was
asked for, and return the exact counts that follow from it.

Cylinder:
    k * (height_subdivisions + 1) + 2 = vertices_count
    k = floor((vertices_count - 2) / (height_subdivisions + 1))

Sphere (k vertices on a parallel, k/2 on a half meridian, poles collapsed):
    k * (k - 2) / 2 + 2 = vertices_count
    k^2/2 - k + (2 - vertices_count) = 0
    k = 1 +/- sqrt(1 - 2 * (2 - vertices_count))
The larger root is rounded up, then up again to an even number so both
hemispheres get the same number of rings.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from .errors import InvalidParameterCombination

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RingLayout:
    ring_size: int
    ring_count: int

    @property
    def vertex_count(self) -> int:
        return self.ring_size * self.ring_count + 2

    @property
    def triangle_count(self) -> int:
        # two cap fans plus 2k per band between adjacent rings
        return 2 * self.ring_size + 2 * self.ring_size * (self.ring_count - 1)

    @property
    def top_pole(self) -> int:
        return 0

    @property
    def bottom_pole(self) -> int:
        return self.vertex_count - 1

    def ring_start(self, r: int) -> int:
        """Index of the first vertex of ring ``r``."""
        if not 0 <= r < self.ring_count:
            raise IndexError(f"ring {r} out of range 0..{self.ring_count - 1}")
        return 1 + r * self.ring_size


def solve_cylinder(vertices_count: int, height_subdivisions: int) -> RingLayout:
    if height_subdivisions < 1:
        logger.warning("cylinder: height_subdivisions=%d, need at least 1", height_subdivisions)
        raise InvalidParameterCombination(
            f"height_subdivisions must be >= 1, got {height_subdivisions}")
    k = (vertices_count - 2) // (height_subdivisions + 1)
    if k <= 0:
        logger.warning("cylinder: vertices_count=%d height_subdivisions=%d gives ring size %d",
                       vertices_count, height_subdivisions, k)
        raise InvalidParameterCombination(
            f"{vertices_count} vertices cannot cover {height_subdivisions + 1} rings "
            f"(ring size {k})")
    layout = RingLayout(ring_size=k, ring_count=height_subdivisions + 1)
    logger.debug("cylinder: k=%d vertices=%d triangles=%d",
                 k, layout.vertex_count, layout.triangle_count)
    return layout


def solve_sphere(vertices_count: int) -> RingLayout:
    discriminant = 1 - 2 * (2 - vertices_count)
    if discriminant < 0:
        logger.warning("sphere: vertices_count=%d has negative discriminant %d",
                       vertices_count, discriminant)
        raise InvalidParameterCombination(
            f"no real ring size for {vertices_count} vertices (discriminant {discriminant})")
    root = math.sqrt(discriminant)
    k = max(math.ceil(1 + root), math.ceil(1 - root))
    if k % 2 != 0:
        k += 1
    ring_count = (k - 2) // 2
    if k <= 0 or ring_count < 1:
        logger.warning("sphere: vertices_count=%d gives ring size %d", vertices_count, k)
        raise InvalidParameterCombination(
            f"{vertices_count} vertices leave no ring between the poles (ring size {k})")
    layout = RingLayout(ring_size=k, ring_count=ring_count)
    logger.debug("sphere: k=%d vertices=%d triangles=%d",
                 k, layout.vertex_count, layout.triangle_count)
    return layout
