# revmesh/lattice.py
"""
Vertex positions and texture coordinates for a ring layout.

The shape is described by a RingProfile: the height of the apex and the base
poles and one (height, planar_radius) pair per ring, top ring first. Every ring
is swept around the Y axis starting at angle 0 (+X) towards +Z.

Texture coordinates:
    poles        u = 0.5, v = 1 (top) / 0 (bottom)
    ring r       v = 1 - (r + 1) / (ring_count + 1)
    column j     u = j / (k - 1)

The columns run from u = 0 to exactly u = 1 with no duplicated seam column, so
the quad closing the ring interpolates from u = 1 back to u = 0.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Tuple

from .budget import RingLayout
from .vectors import Vec2, Vec3


@dataclass(frozen=True)
class RingProfile:
    apex: float
    base: float
    rings: Tuple[Tuple[float, float], ...]  # (height, planar radius), top to bottom


def cylinder_profile(radius: float, height: float, height_subdivisions: int) -> RingProfile:
    delta_y = height / height_subdivisions
    rings = tuple((height / 2 - r * delta_y, radius) for r in range(height_subdivisions + 1))
    return RingProfile(apex=height / 2, base=-height / 2, rings=rings)


def sphere_profile(radius: float, ring_size: int) -> RingProfile:
    # latitude steps by the azimuth step, so rings sit at the same spacing as meridians
    delta = 2 * math.pi / ring_size
    rings = []
    for r in range((ring_size - 2) // 2):
        latitude = math.pi / 2 - (r + 1) * delta
        rings.append((radius * math.sin(latitude), radius * math.cos(latitude)))
    return RingProfile(apex=radius, base=-radius, rings=tuple(rings))


def build_lattice(layout: RingLayout, profile: RingProfile) -> Tuple[List[Vec3], List[Vec2]]:
    if len(profile.rings) != layout.ring_count:
        raise ValueError(
            f"profile has {len(profile.rings)} rings, layout expects {layout.ring_count}")
    k = layout.ring_size
    delta_angle = 2 * math.pi / k

    verts: List[Vec3] = [(0.0, profile.apex, 0.0)]
    uvs: List[Vec2] = [(0.5, 1.0)]

    for r, (y, rho) in enumerate(profile.rings):
        v = 1.0 - (r + 1) / (layout.ring_count + 1)
        for j in range(k):
            ang = j * delta_angle
            verts.append((math.cos(ang) * rho, y, math.sin(ang) * rho))
            u = j / (k - 1) if k > 1 else 0.0
            uvs.append((u, v))

    verts.append((0.0, profile.base, 0.0))
    uvs.append((0.5, 0.0))

    if len(verts) != layout.vertex_count:
        raise ValueError(f"lattice has {len(verts)} vertices, expected {layout.vertex_count}")
    return verts, uvs
