# revmesh/triangulate.py
"""
Index triples connecting the poles and rings of a RingLayout.

All triangles wind counter-clockwise when seen from outside, so
cross(v1 - v0, v2 - v0) points away from the axis. Neighbour lookups wrap
inside a ring with (i + 1) % k and never step into the next ring.
"""
from __future__ import annotations

from typing import List, Sequence

from .budget import RingLayout
from .vectors import Tri


def cap_top(layout: RingLayout) -> List[Tri]:
    k = layout.ring_size
    start = layout.ring_start(0)
    return [(start + i, layout.top_pole, start + (i + 1) % k) for i in range(k)]


def body_bands(layout: RingLayout) -> List[Tri]:
    k = layout.ring_size
    faces: List[Tri] = []
    for r in range(1, layout.ring_count):
        inner = layout.ring_start(r - 1)
        outer = layout.ring_start(r)
        for j in range(k):
            nxt = (j + 1) % k
            # quad (outer[j], inner[j], inner[j+1], outer[j+1])
            faces.append((outer + j, inner + j, outer + nxt))
            faces.append((outer + nxt, inner + j, inner + nxt))
    return faces


def cap_bottom(layout: RingLayout) -> List[Tri]:
    k = layout.ring_size
    start = layout.ring_start(layout.ring_count - 1)
    return [(start + i, start + (i + 1) % k, layout.bottom_pole) for i in range(k)]


def check_indices(faces: Sequence[Tri], layout: RingLayout) -> None:
    if len(faces) != layout.triangle_count:
        raise ValueError(f"{len(faces)} triangles emitted, expected {layout.triangle_count}")
    n = layout.vertex_count
    for f in faces:
        for i in f:
            if not 0 <= i < n:
                raise ValueError(f"triangle {f} references vertex outside 0..{n - 1}")


def triangulate(layout: RingLayout) -> List[Tri]:
    faces = cap_top(layout) + body_bands(layout) + cap_bottom(layout)
    check_indices(faces, layout)
    return faces
