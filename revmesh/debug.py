# revmesh/debug.py
# Read-only consumers of a built mesh: normal rays for overlays and a turntable pose.

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .mesh import MeshData
from .vectors import Vec3, centroid, face_normal, mat_rotate_axis, v_add, v_scale

Segment = Tuple[Vec3, Vec3]


def face_normal_rays(mesh: MeshData, length: float = 1.0) -> List[Segment]:
    """One segment per triangle, from its centroid along the face normal."""
    rays: List[Segment] = []
    for (a, b, c) in mesh.triangles:
        va, vb, vc = mesh.vertices[a], mesh.vertices[b], mesh.vertices[c]
        center = centroid(va, vb, vc)
        rays.append((center, v_add(center, v_scale(face_normal(va, vb, vc), length))))
    return rays


def vertex_normal_rays(mesh: MeshData, normals: Optional[Sequence[Vec3]] = None,
                       length: float = 1.0) -> List[Segment]:
    if normals is None:
        normals = mesh.vertex_normals()
    if len(normals) != mesh.vertex_count:
        raise ValueError("normals must be aligned 1:1 with vertices")
    return [(v, v_add(v, v_scale(n, length))) for v, n in zip(mesh.vertices, normals)]


@dataclass(frozen=True)
class Turntable:
    """Constant spin about ``axis``; frame ``n`` is rotated by ``n * step_degrees``."""

    step_degrees: float = 15.0
    axis: Vec3 = (-1.0, 0.0, -1.0)

    def angle(self, frame: int) -> float:
        return math.radians(self.step_degrees * frame)

    def pose(self, mesh: MeshData, frame: int) -> MeshData:
        return mesh.transformed(mat_rotate_axis(self.axis, self.angle(frame)))
