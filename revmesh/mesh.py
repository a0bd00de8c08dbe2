# revmesh/mesh.py
"""
MeshData: the immutable result of one generation call.

• vertices, uv (aligned 1:1) and triangle index triples
• face and smooth vertex normals (averaged adjacent face normals)
• numpy buffers for a GPU uploader
• exporters: Wavefront OBJ (with vt/vn) and ASCII PLY

Transforms return a new MeshData; nothing here mutates a built mesh.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .vectors import Mat4, Tri, Vec2, Vec3, apply_mat, face_normal, v_add, v_norm


@dataclass(frozen=True)
class MeshBuffers:
    """Contiguous arrays ready for upload."""

    positions: np.ndarray
    uvs: np.ndarray
    indices: np.ndarray
    normals: Optional[np.ndarray] = None

    @property
    def vertex_count(self) -> int:
        return int(self.positions.shape[0])

    @property
    def triangle_count(self) -> int:
        return int(self.indices.shape[0])


@dataclass(frozen=True)
class MeshData:
    vertices: Tuple[Vec3, ...]
    uv: Tuple[Vec2, ...]
    triangles: Tuple[Tri, ...]
    name: str = "mesh"

    def __post_init__(self) -> None:
        # accept lists from builders but store tuples
        object.__setattr__(self, "vertices", tuple(self.vertices))
        object.__setattr__(self, "uv", tuple(self.uv))
        object.__setattr__(self, "triangles", tuple(tuple(t) for t in self.triangles))
        if len(self.vertices) != len(self.uv):
            raise ValueError(
                f"{len(self.vertices)} vertices but {len(self.uv)} texture coordinates")
        n = len(self.vertices)
        for t in self.triangles:
            if len(t) != 3:
                raise ValueError(f"triangle {t} does not have three indices")
            for i in t:
                if not 0 <= i < n:
                    raise ValueError(f"triangle {t} references vertex outside 0..{n - 1}")

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    @property
    def triangle_count(self) -> int:
        return len(self.triangles)

    def flat_indices(self) -> List[int]:
        return [i for t in self.triangles for i in t]

    # ---- analysis ----
    def bounds(self) -> Tuple[Vec3, Vec3]:
        xs = [v[0] for v in self.vertices]
        ys = [v[1] for v in self.vertices]
        zs = [v[2] for v in self.vertices]
        return (min(xs), min(ys), min(zs)), (max(xs), max(ys), max(zs))

    # ---- transforms ----
    def transformed(self, m: Mat4) -> "MeshData":
        return MeshData(tuple(apply_mat(v, m) for v in self.vertices), self.uv, self.triangles, self.name)

    # ---- shading ----
    def face_normals(self) -> List[Vec3]:
        out: List[Vec3] = []
        for (a, b, c) in self.triangles:
            out.append(face_normal(self.vertices[a], self.vertices[b], self.vertices[c]))
        return out

    def vertex_normals(self, face_normals: Optional[Sequence[Vec3]] = None) -> List[Vec3]:
        """Average adjacent face normals per vertex."""
        if face_normals is None:
            face_normals = self.face_normals()
        normals = [(0.0, 0.0, 0.0) for _ in self.vertices]
        for (a, b, c), n in zip(self.triangles, face_normals):
            normals[a] = v_add(normals[a], n)
            normals[b] = v_add(normals[b], n)
            normals[c] = v_add(normals[c], n)
        return [v_norm(n) for n in normals]

    def to_buffers(self, normals: Optional[Sequence[Vec3]] = None) -> MeshBuffers:
        positions = np.ascontiguousarray(np.asarray(self.vertices, dtype=np.float32).reshape(-1, 3))
        uvs = np.ascontiguousarray(np.asarray(self.uv, dtype=np.float32).reshape(-1, 2))
        indices = np.ascontiguousarray(np.asarray(self.triangles, dtype=np.uint32).reshape(-1, 3))
        narr = None
        if normals is not None:
            narr = np.ascontiguousarray(np.asarray(normals, dtype=np.float32).reshape(-1, 3))
            if narr.shape[0] != positions.shape[0]:
                raise ValueError("normals must be aligned 1:1 with vertices")
        return MeshBuffers(positions=positions, uvs=uvs, indices=indices, normals=narr)


# ---------------
# File exporters
# ---------------

def save_obj(path: str, mesh: MeshData, normals: Optional[Sequence[Vec3]] = None) -> None:
    """Save OBJ with vt and optional vn (both aligned with vertices)."""
    with open(path, "w", encoding="utf-8") as f:
        f.write(f"o {mesh.name}\n")
        for x, y, z in mesh.vertices:
            f.write(f"v {x:.6f} {y:.6f} {z:.6f}\n")
        for u, v in mesh.uv:
            f.write(f"vt {u:.6f} {v:.6f}\n")
        if normals:
            for nx, ny, nz in normals:
                f.write(f"vn {nx:.6f} {ny:.6f} {nz:.6f}\n")
        for a, b, c in mesh.triangles:
            if normals:
                f.write(f"f {a + 1}/{a + 1}/{a + 1} {b + 1}/{b + 1}/{b + 1} {c + 1}/{c + 1}/{c + 1}\n")
            else:
                f.write(f"f {a + 1}/{a + 1} {b + 1}/{b + 1} {c + 1}/{c + 1}\n")


def save_ply(path: str, mesh: MeshData) -> None:
    with open(path, "w", encoding="utf-8") as f:
        f.write("ply\nformat ascii 1.0\n")
        f.write(f"element vertex {mesh.vertex_count}\n")
        f.write("property float x\nproperty float y\nproperty float z\n")
        f.write("property float s\nproperty float t\n")
        f.write(f"element face {mesh.triangle_count}\n")
        f.write("property list uchar int vertex_indices\nend_header\n")
        for (x, y, z), (u, v) in zip(mesh.vertices, mesh.uv):
            f.write(f"{x:.6f} {y:.6f} {z:.6f} {u:.6f} {v:.6f}\n")
        for a, b, c in mesh.triangles:
            f.write(f"3 {a} {b} {c}\n")
