# revmesh/assemble.py
"""
Hand a generated mesh and its texture to a render target.

The target is whatever owns the GPU mesh and the material slot. It only has to
provide ``attach_mesh`` and ``attach_texture``; SceneNode is an in-memory one.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Protocol

from .errors import MissingRenderTarget
from .generators import Params, generate
from .mesh import MeshData
from .texture import Bitmap, gradient_texture
from .vectors import Vec3

logger = logging.getLogger(__name__)


class RenderTarget(Protocol):
    def attach_mesh(self, mesh: MeshData, normals: List[Vec3]) -> None:
        ...

    def attach_texture(self, bitmap: Bitmap) -> None:
        ...


@dataclass
class SceneNode:
    name: str = "node"
    mesh: Optional[MeshData] = None
    normals: Optional[List[Vec3]] = None
    texture: Optional[Bitmap] = None

    def attach_mesh(self, mesh: MeshData, normals: List[Vec3]) -> None:
        self.mesh = mesh
        self.normals = normals

    def attach_texture(self, bitmap: Bitmap) -> None:
        self.texture = bitmap


@dataclass(frozen=True)
class AssembledMesh:
    mesh: MeshData
    face_normals: List[Vec3]
    vertex_normals: List[Vec3]
    texture: Bitmap


def _require_target(target: Optional[RenderTarget]) -> RenderTarget:
    if target is None:
        raise MissingRenderTarget("no render target to receive the mesh")
    return target


def assemble(mesh: MeshData, texture: Bitmap, target: Optional[RenderTarget]) -> AssembledMesh:
    target = _require_target(target)
    faces = mesh.face_normals()
    normals = mesh.vertex_normals(faces)
    target.attach_mesh(mesh, normals)
    target.attach_texture(texture)
    logger.debug("attached %s: %d vertices, %d triangles, %dx%d texture",
                 mesh.name, mesh.vertex_count, mesh.triangle_count, texture.width, texture.height)
    return AssembledMesh(mesh=mesh, face_normals=faces, vertex_normals=normals, texture=texture)


def build(params: Params, target: Optional[RenderTarget]) -> AssembledMesh:
    """Generate, texture and attach in one call. The target is untouched on failure."""
    target = _require_target(target)
    mesh = generate(params)
    return assemble(mesh, gradient_texture(), target)
