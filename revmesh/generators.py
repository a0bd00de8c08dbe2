# revmesh/generators.py
"""
Shape generators.

Each generator runs the same pipeline with its own solver and ring profile:

    solve ring layout -> ring profile -> lattice -> triangulation -> MeshData

Infeasible parameters raise InvalidParameterCombination before anything is
built, so callers never see a partial mesh.
"""
from __future__ import annotations

import logging
from typing import Any, Protocol, Union

from .budget import RingLayout, solve_cylinder, solve_sphere
from .config import CylinderParams, SphereParams
from .lattice import RingProfile, build_lattice, cylinder_profile, sphere_profile
from .mesh import MeshData
from .triangulate import triangulate

logger = logging.getLogger(__name__)

Params = Union[SphereParams, CylinderParams]


class MeshGenerator(Protocol):
    def generate(self, params: Any) -> MeshData:
        ...


def _build(layout: RingLayout, profile: RingProfile, name: str) -> MeshData:
    verts, uvs = build_lattice(layout, profile)
    faces = triangulate(layout)
    mesh = MeshData(verts, uvs, faces, name=name)
    logger.debug("%s: %d vertices, %d triangles", name, mesh.vertex_count, mesh.triangle_count)
    return mesh


class SphereGenerator:
    name = "sphere"

    def generate(self, params: SphereParams) -> MeshData:
        layout = solve_sphere(params.vertices_count)
        return _build(layout, sphere_profile(params.radius, layout.ring_size), self.name)


class CylinderGenerator:
    name = "cylinder"

    def generate(self, params: CylinderParams) -> MeshData:
        layout = solve_cylinder(params.vertices_count, params.height_subdivisions)
        profile = cylinder_profile(params.radius, params.height, params.height_subdivisions)
        return _build(layout, profile, self.name)


def generator_for(params: Params) -> MeshGenerator:
    if isinstance(params, SphereParams):
        return SphereGenerator()
    if isinstance(params, CylinderParams):
        return CylinderGenerator()
    raise TypeError(f"no generator for {type(params).__name__}")


def generate(params: Params) -> MeshData:
    return generator_for(params).generate(params)
