"""
revmesh: closed surfaces of revolution (sphere, capped cylinder) built from a
requested vertex count, plus a gradient placeholder texture.

    from revmesh import SphereParams, generate
    mesh = generate(SphereParams(radius=2.0, vertices_count=100))
"""
from .assemble import AssembledMesh, RenderTarget, SceneNode, assemble, build
from .budget import RingLayout, solve_cylinder, solve_sphere
from .config import CylinderParams, SphereParams
from .errors import GenerationError, InvalidParameterCombination, MissingRenderTarget
from .generators import CylinderGenerator, MeshGenerator, SphereGenerator, generate, generator_for
from .mesh import MeshBuffers, MeshData, save_obj, save_ply
from .texture import Bitmap, gradient_texture, save_png

__all__ = [
    "AssembledMesh", "Bitmap", "CylinderGenerator", "CylinderParams", "GenerationError",
    "InvalidParameterCombination", "MeshBuffers", "MeshData", "MeshGenerator",
    "MissingRenderTarget", "RenderTarget", "RingLayout", "SceneNode", "SphereGenerator",
    "SphereParams", "assemble", "build", "generate", "generator_for", "gradient_texture",
    "save_obj", "save_ply", "save_png", "solve_cylinder", "solve_sphere",
]
