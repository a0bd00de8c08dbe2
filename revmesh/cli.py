# revmesh/cli.py
from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from .assemble import SceneNode, build
from .config import CylinderParams, SphereParams
from .errors import GenerationError
from .mesh import save_obj, save_ply
from .texture import save_png

_DEF_HELP = """
Examples:
  python -m revmesh sphere --radius 2 --vertices 100 --out sphere.obj
  python -m revmesh cylinder --height 4 --subdivisions 3 --vertices 100 --out cyl.ply
  python -m revmesh sphere --vertices 500 --out sphere.obj --normals --texture gradient.png
"""


def _parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="revmesh", description="revmesh: sphere and cylinder from a vertex budget",
                                epilog=_DEF_HELP, formatter_class=argparse.RawTextHelpFormatter)
    p.add_argument("-v", "--verbose", action="store_true", help="Log solver and assembly details")
    sub = p.add_subparsers(dest="shape", required=True)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--out", required=True, help="Output path (.obj/.ply)")
    common.add_argument("--radius", type=float, default=2.0)
    common.add_argument("--vertices", type=int, default=100, help="Requested vertex count (4..30000)")
    common.add_argument("--normals", action="store_true", help="Write vertex normals (OBJ only)")
    common.add_argument("--texture", help="Also write the gradient texture to this PNG path")

    sub.add_parser("sphere", parents=[common])
    cyl = sub.add_parser("cylinder", parents=[common])
    cyl.add_argument("--height", type=float, default=4.0)
    cyl.add_argument("--subdivisions", type=int, default=3, help="Height subdivisions (1..100)")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = _parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    node = SceneNode(name=args.shape)
    try:
        if args.shape == "sphere":
            params = SphereParams(radius=args.radius, vertices_count=args.vertices)
        else:
            params = CylinderParams(radius=args.radius, height=args.height,
                                    height_subdivisions=args.subdivisions, vertices_count=args.vertices)
        result = build(params, node)
    except GenerationError as exc:
        raise SystemExit(f"revmesh: {exc}")

    if args.out.lower().endswith(".ply"):
        save_ply(args.out, result.mesh)
    else:
        save_obj(args.out, result.mesh, result.vertex_normals if args.normals else None)
    if args.texture:
        save_png(result.texture, args.texture)
    print(f"{result.mesh.name}: {result.mesh.vertex_count} vertices, "
          f"{result.mesh.triangle_count} triangles -> {args.out}")
    return 0
