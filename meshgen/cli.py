from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from .mesh import Mesh
from .primitives import regular_polygon
from .vector import Vec3
from .wavefront import save_obj

logger = logging.getLogger(__name__)

_DEF_HELP = """
Examples:
  python -m meshgen --sides 4 --extrude 0,0,1 --out box.obj
  python -m meshgen --sides 6 --radius 2 --normal 0.5 --repeat 3 --out tower.obj
  python -m meshgen --sides 3 --extrude 0.2,0,1 --repeat 4 --name twist --out twist.obj
"""


def _vec(text: str) -> Vec3:
    parts = text.split(",")
    if len(parts) != 3:
        raise argparse.ArgumentTypeError(f"expected dx,dy,dz (got {text!r})")
    try:
        return Vec3(*(float(p) for p in parts))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected numbers in {text!r}") from None


def build(sides: int, radius: float, repeat: int, offset: Optional[Vec3] = None,
          normal: Optional[float] = None) -> Mesh:
    """Polygon extruded ``repeat`` times, either by ``offset`` or along its normal."""
    mesh = Mesh()
    face = regular_polygon(mesh, sides, radius)
    for _ in range(repeat):
        if offset is not None:
            res = mesh.extrude_face(face, offset)
        else:
            res = mesh.extrude_face_normal(face, normal)
        face = res.top_face
    return mesh


def _cli(argv: Optional[List[str]] = None) -> None:
    p = argparse.ArgumentParser(description="meshgen: build a polygon and extrude it", epilog=_DEF_HELP,
                                formatter_class=argparse.RawTextHelpFormatter)
    p.add_argument("--out", required=True, help="Output .obj path")
    p.add_argument("--sides", type=int, default=4)
    p.add_argument("--radius", type=float, default=1.0)
    way = p.add_mutually_exclusive_group(required=True)
    way.add_argument("--extrude", type=_vec, help="Displacement per step as dx,dy,dz")
    way.add_argument("--normal", type=float, help="Extrude along the face normal by this length")
    p.add_argument("--repeat", type=int, default=1)
    p.add_argument("--name", default=None, help="Object name written as 'o <name>'")
    p.add_argument("--verbose", "-v", action="store_true")

    args = p.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")
    if args.sides < 3:
        p.error("--sides must be >= 3")

    mesh = build(args.sides, args.radius, args.repeat, offset=args.extrude, normal=args.normal)
    save_obj(args.out, mesh, name=args.name)
    logger.info("wrote %s (%d faces)", args.out, mesh.face_count())


if __name__ == "__main__":
    _cli()
