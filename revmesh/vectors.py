# revmesh/vectors.py
from __future__ import annotations

import math
from typing import List, Tuple

Vec3 = Tuple[float, float, float]
Vec2 = Tuple[float, float]
Tri = Tuple[int, int, int]
Mat4 = List[List[float]]

# -----------------------------
# Small vector/matrix utilities
# -----------------------------

def v_add(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def v_sub(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def v_scale(a: Vec3, s: float) -> Vec3:
    return (a[0] * s, a[1] * s, a[2] * s)


def v_dot(a: Vec3, b: Vec3) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def v_cross(a: Vec3, b: Vec3) -> Vec3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def v_len(a: Vec3) -> float:
    return math.sqrt(v_dot(a, a))


def v_norm(a: Vec3) -> Vec3:
    l = v_len(a)
    if l == 0:
        return (0.0, 0.0, 0.0)
    return (a[0] / l, a[1] / l, a[2] / l)


def centroid(a: Vec3, b: Vec3, c: Vec3) -> Vec3:
    return v_scale(v_add(v_add(a, b), c), 1.0 / 3.0)


def face_normal(a: Vec3, b: Vec3, c: Vec3) -> Vec3:
    """Unit normal of triangle (a, b, c); counter-clockwise seen from the front."""
    return v_norm(v_cross(v_sub(b, a), v_sub(c, a)))


def mat_rotate_axis(axis: Vec3, a: float) -> Mat4:
    """Rotation by angle ``a`` (radians) about an arbitrary axis through the origin."""
    x, y, z = v_norm(axis)
    if (x, y, z) == (0.0, 0.0, 0.0):
        raise ValueError("rotation axis must be non-zero")
    c, s = math.cos(a), math.sin(a)
    t = 1.0 - c
    return [
        [t * x * x + c, t * x * y - s * z, t * x * z + s * y, 0.0],
        [t * x * y + s * z, t * y * y + c, t * y * z - s * x, 0.0],
        [t * x * z - s * y, t * y * z + s * x, t * z * z + c, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ]


def apply_mat(v: Vec3, m: Mat4) -> Vec3:
    x, y, z = v
    # v' = M * [x, y, z, 1]
    xp = m[0][0] * x + m[0][1] * y + m[0][2] * z + m[0][3]
    yp = m[1][0] * x + m[1][1] * y + m[1][2] * z + m[1][3]
    zp = m[2][0] * x + m[2][1] * y + m[2][2] * z + m[2][3]
    wp = m[3][0] * x + m[3][1] * y + m[3][2] * z + m[3][3]
    if wp != 0 and wp != 1:
        return (xp / wp, yp / wp, zp / wp)
    return (xp, yp, zp)
