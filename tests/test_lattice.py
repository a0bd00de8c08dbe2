# tests/test_lattice.py
# Vertex positions and texture coordinates laid out ring by ring

import math

import pytest

from revmesh.budget import RingLayout, solve_cylinder, solve_sphere
from revmesh.lattice import build_lattice, cylinder_profile, sphere_profile


def _cylinder(radius: float = 2.0, height: float = 4.0, subdivisions: int = 3, requested: int = 100):
    layout = solve_cylinder(requested, subdivisions)
    return layout, build_lattice(layout, cylinder_profile(radius, height, subdivisions))


def _sphere(radius: float = 2.0, requested: int = 100):
    layout = solve_sphere(requested)
    return layout, build_lattice(layout, sphere_profile(radius, layout.ring_size))


def test_cylinder_poles_and_counts() -> None:
    layout, (verts, uvs) = _cylinder()
    assert len(verts) == len(uvs) == layout.vertex_count == 98
    assert verts[0] == (0.0, 2.0, 0.0)
    assert verts[-1] == (0.0, -2.0, 0.0)
    assert uvs[0] == (0.5, 1.0)
    assert uvs[-1] == (0.5, 0.0)


def test_cylinder_rings_step_down_at_constant_radius() -> None:
    layout, (verts, _) = _cylinder()
    k = layout.ring_size
    for r in range(layout.ring_count):
        start = layout.ring_start(r)
        ring = verts[start:start + k]
        expected_y = 2.0 - r * 4.0 / 3
        for x, y, z in ring:
            assert y == pytest.approx(expected_y)
            assert math.hypot(x, z) == pytest.approx(2.0)
    # last ring sits on the base, level with the bottom pole
    assert verts[layout.ring_start(layout.ring_count - 1)][1] == pytest.approx(-2.0)


def test_ring_starts_at_angle_zero_and_turns_towards_z() -> None:
    layout, (verts, _) = _cylinder()
    first = verts[1]
    second = verts[2]
    assert first == pytest.approx((2.0, 2.0, 0.0))
    angle = 2 * math.pi / layout.ring_size
    assert second == pytest.approx((2.0 * math.cos(angle), 2.0, 2.0 * math.sin(angle)))


def test_sphere_vertices_lie_on_the_sphere() -> None:
    layout, (verts, uvs) = _sphere(radius=3.0)
    assert len(verts) == len(uvs) == 114
    assert verts[0] == (0.0, 3.0, 0.0)
    assert verts[-1] == (0.0, -3.0, 0.0)
    for v in verts:
        assert math.sqrt(v[0] ** 2 + v[1] ** 2 + v[2] ** 2) == pytest.approx(3.0)


def test_sphere_rings_are_symmetric_about_the_equator() -> None:
    layout, (verts, _) = _sphere()
    ys = [verts[layout.ring_start(r)][1] for r in range(layout.ring_count)]
    assert ys == sorted(ys, reverse=True)
    for a, b in zip(ys, reversed(ys)):
        assert a == pytest.approx(-b, abs=1e-12)
    # k = 16 puts the middle ring on the equator
    assert ys[layout.ring_count // 2] == pytest.approx(0.0, abs=1e-12)


def test_uv_rows_step_uniformly_between_poles() -> None:
    layout, (_, uvs) = _cylinder()
    for r in range(layout.ring_count):
        v = uvs[layout.ring_start(r)][1]
        assert v == pytest.approx(1.0 - (r + 1) / (layout.ring_count + 1))
        assert all(0.0 < uv[1] < 1.0 for uv in uvs[layout.ring_start(r):layout.ring_start(r) + layout.ring_size])


@pytest.mark.parametrize("build", [_cylinder, _sphere])
def test_uv_seam_is_not_duplicated(build) -> None:
    # u runs 0 .. 1 inclusive across the k columns; the closing quad spans u = 1 back to u = 0
    layout, (_, uvs) = build()
    k = layout.ring_size
    start = layout.ring_start(0)
    us = [uv[0] for uv in uvs[start:start + k]]
    assert us[0] == 0.0
    assert us[-1] == 1.0
    assert us == sorted(us)
    assert us[1] == pytest.approx(1.0 / (k - 1))


def test_single_column_rings_get_u_zero() -> None:
    layout = RingLayout(ring_size=1, ring_count=2)
    verts, uvs = build_lattice(layout, cylinder_profile(1.0, 2.0, 1))
    assert len(verts) == 4
    assert [uv[0] for uv in uvs[1:3]] == [0.0, 0.0]


def test_profile_must_match_layout() -> None:
    layout = RingLayout(ring_size=8, ring_count=3)
    with pytest.raises(ValueError):
        build_lattice(layout, cylinder_profile(1.0, 1.0, 5))
