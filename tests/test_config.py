# tests/test_config.py
# Range checks on generation parameters

import dataclasses

import pytest

from revmesh.config import CylinderParams, SphereParams
from revmesh.errors import InvalidParameterCombination


def test_defaults() -> None:
    assert SphereParams() == SphereParams(radius=2.0, vertices_count=100)
    assert CylinderParams() == CylinderParams(radius=2.0, height=4.0, height_subdivisions=3, vertices_count=100)


@pytest.mark.parametrize("kwargs", [
    {"radius": 0.0},
    {"radius": -1.0},
    {"radius": float("nan")},
    {"vertices_count": 3},
    {"vertices_count": 30001},
    {"vertices_count": 10.5},
    {"vertices_count": True},
])
def test_sphere_rejects(kwargs) -> None:
    with pytest.raises(InvalidParameterCombination):
        SphereParams(**kwargs)


@pytest.mark.parametrize("kwargs", [
    {"height": 0.0},
    {"height_subdivisions": 0},
    {"height_subdivisions": 101},
    {"vertices_count": 3},
    {"radius": -2.0},
])
def test_cylinder_rejects(kwargs) -> None:
    with pytest.raises(InvalidParameterCombination):
        CylinderParams(**kwargs)


def test_bounds_are_inclusive() -> None:
    CylinderParams(height_subdivisions=1, vertices_count=4)
    CylinderParams(height_subdivisions=100, vertices_count=30000)
    SphereParams(vertices_count=4)
    SphereParams(vertices_count=30000)


def test_params_are_frozen() -> None:
    params = SphereParams()
    with pytest.raises(dataclasses.FrozenInstanceError):
        params.radius = 5.0  # type: ignore[misc]
