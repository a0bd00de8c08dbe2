# revmesh/config.py
"""
Generation parameters for the two shapes.

Values are checked when the dataclass is built; anything outside the accepted
ranges raises InvalidParameterCombination instead of being clamped.

    SphereParams(radius=2.0, vertices_count=100)
    CylinderParams(radius=2.0, height=4.0, height_subdivisions=3, vertices_count=100)
"""
from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidParameterCombination

MIN_VERTICES = 4
MAX_VERTICES = 30000
MIN_HEIGHT_SUBDIVISIONS = 1
MAX_HEIGHT_SUBDIVISIONS = 100


def _check_positive(name: str, value: float) -> None:
    if not value > 0:
        raise InvalidParameterCombination(f"{name} must be > 0, got {value!r}")


def _check_range(name: str, value: int, lo: int, hi: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidParameterCombination(f"{name} must be an integer, got {value!r}")
    if not lo <= value <= hi:
        raise InvalidParameterCombination(f"{name} must be in {lo}..{hi}, got {value}")


@dataclass(frozen=True)
class SphereParams:
    radius: float = 2.0
    vertices_count: int = 100

    def __post_init__(self) -> None:
        _check_positive("radius", self.radius)
        _check_range("vertices_count", self.vertices_count, MIN_VERTICES, MAX_VERTICES)


@dataclass(frozen=True)
class CylinderParams:
    radius: float = 2.0
    height: float = 4.0
    height_subdivisions: int = 3
    vertices_count: int = 100

    def __post_init__(self) -> None:
        _check_positive("radius", self.radius)
        _check_positive("height", self.height)
        _check_range("height_subdivisions", self.height_subdivisions,
                     MIN_HEIGHT_SUBDIVISIONS, MAX_HEIGHT_SUBDIVISIONS)
        _check_range("vertices_count", self.vertices_count, MIN_VERTICES, MAX_VERTICES)
