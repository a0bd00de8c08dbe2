# revmesh/errors.py
"""Failure kinds reported by mesh generation."""
from __future__ import annotations


class GenerationError(Exception):
    """Base class for failures reported to the caller of a generation call."""


class InvalidParameterCombination(GenerationError, ValueError):
    """The parameters cannot produce a closed mesh (no ring size fits them)."""


class MissingRenderTarget(GenerationError):
    """No render target was supplied to receive the mesh and its texture."""
