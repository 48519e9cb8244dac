"""Geometric primitives used throughout the configurator.

All values are metres in structure-local coordinates: origin at the
structure centre on the ground, X along the width, Y up, Z along the
depth (back edge negative, front edge positive).
"""

from __future__ import annotations
from pydantic import BaseModel, ConfigDict


class Point2D(BaseModel):
    """Point on the ground plane (X-Z in Three.js convention)."""
    model_config = ConfigDict(frozen=True)

    x: float
    z: float

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.z)


class Point3D(BaseModel):
    """Point in 3D space."""
    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    z: float

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)


class Euler(BaseModel):
    """XYZ Euler rotation in radians."""
    model_config = ConfigDict(frozen=True)

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)


class Size3D(BaseModel):
    """Axis-aligned bounding box extents before rotation."""
    model_config = ConfigDict(frozen=True)

    width: float    # X
    height: float   # Y
    depth: float    # Z

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.width, self.height, self.depth)


def mm(value: float) -> float:
    """Convert catalog millimetres to world metres."""
    return value / 1000
