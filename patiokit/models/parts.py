"""Parts list output models."""

from __future__ import annotations
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

from .geometry import Point3D, Euler, Size3D


class PartKind(str, Enum):
    BASE_PLATE = "base-plate"
    COLUMN = "column"
    POST_CAP = "post-cap"
    WALL_BRACKET = "wall-bracket"
    BEAM = "beam"
    BEAM_BRACKET = "beam-bracket"
    PURLIN = "purlin"
    ROOF_SHEET = "roof-sheet"
    RIB = "rib"
    UNDERSIDE_PANEL = "underside-panel"
    UNDERSIDE_JOINT = "underside-joint"
    GUTTER = "gutter"
    DOWNPIPE = "downpipe"
    DOWNPIPE_STRAP = "downpipe-strap"
    DESIGNER_BEAM = "designer-beam"
    LIGHT = "light"
    FAN_ROD = "fan-rod"
    FAN_MOTOR = "fan-motor"
    FAN_BLADE = "fan-blade"
    GABLE_SLOPE = "gable-slope"
    GABLE_RIDGE = "gable-ridge"
    GABLE_RIDGE_CAP = "gable-ridge-cap"
    GABLE_INFILL = "gable-infill"
    GABLE_TRIM = "gable-trim"
    SKYLINE_SHEET = "skyline-sheet"
    SKYLIGHT_STRIP = "skylight-strip"
    DECORATIVE_COLUMN = "decorative-column"
    FLUTE_LINE = "flute-line"
    GROUND = "ground"
    WALL = "wall"
    DECK_BOARD = "deck-board"
    JOIST = "joist"
    BEARER = "bearer"
    DECK_POST = "deck-post"
    STAIR_TREAD = "stair-tread"
    RAIL = "rail"
    RAIL_POST = "rail-post"
    RAIL_WIRE = "rail-wire"
    BALUSTER = "baluster"
    GLASS_PANEL = "glass-panel"


class GeometryKind(str, Enum):
    BOX = "box"
    CYLINDER = "cylinder"
    PLANE = "plane"
    TRIANGLE = "triangle"
    TORUS = "torus"


# Context geometry that is not part of the structure itself
SITE_KINDS = frozenset({PartKind.GROUND, PartKind.WALL})


class Part(BaseModel):
    """A single structural or decorative element positioned in 3D space."""
    model_config = ConfigDict(frozen=True)

    id: str = ""            # "<kind>-<index within kind>", set by the generator
    kind: PartKind
    position: Point3D
    rotation: Euler = Euler()
    dimensions: Size3D      # Bounding box before rotation (meters)
    color: str
    metalness: float
    roughness: float
    geometry: GeometryKind = GeometryKind.BOX
    geometry_args: Optional[list[float]] = None
    metadata: dict[str, Any] = {}

    @property
    def label(self) -> str:
        return self.metadata.get("label") or f"{self.kind.value} {self.id.rsplit('-', 1)[-1]}"


class PartStats(BaseModel):
    """Summary statistics for a generated parts list."""
    total_parts: int = 0
    posts: int = 0
    beams: int = 0
    purlins: int = 0
    by_kind: dict[str, int] = {}

    @classmethod
    def from_parts(cls, parts: list[Part]) -> PartStats:
        by_kind: dict[str, int] = {}
        for p in parts:
            by_kind[p.kind.value] = by_kind.get(p.kind.value, 0) + 1
        return cls(
            total_parts=len(parts),
            posts=by_kind.get(PartKind.COLUMN.value, 0) + by_kind.get(PartKind.DECK_POST.value, 0),
            beams=by_kind.get(PartKind.BEAM.value, 0),
            purlins=by_kind.get(PartKind.PURLIN.value, 0),
            by_kind=by_kind,
        )
