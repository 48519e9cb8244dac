"""Patio configuration — the user's intent, as edited by the wizard."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel, Field


class RoofMaterial(str, Enum):
    INSULATED = "insulated"
    COLORBOND = "colorbond"


class ColorbondType(str, Enum):
    SUPERDEK = "superdek"
    FLATDEK = "flatdek"


class RoofShape(str, Enum):
    FLAT = "flat"
    GABLE = "gable"


class PatioStyle(str, Enum):
    SKILLION = "skillion"
    FLY_OVER = "fly-over"
    FREE_STANDING = "free-standing"
    SKYLINE = "skyline"
    TIMBER_LOOK = "timber-look"


class AttachmentSide(str, Enum):
    """Edges that can be fixed to an existing wall. The front never attaches."""
    BACK = "back"
    LEFT = "left"
    RIGHT = "right"


# Canonical ordering used when normalising attached sides
ATTACHMENT_ORDER: tuple[AttachmentSide, ...] = (
    AttachmentSide.BACK, AttachmentSide.LEFT, AttachmentSide.RIGHT,
)


class FrameFinish(str, Enum):
    MATTE = "matte"
    SATIN = "satin"
    GLOSS = "gloss"
    MIRROR = "mirror"


class Accessories(BaseModel):
    """Optional extras. Each flag maps to its own group of parts."""
    lighting: bool = False
    fans: bool = False
    gutters: bool = True
    designer_beam: bool = False
    columns: bool = False           # Decorative column wraps


class PatioConfig(BaseModel):
    """User-adjustable parameters for a patio roof."""
    material: RoofMaterial = RoofMaterial.INSULATED
    colorbond_type: ColorbondType = ColorbondType.SUPERDEK
    shape: RoofShape = RoofShape.FLAT
    style: PatioStyle = PatioStyle.FLY_OVER
    width: float = 5.0              # Metres, along the house wall
    depth: float = 3.5              # Metres, projection from the house (span axis)
    height: float = 2.8             # Metres, ground to underside of beam
    frame_color: str = "#2d2c2b"    # Monument
    frame_finish: FrameFinish = FrameFinish.GLOSS
    attached_sides: list[AttachmentSide] = Field(
        default_factory=lambda: [AttachmentSide.BACK]
    )
    accessories: Accessories = Field(default_factory=Accessories)

    @property
    def is_freestanding(self) -> bool:
        return self.style == PatioStyle.FREE_STANDING

    @property
    def is_gable(self) -> bool:
        return self.shape == RoofShape.GABLE

    def is_attached(self, side: AttachmentSide) -> bool:
        return side in self.attached_sides


FRAME_COLORS: dict[str, str] = {
    "Surfmist": "#e8e4da",
    "Monument": "#2d2c2b",
    "Night Sky": "#1a1a1a",
    "Shale Grey": "#b0a99f",
    "Basalt": "#6b6860",
    "Woodland Grey": "#4d4f47",
    "Ironstone": "#3c3228",
    "Pale Eucalypt": "#6b8c5a",
}


class GenerationOptions(BaseModel):
    """Controls which part rules run. Empty lists mean every default rule."""
    enabled_rules: list[str] = []
    disabled_rules: list[str] = []
