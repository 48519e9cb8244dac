"""Derived layout — the fully resolved structure behind a configuration."""

from __future__ import annotations
from pydantic import BaseModel, ConfigDict

from .catalog import BeamSpec, SheetSpec, PatioTypeSpec, ColumnSpec
from .geometry import Point2D


class DerivedLayout(BaseModel):
    """
    Read-only snapshot produced by the layout deriver.

    Dimensions are metres unless the name says otherwise. Post positions
    are (x, z) pairs in structure-local coordinates: back edge at
    z = -depth / 2, front edge at z = depth / 2 + overhang.
    """
    model_config = ConfigDict(frozen=True)

    # Clamped configuration
    width: float
    depth: float
    height: float

    # Catalog selections
    catalog_id: str
    patio_type: PatioTypeSpec
    beam: BeamSpec
    sheet: SheetSpec
    column: ColumnSpec

    # Derived measurements
    beam_profile_h: float
    beam_profile_w: float
    col_size: float         # mm
    overhang: float
    total_depth: float
    slope_angle: float      # radians
    gable_height: float

    # Flags
    is_freestanding: bool
    is_gable: bool
    is_skyline: bool
    has_back: bool
    has_left: bool
    has_right: bool

    # Posts
    mid_post_count: int
    post_positions: list[Point2D]

    @property
    def front_z(self) -> float:
        return self.depth / 2 + self.overhang

    @property
    def back_z(self) -> float:
        return -self.depth / 2

    @property
    def post_count(self) -> int:
        return len(self.post_positions)


class LayoutSummary(BaseModel):
    """Headline figures for quotes and PDF exports."""
    patio_type: str
    patio_type_description: str
    beam: str
    sheet: str
    column: str
    posts: int
    mid_posts: int
    width: float
    depth: float
    height: float
    overhang: float
    area: float

    @classmethod
    def from_layout(cls, layout: DerivedLayout) -> LayoutSummary:
        return cls(
            patio_type=layout.patio_type.label,
            patio_type_description=layout.patio_type.description,
            beam=layout.beam.label,
            sheet=layout.sheet.label,
            column=layout.column.label,
            posts=layout.post_count,
            mid_posts=layout.mid_post_count,
            width=layout.width,
            depth=layout.depth,
            height=layout.height,
            overhang=layout.overhang,
            area=round(layout.width * layout.depth, 2),
        )
