"""Product catalog records and the pure selection functions over them.

Dimensions are millimetres, as published in the manufacturer's span
tables. Conversion to metres happens when a layout is derived.

Every selection is total: an input that matches no record falls back to
the lowest-capability entry and logs a warning instead of raising.
"""

from __future__ import annotations
import logging
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .configuration import RoofMaterial, ColorbondType

logger = logging.getLogger(__name__)


class BeamSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    label: str
    profile_height: float   # Visual depth of the beam face
    profile_width: float
    thickness: float        # Base metal thickness
    mass: float             # kg per metre
    max_span: float = Field(gt=0)   # Max unsupported span, N2 wind region
    fluted: bool = False


class SheetSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    label: str
    thickness: float
    cover_width: float
    max_span: float = Field(gt=0)
    insulated: bool = False
    rib_height: float = Field(default=0.0, ge=0)    # 0 for flat profiles
    rib_spacing: float = Field(default=0.0, ge=0)   # Centre to centre

    @model_validator(mode="after")
    def _ribbed_profiles_need_spacing(self) -> SheetSpec:
        if self.rib_height > 0 and self.rib_spacing <= 0:
            raise ValueError(f"sheet {self.id}: ribbed profile needs a positive rib_spacing")
        return self


class ColumnShape(str, Enum):
    SQUARE = "square"
    ROUND = "round"


class ColumnSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    label: str
    size: float
    shape: ColumnShape = ColumnShape.SQUARE
    decorative: bool = False


class GutterSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    label: str
    width: float
    height: float


class DownpipeSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    diameter: float


class BracketSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    width: float
    height: float
    depth: float = 0.0


class BracketSet(BaseModel):
    model_config = ConfigDict(frozen=True)

    wall_bracket: BracketSpec
    beam_end_bracket: BracketSpec
    beam_to_beam_bracket: BracketSpec
    post_bracket: BracketSpec
    post_cap: BracketSpec


class SheetDirection(str, Enum):
    DEPTH = "depth"     # Sheets run from the house outwards
    WIDTH = "width"     # Sheets run across, carried on purlins


class PatioTypeSpec(BaseModel):
    """A structural pattern: span capability, overhang and purlin layout."""
    model_config = ConfigDict(frozen=True)

    id: str
    label: str
    description: str
    max_span: float = Field(gt=0)
    has_overhang: bool = False
    overhang_distance: float = 0.0
    has_purlins: bool = False
    has_mid_purlin: bool = False
    sheet_direction: SheetDirection = SheetDirection.DEPTH
    default_beam: str
    # Largest span (inclusive) this pattern is selected for. None = no ceiling.
    selection_limit: Optional[float] = None
    # Pattern is only offered when the structure is attached to a wall.
    attached_only: bool = False


def _value(item: object) -> str:
    return str(getattr(item, "value", item))


class Catalog(BaseModel):
    """
    A complete, versioned product catalog.

    Records are ordered by increasing capability; the first entry of each
    list is the fallback for unmapped lookups.
    """
    model_config = ConfigDict(frozen=True)

    catalog_id: str
    version: str
    beams: list[BeamSpec]
    sheets: list[SheetSpec]
    columns: list[ColumnSpec]
    gutters: list[GutterSpec]
    downpipe: DownpipeSpec
    brackets: BracketSet
    patio_types: list[PatioTypeSpec]
    # "material" or "material:sub_type" -> sheet id
    sheet_selection: dict[str, str]
    standard_column_id: str
    decorative_column_id: str
    beam_face_width: float = 150.0  # H2 standard beam face

    def select_patio_type(self, span_mm: float, is_freestanding: bool) -> PatioTypeSpec:
        """First pattern whose limit covers the span. Limits are inclusive."""
        for spec in self.patio_types:
            if spec.attached_only and is_freestanding:
                continue
            if spec.selection_limit is None or span_mm <= spec.selection_limit:
                return spec
        logger.warning(
            "No patio type for span %.0fmm (freestanding=%s) in catalog %s, "
            "falling back to %s",
            span_mm, is_freestanding, self.catalog_id, self.patio_types[0].id,
        )
        return self.patio_types[0]

    def select_beam_for_span(self, span_mm: float) -> BeamSpec:
        """Smallest beam whose rated span covers span_mm, else the largest."""
        ordered = sorted(self.beams, key=lambda b: b.max_span)
        for beam in ordered:
            if span_mm <= beam.max_span:
                return beam
        return ordered[-1]

    def select_sheet(
        self,
        material: RoofMaterial | str,
        colorbond_type: ColorbondType | str,
    ) -> SheetSpec:
        """Sub-type specific mapping wins, then the material-wide mapping."""
        mat = _value(material)
        for key in (f"{mat}:{_value(colorbond_type)}", mat):
            sheet_id = self.sheet_selection.get(key)
            if sheet_id is not None:
                return self.sheet(sheet_id)
        logger.warning(
            "No sheet mapped for %s/%s in catalog %s, falling back to %s",
            mat, _value(colorbond_type), self.catalog_id, self.sheets[0].id,
        )
        return self.sheets[0]

    def select_column(self, decorative: bool = False) -> ColumnSpec:
        return self.column(self.decorative_column_id if decorative else self.standard_column_id)

    def beam(self, beam_id: str) -> BeamSpec:
        return _find(self.beams, beam_id, "beam")

    def sheet(self, sheet_id: str) -> SheetSpec:
        return _find(self.sheets, sheet_id, "sheet")

    def column(self, column_id: str) -> ColumnSpec:
        return _find(self.columns, column_id, "column")

    @property
    def gutter(self) -> GutterSpec:
        return self.gutters[0]


def _find(records: list, record_id: str, kind: str):
    for record in records:
        if record.id == record_id:
            return record
    logger.warning("Unknown %s id %r, falling back to %s", kind, record_id, records[0].id)
    return records[0]
