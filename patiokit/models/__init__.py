from .geometry import Point2D, Point3D, Euler, Size3D, mm
from .configuration import (
    PatioConfig, Accessories, GenerationOptions, RoofMaterial, ColorbondType,
    RoofShape, PatioStyle, AttachmentSide, FrameFinish, ATTACHMENT_ORDER,
    FRAME_COLORS,
)
from .catalog import (
    Catalog, BeamSpec, SheetSpec, ColumnSpec, GutterSpec, PatioTypeSpec,
    SheetDirection,
)
from .decking import (
    DeckingConfig, DeckingMaterial, BoardDirection, RailingStyle, DeckEdge,
    StairPosition, DeckStairs, DeckAccessories, DeckLayout, MaterialOption,
    DECKING_MATERIALS, DECKING_COLORS, RAILING_ORDER,
)
from .layout import DerivedLayout, LayoutSummary
from .parts import Part, PartKind, PartStats, GeometryKind, SITE_KINDS
from .context import BuildContext, DeckBuildContext

__all__ = [
    "Point2D", "Point3D", "Euler", "Size3D", "mm",
    "PatioConfig", "Accessories", "GenerationOptions", "RoofMaterial",
    "ColorbondType", "RoofShape", "PatioStyle", "AttachmentSide",
    "FrameFinish", "ATTACHMENT_ORDER", "FRAME_COLORS",
    "Catalog", "BeamSpec", "SheetSpec", "ColumnSpec", "GutterSpec",
    "PatioTypeSpec", "SheetDirection",
    "DeckingConfig", "DeckingMaterial", "BoardDirection", "RailingStyle",
    "DeckEdge", "StairPosition", "DeckStairs", "DeckAccessories", "DeckLayout",
    "MaterialOption", "DECKING_MATERIALS", "DECKING_COLORS", "RAILING_ORDER",
    "DerivedLayout", "LayoutSummary",
    "Part", "PartKind", "PartStats", "GeometryKind", "SITE_KINDS",
    "BuildContext", "DeckBuildContext",
]
