"""Deck configuration and its derived substructure layout.

A deck is a timber or composite platform: boards on joists, joists on
bearers, bearers on posts. The footprint is centred on the origin with
length along X and width along Z; the front edge is at z = width / 2.
"""

from __future__ import annotations
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from .geometry import Point2D


class DeckingMaterial(str, Enum):
    COMPOSITE = "composite"
    CEDAR = "cedar"
    PINE = "pine"
    MERBAU = "merbau"
    SPOTTED_GUM = "spotted-gum"


class BoardDirection(str, Enum):
    LENGTHWISE = "lengthwise"   # Boards run along the length (X)
    WIDTHWISE = "widthwise"     # Boards run along the width (Z)


class RailingStyle(str, Enum):
    NONE = "none"
    GLASS = "glass"
    WIRE = "wire"
    TIMBER = "timber"


class DeckEdge(str, Enum):
    FRONT = "front"
    LEFT = "left"
    RIGHT = "right"
    BACK = "back"


RAILING_ORDER: tuple[DeckEdge, ...] = (
    DeckEdge.FRONT, DeckEdge.LEFT, DeckEdge.RIGHT, DeckEdge.BACK,
)


class StairPosition(str, Enum):
    FRONT = "front"
    LEFT = "left"
    RIGHT = "right"


class DeckStairs(BaseModel):
    enabled: bool = False
    position: StairPosition = StairPosition.FRONT
    width: float = 1.2


class DeckAccessories(BaseModel):
    lighting: bool = False
    seating: bool = False


class DeckingConfig(BaseModel):
    """User-adjustable parameters for a deck."""
    material: DeckingMaterial = DeckingMaterial.COMPOSITE
    length: float = 5.0             # Metres, X
    width: float = 3.5              # Metres, Z
    height: float = 0.6             # Ground to top of boards
    board_direction: BoardDirection = BoardDirection.LENGTHWISE
    color: str = "#5c3d2e"          # Walnut
    railing_style: RailingStyle = RailingStyle.NONE
    railing_positions: list[DeckEdge] = Field(
        default_factory=lambda: [DeckEdge.FRONT, DeckEdge.LEFT, DeckEdge.RIGHT]
    )
    stairs: DeckStairs = Field(default_factory=DeckStairs)
    accessories: DeckAccessories = Field(default_factory=DeckAccessories)

    @property
    def is_lengthwise(self) -> bool:
        return self.board_direction == BoardDirection.LENGTHWISE

    def edge_length(self, edge: DeckEdge) -> float:
        return self.length if edge in (DeckEdge.FRONT, DeckEdge.BACK) else self.width


class MaterialOption(BaseModel):
    name: str
    description: str


DECKING_MATERIALS: dict[DeckingMaterial, MaterialOption] = {
    DeckingMaterial.COMPOSITE: MaterialOption(
        name="Composite", description="Low maintenance, long-lasting composite boards"),
    DeckingMaterial.CEDAR: MaterialOption(
        name="Western Red Cedar", description="Natural beauty with warm tones"),
    DeckingMaterial.PINE: MaterialOption(
        name="Treated Pine", description="Affordable & pressure-treated for durability"),
    DeckingMaterial.MERBAU: MaterialOption(
        name="Merbau", description="Rich dark hardwood, naturally durable"),
    DeckingMaterial.SPOTTED_GUM: MaterialOption(
        name="Spotted Gum", description="Premium Australian hardwood"),
}

DECKING_COLORS: dict[DeckingMaterial, dict[str, str]] = {
    DeckingMaterial.COMPOSITE: {
        "Charcoal": "#3a3a3a",
        "Walnut": "#5c3d2e",
        "Teak": "#8b6d4c",
        "Silver Grey": "#8c8c8c",
        "Sandstone": "#c4a96a",
    },
    DeckingMaterial.CEDAR: {
        "Natural": "#b5754a",
        "Honey": "#c49255",
        "Amber": "#9e6b3a",
    },
    DeckingMaterial.PINE: {
        "Natural Pine": "#c9a96e",
        "Jarrah Stain": "#6e2d1e",
        "Walnut Stain": "#5a3e2b",
        "Grey Wash": "#9a9590",
    },
    DeckingMaterial.MERBAU: {
        "Natural": "#6b3325",
        "Oiled": "#7a3f2d",
    },
    DeckingMaterial.SPOTTED_GUM: {
        "Natural": "#8c6e4a",
        "Oiled": "#7a5e3c",
    },
}


class DeckLayout(BaseModel):
    """
    Substructure resolved from a deck configuration.

    The run axis is the direction the boards run; the span axis is across
    them. Joists run along the span axis, spaced along the run. Bearers
    run along the run axis, spaced across the span. Posts sit under the
    bearers. Positions are (x, z) ground coordinates.
    """
    model_config = ConfigDict(frozen=True)

    length: float
    width: float
    height: float
    board_direction: BoardDirection

    board_length: float     # Run axis extent
    board_span: float       # Span axis extent
    board_count: int
    joist_count: int
    bearer_count: int
    posts_per_bearer: int
    post_height: float      # 0 when the platform is too low for posts
    post_positions: list[Point2D]

    @property
    def is_lengthwise(self) -> bool:
        return self.board_direction == BoardDirection.LENGTHWISE

    @property
    def area(self) -> float:
        return self.length * self.width

    def to_xz(self, run: float, span: float) -> tuple[float, float]:
        """Map a (run, span) offset to ground (x, z)."""
        return (run, span) if self.is_lengthwise else (span, run)

    def box(self, run: float, height: float, span: float) -> tuple[float, float, float]:
        """Map (run, height, span) extents to (width, height, depth)."""
        return (run, height, span) if self.is_lengthwise else (span, height, run)
