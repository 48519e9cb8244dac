"""Build context — accumulates state during a single parts generation pass."""

from __future__ import annotations
from pydantic import BaseModel, Field

from .catalog import Catalog
from .configuration import PatioConfig, GenerationOptions
from .decking import DeckingConfig, DeckLayout
from .layout import DerivedLayout
from .parts import Part


class BuildContext(BaseModel):
    """
    Holds all state during one parts generation pass.

    The deriver supplies the layout, rules add generated parts and the
    generator orchestrates the flow. A context is never reused across
    calls, so nothing leaks between concurrent generations.
    """
    # Input
    config: PatioConfig
    layout: DerivedLayout
    catalog: Catalog
    options: GenerationOptions = Field(default_factory=GenerationOptions)

    # Output (populated by rules)
    parts: list[Part] = []

    def add_parts(self, parts: list[Part]) -> None:
        self.parts.extend(parts)

    def frame_surface(self) -> dict[str, object]:
        """Powder-coated frame colour shared by posts, beams and trims."""
        return {"color": self.config.frame_color, "metalness": 0.3, "roughness": 0.6}


class DeckBuildContext(BaseModel):
    """State for one deck parts generation pass."""
    config: DeckingConfig
    layout: DeckLayout
    options: GenerationOptions = Field(default_factory=GenerationOptions)

    parts: list[Part] = []

    def add_parts(self, parts: list[Part]) -> None:
        self.parts.extend(parts)

    def board_surface(self) -> dict[str, object]:
        return {"color": self.config.color, "metalness": 0.0, "roughness": 0.7}

    def frame_surface(self) -> dict[str, object]:
        """Treated timber bearers, joists and posts."""
        return {"color": "#8b7355", "metalness": 0.0, "roughness": 0.75}
