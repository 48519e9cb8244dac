"""API request/response schemas."""

from __future__ import annotations
from typing import Optional

from pydantic import BaseModel, Field

from patiokit.models import (
    PatioConfig, GenerationOptions, DerivedLayout, LayoutSummary, Part, PartStats,
    Catalog, DeckingConfig, DeckLayout, MaterialOption,
)
from patiokit.services.pricing import Quote


class BuildRequest(BaseModel):
    """Request body for /build, /quote and /scene."""
    config: PatioConfig = Field(default_factory=PatioConfig)
    options: GenerationOptions = Field(default_factory=GenerationOptions)
    catalog_id: Optional[str] = None


class BuildResponse(BaseModel):
    validated_config: PatioConfig
    layout: DerivedLayout
    parts: list[Part]
    stats: PartStats
    summary: LayoutSummary


class QuoteResponse(BaseModel):
    validated_config: PatioConfig
    quote: Quote


class SceneRequest(BuildRequest):
    include_site: bool = True


class DeckBuildRequest(BaseModel):
    """Request body for /deck/build, /deck/quote and /deck/scene."""
    config: DeckingConfig = Field(default_factory=DeckingConfig)
    options: GenerationOptions = Field(default_factory=GenerationOptions)


class DeckBuildResponse(BaseModel):
    validated_config: DeckingConfig
    layout: DeckLayout
    parts: list[Part]
    stats: PartStats


class DeckQuoteResponse(BaseModel):
    validated_config: DeckingConfig
    quote: Quote


class DeckSceneRequest(DeckBuildRequest):
    include_site: bool = True


class CatalogInfo(BaseModel):
    default: str
    catalogs: list[Catalog]
    frame_colors: dict[str, str] = {}
    decking_materials: dict[str, MaterialOption] = {}
    decking_colors: dict[str, dict[str, str]] = {}


class RuleInfo(BaseModel):
    id: str
    name: str
