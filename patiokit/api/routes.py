"""FastAPI route definitions."""

from __future__ import annotations

from fastapi import APIRouter

from patiokit.settings import Settings
from patiokit.catalog.registry import list_catalogs, DEFAULT_CATALOG_ID
from patiokit.models import FRAME_COLORS, DECKING_MATERIALS, DECKING_COLORS
from patiokit.services.pipeline import PatioPipeline, DeckPipeline
from patiokit.services.pricing import estimate
from patiokit.services.deck_pricing import estimate_deck
from patiokit.services.scene import SceneBuilder, Scene
from patiokit.api.schemas import (
    BuildRequest, BuildResponse, QuoteResponse, SceneRequest, CatalogInfo, RuleInfo,
    DeckBuildRequest, DeckBuildResponse, DeckQuoteResponse, DeckSceneRequest,
)

router = APIRouter()

# Shared, stateless pipelines; the scene builder owns the material cache
_pipeline = PatioPipeline(catalog_id=Settings().catalog_id)
_deck_pipeline = DeckPipeline()
_scenes = SceneBuilder()


@router.post("/build", response_model=BuildResponse)
async def build(request: BuildRequest) -> BuildResponse:
    """Validate a configuration and generate its layout and parts."""
    result = _pipeline.build(request.config, request.catalog_id, request.options)
    return BuildResponse(
        validated_config=result.validated_config,
        layout=result.layout,
        parts=result.parts,
        stats=result.stats,
        summary=result.summary(),
    )


@router.post("/quote", response_model=QuoteResponse)
async def quote(request: BuildRequest) -> QuoteResponse:
    """Indicative price range for a configuration."""
    result = _pipeline.build(request.config, request.catalog_id, request.options)
    return QuoteResponse(
        validated_config=result.validated_config,
        quote=estimate(result.validated_config, result.layout),
    )


@router.post("/scene", response_model=Scene)
async def scene(request: SceneRequest) -> Scene:
    """Renderer-ready scene with shared materials and lights."""
    result = _pipeline.build(request.config, request.catalog_id, request.options)
    return _scenes.build(
        result.parts,
        finish=result.validated_config.frame_finish,
        include_site=request.include_site,
    )


@router.post("/deck/build", response_model=DeckBuildResponse)
async def deck_build(request: DeckBuildRequest) -> DeckBuildResponse:
    """Clamp a deck configuration and generate its substructure and parts."""
    result = _deck_pipeline.build(request.config, request.options)
    return DeckBuildResponse(
        validated_config=result.validated_config,
        layout=result.layout,
        parts=result.parts,
        stats=result.stats,
    )


@router.post("/deck/quote", response_model=DeckQuoteResponse)
async def deck_quote(request: DeckBuildRequest) -> DeckQuoteResponse:
    result = _deck_pipeline.build(request.config, request.options)
    return DeckQuoteResponse(
        validated_config=result.validated_config,
        quote=estimate_deck(result.validated_config),
    )


@router.post("/deck/scene", response_model=Scene)
async def deck_scene(request: DeckSceneRequest) -> Scene:
    result = _deck_pipeline.build(request.config, request.options)
    return _scenes.build(result.parts, include_site=request.include_site)


@router.get("/catalog", response_model=CatalogInfo)
async def catalog() -> CatalogInfo:
    """Product catalogs plus the colour and material pickers."""
    return CatalogInfo(
        default=DEFAULT_CATALOG_ID,
        catalogs=list_catalogs(),
        frame_colors=FRAME_COLORS,
        decking_materials={m.value: option for m, option in DECKING_MATERIALS.items()},
        decking_colors={m.value: colors for m, colors in DECKING_COLORS.items()},
    )


@router.get("/rules", response_model=list[RuleInfo])
async def list_rules() -> list[RuleInfo]:
    """List all available part rules."""
    return [RuleInfo(**r) for r in _pipeline.list_rules()]


@router.get("/deck/rules", response_model=list[RuleInfo])
async def list_deck_rules() -> list[RuleInfo]:
    return [RuleInfo(**r) for r in _deck_pipeline.list_rules()]


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
