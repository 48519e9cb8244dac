"""High-level build pipelines: the facade for the API layer and collaborators.

    raw config -> validate/clamp -> derive layout -> generate parts
"""

from __future__ import annotations
import logging

from pydantic import BaseModel

from patiokit.models import (
    PatioConfig, DerivedLayout, LayoutSummary, GenerationOptions, Part, PartStats,
    DeckingConfig, DeckLayout,
)
from patiokit.catalog.registry import get_catalog
from patiokit.core.validator import validate_config
from patiokit.core.layout import LayoutDeriver
from patiokit.core.deck_layout import validate_deck_config, derive_deck_layout
from patiokit.core.generator import PartsGenerator, DeckPartsGenerator
from patiokit.core.registry import RuleRegistry, create_default_registry, create_deck_registry

logger = logging.getLogger(__name__)


class PipelineResult(BaseModel):
    """Everything one pipeline call produces. Owned by the caller."""
    validated_config: PatioConfig
    layout: DerivedLayout
    parts: list[Part]
    stats: PartStats = None  # type: ignore[assignment]

    def model_post_init(self, __context: object) -> None:
        if self.stats is None:
            self.stats = PartStats.from_parts(self.parts)

    def summary(self) -> LayoutSummary:
        return LayoutSummary.from_layout(self.layout)

    def parts_of(self, *kinds: str) -> list[Part]:
        wanted = {str(getattr(k, "value", k)) for k in kinds}
        return [p for p in self.parts if p.kind.value in wanted]


class PatioPipeline:
    """Composes validator, layout deriver and parts generator into one call."""

    def __init__(
        self,
        registry: RuleRegistry | None = None,
        catalog_id: str | None = None,
    ) -> None:
        self.registry = registry or create_default_registry()
        self.generator = PartsGenerator(self.registry)
        self.catalog_id = catalog_id

    def build(
        self,
        raw: PatioConfig,
        catalog_id: str | None = None,
        options: GenerationOptions | None = None,
    ) -> PipelineResult:
        catalog = get_catalog(catalog_id or self.catalog_id)

        config = validate_config(raw)
        layout = LayoutDeriver(catalog).derive(config)
        parts = self.generator.generate(config, layout, options, catalog)

        logger.info(
            "Built %s %.2fx%.2fm patio: %s, %d posts, %d parts",
            config.style.value, config.width, config.depth,
            layout.patio_type.label, layout.post_count, len(parts),
        )
        return PipelineResult(validated_config=config, layout=layout, parts=parts)

    def list_rules(self) -> list[dict[str, str]]:
        return [
            {"id": r.get_id(), "name": r.get_name()}
            for r in self.registry.list_rules()
        ]


def build_patio_pipeline(raw: PatioConfig, catalog_id: str | None = None) -> PipelineResult:
    """One-shot pipeline call with the default rules."""
    return PatioPipeline().build(raw, catalog_id)


class DeckPipelineResult(BaseModel):
    validated_config: DeckingConfig
    layout: DeckLayout
    parts: list[Part]
    stats: PartStats = None  # type: ignore[assignment]

    def model_post_init(self, __context: object) -> None:
        if self.stats is None:
            self.stats = PartStats.from_parts(self.parts)

    def parts_of(self, *kinds: str) -> list[Part]:
        wanted = {str(getattr(k, "value", k)) for k in kinds}
        return [p for p in self.parts if p.kind.value in wanted]


class DeckPipeline:
    """raw deck config -> clamp -> substructure layout -> parts."""

    def __init__(self, registry: RuleRegistry | None = None) -> None:
        self.registry = registry or create_deck_registry()
        self.generator = DeckPartsGenerator(self.registry)

    def build(
        self,
        raw: DeckingConfig,
        options: GenerationOptions | None = None,
    ) -> DeckPipelineResult:
        config = validate_deck_config(raw)
        layout = derive_deck_layout(config)
        parts = self.generator.generate(config, layout, options)

        logger.info(
            "Built %s %.2fx%.2fm deck at %.2fm: %d posts, %d parts",
            config.material.value, config.length, config.width, config.height,
            len(layout.post_positions), len(parts),
        )
        return DeckPipelineResult(validated_config=config, layout=layout, parts=parts)

    def list_rules(self) -> list[dict[str, str]]:
        return [
            {"id": r.get_id(), "name": r.get_name()}
            for r in self.registry.list_rules()
        ]
