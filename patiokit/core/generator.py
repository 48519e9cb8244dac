"""Parts generator: runs the applicable rules over a derived layout."""

from __future__ import annotations
import logging

from patiokit.models import (
    PatioConfig, DerivedLayout, GenerationOptions, BuildContext, Catalog, Part,
    DeckingConfig, DeckLayout, DeckBuildContext,
)
from patiokit.catalog.registry import get_catalog
from patiokit.core.registry import RuleRegistry, create_default_registry, create_deck_registry
from patiokit.rules.base import RuleContext

logger = logging.getLogger(__name__)


def run_rules(registry: RuleRegistry, context: RuleContext) -> list[Part]:
    """Generate every applicable rule into the context and number the result."""
    for rule in registry.get_applicable_rules(context):
        parts = rule.generate(context)
        logger.debug("Rule %s produced %d parts", rule.get_id(), len(parts))
        context.add_parts(parts)
    return assign_ids(context.parts)


class PartsGenerator:
    """
    Stateless parts generator.

    Takes a configuration and its layout, executes the applicable rules
    and returns the parts in assembly order. Ids are allocated per call
    from a counter local to that call.
    """

    def __init__(self, registry: RuleRegistry) -> None:
        self.registry = registry

    def generate(
        self,
        config: PatioConfig,
        layout: DerivedLayout,
        options: GenerationOptions | None = None,
        catalog: Catalog | None = None,
    ) -> list[Part]:
        if options is None:
            options = GenerationOptions()
        if catalog is None:
            catalog = get_catalog(layout.catalog_id)

        context = BuildContext(
            config=config,
            layout=layout,
            catalog=catalog,
            options=options,
        )
        return run_rules(self.registry, context)


class DeckPartsGenerator:
    """Deck counterpart of PartsGenerator; decks need no catalog."""

    def __init__(self, registry: RuleRegistry | None = None) -> None:
        self.registry = registry or create_deck_registry()

    def generate(
        self,
        config: DeckingConfig,
        layout: DeckLayout,
        options: GenerationOptions | None = None,
    ) -> list[Part]:
        context = DeckBuildContext(
            config=config,
            layout=layout,
            options=options or GenerationOptions(),
        )
        return run_rules(self.registry, context)


def assign_ids(parts: list[Part]) -> list[Part]:
    """Number parts within their kind: column-0, column-1, beam-0, ..."""
    counters: dict[str, int] = {}
    numbered: list[Part] = []
    for part in parts:
        kind = part.kind.value
        index = counters.get(kind, 0)
        counters[kind] = index + 1
        numbered.append(part.model_copy(update={"id": f"{kind}-{index}"}))
    return numbered


def generate_parts(
    config: PatioConfig,
    layout: DerivedLayout,
    options: GenerationOptions | None = None,
    catalog: Catalog | None = None,
) -> list[Part]:
    """Generate parts with the default rule set."""
    return PartsGenerator(create_default_registry()).generate(config, layout, options, catalog)


def generate_deck_parts(
    config: DeckingConfig,
    layout: DeckLayout,
    options: GenerationOptions | None = None,
) -> list[Part]:
    return DeckPartsGenerator().generate(config, layout, options)
