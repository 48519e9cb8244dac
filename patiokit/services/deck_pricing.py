"""Indicative deck pricing from linear metres of timber plus area rates.

Member counts here round up (a part board is a whole board bought),
so they can exceed the counts the layout draws. Railings are charged
per metre of railed edge; stairs and accessories are fixed adders.
"""

from __future__ import annotations
import logging
import math

from pydantic import BaseModel

from patiokit.models import DeckingConfig, DeckingMaterial, RailingStyle
from patiokit.core.deck_layout import (
    validate_deck_config, BOARD_WIDTH, BOARD_GAP, JOIST_SPACING, BEARER_SPACING,
)
from patiokit.services.pricing import (
    Quote, QuoteLine, RANGE_LOW, RANGE_HIGH, round_half_up,
)

logger = logging.getLogger(__name__)


class DeckPricingProfile(BaseModel):
    material: DeckingMaterial
    label: str
    board_rate_per_lm: float
    joist_rate_per_lm: float
    bearer_rate_per_lm: float
    post_cost_each: float
    fixings_per_m2: float
    labour_per_m2: float
    adders: dict[str, float]


def _adders(stairs: float, timber: float, seating: float) -> dict[str, float]:
    return {
        "stairs": stairs, "glass": 380, "wire": 260, "timber": timber,
        "lighting": 450, "seating": seating,
    }


DECKING_PRICING: dict[DeckingMaterial, DeckPricingProfile] = {
    DeckingMaterial.COMPOSITE: DeckPricingProfile(
        material=DeckingMaterial.COMPOSITE, label="Composite Decking",
        board_rate_per_lm=18, joist_rate_per_lm=8, bearer_rate_per_lm=12,
        post_cost_each=45, fixings_per_m2=6, labour_per_m2=85,
        adders=_adders(stairs=1200, timber=180, seating=800),
    ),
    DeckingMaterial.CEDAR: DeckPricingProfile(
        material=DeckingMaterial.CEDAR, label="Western Red Cedar",
        board_rate_per_lm=24, joist_rate_per_lm=8, bearer_rate_per_lm=12,
        post_cost_each=45, fixings_per_m2=5, labour_per_m2=95,
        adders=_adders(stairs=1400, timber=180, seating=900),
    ),
    DeckingMaterial.PINE: DeckPricingProfile(
        material=DeckingMaterial.PINE, label="Treated Pine",
        board_rate_per_lm=10, joist_rate_per_lm=6, bearer_rate_per_lm=9,
        post_cost_each=35, fixings_per_m2=5, labour_per_m2=70,
        adders=_adders(stairs=900, timber=150, seating=650),
    ),
    DeckingMaterial.MERBAU: DeckPricingProfile(
        material=DeckingMaterial.MERBAU, label="Merbau Hardwood",
        board_rate_per_lm=32, joist_rate_per_lm=10, bearer_rate_per_lm=14,
        post_cost_each=55, fixings_per_m2=7, labour_per_m2=110,
        adders=_adders(stairs=1600, timber=200, seating=1000),
    ),
    DeckingMaterial.SPOTTED_GUM: DeckPricingProfile(
        material=DeckingMaterial.SPOTTED_GUM, label="Spotted Gum",
        board_rate_per_lm=38, joist_rate_per_lm=10, bearer_rate_per_lm=14,
        post_cost_each=55, fixings_per_m2=7, labour_per_m2=120,
        adders=_adders(stairs=1800, timber=200, seating=1100),
    ),
}


def estimate_deck(raw: DeckingConfig) -> Quote:
    """Price a deck configuration (clamped first). Never raises."""
    config = validate_deck_config(raw)
    profile = DECKING_PRICING[config.material]
    area = config.length * config.width

    if config.is_lengthwise:
        run, span = config.length, config.width
    else:
        run, span = config.width, config.length

    boards = math.ceil(span / (BOARD_WIDTH + BOARD_GAP))
    joists = math.ceil(run / JOIST_SPACING) + 1
    bearers = math.ceil(span / BEARER_SPACING) + 1
    posts = bearers * (math.ceil(run / BEARER_SPACING) + 1)

    breakdown = [
        QuoteLine(label=f"{profile.label} boards",
                  amount=round_half_up(boards * run * profile.board_rate_per_lm)),
        QuoteLine(label="Joists", amount=round_half_up(joists * span * profile.joist_rate_per_lm)),
        QuoteLine(label="Bearers", amount=round_half_up(bearers * run * profile.bearer_rate_per_lm)),
        QuoteLine(label=f"Posts (×{posts})", amount=round_half_up(posts * profile.post_cost_each)),
        QuoteLine(label="Fixings", amount=round_half_up(area * profile.fixings_per_m2)),
        QuoteLine(label="Labour", amount=round_half_up(area * profile.labour_per_m2)),
    ]

    if config.railing_style != RailingStyle.NONE and config.railing_positions:
        rail_length = sum(config.edge_length(edge) for edge in config.railing_positions)
        rate = profile.adders.get(config.railing_style.value, 0)
        breakdown.append(QuoteLine(
            label=f"{config.railing_style.value.capitalize()} railing ({rail_length:.1f}m)",
            amount=round_half_up(rate * rail_length),
        ))

    if config.stairs.enabled:
        breakdown.append(QuoteLine(label="Stairs", amount=round_half_up(profile.adders["stairs"])))
    if config.accessories.lighting:
        breakdown.append(QuoteLine(label="LED Lighting", amount=round_half_up(profile.adders["lighting"])))
    if config.accessories.seating:
        breakdown.append(QuoteLine(label="Built-in Seating", amount=round_half_up(profile.adders["seating"])))

    total = sum(line.amount for line in breakdown)
    logger.debug("Deck quote %s %.1f m²: %d", config.material.value, area, total)
    return Quote(
        min=round_half_up(total * RANGE_LOW),
        max=round_half_up(total * RANGE_HIGH),
        total=total,
        breakdown=breakdown,
    )
