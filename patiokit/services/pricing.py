"""Indicative pricing — an estimate range from the configuration.

Pricing is a simple derived computation: an area rate with a minimum
charge, plus fixed adders for the gable upgrade and each accessory.
The range is the total -15% / +15%.
"""

from __future__ import annotations
import logging
import math
from typing import Optional

from pydantic import BaseModel

from patiokit.models import PatioConfig, DerivedLayout, RoofMaterial

logger = logging.getLogger(__name__)

RANGE_LOW = 0.85
RANGE_HIGH = 1.15


def round_half_up(value: float) -> int:
    """Whole dollars, halves rounded up (2.5 -> 3, not banker's 2)."""
    return math.floor(value + 0.5)


class PricingProfile(BaseModel):
    id: str
    profile_name: str
    min_charge: float
    min_size: float         # m², area floor for the rate
    rate_per_m2: float
    option_adders: dict[str, float]


_ADDERS = {
    "lighting": 350,
    "fans": 480,
    "gutters": 280,
    "designer_beam": 650,
    "columns": 520,
}

PATIO_PRICING: dict[str, PricingProfile] = {
    "insulated": PricingProfile(
        id="insulated", profile_name="Insulated Panel",
        min_charge=6500, min_size=9, rate_per_m2=420,
        option_adders={**_ADDERS, "gable": 1800},
    ),
    "colorbond_superdek": PricingProfile(
        id="colorbond_superdek", profile_name="Colorbond Superdek",
        min_charge=4800, min_size=9, rate_per_m2=310,
        option_adders={**_ADDERS, "gable": 1500},
    ),
    "colorbond_flatdek": PricingProfile(
        id="colorbond_flatdek", profile_name="Colorbond Flatdek",
        min_charge=4200, min_size=9, rate_per_m2=280,
        option_adders={**_ADDERS, "gable": 1400},
    ),
}

ACCESSORY_LABELS = {
    "lighting": "Lighting",
    "fans": "Fans",
    "gutters": "Gutters",
    "designer_beam": "Designer Beam",
    "columns": "Columns",
}


class QuoteLine(BaseModel):
    label: str
    amount: int


class Quote(BaseModel):
    min: int
    max: int
    total: int
    breakdown: list[QuoteLine]
    # Filled when the derived layout is supplied
    patio_type: Optional[str] = None
    beam: Optional[str] = None
    sheet: Optional[str] = None
    posts: Optional[int] = None


def pricing_profile(config: PatioConfig) -> PricingProfile:
    if config.material == RoofMaterial.INSULATED:
        key = "insulated"
    else:
        key = f"colorbond_{config.colorbond_type.value}"
    profile = PATIO_PRICING.get(key)
    if profile is None:
        logger.warning("No pricing profile %r, using insulated", key)
        return PATIO_PRICING["insulated"]
    return profile


def estimate(config: PatioConfig, layout: DerivedLayout | None = None) -> Quote:
    """Price a (validated) configuration. Never raises."""
    profile = pricing_profile(config)

    area = config.width * config.depth
    effective_area = max(area, profile.min_size)
    base_price = max(effective_area * profile.rate_per_m2, profile.min_charge)

    breakdown = [QuoteLine(
        label=f"{profile.profile_name} ({effective_area:.1f} m²)",
        amount=round_half_up(base_price),
    )]

    if config.is_gable and profile.option_adders.get("gable"):
        breakdown.append(QuoteLine(
            label="Gable roof upgrade", amount=round_half_up(profile.option_adders["gable"]),
        ))

    for key, enabled in config.accessories.model_dump().items():
        adder = profile.option_adders.get(key)
        if enabled and adder:
            breakdown.append(QuoteLine(label=ACCESSORY_LABELS.get(key, key), amount=round_half_up(adder)))

    total = sum(line.amount for line in breakdown)
    quote = Quote(
        min=round_half_up(total * RANGE_LOW),
        max=round_half_up(total * RANGE_HIGH),
        total=total,
        breakdown=breakdown,
    )
    if layout is not None:
        quote.patio_type = layout.patio_type.label
        quote.beam = layout.beam.label
        quote.sheet = layout.sheet.label
        quote.posts = layout.post_count
    return quote
