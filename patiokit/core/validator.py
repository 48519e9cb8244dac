"""Configuration validation — clamps raw input into the supported ranges."""

from __future__ import annotations

from patiokit.models import PatioConfig, AttachmentSide, ATTACHMENT_ORDER


WIDTH_RANGE = (2.0, 12.0)
DEPTH_RANGE = (2.0, 8.0)
HEIGHT_RANGE = (2.4, 4.5)


def clamp(value: float, bounds: tuple[float, float]) -> float:
    lo, hi = bounds
    return max(lo, min(hi, value))


def validate_config(raw: PatioConfig) -> PatioConfig:
    """
    Return a clamped, normalised copy of raw. Never raises.

    Out-of-range dimensions are pulled to the nearest bound. Attached
    sides are de-duplicated into canonical order; an empty selection
    becomes the back wall. The function is idempotent.
    """
    sides = [s for s in ATTACHMENT_ORDER if s in raw.attached_sides]
    if not sides:
        sides = [AttachmentSide.BACK]

    return raw.model_copy(
        update={
            "width": clamp(raw.width, WIDTH_RANGE),
            "depth": clamp(raw.depth, DEPTH_RANGE),
            "height": clamp(raw.height, HEIGHT_RANGE),
            "attached_sides": sides,
            "accessories": raw.accessories.model_copy(),
        },
    )
