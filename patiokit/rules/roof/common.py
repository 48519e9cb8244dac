"""Sheet surface and level shared by every roof form."""

from __future__ import annotations

from patiokit.models import BuildContext, DerivedLayout, mm

COLORBOND_SHEET_THICKNESS = 0.004   # Visual thickness of a single skin sheet


def sheet_thickness(layout: DerivedLayout) -> float:
    if layout.sheet.insulated:
        return mm(layout.sheet.thickness)
    return COLORBOND_SHEET_THICKNESS


def roof_level(layout: DerivedLayout) -> float:
    """Centre height of a flat sheet resting on the beams."""
    return layout.height - layout.beam_profile_h + sheet_thickness(layout) / 2


def sheet_surface(context: BuildContext) -> dict[str, object]:
    """Cream Cooldek skin, or Colorbond in the frame colour."""
    if context.layout.sheet.insulated:
        return {"color": "#e8e0d0", "metalness": 0.1, "roughness": 0.7}
    return {"color": context.config.frame_color, "metalness": 0.5, "roughness": 0.4}
