"""Skyline roof — split-level sheets with a skylight between them."""

from __future__ import annotations

from patiokit.rules.base import PartRule, build_part
from patiokit.rules.roof.common import sheet_thickness, roof_level, sheet_surface
from patiokit.models import BuildContext, Part, PartKind

STEP_HEIGHT = 0.15      # Rise of the right-hand sheet over the left
SKYLIGHT_WIDTH = 0.3


class SkylineRoofRule(PartRule):
    """Two half-width sheets, the right one raised, and a glazed strip."""

    priority = 82
    dependencies = ["frame.beams"]

    def get_id(self) -> str:
        return "roof.skyline"

    def get_name(self) -> str:
        return "Skyline Roof"

    def applies(self, context: BuildContext) -> bool:
        layout = context.layout
        return layout.is_skyline and not layout.is_gable

    def generate(self, context: BuildContext) -> list[Part]:
        layout = context.layout
        w = layout.width
        thick = sheet_thickness(layout)
        roof_y = roof_level(layout)
        center_z = layout.overhang / 2
        run = layout.total_depth - 0.02
        pitch = layout.slope_angle
        surface = sheet_surface(context)

        return [
            build_part(
                PartKind.SKYLINE_SHEET, (-w / 4 - 0.05, roof_y, center_z),
                (w / 2 + 0.05, thick, run), rotation=(pitch, 0, 0),
                metadata={"label": "Lower Sheet", "sheet": layout.sheet.id}, **surface,
            ),
            build_part(
                PartKind.SKYLINE_SHEET, (w / 4 + 0.05, roof_y + STEP_HEIGHT, center_z),
                (w / 2 + 0.05, thick, run), rotation=(pitch, 0, 0),
                metadata={"label": "Upper Sheet", "sheet": layout.sheet.id}, **surface,
            ),
            build_part(
                PartKind.SKYLIGHT_STRIP, (0, roof_y + 0.1, center_z),
                (SKYLIGHT_WIDTH, 0.02, run),
                color="#88ccff", metalness=0.0, roughness=0.05,
                metadata={"transparent": True, "opacity": 0.2},
            ),
        ]
