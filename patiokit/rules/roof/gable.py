"""Gable roof — two slopes meeting at a ridge running front to back."""

from __future__ import annotations
import math

from patiokit.rules.base import PartRule, build_part
from patiokit.rules.roof.common import sheet_thickness, roof_level, sheet_surface
from patiokit.models import BuildContext, Part, PartKind, GeometryKind, mm


class GableRoofRule(PartRule):
    """
    Slopes, ridge beam, ridge cap, end infills and barge trims.

    Replaces the flat sheet entirely. Slopes pitch across the width, so
    the ridge sits on x = 0 at the layout's gable height.
    """

    priority = 81
    dependencies = ["frame.beams"]

    def get_id(self) -> str:
        return "roof.gable"

    def get_name(self) -> str:
        return "Gable Roof"

    def applies(self, context: BuildContext) -> bool:
        return context.layout.is_gable

    def generate(self, context: BuildContext) -> list[Part]:
        layout = context.layout
        half_w = layout.width / 2
        rise = layout.gable_height
        angle = math.atan2(rise, half_w)
        slope_len = math.hypot(half_w, rise)
        thick = sheet_thickness(layout)
        roof_y = roof_level(layout)
        center_z = layout.overhang / 2
        run = layout.total_depth - 0.02
        surface = sheet_surface(context)
        frame = context.frame_surface()
        parts: list[Part] = []

        for side, label in ((-1, "Left Slope"), (1, "Right Slope")):
            parts.append(build_part(
                PartKind.GABLE_SLOPE,
                (side * half_w / 2, roof_y + rise / 2, center_z),
                (slope_len + 0.05, thick, run),
                rotation=(0, 0, -side * angle),
                metadata={"label": label, "sheet": layout.sheet.id},
                **surface,
            ))

        parts.append(build_part(
            PartKind.GABLE_RIDGE,
            (0, roof_y + rise - thick / 2 - layout.beam_profile_h / 2, center_z),
            (mm(layout.beam.profile_width), layout.beam_profile_h, run),
            metadata={"label": "Ridge Beam"}, **frame,
        ))
        parts.append(build_part(
            PartKind.GABLE_RIDGE_CAP,
            (0, roof_y + rise + thick, center_z),
            (0.08, 0.03, run + 0.05),
            **surface,
        ))

        for z, label in ((layout.back_z, "Back Infill"), (layout.front_z, "Front Infill")):
            parts.append(build_part(
                PartKind.GABLE_INFILL,
                (0, roof_y, z),
                (layout.width, rise, 0.01),
                geometry=GeometryKind.TRIANGLE,
                geometry_args=[layout.width, rise],
                metadata={"label": label}, **frame,
            ))

        for z in (layout.back_z, layout.front_z):
            for side in (-1, 1):
                parts.append(build_part(
                    PartKind.GABLE_TRIM,
                    (side * half_w / 2, roof_y + rise / 2 + thick, z),
                    (slope_len + 0.05, 0.05, 0.02),
                    rotation=(0, 0, -side * angle),
                    **frame,
                ))

        if layout.sheet.rib_height > 0:
            parts.extend(self._slope_ribs(context, angle, slope_len, thick, roof_y))
        return parts

    def _slope_ribs(
        self,
        context: BuildContext,
        angle: float,
        slope_len: float,
        thick: float,
        roof_y: float,
    ) -> list[Part]:
        """Ribs run front to back, spaced up each slope from the eave."""
        layout = context.layout
        half_w = layout.width / 2
        rib_h = mm(layout.sheet.rib_height)
        spacing = mm(layout.sheet.rib_spacing)
        count = math.floor(slope_len / spacing)
        surface = sheet_surface(context)
        parts: list[Part] = []

        for side in (-1, 1):
            for i in range(count + 1):
                s = i * spacing
                parts.append(build_part(
                    PartKind.RIB,
                    (
                        side * (half_w - s * math.cos(angle)),
                        roof_y + thick / 2 + rib_h / 2 + s * math.sin(angle),
                        layout.overhang / 2,
                    ),
                    (0.015, rib_h, layout.total_depth - 0.02),
                    rotation=(0, 0, -side * angle),
                    **surface,
                ))
        return parts
