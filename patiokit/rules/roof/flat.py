"""Flat roof — skillion, fly-over and timber-look sheeting.

Emits the roof sheet, its ribs and, for insulated panels, the cream
underside with panel joints. Gable and skyline roofs have their own
rules and never reach this one.
"""

from __future__ import annotations
import math

from patiokit.rules.base import PartRule, build_part
from patiokit.rules.roof.common import sheet_thickness, roof_level, sheet_surface
from patiokit.models import BuildContext, Part, PartKind, SheetDirection, mm

RIB_WIDTH = 0.015
UNDERSIDE_PANEL_WIDTH = 1.0
UNDERSIDE_SURFACE = {"color": "#f5edd8", "metalness": 0.05, "roughness": 0.8}


class FlatRoofRule(PartRule):
    """Single sloped sheet over the full frame, overhang included."""

    priority = 80
    dependencies = ["frame.beams"]

    def get_id(self) -> str:
        return "roof.flat"

    def get_name(self) -> str:
        return "Flat Roof Sheeting"

    def applies(self, context: BuildContext) -> bool:
        layout = context.layout
        return not layout.is_gable and not layout.is_skyline

    def generate(self, context: BuildContext) -> list[Part]:
        layout = context.layout
        w = layout.width
        total_depth = layout.total_depth
        thick = sheet_thickness(layout)
        roof_y = roof_level(layout)
        center_z = layout.overhang / 2
        # Insulated panels are laid level, skin sheets follow the fall
        pitch = 0.0 if layout.sheet.insulated else layout.slope_angle
        surface = sheet_surface(context)

        parts = [build_part(
            PartKind.ROOF_SHEET, (0, roof_y, center_z), (w - 0.02, thick, total_depth - 0.02),
            rotation=(pitch, 0, 0),
            metadata={"label": layout.sheet.label, "sheet": layout.sheet.id},
            **surface,
        )]

        if layout.sheet.rib_height > 0:
            rib_h = mm(layout.sheet.rib_height)
            spacing = mm(layout.sheet.rib_spacing)
            rib_y = roof_y + thick / 2 + rib_h / 2
            if layout.patio_type.sheet_direction == SheetDirection.DEPTH:
                count = math.floor(w / spacing)
                for i in range(count + 1):
                    parts.append(build_part(
                        PartKind.RIB, (-w / 2 + i * spacing, rib_y, center_z),
                        (RIB_WIDTH, rib_h, total_depth - 0.02),
                        rotation=(pitch, 0, 0), **surface,
                    ))
            else:
                count = math.floor(total_depth / spacing)
                for i in range(count + 1):
                    parts.append(build_part(
                        PartKind.RIB, (0, rib_y, -total_depth / 2 + i * spacing),
                        (w + 0.08, rib_h, RIB_WIDTH), **surface,
                    ))

        if layout.sheet.insulated:
            parts.extend(self._underside(context))
        return parts

    def _underside(self, context: BuildContext) -> list[Part]:
        layout = context.layout
        w = layout.width
        under_y = layout.height - layout.beam_profile_h
        center_z = layout.overhang / 2
        panel_depth = layout.total_depth - 0.04

        parts = [build_part(
            PartKind.UNDERSIDE_PANEL, (0, under_y - 0.008, center_z), (w - 0.04, 0.003, panel_depth),
            **UNDERSIDE_SURFACE,
        )]
        count = math.floor(w / UNDERSIDE_PANEL_WIDTH)
        for i in range(1, count):
            parts.append(build_part(
                PartKind.UNDERSIDE_JOINT,
                (-w / 2 + i * UNDERSIDE_PANEL_WIDTH, under_y - 0.010, center_z),
                (0.015, 0.008, panel_depth),
                **UNDERSIDE_SURFACE,
            ))
        return parts
