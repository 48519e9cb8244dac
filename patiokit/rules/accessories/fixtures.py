"""Decorative and electrical extras hung from the frame.

Lights and the fan follow the gable rise when the roof is a gable.
"""

from __future__ import annotations
import math

from patiokit.rules.base import PartRule, build_part
from patiokit.models import BuildContext, Part, PartKind, GeometryKind, mm

LIGHT_SPACING = 1.5
LIGHT_INSET = 0.4
FAN_BLADES = 5
FAN_SURFACE = {"color": "#444444", "metalness": 0.7, "roughness": 0.3}


class DesignerBeamRule(PartRule):
    """Deep fascia beam dropped below the front beam."""

    priority = 100
    dependencies = ["frame.beams"]

    def get_id(self) -> str:
        return "accessory.designer_beam"

    def get_name(self) -> str:
        return "Designer Beam"

    def applies(self, context: BuildContext) -> bool:
        return context.config.accessories.designer_beam

    def generate(self, context: BuildContext) -> list[Part]:
        layout = context.layout
        b_h = layout.beam_profile_h
        return [build_part(
            PartKind.DESIGNER_BEAM,
            (0, layout.height - b_h * 1.5, layout.front_z + 0.01),
            (layout.width + 0.08, b_h * 0.5, mm(layout.beam.profile_width) * 1.5),
            metadata={"label": "Designer Beam"}, **context.frame_surface(),
        )]


class LightRule(PartRule):
    """Downlights evenly spread across the width along the centre line."""

    priority = 110

    def get_id(self) -> str:
        return "accessory.lights"

    def get_name(self) -> str:
        return "Lighting"

    def applies(self, context: BuildContext) -> bool:
        return context.config.accessories.lighting

    def generate(self, context: BuildContext) -> list[Part]:
        layout = context.layout
        w = layout.width
        count = max(2, math.ceil(w / LIGHT_SPACING))
        parts: list[Part] = []

        for i in range(count):
            x = -w / 2 + LIGHT_INSET + (i * (w - 2 * LIGHT_INSET)) / max(1, count - 1)
            rise = layout.gable_height * (1 - abs(x) / (w / 2))
            parts.append(build_part(
                PartKind.LIGHT,
                (x, layout.height - layout.beam_profile_h - 0.05 + rise, 0),
                (0.13, 0.025, 0.13),
                color="#333333", metalness=0.8, roughness=0.3,
                geometry=GeometryKind.CYLINDER, geometry_args=[0.05, 0.065, 0.025, 12],
                metadata={"emit_light": True, "light_color": "#ffd699", "light_intensity": 0.25},
            ))
        return parts


class FanRule(PartRule):
    """Ceiling fan at the centre: down rod, motor and five blades."""

    priority = 120

    def get_id(self) -> str:
        return "accessory.fan"

    def get_name(self) -> str:
        return "Ceiling Fan"

    def applies(self, context: BuildContext) -> bool:
        return context.config.accessories.fans

    def generate(self, context: BuildContext) -> list[Part]:
        layout = context.layout
        fan_y = layout.height - layout.beam_profile_h - 0.15 + layout.gable_height

        parts = [
            build_part(
                PartKind.FAN_ROD, (0, fan_y + 0.06, 0), (0.03, 0.12, 0.03),
                geometry=GeometryKind.CYLINDER, geometry_args=[0.015, 0.015, 0.12, 8],
                **FAN_SURFACE,
            ),
            build_part(
                PartKind.FAN_MOTOR, (0, fan_y, 0), (0.08, 0.04, 0.08),
                geometry=GeometryKind.CYLINDER, geometry_args=[0.04, 0.04, 0.04, 12],
                **FAN_SURFACE,
            ),
        ]
        for i in range(FAN_BLADES):
            a = i * 2 * math.pi / FAN_BLADES
            parts.append(build_part(
                PartKind.FAN_BLADE,
                (math.cos(a) * 0.22, fan_y - 0.02, math.sin(a) * 0.22),
                (0.35, 0.008, 0.06),
                rotation=(0, a, 0),
                color="#555555", metalness=0.5, roughness=0.4,
            ))
        return parts


class DecorativeColumnRule(PartRule):
    """Tapered timber-look wrap on the lower part of every post."""

    priority = 130
    dependencies = ["frame.columns"]

    def get_id(self) -> str:
        return "accessory.decorative_columns"

    def get_name(self) -> str:
        return "Decorative Columns"

    def applies(self, context: BuildContext) -> bool:
        return context.config.accessories.columns and len(context.layout.post_positions) > 0

    def generate(self, context: BuildContext) -> list[Part]:
        layout = context.layout
        h = layout.height
        wrap = context.catalog.select_column(decorative=True)
        return [
            build_part(
                PartKind.DECORATIVE_COLUMN, (p.x, h * 0.35, p.z), (0.15, h * 0.7, 0.15),
                geometry=GeometryKind.CYLINDER, geometry_args=[0.055, 0.075, h * 0.7, 12],
                metadata={"label": wrap.label}, **context.frame_surface(),
            )
            for p in layout.post_positions
        ]
