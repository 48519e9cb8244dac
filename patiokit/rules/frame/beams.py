"""Beam framing — perimeter beams, beam-to-beam brackets and purlins."""

from __future__ import annotations
import math

from patiokit.rules.base import PartRule, build_part, HARDWARE_SURFACE
from patiokit.models import BuildContext, Part, PartKind, mm

PURLIN_SPACING = 1.2    # Target centres across the depth (meters)
FLUTE_DEPTHS = (0.25, 0.5, 0.75)


class PerimeterBeamRule(PartRule):
    """Back, side and front beams in that order, then the corner brackets."""

    priority = 60

    def get_id(self) -> str:
        return "frame.beams"

    def get_name(self) -> str:
        return "Perimeter Beams"

    def applies(self, context: BuildContext) -> bool:
        return True

    def generate(self, context: BuildContext) -> list[Part]:
        layout = context.layout
        w, d = layout.width, layout.depth
        b_h, b_w = layout.beam_profile_h, layout.beam_profile_w
        front_z = layout.front_z
        beam_y = layout.height - b_h / 2
        frame = context.frame_surface()
        meta = {"beam": layout.beam.id}

        parts = [
            build_part(
                PartKind.BEAM, (0, beam_y, -d / 2), (w + b_w, b_h, b_w),
                metadata={"label": "Back Beam", **meta}, **frame,
            ),
            build_part(
                PartKind.BEAM, (-w / 2, beam_y, 0), (b_w, b_h, d),
                metadata={"label": "Left Beam", **meta}, **frame,
            ),
            build_part(
                PartKind.BEAM, (w / 2, beam_y, 0), (b_w, b_h, d),
                metadata={"label": "Right Beam", **meta}, **frame,
            ),
            build_part(
                PartKind.BEAM, (0, beam_y, front_z), (w + b_w, b_h, b_w),
                metadata={"label": "Front Beam", **meta}, **frame,
            ),
        ]

        spec = context.catalog.brackets.beam_to_beam_bracket
        for x, z in ((-w / 2, -d / 2), (w / 2, -d / 2), (-w / 2, front_z), (w / 2, front_z)):
            parts.append(build_part(
                PartKind.BEAM_BRACKET, (x, beam_y, z),
                (mm(spec.width), mm(spec.height), b_w + 0.01),
                **HARDWARE_SURFACE,
            ))

        # Pro-beam flutes on the visible front face
        if layout.beam.fluted:
            for t in FLUTE_DEPTHS:
                parts.append(build_part(
                    PartKind.FLUTE_LINE,
                    (0, layout.height - b_h * t, front_z + b_w / 2 + 0.002),
                    (w + b_w - 0.02, 0.004, 0.004),
                    **HARDWARE_SURFACE,
                ))
        return parts


class PurlinRule(PartRule):
    """Cross purlins under the sheets, plus the mid purlin for Type 4."""

    priority = 70
    dependencies = ["frame.beams"]

    def get_id(self) -> str:
        return "frame.purlins"

    def get_name(self) -> str:
        return "Purlins"

    def applies(self, context: BuildContext) -> bool:
        return context.layout.patio_type.has_purlins

    def generate(self, context: BuildContext) -> list[Part]:
        layout = context.layout
        w, d = layout.width, layout.depth
        purlin_h = layout.beam_profile_h * 0.6
        purlin_w = mm(layout.beam.profile_width) * 0.8
        purlin_y = layout.height - layout.beam_profile_h - purlin_h / 2
        frame = context.frame_surface()
        parts: list[Part] = []

        if layout.patio_type.has_mid_purlin:
            parts.append(build_part(
                PartKind.PURLIN, (0, purlin_y, 0), (purlin_w, purlin_h, d + 0.05),
                metadata={"label": "Mid Purlin"}, **frame,
            ))

        count = max(2, math.floor(d / PURLIN_SPACING))
        for i in range(count + 1):
            z = -d / 2 + (d / count) * i
            parts.append(build_part(
                PartKind.PURLIN, (0, purlin_y, z), (w - 0.02, purlin_h, purlin_w),
                **frame,
            ))
        return parts
