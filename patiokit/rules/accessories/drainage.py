"""Drainage — front gutter with a downpipe and strap at each end."""

from __future__ import annotations

from patiokit.rules.base import PartRule, build_part, HARDWARE_SURFACE
from patiokit.models import BuildContext, Part, PartKind, GeometryKind, mm


class GutterRule(PartRule):
    priority = 90
    dependencies = ["frame.beams"]

    def get_id(self) -> str:
        return "accessory.gutters"

    def get_name(self) -> str:
        return "Gutters & Downpipes"

    def applies(self, context: BuildContext) -> bool:
        return context.config.accessories.gutters

    def generate(self, context: BuildContext) -> list[Part]:
        layout = context.layout
        gutter = context.catalog.gutter
        g_w, g_h = mm(gutter.width), mm(gutter.height)
        w, h, b_h = layout.width, layout.height, layout.beam_profile_h
        front_z = layout.front_z
        frame = context.frame_surface()

        parts = [build_part(
            PartKind.GUTTER, (0, h - b_h - g_h / 2, front_z + g_w / 2), (w + 0.15, g_h, g_w),
            metadata={"label": gutter.label}, **frame,
        )]

        r = mm(context.catalog.downpipe.diameter) / 2
        pipe_len = h - b_h
        for x in (-w / 2, w / 2):
            parts.append(build_part(
                PartKind.DOWNPIPE, (x, h / 2 - b_h / 2, front_z + g_w), (r * 2, pipe_len, r * 2),
                geometry=GeometryKind.CYLINDER, geometry_args=[r, r, pipe_len, 8],
                **frame,
            ))
            parts.append(build_part(
                PartKind.DOWNPIPE_STRAP, (x, h * 0.4, front_z + g_w), (r * 2, r * 2, r * 2),
                geometry=GeometryKind.TORUS, geometry_args=[r + 0.005, 0.003, 6, 12],
                **HARDWARE_SURFACE,
            ))
        return parts
