"""Post framing — base plates, columns with caps, and wall brackets.

Posts stand on every position the layout deriver kept. On attached
edges the wall brackets carry the frame instead.
"""

from __future__ import annotations
import math

from patiokit.rules.base import PartRule, build_part, HARDWARE_SURFACE
from patiokit.models import BuildContext, Part, PartKind, mm

WALL_BRACKET_SPACING = 1.8  # Max centres along the back wall (meters)


class BasePlateRule(PartRule):
    """Footing plate under every post."""

    priority = 30

    def get_id(self) -> str:
        return "frame.base_plates"

    def get_name(self) -> str:
        return "Base Plates"

    def applies(self, context: BuildContext) -> bool:
        return len(context.layout.post_positions) > 0

    def generate(self, context: BuildContext) -> list[Part]:
        bracket = context.catalog.brackets.post_bracket
        plate_w = mm(bracket.width)
        plate_h = mm(bracket.height)
        return [
            build_part(
                PartKind.BASE_PLATE, (p.x, plate_h / 2, p.z),
                (plate_w, plate_h, plate_w), **HARDWARE_SURFACE,
            )
            for p in context.layout.post_positions
        ]


class ColumnRule(PartRule):
    """A column from ground to beam line, capped, at every post position."""

    priority = 40

    def get_id(self) -> str:
        return "frame.columns"

    def get_name(self) -> str:
        return "Columns & Post Caps"

    def applies(self, context: BuildContext) -> bool:
        return len(context.layout.post_positions) > 0

    def generate(self, context: BuildContext) -> list[Part]:
        layout = context.layout
        col = mm(layout.col_size)
        cap_h = mm(context.catalog.brackets.post_cap.height)
        h = layout.height
        parts: list[Part] = []

        for p in layout.post_positions:
            parts.append(build_part(
                PartKind.COLUMN, (p.x, h / 2, p.z), (col, h, col),
                metadata={"label": layout.column.label}, **context.frame_surface(),
            ))
            parts.append(build_part(
                PartKind.POST_CAP, (p.x, h, p.z), (col + 0.01, cap_h, col + 0.01),
                **HARDWARE_SURFACE,
            ))
        return parts


class WallBracketRule(PartRule):
    """Brackets fixing the frame to each attached wall."""

    priority = 50

    def get_id(self) -> str:
        return "frame.wall_brackets"

    def get_name(self) -> str:
        return "Wall Brackets"

    def applies(self, context: BuildContext) -> bool:
        return not context.layout.is_freestanding

    def generate(self, context: BuildContext) -> list[Part]:
        layout = context.layout
        spec = context.catalog.brackets.wall_bracket
        bk_w, bk_h, bk_d = mm(spec.width), mm(spec.height), mm(spec.depth)
        w, d = layout.width, layout.depth
        y = layout.height - layout.beam_profile_h / 2
        parts: list[Part] = []

        if layout.has_back:
            count = max(2, math.ceil(w / WALL_BRACKET_SPACING))
            for i in range(count):
                x = -w / 2 + (w / (count - 1)) * i
                parts.append(build_part(
                    PartKind.WALL_BRACKET, (x, y, -d / 2 - bk_d / 2), (bk_w, bk_h, bk_d),
                    metadata={"edge": "back"}, **HARDWARE_SURFACE,
                ))
        if layout.has_left:
            parts.append(build_part(
                PartKind.WALL_BRACKET, (-w / 2 - bk_d / 2, y, 0), (bk_d, bk_h, bk_w),
                metadata={"edge": "left"}, **HARDWARE_SURFACE,
            ))
        if layout.has_right:
            parts.append(build_part(
                PartKind.WALL_BRACKET, (w / 2 + bk_d / 2, y, 0), (bk_d, bk_h, bk_w),
                metadata={"edge": "right"}, **HARDWARE_SURFACE,
            ))
        return parts
