"""Site context — ground plane and the house walls the patio fixes to."""

from __future__ import annotations
import math

from patiokit.rules.base import PartRule, build_part
from patiokit.models import BuildContext, Part, PartKind, GeometryKind

WALL_SURFACE = {"color": "#c8c0b4", "metalness": 0.0, "roughness": 0.9}
WALL_THICKNESS = 0.2


class GroundRule(PartRule):
    """Ground plane extending 2m beyond the footprint on every side."""

    priority = 10

    def get_id(self) -> str:
        return "site.ground"

    def get_name(self) -> str:
        return "Ground"

    def applies(self, context: BuildContext) -> bool:
        return True

    def generate(self, context: BuildContext) -> list[Part]:
        layout = context.layout
        return [build_part(
            PartKind.GROUND,
            (0, -0.01, 0),
            (layout.width + 4, layout.depth + 4, 0.01),
            rotation=(-math.pi / 2, 0, 0),
            color="#a09a8c", metalness=0.0, roughness=0.95,
            geometry=GeometryKind.PLANE,
        )]


class HouseWallRule(PartRule):
    """One wall behind each attached edge, rising 1.5m above the beam line."""

    priority = 20

    def get_id(self) -> str:
        return "site.walls"

    def get_name(self) -> str:
        return "House Walls"

    def applies(self, context: BuildContext) -> bool:
        return not context.layout.is_freestanding

    def generate(self, context: BuildContext) -> list[Part]:
        layout = context.layout
        w, d, h = layout.width, layout.depth, layout.height
        wall_y = h / 2 + 0.5
        wall_h = h + 1.5
        half_t = WALL_THICKNESS / 2
        parts: list[Part] = []

        if layout.has_back:
            parts.append(build_part(
                PartKind.WALL, (0, wall_y, -d / 2 - half_t),
                (w + 2, wall_h, WALL_THICKNESS),
                metadata={"label": "Back Wall"}, **WALL_SURFACE,
            ))
        if layout.has_left:
            parts.append(build_part(
                PartKind.WALL, (-w / 2 - half_t, wall_y, 0),
                (WALL_THICKNESS, wall_h, d + 2),
                metadata={"label": "Left Wall"}, **WALL_SURFACE,
            ))
        if layout.has_right:
            parts.append(build_part(
                PartKind.WALL, (w / 2 + half_t, wall_y, 0),
                (WALL_THICKNESS, wall_h, d + 2),
                metadata={"label": "Right Wall"}, **WALL_SURFACE,
            ))
        return parts
