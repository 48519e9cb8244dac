"""Deck substructure: ground, posts, bearers and joists.

Bearers run with the boards and sit on the posts; joists cross the
bearers at 450mm centres and carry the boards.
"""

from __future__ import annotations
import math

from patiokit.rules.base import PartRule, build_part
from patiokit.core.deck_layout import (
    spread_offsets, BOARD_THICKNESS, JOIST_WIDTH, JOIST_DEPTH, JOIST_SPACING,
    BEARER_SIZE, POST_SIZE,
)
from patiokit.models import DeckBuildContext, Part, PartKind, GeometryKind


class DeckGroundRule(PartRule):
    """Lawn extending 2m beyond the deck on every side."""

    priority = 10

    def get_id(self) -> str:
        return "deck.ground"

    def get_name(self) -> str:
        return "Ground"

    def applies(self, context: DeckBuildContext) -> bool:
        return True

    def generate(self, context: DeckBuildContext) -> list[Part]:
        layout = context.layout
        return [build_part(
            PartKind.GROUND,
            (0, -0.01, 0),
            (layout.length + 4, layout.width + 4, 0.01),
            rotation=(-math.pi / 2, 0, 0),
            color="#4a6b35", metalness=0.0, roughness=0.85,
            geometry=GeometryKind.PLANE,
        )]


class DeckPostRule(PartRule):
    priority = 20

    def get_id(self) -> str:
        return "deck.posts"

    def get_name(self) -> str:
        return "Posts"

    def applies(self, context: DeckBuildContext) -> bool:
        return len(context.layout.post_positions) > 0

    def generate(self, context: DeckBuildContext) -> list[Part]:
        h = context.layout.post_height
        return [
            build_part(
                PartKind.DECK_POST, (p.x, h / 2, p.z), (POST_SIZE, h, POST_SIZE),
                **context.frame_surface(),
            )
            for p in context.layout.post_positions
        ]


class BearerRule(PartRule):
    priority = 30

    def get_id(self) -> str:
        return "deck.bearers"

    def get_name(self) -> str:
        return "Bearers"

    def applies(self, context: DeckBuildContext) -> bool:
        return True

    def generate(self, context: DeckBuildContext) -> list[Part]:
        layout = context.layout
        y = layout.height - BOARD_THICKNESS - JOIST_DEPTH - BEARER_SIZE / 2
        parts: list[Part] = []
        for s in spread_offsets(layout.board_span, layout.bearer_count):
            x, z = layout.to_xz(0, s)
            parts.append(build_part(
                PartKind.BEARER, (x, y, z),
                layout.box(layout.board_length, BEARER_SIZE, BEARER_SIZE),
                **context.frame_surface(),
            ))
        return parts


class JoistRule(PartRule):
    priority = 40
    dependencies = ["deck.bearers"]

    def get_id(self) -> str:
        return "deck.joists"

    def get_name(self) -> str:
        return "Joists"

    def applies(self, context: DeckBuildContext) -> bool:
        return True

    def generate(self, context: DeckBuildContext) -> list[Part]:
        layout = context.layout
        run = layout.board_length
        y = layout.height - BOARD_THICKNESS - JOIST_DEPTH / 2
        parts: list[Part] = []
        for i in range(layout.joist_count):
            # The last joist never overhangs the end of the run
            r = min(-run / 2 + JOIST_SPACING * i, run / 2)
            x, z = layout.to_xz(r, 0)
            parts.append(build_part(
                PartKind.JOIST, (x, y, z),
                layout.box(JOIST_WIDTH, JOIST_DEPTH, layout.board_span),
                **context.frame_surface(),
            ))
        return parts
