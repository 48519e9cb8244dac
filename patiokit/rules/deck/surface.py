"""Deck boards and stairs."""

from __future__ import annotations
import math

from patiokit.rules.base import PartRule, build_part
from patiokit.core.deck_layout import BOARD_WIDTH, BOARD_GAP, BOARD_THICKNESS
from patiokit.models import DeckBuildContext, Part, PartKind, StairPosition

MAX_RISE = 0.18
TREAD_DEPTH = 0.28


class BoardRule(PartRule):
    """Boards laid edge to edge with a 5mm gap, starting at one edge of the span."""

    priority = 50
    dependencies = ["deck.joists"]

    def get_id(self) -> str:
        return "deck.boards"

    def get_name(self) -> str:
        return "Deck Boards"

    def applies(self, context: DeckBuildContext) -> bool:
        return context.layout.board_count > 0

    def generate(self, context: DeckBuildContext) -> list[Part]:
        layout = context.layout
        y = layout.height - BOARD_THICKNESS / 2
        pitch = BOARD_WIDTH + BOARD_GAP
        parts: list[Part] = []
        for i in range(layout.board_count):
            s = -layout.board_span / 2 + pitch * i + BOARD_WIDTH / 2
            x, z = layout.to_xz(0, s)
            parts.append(build_part(
                PartKind.DECK_BOARD, (x, y, z),
                layout.box(layout.board_length, BOARD_THICKNESS, BOARD_WIDTH),
                **context.board_surface(),
            ))
        return parts


class StairRule(PartRule):
    """
    Treads stepping down from the deck edge to the ground.

    The rise count keeps every riser at or under 180mm; treads are 280mm
    deep and the bottom tread is the furthest from the deck.
    """

    priority = 60
    dependencies = ["deck.boards"]

    def get_id(self) -> str:
        return "deck.stairs"

    def get_name(self) -> str:
        return "Stairs"

    def applies(self, context: DeckBuildContext) -> bool:
        return context.config.stairs.enabled

    def generate(self, context: DeckBuildContext) -> list[Part]:
        layout = context.layout
        stairs = context.config.stairs
        h = layout.height
        rises = max(math.ceil(h / MAX_RISE), 1)
        rise = h / rises
        parts: list[Part] = []

        for i in range(rises):
            y = rise * (i + 0.5)
            out = TREAD_DEPTH * (rises - i - 0.5)
            if stairs.position == StairPosition.FRONT:
                position = (0, y, layout.width / 2 + out)
                size = (stairs.width, BOARD_THICKNESS, TREAD_DEPTH)
            elif stairs.position == StairPosition.LEFT:
                position = (-(layout.length / 2 + out), y, 0)
                size = (TREAD_DEPTH, BOARD_THICKNESS, stairs.width)
            else:
                position = (layout.length / 2 + out, y, 0)
                size = (TREAD_DEPTH, BOARD_THICKNESS, stairs.width)
            parts.append(build_part(
                PartKind.STAIR_TREAD, position, size,
                metadata={"edge": stairs.position.value}, **context.board_surface(),
            ))
        return parts
