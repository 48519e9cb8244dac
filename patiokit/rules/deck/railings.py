"""Balustrades along the selected deck edges."""

from __future__ import annotations
import math

from patiokit.rules.base import PartRule, build_part
from patiokit.models import DeckBuildContext, DeckEdge, Part, PartKind, RailingStyle

RAIL_HEIGHT = 1.0
RAIL_SECTION = 0.05
RAIL_POST_SPACING = 1.5
WIRE_COUNT = 4
BALUSTER_SPACING = 0.12
RAIL_SURFACE = {"color": "#444444", "metalness": 0.6, "roughness": 0.4}


def _edge_line(context: DeckBuildContext, edge: DeckEdge) -> tuple[float, float, float, bool]:
    """(x, z, length, along_x) of the centre line of a deck edge."""
    layout = context.layout
    if edge == DeckEdge.FRONT:
        return 0.0, layout.width / 2, layout.length, True
    if edge == DeckEdge.BACK:
        return 0.0, -layout.width / 2, layout.length, True
    if edge == DeckEdge.LEFT:
        return -layout.length / 2, 0.0, layout.width, False
    return layout.length / 2, 0.0, layout.width, False


def _along(x: float, z: float, offset: float, along_x: bool) -> tuple[float, float]:
    return (offset, z) if along_x else (x, offset)


def _spaced(length: float, count: int) -> list[float]:
    if count == 1:
        return [-length / 2]
    return [-length / 2 + length * i / (count - 1) for i in range(count)]


class RailingRule(PartRule):
    """Top rail and posts per edge, plus wires or timber balusters."""

    priority = 70
    dependencies = ["deck.boards"]

    def get_id(self) -> str:
        return "deck.railings"

    def get_name(self) -> str:
        return "Railings"

    def applies(self, context: DeckBuildContext) -> bool:
        config = context.config
        return config.railing_style != RailingStyle.NONE and len(config.railing_positions) > 0

    def generate(self, context: DeckBuildContext) -> list[Part]:
        top = context.layout.height
        style = context.config.railing_style
        parts: list[Part] = []

        for edge in context.config.railing_positions:
            x, z, length, along_x = _edge_line(context, edge)
            meta = {"edge": edge.value}

            parts.append(build_part(
                PartKind.RAIL, (x, top + RAIL_HEIGHT, z),
                (length, RAIL_SECTION, RAIL_SECTION) if along_x else (RAIL_SECTION, RAIL_SECTION, length),
                metadata=meta, **RAIL_SURFACE,
            ))

            post_count = max(math.ceil(length / RAIL_POST_SPACING) + 1, 2)
            for offset in _spaced(length, post_count):
                px, pz = _along(x, z, offset, along_x)
                parts.append(build_part(
                    PartKind.RAIL_POST, (px, top + RAIL_HEIGHT / 2, pz),
                    (RAIL_SECTION, RAIL_HEIGHT, RAIL_SECTION),
                    metadata=meta, **RAIL_SURFACE,
                ))

            if style == RailingStyle.WIRE:
                for w in range(1, WIRE_COUNT + 1):
                    parts.append(build_part(
                        PartKind.RAIL_WIRE, (x, top + RAIL_HEIGHT * w / (WIRE_COUNT + 1), z),
                        (length, 0.006, 0.006) if along_x else (0.006, 0.006, length),
                        metadata=meta, **RAIL_SURFACE,
                    ))
            elif style == RailingStyle.TIMBER:
                for offset in _spaced(length, math.ceil(length / BALUSTER_SPACING)):
                    bx, bz = _along(x, z, offset, along_x)
                    parts.append(build_part(
                        PartKind.BALUSTER, (bx, top + RAIL_HEIGHT / 2, bz),
                        (0.02, RAIL_HEIGHT * 0.85, 0.02),
                        metadata=meta, **RAIL_SURFACE,
                    ))
        return parts


class GlassPanelRule(PartRule):
    """One frameless glass panel per railed edge."""

    priority = 80
    dependencies = ["deck.railings"]

    def get_id(self) -> str:
        return "deck.glass_panels"

    def get_name(self) -> str:
        return "Glass Panels"

    def applies(self, context: DeckBuildContext) -> bool:
        config = context.config
        return config.railing_style == RailingStyle.GLASS and len(config.railing_positions) > 0

    def generate(self, context: DeckBuildContext) -> list[Part]:
        top = context.layout.height
        parts: list[Part] = []
        for edge in context.config.railing_positions:
            x, z, length, along_x = _edge_line(context, edge)
            parts.append(build_part(
                PartKind.GLASS_PANEL, (x, top + RAIL_HEIGHT / 2, z),
                (length, RAIL_HEIGHT * 0.9, 0.012) if along_x else (0.012, RAIL_HEIGHT * 0.9, length),
                color="#aaddff", metalness=0.0, roughness=0.05,
                metadata={"edge": edge.value, "transparent": True, "opacity": 0.25},
            ))
        return parts
