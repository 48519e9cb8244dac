"""Deck validation and substructure layout."""

from __future__ import annotations
import logging
import math

from patiokit.models import DeckingConfig, DeckLayout, Point2D, RAILING_ORDER
from patiokit.core.validator import clamp

logger = logging.getLogger(__name__)


LENGTH_RANGE = (2.0, 12.0)
WIDTH_RANGE = (1.5, 8.0)
HEIGHT_RANGE = (0.2, 1.5)
STAIR_WIDTH_RANGE = (0.6, 3.0)

# Section sizes (metres)
BOARD_WIDTH = 0.138
BOARD_GAP = 0.005
BOARD_THICKNESS = 0.022
JOIST_WIDTH = 0.045
JOIST_DEPTH = 0.140
JOIST_SPACING = 0.45
BEARER_SIZE = 0.090
BEARER_SPACING = 1.8
POST_SIZE = 0.090


def validate_deck_config(raw: DeckingConfig) -> DeckingConfig:
    """Clamped, normalised copy of raw. Idempotent, never raises."""
    edges = [e for e in RAILING_ORDER if e in raw.railing_positions]
    stairs = raw.stairs.model_copy(update={"width": clamp(raw.stairs.width, STAIR_WIDTH_RANGE)})
    return raw.model_copy(
        update={
            "length": clamp(raw.length, LENGTH_RANGE),
            "width": clamp(raw.width, WIDTH_RANGE),
            "height": clamp(raw.height, HEIGHT_RANGE),
            "railing_positions": edges,
            "stairs": stairs,
            "accessories": raw.accessories.model_copy(),
        },
    )


def spread_offsets(extent: float, count: int) -> list[float]:
    """count offsets from edge to edge of extent; a single one is centred."""
    if count == 1:
        return [0.0]
    step = extent / (count - 1)
    return [-extent / 2 + step * i for i in range(count)]


def derive_deck_layout(config: DeckingConfig) -> DeckLayout:
    config = validate_deck_config(config)
    if config.is_lengthwise:
        run, span = config.length, config.width
    else:
        run, span = config.width, config.length

    board_count = math.floor(span / (BOARD_WIDTH + BOARD_GAP))
    joist_count = math.floor(run / JOIST_SPACING) + 1
    bearer_count = math.floor(span / BEARER_SPACING) + 1
    posts_per_bearer = math.floor(run / BEARER_SPACING) + 1
    post_height = max(0.0, config.height - BOARD_THICKNESS - JOIST_DEPTH - BEARER_SIZE)

    posts: list[Point2D] = []
    if post_height > 0:
        for s in spread_offsets(span, bearer_count):
            for r in spread_offsets(run, posts_per_bearer):
                x, z = (r, s) if config.is_lengthwise else (s, r)
                posts.append(Point2D(x=x, z=z))

    layout = DeckLayout(
        length=config.length,
        width=config.width,
        height=config.height,
        board_direction=config.board_direction,
        board_length=run,
        board_span=span,
        board_count=board_count,
        joist_count=joist_count,
        bearer_count=bearer_count,
        posts_per_bearer=posts_per_bearer,
        post_height=post_height,
        post_positions=posts,
    )
    logger.debug(
        "Derived deck %.2fx%.2f: %d boards, %d joists, %d bearers, %d posts",
        config.length, config.width, board_count, joist_count, bearer_count, len(posts),
    )
    return layout
