"""Layout derivation — catalog selection and post placement."""

from __future__ import annotations
import logging
import math

from pydantic import BaseModel

from patiokit.models import (
    PatioConfig, DerivedLayout, Catalog, BeamSpec, Point2D, PatioStyle,
    AttachmentSide, mm,
)
from patiokit.catalog.registry import get_catalog
from patiokit.core.validator import validate_config

logger = logging.getLogger(__name__)


SKILLION_SLOPE = 0.06   # radians
DEFAULT_SLOPE = 0.025
GABLE_RISE = 0.18       # Ridge height as a fraction of the shorter plan side


class PostCandidate(BaseModel):
    """A potential post position tagged with the edges it lies on."""
    point: Point2D
    on_back: bool = False
    on_left: bool = False
    on_right: bool = False


def is_wall_supported(
    candidate: PostCandidate, has_back: bool, has_left: bool, has_right: bool,
) -> bool:
    """
    True when an attached wall replaces the post at this candidate.

    The back flag takes precedence for anything on the back edge: a back
    corner is dropped exactly when the back is attached, whatever its side
    flags say. Candidates off the back edge are dropped when they sit on
    an attached side edge.
    """
    if candidate.on_back:
        return has_back
    return (candidate.on_left and has_left) or (candidate.on_right and has_right)


def mid_post_count(width: float, beam: BeamSpec) -> int:
    """Number of intermediate supports needed along one edge of the given width."""
    max_span = mm(beam.max_span)
    if width <= max_span:
        return 0
    return math.ceil(width / max_span) - 1


class LayoutDeriver:
    """
    Stateless layout deriver.

    Clamps the configuration, resolves catalog entries and
    computes the post positions. The same input always yields an equal
    layout.
    """

    def __init__(self, catalog: Catalog | None = None) -> None:
        self.catalog = catalog or get_catalog()

    def derive(self, config: PatioConfig) -> DerivedLayout:
        # Clamping is idempotent, so validated input passes through unchanged
        config = validate_config(config)
        catalog = self.catalog
        is_freestanding = config.is_freestanding
        has_back = config.is_attached(AttachmentSide.BACK)
        has_left = config.is_attached(AttachmentSide.LEFT)
        has_right = config.is_attached(AttachmentSide.RIGHT)

        span_mm = config.depth * 1000
        patio_type = catalog.select_patio_type(span_mm, is_freestanding)
        beam = catalog.select_beam_for_span(span_mm)
        sheet = catalog.select_sheet(config.material, config.colorbond_type)
        column = catalog.select_column()

        overhang = mm(patio_type.overhang_distance) if patio_type.has_overhang else 0.0
        slope_angle = SKILLION_SLOPE if config.style == PatioStyle.SKILLION else DEFAULT_SLOPE
        gable_height = GABLE_RISE * min(config.width, config.depth) if config.is_gable else 0.0

        mids = mid_post_count(config.width, beam)
        candidates = self._post_candidates(
            config.width, config.depth, overhang, mids,
            mirror_back=is_freestanding or not has_back,
        )
        if is_freestanding:
            posts = [c.point for c in candidates]
        else:
            posts = [
                c.point for c in candidates
                if not is_wall_supported(c, has_back, has_left, has_right)
            ]

        layout = DerivedLayout(
            width=config.width,
            depth=config.depth,
            height=config.height,
            catalog_id=catalog.catalog_id,
            patio_type=patio_type,
            beam=beam,
            sheet=sheet,
            column=column,
            beam_profile_h=mm(beam.profile_height),
            beam_profile_w=mm(catalog.beam_face_width),
            col_size=column.size,
            overhang=overhang,
            total_depth=config.depth + overhang,
            slope_angle=slope_angle,
            gable_height=gable_height,
            is_freestanding=is_freestanding,
            is_gable=config.is_gable,
            is_skyline=config.style == PatioStyle.SKYLINE,
            has_back=has_back,
            has_left=has_left,
            has_right=has_right,
            mid_post_count=mids,
            post_positions=posts,
        )
        logger.debug(
            "Derived layout %.2fx%.2f: %s, %s, %s, %d posts (%d mid per edge)",
            config.width, config.depth, patio_type.id, beam.id, sheet.id,
            len(posts), mids,
        )
        return layout

    def _post_candidates(
        self,
        width: float,
        depth: float,
        overhang: float,
        mids: int,
        mirror_back: bool,
    ) -> list[PostCandidate]:
        front_z = depth / 2 + overhang
        back_z = -depth / 2
        candidates = [
            PostCandidate(point=Point2D(x=-width / 2, z=front_z), on_left=True),
            PostCandidate(point=Point2D(x=width / 2, z=front_z), on_right=True),
            PostCandidate(point=Point2D(x=-width / 2, z=back_z), on_back=True, on_left=True),
            PostCandidate(point=Point2D(x=width / 2, z=back_z), on_back=True, on_right=True),
        ]

        # Mid supports split the width into mids + 1 equal bays
        bay = width / (mids + 1)
        for i in range(1, mids + 1):
            x = -width / 2 + bay * i
            candidates.append(PostCandidate(point=Point2D(x=x, z=front_z)))
            if mirror_back:
                candidates.append(PostCandidate(point=Point2D(x=x, z=back_z), on_back=True))

        return candidates


def derive_layout(config: PatioConfig, catalog: Catalog | None = None) -> DerivedLayout:
    """Derive the layout of a configuration, clamping it first."""
    return LayoutDeriver(catalog).derive(config)
