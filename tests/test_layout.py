"""Tests for layout derivation and post placement."""

from __future__ import annotations

import itertools

import pytest

from patiokit.core.layout import (
    derive_layout, LayoutDeriver, PostCandidate, is_wall_supported, mid_post_count,
    SKILLION_SLOPE, DEFAULT_SLOPE,
)
from patiokit.models import (
    PatioConfig, PatioStyle, RoofShape, AttachmentSide, Point2D,
)


def positions(layout) -> set[tuple[float, float]]:
    return {(round(p.x, 6), round(p.z, 6)) for p in layout.post_positions}


class TestPostPlacement:
    def test_freestanding_wide_patio_gets_mid_posts_front_and_back(self) -> None:
        layout = derive_layout(PatioConfig(width=5, depth=3.5, style=PatioStyle.FREE_STANDING))

        assert layout.patio_type.id == "type1"
        assert layout.beam.id == "probeam-120"
        assert layout.mid_post_count == 1
        assert layout.post_count == 6
        assert positions(layout) == {
            (-2.5, 1.75), (2.5, 1.75), (-2.5, -1.75), (2.5, -1.75),
            (0.0, 1.75), (0.0, -1.75),
        }

    def test_attached_back_keeps_front_corners_only(self) -> None:
        layout = derive_layout(PatioConfig(width=3, depth=3, attached_sides=[AttachmentSide.BACK]))

        assert layout.mid_post_count == 0
        assert positions(layout) == {(-1.5, 1.5), (1.5, 1.5)}

    def test_front_corners_come_first(self) -> None:
        layout = derive_layout(PatioConfig(width=3, depth=3))

        assert layout.post_positions == [Point2D(x=-1.5, z=1.5), Point2D(x=1.5, z=1.5)]

    def test_back_and_left_attached(self) -> None:
        layout = derive_layout(PatioConfig(
            width=5, depth=3.5, attached_sides=[AttachmentSide.BACK, AttachmentSide.LEFT],
        ))

        assert positions(layout) == {(2.5, 1.75), (0.0, 1.75)}

    def test_all_sides_attached_narrow_needs_no_posts(self) -> None:
        layout = derive_layout(PatioConfig(
            width=3, depth=3,
            attached_sides=[AttachmentSide.BACK, AttachmentSide.LEFT, AttachmentSide.RIGHT],
        ))

        assert layout.post_count == 0

    def test_all_sides_attached_wide_keeps_front_mid_posts(self) -> None:
        layout = derive_layout(PatioConfig(
            width=10, depth=3,
            attached_sides=[AttachmentSide.BACK, AttachmentSide.LEFT, AttachmentSide.RIGHT],
        ))

        assert layout.mid_post_count == 2
        assert layout.post_count == 2
        assert all(p.z == pytest.approx(1.5) for p in layout.post_positions)

    def test_side_attached_without_back_mirrors_mid_posts(self) -> None:
        layout = derive_layout(PatioConfig(
            width=5, depth=3.5, attached_sides=[AttachmentSide.LEFT],
        ))

        # The open back edge decides the back-left corner, so it stays
        assert positions(layout) == {
            (2.5, 1.75), (-2.5, -1.75), (2.5, -1.75), (0.0, 1.75), (0.0, -1.75),
        }
        assert layout.post_count == 5

    def test_back_flag_wins_for_back_corners(self) -> None:
        left_only = derive_layout(PatioConfig(width=3, depth=3, attached_sides=[AttachmentSide.LEFT]))
        back_only = derive_layout(PatioConfig(width=3, depth=3, attached_sides=[AttachmentSide.BACK]))

        assert (-1.5, -1.5) in positions(left_only)
        assert (-1.5, -1.5) not in positions(back_only)
        assert (1.5, -1.5) not in positions(back_only)

    @pytest.mark.parametrize(
        "sides",
        [
            list(combo)
            for n in range(1, 4)
            for combo in itertools.combinations(
                [AttachmentSide.BACK, AttachmentSide.LEFT, AttachmentSide.RIGHT], n,
            )
        ],
    )
    @pytest.mark.parametrize("width", [3, 5, 10])
    def test_no_post_on_an_attached_edge(self, sides: list[AttachmentSide], width: float) -> None:
        layout = derive_layout(PatioConfig(width=width, depth=3.5, attached_sides=sides))
        half_w = layout.width / 2
        back_attached = AttachmentSide.BACK in sides

        for p in layout.post_positions:
            on_back = p.z == pytest.approx(layout.back_z)
            if back_attached:
                assert not on_back
            # Back corners follow the back flag, not the side flags
            if AttachmentSide.LEFT in sides and p.x == pytest.approx(-half_w):
                assert on_back and not back_attached
            if AttachmentSide.RIGHT in sides and p.x == pytest.approx(half_w):
                assert on_back and not back_attached

    def test_freestanding_ignores_attached_sides(self) -> None:
        layout = derive_layout(PatioConfig(
            width=3, depth=3, style=PatioStyle.FREE_STANDING,
            attached_sides=[AttachmentSide.BACK, AttachmentSide.LEFT],
        ))

        assert layout.is_freestanding is True
        assert layout.post_count == 4


class TestMidPosts:
    def test_even_bays(self) -> None:
        layout = derive_layout(PatioConfig(width=12, depth=3))

        assert layout.mid_post_count == 2
        front_xs = sorted(p.x for p in layout.post_positions if p.x not in (-6, 6))
        assert front_xs == pytest.approx([-2.0, 2.0])

    def test_width_equal_to_beam_span_needs_none(self, catalog) -> None:
        assert mid_post_count(4.5, catalog.beam("probeam-120")) == 0
        assert mid_post_count(4.51, catalog.beam("probeam-120")) == 1

    def test_larger_beam_reduces_mid_posts(self) -> None:
        # Depth 5 selects the 150 beam, which spans the full width
        layout = derive_layout(PatioConfig(width=8, depth=5))

        assert layout.beam.id == "probeam-150"
        assert layout.mid_post_count == 0


class TestOverhang:
    def test_type2_overhang_moves_front_edge(self) -> None:
        layout = derive_layout(PatioConfig(width=3, depth=5))

        assert layout.patio_type.id == "type2"
        assert layout.overhang == pytest.approx(0.9)
        assert layout.total_depth == pytest.approx(5.9)
        assert layout.front_z == pytest.approx(3.4)
        assert all(p.z == pytest.approx(3.4) for p in layout.post_positions)

    def test_no_overhang_when_freestanding(self) -> None:
        layout = derive_layout(PatioConfig(width=3, depth=5, style=PatioStyle.FREE_STANDING))

        assert layout.patio_type.id == "type3"
        assert layout.overhang == 0
        assert layout.total_depth == pytest.approx(5)


class TestRoofGeometry:
    def test_skillion_slope(self) -> None:
        layout = derive_layout(PatioConfig(style=PatioStyle.SKILLION))

        assert layout.slope_angle == SKILLION_SLOPE

    @pytest.mark.parametrize(
        "style", [PatioStyle.FLY_OVER, PatioStyle.FREE_STANDING, PatioStyle.SKYLINE, PatioStyle.TIMBER_LOOK],
    )
    def test_default_slope(self, style: PatioStyle) -> None:
        assert derive_layout(PatioConfig(style=style)).slope_angle == DEFAULT_SLOPE

    def test_gable_height_follows_shorter_side(self) -> None:
        layout = derive_layout(PatioConfig(width=6, depth=4, shape=RoofShape.GABLE))

        assert layout.is_gable is True
        assert layout.gable_height == pytest.approx(0.72)

    def test_flat_has_no_gable_height(self) -> None:
        assert derive_layout(PatioConfig()).gable_height == 0

    def test_beam_profile_in_metres(self) -> None:
        layout = derive_layout(PatioConfig())

        assert layout.beam_profile_h == pytest.approx(0.12)
        assert layout.beam_profile_w == pytest.approx(0.15)
        assert layout.col_size == 100


class TestDerivation:
    def test_input_is_clamped(self) -> None:
        layout = derive_layout(PatioConfig(width=30, depth=1, height=9))

        assert (layout.width, layout.depth, layout.height) == (12, 2, 4.5)

    def test_deterministic(self) -> None:
        config = PatioConfig(width=9.3, depth=6.2, style=PatioStyle.FREE_STANDING, shape=RoofShape.GABLE)

        first = LayoutDeriver().derive(config)
        second = LayoutDeriver().derive(config)

        assert first == second
        assert first.model_dump_json() == second.model_dump_json()

    def test_layout_is_frozen(self) -> None:
        layout = derive_layout(PatioConfig())

        with pytest.raises(ValueError):
            layout.width = 7


class TestWallSupport:
    def test_back_corner_dropped_when_back_attached(self) -> None:
        corner = PostCandidate(point=Point2D(x=-1, z=-1), on_back=True, on_left=True)

        assert is_wall_supported(corner, has_back=True, has_left=False, has_right=False)

    def test_back_corner_kept_when_only_its_side_is_attached(self) -> None:
        corner = PostCandidate(point=Point2D(x=-1, z=-1), on_back=True, on_left=True)

        assert not is_wall_supported(corner, has_back=False, has_left=True, has_right=False)

    def test_front_corner_dropped_on_attached_side(self) -> None:
        corner = PostCandidate(point=Point2D(x=-1, z=1), on_left=True)

        assert is_wall_supported(corner, has_back=False, has_left=True, has_right=False)

    def test_back_corner_kept_on_open_edges(self) -> None:
        corner = PostCandidate(point=Point2D(x=-1, z=-1), on_back=True, on_left=True)

        assert not is_wall_supported(corner, has_back=False, has_left=False, has_right=True)

    def test_front_mid_post_never_wall_supported(self) -> None:
        mid = PostCandidate(point=Point2D(x=0, z=1))

        assert not is_wall_supported(mid, has_back=True, has_left=True, has_right=True)
