"""Tests for configuration clamping and normalisation."""

from __future__ import annotations

import itertools

import pytest

from patiokit.core.validator import validate_config, WIDTH_RANGE, DEPTH_RANGE, HEIGHT_RANGE
from patiokit.models import PatioConfig, PatioStyle, AttachmentSide


class TestClamping:
    def test_values_in_range_pass_through(self) -> None:
        config = validate_config(PatioConfig(width=6, depth=4, height=3))

        assert (config.width, config.depth, config.height) == (6, 4, 3)

    def test_out_of_range_values_are_clamped(self) -> None:
        config = validate_config(PatioConfig(width=20, depth=1, height=5))

        assert config.width == 12
        assert config.depth == 2
        assert config.height == 4.5

    def test_lower_bounds(self) -> None:
        config = validate_config(PatioConfig(width=-3, depth=0, height=1))

        assert (config.width, config.depth, config.height) == (2, 2, 2.4)

    @pytest.mark.parametrize(
        "width,depth,height",
        list(itertools.product([-1, 2, 7.25, 12, 30], [0, 2, 5.4, 8, 9.9], [0, 2.4, 3, 4.5, 10])),
    )
    def test_idempotent_and_within_bounds(self, width: float, depth: float, height: float) -> None:
        once = validate_config(PatioConfig(width=width, depth=depth, height=height))
        twice = validate_config(once)

        assert twice == once
        assert WIDTH_RANGE[0] <= once.width <= WIDTH_RANGE[1]
        assert DEPTH_RANGE[0] <= once.depth <= DEPTH_RANGE[1]
        assert HEIGHT_RANGE[0] <= once.height <= HEIGHT_RANGE[1]


class TestAttachedSides:
    def test_empty_sides_default_to_back(self) -> None:
        config = validate_config(PatioConfig(attached_sides=[]))

        assert config.attached_sides == [AttachmentSide.BACK]

    def test_empty_sides_default_to_back_when_freestanding(self) -> None:
        config = validate_config(PatioConfig(style=PatioStyle.FREE_STANDING, attached_sides=[]))

        assert config.attached_sides == [AttachmentSide.BACK]

    def test_sides_are_deduplicated_in_canonical_order(self) -> None:
        raw = PatioConfig(attached_sides=["right", "back", "right", "left"])

        config = validate_config(raw)

        assert config.attached_sides == [
            AttachmentSide.BACK, AttachmentSide.LEFT, AttachmentSide.RIGHT,
        ]

    def test_front_is_not_an_attachment_side(self) -> None:
        with pytest.raises(ValueError):
            PatioConfig(attached_sides=["front"])


class TestPurity:
    def test_input_is_not_modified(self) -> None:
        raw = PatioConfig(width=40, attached_sides=[])

        validate_config(raw)

        assert raw.width == 40
        assert raw.attached_sides == []

    def test_returns_new_value(self) -> None:
        raw = PatioConfig()

        config = validate_config(raw)

        assert config is not raw
        assert config.accessories is not raw.accessories
        assert config == raw
