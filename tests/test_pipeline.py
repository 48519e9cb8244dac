"""Tests for the end-to-end build pipeline."""

from __future__ import annotations

import logging

import pytest

from patiokit.services.pipeline import PatioPipeline, PipelineResult, build_patio_pipeline
from patiokit.models import PatioConfig, PatioStyle, PartKind, GenerationOptions


class TestBuild:
    def test_default_configuration(self, pipeline: PatioPipeline) -> None:
        result = pipeline.build(PatioConfig())
        summary = result.summary()

        assert summary.patio_type == "Type 1"
        assert summary.beam == "120 Pro-beam"
        assert summary.sheet == "Cooldek 50mm"
        assert summary.column == "100×100 Steel"
        assert summary.posts == 3
        assert summary.mid_posts == 1
        assert summary.area == 17.5

    def test_returns_validated_config(self, pipeline: PatioPipeline) -> None:
        result = pipeline.build(PatioConfig(width=99, attached_sides=[]))

        assert result.validated_config.width == 12
        assert result.layout.width == 12
        assert result.validated_config.attached_sides == ["back"]

    def test_stats_match_parts(self, pipeline: PatioPipeline) -> None:
        result = pipeline.build(PatioConfig(style=PatioStyle.FREE_STANDING, depth=6.5))

        assert result.stats.total_parts == len(result.parts)
        # The 150 beam spans the full 5m width, so only the corners stand
        assert result.stats.posts == 4
        assert result.stats.beams == 4
        assert result.stats.purlins == 7
        assert sum(result.stats.by_kind.values()) == len(result.parts)

    def test_parts_of(self, pipeline: PatioPipeline) -> None:
        result = pipeline.build(PatioConfig())

        beams = result.parts_of(PartKind.BEAM, "beam-bracket")

        assert {p.kind for p in beams} == {PartKind.BEAM, PartKind.BEAM_BRACKET}
        assert len(beams) == 8

    def test_options_pass_through(self, pipeline: PatioPipeline) -> None:
        result = pipeline.build(PatioConfig(), options=GenerationOptions(disabled_rules=["site.ground"]))

        assert result.parts_of(PartKind.GROUND) == []

    def test_one_shot_matches_pipeline(self, pipeline: PatioPipeline) -> None:
        config = PatioConfig(width=8.2, depth=5.1)

        assert build_patio_pipeline(config) == pipeline.build(config)

    def test_logs_build(self, pipeline: PatioPipeline, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="patiokit.services.pipeline"):
            pipeline.build(PatioConfig())

        assert "Built fly-over 5.00x3.50m patio" in caplog.text

    def test_result_serialises(self, pipeline: PatioPipeline) -> None:
        result = pipeline.build(PatioConfig())

        restored = PipelineResult.model_validate_json(result.model_dump_json())

        assert restored == result


class TestRules:
    def test_list_rules(self, pipeline: PatioPipeline) -> None:
        rules = pipeline.list_rules()

        assert rules[0] == {"id": "site.ground", "name": "Ground"}
        assert len(rules) == 15
