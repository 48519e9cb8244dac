"""Tests for catalog data and the selection functions."""

from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from patiokit.catalog.registry import (
    select_patio_type, select_beam_for_span, select_sheet, get_catalog,
    register_catalog, unregister_catalog, DEFAULT_CATALOG_ID,
)
from patiokit.models import (
    Catalog, RoofMaterial, ColorbondType, SheetDirection, PatioConfig, PatioStyle,
    BeamSpec, SheetSpec, PatioTypeSpec,
)
from patiokit.services.pipeline import PatioPipeline


class TestSelectPatioType:
    @pytest.mark.parametrize(
        "span,freestanding,expected",
        [
            (2000, False, "type1"),
            (4500, False, "type1"),
            (4500, True, "type1"),
            (4501, False, "type2"),
            (5400, False, "type2"),
            (5401, False, "type3"),
            (4501, True, "type3"),
            (5400, True, "type3"),
            (6000, True, "type3"),
            (6000, False, "type3"),
            (6001, False, "type4"),
            (8000, True, "type4"),
        ],
    )
    def test_thresholds_are_inclusive_on_lower_pattern(
        self, span: float, freestanding: bool, expected: str,
    ) -> None:
        assert select_patio_type(span, freestanding).id == expected

    def test_type3_for_4600_freestanding(self) -> None:
        spec = select_patio_type(4600, True)

        assert spec.id == "type3"
        assert spec.sheet_direction == SheetDirection.WIDTH
        assert spec.has_purlins is True
        assert spec.has_overhang is False

    def test_type2_has_overhang(self) -> None:
        spec = select_patio_type(5000, False)

        assert spec.has_overhang is True
        assert spec.overhang_distance == 900

    def test_type4_has_mid_purlin(self) -> None:
        assert select_patio_type(7000, False).has_mid_purlin is True

    @pytest.mark.parametrize("freestanding", [True, False])
    def test_capability_never_decreases_with_span(self, catalog: Catalog, freestanding: bool) -> None:
        rank = {spec.id: i for i, spec in enumerate(catalog.patio_types)}
        ranks = [rank[select_patio_type(span, freestanding).id] for span in range(1000, 10001, 25)]

        assert ranks == sorted(ranks)


class TestSelectBeam:
    def test_small_span_selects_120(self) -> None:
        assert select_beam_for_span(4500).id == "probeam-120"

    def test_large_span_selects_150(self) -> None:
        assert select_beam_for_span(4501).id == "probeam-150"
        assert select_beam_for_span(4600).id == "probeam-150"

    def test_span_beyond_every_beam_selects_largest(self) -> None:
        assert select_beam_for_span(12000).id == "probeam-150"

    def test_capacity_never_decreases_with_span(self) -> None:
        spans = [select_beam_for_span(s).max_span for s in range(1000, 10001, 25)]

        assert spans == sorted(spans)


class TestSelectSheet:
    @pytest.mark.parametrize("sub_type", [ColorbondType.SUPERDEK, ColorbondType.FLATDEK])
    def test_insulated_ignores_sub_type(self, sub_type: ColorbondType) -> None:
        sheet = select_sheet(RoofMaterial.INSULATED, sub_type)

        assert sheet.id == "cooldek-50"
        assert sheet.insulated is True

    def test_colorbond_superdek(self) -> None:
        sheet = select_sheet(RoofMaterial.COLORBOND, ColorbondType.SUPERDEK)

        assert sheet.id == "outback-superdek"
        assert sheet.rib_height > 0

    def test_colorbond_flatdek(self) -> None:
        sheet = select_sheet(RoofMaterial.COLORBOND, ColorbondType.FLATDEK)

        assert sheet.id == "outback-deck"
        assert sheet.rib_height == 0

    def test_plain_strings_are_accepted(self) -> None:
        assert select_sheet("colorbond", "superdek").id == "outback-superdek"

    def test_unmapped_material_falls_back_to_lowest_capability(
        self, caplog: pytest.LogCaptureFixture,
    ) -> None:
        with caplog.at_level(logging.WARNING):
            sheet = select_sheet("polycarbonate", "twinwall")

        assert sheet.id == "outback-deck"
        assert "No sheet mapped" in caplog.text


class TestCatalogData:
    def test_beams_ordered_by_capacity(self, catalog: Catalog) -> None:
        spans = [b.max_span for b in catalog.beams]

        assert spans == sorted(spans)

    def test_patio_type_default_beams_exist(self, catalog: Catalog) -> None:
        ids = {b.id for b in catalog.beams}

        assert all(t.default_beam in ids for t in catalog.patio_types)

    def test_standard_column(self, catalog: Catalog) -> None:
        assert catalog.select_column().size == 100
        assert catalog.select_column(decorative=True).decorative is True

    def test_unknown_record_id_falls_back(self, catalog: Catalog) -> None:
        assert catalog.beam("probeam-999").id == catalog.beams[0].id


class TestCatalogRegistry:
    @pytest.fixture
    def acme(self, catalog: Catalog):
        # Same range, but a stiffer small beam that covers 5m
        small = catalog.beams[0].model_copy(update={"id": "acme-130", "label": "130 Acme", "max_span": 5000})
        acme = catalog.model_copy(update={
            "catalog_id": "acme",
            "version": "1",
            "beams": [small, catalog.beams[1]],
        })
        register_catalog(acme)
        yield acme
        unregister_catalog("acme")

    def test_unknown_catalog_falls_back_to_default(self) -> None:
        assert get_catalog("nope").catalog_id == DEFAULT_CATALOG_ID

    def test_default_catalog_cannot_be_unregistered(self) -> None:
        unregister_catalog(DEFAULT_CATALOG_ID)

        assert get_catalog().catalog_id == DEFAULT_CATALOG_ID

    def test_catalog_id_flows_through_pipeline(self, acme: Catalog) -> None:
        config = PatioConfig(width=5, depth=3.5, style=PatioStyle.FREE_STANDING)

        default = PatioPipeline().build(config)
        swapped = PatioPipeline().build(config, catalog_id="acme")

        assert default.layout.catalog_id == DEFAULT_CATALOG_ID
        assert default.layout.mid_post_count == 1
        assert swapped.layout.catalog_id == "acme"
        assert swapped.layout.beam.id == "acme-130"
        assert swapped.layout.mid_post_count == 0
        assert swapped.layout.post_count == 4


class TestRecordBounds:
    def test_beam_span_must_be_positive(self, catalog: Catalog) -> None:
        data = catalog.beams[0].model_dump()
        data["max_span"] = 0

        with pytest.raises(ValidationError):
            BeamSpec(**data)

    def test_patio_type_span_must_be_positive(self, catalog: Catalog) -> None:
        data = catalog.patio_types[0].model_dump()
        data["max_span"] = -4500

        with pytest.raises(ValidationError):
            PatioTypeSpec(**data)

    def test_ribbed_sheet_needs_spacing(self) -> None:
        with pytest.raises(ValidationError):
            SheetSpec(
                id="bad-rib", label="Bad", thickness=0.42, cover_width=700,
                max_span=4500, rib_height=18, rib_spacing=0,
            )

    def test_flat_sheet_without_spacing_is_valid(self) -> None:
        sheet = SheetSpec(id="flat", label="Flat", thickness=0.42, cover_width=680, max_span=4500)

        assert sheet.rib_spacing == 0
