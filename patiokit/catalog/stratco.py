"""Stratco Outback product catalog.

Real dimensions and specs from Stratco product documentation and span
tables. All measurements in millimetres.
"""

from __future__ import annotations

from patiokit.models.catalog import (
    Catalog, BeamSpec, SheetSpec, ColumnSpec, ColumnShape, GutterSpec,
    DownpipeSpec, BracketSpec, BracketSet, PatioTypeSpec, SheetDirection,
)


BEAMS = [
    BeamSpec(
        id="probeam-120", label="120 Pro-beam",
        profile_height=120, profile_width=50, thickness=1.0,
        mass=3.68, max_span=4500, fluted=True,
    ),
    BeamSpec(
        id="probeam-150", label="150 Pro-beam",
        profile_height=150, profile_width=50, thickness=1.2,
        mass=5.0, max_span=8400, fluted=True,
    ),
]

SHEETS = [
    SheetSpec(
        id="outback-deck", label="Outback Deck (Flatdek)",
        thickness=0.42, cover_width=680, max_span=4500,
    ),
    SheetSpec(
        id="outback-superdek", label="Outback Superdek",
        thickness=0.42, cover_width=700, max_span=4500,
        rib_height=18, rib_spacing=180,
    ),
    SheetSpec(
        id="cooldek-50", label="Cooldek 50mm",
        thickness=50, cover_width=1000, max_span=4500, insulated=True,
        rib_height=17, rib_spacing=200,
    ),
    SheetSpec(
        id="cooldek-75", label="Cooldek 75mm",
        thickness=75, cover_width=1000, max_span=4500, insulated=True,
        rib_height=17, rib_spacing=200,
    ),
]

COLUMNS = [
    ColumnSpec(id="col-75", label="75×75 Steel", size=75),
    ColumnSpec(id="col-100", label="100×100 Steel", size=100),
    ColumnSpec(
        id="col-140", label="140×140 Timber-print Aluminium",
        size=140, shape=ColumnShape.SQUARE, decorative=True,
    ),
]

GUTTERS = [
    GutterSpec(id="outback-gutter", label="Outback Gutter", width=115, height=75),
    GutterSpec(id="edge-gutter", label="Edge Gutter (Evolution)", width=90, height=55),
]

BRACKETS = BracketSet(
    wall_bracket=BracketSpec(width=120, height=80, depth=50),
    beam_end_bracket=BracketSpec(width=50, height=80),
    beam_to_beam_bracket=BracketSpec(width=100, height=120),
    post_bracket=BracketSpec(width=100, height=20),
    post_cap=BracketSpec(width=100, height=15),
)

PATIO_TYPES = [
    PatioTypeSpec(
        id="type1", label="Type 1",
        description="Standard flat — up to 4.5m span",
        max_span=4500, default_beam="probeam-120",
        selection_limit=4500,
    ),
    PatioTypeSpec(
        id="type2", label="Type 2",
        description="Flat with front overhang — up to 5.4m",
        max_span=5400, has_overhang=True, overhang_distance=900,
        default_beam="probeam-120",
        selection_limit=5400, attached_only=True,
    ),
    PatioTypeSpec(
        id="type3", label="Type 3",
        description="Cross-purlin support — sheets run horizontally",
        max_span=8400, has_purlins=True,
        sheet_direction=SheetDirection.WIDTH, default_beam="probeam-150",
        selection_limit=6000,
    ),
    PatioTypeSpec(
        id="type4", label="Type 4",
        description="Mid-span purlin — up to 8.4m span",
        max_span=8400, has_purlins=True, has_mid_purlin=True,
        default_beam="probeam-150",
    ),
]

STRATCO_OUTBACK = Catalog(
    catalog_id="stratco-outback",
    version="2026.1",
    beams=BEAMS,
    sheets=SHEETS,
    columns=COLUMNS,
    gutters=GUTTERS,
    downpipe=DownpipeSpec(diameter=65),
    brackets=BRACKETS,
    patio_types=PATIO_TYPES,
    sheet_selection={
        "insulated": "cooldek-50",
        "colorbond:superdek": "outback-superdek",
        "colorbond:flatdek": "outback-deck",
    },
    standard_column_id="col-100",
    decorative_column_id="col-140",
)
