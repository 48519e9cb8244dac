"""Catalog registry — resolves a catalog id to a catalog.

A company can ship its own catalog version without touching the
pipeline: register it here and pass its id through the pipeline call.
The module-level selection functions use the default catalog unless
one is given.
"""

from __future__ import annotations
import logging

from patiokit.models.catalog import Catalog, BeamSpec, SheetSpec, PatioTypeSpec
from patiokit.models.configuration import RoofMaterial, ColorbondType
from patiokit.catalog.stratco import STRATCO_OUTBACK

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_ID = STRATCO_OUTBACK.catalog_id

_catalogs: dict[str, Catalog] = {STRATCO_OUTBACK.catalog_id: STRATCO_OUTBACK}


def register_catalog(catalog: Catalog) -> None:
    """Register (or replace) a catalog under its own id."""
    _catalogs[catalog.catalog_id] = catalog


def unregister_catalog(catalog_id: str) -> None:
    if catalog_id != DEFAULT_CATALOG_ID:
        _catalogs.pop(catalog_id, None)


def list_catalogs() -> list[Catalog]:
    return list(_catalogs.values())


def get_catalog(catalog_id: str | None = None) -> Catalog:
    """Return the catalog for catalog_id; unknown ids fall back to the default."""
    if catalog_id is None:
        return _catalogs[DEFAULT_CATALOG_ID]
    catalog = _catalogs.get(catalog_id)
    if catalog is None:
        logger.warning("Unknown catalog %r, using %s", catalog_id, DEFAULT_CATALOG_ID)
        return _catalogs[DEFAULT_CATALOG_ID]
    return catalog


def select_patio_type(
    span_mm: float, is_freestanding: bool, catalog: Catalog | None = None,
) -> PatioTypeSpec:
    return (catalog or get_catalog()).select_patio_type(span_mm, is_freestanding)


def select_beam_for_span(span_mm: float, catalog: Catalog | None = None) -> BeamSpec:
    return (catalog or get_catalog()).select_beam_for_span(span_mm)


def select_sheet(
    material: RoofMaterial | str,
    colorbond_type: ColorbondType | str,
    catalog: Catalog | None = None,
) -> SheetSpec:
    return (catalog or get_catalog()).select_sheet(material, colorbond_type)
