"""Pytest configuration and shared fixtures for patio pipeline tests."""

from __future__ import annotations

from typing import Any, Callable

import pytest

from patiokit.models import PatioConfig, Accessories, Catalog
from patiokit.catalog.registry import get_catalog
from patiokit.services.pipeline import PatioPipeline


@pytest.fixture
def pipeline() -> PatioPipeline:
    return PatioPipeline()


@pytest.fixture
def catalog() -> Catalog:
    return get_catalog()


@pytest.fixture
def all_accessories() -> Accessories:
    return Accessories(lighting=True, fans=True, gutters=True, designer_beam=True, columns=True)


@pytest.fixture
def no_accessories() -> Accessories:
    return Accessories(lighting=False, fans=False, gutters=False, designer_beam=False, columns=False)


@pytest.fixture
def make_config() -> Callable[..., PatioConfig]:
    """Factory for configurations: PatioConfig defaults overridden by kwargs."""

    def _make(**overrides: Any) -> PatioConfig:
        return PatioConfig(**overrides)

    return _make
