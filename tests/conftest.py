"""Shared fixtures: a seeded generator lookup and an empty registry."""

from __future__ import annotations

import pytest

from stressgen.application.registry import PropertySetterRegistry
from stressgen.config.settings import Settings
from stressgen.infrastructure.generators import RandomValueGenerators


@pytest.fixture
def settings() -> Settings:
    return Settings(seed=1234, log_level="WARNING")


@pytest.fixture
def lookup(settings: Settings) -> RandomValueGenerators:
    return RandomValueGenerators(settings)


@pytest.fixture
def registry(lookup: RandomValueGenerators) -> PropertySetterRegistry:
    return PropertySetterRegistry(lookup)
