"""Dependency wiring.

``create_container`` builds the settings, generator lookup, registry and
object generator once, at harness startup, and hands them out together.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from stressgen.application.populate import ObjectGenerator
from stressgen.application.registry import PropertySetterRegistry
from stressgen.application.setters import ValueSetter
from stressgen.config.logging import configure_logging
from stressgen.config.settings import Settings, get_settings
from stressgen.domain.entities import PopulationReport
from stressgen.domain.ports import ValueGenerator
from stressgen.infrastructure.generators import RandomValueGenerators


@dataclass
class Container:
    """Holds the wired collaborators."""

    settings: Settings
    generators: RandomValueGenerators
    registry: PropertySetterRegistry
    objects: ObjectGenerator

    def register(self, cls: type, property_name: str, generator: ValueGenerator[Any]) -> ValueSetter:
        return self.registry.register(cls, property_name, generator)

    def plan(self, cls: type) -> list[ValueSetter]:
        return self.objects.plan(cls)

    def populate(self, target: Any) -> PopulationReport:
        return self.objects.populate(target)

    def generate(self, cls: type) -> Any:
        """Create and populate one *cls* instance, discarding the report."""
        instance, _ = self.objects.generate(cls)
        return instance


def create_container(settings: Settings | None = None) -> Container:
    """Wire all collaborators from *settings* (environment settings by default)."""
    settings = settings or get_settings()
    configure_logging(settings)

    generators = RandomValueGenerators(settings)
    registry = PropertySetterRegistry(generators)
    objects = ObjectGenerator(registry, generators, settings)
    generators.fallback = objects.value_generator

    return Container(
        settings=settings,
        generators=generators,
        registry=registry,
        objects=objects,
    )
