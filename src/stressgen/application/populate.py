"""Object population: apply a discovered plan to target instances."""

from __future__ import annotations

import threading
from typing import Any

import structlog

from stressgen.application.discovery import extract_available_properties
from stressgen.application.registry import PropertySetterRegistry
from stressgen.application.setters import ValueSetter
from stressgen.config.settings import Settings
from stressgen.domain.entities import PopulationReport
from stressgen.domain.ports import GeneratorLookup, ValueGenerator
from stressgen.infrastructure.reflection import ClassReflectionAccessWrapper

logger = structlog.get_logger(__name__)


class ObjectGenerator:
    """Creates and fills instances of arbitrary classes.

    Plans are cached per class and rebuilt whenever the registry changes.
    """

    def __init__(
        self,
        registry: PropertySetterRegistry,
        lookup: GeneratorLookup,
        settings: Settings,
    ) -> None:
        self.registry = registry
        self.lookup = lookup
        self.settings = settings
        self._plans: dict[type, tuple[int, list[ValueSetter]]] = {}
        self._plans_lock = threading.Lock()
        self._local = threading.local()

    def plan(self, cls: type) -> list[ValueSetter]:
        """Return the ordered setters for *cls*."""
        version = self.registry.version
        with self._plans_lock:
            cached = self._plans.get(cls)
        if cached is not None and cached[0] == version:
            return list(cached[1])

        setters = extract_available_properties(
            ClassReflectionAccessWrapper(cls),
            lookup=self.lookup,
            registry=self.registry,
        )
        with self._plans_lock:
            self._plans[cls] = (version, setters)
        return list(setters)

    def populate(self, target: Any) -> PopulationReport:
        """Apply the plan for ``type(target)`` to *target* in place."""
        cls = type(target)
        report = PopulationReport(target=f"{cls.__module__}.{cls.__qualname__}")
        for setter in self.plan(cls):
            report.outcomes.append(setter.apply(target))
        if report.skipped:
            logger.debug("populate.partial", target=report.target, skipped=report.skipped)
        return report

    def generate(self, cls: type) -> tuple[Any, PopulationReport]:
        """Create a new *cls* instance and populate it."""
        instance = ClassReflectionAccessWrapper(cls).new_instance()
        report = self.populate(instance)
        return instance, report

    def value_generator(self, cls: type) -> ValueGenerator[Any]:
        """Generator producing populated *cls* instances, for nested properties."""
        return _NestedObjectGenerator(self, cls)

    # -- Nesting depth ------------------------------------------------------

    @property
    def depth(self) -> int:
        return getattr(self._local, "depth", 0)

    @depth.setter
    def depth(self, value: int) -> None:
        self._local.depth = value


class _NestedObjectGenerator:
    """Builds nested objects, returning ``None`` beyond ``settings.max_depth``."""

    def __init__(self, owner: ObjectGenerator, cls: type) -> None:
        self._owner = owner
        self._cls = cls

    def generate(self) -> Any:
        owner = self._owner
        if owner.depth >= owner.settings.max_depth:
            return None
        owner.depth += 1
        try:
            instance, _ = owner.generate(self._cls)
            return instance
        finally:
            owner.depth -= 1

    def __repr__(self) -> str:
        return f"NestedObjectGenerator({self._cls.__qualname__})"
