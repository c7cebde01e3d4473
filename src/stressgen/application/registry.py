"""Property setter registry: explicit generator overrides.

Holds setters registered for a specific (class, property) pair.  A later
registration for the same logical property replaces the earlier one.  The
registry is created once (see ``stressgen.container``) and passed to
discovery; it lives for as long as its owner keeps it.
"""

from __future__ import annotations

import threading
from typing import Any

import structlog

from stressgen.application.finder import find_field, find_setter
from stressgen.application.setters import PRESENTATION_ORDER, ValueSetter, compare_presentation, create
from stressgen.core.exceptions import PropertyNotFoundError
from stressgen.domain.members import FieldRef
from stressgen.domain.naming import property_key
from stressgen.domain.ports import ClassIntrospector, GeneratorLookup, ValueGenerator

logger = structlog.get_logger(__name__)


def _find_inherited_field(cls: type, name: str) -> FieldRef | None:
    for klass in cls.__mro__:
        if klass is object:
            continue
        field = find_field(klass, name)
        if field is not None:
            return field
    return None


class PropertySetterRegistry:
    """Thread-safe store of registered property setters."""

    def __init__(self, lookup: GeneratorLookup) -> None:
        self._lookup = lookup
        self._setters: list[ValueSetter] = []
        self._lock = threading.Lock()
        self._version = 0

    def register(self, cls: type, property_name: str, generator: ValueGenerator[Any]) -> ValueSetter:
        """Use *generator* for *property_name* on *cls* and its subclasses.

        For a collection property *generator* produces the appended
        elements.  Raises :class:`PropertyNotFoundError` when *cls* has
        neither a field nor a ``set*`` method for the property.  Inherited
        fields resolve to the base class that declares them.
        """
        name = property_key(property_name)
        field = _find_inherited_field(cls, name)
        method = find_setter(cls, name)
        if field is None and method is None:
            raise PropertyNotFoundError(
                f"{cls.__qualname__} has no field or setter for '{property_name}'",
                details={"class": cls.__qualname__, "property": property_name},
            )
        setter = create(field, method, generator, self._lookup)
        self.add(setter)
        logger.debug("registry.registered", cls=cls.__qualname__, setter=str(setter))
        return setter

    def add(self, setter: ValueSetter) -> None:
        """Insert *setter*, replacing any entry for the same logical property."""
        with self._lock:
            self._setters = [s for s in self._setters if compare_presentation(s, setter) != 0]
            self._setters.append(setter)
            self._version += 1

    def applicable_properties(self, introspector: ClassIntrospector) -> list[ValueSetter]:
        """Registered setters that apply to the introspected class, most specific first."""
        with self._lock:
            snapshot = list(self._setters)
        applicable = [s for s in snapshot if introspector.can_replace(s.affected_class)]
        return sorted(applicable, key=PRESENTATION_ORDER)

    @property
    def version(self) -> int:
        """Incremented on every change; lets callers invalidate cached plans."""
        return self._version

    def __len__(self) -> int:
        return len(self._setters)
