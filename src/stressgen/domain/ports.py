"""Port definitions.

The application layer depends only on these Protocols, never on the
concrete reflection wrapper or generator implementations.
"""

from __future__ import annotations

from typing import Any, Protocol, TypeVar, runtime_checkable

from stressgen.domain.members import FieldRef, MethodRef

T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class ValueGenerator(Protocol[T_co]):
    """Produces one value per call."""

    def generate(self) -> T_co: ...


@runtime_checkable
class ClassIntrospector(Protocol):
    """Introspectable member surface of a target class."""

    @property
    def target(self) -> type: ...

    @property
    def fields(self) -> list[FieldRef]: ...

    @property
    def methods(self) -> list[MethodRef]: ...

    def can_replace(self, other: type) -> bool: ...


@runtime_checkable
class GeneratorLookup(Protocol):
    """Resolves a declared type to a value generator."""

    def __call__(self, declared_type: Any) -> ValueGenerator[Any]: ...
