"""Value setters and the factory that builds them.

A setter is a reusable assignment unit: given a target instance it obtains
a generated value and writes it through an accessor method or straight into
the backing field.  A failed write is retried once with relaxed access and
then abandoned; the outcome is reported, never raised.

Collection-typed fields get a two-phase setter: the field is first
(re)initialised with a fresh container, then one generated element is passed
to the ``add*`` method.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from functools import cmp_to_key
from typing import Any, Callable

import structlog

from stressgen.application.finder import find_append_method, find_field, find_setter
from stressgen.domain.entities import SetterOutcome
from stressgen.domain.enums import ApplyStatus, SetterKind
from stressgen.domain.members import FieldRef, MethodRef
from stressgen.domain.naming import canonical_name, field_canonical_name
from stressgen.domain.ports import GeneratorLookup, ValueGenerator
from stressgen.infrastructure.reflection import element_type, is_collection_type

logger = structlog.get_logger(__name__)


def _assign(
    identity: str,
    target: Any,
    generator: ValueGenerator[Any],
    write: Callable[[Any, Any], None],
    force_write: Callable[[Any, Any], None],
) -> SetterOutcome:
    """Generate one value and write it, retrying once with relaxed access."""
    try:
        value = generator.generate()
    except Exception as e:
        logger.debug("setter.generator_failed", identity=identity, error=str(e))
        return SetterOutcome(identity=identity, status=ApplyStatus.SKIPPED, error=f"generator: {e!r}")

    try:
        write(target, value)
        return SetterOutcome(identity=identity, status=ApplyStatus.APPLIED)
    except Exception as first_error:
        try:
            force_write(target, value)
        except Exception as e:
            logger.debug(
                "setter.skipped",
                identity=identity,
                first_error=str(first_error),
                error=str(e),
            )
            return SetterOutcome(identity=identity, status=ApplyStatus.SKIPPED, error=repr(e))
        logger.debug("setter.forced", identity=identity, error=str(first_error))
        return SetterOutcome(identity=identity, status=ApplyStatus.APPLIED_FORCED, error=repr(first_error))


class ValueSetter(ABC):
    """A resolved assignment of generated values to one property."""

    kind: SetterKind

    @abstractmethod
    def apply(self, target: Any) -> SetterOutcome:
        """Write a freshly generated value onto *target*."""

    @property
    @abstractmethod
    def affected_class(self) -> type:
        """Declaring class of the underlying member."""

    @property
    def identity(self) -> str:
        return str(self)


class SimpleValueSetter(ValueSetter):
    """Writes through the setter method when there is one, else the field."""

    kind = SetterKind.DIRECT

    def __init__(
        self,
        field: FieldRef | None,
        method: MethodRef | None,
        generator: ValueGenerator[Any],
    ) -> None:
        if field is None and method is None:
            raise ValueError("A setter needs a field or a method")
        self.field = field
        self.method = method
        self.generator = generator

    def apply(self, target: Any) -> SetterOutcome:
        if self.method is not None:
            return _assign(self.identity, target, self.generator, self.method.invoke, self.method.force_invoke)
        return _assign(self.identity, target, self.generator, self.field.write, self.field.force_write)

    @property
    def affected_class(self) -> type:
        if self.field is not None:
            return self.field.declaring_class
        return self.method.declaring_class

    def __str__(self) -> str:
        field_name = self.field.name if self.field is not None else "-"
        method_name = self.method.name if self.method is not None else "-"
        return f"{field_name} / {method_name}"

    def __repr__(self) -> str:
        return f"SimpleValueSetter({self}, {self.affected_class.__qualname__})"


class CollectionValueSetter(ValueSetter):
    """Initialises a collection field, then appends one generated element."""

    kind = SetterKind.COLLECTION

    def __init__(
        self,
        initializer: SimpleValueSetter,
        method: MethodRef | None,
        generator: ValueGenerator[Any],
    ) -> None:
        self.initializer = initializer
        self.method = method
        self.generator = generator

    @property
    def field(self) -> FieldRef | None:
        return self.initializer.field

    def apply(self, target: Any) -> SetterOutcome:
        initialized = self.initializer.apply(target)
        if self.method is None:
            return initialized
        appended = _assign(self.identity, target, self.generator, self.method.invoke, self.method.force_invoke)
        return appended.model_copy(update={"initializer": initialized})

    @property
    def affected_class(self) -> type:
        return self.initializer.affected_class

    def __str__(self) -> str:
        return str(self.initializer)

    def __repr__(self) -> str:
        append_name = self.method.name if self.method is not None else "-"
        return f"CollectionValueSetter({self}, append={append_name})"


# ---------------------------------------------------------------------------
# Ordering
# ---------------------------------------------------------------------------


def _compare_names(first: str, second: str) -> int:
    return (first > second) - (first < second)


def compare_presentation(first: ValueSetter, second: ValueSetter) -> int:
    """Comparator used for both registry dedup and plan ordering.

    Collection setters sort before direct ones and compare by their
    initializers.  Direct setters order by field name descending, then
    method name descending, then subclass before superclass.  Zero means
    "same logical property".
    """
    first_simple = isinstance(first, SimpleValueSetter)
    second_simple = isinstance(second, SimpleValueSetter)
    if first_simple and second_simple:
        if first.field is not None and second.field is not None:
            comparison = _compare_names(second.field.name, first.field.name)
            if comparison:
                return comparison
        if first.method is not None and second.method is not None:
            comparison = _compare_names(second.method.name, first.method.name)
            if comparison:
                return comparison
        first_class = first.affected_class
        second_class = second.affected_class
        if first_class is not second_class:
            return 1 if issubclass(second_class, first_class) else -1
        return 0
    if not first_simple and not second_simple:
        return compare_presentation(first.initializer, second.initializer)
    return 1 if first_simple else -1


PRESENTATION_ORDER = cmp_to_key(compare_presentation)


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------


def create(
    field: FieldRef | None,
    method: MethodRef | None,
    generator: ValueGenerator[Any],
    lookup: GeneratorLookup,
) -> ValueSetter:
    """Build a setter for a field/method pair.

    For collection-typed fields *generator* produces elements; the container
    itself comes from ``lookup(field.type)``.
    """
    if field is not None and is_collection_type(field.type):
        property_name = field_canonical_name(field)
        initializer = SimpleValueSetter(
            field,
            find_setter(field.declaring_class, property_name),
            lookup(field.type),
        )
        append_method = find_append_method(field.declaring_class, property_name)
        return CollectionValueSetter(initializer, append_method, generator)
    return SimpleValueSetter(field, method, generator)


def create_field_setter(
    field: FieldRef,
    lookup: GeneratorLookup,
    generator: ValueGenerator[Any] | None = None,
) -> ValueSetter:
    """Build a setter for a declared field, pairing it with its ``set*`` method."""
    if generator is None:
        value_type = element_type(field.type) if is_collection_type(field.type) else field.type
        generator = lookup(value_type)
    method = find_setter(field.declaring_class, field_canonical_name(field))
    return create(field, method, generator, lookup)


def create_method_setter(
    method: MethodRef,
    lookup: GeneratorLookup,
    generator: ValueGenerator[Any] | None = None,
) -> ValueSetter | None:
    """Build a setter for an accessor method, or ``None`` if it is not single-argument."""
    if method.parameter_count != 1:
        return None
    field = find_field(method.declaring_class, canonical_name(method.name))
    if generator is None:
        if field is not None and is_collection_type(field.type):
            generator = lookup(element_type(field.type))
        else:
            generator = lookup(method.parameter_types[0])
    return create(field, method, generator, lookup)
