"""Member finder: locate the field or accessor backing a property.

Every finder returns at most one candidate.  Ties resolve to the first
member in enumeration order (declaration order for fields, MRO order for
methods), so results are stable across runs.
"""

from __future__ import annotations

from stressgen.domain.members import FieldRef, MethodRef
from stressgen.domain.naming import (
    APPEND_PREFIX,
    SETTER_PREFIX,
    append_canonical_name,
    canonical_name,
    field_canonical_name,
    is_accessor_name,
)
from stressgen.infrastructure.reflection import declared_fields, public_methods


def is_applicable_method(method: MethodRef) -> bool:
    """Non-static method whose name starts with ``set`` or ``add``."""
    if method.is_static:
        return False
    return is_accessor_name(method.name)


def _single_argument(method: MethodRef, prefix: str) -> bool:
    return (
        not method.is_static
        and method.parameter_count == 1
        and method.name.lower().startswith(prefix)
    )


def find_field(cls: type, property_name: str) -> FieldRef | None:
    """Return the field declared on *cls* itself matching *property_name*."""
    for field in declared_fields(cls):
        if field_canonical_name(field) == property_name:
            return field
    return None


def find_setter(cls: type, property_name: str) -> MethodRef | None:
    """Return a single-argument ``set*`` method for *property_name*."""
    for method in public_methods(cls):
        if _single_argument(method, SETTER_PREFIX) and canonical_name(method.name) == property_name:
            return method
    return None


def find_append_method(cls: type, property_name: str) -> MethodRef | None:
    """Return a single-argument ``add*`` method for collection *property_name*.

    The pluralised method name only has to start with the property name, so
    ``add_tag`` serves a field called ``tags`` as well as one called ``tag``.
    """
    for method in public_methods(cls):
        if _single_argument(method, APPEND_PREFIX) and append_canonical_name(method.name).startswith(property_name):
            return method
    return None
