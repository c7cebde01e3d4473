"""Naming rules as pure functions.

Map member names to the canonical property name used to pair a backing
field with its ``set*`` / ``add*`` accessors.  Case and underscores are
folded so ``set_first_name``, ``setFirstName`` and ``_first_name`` all
resolve to ``firstname``.
"""

from __future__ import annotations

from stressgen.domain.members import FieldRef

ACCESSOR_PREFIXES: tuple[str, ...] = ("set", "add")
SETTER_PREFIX = "set"
APPEND_PREFIX = "add"


def _fold(name: str) -> str:
    return name.replace("_", "")


def is_accessor_name(member_name: str) -> bool:
    """Return ``True`` when *member_name* carries a ``set``/``add`` prefix."""
    return member_name.lower().startswith(ACCESSOR_PREFIXES)


def canonical_name(member_name: str) -> str:
    """Return the canonical property name for a member.

    The ``set``/``add`` prefix is stripped only when something remains
    after it, so a bare ``set`` stays ``set``.
    """
    lowered = member_name.lower()
    if len(lowered) > 3 and lowered.startswith(ACCESSOR_PREFIXES):
        lowered = lowered[3:]
    return _fold(lowered)


def append_canonical_name(member_name: str) -> str:
    """Return the pluralised canonical name, e.g. ``add_tag`` -> ``tags``."""
    return canonical_name(member_name) + "s"


def property_key(name: str) -> str:
    """Fold a plain property name (no prefix stripping)."""
    return _fold(name.lower())


def field_canonical_name(field: FieldRef) -> str:
    """Return the canonical name of a backing field."""
    return property_key(field.name)
