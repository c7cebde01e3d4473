"""Property discovery: build the ordered setter plan for a class.

1. Seed with registered overrides that apply to the class
2. Add a setter per declared field
3. Add a setter per ``set*`` / ``add*`` method
4. Deduplicate by identity (first wins, so overrides beat discovery)
5. Sort: collection setters first, then specific before general
"""

from __future__ import annotations

import structlog

from stressgen.application.finder import is_applicable_method
from stressgen.application.registry import PropertySetterRegistry
from stressgen.application.setters import (
    PRESENTATION_ORDER,
    ValueSetter,
    create_field_setter,
    create_method_setter,
)
from stressgen.domain.ports import ClassIntrospector, GeneratorLookup

logger = structlog.get_logger(__name__)


def extract_available_properties(
    introspector: ClassIntrospector,
    *,
    lookup: GeneratorLookup,
    registry: PropertySetterRegistry | None = None,
) -> list[ValueSetter]:
    """Return the generation plan for the introspected class.

    Args:
        introspector: Member surface of the target class.
        lookup: Maps a declared type to a value generator.
        registry: Optional explicit overrides; they win identity ties.

    Returns:
        Setters in application order.  Two calls with no registry change in
        between return the same order.
    """
    setters: dict[str, ValueSetter] = {}

    def _add(setter: ValueSetter) -> None:
        setters.setdefault(setter.identity, setter)

    if registry is not None:
        for setter in registry.applicable_properties(introspector):
            _add(setter)

    for field in introspector.fields:
        _add(create_field_setter(field, lookup))

    for method in introspector.methods:
        if not is_applicable_method(method):
            continue
        setter = create_method_setter(method, lookup)
        if setter is not None:
            _add(setter)

    # Identity order first so the final sort sees a stable input sequence
    ordered = [setters[identity] for identity in sorted(setters)]
    plan = sorted(ordered, key=PRESENTATION_ORDER)

    logger.debug(
        "discovery.completed",
        target=introspector.target.__qualname__,
        setters=len(plan),
    )
    return plan
