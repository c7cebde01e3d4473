"""Class reflection access wrapper.

Enumerates the introspectable member surface of a class: annotated (or
slotted) fields and the public methods visible through the MRO.  Implements
the ``ClassIntrospector`` port.
"""

from __future__ import annotations

import collections.abc
import inspect
import typing
from typing import Any, ClassVar, get_args, get_origin

import structlog

from stressgen.core.exceptions import DiscoveryError, InstantiationError
from stressgen.domain.members import FieldRef, MethodRef

logger = structlog.get_logger(__name__)

_NON_COLLECTIONS: tuple[type, ...] = (str, bytes, bytearray, memoryview, collections.abc.Mapping)


# ---------------------------------------------------------------------------
# Type helpers
# ---------------------------------------------------------------------------


def runtime_class(declared_type: Any) -> type | None:
    """Return the runtime class behind *declared_type* (``list[str]`` -> ``list``)."""
    origin = get_origin(declared_type)
    candidate = origin if origin is not None else declared_type
    return candidate if inspect.isclass(candidate) else None


def is_collection_type(declared_type: Any) -> bool:
    """Return ``True`` for appendable collection types.

    Strings, bytes and mappings are collections in the ABC sense but are not
    treated as such here.
    """
    cls = runtime_class(declared_type)
    if cls is None:
        return False
    try:
        return issubclass(cls, collections.abc.Collection) and not issubclass(cls, _NON_COLLECTIONS)
    except TypeError:
        return False


def element_type(declared_type: Any) -> Any:
    """Return the element type of a parametrised collection, else ``Any``."""
    args = get_args(declared_type)
    if not args or args[0] is Ellipsis:
        return Any
    return args[0]


def _resolve_hints(obj: Any) -> dict[str, Any]:
    try:
        return typing.get_type_hints(obj)
    except Exception:
        # Unresolvable forward references: fall back to the raw annotations
        if inspect.isclass(obj):
            return _own_annotations(obj)
        try:
            return dict(getattr(obj, "__annotations__", {}))
        except Exception:
            return {}


def _own_annotations(cls: type) -> dict[str, Any]:
    try:
        return dict(inspect.get_annotations(cls))
    except Exception:
        return dict(cls.__dict__.get("__annotations__", {}))


def _is_class_var(annotation: Any) -> bool:
    if annotation is ClassVar or get_origin(annotation) is ClassVar:
        return True
    return isinstance(annotation, str) and annotation.replace("typing.", "").startswith("ClassVar")


# ---------------------------------------------------------------------------
# Member enumeration
# ---------------------------------------------------------------------------


def declared_fields(cls: type) -> list[FieldRef]:
    """Fields declared directly on *cls*, in declaration order.

    Annotated attributes (``ClassVar`` excluded) come first, followed by
    ``__slots__`` entries without an annotation.  Inherited fields are not
    included.
    """
    own = _own_annotations(cls)
    hints = _resolve_hints(cls) if own else {}

    fields: list[FieldRef] = []
    seen: set[str] = set()
    for name, raw in own.items():
        if _is_class_var(raw):
            continue
        resolved = hints.get(name, raw)
        if _is_class_var(resolved):
            continue
        fields.append(FieldRef(name=name, declaring_class=cls, type=resolved))
        seen.add(name)

    slots = cls.__dict__.get("__slots__", ())
    if isinstance(slots, str):
        slots = (slots,)
    for name in slots:
        if name in seen or name in ("__dict__", "__weakref__"):
            continue
        fields.append(FieldRef(name=name, declaring_class=cls, type=Any))
        seen.add(name)
    return fields


def visible_fields(cls: type) -> list[FieldRef]:
    """Fields declared on *cls* and its bases, most-derived declaration first.

    Each ``FieldRef`` keeps the class that actually declares it, so accessor
    pairing still happens on the declaring class.
    """
    fields: list[FieldRef] = []
    seen: set[str] = set()
    for klass in cls.__mro__:
        if klass is object:
            continue
        for field in declared_fields(klass):
            if field.name in seen:
                continue
            seen.add(field.name)
            fields.append(field)
    return fields


def _parameter_types(function: Any) -> tuple[Any, ...] | None:
    try:
        signature = inspect.signature(function)
    except (TypeError, ValueError, NameError):
        return None

    params = list(signature.parameters.values())[1:]  # drop self
    positional = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
    if any(p.kind not in positional for p in params):
        return None

    hints = _resolve_hints(function)
    return tuple(
        hints.get(p.name, p.annotation if p.annotation is not inspect.Parameter.empty else Any)
        for p in params
    )


def public_methods(cls: type) -> list[MethodRef]:
    """Public methods visible on *cls*, most-derived definition first.

    Walks the MRO (``object`` excluded); a name already seen on a more
    derived class shadows the inherited one.  Static and class methods are
    reported with ``is_static=True``.
    """
    methods: list[MethodRef] = []
    seen: set[str] = set()
    for klass in cls.__mro__:
        if klass is object:
            continue
        for name, member in vars(klass).items():
            if name.startswith("_") or name in seen:
                continue
            if isinstance(member, (staticmethod, classmethod)):
                seen.add(name)
                methods.append(MethodRef(
                    name=name,
                    declaring_class=klass,
                    function=member.__func__,
                    parameter_types=None,
                    is_static=True,
                ))
            elif inspect.isfunction(member):
                seen.add(name)
                methods.append(MethodRef(
                    name=name,
                    declaring_class=klass,
                    function=member,
                    parameter_types=_parameter_types(member),
                ))
    return methods


# ---------------------------------------------------------------------------
# Wrapper
# ---------------------------------------------------------------------------


class ClassReflectionAccessWrapper:
    """Introspection view over a single class.

    Raises :class:`DiscoveryError` when *cls* is not a class or its members
    cannot be enumerated.
    """

    def __init__(self, cls: type) -> None:
        if not inspect.isclass(cls):
            raise DiscoveryError(
                f"Cannot introspect non-class {cls!r}",
                details={"target": repr(cls)},
            )
        self._cls = cls
        try:
            self._fields = visible_fields(cls)
            self._methods = public_methods(cls)
        except Exception as e:
            raise DiscoveryError(
                f"Cannot introspect {cls.__qualname__}: {e}",
                details={"target": cls.__qualname__},
            ) from e

    @property
    def target(self) -> type:
        return self._cls

    @property
    def fields(self) -> list[FieldRef]:
        return list(self._fields)

    @property
    def methods(self) -> list[MethodRef]:
        return list(self._methods)

    def can_replace(self, other: type) -> bool:
        """Return ``True`` when members of *other* apply to the wrapped class."""
        try:
            return issubclass(self._cls, other)
        except TypeError:
            return False

    def new_instance(self) -> Any:
        """Create an instance, bypassing ``__init__`` when it needs arguments."""
        try:
            return self._cls()
        except Exception as e:
            logger.debug("reflection.constructor_failed", target=self._cls.__qualname__, error=str(e))
        try:
            return self._cls.__new__(self._cls)
        except Exception as e:
            raise InstantiationError(
                f"Cannot instantiate {self._cls.__qualname__}: {e}",
                details={"target": self._cls.__qualname__},
            ) from e

    def __repr__(self) -> str:
        return f"ClassReflectionAccessWrapper({self._cls.__qualname__})"
