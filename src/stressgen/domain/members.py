"""Reflected member references.

``FieldRef`` and ``MethodRef`` describe a class member independently of any
instance.  They know how to write a value onto a target, both the regular
way and with access checks relaxed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable


@dataclass(frozen=True)
class FieldRef:
    """A backing field declared (annotated or slotted) on a class."""

    name: str
    declaring_class: type
    type: Any = Any

    def write(self, target: Any, value: Any) -> None:
        setattr(target, self.name, value)

    def force_write(self, target: Any, value: Any) -> None:
        """Write bypassing ``__setattr__`` overrides (frozen dataclasses etc.)."""
        object.__setattr__(target, self.name, value)


@dataclass(frozen=True)
class MethodRef:
    """A method visible on a class.

    ``parameter_types`` lists the positional parameters after ``self``; it is
    ``None`` when the signature takes ``*args``/``**kwargs`` or could not be
    read.
    """

    name: str
    declaring_class: type
    function: Callable[..., Any] = field(compare=False, repr=False)
    parameter_types: tuple[Any, ...] | None = None
    is_static: bool = False

    @property
    def parameter_count(self) -> int | None:
        if self.parameter_types is None:
            return None
        return len(self.parameter_types)

    def invoke(self, target: Any, value: Any) -> None:
        getattr(target, self.name)(value)

    def force_invoke(self, target: Any, value: Any) -> None:
        """Call the function found on the declaring class directly."""
        self.function(target, value)
