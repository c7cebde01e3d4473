"""Value generators.

``RandomValueGenerators`` is the default generator lookup: it maps a
declared type to a ``ValueGenerator`` producing random values of that type.
Dispatch is by exact class first, then by kind (enums, containers), then to
an optional fallback for arbitrary classes.
"""

from __future__ import annotations

import collections.abc
import inspect
import random
import string
import types
import typing
import uuid
from datetime import date, datetime, time, timedelta, timezone
from decimal import Decimal
from enum import Enum
from typing import Any, Callable, Generic, Literal, TypeVar, Union, get_args, get_origin

from stressgen.config.settings import Settings
from stressgen.domain.ports import ValueGenerator
from stressgen.infrastructure.reflection import is_collection_type, runtime_class

T = TypeVar("T")

_ALPHABET = string.ascii_letters + string.digits


class ConstantValueGenerator(Generic[T]):
    """Always returns the same value."""

    def __init__(self, value: T) -> None:
        self._value = value

    def generate(self) -> T:
        return self._value

    def __repr__(self) -> str:
        return f"ConstantValueGenerator({self._value!r})"


class FunctionValueGenerator(Generic[T]):
    """Calls a zero-argument factory for every value."""

    def __init__(self, factory: Callable[[], T]) -> None:
        self._factory = factory

    def generate(self) -> T:
        return self._factory()


class NullValueGenerator:
    """Generator for types nothing else knows how to build."""

    def generate(self) -> None:
        return None


class RandomValueGenerators:
    """Default generator lookup backed by a seeded :class:`random.Random`.

    Call the instance with a declared type to get a generator for it.
    *fallback* receives plain classes no built-in rule covers (typically
    nested objects) and may return ``None`` to decline.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        rng: random.Random | None = None,
        fallback: Callable[[type], ValueGenerator[Any] | None] | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self.rng = rng or random.Random(self.settings.seed)
        self.fallback = fallback
        self._overrides: dict[type, ValueGenerator[Any]] = {}
        self._generators: dict[type, Callable[[], Any]] = {
            bool: self._generate_bool,
            int: self._generate_int,
            float: self._generate_float,
            Decimal: self._generate_decimal,
            str: self._generate_str,
            bytes: self._generate_bytes,
            date: self._generate_date,
            datetime: self._generate_datetime,
            time: self._generate_time,
            timedelta: self._generate_timedelta,
            uuid.UUID: self._generate_uuid,
            object: self._generate_str,
        }

    def register(self, cls: type, generator: ValueGenerator[Any]) -> None:
        """Use *generator* for every property declared as *cls*."""
        self._overrides[cls] = generator

    def __call__(self, declared_type: Any) -> ValueGenerator[Any]:
        if declared_type is Any:
            return FunctionValueGenerator(self._generate_str)

        origin = get_origin(declared_type)
        if origin is typing.Annotated:
            return self(get_args(declared_type)[0])
        if origin is Literal:
            choices = get_args(declared_type)
            return FunctionValueGenerator(lambda: self.rng.choice(choices))
        if origin is Union or origin is types.UnionType:
            members = [a for a in get_args(declared_type) if a is not type(None)]
            return self(members[0]) if members else NullValueGenerator()

        cls = runtime_class(declared_type)
        if cls is None:
            return NullValueGenerator()
        if cls in self._overrides:
            return self._overrides[cls]
        if cls in self._generators:
            return FunctionValueGenerator(self._generators[cls])
        if issubclass(cls, Enum):
            members = list(cls)
            if not members:
                return NullValueGenerator()
            return FunctionValueGenerator(lambda: self.rng.choice(members))
        if is_collection_type(cls) or issubclass(cls, collections.abc.Mapping):
            return FunctionValueGenerator(lambda: _empty_container(cls))
        if self.fallback is not None:
            generator = self.fallback(cls)
            if generator is not None:
                return generator
        return NullValueGenerator()

    # -- Primitives ---------------------------------------------------------

    def _generate_bool(self) -> bool:
        return self.rng.random() < 0.5

    def _generate_int(self) -> int:
        return self.rng.randint(self.settings.int_min, self.settings.int_max)

    def _generate_float(self) -> float:
        return self.rng.uniform(self.settings.int_min, self.settings.int_max)

    def _generate_decimal(self) -> Decimal:
        return Decimal(self.rng.randint(self.settings.int_min * 100, self.settings.int_max * 100)) / 100

    def _generate_str(self) -> str:
        length = self.rng.randint(self.settings.string_min_length, self.settings.string_max_length)
        return "".join(self.rng.choices(_ALPHABET, k=length))

    def _generate_bytes(self) -> bytes:
        length = self.rng.randint(self.settings.string_min_length, self.settings.string_max_length)
        return bytes(self.rng.getrandbits(8) for _ in range(length))

    def _generate_datetime(self) -> datetime:
        seconds = self.rng.randint(0, 60 * 365 * 24 * 3600)
        return datetime(1970, 1, 1, tzinfo=timezone.utc) + timedelta(seconds=seconds)

    def _generate_date(self) -> date:
        return self._generate_datetime().date()

    def _generate_time(self) -> time:
        return time(self.rng.randint(0, 23), self.rng.randint(0, 59), self.rng.randint(0, 59))

    def _generate_timedelta(self) -> timedelta:
        return timedelta(seconds=self.rng.randint(0, 30 * 24 * 3600))

    def _generate_uuid(self) -> uuid.UUID:
        return uuid.UUID(int=self.rng.getrandbits(128), version=4)


def _empty_container(cls: type) -> Any:
    """Return a fresh empty instance of a container class.

    Abstract container types map to the closest builtin.
    """
    if inspect.isabstract(cls) or cls.__module__ in ("collections.abc", "typing"):
        if issubclass(cls, collections.abc.Mapping):
            return {}
        if issubclass(cls, collections.abc.Set):
            return set()
        return []
    return cls()
