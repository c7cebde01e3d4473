"""Tests for stressgen.infrastructure.generators."""

from __future__ import annotations

import collections
import uuid
from collections.abc import Mapping, Sequence
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Annotated, Any, Literal, Optional

from stressgen.config.settings import Settings
from stressgen.infrastructure.generators import (
    ConstantValueGenerator,
    FunctionValueGenerator,
    NullValueGenerator,
    RandomValueGenerators,
)


class Color(Enum):
    RED = "red"
    GREEN = "green"


class Empty(Enum):
    pass


class Widget:
    pass


class TestSimpleGenerators:
    def test_constant(self):
        gen = ConstantValueGenerator(42)
        assert gen.generate() == 42
        assert gen.generate() == 42

    def test_function_called_each_time(self):
        calls = []
        gen = FunctionValueGenerator(lambda: calls.append(1) or len(calls))
        assert gen.generate() == 1
        assert gen.generate() == 2

    def test_null(self):
        assert NullValueGenerator().generate() is None


class TestRandomValueGenerators:
    def test_same_seed_same_values(self):
        first = RandomValueGenerators(Settings(seed=7))
        second = RandomValueGenerators(Settings(seed=7))
        a = [first(str).generate() for _ in range(5)]
        b = [second(str).generate() for _ in range(5)]
        assert a == b

    def test_primitive_types(self, lookup):
        assert isinstance(lookup(bool).generate(), bool)
        assert isinstance(lookup(float).generate(), float)
        assert isinstance(lookup(Decimal).generate(), Decimal)
        assert isinstance(lookup(bytes).generate(), bytes)
        assert isinstance(lookup(uuid.UUID).generate(), uuid.UUID)
        assert type(lookup(date).generate()) is date
        assert isinstance(lookup(datetime).generate(), datetime)

    def test_int_respects_range(self):
        lookup = RandomValueGenerators(Settings(seed=1, int_min=3, int_max=5))
        values = {lookup(int).generate() for _ in range(50)}
        assert values <= {3, 4, 5}

    def test_string_length_respects_settings(self):
        lookup = RandomValueGenerators(Settings(seed=1, string_min_length=2, string_max_length=4))
        for _ in range(20):
            assert 2 <= len(lookup(str).generate()) <= 4

    def test_any_and_object_yield_strings(self, lookup):
        assert isinstance(lookup(Any).generate(), str)
        assert isinstance(lookup(object).generate(), str)

    def test_optional_uses_inner_type(self, lookup):
        assert isinstance(lookup(Optional[int]).generate(), int)
        assert isinstance(lookup(int | None).generate(), int)

    def test_annotated_uses_inner_type(self, lookup):
        assert isinstance(lookup(Annotated[int, "meta"]).generate(), int)

    def test_literal(self, lookup):
        assert lookup(Literal["a", "b"]).generate() in ("a", "b")

    def test_enum(self, lookup):
        assert isinstance(lookup(Color).generate(), Color)

    def test_empty_enum(self, lookup):
        assert lookup(Empty).generate() is None

    def test_collections_are_fresh_and_empty(self, lookup):
        gen = lookup(list[int])
        first = gen.generate()
        second = gen.generate()
        assert first == [] and second == []
        assert first is not second

    def test_container_kinds(self, lookup):
        assert lookup(set[str]).generate() == set()
        assert isinstance(lookup(collections.deque).generate(), collections.deque)
        assert lookup(Sequence[int]).generate() == []
        assert lookup(Mapping[str, int]).generate() == {}
        assert lookup(dict[str, int]).generate() == {}

    def test_unknown_class_without_fallback(self, lookup):
        assert lookup(Widget).generate() is None

    def test_unknown_class_uses_fallback(self, settings):
        lookup = RandomValueGenerators(settings, fallback=lambda cls: ConstantValueGenerator(cls.__name__))
        assert lookup(Widget).generate() == "Widget"

    def test_fallback_may_decline(self, settings):
        lookup = RandomValueGenerators(settings, fallback=lambda cls: None)
        assert lookup(Widget).generate() is None

    def test_registered_override(self, lookup):
        lookup.register(int, ConstantValueGenerator(9))
        assert lookup(int).generate() == 9
        assert lookup(Optional[int]).generate() == 9
