"""Tests for stressgen.domain.naming."""

from stressgen.domain.members import FieldRef
from stressgen.domain.naming import (
    append_canonical_name,
    canonical_name,
    field_canonical_name,
    is_accessor_name,
    property_key,
)


class TestCanonicalName:
    def test_strips_set_prefix(self):
        assert canonical_name("setAge") == "age"

    def test_strips_add_prefix(self):
        assert canonical_name("addTag") == "tag"

    def test_snake_case_folds_underscores(self):
        assert canonical_name("set_first_name") == "firstname"
        assert canonical_name("setFirstName") == "firstname"

    def test_case_insensitive(self):
        assert canonical_name("SETAGE") == canonical_name("setage") == "age"

    def test_short_names_keep_prefix(self):
        assert canonical_name("set") == "set"
        assert canonical_name("add") == "add"

    def test_unprefixed_name_is_lowercased(self):
        assert canonical_name("Count") == "count"

    def test_prefix_match_is_textual(self):
        # "settle" is not a setter, but the rule is purely lexical
        assert canonical_name("settle") == "tle"


class TestAppendCanonicalName:
    def test_pluralises(self):
        assert append_canonical_name("add_tag") == "tags"
        assert append_canonical_name("addItem") == "items"


class TestFieldCanonicalName:
    def test_lowercases_without_prefix_stripping(self):
        assert field_canonical_name(FieldRef(name="settings", declaring_class=object)) == "settings"

    def test_private_field_folds_leading_underscore(self):
        assert field_canonical_name(FieldRef(name="_first_name", declaring_class=object)) == "firstname"

    def test_property_key_matches_field_rule(self):
        assert property_key("First_Name") == "firstname"


class TestIsAccessorName:
    def test_accessors(self):
        assert is_accessor_name("set_age")
        assert is_accessor_name("AddItem")

    def test_non_accessors(self):
        assert not is_accessor_name("get_age")
        assert not is_accessor_name("_set_age")
