# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for JSON inflation, permissive parsing and the contains check."""

from __future__ import annotations

import copy

import pytest

from omnibase_provider_http.utils import (
    contains,
    inflate_json_strings,
    json_string_to_map,
)

pytestmark = pytest.mark.unit


class TestInflateJsonStrings:
    """Tests for inflate_json_strings."""

    def test_inflates_nested_object_strings(self) -> None:
        value = {"body": '{"id": 7, "tags": "[1, 2]"}'}
        assert inflate_json_strings(value) == {"body": {"id": 7, "tags": [1, 2]}}

    def test_scalar_strings_stay_strings(self) -> None:
        """Strings holding JSON scalars are not converted."""
        value = {"a": "30", "b": "true", "c": "null", "d": '"quoted"'}
        assert inflate_json_strings(value) == value

    def test_malformed_json_stays_text(self) -> None:
        value = {"body": "{not json"}
        assert inflate_json_strings(value) == value

    def test_inflates_inside_lists(self) -> None:
        value = ['{"a": 1}', "plain"]
        assert inflate_json_strings(value) == [{"a": 1}, "plain"]

    def test_input_is_not_mutated(self) -> None:
        value = {"body": '{"id": 1}', "items": ['{"x": 2}']}
        original = copy.deepcopy(value)
        inflate_json_strings(value)
        assert value == original

    def test_is_idempotent(self) -> None:
        value = {"body": '{"nested": "{\\"deep\\": [1]}"}'}
        once = inflate_json_strings(value)
        assert inflate_json_strings(once) == once
        assert once == {"body": {"nested": {"deep": [1]}}}


class TestJsonStringToMap:
    """Tests for json_string_to_map."""

    def test_parses_objects(self) -> None:
        assert json_string_to_map('{"a": {"b": 1}}') == {"a": {"b": 1}}

    @pytest.mark.parametrize("text", ["", "not json", "[1, 2]", "42", "null"])
    def test_anything_else_is_empty(self, text: str) -> None:
        assert json_string_to_map(text) == {}


class TestContains:
    """Tests for the structural contains check."""

    def test_extra_keys_in_container_are_ignored(self) -> None:
        assert contains({"id": 1, "name": "x", "extra": True}, {"name": "x"})

    def test_missing_key_fails(self) -> None:
        assert not contains({"id": 1}, {"name": "x"})

    def test_different_value_fails(self) -> None:
        assert not contains({"name": "y"}, {"name": "x"})

    def test_nested_mappings_recurse(self) -> None:
        container = {"user": {"name": "x", "email": "e", "id": 3}}
        assert contains(container, {"user": {"name": "x"}})
        assert not contains(container, {"user": {"name": "z"}})

    def test_lists_compare_by_equality(self) -> None:
        assert contains({"tags": [1, 2]}, {"tags": [1, 2]})
        assert not contains({"tags": [1, 2, 3]}, {"tags": [1, 2]})

    def test_empty_subset_is_contained(self) -> None:
        assert contains({}, {})
        assert contains({"a": 1}, {})

    def test_mapping_against_scalar_fails(self) -> None:
        assert not contains("text", {"a": 1})
