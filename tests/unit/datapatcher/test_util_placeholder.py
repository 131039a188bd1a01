# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for the secret placeholder grammar."""

from __future__ import annotations

import pytest

from omnibase_provider_http.datapatcher import (
    SecretPlaceholder,
    find_placeholders,
    format_placeholder,
    parse_placeholder,
    replace_outside_placeholders,
)
from omnibase_provider_http.errors import PlaceholderFormatError

pytestmark = pytest.mark.unit


class TestFormatAndParse:
    """Tests for format_placeholder and parse_placeholder."""

    def test_canonical_form(self) -> None:
        assert format_placeholder("auth", "default", "token") == "{{auth:default:token}}"

    def test_parse_canonical(self) -> None:
        assert parse_placeholder("{{auth:default:token}}") == SecretPlaceholder(
            "{{auth:default:token}}", "auth", "default", "token"
        )

    def test_whitespace_inside_braces(self) -> None:
        parsed = parse_placeholder("{{ auth:default:token }}")
        assert parsed is not None
        assert (parsed.name, parsed.namespace, parsed.key) == ("auth", "default", "token")

    @pytest.mark.parametrize(
        "text",
        ["auth:default:token", "{{auth:default}}", "{{auth : default:token}}", "x{{a:b:c}}"],
    )
    def test_not_a_placeholder(self, text: str) -> None:
        assert parse_placeholder(text) is None


class TestFindPlaceholders:
    """Tests for find_placeholders."""

    def test_finds_in_order_without_duplicates(self) -> None:
        value = "{{a:ns:k1}} and {{b:ns:k2}} then {{a:ns:k1}} again"
        found = find_placeholders(value)
        assert [p.text for p in found] == ["{{a:ns:k1}}", "{{b:ns:k2}}"]

    def test_no_placeholders(self) -> None:
        assert find_placeholders("plain text with {braces}") == []

    def test_template_without_colon_is_ignored(self) -> None:
        assert find_placeholders("hello {{ name }}") == []

    @pytest.mark.parametrize(
        "value",
        ["{{auth:default}}", "{{auth::token}}", "{{a:b:c:d}}", "{{ auth:default :token}}"],
    )
    def test_malformed_placeholder_raises(self, value: str) -> None:
        with pytest.raises(PlaceholderFormatError, match="malformed secret placeholder"):
            find_placeholders(value)


class TestReplaceOutsidePlaceholders:
    """Tests for replace_outside_placeholders."""

    def test_replaces_every_occurrence(self) -> None:
        assert replace_outside_placeholders("a-x-a", "a", "b") == "b-x-b"

    def test_text_inside_placeholders_is_kept(self) -> None:
        text = '{"user": "admin", "ref": "{{admin:default:user}}"}'
        assert replace_outside_placeholders(text, "admin", "{{creds:default:user}}") == (
            '{"user": "{{creds:default:user}}", "ref": "{{admin:default:user}}"}'
        )

    def test_empty_old_is_noop(self) -> None:
        assert replace_outside_placeholders("text", "", "x") == "text"
