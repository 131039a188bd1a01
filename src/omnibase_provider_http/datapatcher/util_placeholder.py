# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Secret placeholder grammar.

A placeholder ``{{name:namespace:key}}`` stands for the value stored at
``key`` in secret ``namespace/name``. Whitespace is allowed just inside the
braces, never inside a segment. Placeholders written by redaction always
use the canonical form without whitespace.
"""

from __future__ import annotations

import re
from typing import NamedTuple

from omnibase_provider_http.enums import EnumInfraTransportType
from omnibase_provider_http.errors import ModelInfraErrorContext, PlaceholderFormatError

PLACEHOLDER_PATTERN = re.compile(r"\{\{\s*([^:{}\s]+):([^:{}\s]+):([^:{}\s]+)\s*\}\}")

# Any brace-delimited token; used to reject near-miss placeholders.
_TOKEN_PATTERN = re.compile(r"\{\{([^{}]*)\}\}")


class SecretPlaceholder(NamedTuple):
    """A parsed placeholder and the exact text it was found as."""

    text: str
    name: str
    namespace: str
    key: str


def format_placeholder(name: str, namespace: str, key: str) -> str:
    """Return the canonical placeholder for ``namespace/name`` at ``key``."""
    return f"{{{{{name}:{namespace}:{key}}}}}"


def parse_placeholder(text: str) -> SecretPlaceholder | None:
    """Parse a single placeholder, or return None if ``text`` is not one."""
    match = PLACEHOLDER_PATTERN.fullmatch(text)
    if match is None:
        return None
    return SecretPlaceholder(text, match.group(1), match.group(2), match.group(3))


def find_placeholders(value: str) -> list[SecretPlaceholder]:
    """Return the distinct placeholders in ``value``, in order of appearance.

    Raises:
        PlaceholderFormatError: If a ``{{ ... }}`` token holds a colon but
            does not follow the ``{{name:namespace:key}}`` grammar.
    """
    for token in _TOKEN_PATTERN.finditer(value):
        if ":" in token.group(1) and PLACEHOLDER_PATTERN.fullmatch(token.group(0)) is None:
            raise PlaceholderFormatError(
                f"malformed secret placeholder {token.group(0)!r}, "
                "expected {{name:namespace:key}}",
                context=ModelInfraErrorContext(
                    transport_type=EnumInfraTransportType.SECRET_STORE,
                    operation="find_placeholders",
                ),
            )

    seen: set[str] = set()
    placeholders: list[SecretPlaceholder] = []
    for match in PLACEHOLDER_PATTERN.finditer(value):
        text = match.group(0)
        if text in seen:
            continue
        seen.add(text)
        placeholders.append(
            SecretPlaceholder(text, match.group(1), match.group(2), match.group(3))
        )
    return placeholders


def replace_outside_placeholders(text: str, old: str, new: str) -> str:
    """Replace every occurrence of ``old`` in ``text`` except inside placeholders.

    Example:
        >>> replace_outside_placeholders("v {{s:n:v}}", "v", "{{s:n:k}}")
        '{{s:n:k}} {{s:n:v}}'
    """
    if not old:
        return text

    parts: list[str] = []
    position = 0
    for match in PLACEHOLDER_PATTERN.finditer(text):
        parts.append(text[position : match.start()].replace(old, new))
        parts.append(match.group(0))
        position = match.end()
    parts.append(text[position:].replace(old, new))
    return "".join(parts)


__all__: list[str] = [
    "PLACEHOLDER_PATTERN",
    "SecretPlaceholder",
    "find_placeholders",
    "format_placeholder",
    "parse_placeholder",
    "replace_outside_placeholders",
]
