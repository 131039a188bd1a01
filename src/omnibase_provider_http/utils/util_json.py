# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""JSON helpers for building query contexts and comparing bodies.

Query contexts are plain ``dict``/``list``/scalar trees. Response bodies and
payload bodies arrive as JSON text; inflating them lets expressions address
nested fields (``.response.body.id``) without the author decoding anything.
"""

from __future__ import annotations

import json
import logging

logger = logging.getLogger(__name__)


def _parse_container(value: str) -> dict[str, object] | list[object] | None:
    """Parse ``value`` if it is JSON text of an object or an array."""
    text = value.strip()
    if not text or text[0] not in "{[":
        return None
    try:
        parsed = json.loads(text)
    except ValueError:
        return None
    if isinstance(parsed, (dict, list)):
        return parsed
    return None


def inflate_json_strings(value: object) -> object:
    """Return a copy of ``value`` with embedded JSON strings parsed.

    Every string that parses as a JSON object or array is replaced by the
    parsed structure, recursively. Scalar-looking strings such as ``"30"``
    or ``"true"`` stay strings. The input is never mutated, and inflating
    an already inflated value returns an equal value.

    Args:
        value: A JSON-like tree.

    Returns:
        A new JSON-like tree.

    Example:
        >>> inflate_json_strings({"body": '{"id": 7, "tags": "[1, 2]"}'})
        {'body': {'id': 7, 'tags': [1, 2]}}
    """
    if isinstance(value, dict):
        return {key: inflate_json_strings(item) for key, item in value.items()}
    if isinstance(value, list):
        return [inflate_json_strings(item) for item in value]
    if isinstance(value, str):
        parsed = _parse_container(value)
        if parsed is not None:
            return inflate_json_strings(parsed)
    return value


def json_string_to_map(value: str) -> dict[str, object]:
    """Parse a JSON object, treating anything else as an empty mapping.

    Bodies that are empty, malformed, or not objects compare as ``{}``; the
    up-to-date check relies on this permissive reading.
    """
    try:
        parsed = json.loads(value)
    except ValueError:
        logger.debug("Body is not valid JSON, treating it as empty")
        return {}
    if not isinstance(parsed, dict):
        return {}
    return parsed


def contains(container: object, subset: object) -> bool:
    """Return True if ``container`` holds every field of ``subset``.

    Mappings are compared key by key, recursing into nested mappings; keys
    present only in ``container`` are ignored. Any other values must be
    equal.

    Example:
        >>> contains({"a": 1, "b": 2}, {"a": 1})
        True
        >>> contains({"a": 1, "b": 2}, {"a": 2})
        False
    """
    if isinstance(subset, dict):
        if not isinstance(container, dict):
            return False
        for key, expected in subset.items():
            if key not in container:
                return False
            if not contains(container[key], expected):
                return False
        return True
    return bool(container == subset)


__all__: list[str] = ["contains", "inflate_json_strings", "json_string_to_map"]
