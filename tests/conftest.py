# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Shared test helpers for omnibase_provider_http."""

from __future__ import annotations

import inspect


def assert_has_async_methods(
    obj: object,
    required_methods: list[str],
    *,
    protocol_name: str | None = None,
) -> None:
    """Fail unless every name in ``required_methods`` is a coroutine method of ``obj``.

    isinstance() against a runtime_checkable Protocol only checks that the
    attributes exist; this also checks that they are async.
    """
    owner = protocol_name or type(obj).__name__
    missing = [name for name in required_methods if not hasattr(obj, name)]
    assert not missing, f"{owner} lacks {', '.join(missing)}"
    not_async = [
        name
        for name in required_methods
        if not inspect.iscoroutinefunction(getattr(obj, name))
    ]
    assert not not_async, f"{owner} has non-async {', '.join(not_async)}"
