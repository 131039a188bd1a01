# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Retry limit bookkeeping.

A resource with ``rollbackRetriesLimit`` set counts its failed attempts.
Once the count reaches the limit the provider stops trying to fix drift, so
a permanently failing endpoint does not get hammered forever.
"""

from __future__ import annotations



def should_retry(retries_limit: int | None, failed: int) -> bool:
    """Return True when a limit is configured and an attempt has failed."""
    return retries_limit is not None and failed != 0


def retries_limit_reached(failed: int, retries_limit: int | None) -> bool:
    """Return True when a limit is configured and ``failed`` has reached it."""
    return retries_limit is not None and failed >= retries_limit


def next_failed_count(failed: int, retries_limit: int | None) -> int:
    """Failed count after one more failed attempt.

    The count only grows when a limit is configured.
    """
    if retries_limit is None:
        return failed
    return failed + 1


__all__: list[str] = ["next_failed_count", "retries_limit_reached", "should_retry"]
