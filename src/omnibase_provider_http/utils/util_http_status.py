# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""HTTP status code classification."""

from __future__ import annotations

HTTP_NOT_FOUND: int = 404


def is_http_success(status_code: int) -> bool:
    """Return True for 2xx status codes."""
    return 200 <= status_code < 300


def is_http_error(status_code: int) -> bool:
    """Return True for 4xx and 5xx status codes."""
    return 400 <= status_code < 600


__all__: list[str] = ["HTTP_NOT_FOUND", "is_http_error", "is_http_success"]
