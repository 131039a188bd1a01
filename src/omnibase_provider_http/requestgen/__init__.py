# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Request generation: query contexts and mapping rendering."""

from omnibase_provider_http.requestgen.request_context import (
    build_request_context,
    build_response_context,
    response_to_context,
)
from omnibase_provider_http.requestgen.request_generator import (
    NULL_MARKER,
    RequestGenerator,
    body_to_query,
    is_request_valid,
    merge_headers,
)

__all__: list[str] = [
    "NULL_MARKER",
    "RequestGenerator",
    "body_to_query",
    "build_request_context",
    "build_response_context",
    "is_request_valid",
    "merge_headers",
    "response_to_context",
]
