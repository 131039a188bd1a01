# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Utility functions for the HTTP provider.

Exports:
    Duration: Pydantic type for Go-style duration strings
    parse_duration / format_duration: Duration text conversion
    inflate_json_strings: Parse embedded JSON strings in a context tree
    json_string_to_map: Permissive JSON object parsing
    contains: Recursive "live body contains desired body" check
    is_http_success / is_http_error: Status code classification
    should_retry / retries_limit_reached / next_failed_count: Retry limits
"""

from omnibase_provider_http.utils.util_duration import (
    Duration,
    format_duration,
    parse_duration,
)
from omnibase_provider_http.utils.util_http_status import (
    HTTP_NOT_FOUND,
    is_http_error,
    is_http_success,
)
from omnibase_provider_http.utils.util_json import (
    contains,
    inflate_json_strings,
    json_string_to_map,
)
from omnibase_provider_http.utils.util_retry_limits import (
    next_failed_count,
    retries_limit_reached,
    should_retry,
)

__all__: list[str] = [
    "Duration",
    "HTTP_NOT_FOUND",
    "contains",
    "format_duration",
    "inflate_json_strings",
    "is_http_error",
    "is_http_success",
    "json_string_to_map",
    "next_failed_count",
    "parse_duration",
    "retries_limit_reached",
    "should_retry",
]
