# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Secret placeholder resolution and response redaction.

Exports:
    patch_secrets_into_string / _headers / _map / _string_map: Resolve
        ``{{name:namespace:key}}`` placeholders before a request is sent
    patch_response_values_to_secrets: Move response values into secrets
        and redact them from the response
    format_placeholder / find_placeholders / parse_placeholder: Grammar
"""

from omnibase_provider_http.datapatcher.response_redactor import (
    extract_response_value,
    patch_response_values_to_secrets,
)
from omnibase_provider_http.datapatcher.secret_injector import (
    patch_secrets_into_headers,
    patch_secrets_into_map,
    patch_secrets_into_string,
    patch_secrets_into_string_map,
)
from omnibase_provider_http.datapatcher.util_placeholder import (
    PLACEHOLDER_PATTERN,
    SecretPlaceholder,
    find_placeholders,
    format_placeholder,
    parse_placeholder,
    replace_outside_placeholders,
)

__all__: list[str] = [
    "PLACEHOLDER_PATTERN",
    "SecretPlaceholder",
    "extract_response_value",
    "find_placeholders",
    "format_placeholder",
    "parse_placeholder",
    "patch_response_values_to_secrets",
    "patch_secrets_into_headers",
    "patch_secrets_into_map",
    "patch_secrets_into_string",
    "patch_secrets_into_string_map",
    "replace_outside_placeholders",
]
