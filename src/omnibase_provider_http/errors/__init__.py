# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""HTTP Provider Errors Module.

Exports:
    ModelInfraErrorContext: Configuration model for bundled error context
    RuntimeHostError: Base provider error class
    ProtocolConfigurationError: Configuration errors (fatal for the cycle)
    MappingNotFoundError: No mapping declared for the attempted action
    PlaceholderFormatError: Malformed secret placeholder
    ResourceNotFoundError: Remote resource does not exist (signal)
    InvalidRequestError: Mapping rendered an incomplete request (signal)
    QueryEvaluationError: Query expression failed
    HttpStatusError: Remote endpoint answered 4xx/5xx
    UnexpectedResponseError: Response did not satisfy the expected-response check
    SecretResolutionError: Referenced secret key is absent
    SecretNotFoundError: Referenced secret is absent
    InfraConnectionError: Connection failures
    InfraTimeoutError: Timeouts
    InfraAuthenticationError: Rejected secret store credentials
    InfraUnavailableError: Unavailable resources and exceeded limits
    SecretConflictError: Stale secret update (retryable)

Error Sanitization Guidelines:
    NEVER include secret values, resolved header values, or resolved request
    bodies in error messages or context. Secret names, namespaces and keys,
    URLs as declared (templated), status codes and operation names are safe.
"""

from omnibase_provider_http.errors.infra_errors import (
    HttpStatusError,
    InfraAuthenticationError,
    InfraConnectionError,
    InfraTimeoutError,
    InfraUnavailableError,
    InvalidRequestError,
    MappingNotFoundError,
    PlaceholderFormatError,
    ProtocolConfigurationError,
    QueryEvaluationError,
    ResourceNotFoundError,
    RuntimeHostError,
    SecretConflictError,
    SecretNotFoundError,
    SecretResolutionError,
    UnexpectedResponseError,
)
from omnibase_provider_http.errors.model_infra_error_context import (
    ModelInfraErrorContext,
)

__all__: list[str] = [
    "ModelInfraErrorContext",
    "RuntimeHostError",
    "ProtocolConfigurationError",
    "MappingNotFoundError",
    "PlaceholderFormatError",
    "ResourceNotFoundError",
    "InvalidRequestError",
    "QueryEvaluationError",
    "HttpStatusError",
    "UnexpectedResponseError",
    "SecretResolutionError",
    "SecretNotFoundError",
    "InfraConnectionError",
    "InfraTimeoutError",
    "InfraAuthenticationError",
    "InfraUnavailableError",
    "SecretConflictError",
]
