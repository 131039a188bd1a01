# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Provider Error Classes.

All error classes extend ModelOnexError (from omnibase_core) so callers can
classify failures by type and error code without inspecting messages.

Error Hierarchy:
    ModelOnexError (from omnibase_core)
    └── RuntimeHostError (base provider error)
        ├── ProtocolConfigurationError
        │   ├── MappingNotFoundError
        │   └── PlaceholderFormatError
        ├── ResourceNotFoundError
        ├── InvalidRequestError
        ├── QueryEvaluationError
        ├── HttpStatusError
        ├── UnexpectedResponseError
        ├── SecretResolutionError
        │   └── SecretNotFoundError
        ├── InfraConnectionError
        ├── InfraTimeoutError
        ├── InfraAuthenticationError
        └── InfraUnavailableError
            └── SecretConflictError

Only ResourceNotFoundError and InvalidRequestError are used as signals by
the reconcilers; every other error is propagated to the caller.
"""


from omnibase_core.enums.enum_core_error_code import EnumCoreErrorCode
from omnibase_core.models.errors.model_onex_error import ModelOnexError

from omnibase_provider_http.errors.model_infra_error_context import (
    ModelInfraErrorContext,
)


class RuntimeHostError(ModelOnexError):
    """Base error class for provider errors.

    Structured Fields (via ModelInfraErrorContext):
        transport_type: Type of transport (http, vault, runtime, ...)
        operation: Operation being performed
        correlation_id: Reconcile-cycle correlation ID
        target_name: Target resource/endpoint name

    Example:
        >>> context = ModelInfraErrorContext(
        ...     transport_type=EnumInfraTransportType.HTTP,
        ...     operation="create",
        ...     target_name="manage-user",
        ... )
        >>> raise RuntimeHostError("Operation failed", context=context)
    """

    def __init__(
        self,
        message: str,
        error_code: EnumCoreErrorCode | None = None,
        context: ModelInfraErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        """Initialize RuntimeHostError with structured fields.

        Args:
            message: Human-readable error message (never a secret value)
            error_code: Error code (defaults to OPERATION_FAILED)
            context: Bundled infrastructure context
            **extra_context: Additional context information
        """
        structured_context: dict[str, object] = dict(extra_context)

        correlation_id = None
        if context is not None:
            if context.transport_type is not None:
                structured_context["transport_type"] = context.transport_type
            if context.operation is not None:
                structured_context["operation"] = context.operation
            if context.target_name is not None:
                structured_context["target_name"] = context.target_name
            correlation_id = context.correlation_id

        super().__init__(
            message=message,
            error_code=error_code or EnumCoreErrorCode.OPERATION_FAILED,
            correlation_id=correlation_id,
            **structured_context,
        )


class ProtocolConfigurationError(RuntimeHostError):
    """Raised when the declared configuration cannot be used.

    Fatal for the current reconcile cycle; the next scheduled cycle tries
    again with whatever configuration is current then.
    """

    def __init__(
        self,
        message: str,
        context: ModelInfraErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumCoreErrorCode.INVALID_CONFIGURATION,
            context=context,
            **extra_context,
        )


class MappingNotFoundError(ProtocolConfigurationError):
    """Raised when a Request has no mapping for the attempted action.

    Example:
        >>> raise MappingNotFoundError("UPDATE", context=context)
    """

    def __init__(
        self,
        action: str,
        context: ModelInfraErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        self.action = action
        super().__init__(
            f"{action} mapping doesn't exist in request",
            context=context,
            action=action,
            **extra_context,
        )


class PlaceholderFormatError(ProtocolConfigurationError):
    """Raised when a ``{{ ... }}`` token looks like a secret placeholder but
    does not follow the ``{{name:namespace:key}}`` grammar."""


class ResourceNotFoundError(RuntimeHostError):
    """Signals that the remote resource does not exist (yet).

    Raised by the read path and translated by the reconciler into an
    observation with ``resource_exists=False``.
    """

    def __init__(
        self,
        message: str = "object wasn't created",
        context: ModelInfraErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumCoreErrorCode.RESOURCE_NOT_FOUND,
            context=context,
            **extra_context,
        )


class InvalidRequestError(RuntimeHostError):
    """Raised when a mapping renders to an incomplete request.

    An incomplete request has an empty URL or still carries the ``null``
    marker of a field that was absent from the context.
    """

    def __init__(
        self,
        message: str,
        context: ModelInfraErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumCoreErrorCode.VALIDATION_FAILED,
            context=context,
            **extra_context,
        )


class QueryEvaluationError(RuntimeHostError):
    """Raised when a query expression fails to compile or evaluate."""

    def __init__(
        self,
        message: str,
        context: ModelInfraErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumCoreErrorCode.INVALID_INPUT,
            context=context,
            **extra_context,
        )


class HttpStatusError(RuntimeHostError):
    """Raised when the remote endpoint answers with a 4xx/5xx status.

    The response itself is already recorded in the resource status when this
    error is raised.
    """

    def __init__(
        self,
        status_code: int,
        context: ModelInfraErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        self.status_code = status_code
        super().__init__(
            f"HTTP request failed with status code: {status_code}",
            error_code=EnumCoreErrorCode.OPERATION_FAILED,
            context=context,
            status_code=status_code,
            **extra_context,
        )


class UnexpectedResponseError(RuntimeHostError):
    """Raised when a response does not satisfy the expected-response expression."""

    def __init__(
        self,
        message: str = "response does not match the expected response",
        context: ModelInfraErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumCoreErrorCode.VALIDATION_FAILED,
            context=context,
            **extra_context,
        )


class SecretResolutionError(RuntimeHostError):
    """Raised when a referenced secret value cannot be resolved.

    Example:
        >>> raise SecretResolutionError(
        ...     "Key not found in secret",
        ...     context=context,
        ...     secret_key="token",
        ... )
    """

    def __init__(
        self,
        message: str,
        context: ModelInfraErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumCoreErrorCode.RESOURCE_NOT_FOUND,
            context=context,
            **extra_context,
        )


class SecretNotFoundError(SecretResolutionError):
    """Raised when the referenced secret entity does not exist."""


class InfraConnectionError(RuntimeHostError):
    """Raised when a connection to the endpoint or secret store fails."""

    def __init__(
        self,
        message: str,
        context: ModelInfraErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumCoreErrorCode.NETWORK_ERROR,
            context=context,
            **extra_context,
        )


class InfraTimeoutError(RuntimeHostError):
    """Raised when an HTTP call or secret store call exceeds its timeout.

    Example:
        >>> raise InfraTimeoutError(
        ...     "HTTP GET request timed out",
        ...     context=context,
        ...     timeout_seconds=30,
        ... )
    """

    def __init__(
        self,
        message: str,
        context: ModelInfraErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumCoreErrorCode.TIMEOUT_ERROR,
            context=context,
            **extra_context,
        )


class InfraAuthenticationError(RuntimeHostError):
    """Raised when the secret store rejects the provider's credentials.

    Example:
        >>> raise InfraAuthenticationError(
        ...     "Vault operation forbidden - check token permissions",
        ...     context=context,
        ... )
    """

    def __init__(
        self,
        message: str,
        context: ModelInfraErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumCoreErrorCode.AUTHENTICATION_ERROR,
            context=context,
            **extra_context,
        )


class InfraUnavailableError(RuntimeHostError):
    """Raised when a resource is unavailable or a limit is exceeded."""

    def __init__(
        self,
        message: str,
        context: ModelInfraErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumCoreErrorCode.SERVICE_UNAVAILABLE,
            context=context,
            **extra_context,
        )


class SecretConflictError(InfraUnavailableError):
    """Raised when a secret update is rejected because it was based on a
    stale version. Retryable on the next reconcile cycle."""


__all__ = [
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
