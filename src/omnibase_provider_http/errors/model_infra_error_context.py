# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Structured context attached to provider errors.

Bundles the structured fields every provider error carries, so error
constructors keep a short signature while staying strongly typed.
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from omnibase_provider_http.enums import EnumInfraTransportType


class ModelInfraErrorContext(BaseModel):
    """Where a provider error happened.

    Attributes:
        transport_type: Type of infrastructure transport (HTTP, VAULT, ...)
        operation: Operation being performed (observe, create, resolve_placeholder, ...)
        target_name: Target resource, endpoint or secret name
        correlation_id: Reconcile-cycle correlation ID for tracing

    Example:
        >>> context = ModelInfraErrorContext(
        ...     transport_type=EnumInfraTransportType.HTTP,
        ...     operation="observe",
        ...     target_name="manage-user",
        ...     correlation_id=uuid4(),
        ... )
        >>> raise MappingNotFoundError("OBSERVE", context=context)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    transport_type: EnumInfraTransportType | None = Field(
        default=None,
        description="Type of infrastructure transport (HTTP, VAULT, ...)",
    )
    operation: str | None = Field(
        default=None,
        description="Operation being performed",
    )
    target_name: str | None = Field(
        default=None,
        description="Target resource, endpoint or secret name",
    )
    correlation_id: UUID | None = Field(
        default=None,
        description="Reconcile-cycle correlation ID for tracing",
    )


__all__ = ["ModelInfraErrorContext"]
