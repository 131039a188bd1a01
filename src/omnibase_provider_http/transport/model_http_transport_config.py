# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""HTTP Transport Configuration Model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModelHttpTransportConfig(BaseModel):
    """Configuration for the httpx-based transport.

    Attributes:
        timeout_seconds: Default request timeout when a resource sets no
            ``waitTimeout`` (default 30.0)
        max_request_size: Max request body size in bytes (default 10 MB)
        max_response_size: Max response body size in bytes (default 50 MB)
        follow_redirects: Whether redirects are followed (default True)

    Security:
        Size limits protect the provider from memory exhaustion. Exceeding a
        limit raises InfraUnavailableError with a size category instead of
        the exact size.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    timeout_seconds: float = Field(
        default=30.0,
        gt=0.0,
        le=3600.0,
        description="Default request timeout in seconds",
    )
    max_request_size: int = Field(
        default=10 * 1024 * 1024,
        gt=0,
        description="Maximum request body size in bytes",
    )
    max_response_size: int = Field(
        default=50 * 1024 * 1024,
        gt=0,
        description="Maximum response body size in bytes",
    )
    follow_redirects: bool = Field(
        default=True,
        description="Whether redirects are followed",
    )


__all__: list[str] = ["ModelHttpTransportConfig"]
