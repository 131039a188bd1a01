# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocol for HTTP Transports.

The reconcilers send every request through this interface. Transports
report HTTP status codes as data: a 404 or 500 is a response, not an
exception. Only transport-level failures (timeouts, connection errors,
size limits) raise.
"""

from __future__ import annotations

from datetime import timedelta
from typing import TYPE_CHECKING, Protocol, runtime_checkable
from uuid import UUID

if TYPE_CHECKING:
    from omnibase_provider_http.models import ModelHttpResponse


@runtime_checkable
class ProtocolHttpTransport(Protocol):
    """Sends one HTTP request and returns its response."""

    async def send(
        self,
        method: str,
        url: str,
        body: str,
        headers: dict[str, list[str]],
        *,
        insecure_skip_tls_verify: bool = False,
        timeout: timedelta | None = None,
        correlation_id: UUID | None = None,
    ) -> ModelHttpResponse:
        """Send a request.

        Args:
            method: HTTP method
            url: Request URL
            body: Request body text; empty for no body
            headers: Multi-valued request headers
            insecure_skip_tls_verify: Skip TLS certificate verification
            timeout: Request timeout; the transport default when None
            correlation_id: Correlation ID for tracing

        Returns:
            The response, whatever its status code.

        Raises:
            InfraTimeoutError: If the request timed out.
            InfraConnectionError: If the request could not be completed.
            InfraUnavailableError: If a size limit was exceeded.
        """
        ...


__all__: list[str] = ["ProtocolHttpTransport"]
