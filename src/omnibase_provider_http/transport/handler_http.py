# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""HTTP Transport - httpx async client.

Sends the requests rendered by the reconcilers. Any method is supported,
headers are multi-valued in both directions, and HTTP status codes are
returned to the caller rather than raised.

Limits:
    Request bodies over ``max_request_size`` are never sent. Responses are
    streamed and abandoned once they pass ``max_response_size``, or before
    reading when Content-Length already says so.

TLS verification is on by default. Resources that set
``insecureSkipTLSVerify`` get a second, unverified client, created on first
use.
"""

from __future__ import annotations

import logging
from datetime import timedelta
from uuid import UUID, uuid4

import httpx

from omnibase_provider_http.enums import EnumInfraTransportType
from omnibase_provider_http.errors import (
    InfraConnectionError,
    InfraTimeoutError,
    InfraUnavailableError,
    ModelInfraErrorContext,
    RuntimeHostError,
)
from omnibase_provider_http.models import ModelHttpResponse
from omnibase_provider_http.transport.model_http_transport_config import (
    ModelHttpTransportConfig,
)

logger = logging.getLogger(__name__)


def _decode(raw: bytes) -> str:
    # Bodies are text; latin-1 accepts any byte sequence.
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        return raw.decode("latin-1")


def _group_headers(headers: httpx.Headers) -> dict[str, list[str]]:
    """Group raw response headers by name, keeping received casing and order."""
    grouped: dict[str, list[str]] = {}
    for raw_name, raw_value in headers.raw:
        name = raw_name.decode(headers.encoding)
        grouped.setdefault(name, []).append(raw_value.decode(headers.encoding))
    return grouped


class HttpTransport:
    """HTTP transport using httpx async clients.

    Example:
        >>> transport = HttpTransport(ModelHttpTransportConfig())
        >>> await transport.initialize()
        >>> response = await transport.send("GET", "http://h/items/1", "", {})
        >>> response.status_code
        200
        >>> await transport.shutdown()
    """

    def __init__(
        self,
        config: ModelHttpTransportConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Create an uninitialized transport.

        Args:
            config: Transport configuration (defaults when None)
            transport: Optional httpx transport, e.g. httpx.MockTransport in tests
        """
        self._config = config or ModelHttpTransportConfig()
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._insecure_client: httpx.AsyncClient | None = None
        self._initialized: bool = False

    def _create_client(self, verify: bool) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=httpx.Timeout(self._config.timeout_seconds),
            follow_redirects=self._config.follow_redirects,
            verify=verify,
            transport=self._transport,
        )

    async def initialize(self) -> None:
        """Create the verifying client."""
        self._client = self._create_client(verify=True)
        self._initialized = True
        logger.info(
            "HttpTransport initialized",
            extra={
                "timeout_seconds": self._config.timeout_seconds,
                "max_request_size": self._config.max_request_size,
                "max_response_size": self._config.max_response_size,
            },
        )

    async def shutdown(self) -> None:
        """Close HTTP clients and release resources."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
        if self._insecure_client is not None:
            await self._insecure_client.aclose()
            self._insecure_client = None
        self._initialized = False
        logger.info("HttpTransport shutdown complete")

    async def __aenter__(self) -> HttpTransport:
        await self.initialize()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.shutdown()

    def _select_client(
        self, insecure_skip_tls_verify: bool, ctx: ModelInfraErrorContext
    ) -> httpx.AsyncClient:
        if not self._initialized or self._client is None:
            raise RuntimeHostError(
                "HttpTransport not initialized - call initialize() first", context=ctx
            )
        if not insecure_skip_tls_verify:
            return self._client
        if self._insecure_client is None:
            self._insecure_client = self._create_client(verify=False)
        return self._insecure_client

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
        """Send one request and return its response, whatever its status.

        Args:
            method: HTTP method (any case)
            url: Fully resolved URL
            body: Request body; empty sends no content
            headers: Multi-valued request headers
            insecure_skip_tls_verify: Use the client that skips TLS verification
            timeout: Per-request timeout (configured default when None)
            correlation_id: Correlation ID for logs and error context

        Raises:
            RuntimeHostError: If the transport is not initialized.
            InfraTimeoutError: If the request timed out.
            InfraConnectionError: If the connection failed.
            InfraUnavailableError: If a body exceeds its configured size limit.
        """
        correlation_id = correlation_id or uuid4()
        method = method.upper()
        ctx = ModelInfraErrorContext(
            transport_type=EnumInfraTransportType.HTTP,
            operation=f"http.{method.lower()}",
            target_name=url,
            correlation_id=correlation_id,
        )
        client = self._select_client(insecure_skip_tls_verify, ctx)

        content = body.encode("utf-8") if body else None
        if content is not None and len(content) > self._config.max_request_size:
            raise InfraUnavailableError(
                f"Request body size exceeds configured limit of "
                f"{self._config.max_request_size} bytes",
                context=ctx,
            )

        timeout_seconds = (
            timeout.total_seconds() if timeout is not None else self._config.timeout_seconds
        )

        try:
            async with client.stream(
                method,
                url,
                headers=[(name, value) for name, values in headers.items() for value in values],
                content=content,
                timeout=httpx.Timeout(timeout_seconds),
            ) as response:
                raw = await self._read_limited(response, ctx)
        except httpx.TimeoutException as e:
            raise InfraTimeoutError(
                f"HTTP {method} request timed out after {timeout_seconds}s",
                context=ctx,
                timeout_seconds=timeout_seconds,
            ) from e
        except httpx.ConnectError as e:
            raise InfraConnectionError(f"Failed to connect to {url}", context=ctx) from e
        except httpx.HTTPError as e:
            raise InfraConnectionError(
                f"{method} request to {url} failed: {type(e).__name__}", context=ctx
            ) from e

        logger.debug(
            "Response received",
            extra={
                "status_code": response.status_code,
                "body_bytes": len(raw),
                "correlation_id": str(correlation_id),
            },
        )
        return ModelHttpResponse(
            status_code=response.status_code,
            body=_decode(raw),
            headers=_group_headers(response.headers),
            method=method,
        )

    async def _read_limited(
        self, response: httpx.Response, ctx: ModelInfraErrorContext
    ) -> bytes:
        """Read the response body, stopping at ``max_response_size``.

        A declared Content-Length over the limit fails before anything is
        read. Bodies without one are counted while streaming.
        """
        limit = self._config.max_response_size
        declared = response.headers.get("content-length")
        if declared is not None and declared.isdigit() and int(declared) > limit:
            raise InfraUnavailableError(
                f"Response body exceeds configured limit of {limit} bytes", context=ctx
            )

        received = bytearray()
        async for chunk in response.aiter_bytes():
            received.extend(chunk)
            if len(received) > limit:
                logger.warning(
                    "Response body cut off at size limit",
                    extra={"limit": limit, "correlation_id": str(ctx.correlation_id)},
                )
                raise InfraUnavailableError(
                    f"Response body exceeds configured limit of {limit} bytes", context=ctx
                )
        return bytes(received)

__all__: list[str] = ["HttpTransport"]
