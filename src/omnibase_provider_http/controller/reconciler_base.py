# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Shared plumbing of the Request and DisposableRequest reconcilers.

Both reconcilers send templated requests the same way: placeholders are
resolved immediately before sending, the plaintext request is never
stored, and every response is redacted before it reaches the status.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from uuid import UUID

from pydantic import BaseModel

from omnibase_provider_http.controller.protocol_resource_status_writer import (
    ProtocolResourceStatusWriter,
)
from omnibase_provider_http.datapatcher import (
    patch_response_values_to_secrets,
    patch_secrets_into_headers,
    patch_secrets_into_string,
)
from omnibase_provider_http.models import (
    ModelHttpResponse,
    ModelOwnerReference,
    ModelRequestDetails,
    ModelSecretInjectionConfig,
)
from omnibase_provider_http.query import ProtocolQueryEvaluator
from omnibase_provider_http.secretstore import ProtocolSecretStore
from omnibase_provider_http.transport import ProtocolHttpTransport

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(UTC)


class ReconcilerBase:
    """Collaborators and request plumbing shared by the reconcilers.

    Args:
        transport: Sends HTTP requests
        secret_store: Resolves placeholders and receives extracted values
        evaluator: Evaluates query expressions
        status_writer: Persists status after every change (optional)
        clock: Returns the current time (UTC)
    """

    def __init__(
        self,
        transport: ProtocolHttpTransport,
        secret_store: ProtocolSecretStore,
        evaluator: ProtocolQueryEvaluator,
        status_writer: ProtocolResourceStatusWriter | None = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._transport = transport
        self._secret_store = secret_store
        self._evaluator = evaluator
        self._status_writer = status_writer
        self._clock = clock

    async def _send_request(
        self,
        resource_name: str,
        details: ModelRequestDetails,
        *,
        insecure_skip_tls_verify: bool,
        timeout: timedelta | None,
        correlation_id: UUID,
    ) -> ModelHttpResponse:
        """Resolve the placeholders of ``details`` and send the request.

        Raises:
            PlaceholderFormatError, SecretResolutionError: If a placeholder
                cannot be resolved; nothing is sent.
            InfraTimeoutError, InfraConnectionError, InfraUnavailableError:
                On transport failures.
        """
        url = await patch_secrets_into_string(self._secret_store, details.url)
        body = await patch_secrets_into_string(self._secret_store, details.body)
        headers = await patch_secrets_into_headers(self._secret_store, details.headers)

        logger.info(
            "Sending %s request",
            details.method,
            extra={
                "resource": resource_name,
                "method": details.method,
                "url": details.url,
                "correlation_id": str(correlation_id),
            },
        )
        response = await self._transport.send(
            details.method,
            url,
            body,
            headers,
            insecure_skip_tls_verify=insecure_skip_tls_verify,
            timeout=timeout,
            correlation_id=correlation_id,
        )
        logger.debug(
            "Received response",
            extra={
                "resource": resource_name,
                "status_code": response.status_code,
                "correlation_id": str(correlation_id),
            },
        )
        return response

    async def _redact_response(
        self,
        response: ModelHttpResponse,
        owner: ModelOwnerReference,
        configs: list[ModelSecretInjectionConfig],
    ) -> ModelHttpResponse:
        return await patch_response_values_to_secrets(
            self._secret_store,
            self._evaluator,
            response,
            owner,
            configs,
        )

    async def _write_status(self, resource: BaseModel) -> None:
        if self._status_writer is not None:
            await self._status_writer.write_status(resource)


__all__: list[str] = ["ReconcilerBase", "utc_now"]
