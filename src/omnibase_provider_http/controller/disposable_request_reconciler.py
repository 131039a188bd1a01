# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""DisposableRequest Reconciler.

A DisposableRequest is sent until it succeeds once. With
``shouldLoopInfinitely`` it is sent again every ``nextReconcile`` period.
It has no remote counterpart to update or delete.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timedelta
from uuid import UUID, uuid4

from omnibase_provider_http.controller.protocol_resource_status_writer import (
    ProtocolResourceStatusWriter,
)
from omnibase_provider_http.controller.reconciler_base import ReconcilerBase, utc_now
from omnibase_provider_http.enums import EnumInfraTransportType
from omnibase_provider_http.errors import (
    HttpStatusError,
    ModelInfraErrorContext,
    RuntimeHostError,
    UnexpectedResponseError,
)
from omnibase_provider_http.models import (
    ModelDisposableRequestResource,
    ModelExternalObservation,
    ModelHttpResponse,
    ModelRequestDetails,
)
from omnibase_provider_http.query import ProtocolQueryEvaluator
from omnibase_provider_http.requestgen import build_response_context
from omnibase_provider_http.secretstore import ProtocolSecretStore
from omnibase_provider_http.transport import ProtocolHttpTransport
from omnibase_provider_http.utils import (
    is_http_error,
    next_failed_count,
    retries_limit_reached,
)

logger = logging.getLogger(__name__)


class DisposableRequestReconciler(ReconcilerBase):
    """Reconciles DisposableRequest resources.

    Example:
        >>> reconciler = DisposableRequestReconciler(transport, store, evaluator)
        >>> await reconciler.reconcile(resource)
        >>> resource.status.synced
        True
    """

    def __init__(
        self,
        transport: ProtocolHttpTransport,
        secret_store: ProtocolSecretStore,
        evaluator: ProtocolQueryEvaluator,
        status_writer: ProtocolResourceStatusWriter | None = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        super().__init__(transport, secret_store, evaluator, status_writer, clock)

    def _context(
        self,
        resource: ModelDisposableRequestResource,
        operation: str,
        correlation_id: UUID,
    ) -> ModelInfraErrorContext:
        return ModelInfraErrorContext(
            transport_type=EnumInfraTransportType.HTTP,
            operation=operation,
            target_name=resource.name,
            correlation_id=correlation_id,
        )

    async def observe(
        self, resource: ModelDisposableRequestResource
    ) -> ModelExternalObservation:
        """Report whether the request still has to be sent.

        Nothing is sent here. A request that is not synced yet, or whose loop
        period has elapsed, is reported as not existing.
        """
        params = resource.for_provider
        status = resource.status

        if retries_limit_reached(status.failed, params.rollback_retries_limit):
            return ModelExternalObservation(
                resource_exists=True,
                resource_up_to_date=True,
                error=status.error or None,
            )

        if not status.synced:
            return ModelExternalObservation(resource_exists=False)

        if params.should_loop_infinitely and self._loop_period_elapsed(resource):
            logger.debug(
                "Loop period elapsed, request will be sent again",
                extra={"resource": resource.name},
            )
            return ModelExternalObservation(resource_exists=False)

        return ModelExternalObservation(resource_exists=True, resource_up_to_date=True)

    def _loop_period_elapsed(self, resource: ModelDisposableRequestResource) -> bool:
        last = resource.status.last_reconcile_time
        if last is None:
            return True
        period = resource.for_provider.next_reconcile or timedelta(0)
        return self._clock() - last >= period

    async def create(self, resource: ModelDisposableRequestResource) -> None:
        """Send the request once and check the response.

        Raises:
            HttpStatusError: If the endpoint answered with a 4xx/5xx status.
            UnexpectedResponseError: If ``expectedResponse`` evaluates to false.
            RuntimeHostError: On placeholder, query or transport failures.
        """
        correlation_id = uuid4()
        params = resource.for_provider

        if retries_limit_reached(resource.status.failed, params.rollback_retries_limit):
            logger.info(
                "Retries limit reached, not sending request",
                extra={"resource": resource.name, "failed": resource.status.failed},
            )
            return

        details = ModelRequestDetails(
            method=params.method.upper(),
            url=params.url,
            body=params.body,
            headers=params.headers,
        )

        try:
            live = await self._send_request(
                resource.name,
                details,
                insecure_skip_tls_verify=params.insecure_skip_tls_verify,
                timeout=params.wait_timeout,
                correlation_id=correlation_id,
            )
        except RuntimeHostError as e:
            await self._fail(resource, details, e, response=None)
            raise

        redacted = await self._redact_response(
            live, resource.owner_reference(), params.secret_injection_configs
        )

        try:
            if is_http_error(live.status_code):
                raise HttpStatusError(
                    live.status_code,
                    context=self._context(resource, "send", correlation_id),
                )
            if params.expected_response and not self._evaluator.evaluate_bool(
                params.expected_response, build_response_context(redacted)
            ):
                raise UnexpectedResponseError(
                    context=self._context(resource, "check_response", correlation_id),
                )
        except RuntimeHostError as e:
            await self._fail(resource, details, e, response=redacted)
            raise

        resource.status = resource.status.model_copy(
            update={
                "response": redacted,
                "request_details": details,
                "synced": True,
                "error": "",
                "last_reconcile_time": self._clock(),
            }
        )
        await self._write_status(resource)
        logger.info(
            "Disposable request succeeded",
            extra={
                "resource": resource.name,
                "status_code": live.status_code,
                "correlation_id": str(correlation_id),
            },
        )

    async def _fail(
        self,
        resource: ModelDisposableRequestResource,
        details: ModelRequestDetails,
        error: RuntimeHostError,
        response: ModelHttpResponse | None,
    ) -> None:
        status = resource.status
        update: dict[str, object] = {
            "error": error.message,
            "failed": next_failed_count(
                status.failed, resource.for_provider.rollback_retries_limit
            ),
            "synced": False,
            "request_details": details,
        }
        if response is not None:
            update["response"] = response
        resource.status = status.model_copy(update=update)
        await self._write_status(resource)
        logger.warning(
            "Disposable request failed: %s",
            error.message,
            extra={"resource": resource.name, "failed": update["failed"]},
        )

    async def update(self, resource: ModelDisposableRequestResource) -> None:
        """No-op: a disposable request is immutable."""

    async def delete(self, resource: ModelDisposableRequestResource) -> bool:
        """No-op: there is no remote object to remove, so nothing is sent."""
        return False

    async def reconcile(
        self, resource: ModelDisposableRequestResource
    ) -> ModelExternalObservation:
        observation = await self.observe(resource)
        if not observation.resource_exists:
            await self.create(resource)
        return observation


__all__: list[str] = ["DisposableRequestReconciler"]
