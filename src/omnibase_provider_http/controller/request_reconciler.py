# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Request Reconciler.

Drives the lifecycle of a Request: observe the remote resource, then create,
update or remove it through the mapping declared for each action.

Observe:
    - No stored response, or the stored response is an error answer to the
      create request: the resource does not exist yet.
    - Otherwise the OBSERVE request is sent. A 404 means the resource does
      not exist. Any other response is redacted and stored; a 4xx/5xx
      answer is not an error, it only makes the resource out of date.
    - Up-to-date: with a CUSTOM check, its ``logic`` expression decides.
      Otherwise the UPDATE mapping is rendered (live response first, cache
      second) and the live body must contain every field of the rendered
      body, with a 2xx status.
    - Retry gating: while fewer than ``rollbackRetriesLimit`` failures are
      recorded, a resource whose last attempt failed is reported out of
      date so the attempt is repeated. Once the limit is reached it is
      reported up to date and the stored error is still surfaced.

Create / Update / Delete:
    - The action's mapping is required. Nothing is sent once the retry
      limit is reached.
    - A failed attempt (placeholder resolution, transport error, 4xx/5xx)
      records its error, counts against the limit, and is raised.
    - A successful attempt clears the error. The response is cached when
      the mapping renders a valid request from it.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from uuid import UUID, uuid4

from omnibase_provider_http.controller.protocol_resource_status_writer import (
    ProtocolResourceStatusWriter,
)
from omnibase_provider_http.controller.reconciler_base import ReconcilerBase, utc_now
from omnibase_provider_http.datapatcher import patch_secrets_into_string
from omnibase_provider_http.enums import (
    EnumExpectedResponseCheckType,
    EnumInfraTransportType,
    EnumRequestAction,
)
from omnibase_provider_http.errors import (
    HttpStatusError,
    InvalidRequestError,
    MappingNotFoundError,
    ModelInfraErrorContext,
    QueryEvaluationError,
    ResourceNotFoundError,
    RuntimeHostError,
)
from omnibase_provider_http.models import (
    ModelExternalObservation,
    ModelHttpResponse,
    ModelRequestDetails,
    ModelRequestMapping,
    ModelRequestResource,
    ModelResponseCache,
)
from omnibase_provider_http.query import ProtocolQueryEvaluator
from omnibase_provider_http.requestgen import (
    RequestGenerator,
    build_request_context,
    is_request_valid,
)
from omnibase_provider_http.secretstore import ProtocolSecretStore
from omnibase_provider_http.transport import ProtocolHttpTransport
from omnibase_provider_http.utils import (
    HTTP_NOT_FOUND,
    contains,
    is_http_error,
    is_http_success,
    json_string_to_map,
    next_failed_count,
    retries_limit_reached,
    should_retry,
)

logger = logging.getLogger(__name__)


class RequestReconciler(ReconcilerBase):
    """Reconciles Request resources against their remote HTTP resource.

    Example:
        >>> reconciler = RequestReconciler(transport, store, QueryEvaluatorJq())
        >>> observation = await reconciler.observe(resource)
        >>> if not observation.resource_exists:
        ...     await reconciler.create(resource)
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
        self._generator = RequestGenerator(evaluator)

    def _context(
        self,
        resource: ModelRequestResource,
        operation: str,
        correlation_id: UUID,
    ) -> ModelInfraErrorContext:
        return ModelInfraErrorContext(
            transport_type=EnumInfraTransportType.HTTP,
            operation=operation,
            target_name=resource.name,
            correlation_id=correlation_id,
        )

    def _require_mapping(
        self,
        resource: ModelRequestResource,
        action: EnumRequestAction,
        correlation_id: UUID,
    ) -> ModelRequestMapping:
        mapping = resource.for_provider.get_mapping(action)
        if mapping is None:
            raise MappingNotFoundError(
                action.value,
                context=self._context(resource, action.value.lower(), correlation_id),
            )
        return mapping

    @staticmethod
    def _cached_response(resource: ModelRequestResource) -> ModelHttpResponse | None:
        cache = resource.status.cache
        return cache.response if cache is not None else None

    # -------------------------------------------------------------------------
    # Observe
    # -------------------------------------------------------------------------

    async def observe(self, resource: ModelRequestResource) -> ModelExternalObservation:
        """Observe the remote resource.

        Returns:
            Whether the resource exists and whether it is up to date.

        Raises:
            MappingNotFoundError: If the OBSERVE or UPDATE mapping is missing.
            RuntimeHostError: On rendering, secret or transport failures.
        """
        correlation_id = uuid4()
        try:
            synced = await self._is_up_to_date(resource, correlation_id)
        except ResourceNotFoundError:
            logger.info(
                "Remote resource does not exist",
                extra={"resource": resource.name, "correlation_id": str(correlation_id)},
            )
            return ModelExternalObservation(resource_exists=False)

        status = resource.status
        limit = resource.for_provider.rollback_retries_limit
        if retries_limit_reached(status.failed, limit):
            up_to_date = True
        elif should_retry(limit, status.failed) and status.error:
            up_to_date = False
        else:
            up_to_date = synced

        return ModelExternalObservation(
            resource_exists=True,
            resource_up_to_date=up_to_date,
            error=status.error or None,
        )

    def _is_created(self, resource: ModelRequestResource) -> bool:
        response = resource.status.response
        if response is None:
            return False
        create_mapping = resource.for_provider.get_mapping(EnumRequestAction.CREATE)
        create_method = (
            create_mapping.resolved_method
            if create_mapping is not None
            else EnumRequestAction.CREATE.default_method
        )
        return not (response.method == create_method and is_http_error(response.status_code))

    async def _is_up_to_date(
        self,
        resource: ModelRequestResource,
        correlation_id: UUID,
    ) -> bool:
        if not self._is_created(resource):
            raise ResourceNotFoundError(
                context=self._context(resource, "observe", correlation_id),
            )

        params = resource.for_provider
        mapping = self._require_mapping(resource, EnumRequestAction.OBSERVE, correlation_id)
        details = self._generator.generate_valid_request_details(
            mapping,
            params,
            resource.status.response,
            self._cached_response(resource),
        )

        live = await self._send_request(
            resource.name,
            details,
            insecure_skip_tls_verify=params.insecure_skip_tls_verify,
            timeout=params.wait_timeout,
            correlation_id=correlation_id,
        )
        if live.status_code == HTTP_NOT_FOUND:
            raise ResourceNotFoundError(
                context=self._context(resource, "observe", correlation_id),
            )

        redacted = await self._redact_response(
            live, resource.owner_reference(), params.secret_injection_configs
        )
        self._record_response(resource, mapping, details, redacted)
        await self._write_status(resource)

        check = params.expected_response_check
        if check is not None and check.type == EnumExpectedResponseCheckType.CUSTOM:
            context = build_request_context(params, redacted)
            return self._evaluator.evaluate_bool(check.logic, context)

        if not is_http_success(live.status_code):
            return False
        desired_body = await self._desired_body(resource, correlation_id)
        return contains(
            json_string_to_map(live.body),
            json_string_to_map(desired_body),
        )

    async def _desired_body(
        self,
        resource: ModelRequestResource,
        correlation_id: UUID,
    ) -> str:
        mapping = self._require_mapping(resource, EnumRequestAction.UPDATE, correlation_id)
        details = self._generator.generate_valid_request_details(
            mapping,
            resource.for_provider,
            resource.status.response,
            self._cached_response(resource),
        )
        return await patch_secrets_into_string(self._secret_store, details.body)

    # -------------------------------------------------------------------------
    # Create / Update / Delete
    # -------------------------------------------------------------------------

    async def create(self, resource: ModelRequestResource) -> None:
        """Send the CREATE request."""
        await self._deploy_action(resource, EnumRequestAction.CREATE)

    async def update(self, resource: ModelRequestResource) -> None:
        """Send the UPDATE request."""
        await self._deploy_action(resource, EnumRequestAction.UPDATE)

    async def delete(self, resource: ModelRequestResource) -> bool:
        """Send the REMOVE request.

        Returns:
            False when the retries limit held the request back, True once a
            successful REMOVE was sent.
        """
        return await self._deploy_action(resource, EnumRequestAction.REMOVE)

    async def _deploy_action(
        self,
        resource: ModelRequestResource,
        action: EnumRequestAction,
    ) -> bool:
        correlation_id = uuid4()
        params = resource.for_provider
        mapping = self._require_mapping(resource, action, correlation_id)

        if retries_limit_reached(resource.status.failed, params.rollback_retries_limit):
            logger.info(
                "Retries limit reached, not sending %s request",
                action.value,
                extra={
                    "resource": resource.name,
                    "failed": resource.status.failed,
                    "correlation_id": str(correlation_id),
                },
            )
            return False

        details = self._generator.generate_valid_request_details(
            mapping,
            params,
            resource.status.response,
            self._cached_response(resource),
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
            self._record_failure(resource, details, e.message, response=None)
            await self._write_status(resource)
            raise

        redacted = await self._redact_response(
            live, resource.owner_reference(), params.secret_injection_configs
        )

        if is_http_error(live.status_code):
            error = HttpStatusError(
                live.status_code,
                context=self._context(resource, action.value.lower(), correlation_id),
            )
            self._record_failure(resource, details, error.message, response=redacted)
            await self._write_status(resource)
            raise error

        self._record_response(resource, mapping, details, redacted)
        resource.status = resource.status.model_copy(update={"error": ""})
        await self._write_status(resource)
        logger.info(
            "%s request succeeded",
            action.value,
            extra={
                "resource": resource.name,
                "status_code": live.status_code,
                "correlation_id": str(correlation_id),
            },
        )
        return True

    # -------------------------------------------------------------------------
    # Status bookkeeping
    # -------------------------------------------------------------------------

    def _should_set_cache(
        self,
        resource: ModelRequestResource,
        mapping: ModelRequestMapping,
        response: ModelHttpResponse,
    ) -> bool:
        try:
            details = self._generator.generate_request_details(
                mapping, resource.for_provider, response
            )
        except (QueryEvaluationError, InvalidRequestError):
            return False
        return is_request_valid(details)

    def _record_response(
        self,
        resource: ModelRequestResource,
        mapping: ModelRequestMapping,
        details: ModelRequestDetails,
        response: ModelHttpResponse,
    ) -> None:
        update: dict[str, object] = {"response": response, "request_details": details}
        if is_http_success(response.status_code) and self._should_set_cache(
            resource, mapping, response
        ):
            update["cache"] = ModelResponseCache(last_updated=self._clock(), response=response)
        resource.status = resource.status.model_copy(update=update)

    def _record_failure(
        self,
        resource: ModelRequestResource,
        details: ModelRequestDetails,
        message: str,
        response: ModelHttpResponse | None,
    ) -> None:
        status = resource.status
        update: dict[str, object] = {
            "error": message,
            "failed": next_failed_count(status.failed, resource.for_provider.rollback_retries_limit),
            "request_details": details,
        }
        if response is not None:
            update["response"] = response
        resource.status = status.model_copy(update=update)
        logger.warning(
            "Request failed: %s",
            message,
            extra={"resource": resource.name, "failed": update["failed"]},
        )

    # -------------------------------------------------------------------------
    # Single cycle
    # -------------------------------------------------------------------------

    async def reconcile(self, resource: ModelRequestResource) -> ModelExternalObservation:
        """Run one cycle: observe, then create or update when needed."""
        observation = await self.observe(resource)
        if not observation.resource_exists:
            await self.create(resource)
        elif not observation.resource_up_to_date:
            await self.update(resource)
        return observation


__all__: list[str] = ["RequestReconciler"]
