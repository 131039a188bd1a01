# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
# mypy: disable-error-code="union-attr"
"""Unit tests for DisposableRequestReconciler."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any

import pytest

from omnibase_provider_http.controller import DisposableRequestReconciler
from omnibase_provider_http.errors import (
    HttpStatusError,
    InfraTimeoutError,
    UnexpectedResponseError,
)
from omnibase_provider_http.models import (
    ModelDisposableRequestResource,
    ModelDisposableRequestStatus,
)
from omnibase_provider_http.query import QueryEvaluatorJq
from omnibase_provider_http.secretstore import SecretStoreInMemory
from tests.helpers import RecordingStatusWriter, ScriptedTransport

pytestmark = pytest.mark.unit


def make_resource(
    status: ModelDisposableRequestStatus | None = None,
    **overrides: Any,
) -> ModelDisposableRequestResource:
    """Build a DisposableRequest that triggers a deployment hook."""
    for_provider: dict[str, Any] = {
        "url": "http://api.test/hooks/deploy",
        "method": "post",
        "headers": {"Content-Type": ["application/json"]},
        "body": '{"token": "{{auth:default:token}}"}',
        "expectedResponse": '.body.status == "ok"',
        "waitTimeout": "5s",
        "insecureSkipTLSVerify": True,
    }
    for_provider.update(overrides)
    resource = ModelDisposableRequestResource.model_validate(
        {"name": "deploy-hook", "uid": "uid-2", "forProvider": for_provider}
    )
    if status is not None:
        resource.status = status
    return resource


@pytest.fixture
def reconciler(
    transport: ScriptedTransport,
    secret_store: SecretStoreInMemory,
    evaluator: QueryEvaluatorJq,
    status_writer: RecordingStatusWriter,
    fixed_clock: datetime,
) -> DisposableRequestReconciler:
    return DisposableRequestReconciler(
        transport,
        secret_store,
        evaluator,
        status_writer,
        clock=lambda: fixed_clock,
    )


class TestObserve:
    """Tests for observe."""

    @pytest.mark.asyncio
    async def test_unsent_request_does_not_exist(
        self, reconciler: DisposableRequestReconciler
    ) -> None:
        observation = await reconciler.observe(make_resource())
        assert not observation.resource_exists

    @pytest.mark.asyncio
    async def test_synced_request_is_done(
        self, reconciler: DisposableRequestReconciler
    ) -> None:
        observation = await reconciler.observe(
            make_resource(ModelDisposableRequestStatus(synced=True))
        )
        assert observation.resource_exists
        assert observation.resource_up_to_date

    @pytest.mark.asyncio
    async def test_limit_reached_stops_with_error(
        self, reconciler: DisposableRequestReconciler
    ) -> None:
        resource = make_resource(
            ModelDisposableRequestStatus(failed=2, error="boom"),
            rollbackRetriesLimit=2,
        )
        observation = await reconciler.observe(resource)
        assert observation.resource_exists
        assert observation.resource_up_to_date
        assert observation.error == "boom"

    @pytest.mark.parametrize(
        ("elapsed", "exists"),
        [(timedelta(minutes=4), True), (timedelta(minutes=5), False)],
    )
    @pytest.mark.asyncio
    async def test_loop_period(
        self,
        reconciler: DisposableRequestReconciler,
        fixed_clock: datetime,
        elapsed: timedelta,
        exists: bool,
    ) -> None:
        resource = make_resource(
            ModelDisposableRequestStatus(
                synced=True, last_reconcile_time=fixed_clock - elapsed
            ),
            shouldLoopInfinitely=True,
            nextReconcile="5m",
        )
        observation = await reconciler.observe(resource)
        assert observation.resource_exists is exists

    @pytest.mark.asyncio
    async def test_loop_without_period_sends_every_cycle(
        self, reconciler: DisposableRequestReconciler, fixed_clock: datetime
    ) -> None:
        resource = make_resource(
            ModelDisposableRequestStatus(synced=True, last_reconcile_time=fixed_clock),
            shouldLoopInfinitely=True,
        )
        observation = await reconciler.observe(resource)
        assert not observation.resource_exists


class TestCreate:
    """Tests for create."""

    @pytest.mark.asyncio
    async def test_success(
        self,
        reconciler: DisposableRequestReconciler,
        transport: ScriptedTransport,
        status_writer: RecordingStatusWriter,
        fixed_clock: datetime,
    ) -> None:
        transport.reply(200, '{"status":"ok"}')
        resource = make_resource()

        await reconciler.create(resource)

        [sent] = transport.requests
        assert sent.method == "POST"
        assert sent.body == '{"token": "s3cr3t-token"}'
        assert sent.insecure_skip_tls_verify is True
        assert sent.timeout == timedelta(seconds=5)

        status = resource.status
        assert status.synced
        assert status.error == ""
        assert status.last_reconcile_time == fixed_clock
        assert status.response.status_code == 200
        assert status.request_details.body == '{"token": "{{auth:default:token}}"}'
        assert status_writer.statuses == [status]

    @pytest.mark.asyncio
    async def test_http_error(
        self, reconciler: DisposableRequestReconciler, transport: ScriptedTransport
    ) -> None:
        transport.reply(502, "bad gateway")
        resource = make_resource(rollbackRetriesLimit=3)

        with pytest.raises(HttpStatusError):
            await reconciler.create(resource)

        status = resource.status
        assert not status.synced
        assert status.failed == 1
        assert status.error == "HTTP request failed with status code: 502"
        assert status.response.body == "bad gateway"

    @pytest.mark.asyncio
    async def test_unexpected_response(
        self, reconciler: DisposableRequestReconciler, transport: ScriptedTransport
    ) -> None:
        transport.reply(200, '{"status":"pending"}')
        resource = make_resource(rollbackRetriesLimit=3)

        with pytest.raises(UnexpectedResponseError):
            await reconciler.create(resource)

        assert not resource.status.synced
        assert resource.status.failed == 1
        assert resource.status.error == "response does not match the expected response"

    @pytest.mark.asyncio
    async def test_without_expected_response_any_success_counts(
        self, reconciler: DisposableRequestReconciler, transport: ScriptedTransport
    ) -> None:
        transport.reply(202, "accepted")
        resource = make_resource(expectedResponse="")
        await reconciler.create(resource)
        assert resource.status.synced

    @pytest.mark.asyncio
    async def test_transport_failure(
        self, reconciler: DisposableRequestReconciler, transport: ScriptedTransport
    ) -> None:
        transport.fail(InfraTimeoutError("HTTP POST request timed out after 5.0s"))
        resource = make_resource(rollbackRetriesLimit=3)

        with pytest.raises(InfraTimeoutError):
            await reconciler.create(resource)

        assert resource.status.error == "HTTP POST request timed out after 5.0s"
        assert resource.status.response is None
        assert resource.status.failed == 1

    @pytest.mark.asyncio
    async def test_response_secrets_are_redacted(
        self,
        reconciler: DisposableRequestReconciler,
        transport: ScriptedTransport,
        secret_store: SecretStoreInMemory,
    ) -> None:
        transport.reply(200, '{"status":"ok","apiKey":"k-999"}')
        resource = make_resource(
            secretInjectionConfigs=[
                {
                    "secretRef": {"name": "hook", "namespace": "default"},
                    "secretKey": "apiKey",
                    "responsePath": ".body.apiKey",
                    "setOwnerReference": True,
                }
            ]
        )

        await reconciler.create(resource)

        assert "k-999" not in resource.status.response.body
        assert "{{hook:default:apiKey}}" in resource.status.response.body
        secret = await secret_store.get("hook", "default")
        assert secret.data == {"apiKey": b"k-999"}
        assert secret.owner_references[0].uid == "uid-2"

    @pytest.mark.asyncio
    async def test_limit_reached_sends_nothing(
        self, reconciler: DisposableRequestReconciler, transport: ScriptedTransport
    ) -> None:
        resource = make_resource(
            ModelDisposableRequestStatus(failed=1), rollbackRetriesLimit=1
        )
        await reconciler.create(resource)
        assert transport.requests == []


class TestLifecycle:
    """Update, delete and a full cycle."""

    @pytest.mark.asyncio
    async def test_update_and_delete_send_nothing(
        self, reconciler: DisposableRequestReconciler, transport: ScriptedTransport
    ) -> None:
        resource = make_resource(ModelDisposableRequestStatus(synced=True))
        await reconciler.update(resource)
        assert await reconciler.delete(resource) is False
        assert transport.requests == []

    @pytest.mark.asyncio
    async def test_reconcile_sends_once(
        self, reconciler: DisposableRequestReconciler, transport: ScriptedTransport
    ) -> None:
        transport.reply(200, '{"status":"ok"}')
        resource = make_resource()

        await reconciler.reconcile(resource)
        await reconciler.reconcile(resource)

        assert len(transport.requests) == 1
