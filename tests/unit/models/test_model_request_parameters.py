# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for the Request and DisposableRequest models."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from omnibase_provider_http.enums import (
    EnumExpectedResponseCheckType,
    EnumRequestAction,
)
from omnibase_provider_http.models import (
    ModelHttpResponse,
    ModelPayload,
    ModelRequestMapping,
    ModelRequestParameters,
    ModelRequestResource,
    ModelRequestStatus,
    ModelSecret,
    ModelSecretInjectionConfig,
)

pytestmark = pytest.mark.unit


class TestModelRequestMapping:
    """Action/method resolution of mappings."""

    def test_action_only_uses_default_method(self) -> None:
        mapping = ModelRequestMapping(action=EnumRequestAction.UPDATE, url=".payload.baseUrl")
        assert mapping.resolved_action is EnumRequestAction.UPDATE
        assert mapping.resolved_method == "PUT"

    def test_method_overrides_default(self) -> None:
        mapping = ModelRequestMapping.model_validate(
            {"action": "UPDATE", "method": "patch", "url": ".payload.baseUrl"}
        )
        assert mapping.resolved_method == "PATCH"
        assert mapping.resolved_action is EnumRequestAction.UPDATE

    def test_method_only_implies_action(self) -> None:
        mapping = ModelRequestMapping.model_validate({"method": "DELETE", "url": "."})
        assert mapping.resolved_action is EnumRequestAction.REMOVE

    def test_requires_action_or_method(self) -> None:
        with pytest.raises(ValidationError, match="action or a method"):
            ModelRequestMapping.model_validate({"url": "."})

    def test_method_without_implied_action_is_rejected(self) -> None:
        with pytest.raises(ValidationError, match="does not imply an action"):
            ModelRequestMapping.model_validate({"method": "HEAD", "url": "."})


class TestModelRequestParameters:
    """Wire names and mapping lookup."""

    @pytest.fixture
    def params(self) -> ModelRequestParameters:
        return ModelRequestParameters.model_validate(
            {
                "payload": {"baseUrl": "http://h/items", "body": {"name": "x"}},
                "headers": {"Content-Type": ["application/json"]},
                "mappings": [
                    {"method": "POST", "url": ".payload.baseUrl"},
                    {"action": "OBSERVE", "url": ".payload.baseUrl"},
                    {"action": "OBSERVE", "url": '"second"'},
                ],
                "expectedResponseCheck": {"type": "CUSTOM", "logic": ".response.statusCode == 200"},
                "rollbackRetriesLimit": 3,
                "insecureSkipTLSVerify": True,
                "waitTimeout": "30s",
            }
        )

    def test_camel_case_fields(self, params: ModelRequestParameters) -> None:
        assert params.payload.base_url == "http://h/items"
        assert params.rollback_retries_limit == 3
        assert params.insecure_skip_tls_verify is True
        assert params.expected_response_check is not None
        assert params.expected_response_check.type is EnumExpectedResponseCheckType.CUSTOM

    def test_structured_payload_body_is_json_text(self, params: ModelRequestParameters) -> None:
        assert json.loads(params.payload.body) == {"name": "x"}

    def test_get_mapping_returns_first_match(self, params: ModelRequestParameters) -> None:
        observe = params.get_mapping(EnumRequestAction.OBSERVE)
        assert observe is not None
        assert observe.url == ".payload.baseUrl"
        create = params.get_mapping(EnumRequestAction.CREATE)
        assert create is not None
        assert create.resolved_method == "POST"

    def test_get_mapping_missing_returns_none(self, params: ModelRequestParameters) -> None:
        assert params.get_mapping(EnumRequestAction.REMOVE) is None

    def test_negative_retries_limit_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ModelRequestParameters.model_validate({"rollbackRetriesLimit": -1})

    def test_parameters_are_frozen(self, params: ModelRequestParameters) -> None:
        with pytest.raises(ValidationError):
            params.rollback_retries_limit = 5  # type: ignore[misc]


class TestModelPayload:
    def test_text_body_is_kept(self) -> None:
        assert ModelPayload(body='{"a": 1}').body == '{"a": 1}'


class TestModelSecretInjectionConfig:
    """Single-pair and multi-pair injection rules."""

    def test_single_pair(self) -> None:
        config = ModelSecretInjectionConfig.model_validate(
            {
                "secretRef": {"name": "creds", "namespace": "default"},
                "secretKey": "password",
                "responsePath": ".body.password",
            }
        )
        [pair] = config.resolved_key_mappings()
        assert (pair.secret_key, pair.response_path) == ("password", ".body.password")

    def test_key_mappings_take_precedence(self) -> None:
        config = ModelSecretInjectionConfig.model_validate(
            {
                "secretRef": {"name": "creds", "namespace": "default"},
                "secretKey": "ignored",
                "responsePath": ".body.ignored",
                "keyMappings": [
                    {"secretKey": "user", "responsePath": ".body.user"},
                    {"secretKey": "token", "responsePath": ".headers.Token[0]"},
                ],
                "setOwnerReference": True,
            }
        )
        assert [m.secret_key for m in config.resolved_key_mappings()] == ["user", "token"]
        assert config.set_owner_reference is True

    def test_requires_a_pair(self) -> None:
        with pytest.raises(ValidationError, match="secretKey and responsePath"):
            ModelSecretInjectionConfig.model_validate(
                {"secretRef": {"name": "creds", "namespace": "default"}, "secretKey": "k"}
            )


class TestModelRequestResource:
    """Resource identity and status replacement."""

    def test_owner_reference(self) -> None:
        resource = ModelRequestResource.model_validate(
            {"name": "manage-user", "uid": "uid-1", "forProvider": {}}
        )
        owner = resource.owner_reference()
        assert owner.kind == "Request"
        assert owner.name == "manage-user"
        assert owner.uid == "uid-1"

    def test_status_is_replaced_not_patched(self) -> None:
        resource = ModelRequestResource.model_validate({"name": "r", "forProvider": {}})
        with pytest.raises(ValidationError):
            resource.status.failed = 2  # type: ignore[misc]
        resource.status = resource.status.model_copy(update={"failed": 2})
        assert resource.status.failed == 2

    def test_status_round_trips_wire_names(self) -> None:
        status = ModelRequestStatus.model_validate(
            {
                "response": {"statusCode": 200, "body": "{}", "headers": {"A": ["1"]}, "method": "GET"},
                "failed": 1,
                "error": "boom",
            }
        )
        assert status.response == ModelHttpResponse(
            status_code=200, body="{}", headers={"A": ["1"]}, method="GET"
        )
        dumped = status.model_dump(mode="json", by_alias=True, exclude_none=True)
        assert dumped["response"]["statusCode"] == 200


class TestModelSecret:
    def test_repr_hides_values(self) -> None:
        secret = ModelSecret(name="auth", namespace="default", data={"token": b"s3cr3t"})
        assert "s3cr3t" not in repr(secret)
        assert "s3cr3t" not in str(secret)
        assert "token" in repr(secret)
