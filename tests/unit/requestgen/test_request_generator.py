# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for RequestGenerator and its helpers."""

from __future__ import annotations

import json

import pytest

from omnibase_provider_http.enums import EnumRequestAction
from omnibase_provider_http.errors import InvalidRequestError, QueryEvaluationError
from omnibase_provider_http.models import (
    ModelHttpResponse,
    ModelRequestDetails,
    ModelRequestMapping,
    ModelRequestParameters,
)
from omnibase_provider_http.query import QueryEvaluatorJq
from omnibase_provider_http.requestgen import (
    RequestGenerator,
    body_to_query,
    is_request_valid,
    merge_headers,
)

pytestmark = pytest.mark.unit

OBSERVE_URL = '(.payload.baseUrl + "/" + (.response.body.id|tostring))'


@pytest.fixture
def params() -> ModelRequestParameters:
    return ModelRequestParameters.model_validate(
        {
            "payload": {
                "baseUrl": "http://api.test/users",
                "body": '{"username": "mock", "email": "m@x"}',
            },
            "headers": {
                "Content-Type": ["application/json"],
                "Authorization": ["Bearer {{auth:default:token}}"],
            },
            "mappings": [
                {
                    "action": "CREATE",
                    "url": ".payload.baseUrl",
                    "body": '{"username": .payload.body.username, "email": .payload.body.email}',
                },
                {"action": "OBSERVE", "url": OBSERVE_URL},
                {
                    "action": "REMOVE",
                    "url": OBSERVE_URL,
                    "headers": {"Authorization": ["Basic {{auth:default:user}}"]},
                },
            ],
        }
    )


@pytest.fixture
def generator(evaluator: QueryEvaluatorJq) -> RequestGenerator:
    return RequestGenerator(evaluator)


class TestBodyToQuery:
    """Tests for body_to_query."""

    @pytest.mark.parametrize(
        "body",
        [
            ".payload.body",
            '{"name": .payload.body.name}',
            "[1, 2]",
            '"quoted"',
            "42",
            "if .x then 1 else 2 end",
            "null",
        ],
    )
    def test_filter_expressions_pass_through(self, body: str) -> None:
        assert body_to_query(body) == body

    def test_literal_text_is_quoted(self) -> None:
        assert body_to_query("plain text") == '"plain text"'

    def test_empty_body(self) -> None:
        assert body_to_query("") == ""
        assert body_to_query("   ") == ""


class TestMergeHeaders:
    """Tests for merge_headers."""

    def test_mapping_header_replaces_default_of_same_name(self) -> None:
        merged = merge_headers(
            {"Authorization": ["Basic x"]},
            {"Authorization": ["Bearer y"], "Accept": ["*/*"]},
        )
        assert merged == {"Authorization": ["Basic x"], "Accept": ["*/*"]}

    def test_missing_sides(self) -> None:
        assert merge_headers(None, None) == {}
        assert merge_headers({"A": ["1"]}, None) == {"A": ["1"]}
        assert merge_headers(None, {"B": ["2"]}) == {"B": ["2"]}

    def test_inputs_are_not_modified(self) -> None:
        defaults = {"A": ["1"]}
        merged = merge_headers(None, defaults)
        merged["A"].append("2")
        assert defaults == {"A": ["1"]}


class TestIsRequestValid:
    """Tests for is_request_valid."""

    def test_valid_request(self) -> None:
        assert is_request_valid(ModelRequestDetails(method="GET", url="http://h/1"))

    def test_empty_url(self) -> None:
        assert not is_request_valid(ModelRequestDetails(method="GET", url=""))

    @pytest.mark.parametrize(
        "details",
        [
            ModelRequestDetails(method="GET", url="http://h/null"),
            ModelRequestDetails(method="POST", url="http://h", body='{"id":null}'),
            ModelRequestDetails(method="GET", url="http://h", headers={"X": ["null"]}),
        ],
    )
    def test_null_marker_invalidates(self, details: ModelRequestDetails) -> None:
        assert not is_request_valid(details)


class TestGenerateRequestDetails:
    """Tests for rendering a single mapping."""

    def test_create_mapping(
        self, generator: RequestGenerator, params: ModelRequestParameters
    ) -> None:
        mapping = params.get_mapping(EnumRequestAction.CREATE)
        assert mapping is not None
        details = generator.generate_request_details(mapping, params, None)
        assert details.method == "POST"
        assert details.url == "http://api.test/users"
        assert json.loads(details.body) == {"username": "mock", "email": "m@x"}

    def test_headers_keep_placeholders_and_literals(
        self, generator: RequestGenerator, params: ModelRequestParameters
    ) -> None:
        mapping = params.get_mapping(EnumRequestAction.CREATE)
        assert mapping is not None
        details = generator.generate_request_details(mapping, params, None)
        assert details.headers == {
            "Content-Type": ["application/json"],
            "Authorization": ["Bearer {{auth:default:token}}"],
        }

    def test_mapping_headers_override_defaults(
        self, generator: RequestGenerator, params: ModelRequestParameters
    ) -> None:
        mapping = params.get_mapping(EnumRequestAction.REMOVE)
        assert mapping is not None
        response = ModelHttpResponse(status_code=200, body='{"id": "123"}')
        details = generator.generate_request_details(mapping, params, response)
        assert details.method == "DELETE"
        assert details.url == "http://api.test/users/123"
        assert details.headers["Authorization"] == ["Basic {{auth:default:user}}"]
        assert details.headers["Content-Type"] == ["application/json"]

    def test_literal_body_is_sent_as_text(
        self, generator: RequestGenerator, params: ModelRequestParameters
    ) -> None:
        mapping = ModelRequestMapping(
            action=EnumRequestAction.UPDATE, url=".payload.baseUrl", body="hello world"
        )
        details = generator.generate_request_details(mapping, params, None)
        assert details.body == "hello world"

    def test_missing_response_renders_invalid_request(
        self, generator: RequestGenerator, params: ModelRequestParameters
    ) -> None:
        mapping = params.get_mapping(EnumRequestAction.OBSERVE)
        assert mapping is not None
        details = generator.generate_request_details(mapping, params, None)
        assert not is_request_valid(details)

    def test_invalid_url_expression_raises(
        self, generator: RequestGenerator, params: ModelRequestParameters
    ) -> None:
        mapping = ModelRequestMapping(action=EnumRequestAction.OBSERVE, url="}")
        with pytest.raises(QueryEvaluationError):
            generator.generate_request_details(mapping, params, None)


class TestGenerateValidRequestDetails:
    """Live response first, cached response as fallback."""

    def test_live_response_is_preferred(
        self, generator: RequestGenerator, params: ModelRequestParameters
    ) -> None:
        mapping = params.get_mapping(EnumRequestAction.OBSERVE)
        assert mapping is not None
        details = generator.generate_valid_request_details(
            mapping,
            params,
            ModelHttpResponse(status_code=200, body='{"id": "live"}'),
            ModelHttpResponse(status_code=200, body='{"id": "cached"}'),
        )
        assert details.url == "http://api.test/users/live"

    def test_falls_back_to_cache(
        self, generator: RequestGenerator, params: ModelRequestParameters
    ) -> None:
        mapping = params.get_mapping(EnumRequestAction.OBSERVE)
        assert mapping is not None
        details = generator.generate_valid_request_details(
            mapping,
            params,
            ModelHttpResponse(status_code=500, body="internal error"),
            ModelHttpResponse(status_code=201, body='{"id": "123"}'),
        )
        assert details.url == "http://api.test/users/123"

    def test_neither_response_renders(
        self, generator: RequestGenerator, params: ModelRequestParameters
    ) -> None:
        mapping = params.get_mapping(EnumRequestAction.OBSERVE)
        assert mapping is not None
        with pytest.raises(InvalidRequestError) as exc_info:
            generator.generate_valid_request_details(mapping, params, None, None)
        assert "GET request could not be rendered" in str(exc_info.value)
