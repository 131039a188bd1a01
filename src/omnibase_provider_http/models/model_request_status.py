# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Request status model."""

from __future__ import annotations


from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from omnibase_provider_http.models.model_http_response import ModelHttpResponse
from omnibase_provider_http.models.model_request_details import ModelRequestDetails
from omnibase_provider_http.models.model_response_cache import ModelResponseCache


class ModelRequestStatus(BaseModel):
    """Observed state of a Request.

    Every response stored here has been redacted: secret values extracted by
    injection rules appear only as ``{{name:namespace:key}}`` placeholders.

    Attributes:
        response: Last response received, None before the first call
        cache: Last response that rendered a valid request for its mapping
        failed: Failed attempts counted against the retry limit
        error: Message of the last failed attempt, empty on success
        request_details: Templated details of the last request sent
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    response: ModelHttpResponse | None = None
    cache: ModelResponseCache | None = None
    failed: int = Field(default=0, ge=0)
    error: str = ""
    request_details: ModelRequestDetails | None = None


__all__: list[str] = ["ModelRequestStatus"]
