# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""HTTP Response Model.

The response of one HTTP call as it is recorded in a resource's status and
exposed to query expressions under ``response``.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ModelHttpResponse(BaseModel):
    """Observed HTTP response.

    Attributes:
        status_code: HTTP status code
        body: Raw response body text
        headers: Response headers, multi-valued, in received order
        method: HTTP method of the request that produced this response
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    status_code: int = Field(
        default=0,
        description="HTTP status code",
    )
    body: str = Field(
        default="",
        description="Raw response body text",
    )
    headers: dict[str, list[str]] = Field(
        default_factory=dict,
        description="Response headers, multi-valued, in received order",
    )
    method: str = Field(
        default="",
        description="HTTP method of the request that produced this response",
    )


__all__: list[str] = ["ModelHttpResponse"]
