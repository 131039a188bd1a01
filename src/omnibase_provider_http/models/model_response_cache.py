# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Response cache model."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from omnibase_provider_http.models.model_http_response import ModelHttpResponse


class ModelResponseCache(BaseModel):
    """Last response from which the producing mapping rendered a valid request."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    last_updated: datetime = Field(description="When the cache entry was written")
    response: ModelHttpResponse


__all__: list[str] = ["ModelResponseCache"]
