# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Disposable request status model."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from omnibase_provider_http.models.model_http_response import ModelHttpResponse
from omnibase_provider_http.models.model_request_details import ModelRequestDetails


class ModelDisposableRequestStatus(BaseModel):
    """Observed state of a DisposableRequest."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    response: ModelHttpResponse | None = None
    failed: int = Field(default=0, ge=0)
    error: str = ""
    synced: bool = False
    request_details: ModelRequestDetails | None = None
    last_reconcile_time: datetime | None = None


__all__: list[str] = ["ModelDisposableRequestStatus"]
