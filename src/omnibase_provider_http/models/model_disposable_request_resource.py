# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Disposable request resource model."""

from __future__ import annotations

from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from omnibase_provider_http.models.model_disposable_request_parameters import (
    ModelDisposableRequestParameters,
)
from omnibase_provider_http.models.model_disposable_request_status import (
    ModelDisposableRequestStatus,
)
from omnibase_provider_http.models.model_owner_reference import ModelOwnerReference


class ModelDisposableRequestResource(BaseModel):
    """A managed DisposableRequest."""

    model_config = ConfigDict(
        validate_assignment=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    kind: str = "DisposableRequest"

    name: str = Field(min_length=1)
    uid: str = Field(default_factory=lambda: str(uuid4()))
    for_provider: ModelDisposableRequestParameters
    status: ModelDisposableRequestStatus = Field(
        default_factory=ModelDisposableRequestStatus,
    )

    def owner_reference(self) -> ModelOwnerReference:
        return ModelOwnerReference(kind=self.kind, name=self.name, uid=self.uid)


__all__: list[str] = ["ModelDisposableRequestResource"]
