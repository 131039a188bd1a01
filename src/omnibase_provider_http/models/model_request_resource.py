# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Request resource model."""

from __future__ import annotations

from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from omnibase_provider_http.models.model_owner_reference import ModelOwnerReference
from omnibase_provider_http.models.model_request_parameters import (
    ModelRequestParameters,
)
from omnibase_provider_http.models.model_request_status import ModelRequestStatus


class ModelRequestResource(BaseModel):
    """A managed Request: identity, desired parameters and observed status.

    The resource is the unit a reconcile cycle works on. Its ``status`` is
    replaced (never patched in place) as the cycle progresses.
    """

    model_config = ConfigDict(
        validate_assignment=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    kind: str = "Request"

    name: str = Field(min_length=1)
    uid: str = Field(default_factory=lambda: str(uuid4()))
    for_provider: ModelRequestParameters
    status: ModelRequestStatus = Field(default_factory=ModelRequestStatus)

    def owner_reference(self) -> ModelOwnerReference:
        return ModelOwnerReference(kind=self.kind, name=self.name, uid=self.uid)


__all__: list[str] = ["ModelRequestResource"]
