# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Owner reference model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ModelOwnerReference(BaseModel):
    """Reference from a secret to the resource that owns it.

    Owned secrets are garbage collected together with their owner.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    api_version: str = Field(default="provider-http.omninode.ai/v1alpha2")
    kind: str
    name: str
    uid: str = Field(min_length=1, description="Unique identifier of the owner")


__all__: list[str] = ["ModelOwnerReference"]
