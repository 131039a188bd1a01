# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""External observation model."""

from __future__ import annotations


from pydantic import BaseModel, ConfigDict, Field


class ModelExternalObservation(BaseModel):
    """Result of observing a remote resource.

    Attributes:
        resource_exists: False asks the scheduler to create the resource
        resource_up_to_date: False asks the scheduler to update the resource
        error: Stored error surfaced for visibility, if any
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    resource_exists: bool = Field(description="Whether the remote resource exists")
    resource_up_to_date: bool = Field(
        default=False,
        description="Whether the remote resource matches the desired state",
    )
    error: str | None = Field(
        default=None,
        description="Stored error surfaced for visibility",
    )


__all__: list[str] = ["ModelExternalObservation"]
