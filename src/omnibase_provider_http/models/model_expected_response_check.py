# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Up-to-date check configuration model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from omnibase_provider_http.enums import EnumExpectedResponseCheckType


class ModelExpectedResponseCheck(BaseModel):
    """How observe decides whether the remote resource is up to date.

    Attributes:
        type: DEFAULT compares the live body against the rendered UPDATE body;
            CUSTOM evaluates ``logic`` as a boolean expression
        logic: Boolean query expression used by CUSTOM checks
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    type: EnumExpectedResponseCheckType = Field(
        default=EnumExpectedResponseCheckType.DEFAULT,
        description="Check strategy",
    )
    logic: str = Field(
        default="",
        description="Boolean query expression for CUSTOM checks",
    )


__all__: list[str] = ["ModelExpectedResponseCheck"]
