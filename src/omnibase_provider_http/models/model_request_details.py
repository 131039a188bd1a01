# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Rendered request details."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ModelRequestDetails(BaseModel):
    """A concrete HTTP request rendered from a mapping.

    Stored in status in its templated form: secret placeholders are kept,
    never their resolved values.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    method: str = Field(default="", description="HTTP method")
    url: str = Field(default="", description="Rendered request URL")
    body: str = Field(default="", description="Rendered request body")
    headers: dict[str, list[str]] = Field(
        default_factory=dict,
        description="Rendered request headers",
    )


__all__: list[str] = ["ModelRequestDetails"]
