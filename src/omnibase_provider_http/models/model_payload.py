# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Request payload model."""

from __future__ import annotations

import json

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class ModelPayload(BaseModel):
    """Base values addressed by mapping expressions as ``.payload``.

    ``body`` is kept as text; the context builder inflates it into a
    structure so expressions can use ``.payload.body.<field>``.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    base_url: str = Field(default="", description="Base URL of the remote API")
    body: str = Field(default="", description="Desired resource body (JSON text)")

    @field_validator("body", mode="before")
    @classmethod
    def _encode_structured_body(cls, value: object) -> object:
        # Manifests may declare the body as a YAML mapping instead of text.
        if isinstance(value, (dict, list)):
            return json.dumps(value)
        return value


__all__: list[str] = ["ModelPayload"]
