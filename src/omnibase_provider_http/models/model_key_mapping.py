# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Secret key mapping model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ModelKeyMapping(BaseModel):
    """Binds one secret key to the response path that supplies its value."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    secret_key: str = Field(min_length=1, description="Key written in the secret")
    response_path: str = Field(
        min_length=1,
        description="Query expression evaluated against the response",
    )


__all__: list[str] = ["ModelKeyMapping"]
