# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Secret metadata model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModelSecretMetadata(BaseModel):
    """Label and annotation expressions applied to an injected secret.

    Values are query expressions evaluated against the response; the
    rendered values may contain placeholders of other secrets.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    labels: dict[str, str] = Field(default_factory=dict)
    annotations: dict[str, str] = Field(default_factory=dict)


__all__: list[str] = ["ModelSecretMetadata"]
