# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Secret reference model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModelSecretRef(BaseModel):
    """Identifies a secret by name and namespace."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = Field(min_length=1, description="Secret name")
    namespace: str = Field(min_length=1, description="Secret namespace")


__all__: list[str] = ["ModelSecretRef"]
