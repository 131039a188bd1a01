# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Secret Injection Configuration Model.

Declares which response fragments are moved out of the response and into a
secret, leaving a ``{{name:namespace:key}}`` placeholder behind.
"""

from __future__ import annotations


from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from omnibase_provider_http.models.model_key_mapping import ModelKeyMapping
from omnibase_provider_http.models.model_secret_metadata import ModelSecretMetadata
from omnibase_provider_http.models.model_secret_ref import ModelSecretRef


class ModelSecretInjectionConfig(BaseModel):
    """One secret injection rule.

    A rule declares either a single ``secret_key``/``response_path`` pair or
    a list of ``key_mappings``; when ``key_mappings`` is given it takes
    precedence.

    Attributes:
        secret_ref: Target secret
        secret_key: Secret key of the single-pair form
        response_path: Response query expression of the single-pair form
        key_mappings: Multi-pair form
        metadata: Label/annotation expressions for the target secret
        set_owner_reference: Tie the secret's lifetime to the resource
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    secret_ref: ModelSecretRef
    secret_key: str | None = None
    response_path: str | None = None
    key_mappings: list[ModelKeyMapping] | None = None
    metadata: ModelSecretMetadata = Field(default_factory=ModelSecretMetadata)
    set_owner_reference: bool = False

    @model_validator(mode="after")
    def _require_key_mapping(self) -> ModelSecretInjectionConfig:
        if self.key_mappings is None and not (self.secret_key and self.response_path):
            raise ValueError(
                "secret injection config needs secretKey and responsePath, or keyMappings"
            )
        return self

    def resolved_key_mappings(self) -> list[ModelKeyMapping]:
        """Return the declared (secret key, response path) pairs."""
        if self.key_mappings is not None:
            return list(self.key_mappings)
        return [
            ModelKeyMapping(
                secret_key=self.secret_key or "",
                response_path=self.response_path or "",
            )
        ]


__all__: list[str] = ["ModelSecretInjectionConfig"]
