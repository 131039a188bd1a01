# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Provider Configuration Model."""

from __future__ import annotations


from pydantic import BaseModel, ConfigDict, Field

from omnibase_provider_http.secretstore.model_vault_secret_store_config import (
    ModelVaultSecretStoreConfig,
)
from omnibase_provider_http.transport.model_http_transport_config import (
    ModelHttpTransportConfig,
)


class ModelProviderConfig(BaseModel):
    """Top-level provider configuration.

    Attributes:
        http: Transport settings (timeouts, size limits, redirects)
        vault: Vault secret store settings. When absent the provider keeps
            secrets in process memory.

    Example YAML:
        http:
          timeout_seconds: 10
        vault:
          url: https://vault.example.com:8200
          mount_point: secret
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    http: ModelHttpTransportConfig = Field(
        default_factory=ModelHttpTransportConfig,
        description="HTTP transport settings",
    )
    vault: ModelVaultSecretStoreConfig | None = Field(
        default=None,
        description="Vault secret store settings (in-memory store when absent)",
    )


__all__: list[str] = ["ModelProviderConfig"]
