# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Configuration of the Vault-backed secret store."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, SecretStr


class ModelVaultSecretStoreConfig(BaseModel):
    """Where and how provider secrets live in Vault.

    A secret ``namespace/name`` is the KV v2 entry
    ``<mount_point>:<path_prefix>/<namespace>/<name>``. The token is normally
    injected from ``VAULT_TOKEN`` by the config loader; it is a SecretStr so
    it never shows up in reprs or logs.

    Example:
        >>> config = ModelVaultSecretStoreConfig(url="https://vault:8200", mount_point="kv")
        >>> config.path_prefix
        'provider-http'
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    url: str
    token: SecretStr | None = None
    namespace: str | None = Field(
        default=None,
        description="Vault Enterprise namespace",
    )
    mount_point: str = Field(default="secret", min_length=1)
    path_prefix: str = Field(
        default="provider-http",
        description="Parent path of all provider secrets under the mount",
    )
    verify_ssl: bool = True
    timeout_seconds: float = Field(default=30.0, ge=1.0, le=300.0)
    max_concurrent_operations: int = Field(
        default=10,
        ge=1,
        le=100,
        description="Worker threads available to the synchronous hvac client",
    )


__all__: list[str] = ["ModelVaultSecretStoreConfig"]
