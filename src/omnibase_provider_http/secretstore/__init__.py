# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Secret stores.

Exports:
    ProtocolSecretStore: Interface of secret stores
    SecretStoreInMemory: Process-local store
    SecretStoreVault: HashiCorp Vault KV v2 store
    ModelVaultSecretStoreConfig: Vault store configuration
    get_secret / get_or_create_secret / update_secret: Store helpers
    reconcile_metadata / has_owner_reference: Secret metadata helpers
"""

from omnibase_provider_http.secretstore.model_vault_secret_store_config import (
    ModelVaultSecretStoreConfig,
)
from omnibase_provider_http.secretstore.protocol_secret_store import (
    ProtocolSecretStore,
)
from omnibase_provider_http.secretstore.secret_store_client import (
    get_or_create_secret,
    get_secret,
    has_owner_reference,
    reconcile_metadata,
    update_secret,
)
from omnibase_provider_http.secretstore.secret_store_memory import SecretStoreInMemory
from omnibase_provider_http.secretstore.secret_store_vault import SecretStoreVault

__all__: list[str] = [
    "ModelVaultSecretStoreConfig",
    "ProtocolSecretStore",
    "SecretStoreInMemory",
    "SecretStoreVault",
    "get_or_create_secret",
    "get_secret",
    "has_owner_reference",
    "reconcile_metadata",
    "update_secret",
]
