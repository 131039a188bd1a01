# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Provider configuration, manifest loading and logging bootstrap."""

from omnibase_provider_http.config.config_loader import (
    MAX_CONFIG_SIZE_BYTES,
    VAULT_ADDR_ENV,
    VAULT_TOKEN_ENV,
    ManagedResource,
    load_manifest,
    load_provider_config,
    load_secrets,
    load_state,
)
from omnibase_provider_http.config.model_provider_config import ModelProviderConfig
from omnibase_provider_http.config.util_logging import LOG_LEVEL_ENV, configure_logging

__all__: list[str] = [
    "LOG_LEVEL_ENV",
    "MAX_CONFIG_SIZE_BYTES",
    "ManagedResource",
    "ModelProviderConfig",
    "VAULT_ADDR_ENV",
    "VAULT_TOKEN_ENV",
    "configure_logging",
    "load_manifest",
    "load_provider_config",
    "load_secrets",
    "load_state",
]
