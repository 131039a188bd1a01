# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""In-memory secret store.

Process-local implementation of ProtocolSecretStore, used by tests and by
the CLI when no Vault is configured.
"""

from __future__ import annotations

import logging

from omnibase_provider_http.enums import EnumInfraTransportType
from omnibase_provider_http.errors import (
    ModelInfraErrorContext,
    SecretConflictError,
    SecretNotFoundError,
)
from omnibase_provider_http.models import ModelSecret

logger = logging.getLogger(__name__)


class SecretStoreInMemory:
    """Secret store backed by a dict.

    Versions are integers rendered as strings, starting at "1" on creation.
    """

    def __init__(self, secrets: list[ModelSecret] | None = None) -> None:
        self._secrets: dict[tuple[str, str], ModelSecret] = {}
        for secret in secrets or []:
            self._secrets[(secret.namespace, secret.name)] = secret.model_copy(
                deep=True,
                update={"resource_version": "1"},
            )

    def _context(self, operation: str, name: str) -> ModelInfraErrorContext:
        return ModelInfraErrorContext(
            transport_type=EnumInfraTransportType.SECRET_STORE,
            operation=operation,
            target_name=name,
        )

    async def get(self, name: str, namespace: str) -> ModelSecret | None:
        stored = self._secrets.get((namespace, name))
        if stored is None:
            return None
        return stored.model_copy(deep=True)

    async def create(self, secret: ModelSecret) -> ModelSecret:
        key = (secret.namespace, secret.name)
        if key in self._secrets:
            raise SecretConflictError(
                f"secret {secret.namespace}/{secret.name} already exists",
                context=self._context("create_secret", secret.name),
            )
        stored = secret.model_copy(deep=True, update={"resource_version": "1"})
        self._secrets[key] = stored
        logger.debug(
            "Created secret",
            extra={"secret_name": secret.name, "secret_namespace": secret.namespace},
        )
        return stored.model_copy(deep=True)

    async def update(self, secret: ModelSecret) -> ModelSecret:
        key = (secret.namespace, secret.name)
        current = self._secrets.get(key)
        if current is None:
            raise SecretNotFoundError(
                f"secret {secret.namespace}/{secret.name} not found",
                context=self._context("update_secret", secret.name),
            )
        if secret.resource_version != current.resource_version:
            raise SecretConflictError(
                f"secret {secret.namespace}/{secret.name} was modified concurrently",
                context=self._context("update_secret", secret.name),
                expected_version=current.resource_version,
                actual_version=secret.resource_version,
            )
        stored = secret.model_copy(
            deep=True,
            update={"resource_version": str(int(current.resource_version) + 1)},
        )
        self._secrets[key] = stored
        logger.debug(
            "Updated secret",
            extra={"secret_name": secret.name, "secret_namespace": secret.namespace},
        )
        return stored.model_copy(deep=True)


__all__: list[str] = ["SecretStoreInMemory"]
