# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocol for Secret Stores.

A secret store persists secrets keyed by (name, namespace). The provider
reads secrets to resolve placeholders and writes them when response values
are extracted.

Concurrency:
    Updates use optimistic concurrency. A secret carries the
    ``resource_version`` it was read at; an update based on a stale version
    is rejected with SecretConflictError and is retried by the next
    reconcile cycle.

Copies:
    Implementations return private copies. Mutating a returned secret has
    no effect until it is passed to ``update``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from omnibase_provider_http.models import ModelSecret


@runtime_checkable
class ProtocolSecretStore(Protocol):
    """Key-value store of secrets."""

    async def get(self, name: str, namespace: str) -> ModelSecret | None:
        """Return the secret, or None if it does not exist."""
        ...

    async def create(self, secret: ModelSecret) -> ModelSecret:
        """Create ``secret`` and return the stored copy.

        Raises:
            SecretConflictError: If a secret with that name already exists.
        """
        ...

    async def update(self, secret: ModelSecret) -> ModelSecret:
        """Replace the stored secret and return the new stored copy.

        Raises:
            SecretNotFoundError: If the secret does not exist.
            SecretConflictError: If ``secret.resource_version`` is stale.
        """
        ...


__all__: list[str] = ["ProtocolSecretStore"]
