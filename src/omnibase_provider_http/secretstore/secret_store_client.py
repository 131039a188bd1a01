# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Secret store operations used by the placeholder resolver and redaction.

Thin helpers over ProtocolSecretStore: fetch-or-fail, get-or-create with
owner references, and label/annotation reconciliation.
"""

from __future__ import annotations

import logging

from omnibase_provider_http.enums import EnumInfraTransportType
from omnibase_provider_http.errors import ModelInfraErrorContext, SecretNotFoundError
from omnibase_provider_http.models import ModelOwnerReference, ModelSecret
from omnibase_provider_http.secretstore.protocol_secret_store import (
    ProtocolSecretStore,
)

logger = logging.getLogger(__name__)


async def get_secret(store: ProtocolSecretStore, name: str, namespace: str) -> ModelSecret:
    """Return secret ``namespace/name``.

    Raises:
        SecretNotFoundError: If the secret does not exist.
    """
    secret = await store.get(name, namespace)
    if secret is None:
        raise SecretNotFoundError(
            f"failed to get secret {name}:{namespace}",
            context=ModelInfraErrorContext(
                transport_type=EnumInfraTransportType.SECRET_STORE,
                operation="get_secret",
                target_name=name,
            ),
            secret_namespace=namespace,
        )
    return secret


def has_owner_reference(secret: ModelSecret, owner: ModelOwnerReference) -> bool:
    """Return True if ``secret`` is already owned by ``owner``."""
    return any(ref.uid == owner.uid for ref in secret.owner_references)


async def get_or_create_secret(
    store: ProtocolSecretStore,
    name: str,
    namespace: str,
    owner: ModelOwnerReference | None,
    labels: dict[str, str],
    annotations: dict[str, str],
) -> ModelSecret:
    """Return secret ``namespace/name``, creating it when absent.

    A new secret is created with the given labels and annotations, owned by
    ``owner`` when one is given. An existing secret that lacks the owner
    reference is updated to add it; its labels and annotations are left
    for reconcile_metadata.
    """
    secret = await store.get(name, namespace)
    if secret is None:
        logger.info(
            "Creating secret",
            extra={"secret_name": name, "secret_namespace": namespace},
        )
        return await store.create(
            ModelSecret(
                name=name,
                namespace=namespace,
                labels=dict(labels),
                annotations=dict(annotations),
                owner_references=[owner] if owner is not None else [],
            )
        )

    if owner is not None and not has_owner_reference(secret, owner):
        secret.owner_references.append(owner)
        secret = await store.update(secret)

    return secret


async def update_secret(store: ProtocolSecretStore, secret: ModelSecret) -> ModelSecret:
    """Persist ``secret`` and return the stored copy."""
    return await store.update(secret)


def _reconcile_map(current: dict[str, str], desired: dict[str, str]) -> bool:
    changed = False
    for key in list(current):
        if key not in desired:
            del current[key]
            changed = True
    for key, value in desired.items():
        if current.get(key) != value:
            current[key] = value
            changed = True
    return changed


def reconcile_metadata(
    secret: ModelSecret,
    labels: dict[str, str],
    annotations: dict[str, str],
) -> bool:
    """Make the secret's labels and annotations equal the desired sets.

    Keys absent from the desired sets are removed and every desired
    key/value is upserted. ``secret`` is modified in place.

    Returns:
        True if anything changed, so callers can skip no-op writes.

    Example:
        >>> secret.labels = {"a": "1", "b": "2"}
        >>> reconcile_metadata(secret, {"b": "2", "c": "3"}, {})
        True
        >>> secret.labels
        {'b': '2', 'c': '3'}
    """
    labels_changed = _reconcile_map(secret.labels, labels)
    annotations_changed = _reconcile_map(secret.annotations, annotations)
    return labels_changed or annotations_changed


__all__: list[str] = [
    "get_or_create_secret",
    "get_secret",
    "has_owner_reference",
    "reconcile_metadata",
    "update_secret",
]
