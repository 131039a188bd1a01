# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Placeholder resolution.

Substitutes ``{{name:namespace:key}}`` placeholders with the secret values
they stand for, right before a request is sent. Callers' structures are
never modified: every function returns a fresh copy.

Resolution is all or nothing per value: when a referenced secret or key is
missing the error propagates and no partially resolved value is returned.
"""

from __future__ import annotations

import logging

from omnibase_provider_http.datapatcher.util_placeholder import find_placeholders
from omnibase_provider_http.enums import EnumInfraTransportType
from omnibase_provider_http.errors import ModelInfraErrorContext, SecretResolutionError
from omnibase_provider_http.models import ModelSecret
from omnibase_provider_http.secretstore import ProtocolSecretStore, get_secret

logger = logging.getLogger(__name__)


async def _resolve_value(
    store: ProtocolSecretStore,
    value: str,
    secrets: dict[tuple[str, str], ModelSecret],
) -> str:
    for placeholder in find_placeholders(value):
        cache_key = (placeholder.namespace, placeholder.name)
        secret = secrets.get(cache_key)
        if secret is None:
            secret = await get_secret(store, placeholder.name, placeholder.namespace)
            secrets[cache_key] = secret

        if placeholder.key not in secret.data:
            raise SecretResolutionError(
                f"key {placeholder.key!r} not found in secret "
                f"{placeholder.name}:{placeholder.namespace}",
                context=ModelInfraErrorContext(
                    transport_type=EnumInfraTransportType.SECRET_STORE,
                    operation="resolve_placeholder",
                    target_name=placeholder.name,
                ),
                secret_namespace=placeholder.namespace,
                secret_key=placeholder.key,
            )

        replacement = secret.data[placeholder.key].decode("utf-8", errors="replace")
        value = value.replace(placeholder.text, replacement)
    return value


async def patch_secrets_into_string(store: ProtocolSecretStore, value: str) -> str:
    """Return ``value`` with every placeholder replaced by its secret value.

    Raises:
        PlaceholderFormatError: If a placeholder is malformed.
        SecretNotFoundError: If a referenced secret does not exist.
        SecretResolutionError: If a referenced key is absent from its secret.

    Example:
        >>> await patch_secrets_into_string(store, "prefix {{s:n:k}} suffix")
        'prefix v suffix'
    """
    return await _resolve_value(store, value, {})


async def patch_secrets_into_headers(
    store: ProtocolSecretStore,
    headers: dict[str, list[str]],
) -> dict[str, list[str]]:
    """Return a copy of ``headers`` with placeholders resolved in every value."""
    secrets: dict[tuple[str, str], ModelSecret] = {}
    patched: dict[str, list[str]] = {}
    for name, values in headers.items():
        patched[name] = [await _resolve_value(store, value, secrets) for value in values]
    return patched


async def _patch_tree(
    store: ProtocolSecretStore,
    value: object,
    secrets: dict[tuple[str, str], ModelSecret],
) -> object:
    if isinstance(value, str):
        return await _resolve_value(store, value, secrets)
    if isinstance(value, dict):
        return {key: await _patch_tree(store, item, secrets) for key, item in value.items()}
    if isinstance(value, list):
        return [await _patch_tree(store, item, secrets) for item in value]
    return value


async def patch_secrets_into_map(
    store: ProtocolSecretStore,
    data: dict[str, object],
) -> dict[str, object]:
    """Return a deep copy of ``data`` with placeholders resolved in every
    string, including strings nested in dicts and lists."""
    patched = await _patch_tree(store, data, {})
    assert isinstance(patched, dict)
    return patched


async def patch_secrets_into_string_map(
    store: ProtocolSecretStore,
    data: dict[str, str],
) -> dict[str, str]:
    """Return a copy of ``data`` with placeholders resolved in every value."""
    secrets: dict[tuple[str, str], ModelSecret] = {}
    return {key: await _resolve_value(store, value, secrets) for key, value in data.items()}


__all__: list[str] = [
    "patch_secrets_into_headers",
    "patch_secrets_into_map",
    "patch_secrets_into_string",
    "patch_secrets_into_string_map",
]
