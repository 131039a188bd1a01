# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for SecretStoreInMemory."""

from __future__ import annotations

import pytest

from omnibase_provider_http.errors import SecretConflictError, SecretNotFoundError
from omnibase_provider_http.models import ModelSecret
from omnibase_provider_http.secretstore import ProtocolSecretStore, SecretStoreInMemory
from tests.conftest import assert_has_async_methods

pytestmark = pytest.mark.unit


class TestSecretStoreInMemory:
    """Tests for the in-memory store."""

    def test_satisfies_protocol(self, secret_store: SecretStoreInMemory) -> None:
        assert isinstance(secret_store, ProtocolSecretStore)
        assert_has_async_methods(
            secret_store, ["get", "create", "update"], protocol_name="ProtocolSecretStore"
        )

    @pytest.mark.asyncio
    async def test_get_seeded_secret(self, secret_store: SecretStoreInMemory) -> None:
        secret = await secret_store.get("auth", "default")
        assert secret is not None
        assert secret.data["token"] == b"s3cr3t-token"
        assert secret.resource_version == "1"

    @pytest.mark.asyncio
    async def test_get_missing_returns_none(self, secret_store: SecretStoreInMemory) -> None:
        assert await secret_store.get("auth", "other") is None

    @pytest.mark.asyncio
    async def test_returned_copies_are_private(
        self, secret_store: SecretStoreInMemory
    ) -> None:
        secret = await secret_store.get("auth", "default")
        assert secret is not None
        secret.data["token"] = b"changed"
        again = await secret_store.get("auth", "default")
        assert again is not None
        assert again.data["token"] == b"s3cr3t-token"

    @pytest.mark.asyncio
    async def test_create(self, secret_store: SecretStoreInMemory) -> None:
        created = await secret_store.create(
            ModelSecret(name="creds", namespace="default", data={"k": b"v"})
        )
        assert created.resource_version == "1"
        assert await secret_store.get("creds", "default") == created

    @pytest.mark.asyncio
    async def test_create_existing_conflicts(self, secret_store: SecretStoreInMemory) -> None:
        with pytest.raises(SecretConflictError, match="already exists"):
            await secret_store.create(ModelSecret(name="auth", namespace="default"))

    @pytest.mark.asyncio
    async def test_update_bumps_version(self, secret_store: SecretStoreInMemory) -> None:
        secret = await secret_store.get("auth", "default")
        assert secret is not None
        secret.data["token"] = b"rotated"
        updated = await secret_store.update(secret)
        assert updated.resource_version == "2"
        stored = await secret_store.get("auth", "default")
        assert stored is not None
        assert stored.data["token"] == b"rotated"

    @pytest.mark.asyncio
    async def test_stale_update_conflicts(self, secret_store: SecretStoreInMemory) -> None:
        first = await secret_store.get("auth", "default")
        second = await secret_store.get("auth", "default")
        assert first is not None and second is not None
        await secret_store.update(first)
        with pytest.raises(SecretConflictError, match="modified concurrently"):
            await secret_store.update(second)

    @pytest.mark.asyncio
    async def test_update_missing_raises(self, secret_store: SecretStoreInMemory) -> None:
        with pytest.raises(SecretNotFoundError):
            await secret_store.update(ModelSecret(name="nope", namespace="default"))
