# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for the secret store helpers."""

from __future__ import annotations

import pytest

from omnibase_provider_http.errors import SecretNotFoundError
from omnibase_provider_http.models import ModelOwnerReference, ModelSecret
from omnibase_provider_http.secretstore import (
    SecretStoreInMemory,
    get_or_create_secret,
    get_secret,
    has_owner_reference,
    reconcile_metadata,
)

pytestmark = pytest.mark.unit

OWNER = ModelOwnerReference(kind="Request", name="manage-user", uid="uid-1")


class TestGetSecret:
    @pytest.mark.asyncio
    async def test_existing(self, secret_store: SecretStoreInMemory) -> None:
        secret = await get_secret(secret_store, "auth", "default")
        assert secret.name == "auth"

    @pytest.mark.asyncio
    async def test_missing_raises(self, secret_store: SecretStoreInMemory) -> None:
        with pytest.raises(SecretNotFoundError, match="failed to get secret nope:default"):
            await get_secret(secret_store, "nope", "default")


class TestGetOrCreateSecret:
    """Tests for get_or_create_secret."""

    @pytest.mark.asyncio
    async def test_creates_with_metadata_and_owner(
        self, secret_store: SecretStoreInMemory
    ) -> None:
        secret = await get_or_create_secret(
            secret_store, "creds", "default", OWNER, {"app": "x"}, {"note": "y"}
        )
        assert secret.labels == {"app": "x"}
        assert secret.annotations == {"note": "y"}
        assert secret.owner_references == [OWNER]
        assert await secret_store.get("creds", "default") is not None

    @pytest.mark.asyncio
    async def test_creates_without_owner(self, secret_store: SecretStoreInMemory) -> None:
        secret = await get_or_create_secret(secret_store, "creds", "default", None, {}, {})
        assert secret.owner_references == []

    @pytest.mark.asyncio
    async def test_existing_gets_owner_added_once(
        self, secret_store: SecretStoreInMemory
    ) -> None:
        secret = await get_or_create_secret(secret_store, "auth", "default", OWNER, {}, {})
        assert secret.owner_references == [OWNER]
        assert secret.resource_version == "2"

        again = await get_or_create_secret(secret_store, "auth", "default", OWNER, {}, {})
        assert again.owner_references == [OWNER]
        assert again.resource_version == "2"

    @pytest.mark.asyncio
    async def test_existing_metadata_is_left_alone(
        self, secret_store: SecretStoreInMemory
    ) -> None:
        secret = await get_or_create_secret(
            secret_store, "auth", "default", None, {"new": "label"}, {}
        )
        assert secret.labels == {}


class TestMetadataHelpers:
    """Tests for has_owner_reference and reconcile_metadata."""

    def test_has_owner_reference_matches_uid(self) -> None:
        secret = ModelSecret(name="s", namespace="n", owner_references=[OWNER])
        assert has_owner_reference(secret, OWNER)
        other = ModelOwnerReference(kind="Request", name="manage-user", uid="uid-2")
        assert not has_owner_reference(secret, other)

    def test_reconcile_removes_and_upserts(self) -> None:
        secret = ModelSecret(
            name="s",
            namespace="n",
            labels={"a": "1", "b": "2"},
            annotations={"keep": "v"},
        )
        assert reconcile_metadata(secret, {"b": "3", "c": "4"}, {"keep": "v"})
        assert secret.labels == {"b": "3", "c": "4"}
        assert secret.annotations == {"keep": "v"}

    def test_reconcile_reports_no_change(self) -> None:
        secret = ModelSecret(name="s", namespace="n", labels={"a": "1"})
        assert not reconcile_metadata(secret, {"a": "1"}, {})
