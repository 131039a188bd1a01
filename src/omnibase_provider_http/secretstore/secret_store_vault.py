# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""HashiCorp Vault Secret Store - KV v2 via the hvac client.

Storage Layout:
    Each secret is one KV v2 entry at ``<path_prefix>/<namespace>/<name>``.
    Data values are base64-encoded (secret data is opaque bytes). Labels,
    annotations and owner references are kept as JSON strings in the
    entry's ``custom_metadata``.

Concurrency:
    The KV version is the secret's ``resource_version``. Creates write with
    ``cas=0`` and updates with ``cas=<version>``, so a write based on a
    stale read is rejected and surfaced as SecretConflictError.

Security Features:
    - SecretStr protection for the token (prevents accidental logging)
    - Error messages name paths and operations, never secret values
    - SSL verification enabled by default

Thread Pool Management:
    hvac is synchronous. Every call runs in a bounded ThreadPoolExecutor
    via ``loop.run_in_executor`` with the configured timeout, so the event
    loop is never blocked.
"""

from __future__ import annotations

import asyncio
import base64
import binascii
import json
import logging
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from typing import TypeVar

import hvac
import hvac.exceptions

from omnibase_provider_http.enums import EnumInfraTransportType
from omnibase_provider_http.errors import (
    InfraAuthenticationError,
    InfraConnectionError,
    InfraTimeoutError,
    InfraUnavailableError,
    ModelInfraErrorContext,
    RuntimeHostError,
    SecretConflictError,
    SecretNotFoundError,
)
from omnibase_provider_http.models import ModelOwnerReference, ModelSecret
from omnibase_provider_http.secretstore.model_vault_secret_store_config import (
    ModelVaultSecretStoreConfig,
)

T = TypeVar("T")

logger = logging.getLogger(__name__)

_META_LABELS = "labels"
_META_ANNOTATIONS = "annotations"
_META_OWNER_REFERENCES = "owner_references"


class SecretStoreVault:
    """Secret store backed by a Vault KV v2 secrets engine.

    Lifecycle:
        >>> store = SecretStoreVault(config)
        >>> await store.initialize()
        >>> secret = await store.get("auth", "default")
        >>> await store.shutdown()
    """

    def __init__(self, config: ModelVaultSecretStoreConfig) -> None:
        self._config = config
        self._client: hvac.Client | None = None
        self._executor: ThreadPoolExecutor | None = None

    async def initialize(self) -> None:
        """Create the hvac client and thread pool and verify authentication.

        Raises:
            InfraAuthenticationError: If Vault rejects the token.
            InfraConnectionError: If Vault cannot be reached.
        """
        self._client = hvac.Client(
            url=self._config.url,
            token=self._config.token.get_secret_value() if self._config.token else "",
            namespace=self._config.namespace,
            verify=self._config.verify_ssl,
            timeout=self._config.timeout_seconds,
        )
        self._executor = ThreadPoolExecutor(
            max_workers=self._config.max_concurrent_operations,
            thread_name_prefix="vault_secret_store_",
        )

        client = self._client
        authenticated = await self._execute("initialize", client.is_authenticated, "")
        if not authenticated:
            await self.shutdown()
            raise InfraAuthenticationError(
                "Vault authentication failed - check VAULT_TOKEN",
                context=self._error_context("initialize", ""),
            )

        logger.info(
            "Vault secret store initialized",
            extra={
                "url": self._config.url,
                "mount_point": self._config.mount_point,
                "path_prefix": self._config.path_prefix,
            },
        )

    async def shutdown(self) -> None:
        """Release the thread pool and client."""
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None
        # hvac.Client has no async close, just drop the reference
        self._client = None

    def secret_path(self, name: str, namespace: str) -> str:
        """Return the KV path of secret ``namespace/name``."""
        prefix = self._config.path_prefix.strip("/")
        if not prefix:
            return f"{namespace}/{name}"
        return f"{prefix}/{namespace}/{name}"

    async def get(self, name: str, namespace: str) -> ModelSecret | None:
        path = self.secret_path(name, namespace)
        client = self._require_client("get_secret", name)

        def read_func() -> dict[str, object]:
            result: dict[str, object] = client.secrets.kv.v2.read_secret_version(
                path=path,
                mount_point=self._config.mount_point,
                raise_on_deleted_version=True,
            )
            return result

        try:
            result = await self._execute("get_secret", read_func, name)
        except hvac.exceptions.InvalidPath:
            return await self._get_without_live_version(client, path, name, namespace)

        return self._secret_from_response(name, namespace, result)

    async def _get_without_live_version(
        self,
        client: hvac.Client,
        path: str,
        name: str,
        namespace: str,
    ) -> ModelSecret | None:
        """Return the secret at ``path`` when only its latest version is deleted.

        KV metadata survives soft deletes, so the secret still exists for
        writes: it is returned without data, versioned at the current KV
        version, and the next write checks-and-sets against that version.
        """

        def metadata_func() -> dict[str, object]:
            result: dict[str, object] = client.secrets.kv.v2.read_secret_metadata(
                path=path,
                mount_point=self._config.mount_point,
            )
            return result

        try:
            result = await self._execute("get_secret", metadata_func, name)
        except hvac.exceptions.InvalidPath:
            return None

        data_obj = result.get("data", {})
        metadata = data_obj if isinstance(data_obj, dict) else {}
        logger.info(
            "Latest Vault version of secret is deleted",
            extra={"secret_name": name, "secret_namespace": namespace},
        )
        return self._build_secret(
            name,
            namespace,
            {},
            metadata.get("custom_metadata") or {},
            metadata.get("current_version", ""),
        )

    async def create(self, secret: ModelSecret) -> ModelSecret:
        try:
            version = await self._write(secret, cas=0, operation="create_secret")
        except hvac.exceptions.InvalidRequest as e:
            raise SecretConflictError(
                f"secret {secret.namespace}/{secret.name} already exists",
                context=self._error_context("create_secret", secret.name),
            ) from e
        return secret.model_copy(deep=True, update={"resource_version": str(version)})

    async def update(self, secret: ModelSecret) -> ModelSecret:
        if not secret.resource_version:
            raise SecretNotFoundError(
                f"secret {secret.namespace}/{secret.name} has not been created",
                context=self._error_context("update_secret", secret.name),
            )
        try:
            version = await self._write(
                secret,
                cas=int(secret.resource_version),
                operation="update_secret",
            )
        except hvac.exceptions.InvalidRequest as e:
            raise SecretConflictError(
                f"secret {secret.namespace}/{secret.name} was modified concurrently",
                context=self._error_context("update_secret", secret.name),
                resource_version=secret.resource_version,
            ) from e
        return secret.model_copy(deep=True, update={"resource_version": str(version)})

    async def _write(self, secret: ModelSecret, cas: int, operation: str) -> int:
        path = self.secret_path(secret.name, secret.namespace)
        client = self._require_client(operation, secret.name)
        encoded = {
            key: base64.b64encode(value).decode("ascii")
            for key, value in secret.data.items()
        }
        custom_metadata = {
            _META_LABELS: json.dumps(secret.labels, sort_keys=True),
            _META_ANNOTATIONS: json.dumps(secret.annotations, sort_keys=True),
            _META_OWNER_REFERENCES: json.dumps(
                [ref.model_dump(by_alias=True) for ref in secret.owner_references]
            ),
        }

        def write_func() -> dict[str, object]:
            result: dict[str, object] = client.secrets.kv.v2.create_or_update_secret(
                path=path,
                secret=encoded,
                cas=cas,
                mount_point=self._config.mount_point,
            )
            return result

        def metadata_func() -> object:
            return client.secrets.kv.v2.update_metadata(
                path=path,
                custom_metadata=custom_metadata,
                mount_point=self._config.mount_point,
            )

        result = await self._execute(operation, write_func, secret.name)
        await self._execute(operation, metadata_func, secret.name)

        data_obj = result.get("data", {})
        data_dict = data_obj if isinstance(data_obj, dict) else {}
        version = data_dict.get("version")
        if not isinstance(version, int):
            raise RuntimeHostError(
                "Vault write response did not include a version",
                context=self._error_context(operation, secret.name),
            )
        logger.debug(
            "Wrote secret to Vault",
            extra={
                "operation": operation,
                "secret_name": secret.name,
                "secret_namespace": secret.namespace,
                "version": version,
            },
        )
        return version

    def _secret_from_response(
        self,
        name: str,
        namespace: str,
        result: dict[str, object],
    ) -> ModelSecret:
        data_obj = result.get("data", {})
        data_dict = data_obj if isinstance(data_obj, dict) else {}
        secret_data = data_dict.get("data") or {}
        metadata = data_dict.get("metadata") or {}
        custom_metadata = metadata.get("custom_metadata") or {}

        decoded: dict[str, bytes] = {}
        for key, value in secret_data.items():
            try:
                decoded[key] = base64.b64decode(str(value), validate=True)
            except (binascii.Error, ValueError) as e:
                raise RuntimeHostError(
                    "Vault secret holds a value that is not base64-encoded",
                    context=self._error_context("get_secret", name),
                    secret_key=key,
                ) from e

        return self._build_secret(
            name,
            namespace,
            decoded,
            custom_metadata,
            metadata.get("version", ""),
        )

    @staticmethod
    def _build_secret(
        name: str,
        namespace: str,
        data: dict[str, bytes],
        custom_metadata: dict[str, str],
        version: object,
    ) -> ModelSecret:
        owner_references = [
            ModelOwnerReference.model_validate(ref)
            for ref in json.loads(custom_metadata.get(_META_OWNER_REFERENCES, "[]"))
        ]
        return ModelSecret(
            name=name,
            namespace=namespace,
            labels=json.loads(custom_metadata.get(_META_LABELS, "{}")),
            annotations=json.loads(custom_metadata.get(_META_ANNOTATIONS, "{}")),
            owner_references=owner_references,
            data=data,
            resource_version=str(version),
        )

    def _require_client(self, operation: str, target_name: str) -> hvac.Client:
        if self._client is None or self._executor is None:
            raise RuntimeHostError(
                "Vault secret store not initialized - call initialize() first",
                context=self._error_context(operation, target_name),
            )
        return self._client

    def _error_context(self, operation: str, target_name: str) -> ModelInfraErrorContext:
        return ModelInfraErrorContext(
            transport_type=EnumInfraTransportType.VAULT,
            operation=operation,
            target_name=target_name or self._config.url,
        )

    async def _execute(self, operation: str, func: Callable[[], T], target_name: str) -> T:
        """Run a synchronous hvac call in the thread pool with a timeout.

        InvalidPath and InvalidRequest propagate unchanged for the caller to
        interpret; every other failure is mapped to a provider error.
        """
        loop = asyncio.get_running_loop()
        try:
            return await asyncio.wait_for(
                loop.run_in_executor(self._executor, func),
                timeout=self._config.timeout_seconds,
            )
        except TimeoutError as e:
            raise InfraTimeoutError(
                f"Vault operation timed out after {self._config.timeout_seconds}s",
                context=self._error_context(operation, target_name),
                timeout_seconds=self._config.timeout_seconds,
            ) from e
        except hvac.exceptions.Forbidden as e:
            raise InfraAuthenticationError(
                "Vault operation forbidden - check token permissions",
                context=self._error_context(operation, target_name),
            ) from e
        except hvac.exceptions.VaultDown as e:
            raise InfraUnavailableError(
                "Vault server is unavailable",
                context=self._error_context(operation, target_name),
            ) from e
        except (hvac.exceptions.InvalidPath, hvac.exceptions.InvalidRequest):
            raise
        except Exception as e:
            raise InfraConnectionError(
                f"Vault operation failed: {type(e).__name__}",
                context=self._error_context(operation, target_name),
            ) from e


__all__: list[str] = ["SecretStoreVault"]
