# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Provider Configuration and Manifest Loading.

Loads the provider configuration and resource manifests from YAML files,
and previously persisted resource status from JSON state files.

Security:
    - Uses yaml.safe_load() to prevent arbitrary code execution
    - Vault credentials come from VAULT_ADDR / VAULT_TOKEN, so tokens do
      not have to live in configuration files
    - Validation errors report field locations only, never input values,
      because manifests may carry resolved secret material in bodies
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Union

import yaml
from pydantic import ValidationError

from omnibase_provider_http.config.model_provider_config import ModelProviderConfig
from omnibase_provider_http.enums import EnumInfraTransportType
from omnibase_provider_http.errors import (
    ModelInfraErrorContext,
    ProtocolConfigurationError,
)
from omnibase_provider_http.models import (
    ModelDisposableRequestResource,
    ModelDisposableRequestStatus,
    ModelRequestResource,
    ModelRequestStatus,
    ModelSecret,
)

logger = logging.getLogger(__name__)

VAULT_ADDR_ENV = "VAULT_ADDR"
VAULT_TOKEN_ENV = "VAULT_TOKEN"

# Security: prevent memory exhaustion from oversized files
MAX_CONFIG_SIZE_BYTES = 10 * 1024 * 1024

ManagedResource = Union[ModelRequestResource, ModelDisposableRequestResource]


def _context(operation: str, path: Path) -> ModelInfraErrorContext:
    return ModelInfraErrorContext(
        transport_type=EnumInfraTransportType.FILESYSTEM,
        operation=operation,
        target_name=str(path),
    )


def _describe_validation_error(error: ValidationError) -> str:
    locations = [
        ".".join(str(part) for part in item["loc"]) + f": {item['msg']}"
        for item in error.errors(include_input=False, include_url=False)
    ]
    return "; ".join(locations)


def _read_text(path: Path, operation: str) -> str:
    if not path.exists():
        raise ProtocolConfigurationError(
            f"File not found: {path}",
            context=_context(operation, path),
        )
    file_size = path.stat().st_size
    if file_size > MAX_CONFIG_SIZE_BYTES:
        raise ProtocolConfigurationError(
            f"File too large: {file_size} bytes (max {MAX_CONFIG_SIZE_BYTES})",
            context=_context(operation, path),
        )
    return path.read_text(encoding="utf-8")


def _read_yaml_mapping(path: Path, operation: str) -> dict[str, object]:
    text = _read_text(path, operation)
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ProtocolConfigurationError(
            f"Invalid YAML in {path}: {e}",
            context=_context(operation, path),
        ) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ProtocolConfigurationError(
            f"{path} must contain a mapping, got {type(data).__name__}",
            context=_context(operation, path),
        )
    return data


def load_provider_config(path: Path | None = None) -> ModelProviderConfig:
    """Load the provider configuration.

    Args:
        path: YAML configuration file. Defaults apply when omitted.

    Returns:
        The validated configuration. ``VAULT_ADDR`` and ``VAULT_TOKEN``
        override the ``vault`` block's ``url`` and ``token``; ``VAULT_ADDR``
        alone enables the Vault secret store.

    Raises:
        ProtocolConfigurationError: If the file is missing or invalid.
    """
    data: dict[str, object] = (
        _read_yaml_mapping(path, "load_provider_config") if path is not None else {}
    )

    vault_addr = os.getenv(VAULT_ADDR_ENV)
    vault_token = os.getenv(VAULT_TOKEN_ENV)
    vault_block = data.get("vault")
    if vault_addr or (vault_block is not None and vault_token):
        vault: dict[str, object] = dict(vault_block) if isinstance(vault_block, dict) else {}
        if vault_addr:
            vault["url"] = vault_addr
        if vault_token:
            vault["token"] = vault_token
        data["vault"] = vault

    try:
        config = ModelProviderConfig.model_validate(data)
    except ValidationError as e:
        raise ProtocolConfigurationError(
            f"Invalid provider configuration: {_describe_validation_error(e)}",
            context=_context("load_provider_config", path or Path(".")),
        ) from e

    logger.debug(
        "Loaded provider configuration",
        extra={
            "config_path": str(path) if path is not None else None,
            "vault_enabled": config.vault is not None,
        },
    )
    return config


def load_manifest(path: Path) -> ManagedResource:
    """Load a Request or DisposableRequest manifest.

    The manifest follows the resource's wire shape::

        kind: Request
        metadata:
          name: manage-user
        spec:
          forProvider:
            payload: {baseUrl: ..., body: ...}
            mappings: [...]
        status: {...}          # optional

    Raises:
        ProtocolConfigurationError: If the file is missing, the kind is not
            supported, or the manifest does not validate.
    """
    data = _read_yaml_mapping(path, "load_manifest")

    kind = data.get("kind")
    model: type[ManagedResource]
    if kind == "Request":
        model = ModelRequestResource
    elif kind == "DisposableRequest":
        model = ModelDisposableRequestResource
    else:
        raise ProtocolConfigurationError(
            f"Unsupported manifest kind: {kind!r}",
            context=_context("load_manifest", path),
        )

    metadata = data.get("metadata")
    spec = data.get("spec")
    if not isinstance(metadata, dict) or not isinstance(spec, dict):
        raise ProtocolConfigurationError(
            "Manifest requires 'metadata' and 'spec' mappings",
            context=_context("load_manifest", path),
        )

    fields: dict[str, object] = {
        "name": metadata.get("name"),
        "forProvider": spec.get("forProvider"),
    }
    if metadata.get("uid"):
        fields["uid"] = str(metadata["uid"])
    if isinstance(data.get("status"), dict):
        fields["status"] = data["status"]

    try:
        resource = model.model_validate(fields)
    except ValidationError as e:
        raise ProtocolConfigurationError(
            f"Invalid {kind} manifest: {_describe_validation_error(e)}",
            context=_context("load_manifest", path),
        ) from e

    logger.debug(
        "Loaded manifest",
        extra={"kind": kind, "resource": resource.name, "manifest_path": str(path)},
    )
    return resource


def load_state(resource: ManagedResource, path: Path) -> None:
    """Replace ``resource.status`` with the status stored in a JSON state file.

    A missing state file leaves the status untouched.

    Raises:
        ProtocolConfigurationError: If the file is not a valid status document.
    """
    if not path.exists():
        return

    text = _read_text(path, "load_state")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ProtocolConfigurationError(
            f"Invalid JSON in state file {path}: {e.msg}",
            context=_context("load_state", path),
        ) from e

    status_model: Union[type[ModelRequestStatus], type[ModelDisposableRequestStatus]] = (
        ModelRequestStatus
        if isinstance(resource, ModelRequestResource)
        else ModelDisposableRequestStatus
    )
    try:
        resource.status = status_model.model_validate(data)
    except ValidationError as e:
        raise ProtocolConfigurationError(
            f"Invalid state file: {_describe_validation_error(e)}",
            context=_context("load_state", path),
        ) from e


def load_secrets(path: Path) -> list[ModelSecret]:
    """Load seed secrets for the in-memory secret store.

    The file lists secrets with plain-text values::

        secrets:
          - name: auth
            namespace: default
            stringData:
              token: s3cr3t

    Raises:
        ProtocolConfigurationError: If the file is missing or malformed.
    """
    data = _read_yaml_mapping(path, "load_secrets")
    entries = data.get("secrets", [])
    if not isinstance(entries, list):
        raise ProtocolConfigurationError(
            "'secrets' must be a list",
            context=_context("load_secrets", path),
        )

    secrets: list[ModelSecret] = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise ProtocolConfigurationError(
                f"secrets[{index}] must be a mapping",
                context=_context("load_secrets", path),
            )
        string_data = entry.get("stringData") or {}
        if not isinstance(string_data, dict):
            raise ProtocolConfigurationError(
                f"secrets[{index}].stringData must be a mapping",
                context=_context("load_secrets", path),
            )
        try:
            secrets.append(
                ModelSecret(
                    name=entry.get("name"),
                    namespace=entry.get("namespace"),
                    data={str(k): str(v).encode("utf-8") for k, v in string_data.items()},
                )
            )
        except ValidationError as e:
            raise ProtocolConfigurationError(
                f"Invalid secrets[{index}]: {_describe_validation_error(e)}",
                context=_context("load_secrets", path),
            ) from e
    return secrets


__all__: list[str] = [
    "MAX_CONFIG_SIZE_BYTES",
    "ManagedResource",
    "VAULT_ADDR_ENV",
    "VAULT_TOKEN_ENV",
    "load_manifest",
    "load_provider_config",
    "load_secrets",
    "load_state",
]
