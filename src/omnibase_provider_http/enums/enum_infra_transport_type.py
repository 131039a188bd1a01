# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Infrastructure Transport Type Enumeration.

Defines the transport types the provider talks to. Used for error context
and log metadata.
"""

from enum import Enum


class EnumInfraTransportType(str, Enum):
    """Infrastructure transport types used by the HTTP provider.

    Attributes:
        HTTP: HTTP/REST API transport (the managed external resource)
        VAULT: HashiCorp Vault secret transport
        SECRET_STORE: Generic secret store transport (in-memory or custom)
        RUNTIME: Reconciler-internal processing (templating, redaction)
        FILESYSTEM: Local configuration and manifest files
    """

    HTTP = "http"
    VAULT = "vault"
    SECRET_STORE = "secret_store"
    RUNTIME = "runtime"
    FILESYSTEM = "filesystem"


__all__ = ["EnumInfraTransportType"]
