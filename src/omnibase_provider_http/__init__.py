# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""ONEX HTTP Provider - Declarative HTTP resources with secret-safe status.

Reconciles Request and DisposableRequest resources against HTTP APIs:
requests are rendered from jq expressions, ``{{name:namespace:key}}``
placeholders are resolved from a secret store just before sending, and
response values declared sensitive are moved into secrets before the
response is stored.

Key Components:
    - RequestReconciler / DisposableRequestReconciler: reconcile cycles
    - RequestGenerator: mapping rendering with live-then-cache fallback
    - datapatcher: placeholder resolution and response redaction
    - Secret stores: in-memory and HashiCorp Vault (KV v2)
    - HttpTransport: httpx-based transport with size limits and timeouts
"""

__all__: list[str] = []
