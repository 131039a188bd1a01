# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Reconcilers for Request and DisposableRequest resources."""

from omnibase_provider_http.controller.disposable_request_reconciler import (
    DisposableRequestReconciler,
)
from omnibase_provider_http.controller.protocol_resource_status_writer import (
    ProtocolResourceStatusWriter,
)
from omnibase_provider_http.controller.reconciler_base import ReconcilerBase, utc_now
from omnibase_provider_http.controller.request_reconciler import RequestReconciler

__all__: list[str] = [
    "DisposableRequestReconciler",
    "ProtocolResourceStatusWriter",
    "ReconcilerBase",
    "RequestReconciler",
    "utc_now",
]
