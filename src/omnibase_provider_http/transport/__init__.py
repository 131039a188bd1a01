# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""HTTP transport.

Exports:
    ProtocolHttpTransport: Interface used by the reconcilers
    HttpTransport: httpx-based implementation
    ModelHttpTransportConfig: Transport configuration
"""

from omnibase_provider_http.transport.handler_http import HttpTransport
from omnibase_provider_http.transport.model_http_transport_config import (
    ModelHttpTransportConfig,
)
from omnibase_provider_http.transport.protocol_http_transport import (
    ProtocolHttpTransport,
)

__all__: list[str] = [
    "HttpTransport",
    "ModelHttpTransportConfig",
    "ProtocolHttpTransport",
]
