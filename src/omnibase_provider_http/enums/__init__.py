# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""HTTP Provider Enumerations Module.

Exports:
    EnumExpectedResponseCheckType: Up-to-date check strategy (DEFAULT, CUSTOM)
    EnumInfraTransportType: Infrastructure transport type enumeration
    EnumRequestAction: Mapping action enumeration (CREATE, OBSERVE, UPDATE, REMOVE)
"""

from omnibase_provider_http.enums.enum_expected_response_check_type import (
    EnumExpectedResponseCheckType,
)
from omnibase_provider_http.enums.enum_infra_transport_type import (
    EnumInfraTransportType,
)
from omnibase_provider_http.enums.enum_request_action import EnumRequestAction

__all__: list[str] = [
    "EnumExpectedResponseCheckType",
    "EnumInfraTransportType",
    "EnumRequestAction",
]
