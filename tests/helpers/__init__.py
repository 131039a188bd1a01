# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Test helpers for omnibase_provider_http unit tests.

Available Utilities:
    - ScriptedTransport: HTTP transport double answering from a script
    - RecordingStatusWriter: Status writer double
    - SentRequest: A request as the transport received it
"""

from tests.helpers.doubles import RecordingStatusWriter, ScriptedTransport, SentRequest

__all__: list[str] = ["RecordingStatusWriter", "ScriptedTransport", "SentRequest"]
