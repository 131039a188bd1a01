# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Shared fixtures for unit tests.

Provides an in-memory secret store, a scripted HTTP transport that records
every request it is asked to send, and the jq query evaluator.
"""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from omnibase_provider_http.models import ModelSecret
from omnibase_provider_http.query import QueryEvaluatorJq
from omnibase_provider_http.secretstore import SecretStoreInMemory
from tests.helpers import RecordingStatusWriter, ScriptedTransport

FIXED_NOW = datetime(2025, 1, 15, 10, 30, 45, tzinfo=UTC)


@pytest.fixture
def evaluator() -> QueryEvaluatorJq:
    """Provide the jq query evaluator."""
    return QueryEvaluatorJq()


@pytest.fixture
def secret_store() -> SecretStoreInMemory:
    """Provide an in-memory store seeded with an auth secret."""
    return SecretStoreInMemory(
        [
            ModelSecret(
                name="auth",
                namespace="default",
                data={"token": b"s3cr3t-token", "user": b"admin"},
            )
        ]
    )


@pytest.fixture
def transport() -> ScriptedTransport:
    """Provide a scripted transport with an empty script."""
    return ScriptedTransport()


@pytest.fixture
def status_writer() -> RecordingStatusWriter:
    """Provide a recording status writer."""
    return RecordingStatusWriter()


@pytest.fixture
def fixed_clock() -> datetime:
    """Provide the fixed time returned by reconciler clocks."""
    return FIXED_NOW
