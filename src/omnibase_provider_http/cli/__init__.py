# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Command-line interface."""

from omnibase_provider_http.cli.commands import cli
from omnibase_provider_http.cli.status_writer_json import StatusWriterJsonFile

__all__: list[str] = ["StatusWriterJsonFile", "cli"]
