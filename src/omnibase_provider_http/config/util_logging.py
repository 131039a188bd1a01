# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Logging bootstrap."""

from __future__ import annotations

import logging
import os
import sys

LOG_LEVEL_ENV = "PROVIDER_HTTP_LOG_LEVEL"
_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def configure_logging() -> None:
    """Set up root logging at the level named by ``PROVIDER_HTTP_LOG_LEVEL``.

    The level comes from the environment, not the provider config file, so
    problems while loading that file are already logged. Unknown levels fall
    back to INFO with a note on stderr.
    """
    level = os.getenv(LOG_LEVEL_ENV, "INFO").upper()
    if level not in _LEVELS:
        print(
            f"Invalid {LOG_LEVEL_ENV} '{level}', using INFO (expected one of {', '.join(_LEVELS)})",
            file=sys.stderr,
        )
        level = "INFO"

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


__all__: list[str] = ["LOG_LEVEL_ENV", "configure_logging"]
