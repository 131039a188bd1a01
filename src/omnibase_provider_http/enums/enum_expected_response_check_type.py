# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Expected Response Check Type Enumeration."""

from enum import Enum


class EnumExpectedResponseCheckType(str, Enum):
    """How a Request decides whether the remote resource is up to date.

    Attributes:
        DEFAULT: The live body must contain every field of the desired body
        CUSTOM: A boolean query expression decides
    """

    DEFAULT = "DEFAULT"
    CUSTOM = "CUSTOM"


__all__ = ["EnumExpectedResponseCheckType"]
