# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Request Action Enumeration.

Actions a Request mapping can be bound to, and the HTTP method each action
uses when a mapping does not name one explicitly.
"""

from __future__ import annotations

from enum import Enum


class EnumRequestAction(str, Enum):
    """Lifecycle actions of a managed HTTP resource.

    Attributes:
        CREATE: Create the remote resource (default method POST)
        OBSERVE: Read the remote resource (default method GET)
        UPDATE: Update the remote resource (default method PUT)
        REMOVE: Delete the remote resource (default method DELETE)
    """

    CREATE = "CREATE"
    OBSERVE = "OBSERVE"
    UPDATE = "UPDATE"
    REMOVE = "REMOVE"

    @property
    def default_method(self) -> str:
        """HTTP method used when a mapping only declares its action."""
        return _DEFAULT_METHODS[self]

    @classmethod
    def from_method(cls, method: str) -> EnumRequestAction | None:
        """Return the action implied by an HTTP method, if any."""
        return _METHOD_ACTIONS.get(method.upper())


_DEFAULT_METHODS: dict[EnumRequestAction, str] = {
    EnumRequestAction.CREATE: "POST",
    EnumRequestAction.OBSERVE: "GET",
    EnumRequestAction.UPDATE: "PUT",
    EnumRequestAction.REMOVE: "DELETE",
}

_METHOD_ACTIONS: dict[str, EnumRequestAction] = {
    "POST": EnumRequestAction.CREATE,
    "GET": EnumRequestAction.OBSERVE,
    "PUT": EnumRequestAction.UPDATE,
    "PATCH": EnumRequestAction.UPDATE,
    "DELETE": EnumRequestAction.REMOVE,
}


__all__ = ["EnumRequestAction"]
