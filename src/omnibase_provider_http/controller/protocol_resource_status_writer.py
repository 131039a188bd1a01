# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocol for persisting resource status.

The reconcilers replace a resource's status as a cycle progresses and hand
the resource to a status writer after every change. Persisting the
resource record is the control plane's business; the CLI writes a JSON
state file.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from pydantic import BaseModel


@runtime_checkable
class ProtocolResourceStatusWriter(Protocol):
    """Persists the status of a resource."""

    async def write_status(self, resource: BaseModel) -> None:
        """Persist ``resource.status``."""
        ...


__all__: list[str] = ["ProtocolResourceStatusWriter"]
