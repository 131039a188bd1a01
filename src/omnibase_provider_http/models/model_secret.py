# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Secret Model.

The secret entity exchanged with secret store adapters. Instances handed out
by an adapter are private copies: callers mutate them freely and persist the
result through ``update``.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from omnibase_provider_http.models.model_owner_reference import ModelOwnerReference


class ModelSecret(BaseModel):
    """A named, namespaced secret with metadata and byte-valued data.

    Attributes:
        name: Secret name
        namespace: Secret namespace
        labels: Label map
        annotations: Annotation map
        owner_references: Owners whose deletion removes this secret
        data: Secret data, opaque bytes per key
        resource_version: Version the copy was read at, used for
            optimistic concurrency on update; empty before creation
    """

    model_config = ConfigDict(extra="forbid")

    name: str = Field(min_length=1)
    namespace: str = Field(min_length=1)
    labels: dict[str, str] = Field(default_factory=dict)
    annotations: dict[str, str] = Field(default_factory=dict)
    owner_references: list[ModelOwnerReference] = Field(default_factory=list)
    data: dict[str, bytes] = Field(default_factory=dict)
    resource_version: str = ""

    def __repr__(self) -> str:
        # Data values are never rendered.
        return (
            f"ModelSecret(name={self.name!r}, namespace={self.namespace!r}, "
            f"keys={sorted(self.data)!r}, resource_version={self.resource_version!r})"
        )

    __str__ = __repr__


__all__: list[str] = ["ModelSecret"]
