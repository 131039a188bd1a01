# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Request Mapping Model.

A mapping binds one lifecycle action to the query expressions that render
its URL, body and headers.
"""

from __future__ import annotations


from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from omnibase_provider_http.enums import EnumRequestAction


class ModelRequestMapping(BaseModel):
    """Declarative mapping for a single action.

    Either ``action`` or ``method`` must be declared. A missing method is
    taken from the action's default; a missing action is implied by the
    method (POST creates, GET observes, PUT/PATCH update, DELETE removes).

    Example:
        >>> mapping = ModelRequestMapping(
        ...     action=EnumRequestAction.OBSERVE,
        ...     url='(.payload.baseUrl + "/" + (.response.body.id|tostring))',
        ... )
        >>> mapping.resolved_method
        'GET'
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    action: EnumRequestAction | None = Field(
        default=None,
        description="Lifecycle action this mapping serves",
    )
    method: str | None = Field(
        default=None,
        description="Explicit HTTP method, overrides the action default",
    )
    url: str = Field(
        description="Query expression rendering the request URL",
    )
    body: str = Field(
        default="",
        description="Query expression (or literal text) rendering the body",
    )
    headers: dict[str, list[str]] | None = Field(
        default=None,
        description="Per-header query expressions, merged over default headers",
    )

    @model_validator(mode="after")
    def _require_action_or_method(self) -> ModelRequestMapping:
        if self.action is None and not self.method:
            raise ValueError("mapping must declare an action or a method")
        if self.action is None and EnumRequestAction.from_method(self.method or "") is None:
            raise ValueError(f"method {self.method!r} does not imply an action")
        return self

    @property
    def resolved_action(self) -> EnumRequestAction:
        """Action served by this mapping."""
        action = self.action or EnumRequestAction.from_method(self.method or "")
        if action is None:
            raise ValueError(f"method {self.method!r} does not imply an action")
        return action

    @property
    def resolved_method(self) -> str:
        """HTTP method used when sending this mapping's request."""
        if self.method:
            return self.method.upper()
        return self.resolved_action.default_method


__all__: list[str] = ["ModelRequestMapping"]
