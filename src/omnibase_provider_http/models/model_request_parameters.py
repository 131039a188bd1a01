# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Request Parameters Model.

The desired state of a Request (its ``forProvider`` block): payload, default
headers, per-action mappings, the up-to-date check, retry limit, TLS policy
and secret injection rules.
"""

from __future__ import annotations


from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from omnibase_provider_http.enums import EnumRequestAction
from omnibase_provider_http.models.model_expected_response_check import (
    ModelExpectedResponseCheck,
)
from omnibase_provider_http.models.model_payload import ModelPayload
from omnibase_provider_http.models.model_request_mapping import ModelRequestMapping
from omnibase_provider_http.models.model_secret_injection_config import (
    ModelSecretInjectionConfig,
)
from omnibase_provider_http.utils.util_duration import Duration


class ModelRequestParameters(BaseModel):
    """Desired parameters of a Request, immutable for a reconcile cycle.

    Example:
        >>> params = ModelRequestParameters.model_validate(
        ...     {
        ...         "payload": {"baseUrl": "http://h/items", "body": '{"name": "x"}'},
        ...         "mappings": [
        ...             {"action": "CREATE", "url": ".payload.baseUrl",
        ...              "body": '{"name": .payload.body.name}'},
        ...         ],
        ...     }
        ... )
        >>> params.get_mapping(EnumRequestAction.CREATE).resolved_method
        'POST'
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    payload: ModelPayload = Field(default_factory=ModelPayload)
    headers: dict[str, list[str]] | None = Field(
        default=None,
        description="Default headers used by every mapping",
    )
    mappings: list[ModelRequestMapping] = Field(default_factory=list)
    expected_response_check: ModelExpectedResponseCheck | None = None
    rollback_retries_limit: int | None = Field(
        default=None,
        ge=0,
        description="Number of failed attempts after which reconciliation stops retrying",
    )
    insecure_skip_tls_verify: bool = Field(
        default=False,
        alias="insecureSkipTLSVerify",
    )
    wait_timeout: Duration | None = Field(
        default=None,
        description="Per-request timeout",
    )
    secret_injection_configs: list[ModelSecretInjectionConfig] = Field(
        default_factory=list,
    )

    def get_mapping(self, action: EnumRequestAction) -> ModelRequestMapping | None:
        """Return the first mapping serving ``action``, or None."""
        for mapping in self.mappings:
            if mapping.resolved_action == action:
                return mapping
        return None


__all__: list[str] = ["ModelRequestParameters"]
