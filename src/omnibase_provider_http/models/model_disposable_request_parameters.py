# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Disposable Request Parameters Model.

A disposable request is sent once (or once per ``nextReconcile`` period when
looping) and is never updated or deleted remotely. Its URL, body and headers
are literal text; only secret placeholders are substituted.
"""

from __future__ import annotations


from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from omnibase_provider_http.models.model_secret_injection_config import (
    ModelSecretInjectionConfig,
)
from omnibase_provider_http.utils.util_duration import Duration


class ModelDisposableRequestParameters(BaseModel):
    """Desired parameters of a DisposableRequest.

    Attributes:
        url: Request URL
        method: HTTP method
        headers: Request headers
        body: Request body
        wait_timeout: Per-request timeout
        rollback_retries_limit: Failed attempts after which sending stops
        insecure_skip_tls_verify: Skip TLS certificate verification
        expected_response: Boolean query expression the response must satisfy
        should_loop_infinitely: Send again every ``next_reconcile`` period
        next_reconcile: Period between sends when looping
        secret_injection_configs: Secret injection rules
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    url: str = Field(min_length=1)
    method: str = Field(min_length=1)
    headers: dict[str, list[str]] = Field(default_factory=dict)
    body: str = ""
    wait_timeout: Duration | None = None
    rollback_retries_limit: int | None = Field(default=None, ge=0)
    insecure_skip_tls_verify: bool = Field(
        default=False,
        alias="insecureSkipTLSVerify",
    )
    expected_response: str = ""
    should_loop_infinitely: bool = False
    next_reconcile: Duration | None = None
    secret_injection_configs: list[ModelSecretInjectionConfig] = Field(
        default_factory=list,
    )


__all__: list[str] = ["ModelDisposableRequestParameters"]
