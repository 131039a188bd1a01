# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""HTTP Provider Models.

This module exports the Pydantic models describing managed resources, their
desired parameters and observed status, and the secret entities the
provider reads and writes.
"""

from omnibase_provider_http.models.model_disposable_request_parameters import (
    ModelDisposableRequestParameters,
)
from omnibase_provider_http.models.model_disposable_request_resource import (
    ModelDisposableRequestResource,
)
from omnibase_provider_http.models.model_disposable_request_status import (
    ModelDisposableRequestStatus,
)
from omnibase_provider_http.models.model_expected_response_check import (
    ModelExpectedResponseCheck,
)
from omnibase_provider_http.models.model_external_observation import (
    ModelExternalObservation,
)
from omnibase_provider_http.models.model_http_response import ModelHttpResponse
from omnibase_provider_http.models.model_key_mapping import ModelKeyMapping
from omnibase_provider_http.models.model_owner_reference import ModelOwnerReference
from omnibase_provider_http.models.model_payload import ModelPayload
from omnibase_provider_http.models.model_request_details import ModelRequestDetails
from omnibase_provider_http.models.model_request_mapping import ModelRequestMapping
from omnibase_provider_http.models.model_request_parameters import (
    ModelRequestParameters,
)
from omnibase_provider_http.models.model_request_resource import (
    ModelRequestResource,
)
from omnibase_provider_http.models.model_request_status import ModelRequestStatus
from omnibase_provider_http.models.model_response_cache import ModelResponseCache
from omnibase_provider_http.models.model_secret import ModelSecret
from omnibase_provider_http.models.model_secret_injection_config import (
    ModelSecretInjectionConfig,
)
from omnibase_provider_http.models.model_secret_metadata import ModelSecretMetadata
from omnibase_provider_http.models.model_secret_ref import ModelSecretRef

__all__: list[str] = [
    "ModelDisposableRequestParameters",
    "ModelDisposableRequestResource",
    "ModelDisposableRequestStatus",
    "ModelExpectedResponseCheck",
    "ModelExternalObservation",
    "ModelHttpResponse",
    "ModelKeyMapping",
    "ModelOwnerReference",
    "ModelPayload",
    "ModelRequestDetails",
    "ModelRequestMapping",
    "ModelRequestParameters",
    "ModelRequestResource",
    "ModelRequestStatus",
    "ModelResponseCache",
    "ModelSecret",
    "ModelSecretInjectionConfig",
    "ModelSecretMetadata",
    "ModelSecretRef",
]
