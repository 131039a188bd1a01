# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Query context construction.

A mapping is rendered against one context object holding the desired
parameters under their wire names (``payload``, ``headers``, ``mappings``,
...) and the chosen response under ``response``. Embedded JSON strings are
inflated so ``.payload.body.name`` and ``.response.body.id`` resolve.
"""

from __future__ import annotations


from pydantic import BaseModel

from omnibase_provider_http.models import ModelHttpResponse
from omnibase_provider_http.utils.util_json import inflate_json_strings


def response_to_context(response: ModelHttpResponse | None) -> dict[str, object]:
    """Return the ``response`` region for ``response``.

    Empty fields are omitted, so a missing body reads as ``null`` in
    expressions instead of an empty string.
    """
    if response is None:
        return {}
    return response.model_dump(mode="json", by_alias=True, exclude_defaults=True)


def build_request_context(
    parameters: BaseModel,
    response: ModelHttpResponse | None,
) -> dict[str, object]:
    """Build the context a mapping is rendered against.

    Args:
        parameters: Desired parameters of the resource.
        response: Live or cached response; None when there is neither.

    Returns:
        A new, inflated context. Neither argument is modified.
    """
    context: dict[str, object] = parameters.model_dump(
        mode="json",
        by_alias=True,
        exclude_none=True,
    )
    context["response"] = response_to_context(response)
    inflated = inflate_json_strings(context)
    assert isinstance(inflated, dict)
    return inflated


def build_response_context(response: ModelHttpResponse) -> dict[str, object]:
    """Build the context used by response paths and expected-response checks.

    Holds ``statusCode``, ``body`` and ``headers`` of the response at the top
    level, inflated.
    """
    context: dict[str, object] = {
        "statusCode": response.status_code,
        "body": response.body,
        "headers": {name: list(values) for name, values in response.headers.items()},
    }
    inflated = inflate_json_strings(context)
    assert isinstance(inflated, dict)
    return inflated


__all__: list[str] = [
    "build_request_context",
    "build_response_context",
    "response_to_context",
]
