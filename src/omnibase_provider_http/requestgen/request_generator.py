# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Request Generator.

Renders a mapping into a concrete request by evaluating its URL, body and
header expressions against the query context of a resource.

Rendering rules:
    - The URL is a filter expression; its result must be non-empty.
    - The body is a filter expression when it looks like one (leading
      ``.``, ``{``, ``[``, ``(``, ``"``, ``$``, ``-``, a digit, or a jq
      keyword). Anything else is literal text, quoted and evaluated so
      constant bodies and expressions share one path.
    - Header values are filter expressions; a value that does not evaluate
      (``application/json``) is sent as written.
    - A rendered request holding the ``null`` marker referenced a field
      absent from the context and is not valid.

Secret placeholders pass through rendering untouched; they are resolved
right before sending.
"""

from __future__ import annotations

import json
import logging
import re

from pydantic import BaseModel

from omnibase_provider_http.enums import EnumInfraTransportType
from omnibase_provider_http.errors import (
    InvalidRequestError,
    ModelInfraErrorContext,
    QueryEvaluationError,
)
from omnibase_provider_http.models import (
    ModelHttpResponse,
    ModelRequestDetails,
    ModelRequestMapping,
)
from omnibase_provider_http.query import ProtocolQueryEvaluator
from omnibase_provider_http.requestgen.request_context import build_request_context

logger = logging.getLogger(__name__)

NULL_MARKER = "null"

_FILTER_LEADING_CHARACTERS = frozenset('.{[("$-')
_FILTER_KEYWORDS = frozenset(
    ("if", "try", "reduce", "foreach", "def", "not", "null", "true", "false")
)
_LEADING_WORD_PATTERN = re.compile(r"[A-Za-z_]+")


def body_to_query(body: str) -> str:
    """Return the filter expression that renders ``body``.

    Example:
        >>> body_to_query('{"name": .payload.body.name}')
        '{"name": .payload.body.name}'
        >>> body_to_query("plain text")
        '"plain text"'
    """
    text = body.lstrip()
    if not text:
        return ""
    if text[0] in _FILTER_LEADING_CHARACTERS or text[0].isdigit():
        return body
    word = _LEADING_WORD_PATTERN.match(text)
    if word is not None and word.group(0) in _FILTER_KEYWORDS:
        return body
    return json.dumps(body)


def merge_headers(
    mapping_headers: dict[str, list[str]] | None,
    default_headers: dict[str, list[str]] | None,
) -> dict[str, list[str]]:
    """Merge default headers with a mapping's headers, per header name.

    A header declared by the mapping replaces the default of the same name.
    """
    merged = {name: list(values) for name, values in (default_headers or {}).items()}
    for name, values in (mapping_headers or {}).items():
        merged[name] = list(values)
    return merged


def is_request_valid(details: ModelRequestDetails) -> bool:
    """Return True if ``details`` can be sent.

    The URL must be non-empty, and neither the URL, the body nor any header
    value may carry the ``null`` marker.
    """
    if not details.url:
        return False
    if NULL_MARKER in details.url or NULL_MARKER in details.body:
        return False
    for values in details.headers.values():
        if any(NULL_MARKER in value for value in values):
            return False
    return True


class RequestGenerator:
    """Renders mappings into request details.

    Rendering is pure: mappings, parameters and responses are read, never
    modified.

    Example:
        >>> generator = RequestGenerator(QueryEvaluatorJq())
        >>> details = generator.generate_request_details(
        ...     params.get_mapping(EnumRequestAction.CREATE), params, None
        ... )
        >>> details.url
        'http://h/items'
    """

    def __init__(self, evaluator: ProtocolQueryEvaluator) -> None:
        self._evaluator = evaluator

    def generate_request_details(
        self,
        mapping: ModelRequestMapping,
        parameters: BaseModel,
        response: ModelHttpResponse | None,
    ) -> ModelRequestDetails:
        """Render ``mapping`` against the parameters and one response.

        Args:
            mapping: Mapping to render.
            parameters: Desired parameters; default headers are read from
                their ``headers`` attribute.
            response: Live or cached response, or None.

        Returns:
            The rendered request. It may not be valid; see is_request_valid.

        Raises:
            QueryEvaluationError: If the URL or body expression fails.
        """
        context = build_request_context(parameters, response)

        url = self._evaluator.evaluate_text(mapping.url, context)

        body_query = body_to_query(mapping.body)
        body = self._evaluator.evaluate_text(body_query, context) if body_query else ""

        headers = self._generate_headers(
            merge_headers(mapping.headers, getattr(parameters, "headers", None)),
            context,
        )

        return ModelRequestDetails(
            method=mapping.resolved_method,
            url=url,
            body=body,
            headers=headers,
        )

    def generate_valid_request_details(
        self,
        mapping: ModelRequestMapping,
        parameters: BaseModel,
        response: ModelHttpResponse | None,
        cached_response: ModelHttpResponse | None,
    ) -> ModelRequestDetails:
        """Render ``mapping`` from the live response, falling back to the cache.

        The live response is tried first. When it does not render a valid
        request (an expression failed or a referenced field is missing), the
        cached response is used instead.

        Raises:
            QueryEvaluationError: If rendering from the cache fails.
            InvalidRequestError: If neither response renders a valid request.
        """
        try:
            details = self.generate_request_details(mapping, parameters, response)
        except QueryEvaluationError as e:
            logger.debug(
                "Rendering from live response failed, falling back to cache: %s",
                e.message,
                extra={"method": mapping.resolved_method},
            )
        else:
            if is_request_valid(details):
                return details
            logger.debug(
                "Live response rendered an incomplete request, falling back to cache",
                extra={"method": mapping.resolved_method},
            )

        details = self.generate_request_details(mapping, parameters, cached_response)
        if not is_request_valid(details):
            raise InvalidRequestError(
                f"{mapping.resolved_method} request could not be rendered: "
                "a referenced field is missing",
                context=ModelInfraErrorContext(
                    transport_type=EnumInfraTransportType.HTTP,
                    operation="generate_request_details",
                ),
                url=details.url,
            )
        return details

    def _generate_headers(
        self,
        headers: dict[str, list[str]],
        context: dict[str, object],
    ) -> dict[str, list[str]]:
        generated: dict[str, list[str]] = {}
        for name, values in headers.items():
            generated[name] = [self._generate_header_value(value, context) for value in values]
        return generated

    def _generate_header_value(self, value: str, context: dict[str, object]) -> str:
        try:
            return self._evaluator.evaluate_text(value, context)
        except QueryEvaluationError:
            return value


__all__: list[str] = [
    "NULL_MARKER",
    "RequestGenerator",
    "body_to_query",
    "is_request_valid",
    "merge_headers",
]
