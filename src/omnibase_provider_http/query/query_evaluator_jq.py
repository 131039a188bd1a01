# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""jq-backed Query Evaluator.

Implements ProtocolQueryEvaluator on top of the ``jq`` bindings. Compiled
programs are cached process-wide; a compiled program is immutable and safe
to share between reconcile cycles.
"""

from __future__ import annotations

import json
from functools import lru_cache
from typing import Any

import jq

from omnibase_provider_http.enums import EnumInfraTransportType
from omnibase_provider_http.errors import ModelInfraErrorContext, QueryEvaluationError

_PROGRAM_CACHE_SIZE = 512


@lru_cache(maxsize=_PROGRAM_CACHE_SIZE)
def _compile(query: str) -> Any:
    return jq.compile(query)


def _error_context(operation: str) -> ModelInfraErrorContext:
    return ModelInfraErrorContext(
        transport_type=EnumInfraTransportType.RUNTIME,
        operation=operation,
    )


class QueryEvaluatorJq:
    """Query evaluator using the jq language.

    Example:
        >>> evaluator = QueryEvaluatorJq()
        >>> evaluator.evaluate_text('{"name": .payload.body.name}', context)
        '{"name":"x"}'
    """

    def evaluate(self, query: str, context: object) -> object:
        try:
            program = _compile(query)
        except ValueError as e:
            raise QueryEvaluationError(
                f"invalid query {query!r}: {e}",
                context=_error_context("compile_query"),
            ) from e

        try:
            results = program.input_value(context).all()
        except ValueError as e:
            raise QueryEvaluationError(
                f"query {query!r} failed: {e}",
                context=_error_context("evaluate_query"),
            ) from e

        if not results:
            return None
        return results[0]

    def evaluate_text(self, query: str, context: object) -> str:
        value = self.evaluate(query, context)
        if isinstance(value, str):
            return value
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False)

    def evaluate_bool(self, query: str, context: object) -> bool:
        value = self.evaluate(query, context)
        if not isinstance(value, bool):
            raise QueryEvaluationError(
                f"query {query!r} did not produce a boolean",
                context=_error_context("evaluate_bool_query"),
                result_type=type(value).__name__,
            )
        return value


__all__: list[str] = ["QueryEvaluatorJq"]
