# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocol for Query Evaluators.

Mapping URLs, bodies, headers, up-to-date checks and secret injection paths
are filter expressions evaluated against a JSON-like context. The evaluator
is a pure function: it holds no per-call state and never mutates the
context it is given.

Example:
    >>> evaluator: ProtocolQueryEvaluator = QueryEvaluatorJq()
    >>> evaluator.evaluate_text(".payload.baseUrl", {"payload": {"baseUrl": "http://h"}})
    'http://h'
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ProtocolQueryEvaluator(Protocol):
    """Evaluates filter expressions against a JSON-like context.

    All methods raise QueryEvaluationError when the expression does not
    compile or fails at run time.
    """

    def evaluate(self, query: str, context: object) -> object:
        """Return the first value produced by ``query``, or None if it
        produces nothing."""
        ...

    def evaluate_text(self, query: str, context: object) -> str:
        """Return the first value produced by ``query`` as text.

        Strings are returned verbatim; any other value, ``null`` included,
        is rendered as compact JSON.
        """
        ...

    def evaluate_bool(self, query: str, context: object) -> bool:
        """Return the boolean produced by ``query``.

        Raises:
            QueryEvaluationError: If the result is not a boolean.
        """
        ...


__all__: list[str] = ["ProtocolQueryEvaluator"]
