# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Query evaluation.

Exports:
    ProtocolQueryEvaluator: Interface of filter-expression evaluators
    QueryEvaluatorJq: jq-backed implementation
"""

from omnibase_provider_http.query.protocol_query_evaluator import (
    ProtocolQueryEvaluator,
)
from omnibase_provider_http.query.query_evaluator_jq import QueryEvaluatorJq

__all__: list[str] = ["ProtocolQueryEvaluator", "QueryEvaluatorJq"]
