# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Response redaction.

Moves sensitive response values into secrets and replaces them with their
placeholders, so a response is only ever persisted in redacted form.

For each secret injection rule:
    1. Every (secret key, response path) pair is evaluated against the
       original response. Strings are used as is, booleans as
       ``"true"``/``"false"``; anything else, including a failed
       expression, is an empty value and is skipped with an INFO log.
    2. Every occurrence of an extracted value in the body and header values
       of the redacted copy is replaced with ``{{name:namespace:key}}``.
       Text inside placeholders inserted earlier is left alone.
    3. Label and annotation expressions are rendered against the original
       response and their placeholders resolved.
    4. The secret is fetched or created, changed keys are written, metadata
       is reconciled, and the secret is updated only if something changed.

A failing rule is logged at WARNING and the next rule still runs. The
values that rule extracted stay redacted in the returned response.
"""

from __future__ import annotations

import logging

from omnibase_provider_http.datapatcher.secret_injector import (
    patch_secrets_into_string_map,
)
from omnibase_provider_http.datapatcher.util_placeholder import (
    format_placeholder,
    replace_outside_placeholders,
)
from omnibase_provider_http.errors import QueryEvaluationError, RuntimeHostError
from omnibase_provider_http.models import (
    ModelHttpResponse,
    ModelOwnerReference,
    ModelSecretInjectionConfig,
)
from omnibase_provider_http.query import ProtocolQueryEvaluator
from omnibase_provider_http.requestgen.request_context import build_response_context
from omnibase_provider_http.secretstore import (
    ProtocolSecretStore,
    get_or_create_secret,
    reconcile_metadata,
    update_secret,
)

logger = logging.getLogger(__name__)


def extract_response_value(
    evaluator: ProtocolQueryEvaluator,
    context: dict[str, object],
    response_path: str,
) -> str:
    """Evaluate ``response_path`` and return its value as text, or ``""``."""
    try:
        value = evaluator.evaluate(response_path, context)
    except QueryEvaluationError:
        value = None

    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str) and value:
        return value

    logger.info(
        "Value at field %s is empty, skipping",
        response_path,
        extra={"response_path": response_path},
    )
    return ""


def _render_metadata(
    evaluator: ProtocolQueryEvaluator,
    context: dict[str, object],
    expressions: dict[str, str],
) -> dict[str, str]:
    return {
        key: extract_response_value(evaluator, context, expression)
        for key, expression in expressions.items()
    }


def _redact(
    body: str,
    headers: dict[str, list[str]],
    value: str,
    placeholder: str,
) -> tuple[str, dict[str, list[str]]]:
    redacted_headers = {
        name: [replace_outside_placeholders(item, value, placeholder) for item in values]
        for name, values in headers.items()
    }
    return replace_outside_placeholders(body, value, placeholder), redacted_headers


async def _store_values(
    store: ProtocolSecretStore,
    evaluator: ProtocolQueryEvaluator,
    context: dict[str, object],
    config: ModelSecretInjectionConfig,
    values: dict[str, str],
    owner: ModelOwnerReference | None,
) -> None:
    labels = await patch_secrets_into_string_map(
        store, _render_metadata(evaluator, context, config.metadata.labels)
    )
    annotations = await patch_secrets_into_string_map(
        store, _render_metadata(evaluator, context, config.metadata.annotations)
    )

    secret = await get_or_create_secret(
        store,
        config.secret_ref.name,
        config.secret_ref.namespace,
        owner,
        labels,
        annotations,
    )

    data_changed = False
    for secret_key, value in values.items():
        encoded = value.encode("utf-8")
        if secret.data.get(secret_key) != encoded:
            secret.data[secret_key] = encoded
            data_changed = True

    metadata_changed = reconcile_metadata(secret, labels, annotations)
    if data_changed or metadata_changed:
        await update_secret(store, secret)


async def patch_response_values_to_secrets(
    store: ProtocolSecretStore,
    evaluator: ProtocolQueryEvaluator,
    response: ModelHttpResponse,
    owner: ModelOwnerReference,
    configs: list[ModelSecretInjectionConfig],
) -> ModelHttpResponse:
    """Extract secret values from ``response`` and return a redacted copy.

    Args:
        store: Secret store receiving the extracted values.
        evaluator: Evaluates response paths and metadata expressions.
        response: Response as received; it is not modified.
        owner: Resource owning secrets of rules with ``setOwnerReference``.
        configs: Secret injection rules, applied in order.

    Returns:
        The response with every extracted value replaced by its placeholder.
    """
    if not configs:
        return response

    context = build_response_context(response)
    body = response.body
    headers = {name: list(values) for name, values in response.headers.items()}

    for config in configs:
        ref = config.secret_ref
        values: dict[str, str] = {}
        for key_mapping in config.resolved_key_mappings():
            value = extract_response_value(evaluator, context, key_mapping.response_path)
            if not value:
                continue
            values[key_mapping.secret_key] = value
            placeholder = format_placeholder(ref.name, ref.namespace, key_mapping.secret_key)
            body, headers = _redact(body, headers, value, placeholder)

        if not values:
            continue

        try:
            await _store_values(
                store,
                evaluator,
                context,
                config,
                values,
                owner if config.set_owner_reference else None,
            )
        except RuntimeHostError as e:
            logger.warning(
                "Couldn't patch data from response to secret %s:%s: %s",
                ref.name,
                ref.namespace,
                e.message,
                extra={
                    "secret_name": ref.name,
                    "secret_namespace": ref.namespace,
                    "secret_keys": sorted(values),
                },
            )

    return response.model_copy(update={"body": body, "headers": headers})


__all__: list[str] = ["extract_response_value", "patch_response_values_to_secrets"]
