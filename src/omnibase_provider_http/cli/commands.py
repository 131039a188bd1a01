# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""
HTTP Provider CLI Commands.

Runs single reconcile cycles of Request and DisposableRequest manifests
outside a control plane. Status is persisted to a JSON state file between
runs.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from omnibase_provider_http.cli.status_writer_json import StatusWriterJsonFile
from omnibase_provider_http.config import (
    ManagedResource,
    ModelProviderConfig,
    configure_logging,
    load_manifest,
    load_provider_config,
    load_secrets,
    load_state,
)
from omnibase_provider_http.controller import (
    DisposableRequestReconciler,
    RequestReconciler,
)
from omnibase_provider_http.enums import EnumRequestAction
from omnibase_provider_http.errors import MappingNotFoundError, RuntimeHostError
from omnibase_provider_http.models import (
    ModelExternalObservation,
    ModelRequestResource,
)
from omnibase_provider_http.query import QueryEvaluatorJq
from omnibase_provider_http.requestgen import RequestGenerator
from omnibase_provider_http.secretstore import (
    ProtocolSecretStore,
    SecretStoreInMemory,
    SecretStoreVault,
)
from omnibase_provider_http.transport import HttpTransport

console = Console()

_manifest_argument = click.argument(
    "manifest", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
_state_option = click.option(
    "--state",
    "state_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="JSON state file holding the resource status between runs",
)
_config_option = click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Provider configuration YAML (VAULT_ADDR / VAULT_TOKEN also apply)",
)
_secrets_option = click.option(
    "--secrets",
    "secrets_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Seed secrets for the in-memory secret store (ignored with Vault)",
)


@click.group()
def cli() -> None:
    """Reconcile HTTP-backed Request and DisposableRequest resources."""
    configure_logging()


def _fail(error: RuntimeHostError) -> None:
    console.print(f"[bold red]Error:[/bold red] {escape(error.message)}")
    raise SystemExit(1)


def _load(manifest: Path, state_path: Path | None) -> ManagedResource:
    resource = load_manifest(manifest)
    if state_path is not None:
        load_state(resource, state_path)
    return resource


# =============================================================================
# render
# =============================================================================


@cli.command("render")
@_manifest_argument
@click.option(
    "--action",
    type=click.Choice([a.value for a in EnumRequestAction], case_sensitive=False),
    default=EnumRequestAction.CREATE.value,
    show_default=True,
)
@_state_option
def render_cmd(manifest: Path, action: str, state_path: Path | None) -> None:
    """Render the request of ACTION without sending it.

    Secret placeholders are shown as written.
    """
    try:
        resource = _load(manifest, state_path)
        if not isinstance(resource, ModelRequestResource):
            raise click.UsageError("render only supports Request manifests")

        request_action = EnumRequestAction(action.upper())
        mapping = resource.for_provider.get_mapping(request_action)
        if mapping is None:
            raise MappingNotFoundError(request_action.value)

        cache = resource.status.cache
        details = RequestGenerator(QueryEvaluatorJq()).generate_valid_request_details(
            mapping,
            resource.for_provider,
            resource.status.response,
            cache.response if cache is not None else None,
        )
    except RuntimeHostError as e:
        _fail(e)
        return

    table = Table(title=f"{resource.name}: {request_action.value}")
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("Method", details.method)
    table.add_row("URL", escape(details.url))
    table.add_row("Body", escape(details.body))
    for name, values in details.headers.items():
        table.add_row(f"Header {escape(name)}", escape(", ".join(values)))
    console.print(table)


# =============================================================================
# reconcile / delete
# =============================================================================


async def _open_secret_store(
    config: ModelProviderConfig,
    secrets_path: Path | None,
) -> ProtocolSecretStore:
    if config.vault is not None:
        store = SecretStoreVault(config.vault)
        await store.initialize()
        return store
    return SecretStoreInMemory(load_secrets(secrets_path) if secrets_path else None)


async def _run(
    command: str,
    manifest: Path,
    state_path: Path | None,
    config_path: Path | None,
    secrets_path: Path | None,
) -> tuple[ManagedResource, ModelExternalObservation | bool]:
    """Run ``command`` against MANIFEST.

    Returns the resource with its observation, or for ``delete`` whether a
    REMOVE request was sent.
    """
    config = load_provider_config(config_path)
    resource = _load(manifest, state_path)
    writer = StatusWriterJsonFile(state_path) if state_path is not None else None

    store = await _open_secret_store(config, secrets_path)
    try:
        async with HttpTransport(config.http) as transport:
            evaluator = QueryEvaluatorJq()
            if isinstance(resource, ModelRequestResource):
                reconciler = RequestReconciler(transport, store, evaluator, writer)
                if command == "delete":
                    return resource, await reconciler.delete(resource)
                return resource, await reconciler.reconcile(resource)

            disposable = DisposableRequestReconciler(transport, store, evaluator, writer)
            if command == "delete":
                return resource, await disposable.delete(resource)
            return resource, await disposable.reconcile(resource)
    finally:
        if isinstance(store, SecretStoreVault):
            await store.shutdown()


def _print_summary(
    resource: ManagedResource,
    observation: ModelExternalObservation | None,
) -> None:
    table = Table(title=f"{resource.kind} {resource.name}")
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    if observation is not None:
        table.add_row("Existed", str(observation.resource_exists))
        table.add_row("Up to date", str(observation.resource_up_to_date))
    status = resource.status
    if status.response is not None:
        table.add_row("Status code", str(status.response.status_code))
    table.add_row("Failed attempts", str(status.failed))
    if status.error:
        table.add_row("Error", f"[red]{escape(status.error)}[/red]")
    console.print(table)


@cli.command("reconcile")
@_manifest_argument
@_state_option
@_config_option
@_secrets_option
def reconcile_cmd(
    manifest: Path,
    state_path: Path | None,
    config_path: Path | None,
    secrets_path: Path | None,
) -> None:
    """Run one reconcile cycle of MANIFEST."""
    try:
        resource, observation = asyncio.run(
            _run("reconcile", manifest, state_path, config_path, secrets_path)
        )
    except RuntimeHostError as e:
        _fail(e)
        return
    assert isinstance(observation, ModelExternalObservation)
    _print_summary(resource, observation)


@cli.command("delete")
@_manifest_argument
@_state_option
@_config_option
@_secrets_option
def delete_cmd(
    manifest: Path,
    state_path: Path | None,
    config_path: Path | None,
    secrets_path: Path | None,
) -> None:
    """Send the REMOVE request of MANIFEST."""
    try:
        resource, sent = asyncio.run(
            _run("delete", manifest, state_path, config_path, secrets_path)
        )
    except RuntimeHostError as e:
        _fail(e)
        return
    if sent:
        console.print(f"[bold green]Removed {escape(resource.name)}[/bold green]")
    else:
        console.print(f"[yellow]Nothing sent for {escape(resource.name)}[/yellow]")


__all__: list[str] = ["cli"]
