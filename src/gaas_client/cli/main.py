"""`gaas` command-line interface (Typer + Rich).

Exit codes follow the error kind of `ServiceError`:
- 0: success
- 2: invalid argument (nothing was sent)
- 3: the service rejected the operation
- 4: transport/protocol failure
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from gaas_client.cli import doctor
from gaas_client.cli.ui_components import (
    build_bundle_ids_table,
    build_bundle_panel,
    build_strings_table,
    build_supported_translation_table,
)
from gaas_client.core.errors import ErrorKind, ServiceError
from gaas_client.core.services.service_client import ServiceClient

SUCCESS_EXIT_CODE = 0
INVALID_ARGUMENT_EXIT_CODE = 2
LOGICAL_ERROR_EXIT_CODE = 3
PROTOCOL_ERROR_EXIT_CODE = 4

_EXIT_CODES = {
    ErrorKind.INVALID_ARGUMENT: INVALID_ARGUMENT_EXIT_CODE,
    ErrorKind.LOGICAL: LOGICAL_ERROR_EXIT_CODE,
    ErrorKind.PROTOCOL: PROTOCOL_ERROR_EXIT_CODE,
}

app = typer.Typer(
    no_args_is_help=True,
    help="Command-line client for the translation-management service.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _open_client() -> ServiceClient:
    return ServiceClient.from_settings()


def _run(action: Callable[[ServiceClient], Any]) -> Any:
    """Run one client call and map `ServiceError` to an exit code."""

    try:
        with _open_client() as client:
            return action(client)
    except ServiceError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=_EXIT_CODES[exc.kind]) from exc


def _load_strings(path: Path) -> dict[str, str | None]:
    """Read a flat JSON object; `null` values mark keys for deletion."""

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, ValueError) as exc:
        raise typer.BadParameter(f"cannot read {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise typer.BadParameter(f"{path} must contain a JSON object")
    for key, value in data.items():
        if value is not None and not isinstance(value, str):
            raise typer.BadParameter(f"{path}: value of {key!r} must be a string or null")
    return data


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log each request (method, path, status, duration) to stderr.",
    ),
) -> None:
    """Global options."""

    _configure_logging(verbose)


@app.command()
def info() -> None:
    """Show the machine translation pairs supported by the service."""

    service_info = _run(lambda client: client.get_service_info())
    _console.print(build_supported_translation_table(service_info))


@app.command()
def bundles() -> None:
    """List the bundles of the configured instance."""

    bundle_ids = _run(lambda client: client.get_bundle_ids())
    _console.print(build_bundle_ids_table(bundle_ids))


@app.command()
def bundle(bundle_id: str = typer.Argument(..., help="Bundle ID")) -> None:
    """Show one bundle's languages and metadata."""

    data = _run(lambda client: client.get_bundle_info(bundle_id))
    _console.print(build_bundle_panel(bundle_id, data))


@app.command()
def strings(
    bundle_id: str = typer.Argument(..., help="Bundle ID"),
    language: str = typer.Argument(..., help="Language tag"),
    fallback: bool = typer.Option(False, "--fallback", help="Fill missing keys from the source language"),
    as_json: bool = typer.Option(False, "--json", help="Emit JSON output"),
) -> None:
    """Show the resource strings of one language."""

    values = _run(lambda client: client.get_resource_strings(bundle_id, language, fallback))
    if as_json:
        typer.echo(json.dumps(values, ensure_ascii=False, sort_keys=True))
        return
    _console.print(build_strings_table(bundle_id, language, values))


@app.command()
def upload(
    bundle_id: str = typer.Argument(..., help="Bundle ID"),
    language: str = typer.Argument(..., help="Language tag"),
    file: Path = typer.Argument(..., help="JSON object with key -> value"),
) -> None:
    """Replace the strings of one language with the file contents.

    On the source language, keys missing from the file are deleted.
    """

    values = _load_strings(file)
    _run(lambda client: client.upload_resource_strings(bundle_id, language, values))
    _console.print(f"[green]Uploaded {len(values)} strings to {escape(bundle_id)}/{escape(language)}[/green]")


@app.command()
def update(
    bundle_id: str = typer.Argument(..., help="Bundle ID"),
    language: str = typer.Argument(..., help="Language tag"),
    file: Path | None = typer.Argument(None, help="JSON object with key -> value or null"),
    resync: bool = typer.Option(False, "--resync", help="Recompute the language from the source"),
) -> None:
    """Merge the file contents into one language (`null` deletes a key)."""

    values = _load_strings(file) if file is not None else None
    _run(lambda client: client.update_resource_strings(bundle_id, language, values, resync))
    count = len(values) if values else 0
    suffix = " (resync)" if resync else ""
    _console.print(f"[green]Updated {count} strings in {escape(bundle_id)}/{escape(language)}{suffix}[/green]")


def run() -> None:
    app()
