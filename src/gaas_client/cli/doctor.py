"""Doctor command for configuration and connectivity diagnostics."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from gaas_client.core.config import ENV_PREFIX, AppSettings, write_user_env_vars
from gaas_client.core.errors import ServiceError
from gaas_client.core.services.service_client import ServiceClient

app = typer.Typer(no_args_is_help=True, help="Configuration and connectivity checks.")

_console = Console()


def _open_client(settings: AppSettings) -> ServiceClient:
    return ServiceClient.from_settings(settings)


def _check_service(settings: AppSettings) -> tuple[bool, str, bool, str]:
    """Anonymous info call, then an authenticated bundle listing."""

    with _open_client(settings) as client:
        try:
            info = client.get_service_info()
        except ServiceError as exc:
            return False, str(exc), False, "skipped"
        reach = f"{len(info.supported_translation)} MT source languages"
        try:
            bundle_ids = client.get_bundle_ids()
        except ServiceError as exc:
            return True, reach, False, str(exc)
    return True, reach, True, f"{len(bundle_ids)} bundles visible"


@app.command()
def run() -> None:
    """Show the effective configuration and test the service endpoint."""

    settings = AppSettings()

    table = Table(title="gaas-client Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Service URL", "OK" if settings.url else "MISSING", settings.url or f"{ENV_PREFIX}URL")
    table.add_row(
        "Instance ID",
        "OK" if settings.instance_id else "MISSING",
        settings.instance_id or f"{ENV_PREFIX}INSTANCE_ID",
    )
    table.add_row("User ID", "OK" if settings.user_id else "MISSING", settings.user_id or f"{ENV_PREFIX}USER_ID")
    table.add_row(
        "Password",
        "OK" if settings.password else "MISSING",
        "(hidden)" if settings.password else f"{ENV_PREFIX}PASSWORD",
    )
    table.add_row("Auth scheme", "OK", settings.auth_scheme.value)

    missing = settings.missing_account_fields()
    ok_http = False
    if missing:
        table.add_row("Service endpoint", "SKIPPED", "incomplete configuration")
        table.add_row("Credentials", "SKIPPED", "incomplete configuration")
    else:
        ok_http, detail_http, ok_auth, detail_auth = _check_service(settings)
        table.add_row("Service endpoint", "OK" if ok_http else "FAIL", detail_http)
        table.add_row("Credentials", "OK" if ok_auth else "FAIL", detail_auth)

    _console.print(table)

    if missing:
        _console.print(
            "\n[yellow]Note:[/yellow] run `gaas doctor setup` or set "
            + ", ".join(missing)
            + " in the environment / .env."
        )


@app.command()
def setup() -> None:
    """Interactive setup (stores credentials in the user config .env)."""

    current = AppSettings()

    url = typer.prompt("Service URL", default=current.url or "", show_default=True).strip()
    instance_id = typer.prompt("Instance ID", default=current.instance_id or "", show_default=True).strip()
    user_id = typer.prompt("User ID", default=current.user_id or "", show_default=True).strip()
    password = typer.prompt("Password", hide_input=True, confirmation_prompt=False).strip()
    scheme = typer.prompt("Auth scheme (HMAC/BASIC)", default=current.auth_scheme.value).strip().upper()

    if not url or not instance_id or not user_id or not password:
        raise typer.BadParameter("url, instance id, user id and password are required")
    if scheme not in ("HMAC", "BASIC"):
        raise typer.BadParameter("auth scheme must be HMAC or BASIC")

    env_path = write_user_env_vars(
        {
            f"{ENV_PREFIX}URL": url,
            f"{ENV_PREFIX}INSTANCE_ID": instance_id,
            f"{ENV_PREFIX}USER_ID": user_id,
            f"{ENV_PREFIX}PASSWORD": password,
            f"{ENV_PREFIX}AUTH_SCHEME": scheme,
        }
    )

    _console.print(f"[green]Saved service config to:[/green] {env_path}")
