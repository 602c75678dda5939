"""Doctor command for environment diagnostics."""

from __future__ import annotations

import httpx
import typer
from rich.console import Console
from rich.table import Table

from adapters.authenticators import BearerTokenAuth, IamTokenAuth, build_auth
from adapters.http_client import build_client
from adapters.watson.compare_comply import DEFAULT_SERVICE_URL
from cli.ui_components import print_banner
from core.config import WatsonSettings, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _auth_mode(settings: WatsonSettings) -> tuple[str, str]:
    auth = build_auth(settings)
    if isinstance(auth, BearerTokenAuth):
        return "OK", "Bearer token (user managed)"
    if isinstance(auth, IamTokenAuth):
        return "OK", f"IAM API key -> {settings.iam_url}"
    if isinstance(auth, httpx.BasicAuth):
        return "OK", "Basic auth (username/password)"
    return "MISSING", "Set WATSON_APIKEY, WATSON_BEARER_TOKEN or WATSON_USERNAME/WATSON_PASSWORD"


def check_http(url: str, settings: WatsonSettings) -> tuple[bool, str]:
    """Best-effort reachability check: any HTTP status counts as reachable."""

    try:
        with build_client(settings) as client:
            response = client.get(url)
        return True, f"HTTP {response.status_code}"
    except httpx.HTTPError as exc:
        return False, str(exc)


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = WatsonSettings()
    service_url = settings.compare_comply_url or DEFAULT_SERVICE_URL

    table = Table(title="Watson SDK Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    status, detail = _auth_mode(settings)
    table.add_row("Credentials", status, detail)
    if settings.version:
        table.add_row("API version", "OK", settings.version)
    else:
        table.add_row("API version", "MISSING", "Set WATSON_VERSION (yyyy-MM-dd)")
    table.add_row("Compare and Comply URL", "OK", service_url)
    if settings.disable_ssl_verification:
        table.add_row("TLS", "WARN", "SSL verification disabled")

    ok_http, detail_http = check_http(service_url, settings)
    table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)


@app.command(name="setup")
def setup() -> None:
    """Interactive setup (stores config in the user config .env)."""

    print_banner(_console)
    url = typer.prompt("Compare and Comply URL", default=DEFAULT_SERVICE_URL, show_default=True).strip()
    version = typer.prompt("API version (yyyy-MM-dd)", default="2018-10-15", show_default=True).strip()
    apikey = typer.prompt("IBM Cloud API key", hide_input=True, confirmation_prompt=False).strip()

    if not url or not version or not apikey:
        raise typer.BadParameter("url, version and apikey are required")

    env_path = write_user_env_vars(
        {
            "WATSON_COMPARE_COMPLY_URL": url,
            "WATSON_VERSION": version,
            "WATSON_APIKEY": apikey,
        }
    )

    _console.print(f"[green]Saved config to:[/green] {env_path}")
