"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from adapters.employees_api import EmployeesApiClient
from core.config import AppSettings, get_user_env_file, load_settings, write_user_env_vars
from core.errors import EmployeeDeskError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _settings(ctx: typer.Context) -> AppSettings:
    settings = getattr(ctx.obj, "settings", None)
    return settings if isinstance(settings, AppSettings) else load_settings()


async def _check_api(settings: AppSettings) -> tuple[bool, str]:
    try:
        employees = await EmployeesApiClient(settings).list_employees()
    except EmployeeDeskError as exc:
        return False, exc.message
    return True, f"{len(employees)} record(s)"


@app.command()
def run(ctx: typer.Context) -> None:
    """Show the effective configuration and check the API is reachable."""

    settings = _settings(ctx)

    table = Table(title="employee-desk Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    user_env = get_user_env_file()
    table.add_row("API base URL", "OK", settings.api_base_url)
    table.add_row("Timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    table.add_row("Language", "OK", settings.default_language.label())
    table.add_row("User config", "OK" if user_env.exists() else "NONE", str(user_env))

    ok_api, detail_api = asyncio.run(_check_api(settings))
    table.add_row("API reachable", "OK" if ok_api else "FAIL", detail_api)

    _console.print(table)
    if not ok_api:
        raise typer.Exit(code=1)


@app.command(name="set-url")
def set_url(url: str = typer.Argument(..., help="Base URL of the employees resource.")) -> None:
    """Store the API base URL in the user config .env."""

    url = url.strip().rstrip("/")
    if not url.startswith(("http://", "https://")):
        raise typer.BadParameter("url must start with http:// or https://")

    env_path = write_user_env_vars({"EMPLOYEE_DESK_API_BASE_URL": url})
    _console.print(f"[green]Saved API base URL to:[/green] {env_path}")
