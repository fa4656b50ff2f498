"""CLI de employee-desk (Typer).

Por qué una CLI:
- Ofrece los mismos flujos que el front-end original (listar/buscar, alta,
  edición, baja con confirmación) sin depender de una UI gráfica.
- Toda la lógica vive en `core.services`; aquí solo hay I/O de consola.
"""

from __future__ import annotations

import asyncio
from collections.abc import Coroutine
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, TypeVar

import typer
from rich.console import Console
from rich.markup import escape

from adapters.employees_api import EmployeesApiClient
from adapters.json_exporter import export_employees_json
from cli import doctor
from cli.ui_components import build_employee_panel, build_employees_table, describe_error
from core.config import AppSettings, load_settings
from core.domain.language import Language
from core.domain.models import Employee
from core.errors import EmployeeDeskError
from core.interfaces.repository import EmployeeRepository
from core.logging_config import configure_logging
from core.services.employee_directory import load_employees, remove_employee, save_employee

T = TypeVar("T")

app = typer.Typer(no_args_is_help=True, help="Manage employee records stored in a remote REST resource.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


@dataclass
class CliState:
    settings: AppSettings
    language: Language


def build_repository(settings: AppSettings) -> EmployeeRepository:
    return EmployeesApiClient(settings)


def _state(ctx: typer.Context) -> CliState:
    if isinstance(ctx.obj, CliState):
        return ctx.obj
    settings = load_settings()
    return CliState(settings=settings, language=settings.default_language)


def _run(state: CliState, work: Coroutine[Any, Any, T]) -> T:
    """Ejecuta la corrutina y traduce errores de dominio a salida + exit 1."""

    try:
        return asyncio.run(work)
    except EmployeeDeskError as exc:
        _console.print(f"[red]{escape(describe_error(exc, state.language))}[/red]")
        raise typer.Exit(code=1) from exc


def _print_list(employees: list[Employee], state: CliState) -> None:
    if not employees:
        _console.print(f"[dim]{state.language.text('empty_list')}[/dim]")
        return
    _console.print(build_employees_table(employees))


@app.callback()
def main(
    ctx: typer.Context,
    base_url: Optional[str] = typer.Option(None, "--base-url", help="Override the API base URL."),
    lang: Optional[Language] = typer.Option(None, "--lang", help="Language for messages (en/es)."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging to stderr."),
) -> None:
    settings = load_settings()
    if base_url:
        settings = settings.model_copy(update={"api_base_url": base_url.strip().rstrip("/")})
    configure_logging("DEBUG" if verbose else settings.log_level)
    ctx.obj = CliState(settings=settings, language=lang or settings.default_language)


@app.command("list")
def list_command(
    ctx: typer.Context,
    search: Optional[str] = typer.Option(None, "--search", "-s", help="Case-insensitive name filter."),
    json_path: Optional[Path] = typer.Option(None, "--json", help="Also export the list to this JSON file."),
) -> None:
    """List employees, optionally filtered by name."""

    state = _state(ctx)
    repository = build_repository(state.settings)
    employees = _run(state, load_employees(repository, search))
    _print_list(employees, state)
    if json_path is not None:
        written = export_employees_json(employees=employees, output_path=json_path)
        _console.print(f"[green]JSON:[/green] {written}")


@app.command()
def show(ctx: typer.Context, employee_id: str = typer.Argument(..., help="Employee id.")) -> None:
    """Show a single employee."""

    state = _state(ctx)
    repository = build_repository(state.settings)
    employee = _run(state, repository.get_employee(employee_id))
    _console.print(build_employee_panel(employee))


@app.command()
def add(
    ctx: typer.Context,
    name: str = typer.Option(..., prompt=True),
    age: str = typer.Option(..., prompt=True),
    position: str = typer.Option(..., prompt=True),
    phone: str = typer.Option(..., prompt=True),
) -> None:
    """Create an employee and reload the list."""

    state = _state(ctx)
    repository = build_repository(state.settings)
    values = {"name": name, "age": age, "position": position, "phone": phone}
    outcome = _run(state, save_employee(repository, values))

    _console.print(f"[green]{state.language.text('created')}[/green]")
    if outcome.employee is not None:
        _console.print(build_employee_panel(outcome.employee))
    else:
        _console.print(f"[yellow]{state.language.text('no_echo')}[/yellow]")
    _print_list(outcome.employees, state)


@app.command()
def edit(
    ctx: typer.Context,
    employee_id: str = typer.Argument(..., help="Employee id."),
    name: Optional[str] = typer.Option(None),
    age: Optional[str] = typer.Option(None),
    position: Optional[str] = typer.Option(None),
    phone: Optional[str] = typer.Option(None),
) -> None:
    """Update an employee; omitted fields keep their current value."""

    state = _state(ctx)
    repository = build_repository(state.settings)

    async def _edit():
        current = await repository.get_employee(employee_id)
        values = {
            "name": name if name is not None else current.name,
            "age": age if age is not None else current.age,
            "position": position if position is not None else current.position,
            "phone": phone if phone is not None else current.phone,
        }
        return await save_employee(repository, values, employee_id=employee_id)

    outcome = _run(state, _edit())
    _console.print(f"[green]{state.language.text('updated')}[/green]")
    if outcome.employee is not None:
        _console.print(build_employee_panel(outcome.employee))
    _print_list(outcome.employees, state)


@app.command()
def delete(
    ctx: typer.Context,
    employee_id: str = typer.Argument(..., help="Employee id."),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip the confirmation prompt."),
) -> None:
    """Delete an employee after confirmation and reload the list."""

    state = _state(ctx)
    if not yes and not typer.confirm(state.language.text("confirm_delete", id=employee_id)):
        _console.print(f"[dim]{state.language.text('aborted')}[/dim]")
        raise typer.Exit(code=0)

    repository = build_repository(state.settings)
    outcome = _run(state, remove_employee(repository, employee_id))
    _console.print(f"[green]{state.language.text('deleted')}[/green]")
    _print_list(outcome.employees, state)


def run() -> None:
    app()
