"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from collections.abc import Iterable

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.language import Language
from core.domain.models import Employee
from core.errors import EmployeeDeskError, HttpError, NetworkError, NotFoundError, ValidationError


def _display(value: object) -> str:
    if value is None or value == "":
        return "-"
    return str(value)


def build_employees_table(employees: Iterable[Employee], *, title: str = "Employees") -> Table:
    """Tabla Rich con la forma canónica (id, nombre, edad, puesto, teléfono)."""

    table = Table(title=title)
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Age", style="green", justify="right")
    table.add_column("Position", style="magenta")
    table.add_column("Phone", style="yellow")
    for employee in employees:
        table.add_row(
            _display(employee.id),
            _display(employee.name),
            _display(employee.age),
            _display(employee.position),
            _display(employee.phone),
        )
    return table


def build_employee_panel(employee: Employee) -> Panel:
    """Panel con el detalle de un empleado."""

    body = Text()
    body.append("Name: ", style="bold")
    body.append(f"{_display(employee.name)}\n")
    body.append("Age: ", style="bold")
    body.append(f"{_display(employee.age)}\n")
    body.append("Position: ", style="bold")
    body.append(f"{_display(employee.position)}\n")
    body.append("Phone: ", style="bold")
    body.append(_display(employee.phone))
    return Panel(body, title=Text(f"Employee {_display(employee.id)}", style="bold cyan"), border_style="cyan")


def describe_error(error: EmployeeDeskError, language: Language) -> str:
    """Mensaje para el usuario según el tipo de error.

    `NotFoundError` se distingue del resto de fallos HTTP para poder decir
    "ya no existe" en lugar de un error genérico.
    """

    if isinstance(error, NotFoundError):
        return language.text("not_found", id=error.employee_id)
    if isinstance(error, HttpError):
        return language.text("http_error", status=error.status, body=error.body.strip() or "-")
    if isinstance(error, NetworkError):
        return language.text("network_error")
    if isinstance(error, ValidationError):
        if "fields" in error.details:
            return language.text("incomplete_form")
        return language.text("invalid_id", id=error.details.get("id", "?"))
    return error.message
