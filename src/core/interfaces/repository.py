"""Contrato del repositorio de empleados.

Por qué Protocol:
- El servicio de directorio y la CLI dependen de esta abstracción, no del
  cliente HTTP concreto.
- Los tests sustituyen el backend por un repositorio en memoria sin herencia.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from core.domain.models import DeleteResult, Employee, EmployeeInput


@runtime_checkable
class EmployeeRepository(Protocol):
    """Operaciones CRUD sobre el recurso de empleados.

    Reglas de diseño:
    - Todo es asíncrono porque típicamente hará I/O (HTTP).
    - Las lecturas devuelven siempre `Employee` normalizados.
    - `create`/`update` devuelven `None` cuando el backend no hizo eco del
      registro; el llamador debe recargar la lista.
    """

    async def list_employees(self, search_term: str | None = None) -> list[Employee]:
        ...

    async def get_employee(self, employee_id: Any) -> Employee:
        ...

    async def create_employee(self, employee: EmployeeInput) -> Employee | None:
        ...

    async def update_employee(self, employee_id: Any, employee: EmployeeInput) -> Employee | None:
        ...

    async def delete_employee(self, employee_id: Any) -> DeleteResult:
        ...
