"""Employee directory flows.

This module holds the application flows that sit between the CLI and the
repository: load or search the list, save a form as create-or-update, and
delete. Every mutation is followed by a full reload, so callers always
replace their displayed list wholesale instead of patching it in place.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from core.domain.models import DeleteResult, Employee, EmployeeInput
from core.errors import ValidationError
from core.interfaces.repository import EmployeeRepository

logger = logging.getLogger(__name__)

FORM_FIELDS = ("name", "age", "position", "phone")


@dataclass
class SaveOutcome:
    """Result of saving a form."""

    created: bool
    employee: Employee | None
    employees: list[Employee] = field(default_factory=list)

    @property
    def echoed(self) -> bool:
        """Whether the server returned the stored record."""

        return self.employee is not None


@dataclass
class DeleteOutcome:
    """Result of deleting an employee, with the reloaded list."""

    result: DeleteResult
    employees: list[Employee] = field(default_factory=list)


def parse_employee_form(values: Mapping[str, Any]) -> EmployeeInput:
    """Validate raw form values (presence + numeric age).

    Raises `ValidationError` with the list of offending fields in `details`.
    """

    try:
        return EmployeeInput.model_validate({key: values.get(key) for key in FORM_FIELDS})
    except PydanticValidationError as exc:
        invalid = sorted({str(err["loc"][0]) for err in exc.errors() if err.get("loc")})
        raise ValidationError(
            "Name, age, position and phone are required",
            details={"fields": invalid},
        ) from exc


async def load_employees(repository: EmployeeRepository, search_term: str | None = None) -> list[Employee]:
    return await repository.list_employees(search_term)


async def save_employee(
    repository: EmployeeRepository,
    values: Mapping[str, Any],
    *,
    employee_id: Any = None,
) -> SaveOutcome:
    """Create (no `employee_id`) or update an employee, then reload the list."""

    employee_input = parse_employee_form(values)
    created = employee_id is None
    if created:
        employee = await repository.create_employee(employee_input)
    else:
        employee = await repository.update_employee(employee_id, employee_input)

    if employee is None:
        logger.info("Server did not echo the saved record; relying on reload")

    employees = await repository.list_employees()
    return SaveOutcome(created=created, employee=employee, employees=employees)


async def remove_employee(repository: EmployeeRepository, employee_id: Any) -> DeleteOutcome:
    result = await repository.delete_employee(employee_id)
    employees = await repository.list_employees()
    return DeleteOutcome(result=result, employees=employees)
