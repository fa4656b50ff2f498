"""Normalización de registros crudos del backend.

El recurso remoto devuelve las mismas columnas con casing e idioma distintos
según cómo se aprovisionó (`id`/`Id`, `name`/`Name`/`nombre`/`Nombre`, ...).
Todo pasa por aquí una sola vez; el resto del código solo ve `Employee`.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from core.domain.models import Employee, EmployeeInput
from core.errors import ValidationError

# Orden = prioridad: la primera clave no-nula gana.
ID_KEYS = ("id", "Id")
NAME_KEYS = ("name", "Name", "nombre", "Nombre")
AGE_KEYS = ("age", "Age", "edad", "Edad")
POSITION_KEYS = ("position", "Position", "puesto", "Puesto", "Job")
PHONE_KEYS = ("phone", "Phone", "telefono", "Telefono", "PhoneNumber")

_INVALID_ID_TEXT = {"undefined", "null", "none"}


def first_present(raw: Mapping[str, Any], keys: Iterable[str], default: Any = None) -> Any:
    for key in keys:
        value = raw.get(key)
        if value is not None:
            return value
    return default


def normalize_employee(raw: Any) -> Employee:
    """Convierte un registro crudo en `Employee`. Nunca lanza.

    Un `raw` que no sea mapping (p.ej. `None` por cuerpo vacío) se trata
    como `{}`. Un ID ausente queda en `None`: es un problema de datos del
    backend y no se inventa uno aquí.
    """

    if not isinstance(raw, Mapping):
        raw = {}

    return Employee(
        id=first_present(raw, ID_KEYS),
        name=first_present(raw, NAME_KEYS, ""),
        age=first_present(raw, AGE_KEYS, ""),
        position=first_present(raw, POSITION_KEYS, ""),
        phone=first_present(raw, PHONE_KEYS, ""),
    )


def filter_by_name(employees: Iterable[Employee], term: str | None) -> list[Employee]:
    """Filtro local: substring sin distinguir mayúsculas sobre `name`."""

    needle = (term or "").strip().casefold()
    if not needle:
        return list(employees)
    return [employee for employee in employees if needle in employee.name.casefold()]


def build_payload(employee: EmployeeInput) -> dict[str, Any]:
    """Cuerpo para POST/PUT con las variantes de clave duplicadas.

    El backend acepta un casing u otro según cómo se aprovisionó el dataset;
    mandar ambas garantiza que el valor aterrice.
    """

    return {
        "name": employee.name,
        "Name": employee.name,
        "age": employee.age,
        "Edad": employee.age,
        "position": employee.position,
        "Puesto": employee.position,
        "phone": employee.phone,
        "Telefono": employee.phone,
    }


def validate_employee_id(value: Any) -> str:
    """Valida un ID antes de construir una URL con él.

    Rechaza `None`, vacío/espacios y las formas textuales que deja una
    coerción descuidada (`"undefined"`, `"null"`, `"None"`). `0` es válido.
    """

    if value is None or isinstance(value, bool):
        raise ValidationError(f"Invalid employee id: {value!r}", details={"id": repr(value)})

    text = str(value).strip()
    if not text or text.casefold() in _INVALID_ID_TEXT:
        raise ValidationError(f"Invalid employee id: {value!r}", details={"id": repr(value)})
    return text
