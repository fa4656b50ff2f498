"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- `Employee` es la forma canónica que consume la CLI, independiente de cómo
  el backend escriba las claves (`Name`, `nombre`, ...).
- `EmployeeInput` concentra las validaciones de formulario (presencia y edad
  numérica) en el borde, sin acoplar el Core a HTTP.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
"""

from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict


def _is_plain(value: Any, kinds: tuple[type, ...]) -> bool:
    return isinstance(value, kinds) and not isinstance(value, bool)


class Employee(BaseModel):
    """Registro canónico de un empleado.

    Siempre tiene los cuatro campos de texto/edad poblados (`""` si el backend
    no mandó nada útil). Construirlo nunca falla: los valores raros se
    convierten a texto en lugar de rechazarse.
    """

    model_config = ConfigDict(frozen=True)

    id: int | str | None = Field(
        default=None,
        description="Identificador asignado por el recurso remoto (opaco).",
    )
    name: str = Field(default="", description="Nombre para mostrar.")
    age: int | float | str = Field(default="", description="Edad (numérica si el backend la envía así).")
    position: str = Field(default="", description="Puesto.")
    phone: str = Field(default="", description="Teléfono.")

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Any:
        if value is None or _is_plain(value, (int, str)):
            return value
        return str(value)

    @field_validator("age", mode="before")
    @classmethod
    def _coerce_age(cls, value: Any) -> Any:
        if value is None:
            return ""
        if _is_plain(value, (int, float, str)):
            return value
        return str(value)

    @field_validator("name", "position", "phone", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        if value is None:
            return ""
        return value if isinstance(value, str) else str(value)


class EmployeeInput(BaseModel):
    """Datos de formulario para crear/actualizar un empleado."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, description="Nombre (obligatorio).")
    age: int | float = Field(..., description="Edad numérica.")
    position: str = Field(..., min_length=1, description="Puesto (obligatorio).")
    phone: str = Field(..., min_length=1, description="Teléfono (obligatorio).")

    @field_validator("age", mode="before")
    @classmethod
    def _parse_age(cls, value: Any) -> int | float:
        if isinstance(value, str):
            text = value.strip()
            if not text:
                raise ValueError("age is required")
            try:
                return int(text)
            except ValueError:
                value = float(text)
        if not _is_plain(value, (int, float)):
            raise ValueError("age must be a number")
        if isinstance(value, float) and not math.isfinite(value):
            raise ValueError("age must be a finite number")
        return value


class DeleteResult(BaseModel):
    """Marca de éxito de un borrado."""

    success: bool = Field(default=True)
    id: str = Field(..., min_length=1, description="ID validado tal como se envió en la URL.")
