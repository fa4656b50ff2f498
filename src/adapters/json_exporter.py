"""Exportación JSON de la lista de empleados.

Por qué JSON:
- Interoperabilidad con otras herramientas (hojas de cálculo, scripts).
- Se exporta la forma canónica, no las claves crudas del backend.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path

from core.domain.models import Employee


def export_employees_json(*, employees: Iterable[Employee], output_path: Path) -> Path:
    """Exporta empleados a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = [employee.model_dump(mode="json") for employee in employees]
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
