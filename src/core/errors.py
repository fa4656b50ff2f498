"""Taxonomía de errores del cliente de empleados.

Reglas:
- `HttpError`: el recurso remoto respondió con un status de fallo.
- `NotFoundError`: borrado de un ID inexistente (404), distinguible del resto.
- `ValidationError`: fallo local antes de enviar nada por la red.
- `NetworkError`: el transporte falló antes de recibir respuesta.

Un cuerpo vacío o no-JSON en una respuesta exitosa NO es un error.
"""

from __future__ import annotations

from typing import Any


class EmployeeDeskError(Exception):
    """Base de todos los errores de la aplicación."""

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"error": self.message, "type": self.__class__.__name__}
        if self.details:
            result["details"] = self.details
        return result


class HttpError(EmployeeDeskError):
    """El recurso remoto devolvió un status fuera del rango 2xx."""

    def __init__(self, status: int, body: str = "", *, message: str | None = None) -> None:
        self.status = status
        self.body = body
        super().__init__(
            message or f"HTTP {status}: {body}",
            details={"status": status, "body": body},
        )


class NotFoundError(HttpError):
    """El empleado a eliminar no existe en el recurso remoto."""

    def __init__(self, employee_id: str, body: str = "") -> None:
        self.employee_id = employee_id
        super().__init__(
            404,
            body,
            message=f"Employee with id {employee_id} not found",
        )


class ValidationError(EmployeeDeskError, ValueError):
    """Datos locales inválidos (ID o formulario); no se llegó a hacer request."""


class NetworkError(EmployeeDeskError):
    """Fallo de transporte (conexión, DNS, timeout) sin respuesta del servidor."""

    def __init__(
        self,
        message: str = "Connection error. Check your internet connection.",
        *,
        url: str | None = None,
    ) -> None:
        super().__init__(message, details={"url": url} if url else None)
        self.url = url
