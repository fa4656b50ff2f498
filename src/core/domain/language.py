"""Idiomas y mensajes de cara al usuario.

El backend mezcla claves en inglés y español; la CLI también habla ambos.
Los textos viven aquí para que CLI y servicios compartan una única fuente
sin importar adaptadores.
"""

from __future__ import annotations

from enum import Enum

_MESSAGES: dict[str, dict[str, str]] = {
    "network_error": {
        "en": "Connection error. Check your internet connection.",
        "es": "Error de conexión. Verifica tu conexión a internet.",
    },
    "not_found": {
        "en": "Employee with id {id} was not found (it may already be deleted).",
        "es": "Empleado con ID {id} no encontrado (puede que ya se haya eliminado).",
    },
    "http_error": {
        "en": "The server answered with an error (HTTP {status}): {body}",
        "es": "El servidor respondió con un error (HTTP {status}): {body}",
    },
    "incomplete_form": {
        "en": "Name, age, position and phone are required.",
        "es": "Nombre, edad, puesto y teléfono son obligatorios.",
    },
    "invalid_id": {
        "en": "Invalid employee id: {id}",
        "es": "ID de empleado inválido: {id}",
    },
    "confirm_delete": {
        "en": "Delete employee {id}?",
        "es": "¿Eliminar al empleado con ID {id}?",
    },
    "deleted": {
        "en": "Employee deleted.",
        "es": "Empleado eliminado correctamente.",
    },
    "created": {
        "en": "Employee created.",
        "es": "Empleado creado.",
    },
    "updated": {
        "en": "Employee updated.",
        "es": "Empleado actualizado.",
    },
    "no_echo": {
        "en": "The server did not return the record; reload the list to see it.",
        "es": "El servidor no devolvió el registro; recarga la lista para verlo.",
    },
    "aborted": {
        "en": "Nothing was deleted.",
        "es": "No se eliminó nada.",
    },
    "empty_list": {
        "en": "No employees found.",
        "es": "No se encontraron empleados.",
    },
}


class Language(str, Enum):
    """Supported natural-language choices for user-facing output."""

    ENGLISH = "en"
    SPANISH = "es"

    @classmethod
    def default(cls) -> "Language":
        return cls.ENGLISH

    def label(self) -> str:
        return "Spanish" if self is Language.SPANISH else "English"

    def text(self, key: str, **values: object) -> str:
        """Render the message `key` in this language.

        Unknown keys fall back to the key itself so a missing translation
        never hides the underlying error.
        """

        variants = _MESSAGES.get(key)
        if not variants:
            return key
        template = variants.get(self.value) or variants[Language.default().value]
        return template.format(**values)
