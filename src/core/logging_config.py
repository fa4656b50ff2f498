"""Configuración de logging.

Cada módulo usa `logging.getLogger(__name__)`; aquí solo se decide el
handler y los niveles. La salida va a stderr para no ensuciar tablas o JSON
impresos por la CLI en stdout.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

# Librerías de transporte: ruidosas en INFO.
_QUIET_LOGGERS = ("httpx", "httpcore")


def resolve_level(level: str | int | None, default: int = logging.WARNING) -> int:
    if isinstance(level, int):
        return level
    if not level:
        return default
    value = logging.getLevelName(level.strip().upper())
    return value if isinstance(value, int) else default


def configure_logging(level: str | int | None = None) -> int:
    """Instala un `RichHandler` en el logger raíz y devuelve el nivel aplicado."""

    resolved = resolve_level(level)
    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=False,
    )
    logging.basicConfig(
        level=resolved,
        format="%(name)s: %(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )

    transport_level = resolved if resolved <= logging.DEBUG else max(resolved, logging.WARNING)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(transport_level)
    return resolved
