"""Wrapper de httpx + reconciliación de respuestas.

Por qué un wrapper:
- Estandariza timeouts y headers para todas las llamadas al recurso remoto.
- Facilita testeo: se puede inyectar un `httpx.MockTransport`.

Por qué reconciliar:
- El backend responde de forma inconsistente entre endpoints (200 con eco
  JSON, 204, 200 con cuerpo vacío o texto plano). `reconcile_response`
  absorbe todo eso: abajo solo llega "un valor parseado", `None`, o un
  `HttpError`.
"""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from core.config import AppSettings
from core.errors import HttpError

logger = logging.getLogger(__name__)


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con defaults para una API JSON.

    Por qué un builder:
    - Centraliza timeouts/headers para que todas las operaciones se comporten igual.
    - Sin reintentos: un fallo de red se propaga tal cual al llamador.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


def _request_url(response: httpx.Response) -> str:
    try:
        return str(response.request.url)
    except RuntimeError:
        return "<unknown>"


async def _read_text(response: httpx.Response) -> str:
    # `aread` no vuelve a consumir el stream si el cuerpo ya está cargado.
    await response.aread()
    return response.text


async def read_text_best_effort(response: httpx.Response) -> str:
    """Texto del cuerpo o `""` si no se puede leer (solo para diagnósticos)."""

    try:
        return await _read_text(response)
    except (httpx.HTTPError, httpx.StreamError) as exc:
        logger.debug("Could not read error body from %s: %s", _request_url(response), exc)
        return ""


async def reconcile_response(response: httpx.Response) -> Any | None:
    """Convierte una respuesta HTTP en payload parseado, `None` o `HttpError`.

    - Status de fallo: lee el cuerpo (best-effort) y lanza `HttpError`.
    - 204: `None` sin tocar el cuerpo.
    - Cuerpo vacío/espacios o no-JSON: `None`.
    """

    if not response.is_success:
        body = await read_text_best_effort(response)
        raise HttpError(response.status_code, body)

    if response.status_code == 204:
        return None

    text = await _read_text(response)
    if not text.strip():
        return None

    try:
        return json.loads(text)
    except ValueError:
        logger.warning(
            "Non-JSON body on HTTP %s from %s; treating it as empty (%d chars)",
            response.status_code,
            _request_url(response),
            len(text),
        )
        return None
