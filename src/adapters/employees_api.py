"""Cliente REST del recurso de empleados.

Implementa `core.interfaces.repository.EmployeeRepository` sobre httpx:

- GET    <base>            lista (opcional `?Name=<term>`)
- GET    <base>/<id>       un registro
- POST   <base>            alta (claves duplicadas, ver `build_payload`)
- PUT    <base>/<id>       actualización
- DELETE <base>/<id>       baja (200, 204 o 404)

El filtro `?Name=` del servidor no es confiable (exacto, prefijo...), así que
la lista se vuelve a filtrar localmente.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

import httpx

from adapters.http_client import build_async_client, read_text_best_effort, reconcile_response
from core.config import AppSettings
from core.domain.models import DeleteResult, Employee, EmployeeInput
from core.errors import NetworkError, NotFoundError, ValidationError
from core.interfaces.repository import EmployeeRepository
from core.normalize import build_payload, filter_by_name, normalize_employee, validate_employee_id


class EmployeesApiClient(EmployeeRepository):
    """Operaciones CRUD contra el recurso remoto.

    Si no se inyecta `client`, cada operación abre un `httpx.AsyncClient`
    de vida corta con `build_async_client`.
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._client = client
        self._log = logger or logging.getLogger(__name__)

    @property
    def base_url(self) -> str:
        return self._settings.api_base_url

    def _item_url(self, employee_id: str) -> str:
        return f"{self.base_url}/{quote(employee_id, safe='')}"

    async def _send(
        self,
        method: str,
        url: str,
        *,
        params: dict[str, str] | None = None,
        payload: dict[str, Any] | None = None,
    ) -> httpx.Response:
        kwargs: dict[str, Any] = {}
        if params:
            kwargs["params"] = params
        if payload is not None:
            kwargs["json"] = payload

        self._log.debug("%s %s params=%s", method, url, params or {})
        try:
            if self._client is not None:
                response = await self._client.request(method, url, **kwargs)
            else:
                async with build_async_client(self._settings) as client:
                    response = await client.request(method, url, **kwargs)
        except httpx.TransportError as exc:
            self._log.warning("%s %s failed before any response: %s", method, url, exc)
            raise NetworkError(url=url) from exc

        self._log.debug("%s %s -> HTTP %s", method, url, response.status_code)
        return response

    async def _reconcile(self, response: httpx.Response) -> Any | None:
        try:
            return await reconcile_response(response)
        except httpx.TransportError as exc:
            raise NetworkError(url=str(response.request.url)) from exc

    async def _fetch(self, method: str, url: str, **kwargs: Any) -> Any | None:
        response = await self._send(method, url, **kwargs)
        return await self._reconcile(response)

    def _checked_id(self, employee_id: Any) -> str:
        try:
            return validate_employee_id(employee_id)
        except ValidationError:
            self._log.error("Refusing to build a request path for id %r", employee_id)
            raise

    async def list_employees(self, search_term: str | None = None) -> list[Employee]:
        term = (search_term or "").strip()
        params = {"Name": term} if term else None

        data = await self._fetch("GET", self.base_url, params=params)
        if not isinstance(data, list):
            if data is not None:
                self._log.warning("Expected a JSON list, got %s; returning no employees", type(data).__name__)
            return []

        employees = [normalize_employee(item) for item in data]
        if term:
            employees = filter_by_name(employees, term)
        self._log.info("Loaded %d employee(s) (term=%r)", len(employees), term)
        return employees

    async def get_employee(self, employee_id: Any) -> Employee:
        url = self._item_url(self._checked_id(employee_id))
        data = await self._fetch("GET", url)
        return normalize_employee(data)

    async def create_employee(self, employee: EmployeeInput) -> Employee | None:
        data = await self._fetch("POST", self.base_url, payload=build_payload(employee))
        if not isinstance(data, Mapping):
            self._log.info("Create returned no record; the caller must reload to see it")
            return None
        return normalize_employee(data)

    async def update_employee(self, employee_id: Any, employee: EmployeeInput) -> Employee | None:
        url = self._item_url(self._checked_id(employee_id))
        data = await self._fetch("PUT", url, payload=build_payload(employee))
        if not isinstance(data, Mapping):
            self._log.info("Update of %s returned no record", employee_id)
            return None
        return normalize_employee(data)

    async def delete_employee(self, employee_id: Any) -> DeleteResult:
        valid_id = self._checked_id(employee_id)
        response = await self._send("DELETE", self._item_url(valid_id))

        if response.status_code == 404:
            body = await read_text_best_effort(response)
            raise NotFoundError(valid_id, body)

        # Éxito sin cuerpo es el caso normal; cualquier otro fallo -> HttpError.
        await self._reconcile(response)
        self._log.info("Deleted employee %s", valid_id)
        return DeleteResult(id=valid_id)
