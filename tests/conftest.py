"""Shared fixtures: settings, a mocked httpx transport and an in-memory repository."""

from __future__ import annotations

import json
import os
from collections.abc import Callable
from pathlib import Path
from typing import Any

import httpx
import pytest

from adapters.employees_api import EmployeesApiClient
from core.config import AppSettings, get_user_config_dir
from core.domain.models import DeleteResult, Employee, EmployeeInput
from core.errors import HttpError, NotFoundError
from core.normalize import filter_by_name, validate_employee_id

BASE_URL = "https://api.test/employees"


class RecordingHandler:
    """Wraps a request handler and keeps every request it sees."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self._handler = handler
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._handler(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


class InMemoryRepository:
    """EmployeeRepository backed by a dict, mirroring the remote semantics."""

    def __init__(self, employees: list[Employee] | None = None, *, echo: bool = True) -> None:
        self.records: dict[str, Employee] = {str(e.id): e for e in employees or []}
        self.echo = echo
        self.calls: list[tuple[str, Any]] = []
        self._next_id = max((int(k) for k in self.records if k.isdigit()), default=0) + 1

    async def list_employees(self, search_term: str | None = None) -> list[Employee]:
        self.calls.append(("list", search_term))
        return filter_by_name(self.records.values(), search_term)

    async def get_employee(self, employee_id: Any) -> Employee:
        self.calls.append(("get", employee_id))
        key = validate_employee_id(employee_id)
        if key not in self.records:
            raise HttpError(404, "Not found")
        return self.records[key]

    async def create_employee(self, employee: EmployeeInput) -> Employee | None:
        self.calls.append(("create", employee))
        created = Employee(id=self._next_id, **employee.model_dump())
        self.records[str(self._next_id)] = created
        self._next_id += 1
        return created if self.echo else None

    async def update_employee(self, employee_id: Any, employee: EmployeeInput) -> Employee | None:
        self.calls.append(("update", employee_id))
        key = validate_employee_id(employee_id)
        if key not in self.records:
            raise HttpError(404, "Not found")
        updated = Employee(id=self.records[key].id, **employee.model_dump())
        self.records[key] = updated
        return updated if self.echo else None

    async def delete_employee(self, employee_id: Any) -> DeleteResult:
        self.calls.append(("delete", employee_id))
        key = validate_employee_id(employee_id)
        if key not in self.records:
            raise NotFoundError(key, "Not found")
        del self.records[key]
        return DeleteResult(id=key)


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None, api_base_url=BASE_URL)


@pytest.fixture
def make_api(settings: AppSettings):
    """Build an `EmployeesApiClient` whose HTTP traffic goes to `handler`."""

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> tuple[EmployeesApiClient, RecordingHandler]:
        recorder = RecordingHandler(handler)
        client = httpx.AsyncClient(transport=httpx.MockTransport(recorder))
        return EmployeesApiClient(settings, client=client), recorder

    return _make


@pytest.fixture
def staff() -> list[Employee]:
    return [
        Employee(id=1, name="Ana", age=30, position="Dev", phone="+1"),
        Employee(id=2, name="Anabel", age=41, position="QA", phone="+2"),
        Employee(id=3, name="Beto", age=25, position="Ops", phone="+3"),
    ]


@pytest.fixture
def user_config_dir(monkeypatch, tmp_path: Path) -> Path:
    """Point every per-user config location at `tmp_path` and drop app env vars."""

    home = tmp_path / "home"
    config_root = tmp_path / "xdg"
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_root))
    monkeypatch.setenv("APPDATA", str(config_root))
    for name in list(os.environ):
        if name.upper().startswith("EMPLOYEE_DESK_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    return get_user_config_dir()
