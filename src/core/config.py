"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- El cliente HTTP recibe la URL base ya resuelta; nunca la lee de un global.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.language import Language

DEFAULT_API_BASE_URL = "https://retoolapi.dev/Vv50y8/recuperacion"


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "employee-desk"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "employee-desk"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "employee-desk"
    return Path.home() / ".config" / "employee-desk"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def read_env_file(path: Path) -> dict[str, str]:
    """Lee un `.env` simple (KEY=VALUE). Líneas vacías y comentarios se ignoran."""

    if not path.exists():
        return {}

    data: dict[str, str] = {}
    for raw_line in path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        if key:
            data[key] = value.strip().strip('"').strip("'")
    return data


def write_user_env_vars(values: dict[str, str | None], env_path: Path | None = None) -> Path:
    """Escribe/actualiza variables en el .env global del usuario.

    Las claves con valor `None` se eliminan del archivo.
    """

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    merged = read_env_file(env_path)
    for key, value in values.items():
        if value is None:
            merged.pop(key, None)
        else:
            merged[key] = value

    lines = ["# employee-desk user config (.env)"]
    lines.extend(f"{key}={merged[key]}" for key in sorted(merged))
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars).
    - Un único contrato de configuración para CLI/adapters/tests.
    """

    model_config = SettingsConfigDict(
        env_prefix="EMPLOYEE_DESK_",
        extra="ignore",
        case_sensitive=False,
        # Se leen en orden; el .env de usuario pisa al del proyecto.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    api_base_url: str = Field(
        default=DEFAULT_API_BASE_URL,
        min_length=8,
        description="URL base del recurso REST de empleados.",
    )
    http_timeout_seconds: float = Field(
        default=15.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="employee-desk/0.1",
        min_length=1,
        description="User-Agent enviado al recurso remoto.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging por defecto (DEBUG, INFO, WARNING...).",
    )
    default_language: Language = Field(
        default_factory=Language.default,
        description="Idioma de los mensajes de la CLI (en/es).",
    )

    @field_validator("api_base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.strip().rstrip("/")

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.strip().upper() or "WARNING"


def load_settings(**overrides: object) -> AppSettings:
    """Construye `AppSettings` resolviendo el `.env` de usuario en este momento.

    `model_config.env_file` se fija al importar el módulo; aquí se vuelve a
    calcular para respetar cambios de `XDG_CONFIG_HOME`/`APPDATA` posteriores.
    """

    return AppSettings(_env_file=(".env", str(get_user_env_file())), **overrides)
