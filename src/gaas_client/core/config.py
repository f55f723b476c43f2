"""Configuración del cliente.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- El core nunca lee el entorno: esta capa produce un `ServiceAccount` que se
  pasa explícitamente al `ServiceClient`.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from gaas_client.core.domain.account import AuthScheme, ServiceAccount
from gaas_client.core.errors import ServiceError

ENV_PREFIX = "GP_"


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "gaas-client"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "gaas-client"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "gaas-client"
    return Path.home() / ".config" / "gaas-client"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str | None], env_path: Path | None = None) -> Path:
    """Escribe/actualiza variables en el .env global del usuario.

    Las claves con valor `None` se ignoran (no borran lo existente).
    """

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# gaas-client user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Configuración central del cliente.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core.
    - Mismos nombres que el resto de clientes del servicio (`GP_URL`,
      `GP_INSTANCE_ID`, `GP_USER_ID`, `GP_PASSWORD`).
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    url: str | None = Field(
        default=None,
        description="URL base del servicio (p.ej. https://.../translate/rest).",
    )
    instance_id: str | None = Field(
        default=None,
        description="Identificador de la instancia del servicio.",
    )
    user_id: str | None = Field(
        default=None,
        description="Usuario de la API.",
    )
    password: str | None = Field(
        default=None,
        repr=False,
        description="Secreto del usuario de la API.",
    )
    auth_scheme: AuthScheme = Field(
        default=AuthScheme.HMAC,
        description="Esquema de la cabecera Authorization (HMAC/BASIC).",
    )
    http_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Timeout por request (segundos); sin valor se usan los defaults de httpx.",
    )
    user_agent: str = Field(
        default="gaas-client/0.1",
        min_length=1,
        description="User-Agent de las peticiones.",
    )

    @field_validator("auth_scheme", mode="before")
    @classmethod
    def _upper_scheme(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value

    def missing_account_fields(self) -> list[str]:
        """Variables de entorno que faltan para construir la cuenta."""

        fields = {
            "url": self.url,
            "instance_id": self.instance_id,
            "user_id": self.user_id,
            "password": self.password,
        }
        return [f"{ENV_PREFIX}{name.upper()}" for name, value in fields.items() if not value]

    def to_service_account(self) -> ServiceAccount:
        missing = self.missing_account_fields()
        if missing:
            raise ServiceError.invalid_argument(
                "Missing service configuration: " + ", ".join(missing)
            )
        return ServiceAccount(
            base_url=self.url,  # type: ignore[arg-type]
            instance_id=self.instance_id,  # type: ignore[arg-type]
            user_id=self.user_id,  # type: ignore[arg-type]
            secret=self.password,  # type: ignore[arg-type]
        )
