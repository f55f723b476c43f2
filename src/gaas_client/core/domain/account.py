"""Cuenta de servicio y esquema de autenticación.

Por qué un valor inmutable:
- Se construye una vez por cliente y es la única entrada de credenciales del
  firmador; no tiene comportamiento propio.
- El descubrimiento (variables de entorno, `.env`) vive en `core.config` y
  produce un `ServiceAccount`; el core nunca lee el entorno.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict


class AuthScheme(str, Enum):
    """Algoritmo de la cabecera `Authorization`.

    BASIC solo lo acepta el servidor para cuentas de solo lectura; el cliente
    no lo valida, solo lo documenta.
    """

    HMAC = "HMAC"
    BASIC = "BASIC"


class ServiceAccount(BaseModel):
    """Endpoint + par de credenciales de una instancia del servicio."""

    model_config = ConfigDict(frozen=True)

    base_url: str = Field(
        ...,
        min_length=1,
        description="URL base del servicio, sin '/' final (se normaliza).",
    )
    instance_id: str = Field(
        ...,
        min_length=1,
        description="Identificador de la instancia del servicio.",
    )
    user_id: str = Field(
        ...,
        min_length=1,
        description="Usuario de la API (no el usuario humano).",
    )
    secret: str = Field(
        ...,
        min_length=1,
        repr=False,
        description="Secreto del usuario; clave HMAC o password Basic.",
    )

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        stripped = value.rstrip("/")
        if not stripped:
            raise ValueError("base_url must not be empty")
        return stripped
