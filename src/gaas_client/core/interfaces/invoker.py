"""Contrato del invocador de peticiones.

Por qué Protocol:
- El sincronizador y la fachada solo necesitan "ejecuta esta petición firmada
  y dame el sobre"; no conocen httpx.
- Los tests pueden sustituir el transporte sin tocar el core.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Protocol, TypeVar, runtime_checkable

from gaas_client.core.domain.account import AuthScheme
from gaas_client.core.domain.models import ServiceResponse

EnvelopeT = TypeVar("EnvelopeT", bound=ServiceResponse)


@dataclass(frozen=True)
class RawResponse:
    """Respuesta HTTP leída por completo."""

    status_code: int
    content_type: str | None
    body: bytes


@runtime_checkable
class RequestInvoker(Protocol):
    """Ejecuta peticiones firmadas contra una instancia del servicio.

    Reglas de diseño:
    - `path` es relativo a la URL base y ya viene con sus segmentos escapados.
    - Una llamada = una petición HTTP; sin reintentos ni caché.
    """

    auth_scheme: AuthScheme

    def invoke(
        self,
        method: str,
        path: str,
        *,
        query: Mapping[str, str] | None = None,
        content_type: str | None = None,
        body: bytes | None = None,
        anonymous: bool = False,
        accept: str | None = None,
    ) -> RawResponse:
        ...

    def invoke_json(
        self,
        method: str,
        path: str,
        envelope_type: type[EnvelopeT],
        *,
        query: Mapping[str, str] | None = None,
        payload: bytes | None = None,
        content_type: str = "application/json",
        anonymous: bool = False,
    ) -> EnvelopeT:
        ...

    def invoke_bytes(
        self,
        method: str,
        path: str,
        *,
        expected_media_type: str,
        query: Mapping[str, str] | None = None,
        content_type: str | None = None,
        body: bytes | None = None,
    ) -> bytes:
        ...
