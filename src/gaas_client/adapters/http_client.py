"""Invocador HTTP sobre httpx.

Por qué un wrapper:
- Estandariza cabeceras (`Date`, `Accept`, `Authorization`), el escape de
  segmentos de ruta y la clasificación de respuestas en un único sitio.
- Facilita testeo: el `httpx.Client` se inyecta y admite `MockTransport`.

Cada llamada es una sola petición: sin reintentos, sin caché y sin política
de redirecciones o timeouts distinta de la que traiga el `httpx.Client`.
"""

from __future__ import annotations

import logging
import time
from datetime import datetime, timezone
from email.utils import format_datetime
from typing import Callable, Mapping
from urllib.parse import quote, urlencode

import httpx

from gaas_client.adapters import codec
from gaas_client.adapters.signer import sign
from gaas_client.core.config import AppSettings
from gaas_client.core.domain.account import AuthScheme, ServiceAccount
from gaas_client.core.domain.models import ServiceResponse
from gaas_client.core.interfaces.invoker import EnvelopeT, RawResponse
from gaas_client.core.errors import ServiceError

logger = logging.getLogger(__name__)

__all__ = [
    "HttpInvoker",
    "RawResponse",
    "build_http_client",
    "escape_path_segment",
    "rfc1123_date",
]

# Sub-delims y ':' '@' (RFC 3986, pchar). `quote` ya deja pasar los unreserved.
_PATH_SEGMENT_SAFE = "!$&'()*+,;=:@"


def build_http_client(
    settings: AppSettings | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Crea un `httpx.Client` síncrono con los defaults del cliente.

    Sin `http_timeout_seconds` configurado se conservan los timeouts por
    defecto de httpx.
    """

    settings = settings or AppSettings()
    kwargs: dict[str, object] = {
        "headers": {"User-Agent": settings.user_agent},
    }
    if settings.http_timeout_seconds is not None:
        kwargs["timeout"] = httpx.Timeout(settings.http_timeout_seconds)
    if transport is not None:
        kwargs["transport"] = transport
    return httpx.Client(**kwargs)  # type: ignore[arg-type]


def escape_path_segment(segment: str) -> str:
    """Escapa un segmento de ruta (`/`, `%`, espacios y no-ASCII -> `%XX`)."""

    # `.` y `..` como segmento completo los eliminaría httpx al normalizar la ruta.
    if segment in (".", ".."):
        return "%2E" * len(segment)
    try:
        return quote(segment, safe=_PATH_SEGMENT_SAFE, encoding="utf-8", errors="strict")
    except UnicodeEncodeError as exc:
        raise ServiceError.invalid_argument(
            f"Path segment is not valid Unicode: {segment!r}"
        ) from exc


def rfc1123_date(moment: datetime | None = None) -> str:
    """Fecha RFC 1123 en GMT (`Sun, 06 Nov 1994 08:49:37 GMT`)."""

    moment = moment or datetime.now(timezone.utc)
    return format_datetime(moment.astimezone(timezone.utc), usegmt=True)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class HttpInvoker:
    """Implementación de `RequestInvoker` sobre un `httpx.Client` síncrono.

    `auth_scheme` es el único estado mutable; se configura una vez, antes de
    compartir el invocador entre hilos.
    """

    def __init__(
        self,
        account: ServiceAccount,
        http_client: httpx.Client,
        *,
        auth_scheme: AuthScheme = AuthScheme.HMAC,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._account = account
        self._http = http_client
        self._clock = clock
        self.auth_scheme = auth_scheme

    @property
    def account(self) -> ServiceAccount:
        return self._account

    def url_for(self, path: str, query: Mapping[str, str] | None = None) -> str:
        url = f"{self._account.base_url}/{path}"
        if query:
            url += "?" + urlencode(query, safe=",")
        return url

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
        url = self.url_for(path, query)
        date = rfc1123_date(self._clock())

        headers = {
            "Accept": accept or codec.JSON_MEDIA_TYPE,
            "Date": date,
        }
        if body is not None:
            headers["Content-Type"] = content_type or codec.JSON_MEDIA_TYPE

        started = time.perf_counter()
        try:
            request = self._http.build_request(method, url, headers=headers, content=body)
            if not anonymous:
                # Se firma la URL ya normalizada por httpx, la que viaja.
                request.headers["Authorization"] = sign(
                    self.auth_scheme, self._account, method, str(request.url), date, body
                )
            response = self._http.send(request)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.debug("%s %s failed: %s", method, path, exc.__class__.__name__)
            raise ServiceError.protocol(
                f"Error while processing API request {method} {path}",
                method=method,
                path=path,
            ) from exc

        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.debug("%s %s -> %s (%.1f ms)", method, path, response.status_code, elapsed_ms)
        return RawResponse(
            status_code=response.status_code,
            content_type=response.headers.get("Content-Type"),
            body=response.content,
        )

    def invoke_json(
        self,
        method: str,
        path: str,
        envelope_type: type[EnvelopeT],
        *,
        query: Mapping[str, str] | None = None,
        payload: bytes | None = None,
        content_type: str = codec.JSON_MEDIA_TYPE,
        anonymous: bool = False,
    ) -> EnvelopeT:
        """Ejecuta la petición y valida el cuerpo contra `envelope_type`.

        - Content-type distinto de JSON, JSON mal formado o sobre que no
          valida -> error PROTOCOL.
        - `status=ERROR` -> error LOGICAL con el mensaje del servidor.
        - HTTP >= 400 sin discriminador -> error LOGICAL.
        """

        raw = self.invoke(
            method,
            path,
            query=query,
            content_type=content_type,
            body=payload,
            anonymous=anonymous,
        )
        if codec.media_type(raw.content_type) != codec.JSON_MEDIA_TYPE:
            raise ServiceError.protocol(
                f"Received non-JSON response ({raw.content_type or 'no content type'})",
                method=method,
                path=path,
                status_code=raw.status_code,
            )

        # Un cuerpo de error no trae el payload del endpoint: basta el sobre.
        target = envelope_type if raw.status_code < 400 else ServiceResponse
        envelope = codec.decode_envelope(
            raw.body,
            target,
            method=method,
            path=path,
            status_code=raw.status_code,
        )
        if envelope.is_error or raw.status_code >= 400:
            message = envelope.message or f"HTTP {raw.status_code}"
            logger.debug("%s %s returned error: %s", method, path, message)
            raise ServiceError.logical(
                message,
                method=method,
                path=path,
                status_code=raw.status_code,
            )
        return envelope  # type: ignore[return-value]

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
        """Variante para endpoints XLIFF/documento: devuelve el cuerpo tal cual."""

        raw = self.invoke(
            method,
            path,
            query=query,
            content_type=content_type,
            body=body,
            accept=expected_media_type,
        )
        if raw.status_code >= 300:
            message = codec.error_message_from_body(raw.body) or f"HTTP {raw.status_code}"
            raise ServiceError.logical(
                message,
                method=method,
                path=path,
                status_code=raw.status_code,
            )
        if codec.media_type(raw.content_type) != expected_media_type.lower():
            raise ServiceError.protocol(
                f"Expected {expected_media_type} response, received {raw.content_type or 'no content type'}",
                method=method,
                path=path,
                status_code=raw.status_code,
            )
        return raw.body
