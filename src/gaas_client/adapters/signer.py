"""Firmador de credenciales (cabecera `Authorization`).

Por qué funciones puras:
- La firma depende solo de sus entradas (cuenta, método, URL, fecha, cuerpo);
  el servidor la recalcula de forma independiente para verificarla.
- Sin reloj ni estado: la fecha la calcula el invocador una vez por petición
  y la pasa tanto a la cabecera `Date` como aquí.
"""

from __future__ import annotations

import base64
import hashlib
import hmac

from gaas_client.core.domain.account import AuthScheme, ServiceAccount
from gaas_client.core.errors import ServiceError, require

HMAC_SCHEME_PREFIX = "GaaS-HMAC "
BASIC_SCHEME_PREFIX = "Basic "

_LF = b"\n"


def _latin1(value: str, name: str) -> bytes:
    try:
        return value.encode("iso-8859-1")
    except UnicodeEncodeError as exc:
        raise ServiceError.invalid_argument(
            f"{name} must be representable in ISO-8859-1."
        ) from exc


def basic_credential(user_id: str | None, secret: str | None) -> str:
    """`Basic base64(user_id:secret)` con codificación ISO-8859-1."""

    require(user_id, "user_id")
    require(secret, "secret")
    token = base64.b64encode(_latin1(f"{user_id}:{secret}", "credentials"))
    return BASIC_SCHEME_PREFIX + token.decode("ascii")


def hmac_signing_input(method: str, url: str, date: str, body: bytes | None) -> bytes:
    """Mensaje canónico: `método\\nURL\\nfecha\\n` (ISO-8859-1) seguido del cuerpo sin separador final."""

    return b"".join(
        (
            _latin1(method, "method"),
            _LF,
            _latin1(url, "url"),
            _LF,
            _latin1(date, "date"),
            _LF,
            body or b"",
        )
    )


def hmac_credential(
    user_id: str | None,
    secret: str | None,
    method: str | None,
    url: str | None,
    date: str | None,
    body: bytes | None = None,
) -> str:
    """`GaaS-HMAC user_id:base64(hmac_sha1(secret, mensaje))`."""

    require(user_id, "user_id")
    require(secret, "secret")
    require(method, "method")
    require(url, "url")
    require(date, "date")

    message = hmac_signing_input(method, url, date, body)  # type: ignore[arg-type]
    digest = hmac.new(_latin1(secret, "secret"), message, hashlib.sha1).digest()  # type: ignore[arg-type]
    return f"{HMAC_SCHEME_PREFIX}{user_id}:{base64.b64encode(digest).decode('ascii')}"


def sign(
    scheme: AuthScheme,
    account: ServiceAccount,
    method: str,
    url: str,
    date: str,
    body: bytes | None = None,
) -> str:
    """Valor completo de la cabecera `Authorization` para `scheme`."""

    if scheme is AuthScheme.BASIC:
        return basic_credential(account.user_id, account.secret)
    return hmac_credential(account.user_id, account.secret, method, url, date, body)
