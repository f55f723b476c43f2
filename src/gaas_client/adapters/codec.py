"""Codec JSON del contrato del servicio.

Dos reglas que difieren del mapeo por defecto:

1. Enumeraciones con reserva: los tipos `FallbackEnum` decodifican valores
   desconocidos a `UNKNOWN` (la regla vive en el propio tipo, ver
   `core.domain.enums`), así que aquí solo hace falta validar con Pydantic.
2. Mapas de cambios con `null`: en un delta `{"a": "x", "b": None}` la clave
   `b` debe llegar al servidor como `"b": null` (borrado). Ausente y `null`
   significan cosas distintas, así que los deltas y los change sets nunca
   pasan por un filtro de `None`.

Fallos de decodificación (content-type inesperado, JSON mal formado, sobre
que no valida) se reportan como `ServiceError` de tipo PROTOCOL.
"""

from __future__ import annotations

import json
from typing import Any, Mapping

from pydantic import BaseModel, ValidationError

from gaas_client.core.domain.changes import NewObject
from gaas_client.core.domain.models import ServiceResponse
from gaas_client.core.errors import ServiceError
from gaas_client.core.interfaces.invoker import EnvelopeT

JSON_MEDIA_TYPE = "application/json"
XLIFF_MEDIA_TYPE = "application/xliff+xml"


def _dumps(payload: Any) -> bytes:
    # Separadores compactos: el cuerpo firmado es exactamente lo que se envía.
    return json.dumps(payload, ensure_ascii=False, separators=(",", ":")).encode("utf-8")


def encode_new_object(model: BaseModel) -> bytes:
    """Serializa un `New*Data`: los opcionales en `None` se omiten."""

    return _dumps(payload_of(model))


def encode_change_set(model: BaseModel) -> bytes:
    """Serializa un `*ChangeSet`: solo campos informados, `None` explícito incluido."""

    return _dumps(payload_of(model))


def payload_of(model: BaseModel) -> dict[str, Any]:
    """Payload JSON de un modelo de petición según su familia."""

    if isinstance(model, NewObject):
        return model.model_dump(mode="json", by_alias=True, exclude_none=True)
    return model.model_dump(mode="json", by_alias=True, exclude_unset=True)


def encode_delta(delta: Mapping[str, Any]) -> bytes:
    """Serializa un mapa clave -> valor conservando los `null` explícitos.

    Los valores pueden ser `str`, `None` o modelos de petición (entradas);
    cada modelo se serializa con la política de su familia y `None` siempre
    se emite como `null`.
    """

    payload: dict[str, Any] = {}
    for key, value in delta.items():
        payload[key] = payload_of(value) if isinstance(value, BaseModel) else value
    return _dumps(payload)


def media_type(content_type: str | None) -> str:
    """Media type sin parámetros y en minúsculas (`"application/json; charset=utf-8"` -> `"application/json"`)."""

    if not content_type:
        return ""
    return content_type.split(";", 1)[0].strip().lower()


def decode_json(body: bytes) -> Any:
    """Decodifica un cuerpo UTF-8; JSON inválido -> ValueError."""

    return json.loads(body.decode("utf-8"))


def decode_envelope(
    body: bytes,
    envelope_type: type[EnvelopeT],
    *,
    method: str | None = None,
    path: str | None = None,
    status_code: int | None = None,
) -> EnvelopeT:
    """Valida un cuerpo JSON contra el sobre tipado del endpoint."""

    try:
        data = decode_json(body)
    except (UnicodeDecodeError, ValueError) as exc:
        raise ServiceError.protocol(
            "Malformed JSON response",
            method=method,
            path=path,
            status_code=status_code,
        ) from exc

    if not isinstance(data, dict):
        raise ServiceError.protocol(
            "JSON response is not an object",
            method=method,
            path=path,
            status_code=status_code,
        )

    try:
        return envelope_type.model_validate(data)
    except ValidationError as exc:
        # Un sobre de error no trae el payload del endpoint: nos quedamos con
        # status/message para que el llamador reciba el error lógico.
        try:
            bare = ServiceResponse.model_validate(data)
        except ValidationError:
            bare = None
        if bare is not None and bare.is_error:
            return envelope_type.model_construct(status=bare.status, message=bare.message)
        raise ServiceError.protocol(
            "Unexpected JSON response shape",
            method=method,
            path=path,
            status_code=status_code,
        ) from exc


def error_message_from_body(body: bytes) -> str | None:
    """Extrae `message` de un cuerpo de error JSON, si lo hay."""

    try:
        data = decode_json(body)
    except (UnicodeDecodeError, ValueError):
        return None
    if isinstance(data, dict) and isinstance(data.get("message"), str):
        return data["message"]
    return None
