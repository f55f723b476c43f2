"""Errores del cliente.

Por qué un único tipo:
- El llamador solo necesita distinguir "argumento inválido" de "todo lo demás";
  el resto del detalle (mensaje, causa) es diagnóstico.
- `kind` hace explícita la categoría sin obligar a capturar jerarquías.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Categoría de un `ServiceError`.

    - INVALID_ARGUMENT: precondición del cliente violada; no hubo llamada de red.
    - PROTOCOL: fallo de transporte, content-type inesperado o JSON inválido.
    - LOGICAL: el servidor respondió con `status=ERROR` (o HTTP >= 300).
    """

    INVALID_ARGUMENT = "invalid_argument"
    PROTOCOL = "protocol"
    LOGICAL = "logical"


class ServiceError(Exception):
    """Error único del cliente, discriminado por `kind`."""

    def __init__(
        self,
        message: str,
        *,
        kind: ErrorKind = ErrorKind.LOGICAL,
        method: str | None = None,
        path: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.method = method
        self.path = path
        self.status_code = status_code

    @property
    def is_invalid_argument(self) -> bool:
        return self.kind is ErrorKind.INVALID_ARGUMENT

    @classmethod
    def invalid_argument(cls, message: str) -> "ServiceError":
        return cls(message, kind=ErrorKind.INVALID_ARGUMENT)

    @classmethod
    def protocol(
        cls,
        message: str,
        *,
        method: str | None = None,
        path: str | None = None,
        status_code: int | None = None,
    ) -> "ServiceError":
        return cls(
            message,
            kind=ErrorKind.PROTOCOL,
            method=method,
            path=path,
            status_code=status_code,
        )

    @classmethod
    def logical(
        cls,
        message: str,
        *,
        method: str | None = None,
        path: str | None = None,
        status_code: int | None = None,
    ) -> "ServiceError":
        return cls(
            message,
            kind=ErrorKind.LOGICAL,
            method=method,
            path=path,
            status_code=status_code,
        )

    def __str__(self) -> str:
        if self.method and self.path:
            return f"{self.message} ({self.method} {self.path})"
        return self.message


def require(value: object, name: str) -> None:
    """Valida un argumento obligatorio (no `None` y, si es str, no vacío)."""

    if value is None or (isinstance(value, str) and not value):
        raise ServiceError.invalid_argument(f"{name} must be specified.")
