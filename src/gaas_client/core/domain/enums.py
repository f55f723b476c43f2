"""Enumeraciones del contrato del servicio.

El servidor evoluciona de forma independiente al cliente: puede introducir
valores nuevos (p.ej. un estado de traducción adicional) en cualquier momento.
Por eso las enumeraciones que se leen del wire heredan de `FallbackEnum`:
un valor desconocido se decodifica al miembro `UNKNOWN` en vez de romper la
deserialización de toda la respuesta.
"""

from __future__ import annotations

from enum import Enum


class FallbackEnum(str, Enum):
    """`str` Enum con coincidencia insensible a mayúsculas y miembro de reserva.

    Pydantic delega en `_missing_` cuando el valor no coincide exactamente,
    así que la regla aplica igual en `TranslationStatus("x")` y dentro de
    cualquier modelo que declare un campo de este tipo.
    """

    @classmethod
    def fallback(cls) -> "FallbackEnum":
        """Miembro usado para valores desconocidos."""

        return cls["UNKNOWN"]

    @classmethod
    def _missing_(cls, value: object) -> "FallbackEnum":
        if isinstance(value, str):
            wanted = value.upper()
            for member in cls:
                if member.value.upper() == wanted:
                    return member
        return cls.fallback()

    @classmethod
    def from_wire(cls, value: object) -> "FallbackEnum":
        """Decodifica un valor del wire sin lanzar nunca."""

        if isinstance(value, cls):
            return value
        return cls(value)


class ResponseStatus(FallbackEnum):
    """Discriminador del sobre de respuesta (`OK` / `ERROR`)."""

    OK = "SUCCESS"
    ERROR = "ERROR"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def _missing_(cls, value: object) -> "ResponseStatus":
        # El servicio envía "SUCCESS" (a veces en minúsculas); "OK" es sinónimo.
        if isinstance(value, str) and value.upper() == "OK":
            return cls.OK
        return super()._missing_(value)  # type: ignore[return-value]


class TranslationStatus(FallbackEnum):
    SOURCE_LANGUAGE = "SOURCE_LANGUAGE"
    IN_PROGRESS = "IN_PROGRESS"
    TRANSLATED = "TRANSLATED"
    FAILED = "FAILED"
    UNCONFIGURED = "UNCONFIGURED"
    UNKNOWN = "UNKNOWN"


class TranslationRequestStatus(FallbackEnum):
    DRAFT = "DRAFT"
    SUBMITTED = "SUBMITTED"
    STARTED = "STARTED"
    TRANSLATED = "TRANSLATED"
    MERGED = "MERGED"
    CANCELLED = "CANCELLED"
    UNKNOWN = "UNKNOWN"


class UserType(FallbackEnum):
    ADMINISTRATOR = "ADMINISTRATOR"
    TRANSLATOR = "TRANSLATOR"
    READER = "READER"
    UNKNOWN = "UNKNOWN"


class DocumentType(FallbackEnum):
    """Tipos de documento soportados por la API de documentos."""

    HTML = "HTML"
    MD = "MD"
    UNKNOWN = "UNKNOWN"

    def path_segment(self) -> str:
        """Segmento usado en `/v2/documents/{type}`."""

        return self.value.lower()

    def media_type(self) -> str:
        """Media type del contenido del documento."""

        return "text/html" if self is DocumentType.HTML else "text/plain"


_INDUSTRY_DESCRIPTIONS: dict[str, str] = {
    "AEROMIL": "Aerospace and the military-industrial complex",
    "CNSTRCT": "Construction",
    "GDSSVCS": "Goods and service",
    "EDUCATN": "Education",
    "FINSVCS": "Financial Services",
    "GOVPUBL": "Government and public sector",
    "HEALTHC": "Healthcare and social services",
    "INDSTMF": "Industrial manufacturing",
    "TELECOM": "Telecommunication",
    "DMEDENT": "Digital media and entertainment",
    "INFTECH": "Information technology",
    "TRVLTRS": "Travel and transportation",
    "INSURNC": "Insurance",
    "ENGYUTL": "Energy and utilities",
    "AGRICLT": "Agriculture",
}


class IndustryDomain(str, Enum):
    """Dominio de industria de una translation request.

    No tiene miembro de reserva: los modelos de lectura descartan los códigos
    que no reconocen (ver `known_domains`).
    """

    AEROMIL = "AEROMIL"
    CNSTRCT = "CNSTRCT"
    GDSSVCS = "GDSSVCS"
    EDUCATN = "EDUCATN"
    FINSVCS = "FINSVCS"
    GOVPUBL = "GOVPUBL"
    HEALTHC = "HEALTHC"
    INDSTMF = "INDSTMF"
    TELECOM = "TELECOM"
    DMEDENT = "DMEDENT"
    INFTECH = "INFTECH"
    TRVLTRS = "TRVLTRS"
    INSURNC = "INSURNC"
    ENGYUTL = "ENGYUTL"
    AGRICLT = "AGRICLT"

    @property
    def description(self) -> str:
        """Descripción legible del dominio."""

        return _INDUSTRY_DESCRIPTIONS[self.value]


def known_domains(values: object) -> frozenset[IndustryDomain]:
    """Convierte códigos del wire a `IndustryDomain`, ignorando desconocidos."""

    if not values:
        return frozenset()
    out: set[IndustryDomain] = set()
    for raw in values:  # type: ignore[union-attr]
        if isinstance(raw, IndustryDomain):
            out.add(raw)
            continue
        if not isinstance(raw, str):
            continue
        try:
            out.add(IndustryDomain(raw.upper()))
        except ValueError:
            continue
    return frozenset(out)
