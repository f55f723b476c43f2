"""Modelos de lectura del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Cada entidad del wire se describe una sola vez, con alias camelCase, y se
  valida en el borde; no hace falta una capa paralela de DTOs "Rest*".
- Los registros son inmutables (`frozen=True`) y toleran campos nuevos del
  servidor (`extra="ignore"`).

Nota:
- Estos modelos describen *qué* devuelve el servicio, no *cómo* se obtiene.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict

from gaas_client.core.domain.enums import (
    DocumentType,
    IndustryDomain,
    ResponseStatus,
    TranslationRequestStatus,
    TranslationStatus,
    UserType,
    known_domains,
)


class WireModel(BaseModel):
    """Configuración común de los registros leídos del servicio."""

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
        frozen=True,
    )


class AuditedModel(WireModel):
    updated_by: str | None = Field(
        default=None,
        description="Último usuario que modificó la entidad.",
    )
    updated_at: datetime | None = Field(
        default=None,
        description="Momento de la última modificación (UTC).",
    )


class ServiceResponse(WireModel):
    """Sobre uniforme de toda respuesta JSON.

    El invocador solo depende de este contrato: `status` + `message`,
    independientemente del payload de cada endpoint.
    """

    status: ResponseStatus = Field(
        default=ResponseStatus.UNKNOWN,
        description="Discriminador OK/ERROR.",
    )
    message: str | None = Field(
        default=None,
        description="Mensaje del servidor (diagnóstico).",
    )

    @property
    def is_error(self) -> bool:
        return self.status is ResponseStatus.ERROR


class BundleData(AuditedModel):
    source_language: str = Field(..., min_length=1)
    target_languages: frozenset[str] = Field(default_factory=frozenset)
    read_only: bool = False
    metadata: dict[str, str] = Field(default_factory=dict)
    partner: str | None = None
    segment_separator_pattern: str | None = None
    no_translation_pattern: str | None = None


class ReviewStatusMetrics(WireModel):
    reviewed: int = 0
    not_yet_reviewed: int = 0


class LanguageMetrics(WireModel):
    translation_status_metrics: dict[TranslationStatus, int] = Field(default_factory=dict)
    review_status_metrics: ReviewStatusMetrics | None = None
    partner_status_metrics: dict[str, int] = Field(default_factory=dict)


class BundleMetrics(WireModel):
    translation_status_metrics_by_language: dict[str, dict[TranslationStatus, int]] = Field(
        default_factory=dict,
    )
    review_status_metrics_by_language: dict[str, ReviewStatusMetrics] = Field(default_factory=dict)
    partner_status_metrics_by_language: dict[str, dict[str, int]] = Field(default_factory=dict)


class ResourceEntryData(AuditedModel):
    """Registro completo de una clave en un idioma."""

    value: str | None = None
    source_value: str | None = None
    translation_status: TranslationStatus = TranslationStatus.UNKNOWN
    reviewed: bool = False
    notes: list[str] = Field(default_factory=list)
    metadata: dict[str, str] = Field(default_factory=dict)
    partner_status: str | None = None
    sequence_number: int | None = None


class UserData(AuditedModel):
    type: UserType = UserType.UNKNOWN
    id: str | None = None
    password: str | None = Field(default=None, repr=False)
    display_name: str | None = None
    comment: str | None = None
    bundles: frozenset[str] = Field(
        default_factory=frozenset,
        description="Bundles accesibles; {'*'} significa todos.",
    )
    metadata: dict[str, str] = Field(default_factory=dict)
    service_managed: bool = False
    external_id: str | None = None


class ExternalServiceInfo(WireModel):
    type: str | None = None
    id: str | None = None
    name: str | None = None
    supported_translation: dict[str, frozenset[str]] = Field(default_factory=dict)


class ServiceInfo(WireModel):
    supported_translation: dict[str, frozenset[str]] = Field(
        default_factory=dict,
        description="Idioma origen -> idiomas destino con traducción automática.",
    )
    external_services: list[ExternalServiceInfo] = Field(default_factory=list)


class UsageData(WireModel):
    size: int = -1


class ServiceInstanceInfo(AuditedModel):
    region: str | None = None
    cf_service_instance_id: str | None = None
    service_id: str | None = None
    org_id: str | None = None
    space_id: str | None = None
    plan_id: str | None = None
    disabled: bool = False
    usage: UsageData | None = None


class MTServiceBindingData(AuditedModel):
    service_name: str | None = None
    service_id: str | None = None
    service_credentials: dict[str, Any] = Field(default_factory=dict, repr=False)
    service_instance_name: str | None = None
    service_key_guid: str | None = None
    refresh_token: str | None = Field(default=None, repr=False)


class MTServiceData(AuditedModel):
    service_instance_id: str | None = None
    params: dict[str, Any] = Field(default_factory=dict)


class TranslationConfigData(AuditedModel):
    mt_service: MTServiceData | None = None


class WordCountData(WireModel):
    source_language: str | None = None
    words_by_target_language: dict[str, int] = Field(default_factory=dict, alias="counts")


class _TranslationRequestBase(AuditedModel):
    id: str | None = None
    partner: str | None = None
    name: str | None = None
    organization: str | None = None
    emails: list[str] = Field(default_factory=list)
    phones: list[str] = Field(default_factory=list)
    domains: frozenset[IndustryDomain] = Field(default_factory=frozenset)
    notes: list[str] = Field(default_factory=list)
    metadata: dict[str, str] = Field(default_factory=dict)
    status: TranslationRequestStatus = TranslationRequestStatus.UNKNOWN
    estimated_completion: datetime | None = None
    created_at: datetime | None = None
    submitted_at: datetime | None = None
    started_at: datetime | None = None
    translated_at: datetime | None = None
    merged_at: datetime | None = None

    @field_validator("domains", mode="before")
    @classmethod
    def _drop_unknown_domains(cls, value: object) -> frozenset[IndustryDomain]:
        return known_domains(value)


class TranslationRequestData(_TranslationRequestBase):
    target_languages_by_bundle: dict[str, frozenset[str]] = Field(default_factory=dict)
    word_counts_by_bundle: dict[str, WordCountData] = Field(default_factory=dict)


class DocumentData(AuditedModel):
    document_id: str | None = None
    type: DocumentType = DocumentType.UNKNOWN
    source_language: str = Field(..., min_length=1)
    target_languages: frozenset[str] = Field(default_factory=frozenset)
    read_only: bool = False
    notes: list[str] = Field(default_factory=list)
    metadata: dict[str, str] = Field(default_factory=dict)


class DocumentMetrics(WireModel):
    translation_status_metrics_by_language: dict[str, dict[TranslationStatus, int]] = Field(
        default_factory=dict,
    )
    review_status_metrics_by_language: dict[str, ReviewStatusMetrics] = Field(default_factory=dict)


class DocumentTranslationRequestData(_TranslationRequestBase):
    target_languages_map: dict[str, dict[str, frozenset[str]]] = Field(
        default_factory=dict,
        description="Tipo de documento -> documento -> idiomas destino.",
    )
    partner_parameters: dict[str, str] = Field(default_factory=dict)
    word_counts_map: dict[str, dict[str, WordCountData]] = Field(default_factory=dict)
