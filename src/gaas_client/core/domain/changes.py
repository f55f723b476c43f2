"""Modelos de petición: objetos nuevos (`New*`) y conjuntos de cambios (`*ChangeSet`).

Por qué dos familias:
- `New*Data` describe un objeto completo; los opcionales no informados se
  omiten del JSON y el servidor aplica sus defaults.
- `*ChangeSet` describe un parche. Cada campo tiene tres estados: no
  informado (no se envía, no cambia), `None` explícito (se envía `null`, se
  borra) y valor (se reemplaza). Lo mismo aplica a las claves de los mapas
  que contienen (p.ej. `metadata={"k": None}` borra `k`).

La política de serialización de cada familia vive en `adapters.codec`.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, SerializerFunctionWrapHandler, model_serializer
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict

from gaas_client.core.domain.enums import IndustryDomain, TranslationRequestStatus, UserType


class RequestModel(BaseModel):
    model_config = ConfigDict(
        extra="forbid",
        populate_by_name=True,
        alias_generator=to_camel,
        validate_assignment=True,
    )


class NewObject(RequestModel):
    """Objeto completo: se omiten los opcionales en `None`."""


class ChangeSet(RequestModel):
    """Parche: se envían solo los campos informados, `None` incluido."""


class NewBundleData(NewObject):
    source_language: str = Field(..., min_length=1)
    target_languages: set[str] | None = None
    metadata: dict[str, str] | None = None
    partner: str | None = None
    segment_separator_pattern: str | None = None
    no_translation_pattern: str | None = None


class BundleDataChangeSet(ChangeSet):
    target_languages: set[str] | None = None
    read_only: bool | None = None
    metadata: dict[str, str | None] | None = None
    partner: str | None = None
    segment_separator_pattern: str | None = None
    no_translation_pattern: str | None = None


class NewResourceEntryData(NewObject):
    """Entrada completa para `upload_resource_entries`."""

    value: str
    reviewed: bool | None = None
    notes: list[str] | None = None
    metadata: dict[str, str] | None = None
    partner_status: str | None = None
    sequence_number: int | None = None


class ResourceEntryDataChangeSet(ChangeSet):
    """Parche de una entrada para `update_resource_entries` / `update_resource_entry`."""

    value: str | None = None
    reviewed: bool | None = None
    notes: list[str] | None = None
    metadata: dict[str, str | None] | None = None
    partner_status: str | None = None
    sequence_number: int | None = None


class NewUserData(NewObject):
    type: UserType
    display_name: str | None = None
    comment: str | None = None
    bundles: set[str] | None = None
    metadata: dict[str, str] | None = None
    external_id: str | None = None


class UserDataChangeSet(ChangeSet):
    display_name: str | None = None
    comment: str | None = None
    bundles: set[str] | None = None
    metadata: dict[str, str | None] | None = None
    external_id: str | None = None


class NewMTServiceData(NewObject):
    service_instance_id: str = Field(..., min_length=1)
    params: dict[str, Any] | None = None


class NewTranslationConfigData(NewObject):
    mt_service: NewMTServiceData | None = None


class _SubmitAsStatus(RequestModel):
    """`submit=True` viaja como `"status": "SUBMITTED"`."""

    submit: bool | None = None

    @model_serializer(mode="wrap")
    def _serialize_submit(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        submit = data.pop("submit", None)
        if submit:
            data["status"] = TranslationRequestStatus.SUBMITTED.value
        return data


class NewTranslationRequestData(_SubmitAsStatus, NewObject):
    target_languages_by_bundle: dict[str, set[str]]
    partner: str = "IBM"
    name: str | None = None
    organization: str | None = None
    emails: list[str] | None = None
    phones: list[str] | None = None
    domains: set[IndustryDomain] | None = None
    notes: list[str] | None = None
    metadata: dict[str, str] | None = None


class TranslationRequestDataChangeSet(_SubmitAsStatus, ChangeSet):
    target_languages_by_bundle: dict[str, set[str]] | None = None
    partner: str | None = None
    name: str | None = None
    organization: str | None = None
    emails: list[str] | None = None
    phones: list[str] | None = None
    domains: set[IndustryDomain] | None = None
    notes: list[str] | None = None
    metadata: dict[str, str | None] | None = None


class NewDocumentData(NewObject):
    source_language: str = Field(..., min_length=1)
    target_languages: set[str] | None = None
    notes: list[str] | None = None
    metadata: dict[str, str] | None = None


class DocumentDataChangeSet(ChangeSet):
    target_languages: set[str] | None = None
    read_only: bool | None = None
    notes: list[str] | None = None
    metadata: dict[str, str | None] | None = None


class NewDocumentTranslationRequestData(_SubmitAsStatus, NewObject):
    target_languages_map: dict[str, dict[str, set[str]]]
    partner: str = "IBM"
    name: str | None = None
    organization: str | None = None
    emails: list[str] | None = None
    phones: list[str] | None = None
    domains: set[IndustryDomain] | None = None
    notes: list[str] | None = None
    metadata: dict[str, str] | None = None
    partner_parameters: dict[str, str] | None = None


class DocumentTranslationRequestDataChangeSet(_SubmitAsStatus, ChangeSet):
    target_languages_map: dict[str, dict[str, set[str]]] | None = None
    partner: str | None = None
    name: str | None = None
    organization: str | None = None
    emails: list[str] | None = None
    phones: list[str] | None = None
    domains: set[IndustryDomain] | None = None
    notes: list[str] | None = None
    metadata: dict[str, str | None] | None = None
    partner_parameters: dict[str, str | None] | None = None
