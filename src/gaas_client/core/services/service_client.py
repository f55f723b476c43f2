"""Typed facade over the translation-management REST API.

Every public method issues exactly one signed HTTP request through the
invoker and maps the JSON envelope to the domain models. Resource upload and
update are delegated to `ResourceSynchronizer`, which owns their semantics.
"""

from __future__ import annotations

from typing import Iterable, Mapping

import httpx
from pydantic import Field

from gaas_client.adapters import codec
from gaas_client.adapters.http_client import HttpInvoker, build_http_client, escape_path_segment
from gaas_client.core.config import AppSettings
from gaas_client.core.domain.account import AuthScheme, ServiceAccount
from gaas_client.core.domain.changes import (
    BundleDataChangeSet,
    DocumentDataChangeSet,
    DocumentTranslationRequestDataChangeSet,
    NewBundleData,
    NewDocumentData,
    NewDocumentTranslationRequestData,
    NewResourceEntryData,
    NewTranslationConfigData,
    NewTranslationRequestData,
    NewUserData,
    ResourceEntryDataChangeSet,
    TranslationRequestDataChangeSet,
    UserDataChangeSet,
)
from gaas_client.core.domain.enums import DocumentType, TranslationStatus
from gaas_client.core.domain.models import (
    BundleData,
    BundleMetrics,
    DocumentData,
    DocumentMetrics,
    DocumentTranslationRequestData,
    ExternalServiceInfo,
    LanguageMetrics,
    MTServiceBindingData,
    ResourceEntryData,
    ReviewStatusMetrics,
    ServiceInfo,
    ServiceInstanceInfo,
    ServiceResponse,
    TranslationConfigData,
    TranslationRequestData,
    UserData,
)
from gaas_client.core.errors import ServiceError, require
from gaas_client.core.services.resource_sync import ResourceSynchronizer


SERVICE_SEGMENT = "$service"
API_VERSION = "v2"

_BUNDLE_METRICS_FIELDS = (
    "translationStatusMetricsByLanguage,reviewStatusMetricsByLanguage,partnerStatusMetricsByLanguage"
)
_LANGUAGE_METRICS_FIELDS = "translationStatusMetrics,reviewStatusMetrics,partnerStatusMetrics"
_DOCUMENT_METRICS_FIELDS = "translationStatusMetricsByLanguage,reviewStatusMetricsByLanguage"


# Response envelopes: one per payload shape, private to the facade.


class _ServiceInfoResponse(ServiceResponse):
    supported_translation: dict[str, frozenset[str]] = Field(default_factory=dict)
    external_services: list[ExternalServiceInfo] = Field(default_factory=list)


class _ServiceInstanceResponse(ServiceResponse):
    service_instance: ServiceInstanceInfo


class _BundleIdsResponse(ServiceResponse):
    bundle_ids: list[str]


class _BundleResponse(ServiceResponse):
    bundle: BundleData


class _BundleMetricsResponse(ServiceResponse):
    translation_status_metrics_by_language: dict[str, dict[TranslationStatus, int]] = Field(default_factory=dict)
    review_status_metrics_by_language: dict[str, ReviewStatusMetrics] = Field(default_factory=dict)
    partner_status_metrics_by_language: dict[str, dict[str, int]] = Field(default_factory=dict)


class _ResourceStringsResponse(ServiceResponse):
    resource_strings: dict[str, str]


class _ResourceEntriesResponse(ServiceResponse):
    resource_entries: dict[str, ResourceEntryData]


class _ResourceEntryResponse(ServiceResponse):
    resource_entry: ResourceEntryData


class _LanguageMetricsResponse(ServiceResponse):
    translation_status_metrics: dict[TranslationStatus, int] = Field(default_factory=dict)
    review_status_metrics: ReviewStatusMetrics | None = None
    partner_status_metrics: dict[str, int] = Field(default_factory=dict)


class _UsersResponse(ServiceResponse):
    users: dict[str, UserData]


class _UserResponse(ServiceResponse):
    id: str | None = None
    user: UserData


class _MTServiceBindingsResponse(ServiceResponse):
    mt_service_bindings: dict[str, MTServiceBindingData]


class _MTServiceBindingResponse(ServiceResponse):
    mt_service_binding: MTServiceBindingData


class _MTLanguagesByServiceResponse(ServiceResponse):
    mt_languages: dict[str, dict[str, frozenset[str]]]


class _MTLanguagesResponse(ServiceResponse):
    mt_languages: dict[str, frozenset[str]]


class _TranslationConfigsResponse(ServiceResponse):
    translation_configs: dict[str, dict[str, TranslationConfigData]]


class _TranslationConfigResponse(ServiceResponse):
    translation_config: TranslationConfigData


class _TranslationRequestsResponse(ServiceResponse):
    translation_requests: dict[str, TranslationRequestData]


class _TranslationRequestResponse(ServiceResponse):
    translation_request: TranslationRequestData


class _DocumentIdsResponse(ServiceResponse):
    document_ids: list[str]


class _DocumentResponse(ServiceResponse):
    document: DocumentData


class _DocumentMetricsResponse(ServiceResponse):
    translation_status_metrics_by_language: dict[str, dict[TranslationStatus, int]] = Field(default_factory=dict)
    review_status_metrics_by_language: dict[str, ReviewStatusMetrics] = Field(default_factory=dict)


class _DocumentTranslationRequestsResponse(ServiceResponse):
    translation_requests: dict[str, DocumentTranslationRequestData]


class _DocumentTranslationRequestResponse(ServiceResponse):
    translation_request: DocumentTranslationRequestData


def _require_change_set(value: object, name: str, expected: type) -> None:
    require(value, name)
    if not isinstance(value, expected):
        raise ServiceError.invalid_argument(f"{name} must be a {expected.__name__}.")


def _known_document_type(doc_type: DocumentType) -> DocumentType:
    require(doc_type, "doc_type")
    doc_type = DocumentType.from_wire(doc_type)  # type: ignore[assignment]
    if doc_type is DocumentType.UNKNOWN:
        raise ServiceError.invalid_argument("doc_type must be a known document type.")
    return doc_type


class ServiceClient:
    """Client for one service instance.

    `auth_scheme` is the only mutable state: set it once, before sharing the
    client between threads. The client owns (and closes) its `httpx.Client`
    unless one is passed in.
    """

    def __init__(
        self,
        account: ServiceAccount,
        *,
        auth_scheme: AuthScheme = AuthScheme.HMAC,
        http_client: httpx.Client | None = None,
        settings: AppSettings | None = None,
    ) -> None:
        self._account = account
        self._owns_http = http_client is None
        self._http = http_client if http_client is not None else build_http_client(settings)
        self._invoker = HttpInvoker(account, self._http, auth_scheme=auth_scheme)
        self._sync = ResourceSynchronizer(self._invoker, account.instance_id)

    @classmethod
    def from_settings(
        cls,
        settings: AppSettings | None = None,
        *,
        http_client: httpx.Client | None = None,
    ) -> "ServiceClient":
        """Build a client from `GP_*` environment configuration."""

        settings = settings or AppSettings()
        return cls(
            settings.to_service_account(),
            auth_scheme=settings.auth_scheme,
            http_client=http_client,
            settings=settings,
        )

    @property
    def account(self) -> ServiceAccount:
        return self._account

    @property
    def auth_scheme(self) -> AuthScheme:
        return self._invoker.auth_scheme

    @auth_scheme.setter
    def auth_scheme(self, scheme: AuthScheme) -> None:
        self._invoker.auth_scheme = AuthScheme(scheme)

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> "ServiceClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # -- paths -------------------------------------------------------------

    def _path(self, *segments: str) -> str:
        """Instance-scoped path; every segment is escaped independently."""

        parts = (self._account.instance_id, API_VERSION, *segments)
        return "/".join(escape_path_segment(p) for p in parts)

    def _get(self, path: str, envelope_type: type, query: Mapping[str, str] | None = None):
        return self._invoker.invoke_json("GET", path, envelope_type, query=query)

    def _send(
        self,
        method: str,
        path: str,
        payload: bytes | None,
        envelope_type: type = ServiceResponse,
        query: Mapping[str, str] | None = None,
    ):
        return self._invoker.invoke_json(method, path, envelope_type, query=query, payload=payload)

    # -- service -----------------------------------------------------------

    def get_service_info(self) -> ServiceInfo:
        """Anonymous service metadata (supported machine translation pairs)."""

        path = "/".join((escape_path_segment(SERVICE_SEGMENT), API_VERSION, "info"))
        resp = self._invoker.invoke_json("GET", path, _ServiceInfoResponse, anonymous=True)
        return ServiceInfo(
            supported_translation=resp.supported_translation,
            external_services=resp.external_services,
        )

    def get_service_instance_info(self) -> ServiceInstanceInfo:
        return self._get(self._path("instance"), _ServiceInstanceResponse).service_instance

    # -- bundles -----------------------------------------------------------

    def get_bundle_ids(self) -> set[str]:
        return set(self._get(self._path("bundles"), _BundleIdsResponse).bundle_ids)

    def create_bundle(self, bundle_id: str, new_bundle: NewBundleData) -> None:
        require(bundle_id, "bundle_id")
        _require_change_set(new_bundle, "new_bundle", NewBundleData)
        self._send("PUT", self._path("bundles", bundle_id), codec.encode_new_object(new_bundle))

    def get_bundle_info(self, bundle_id: str) -> BundleData:
        require(bundle_id, "bundle_id")
        return self._get(self._path("bundles", bundle_id), _BundleResponse).bundle

    def get_bundle_metrics(self, bundle_id: str) -> BundleMetrics:
        require(bundle_id, "bundle_id")
        resp = self._get(
            self._path("bundles", bundle_id),
            _BundleMetricsResponse,
            {"fields": _BUNDLE_METRICS_FIELDS},
        )
        return BundleMetrics(
            translation_status_metrics_by_language=resp.translation_status_metrics_by_language,
            review_status_metrics_by_language=resp.review_status_metrics_by_language,
            partner_status_metrics_by_language=resp.partner_status_metrics_by_language,
        )

    def update_bundle(self, bundle_id: str, change_set: BundleDataChangeSet) -> None:
        require(bundle_id, "bundle_id")
        _require_change_set(change_set, "change_set", BundleDataChangeSet)
        self._send("POST", self._path("bundles", bundle_id), codec.encode_change_set(change_set))

    def delete_bundle(self, bundle_id: str) -> None:
        require(bundle_id, "bundle_id")
        self._send("DELETE", self._path("bundles", bundle_id), None)

    def get_resource_strings(
        self,
        bundle_id: str,
        language: str,
        fallback: bool = False,
    ) -> dict[str, str]:
        """Key -> value map of one language.

        With `fallback=True` the server fills keys missing in `language`
        with the source-language value.
        """

        require(bundle_id, "bundle_id")
        require(language, "language")
        query = {"fallback": "true"} if fallback else None
        resp = self._get(self._path("bundles", bundle_id, language), _ResourceStringsResponse, query)
        return dict(resp.resource_strings)

    def get_resource_entries(self, bundle_id: str, language: str) -> dict[str, ResourceEntryData]:
        require(bundle_id, "bundle_id")
        require(language, "language")
        resp = self._get(
            self._path("bundles", bundle_id, language),
            _ResourceEntriesResponse,
            {"fields": "resourceEntries"},
        )
        return dict(sorted(resp.resource_entries.items()))

    def get_language_metrics(self, bundle_id: str, language: str) -> LanguageMetrics:
        require(bundle_id, "bundle_id")
        require(language, "language")
        resp = self._get(
            self._path("bundles", bundle_id, language),
            _LanguageMetricsResponse,
            {"fields": _LANGUAGE_METRICS_FIELDS},
        )
        return LanguageMetrics(
            translation_status_metrics=resp.translation_status_metrics,
            review_status_metrics=resp.review_status_metrics,
            partner_status_metrics=resp.partner_status_metrics,
        )

    def upload_resource_strings(
        self,
        bundle_id: str,
        language: str,
        strings: Mapping[str, str],
    ) -> None:
        """Replace the key set of `language` (see `ResourceSynchronizer`)."""

        self._sync.upload_resource_strings(bundle_id, language, strings)

    def upload_resource_entries(
        self,
        bundle_id: str,
        language: str,
        entries: Mapping[str, NewResourceEntryData],
    ) -> None:
        self._sync.upload_resource_entries(bundle_id, language, entries)

    def update_resource_strings(
        self,
        bundle_id: str,
        language: str,
        strings: Mapping[str, str | None] | None = None,
        resync: bool = False,
    ) -> None:
        """Merge a delta into `language`; `None` values delete keys."""

        self._sync.update_resource_strings(bundle_id, language, strings, resync)

    def update_resource_entries(
        self,
        bundle_id: str,
        language: str,
        entries: Mapping[str, ResourceEntryDataChangeSet | None] | None = None,
        resync: bool = False,
    ) -> None:
        self._sync.update_resource_entries(bundle_id, language, entries, resync)

    def get_resource_entry(self, bundle_id: str, language: str, key: str) -> ResourceEntryData:
        require(bundle_id, "bundle_id")
        require(language, "language")
        require(key, "key")
        path = self._path("bundles", bundle_id, language, key)
        return self._get(path, _ResourceEntryResponse).resource_entry

    def update_resource_entry(
        self,
        bundle_id: str,
        language: str,
        key: str,
        change_set: ResourceEntryDataChangeSet,
    ) -> None:
        require(bundle_id, "bundle_id")
        require(language, "language")
        require(key, "key")
        _require_change_set(change_set, "change_set", ResourceEntryDataChangeSet)
        path = self._path("bundles", bundle_id, language, key)
        self._send("POST", path, codec.encode_change_set(change_set))

    # -- users -------------------------------------------------------------

    def get_users(self) -> dict[str, UserData]:
        return dict(self._get(self._path("users"), _UsersResponse).users)

    def create_user(self, new_user: NewUserData) -> UserData:
        _require_change_set(new_user, "new_user", NewUserData)
        resp = self._send(
            "POST",
            self._path("users", "new"),
            codec.encode_new_object(new_user),
            _UserResponse,
        )
        return resp.user

    def get_user(self, user_id: str) -> UserData:
        require(user_id, "user_id")
        return self._get(self._path("users", user_id), _UserResponse).user

    def update_user(
        self,
        user_id: str,
        change_set: UserDataChangeSet | None = None,
        reset_password: bool = False,
    ) -> UserData:
        """Patch a user; with `reset_password=True` the change set may be omitted."""

        require(user_id, "user_id")
        if change_set is None:
            if not reset_password:
                raise ServiceError.invalid_argument(
                    "change_set must be specified when reset_password is false."
                )
            payload = codec.encode_delta({})
        else:
            _require_change_set(change_set, "change_set", UserDataChangeSet)
            payload = codec.encode_change_set(change_set)
        query = {"resetPassword": "true"} if reset_password else None
        resp = self._send("POST", self._path("users", user_id), payload, _UserResponse, query)
        return resp.user

    def delete_user(self, user_id: str) -> None:
        require(user_id, "user_id")
        self._send("DELETE", self._path("users", user_id), None)

    # -- configuration -----------------------------------------------------

    def get_all_mt_service_bindings(self) -> dict[str, MTServiceBindingData]:
        resp = self._get(self._path("config", "mt"), _MTServiceBindingsResponse)
        return dict(resp.mt_service_bindings)

    def get_available_mt_languages(self) -> dict[str, dict[str, frozenset[str]]]:
        """MT service id -> source language -> target languages."""

        resp = self._get(self._path("config", "mt", "languages"), _MTLanguagesByServiceResponse)
        return dict(resp.mt_languages)

    def get_mt_service_binding(self, mt_service_instance_id: str) -> MTServiceBindingData:
        require(mt_service_instance_id, "mt_service_instance_id")
        path = self._path("config", "mt", mt_service_instance_id)
        return self._get(path, _MTServiceBindingResponse).mt_service_binding

    def get_all_translation_configs(self) -> dict[str, dict[str, TranslationConfigData]]:
        resp = self._get(self._path("config", "trans"), _TranslationConfigsResponse)
        return dict(resp.translation_configs)

    def get_configured_mt_languages(self) -> dict[str, frozenset[str]]:
        resp = self._get(self._path("config", "trans", "languages"), _MTLanguagesResponse)
        return dict(resp.mt_languages)

    def put_translation_config(
        self,
        source_language: str,
        target_language: str,
        config: NewTranslationConfigData,
    ) -> None:
        require(source_language, "source_language")
        require(target_language, "target_language")
        _require_change_set(config, "config", NewTranslationConfigData)
        path = self._path("config", "trans", source_language, target_language)
        self._send("PUT", path, codec.encode_new_object(config))

    def get_translation_config(
        self,
        source_language: str,
        target_language: str,
    ) -> TranslationConfigData:
        require(source_language, "source_language")
        require(target_language, "target_language")
        path = self._path("config", "trans", source_language, target_language)
        return self._get(path, _TranslationConfigResponse).translation_config

    def delete_translation_config(self, source_language: str, target_language: str) -> None:
        require(source_language, "source_language")
        require(target_language, "target_language")
        path = self._path("config", "trans", source_language, target_language)
        self._send("DELETE", path, None)

    # -- translation requests ----------------------------------------------

    def get_translation_requests(self) -> dict[str, TranslationRequestData]:
        resp = self._get(self._path("trs"), _TranslationRequestsResponse)
        return dict(resp.translation_requests)

    def get_translation_request(self, tr_id: str) -> TranslationRequestData:
        require(tr_id, "tr_id")
        return self._get(self._path("trs", tr_id), _TranslationRequestResponse).translation_request

    def create_translation_request(
        self,
        new_request: NewTranslationRequestData,
    ) -> TranslationRequestData:
        """Create a translation request; `submit=True` submits it right away."""

        _require_change_set(new_request, "new_request", NewTranslationRequestData)
        resp = self._send(
            "POST",
            self._path("trs", "new"),
            codec.encode_new_object(new_request),
            _TranslationRequestResponse,
        )
        return resp.translation_request

    def update_translation_request(
        self,
        tr_id: str,
        change_set: TranslationRequestDataChangeSet,
    ) -> TranslationRequestData:
        require(tr_id, "tr_id")
        _require_change_set(change_set, "change_set", TranslationRequestDataChangeSet)
        resp = self._send(
            "POST",
            self._path("trs", tr_id),
            codec.encode_change_set(change_set),
            _TranslationRequestResponse,
        )
        return resp.translation_request

    def delete_translation_request(self, tr_id: str) -> None:
        require(tr_id, "tr_id")
        self._send("DELETE", self._path("trs", tr_id), None)

    def get_tr_bundle_info(self, tr_id: str, bundle_id: str) -> BundleData:
        require(tr_id, "tr_id")
        require(bundle_id, "bundle_id")
        return self._get(self._path("trs", tr_id, bundle_id), _BundleResponse).bundle

    def get_tr_resource_entries(
        self,
        tr_id: str,
        bundle_id: str,
        language: str,
    ) -> dict[str, ResourceEntryData]:
        require(tr_id, "tr_id")
        require(bundle_id, "bundle_id")
        require(language, "language")
        resp = self._get(
            self._path("trs", tr_id, bundle_id, language),
            _ResourceEntriesResponse,
            {"fields": "resourceEntries"},
        )
        return dict(sorted(resp.resource_entries.items()))

    def get_tr_resource_entry(
        self,
        tr_id: str,
        bundle_id: str,
        language: str,
        key: str,
    ) -> ResourceEntryData:
        require(tr_id, "tr_id")
        require(bundle_id, "bundle_id")
        require(language, "language")
        require(key, "key")
        path = self._path("trs", tr_id, bundle_id, language, key)
        return self._get(path, _ResourceEntryResponse).resource_entry

    # -- XLIFF -------------------------------------------------------------

    def get_xliff_from_bundles(
        self,
        source_language: str,
        target_language: str,
        bundle_ids: Iterable[str],
    ) -> bytes:
        require(source_language, "source_language")
        require(target_language, "target_language")
        require(bundle_ids, "bundle_ids")
        if isinstance(bundle_ids, str):
            raise ServiceError.invalid_argument(
                "bundle_ids must be a collection of bundle IDs, not a string."
            )
        ids = sorted(bundle_ids)
        if not ids:
            raise ServiceError.invalid_argument("bundle_ids must not be empty.")
        for bundle_id in ids:
            require(bundle_id, "bundle_id")
        return self._invoker.invoke_bytes(
            "GET",
            self._path("xliff", "bundles", source_language, target_language),
            expected_media_type=codec.XLIFF_MEDIA_TYPE,
            query={"bundles": ",".join(ids)},
        )

    def update_bundles_with_xliff(self, xliff: bytes) -> None:
        """Import translated XLIFF back into the bundles it references."""

        if not xliff:
            raise ServiceError.invalid_argument("xliff must be specified.")
        self._invoker.invoke_json(
            "POST",
            self._path("xliff", "bundles"),
            ServiceResponse,
            payload=bytes(xliff),
            content_type=codec.XLIFF_MEDIA_TYPE,
        )

    def get_xliff_from_translation_request(
        self,
        tr_id: str,
        source_language: str,
        target_language: str,
    ) -> bytes:
        require(tr_id, "tr_id")
        require(source_language, "source_language")
        require(target_language, "target_language")
        return self._invoker.invoke_bytes(
            "GET",
            self._path("xliff", "trs", tr_id, source_language, target_language),
            expected_media_type=codec.XLIFF_MEDIA_TYPE,
        )

    def get_xliff_from_document_translation_request(
        self,
        tr_id: str,
        source_language: str,
        target_language: str,
    ) -> bytes:
        require(tr_id, "tr_id")
        require(source_language, "source_language")
        require(target_language, "target_language")
        return self._invoker.invoke_bytes(
            "GET",
            self._path("xliff", "doc-trs", tr_id, source_language, target_language),
            expected_media_type=codec.XLIFF_MEDIA_TYPE,
        )

    # -- documents ---------------------------------------------------------

    def _document_path(self, doc_type: DocumentType, *segments: str) -> str:
        return self._path("documents", _known_document_type(doc_type).path_segment(), *segments)

    def get_document_ids(self, doc_type: DocumentType) -> set[str]:
        return set(self._get(self._document_path(doc_type), _DocumentIdsResponse).document_ids)

    def create_document(
        self,
        document_id: str,
        doc_type: DocumentType,
        new_document: NewDocumentData,
    ) -> None:
        require(document_id, "document_id")
        _require_change_set(new_document, "new_document", NewDocumentData)
        path = self._document_path(doc_type, document_id)
        self._send("PUT", path, codec.encode_new_object(new_document))

    def get_document_info(self, document_id: str, doc_type: DocumentType) -> DocumentData:
        require(document_id, "document_id")
        return self._get(self._document_path(doc_type, document_id), _DocumentResponse).document

    def get_document_metrics(self, document_id: str, doc_type: DocumentType) -> DocumentMetrics:
        require(document_id, "document_id")
        resp = self._get(
            self._document_path(doc_type, document_id),
            _DocumentMetricsResponse,
            {"fields": _DOCUMENT_METRICS_FIELDS},
        )
        return DocumentMetrics(
            translation_status_metrics_by_language=resp.translation_status_metrics_by_language,
            review_status_metrics_by_language=resp.review_status_metrics_by_language,
        )

    def update_document(
        self,
        document_id: str,
        doc_type: DocumentType,
        change_set: DocumentDataChangeSet,
    ) -> None:
        require(document_id, "document_id")
        _require_change_set(change_set, "change_set", DocumentDataChangeSet)
        path = self._document_path(doc_type, document_id)
        self._send("POST", path, codec.encode_change_set(change_set))

    def delete_document(self, document_id: str, doc_type: DocumentType) -> None:
        require(document_id, "document_id")
        self._send("DELETE", self._document_path(doc_type, document_id), None)

    def get_document_content(
        self,
        document_id: str,
        doc_type: DocumentType,
        language: str,
    ) -> bytes:
        require(document_id, "document_id")
        require(language, "language")
        doc_type = _known_document_type(doc_type)
        return self._invoker.invoke_bytes(
            "GET",
            self._document_path(doc_type, document_id, language),
            expected_media_type=doc_type.media_type(),
        )

    def update_document_content(
        self,
        document_id: str,
        doc_type: DocumentType,
        language: str,
        content: bytes,
    ) -> None:
        require(document_id, "document_id")
        require(language, "language")
        if content is None:
            raise ServiceError.invalid_argument("content must be specified.")
        doc_type = _known_document_type(doc_type)
        self._invoker.invoke_json(
            "PUT",
            self._document_path(doc_type, document_id, language),
            ServiceResponse,
            payload=bytes(content),
            content_type=doc_type.media_type(),
        )

    # -- document translation requests -------------------------------------

    def get_document_translation_requests(self) -> dict[str, DocumentTranslationRequestData]:
        resp = self._get(self._path("doc-trs"), _DocumentTranslationRequestsResponse)
        return dict(resp.translation_requests)

    def get_document_translation_request(self, tr_id: str) -> DocumentTranslationRequestData:
        require(tr_id, "tr_id")
        resp = self._get(self._path("doc-trs", tr_id), _DocumentTranslationRequestResponse)
        return resp.translation_request

    def create_document_translation_request(
        self,
        new_request: NewDocumentTranslationRequestData,
    ) -> DocumentTranslationRequestData:
        _require_change_set(new_request, "new_request", NewDocumentTranslationRequestData)
        resp = self._send(
            "POST",
            self._path("doc-trs", "new"),
            codec.encode_new_object(new_request),
            _DocumentTranslationRequestResponse,
        )
        return resp.translation_request

    def update_document_translation_request(
        self,
        tr_id: str,
        change_set: DocumentTranslationRequestDataChangeSet,
    ) -> DocumentTranslationRequestData:
        require(tr_id, "tr_id")
        _require_change_set(change_set, "change_set", DocumentTranslationRequestDataChangeSet)
        resp = self._send(
            "POST",
            self._path("doc-trs", tr_id),
            codec.encode_change_set(change_set),
            _DocumentTranslationRequestResponse,
        )
        return resp.translation_request

    def delete_document_translation_request(self, tr_id: str) -> None:
        require(tr_id, "tr_id")
        self._send("DELETE", self._path("doc-trs", tr_id), None)
