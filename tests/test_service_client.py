"""Request/response mapping tests for the `ServiceClient` facade."""

from __future__ import annotations

import base64
import json

import httpx
import pytest
from fake_server import BASE_URL, INSTANCE_ID, SECRET, USER_ID, Recorder

from gaas_client.core.config import AppSettings
from gaas_client.core.domain.account import AuthScheme, ServiceAccount
from gaas_client.core.domain.changes import (
    BundleDataChangeSet,
    NewBundleData,
    NewTranslationRequestData,
    NewUserData,
    UserDataChangeSet,
)
from gaas_client.core.domain.enums import (
    DocumentType,
    TranslationRequestStatus,
    TranslationStatus,
    UserType,
)
from gaas_client.core.errors import ErrorKind, ServiceError
from gaas_client.core.services.service_client import ServiceClient

ROOT = "/translate/rest"
INSTANCE = f"{ROOT}/{INSTANCE_ID}/v2"


def _path(request: httpx.Request) -> str:
    return request.url.raw_path.decode("ascii").split("?", 1)[0]


def test_service_info_is_anonymous(recorded_client: ServiceClient, recorder: Recorder) -> None:
    """Service info is public: no Authorization header is sent."""

    recorder.reply_ok(supportedTranslation={"en": ["de", "fr"]}, externalServices=[{"type": "MT", "id": "x"}])

    info = recorded_client.get_service_info()

    assert _path(recorder.last) == f"{ROOT}/$service/v2/info"
    assert "Authorization" not in recorder.last.headers
    assert info.supported_translation == {"en": frozenset({"de", "fr"})}
    assert info.external_services[0].type == "MT"


def test_bundle_ids_and_info(recorded_client: ServiceClient, recorder: Recorder) -> None:
    recorder.reply_ok(bundleIds=["b", "a"])
    recorder.reply_ok(
        bundle={
            "sourceLanguage": "en",
            "targetLanguages": ["de"],
            "readOnly": True,
            "updatedBy": "admin",
            "updatedAt": "2026-10-01T12:00:00.000Z",
        }
    )

    ids = recorded_client.get_bundle_ids()
    bundle = recorded_client.get_bundle_info("a")

    assert ids == {"a", "b"}
    assert _path(recorder.requests[0]) == f"{INSTANCE}/bundles"
    assert _path(recorder.last) == f"{INSTANCE}/bundles/a"
    assert bundle.read_only is True
    assert bundle.target_languages == frozenset({"de"})
    assert bundle.updated_by == "admin"
    assert bundle.updated_at is not None and bundle.updated_at.year == 2026


def test_bundle_metrics_use_fields_query(recorded_client: ServiceClient, recorder: Recorder) -> None:
    """Metrics are a projection of the bundle resource via `?fields=`."""

    recorder.reply_ok(
        translationStatusMetricsByLanguage={"de": {"TRANSLATED": 4, "NEW_STATE": 1}},
        reviewStatusMetricsByLanguage={"de": {"reviewed": 1, "notYetReviewed": 3}},
    )

    metrics = recorded_client.get_bundle_metrics("app")

    assert recorder.last.url.query.decode() == (
        "fields=translationStatusMetricsByLanguage,reviewStatusMetricsByLanguage,"
        "partnerStatusMetricsByLanguage"
    )
    assert metrics.translation_status_metrics_by_language["de"] == {
        TranslationStatus.TRANSLATED: 4,
        TranslationStatus.UNKNOWN: 1,
    }
    assert metrics.review_status_metrics_by_language["de"].not_yet_reviewed == 3
    assert metrics.partner_status_metrics_by_language == {}


def test_create_and_update_bundle_bodies(recorded_client: ServiceClient, recorder: Recorder) -> None:
    """New objects drop unset optionals; change sets keep explicit nulls."""

    recorded_client.create_bundle("app", NewBundleData(source_language="en"))
    create = recorder.last
    recorded_client.update_bundle("app", BundleDataChangeSet(partner=None, read_only=False))
    update = recorder.last

    assert create.method == "PUT"
    assert json.loads(create.content) == {"sourceLanguage": "en"}
    assert update.method == "POST"
    assert json.loads(update.content) == {"partner": None, "readOnly": False}


def test_wrong_change_set_type_is_invalid(recorded_client: ServiceClient, recorder: Recorder) -> None:
    with pytest.raises(ServiceError) as exc_info:
        recorded_client.update_bundle("app", NewBundleData(source_language="en"))  # type: ignore[arg-type]

    assert exc_info.value.is_invalid_argument
    assert recorder.requests == []


def test_fallback_query(recorded_client: ServiceClient, recorder: Recorder) -> None:
    recorder.reply_ok(resourceStrings={"k": "v"})

    assert recorded_client.get_resource_strings("app", "de", fallback=True) == {"k": "v"}
    assert recorder.last.url.params["fallback"] == "true"


def test_resource_entry_key_is_escaped(recorded_client: ServiceClient, recorder: Recorder) -> None:
    recorder.reply_ok(resourceEntry={"value": "Hilfe", "translationStatus": "TRANSLATED"})

    entry = recorded_client.get_resource_entry("app", "de", "menu/help?")

    assert _path(recorder.last) == f"{INSTANCE}/bundles/app/de/menu%2Fhelp%3F"
    assert entry.value == "Hilfe"


def test_user_lifecycle_paths(recorded_client: ServiceClient, recorder: Recorder) -> None:
    """Users are created under `/users/new` and patched by id."""

    recorder.reply_ok(users={"u1": {"id": "u1", "type": "READER", "bundles": ["app"]}})
    recorder.reply_ok(id="u2", user={"id": "u2", "type": "TRANSLATOR", "password": "pw"})

    users = recorded_client.get_users()
    created = recorded_client.create_user(NewUserData(type=UserType.TRANSLATOR, bundles={"app"}))

    assert users["u1"].type is UserType.READER
    assert users["u1"].bundles == frozenset({"app"})
    assert _path(recorder.last) == f"{INSTANCE}/users/new"
    assert json.loads(recorder.last.content) == {"type": "TRANSLATOR", "bundles": ["app"]}
    assert created.password == "pw"
    assert "pw" not in repr(created)


def test_update_user_reset_password_without_change_set(
    recorded_client: ServiceClient, recorder: Recorder
) -> None:
    """A password reset may carry an empty patch."""

    recorder.reply_ok(user={"id": "u1", "type": "READER", "password": "new-pw"})

    user = recorded_client.update_user("u1", reset_password=True)

    assert recorder.last.url.params["resetPassword"] == "true"
    assert recorder.last.content == b"{}"
    assert user.password == "new-pw"


def test_update_user_requires_change_set(recorded_client: ServiceClient, recorder: Recorder) -> None:
    with pytest.raises(ServiceError) as exc_info:
        recorded_client.update_user("u1")

    assert exc_info.value.is_invalid_argument
    assert recorder.requests == []


def test_update_user_sends_patch(recorded_client: ServiceClient, recorder: Recorder) -> None:
    recorder.reply_ok(user={"id": "u1", "type": "READER"})

    recorded_client.update_user("u1", UserDataChangeSet(comment=None))

    assert "resetPassword" not in recorder.last.url.params
    assert json.loads(recorder.last.content) == {"comment": None}


def test_translation_configs(recorded_client: ServiceClient, recorder: Recorder) -> None:
    recorder.reply_ok(
        translationConfigs={"en": {"de": {"mtService": {"serviceInstanceId": "mt-1", "params": {}}}}}
    )

    configs = recorded_client.get_all_translation_configs()

    assert _path(recorder.last) == f"{INSTANCE}/config/trans"
    assert configs["en"]["de"].mt_service.service_instance_id == "mt-1"


def test_create_translation_request(recorded_client: ServiceClient, recorder: Recorder) -> None:
    """Submitting on creation is sent as a status; unknown domains are dropped on read."""

    recorder.reply_ok(
        translationRequest={
            "id": "tr-1",
            "status": "SUBMITTED",
            "domains": ["INFTECH", "MARSCOL"],
            "targetLanguagesByBundle": {"app": ["de"]},
            "wordCountsByBundle": {"app": {"sourceLanguage": "en", "counts": {"de": 12}}},
        }
    )

    tr = recorded_client.create_translation_request(
        NewTranslationRequestData(target_languages_by_bundle={"app": {"de"}}, submit=True)
    )

    assert _path(recorder.last) == f"{INSTANCE}/trs/new"
    assert json.loads(recorder.last.content)["status"] == "SUBMITTED"
    assert tr.status is TranslationRequestStatus.SUBMITTED
    assert len(tr.domains) == 1
    assert tr.word_counts_by_bundle["app"].words_by_target_language == {"de": 12}


def test_xliff_export_sorts_bundles(recorded_client: ServiceClient, recorder: Recorder) -> None:
    """XLIFF export asks for the XLIFF media type and lists bundles comma-separated."""

    recorder.reply(content=b"<xliff version='1.2'/>", headers={"Content-Type": "application/xliff+xml"})

    body = recorded_client.get_xliff_from_bundles("en", "de", ["web", "app"])

    assert body == b"<xliff version='1.2'/>"
    assert _path(recorder.last) == f"{INSTANCE}/xliff/bundles/en/de"
    assert recorder.last.url.query.decode() == "bundles=app,web"
    assert recorder.last.headers["Accept"] == "application/xliff+xml"


def test_xliff_export_requires_bundles(recorded_client: ServiceClient, recorder: Recorder) -> None:
    with pytest.raises(ServiceError) as exc_info:
        recorded_client.get_xliff_from_bundles("en", "de", [])

    assert exc_info.value.is_invalid_argument
    assert recorder.requests == []


def test_xliff_export_rejects_single_string(recorded_client: ServiceClient, recorder: Recorder) -> None:
    """A bare bundle ID is not split into one bundle per character."""

    with pytest.raises(ServiceError) as exc_info:
        recorded_client.get_xliff_from_bundles("en", "de", "app")  # type: ignore[arg-type]

    assert exc_info.value.is_invalid_argument
    assert recorder.requests == []


def test_xliff_import_content_type(recorded_client: ServiceClient, recorder: Recorder) -> None:
    recorded_client.update_bundles_with_xliff(b"<xliff/>")

    assert recorder.last.method == "POST"
    assert recorder.last.headers["Content-Type"] == "application/xliff+xml"
    assert recorder.last.content == b"<xliff/>"


def test_document_content_by_type(recorded_client: ServiceClient, recorder: Recorder) -> None:
    """Document paths use the lower-case type and its media type."""

    recorder.reply(content=b"<p>Hallo</p>", headers={"Content-Type": "text/html; charset=utf-8"})

    html = recorded_client.get_document_content("home", DocumentType.HTML, "de")
    recorded_client.update_document_content("readme", DocumentType.MD, "en", b"# Hello")

    assert html == b"<p>Hallo</p>"
    assert _path(recorder.requests[0]) == f"{INSTANCE}/documents/html/home/de"
    assert _path(recorder.last) == f"{INSTANCE}/documents/md/readme/en"
    assert recorder.last.method == "PUT"
    assert recorder.last.headers["Content-Type"] == "text/plain"


def test_unknown_document_type_is_invalid(recorded_client: ServiceClient, recorder: Recorder) -> None:
    with pytest.raises(ServiceError) as exc_info:
        recorded_client.get_document_ids(DocumentType.UNKNOWN)

    assert exc_info.value.is_invalid_argument
    assert recorder.requests == []


def test_auth_scheme_can_be_switched(recorded_client: ServiceClient, recorder: Recorder) -> None:
    recorder.reply_ok(bundleIds=[])

    recorded_client.auth_scheme = AuthScheme.BASIC
    recorded_client.get_bundle_ids()

    header = recorder.last.headers["Authorization"]
    assert recorded_client.auth_scheme is AuthScheme.BASIC
    assert base64.b64decode(header.removeprefix("Basic ")).decode() == f"{USER_ID}:{SECRET}"


def test_error_envelope_is_raised(recorded_client: ServiceClient, recorder: Recorder) -> None:
    recorder.reply(404, json={"status": "ERROR", "message": "Bundle nope not found"})

    with pytest.raises(ServiceError) as exc_info:
        recorded_client.get_bundle_info("nope")

    assert exc_info.value.kind is ErrorKind.LOGICAL
    assert str(exc_info.value) == f"Bundle nope not found (GET {INSTANCE_ID}/v2/bundles/nope)"


def test_from_settings_builds_account(recorder: Recorder) -> None:
    """`GP_*` settings produce the account and the auth scheme."""

    settings = AppSettings(
        _env_file=None,
        url=BASE_URL + "/",
        instance_id=INSTANCE_ID,
        user_id=USER_ID,
        password=SECRET,
        auth_scheme="basic",
    )
    http = httpx.Client(transport=httpx.MockTransport(recorder.handle))

    with ServiceClient.from_settings(settings, http_client=http) as client:
        assert client.account == ServiceAccount(
            base_url=BASE_URL, instance_id=INSTANCE_ID, user_id=USER_ID, secret=SECRET
        )
        assert client.auth_scheme is AuthScheme.BASIC

    assert not http.is_closed
    http.close()


def test_from_settings_reports_missing_values() -> None:
    with pytest.raises(ServiceError) as exc_info:
        ServiceClient.from_settings(AppSettings(_env_file=None, url=BASE_URL))

    assert exc_info.value.is_invalid_argument
    assert "GP_INSTANCE_ID" in exc_info.value.message
