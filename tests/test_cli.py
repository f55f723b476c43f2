"""CLI tests (Typer `CliRunner` against the in-memory service)."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from fake_server import BASE_URL, INSTANCE_ID, SECRET, USER_ID, FakeService
from typer.testing import CliRunner

from gaas_client.cli import doctor
from gaas_client.cli import main as cli
from gaas_client.core import config
from gaas_client.core.config import AppSettings
from gaas_client.core.domain.changes import NewBundleData
from gaas_client.core.services.service_client import ServiceClient

runner = CliRunner()


@pytest.fixture
def service(monkeypatch: pytest.MonkeyPatch, fake_service: FakeService) -> FakeService:
    """Route every CLI command to the fake service with one bundle `app`."""

    http = fake_service.client()

    def open_client(settings: AppSettings | None = None) -> ServiceClient:
        return ServiceClient(
            AppSettings(
                _env_file=None,
                url=BASE_URL,
                instance_id=INSTANCE_ID,
                user_id=USER_ID,
                password=SECRET,
            ).to_service_account(),
            http_client=http,
        )

    monkeypatch.setattr(cli, "_open_client", open_client)
    monkeypatch.setattr(doctor, "_open_client", open_client)

    seed = open_client()
    seed.create_bundle("app", NewBundleData(source_language="en", target_languages={"de"}))
    seed.upload_resource_strings("app", "en", {"greeting": "Hello"})
    return fake_service


def _write_json(path: Path, data: object) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_info_lists_supported_pairs(service: FakeService) -> None:
    result = runner.invoke(cli.app, ["info"])

    assert result.exit_code == 0
    assert "en" in result.output
    assert "de, fr" in result.output


def test_bundles_lists_ids(service: FakeService) -> None:
    result = runner.invoke(cli.app, ["bundles"])

    assert result.exit_code == 0
    assert "app" in result.output


def test_strings_json_output(service: FakeService) -> None:
    result = runner.invoke(cli.app, ["strings", "app", "de", "--json"])

    assert result.exit_code == 0
    assert json.loads(result.output) == {"greeting": "[de] Hello"}


def test_upload_then_update_with_delete(service: FakeService, tmp_path: Path) -> None:
    """`null` in an update file deletes the key from the source language."""

    upload_file = _write_json(tmp_path / "en.json", {"greeting": "Hello", "bye": "Bye"})
    update_file = _write_json(tmp_path / "patch.json", {"greeting": None})

    uploaded = runner.invoke(cli.app, ["upload", "app", "en", str(upload_file)])
    updated = runner.invoke(cli.app, ["update", "app", "en", str(update_file)])

    assert uploaded.exit_code == 0
    assert "Uploaded 2 strings" in uploaded.output
    assert updated.exit_code == 0
    assert service.strings("app", "en") == {"bye": "Bye"}
    assert service.strings("app", "de") == {"bye": "[de] Bye"}


def test_update_resync_without_file(service: FakeService) -> None:
    result = runner.invoke(cli.app, ["update", "app", "de", "--resync"])

    assert result.exit_code == 0
    assert "(resync)" in result.output
    assert service.requests[-1].query == {"resync": "true"}


def test_update_without_delta_is_invalid_argument(service: FakeService) -> None:
    """No file and no --resync fails locally with exit code 2."""

    before = len(service.requests)
    result = runner.invoke(cli.app, ["update", "app", "de"])

    assert result.exit_code == cli.INVALID_ARGUMENT_EXIT_CODE
    assert "error:" in result.output
    assert len(service.requests) == before


def test_service_rejection_exit_code(service: FakeService) -> None:
    result = runner.invoke(cli.app, ["bundle", "missing"])

    assert result.exit_code == cli.LOGICAL_ERROR_EXIT_CODE
    assert "Bundle missing not found" in result.output


def test_bad_strings_file_is_usage_error(service: FakeService, tmp_path: Path) -> None:
    bad = _write_json(tmp_path / "bad.json", {"greeting": 1})

    result = runner.invoke(cli.app, ["upload", "app", "en", str(bad)])

    assert result.exit_code == 2
    assert service.strings("app", "en") == {"greeting": "Hello"}


def test_missing_configuration_exit_code() -> None:
    """Without GP_* settings nothing is sent and the missing names are listed."""

    result = runner.invoke(cli.app, ["bundles"])

    assert result.exit_code == cli.INVALID_ARGUMENT_EXIT_CODE
    assert "GP_URL" in result.output


def test_doctor_run_checks_service(service: FakeService, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GP_URL", BASE_URL)
    monkeypatch.setenv("GP_INSTANCE_ID", INSTANCE_ID)
    monkeypatch.setenv("GP_USER_ID", USER_ID)
    monkeypatch.setenv("GP_PASSWORD", SECRET)

    result = runner.invoke(cli.app, ["doctor", "run"])

    assert result.exit_code == 0
    assert "FAIL" not in result.output
    assert "1 bundles visible" in result.output
    assert SECRET not in result.output


def test_doctor_run_skips_network_when_unconfigured() -> None:
    result = runner.invoke(cli.app, ["doctor", "run"])

    assert result.exit_code == 0
    assert "SKIPPED" in result.output
    assert "gaas doctor setup" in result.output


def test_doctor_setup_writes_user_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    env_path = tmp_path / "user" / ".env"
    monkeypatch.setattr(
        doctor,
        "write_user_env_vars",
        lambda values: config.write_user_env_vars(values, env_path),
    )

    result = runner.invoke(
        cli.app,
        ["doctor", "setup"],
        input=f"{BASE_URL}\n{INSTANCE_ID}\n{USER_ID}\n{SECRET}\nbasic\n",
    )

    assert result.exit_code == 0
    stored = env_path.read_text(encoding="utf-8")
    assert f"GP_URL={BASE_URL}" in stored
    assert f"GP_PASSWORD={SECRET}" in stored
    assert "GP_AUTH_SCHEME=BASIC" in stored


def test_doctor_setup_rejects_unknown_scheme(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    env_path = tmp_path / ".env.user"
    monkeypatch.setattr(
        doctor,
        "write_user_env_vars",
        lambda values: config.write_user_env_vars(values, env_path),
    )

    result = runner.invoke(
        cli.app,
        ["doctor", "setup"],
        input=f"{BASE_URL}\n{INSTANCE_ID}\n{USER_ID}\n{SECRET}\ndigest\n",
    )

    assert result.exit_code != 0
    assert not env_path.exists()
