"""Pytest configuration for the gaas-client test suite."""

from __future__ import annotations

import os
import tempfile
from typing import Any, Iterator

import httpx
import pytest


def _isolate_user_config() -> None:
    """Point the per-user config dir at a scratch directory before imports."""

    os.environ["XDG_CONFIG_HOME"] = tempfile.mkdtemp(prefix="gaas-client-tests-")


_isolate_user_config()

from fake_server import BASE_URL, INSTANCE_ID, SECRET, USER_ID, FakeService, Recorder  # noqa: E402

from gaas_client.core.domain.account import ServiceAccount  # noqa: E402
from gaas_client.core.services.service_client import ServiceClient  # noqa: E402


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Any) -> None:
    """Drop GP_* variables and run from an empty directory (no project .env)."""

    for name in list(os.environ):
        if name.startswith("GP_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def account() -> ServiceAccount:
    return ServiceAccount(
        base_url=BASE_URL,
        instance_id=INSTANCE_ID,
        user_id=USER_ID,
        secret=SECRET,
    )


@pytest.fixture
def fake_service() -> FakeService:
    return FakeService()


@pytest.fixture
def client(account: ServiceAccount, fake_service: FakeService) -> Iterator[ServiceClient]:
    http = fake_service.client()
    service_client = ServiceClient(account, http_client=http)
    try:
        yield service_client
    finally:
        http.close()


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def recorded_client(account: ServiceAccount, recorder: Recorder) -> Iterator[ServiceClient]:
    http = httpx.Client(transport=httpx.MockTransport(recorder.handle))
    service_client = ServiceClient(account, http_client=http)
    try:
        yield service_client
    finally:
        http.close()
