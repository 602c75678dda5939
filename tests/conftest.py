"""Root conftest: shared fixtures (settings aisladas + transporte HTTP falso)."""

from __future__ import annotations

import json
import os
from typing import Any, Callable

import httpx
import pytest

from adapters.watson.compare_comply import CompareComplyV1
from core.config import WatsonSettings

API_VERSION = "2018-10-15"
SERVICE_URL = "https://cc.example.test/api"


@pytest.fixture(autouse=True)
def _clean_watson_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # Tests must never pick up real credentials from the shell.
    for key in list(os.environ):
        if key.upper().startswith("WATSON_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def settings() -> WatsonSettings:
    return WatsonSettings(_env_file=None, version=API_VERSION, bearer_token="test-token")


class Recorder:
    """Captura las requests enviadas y responde con lo configurado."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.payload: Any = {}
        self.headers: dict[str, str] = {}
        self.handler: Callable[[httpx.Request], httpx.Response] | None = None

    def respond(self, status_code: int = 200, payload: Any = None, headers: dict[str, str] | None = None) -> None:
        self.status_code = status_code
        self.payload = payload
        self.headers = headers or {}

    def __call__(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        if self.handler is not None:
            return self.handler(request)
        if self.payload is None:
            return httpx.Response(self.status_code, headers=self.headers)
        return httpx.Response(
            self.status_code,
            content=json.dumps(self.payload).encode("utf-8"),
            headers={"Content-Type": "application/json", **self.headers},
        )

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def transport(recorder: Recorder) -> httpx.MockTransport:
    return httpx.MockTransport(recorder)


@pytest.fixture
def service(settings: WatsonSettings, transport: httpx.MockTransport) -> CompareComplyV1:
    return CompareComplyV1(API_VERSION, settings=settings, service_url=SERVICE_URL, transport=transport)
