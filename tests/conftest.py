"""Shared fixtures: settings isolated from the environment and a recording
`httpx.MockTransport` so tests can inspect exactly what went over the wire."""

from __future__ import annotations

import logging
import os
from typing import Any, Callable

import httpx
import pytest

from adapters.http_client import build_async_client
from core.config import AppSettings

BASE_URL = "http://api.test/api/v1"


class RecordingHandler:
    """MockTransport handler returning a fixed body and recording requests."""

    def __init__(
        self,
        body: Any = None,
        *,
        status_code: int = 200,
        error: Exception | None = None,
        content: bytes | None = None,
    ) -> None:
        self.body = body if body is not None else {"success": True, "data": {}, "message": "OK"}
        self.status_code = status_code
        self.error = error
        self.content = content
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    """Keep real env vars and .env files out of the tests."""

    for key in list(os.environ):
        if key.upper().startswith("CATALOG_SYNC_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None, api_base_url=BASE_URL, user_agent="catalog-sync-tests")


@pytest.fixture
def make_client(settings) -> Callable[[RecordingHandler], httpx.AsyncClient]:
    def _make(handler: RecordingHandler, app_settings: AppSettings | None = None) -> httpx.AsyncClient:
        return build_async_client(app_settings or settings, transport=httpx.MockTransport(handler))

    return _make


@pytest.fixture(autouse=True)
def _restore_logging():
    """The CLI reconfigures root logging on every invocation."""

    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    httpx_level = logging.getLogger("httpx").level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("httpx").setLevel(httpx_level)
