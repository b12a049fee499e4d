"""Shared fixtures for the client test suite.

The client never reaches the network in tests: every call goes through an
``httpx.Client`` backed by ``httpx.MockTransport`` whose handler records the
requests it receives.
"""

from __future__ import annotations

from typing import Callable, Iterator, List, Optional

import httpx
import pytest

from crux_openai.base.client_config import ClientConfig
from crux_openai.client import OpenAIClient

Responder = Callable[[httpx.Request], httpx.Response]

_ENV_VARS = (
    "OPENAI_API_KEY",
    "OPENAI_ADMIN_KEY",
    "OPENAI_ORGANIZATION",
    "OPENAI_ORG_ID",
    "OPENAI_PROJECT",
    "OPENAI_PROJECT_ID",
    "OPENAI_ORIGIN",
    "OPENAI_BASE_PATH",
    "OPENAI_TIMEOUT",
    "OPENAI_PROXY",
    "CRUX_OPENAI_CONFIG_FILE",
    "CRUX_OPENAI_TIMEOUT_HTTP_SECONDS",
    "CRUX_OPENAI_TIMEOUT_CONNECT_SECONDS",
    "CRUX_OPENAI_TIMEOUT_STREAM_SECONDS",
)


class RecordingHandler:
    """``MockTransport`` handler that records requests and replies via ``responder``."""

    def __init__(self, responder: Optional[Responder] = None) -> None:
        self.requests: List[httpx.Request] = []
        self.responder: Responder = responder or (lambda request: httpx.Response(200, json={"ok": True}))

    def __call__(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        return self.responder(request)

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Isolate tests from the developer's OpenAI environment."""

    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture()
def config() -> ClientConfig:
    return ClientConfig(api_key="sk-unit-key")


@pytest.fixture()
def handler() -> RecordingHandler:
    return RecordingHandler()


@pytest.fixture()
def client(config: ClientConfig, handler: RecordingHandler) -> Iterator[OpenAIClient]:
    transport = httpx.Client(transport=httpx.MockTransport(handler))
    with OpenAIClient(config, transport) as c:
        yield c
    transport.close()
