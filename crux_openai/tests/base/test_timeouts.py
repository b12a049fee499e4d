from __future__ import annotations

import httpx

from crux_openai.base.http import Transport, create_http_client
from crux_openai.base.timeouts import TimeoutConfig, get_timeout_config


def test_defaults():
    cfg = get_timeout_config()
    assert cfg == TimeoutConfig()
    assert cfg.http_timeout_seconds == 60.0


def test_env_overrides_and_cache_refresh(monkeypatch):
    first = get_timeout_config()
    assert get_timeout_config() is first, "config is cached while env is unchanged"
    monkeypatch.setenv("CRUX_OPENAI_TIMEOUT_HTTP_SECONDS", "12.5")
    monkeypatch.setenv("CRUX_OPENAI_TIMEOUT_STREAM_SECONDS", "300")
    cfg = get_timeout_config()
    assert cfg is not first
    assert cfg.http_timeout_seconds == 12.5
    assert cfg.stream_timeout_seconds == 300.0


def test_invalid_env_values_fall_back(monkeypatch):
    monkeypatch.setenv("CRUX_OPENAI_TIMEOUT_HTTP_SECONDS", "soon")
    monkeypatch.setenv("CRUX_OPENAI_TIMEOUT_CONNECT_SECONDS", "-1")
    cfg = get_timeout_config()
    assert cfg.http_timeout_seconds == 60.0
    assert cfg.connect_timeout_seconds == 10.0


def test_to_httpx_stream_uses_stream_read_timeout():
    cfg = TimeoutConfig(http_timeout_seconds=5, connect_timeout_seconds=2, stream_timeout_seconds=90)
    plain = cfg.to_httpx()
    streamed = cfg.to_httpx(stream=True)
    assert isinstance(plain, httpx.Timeout)
    assert (plain.connect, plain.read, plain.write) == (2, 5, 5)
    assert streamed.read == 90


def test_with_http_timeout():
    cfg = TimeoutConfig()
    assert cfg.with_http_timeout(None) is cfg
    assert cfg.with_http_timeout(0) is cfg
    assert cfg.with_http_timeout(3).http_timeout_seconds == 3.0


def test_created_http_client_is_a_transport():
    client = create_http_client(7)
    try:
        assert isinstance(client, Transport)
        assert client.timeout.read == 7
    finally:
        client.close()
