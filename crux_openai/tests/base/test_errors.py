"""Error message extraction, classification and factories."""

from __future__ import annotations

import types

import httpx
import pytest

from crux_openai.base.errors import (
    ErrorCategory,
    ErrorKind,
    OpenAIError,
    classify_status,
    extract_error_message,
    extract_exception_code,
    factories,
    try_parse_json,
)


def test_message_extracted_from_error_envelope():
    raw = '{"error": {"message": "Incorrect API key provided", "type": "invalid_request_error"}}'
    assert extract_error_message(raw) == "Incorrect API key provided"  # nosec B101 - asserts are fine in tests
    assert extract_error_message(raw.encode()) == "Incorrect API key provided"  # nosec B101


@pytest.mark.parametrize(
    "raw",
    [
        "upstream connect error",
        "{not json",
        '{"error": "flat string"}',
        '{"error": {"message": 42}}',
        '{"detail": "x"}',
        "[1, 2, 3]",
    ],
)
def test_other_payloads_kept_verbatim(raw):
    assert extract_error_message(raw) == raw  # nosec B101


@pytest.mark.parametrize("raw", [None, "", b""])
def test_empty_payload_uses_default_message(raw):
    assert extract_error_message(raw) == "An unknown error occurred"  # nosec B101


def test_try_parse_json_never_raises():
    assert try_parse_json('{"a": 1}').value == {"a": 1}
    bad = try_parse_json("{oops")
    assert not bad.ok and bad.value is None and bad.error
    assert not try_parse_json(None).ok


def test_default_error_fields():
    err = OpenAIError()
    assert err.message == "An unknown error occurred"
    assert err.code == 0
    assert err.kind is ErrorKind.API
    assert str(err) == "An unknown error occurred"
    assert isinstance(err, Exception)


def test_str_includes_code():
    assert str(OpenAIError("nope", code=404)) == "[404] nope"


def test_api_error_keeps_raw_body():
    body = '{"error": {"message": "Rate limit reached"}}'
    err = factories.api_error(body, 429)
    assert err.message == "Rate limit reached"
    assert err.raw_message == body
    assert err.body == body
    assert err.code == 429
    assert err.category is ErrorCategory.RATE_LIMIT
    assert err.retryable


@pytest.mark.parametrize(
    "status,category,retryable",
    [
        (400, ErrorCategory.VALIDATION, False),
        (401, ErrorCategory.AUTH, False),
        (404, ErrorCategory.NOT_FOUND, False),
        (418, ErrorCategory.UNKNOWN, False),
        (500, ErrorCategory.SERVER_ERROR, True),
        (503, ErrorCategory.UNAVAILABLE, True),
        (599, ErrorCategory.SERVER_ERROR, True),
    ],
)
def test_status_classification(status, category, retryable):
    assert classify_status(status) is category
    assert factories.api_error("", status).retryable is retryable


def test_non_api_errors_have_unknown_category():
    err = factories.encoding_error("bad")
    assert err.category is ErrorCategory.UNKNOWN
    assert not err.retryable


def test_transport_error_wraps_exception():
    exc = httpx.ConnectError("connection refused")
    err = factories.transport_error(exc)
    assert err.kind is ErrorKind.TRANSPORT
    assert err.message == "connection refused"
    assert err.cause is exc
    assert err.__cause__ is exc
    assert err.code == 0
    assert err.retryable


def test_transport_error_falls_back_to_class_name():
    err = factories.transport_error(TimeoutError())
    assert err.message == "TimeoutError"


def test_extract_exception_code_shapes():
    assert extract_exception_code(types.SimpleNamespace(status_code=503)) == 503
    assert extract_exception_code(types.SimpleNamespace(response=types.SimpleNamespace(status_code=502))) == 502
    assert extract_exception_code(OSError(111, "Connection refused")) == 111
    assert extract_exception_code(types.SimpleNamespace(code=True)) == 0
    assert extract_exception_code(ValueError("x")) == 0


def test_stream_decode_error_carries_line():
    err = factories.stream_decode_error("data: {oops")
    assert err.kind is ErrorKind.STREAM_DECODE
    assert err.body == "data: {oops"
    assert not err.kind.is_input_error
