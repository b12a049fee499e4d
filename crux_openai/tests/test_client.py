"""End-to-end dispatcher behavior against a mocked transport."""

from __future__ import annotations

import json

import httpx
import pytest

from crux_openai import create
from crux_openai.base.client_config import ClientConfig
from crux_openai.base.errors import ErrorCategory, ErrorKind, OpenAIError
from crux_openai.client import OpenAIClient


def _sse(*payloads: str) -> bytes:
    return "".join(f"data: {p}\n\n" for p in payloads).encode("utf-8")


def _mock_client(config: ClientConfig, handler) -> OpenAIClient:
    return OpenAIClient(config, httpx.Client(transport=httpx.MockTransport(handler)))


def test_chat_completion_request_shape(client, handler):
    handler.responder = lambda request: httpx.Response(200, json={"id": "chatcmpl-1"})
    options = {"model": "gpt-4o-mini", "messages": [{"role": "user", "content": "Hi"}]}

    response = client.call("createChatCompletion", None, options)

    sent = handler.last
    assert sent.method == "POST"
    assert str(sent.url) == "https://api.openai.com/v1/chat/completions"
    assert sent.headers["Authorization"] == "Bearer sk-unit-key"
    assert sent.headers["Content-Type"] == "application/json"
    assert json.loads(sent.content) == options
    assert response.status_code == 200
    assert response.json() == {"id": "chatcmpl-1"}, "response must be returned unchanged"


def test_binary_response_returned_untouched(client, handler):
    audio = b"ID3\x00\x01\x02"
    handler.responder = lambda request: httpx.Response(200, content=audio, headers={"Content-Type": "audio/mpeg"})
    response = client.create_speech({"model": "tts-1", "input": "hello", "voice": "alloy"})
    assert response.content == audio


def test_get_options_go_to_query_string(client, handler):
    client.call("listFiles", None, {"purpose": "fine-tune", "limit": 2})
    sent = handler.last
    assert sent.method == "GET"
    assert sent.url.path == "/v1/files"
    assert dict(sent.url.params) == {"purpose": "fine-tune", "limit": "2"}
    assert sent.content == b""


def test_get_leftover_path_params_join_query(client, handler):
    client.call("listFineTuningEvents", {"fine_tuning_job_id": "ftjob-1", "after": "ev-9"})
    sent = handler.last
    assert sent.url.path == "/v1/fine_tuning/jobs/ftjob-1/events"
    assert sent.url.params.get("after") == "ev-9"


def test_post_leftover_path_params_merge_into_body(client, handler):
    client.call("createRun", {"thread_id": "thread_1", "assistant_id": "asst_1", "model": "a"}, {"model": "b"})
    sent = handler.last
    assert sent.url.path == "/v1/threads/thread_1/runs"
    assert json.loads(sent.content) == {"assistant_id": "asst_1", "model": "b"}, "explicit options win"


def test_custom_headers_are_sent_and_stripped(client, handler):
    client.call(
        "createEmbedding",
        None,
        {"model": "m", "input": "x", "customHeaders": {"X-Trace": "abc", "Content-Type": "text/plain"}},
    )
    sent = handler.last
    assert sent.headers["X-Trace"] == "abc"
    assert sent.headers["Content-Type"] == "application/json"
    assert "customHeaders" not in json.loads(sent.content)


def test_organization_project_and_default_headers(handler):
    config = ClientConfig(
        api_key="sk-unit-key",
        organization="org-1",
        project="proj-1",
        default_headers={"User-Agent": "crux-openai-tests", "Authorization": "ignored"},
    )
    with _mock_client(config, handler) as client:
        client.list_models()
    sent = handler.last
    assert sent.headers["OpenAI-Organization"] == "org-1"
    assert sent.headers["OpenAI-Project"] == "proj-1"
    assert sent.headers["User-Agent"] == "crux-openai-tests"
    assert sent.headers["Authorization"] == "Bearer sk-unit-key"


def test_custom_origin_and_base_path(handler):
    config = ClientConfig(api_key="k", origin="http://localhost:8080", base_path="v2")
    with _mock_client(config, handler) as client:
        client.retrieve_model("gpt-4o")
    assert str(handler.last.url) == "http://localhost:8080/v2/models/gpt-4o"


def test_multipart_upload(client, handler, tmp_path):
    src = tmp_path / "batch.jsonl"
    src.write_bytes(b"{}\n")
    client.create_file({"file": str(src), "purpose": "batch"})
    sent = handler.last
    assert sent.headers["Content-Type"].startswith("multipart/form-data; boundary=")
    assert b'name="purpose"' in sent.content
    assert b"{}\n" in sent.content


def test_api_error_raised_with_status(client, handler):
    body = '{"error": {"message": "Invalid API key", "type": "invalid_request_error"}}'
    handler.responder = lambda request: httpx.Response(401, text=body)
    with pytest.raises(OpenAIError) as ei:
        client.list_models()
    err = ei.value
    assert err.kind is ErrorKind.API
    assert err.code == 401
    assert err.message == "Invalid API key"
    assert err.body == body
    assert err.category is ErrorCategory.AUTH


def test_api_error_with_empty_body(client, handler):
    handler.responder = lambda request: httpx.Response(500)
    with pytest.raises(OpenAIError) as ei:
        client.list_models()
    assert ei.value.message == "An unknown error occurred"
    assert ei.value.code == 500


def test_transport_error_wrapped(client, handler):
    def boom(request):
        raise httpx.ConnectError("connection refused", request=request)

    handler.responder = boom
    with pytest.raises(OpenAIError) as ei:
        client.list_models()
    assert ei.value.kind is ErrorKind.TRANSPORT
    assert ei.value.message == "connection refused"
    assert isinstance(ei.value.__cause__, httpx.ConnectError)


class _ExplodingTransport:
    def send(self, request, *, stream=False):
        raise RuntimeError("socket closed")


def test_arbitrary_transport_exception_wrapped(config):
    client = OpenAIClient(config, _ExplodingTransport())
    with pytest.raises(OpenAIError) as ei:
        client.list_models()
    assert ei.value.kind is ErrorKind.TRANSPORT
    assert ei.value.message == "socket closed"


class _NeverCalledTransport:
    def send(self, request, *, stream=False):
        raise AssertionError("transport must not be reached")


@pytest.mark.parametrize(
    "name,path_params,options,kind",
    [
        ("createSandwich", None, None, ErrorKind.UNKNOWN_ENDPOINT),
        ("retrieveRun", {"thread_id": "t"}, None, ErrorKind.MISSING_PATH_PARAMETER),
        ("retrieveFile", {"file_id": {"x": 1}}, None, ErrorKind.INVALID_PARAMETER_TYPE),
        ("createEmbedding", None, {"input": object()}, ErrorKind.ENCODING),
    ],
)
def test_input_errors_raised_before_send(config, name, path_params, options, kind):
    client = OpenAIClient(config, _NeverCalledTransport())
    with pytest.raises(OpenAIError) as ei:
        client.call(name, path_params, options)
    assert ei.value.kind is kind


def test_streaming_callback_receives_events(client, handler):
    handler.responder = lambda request: httpx.Response(
        200,
        content=_sse('{"choices":[{"delta":{"content":"Hel"}}]}', "[DONE]"),
        headers={"Content-Type": "text/event-stream"},
    )
    seen = []
    result = client.create_chat_completion(
        {"messages": [{"role": "user", "content": "Hi"}], "stream": True}, seen.append
    )
    assert result is None
    assert seen == [{"choices": [{"delta": {"content": "Hel"}}]}], "callback must run exactly once"
    sent = handler.last
    assert json.loads(sent.content)["stream"] is True
    assert sent.headers["Accept"] == "text/event-stream"


def test_streaming_over_chunked_body(client, handler):
    chunks = [b'data: {"n"', b":1}\n\nda", b'ta: {"n":2}\n\ndata: [DONE]\n\n']
    handler.responder = lambda request: httpx.Response(200, content=iter(chunks))
    seen = []
    client.call("createCompletion", None, {"model": "m", "prompt": "p", "stream": True}, seen.append)
    assert seen == [{"n": 1}, {"n": 2}]


def test_streaming_error_status_never_invokes_callback(client, handler):
    handler.responder = lambda request: httpx.Response(400, text='{"error": {"message": "bad model"}}')
    seen = []
    with pytest.raises(OpenAIError) as ei:
        client.create_chat_completion({"model": "nope", "stream": True}, seen.append)
    assert ei.value.code == 400
    assert ei.value.message == "bad model"
    assert seen == []


def test_streaming_malformed_event(client, handler):
    handler.responder = lambda request: httpx.Response(200, content=b'data: {"a":1}\n\ndata: {oops\n\n')
    seen = []
    with pytest.raises(OpenAIError) as ei:
        client.create_chat_completion({"stream": True}, seen.append)
    assert ei.value.kind is ErrorKind.STREAM_DECODE
    assert seen == [{"a": 1}]


def test_callback_exception_propagates(client, handler):
    handler.responder = lambda request: httpx.Response(200, content=_sse('{"a":1}', "[DONE]"))

    def fail(event):
        raise KeyError("consumer")

    with pytest.raises(KeyError):
        client.create_chat_completion({"stream": True}, fail)


def test_callback_without_stream_flag_is_ordinary_call(client, handler):
    seen = []
    response = client.create_chat_completion({"messages": []}, seen.append)
    assert response is not None and response.status_code == 200
    assert seen == []
    assert "Accept" not in handler.last.headers


def test_pull_stream_iterator(client, handler):
    handler.responder = lambda request: httpx.Response(200, content=_sse('{"n":1}', '{"n":2}', "[DONE]"))
    events = client.stream("createChatCompletion", None, {"model": "m", "messages": []})
    assert handler.requests == [], "request is sent on first iteration"
    assert list(events) == [{"n": 1}, {"n": 2}]
    assert json.loads(handler.last.content)["stream"] is True


def test_stream_uses_stream_timeout(handler):
    config = ClientConfig(api_key="k", timeout_seconds=5)
    with _mock_client(config, handler) as client:
        request = client.build_request("createChatCompletion", None, {"stream": True}, stream=True)
        plain = client.build_request("listModels")
    assert request.extensions["timeout"]["read"] == 120.0
    assert plain.extensions["timeout"]["read"] == 5.0
    assert plain.extensions["timeout"]["connect"] == 10.0


def test_injected_transport_keeps_its_timeout(handler):
    transport = httpx.Client(transport=httpx.MockTransport(handler), timeout=600.0)
    client = OpenAIClient(ClientConfig(api_key="k"), transport)
    request = client.build_request("createSpeech", None, {"input": "x"})
    assert "timeout" not in request.extensions, "injected client timeout must not be overridden"
    streamed = client.build_request("createChatCompletion", None, {"stream": True}, stream=True)
    assert "timeout" not in streamed.extensions
    client.create_speech({"input": "x"})
    assert handler.last.url.path == "/v1/audio/speech"
    transport.close()


def test_owned_transport_gets_timeout_extension(config):
    with OpenAIClient(config) as client:
        request = client.build_request("listModels")
    assert request.extensions["timeout"]["read"] == 60.0


def test_invoke_shapes(client, handler):
    client.invoke("listModels")
    assert handler.last.url.path == "/v1/models"

    client.invoke("retrieveModel", "gpt-4o")
    assert handler.last.url.path == "/v1/models/gpt-4o"

    client.invoke("createRun", {"thread_id": "t"}, {"assistant_id": "a"})
    assert handler.last.url.path == "/v1/threads/t/runs"
    assert json.loads(handler.last.content) == {"assistant_id": "a"}

    client.invoke("listAssistants", {"limit": 3})
    assert handler.last.url.params.get("limit") == "3"


def test_invoke_with_callback(client, handler):
    handler.responder = lambda request: httpx.Response(200, content=_sse('{"a":1}', "[DONE]"))
    seen = []
    client.invoke("createChatCompletion", {}, {"model": "m", "stream": True}, seen.append)
    assert seen == [{"a": 1}]


def test_invoke_scalar_for_endpoint_without_placeholders(client):
    with pytest.raises(OpenAIError) as ei:
        client.invoke("listModels", "gpt-4o")
    assert ei.value.kind is ErrorKind.INVALID_PARAMETER_TYPE


def test_typed_methods_default_model(client, handler, config):
    client.create_chat_completion({"messages": []})
    assert json.loads(handler.last.content)["model"] == config.chat_model
    client.create_embedding({"input": "x"})
    assert json.loads(handler.last.content)["model"] == config.embedding_model
    client.create_completion({"prompt": "x", "model": "davinci-002"})
    assert json.loads(handler.last.content)["model"] == "davinci-002"


def test_typed_methods_paths(client, handler):
    client.delete_model("ft-gpt-4o-org")
    assert handler.last.method == "DELETE"
    assert handler.last.url.path == "/v1/models/ft-gpt-4o-org"
    client.download_file("file-1")
    assert handler.last.url.path == "/v1/files/file-1/content"
    client.retrieve_file("file-2")
    assert handler.last.url.path == "/v1/files/file-2"


def test_create_factory_reads_env(monkeypatch, handler):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-env-key")
    monkeypatch.setenv("OPENAI_ORGANIZATION", "org-env")
    client = create(transport=httpx.Client(transport=httpx.MockTransport(handler)))
    client.list_models()
    assert handler.last.headers["Authorization"] == "Bearer sk-env-key"
    assert handler.last.headers["OpenAI-Organization"] == "org-env"


def test_create_factory_admin_key(monkeypatch, handler):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-project")
    monkeypatch.setenv("OPENAI_ADMIN_KEY", "sk-admin")
    client = create(transport=httpx.Client(transport=httpx.MockTransport(handler)), admin=True)
    client.call("listProjects")
    assert handler.last.headers["Authorization"] == "Bearer sk-admin"


def test_owned_transport_closed(config):
    client = OpenAIClient(config)
    transport = client._transport
    client.close()
    assert transport.is_closed


def test_invoke_single_mapping_with_stream_flag_streams(client, handler):
    handler.responder = lambda request: httpx.Response(200, content=_sse('{"a":1}', "[DONE]"))
    seen = []
    result = client.invoke("createChatCompletion", {"model": "m", "stream": True}, seen.append)
    assert result is None
    assert seen == [{"a": 1}]
    assert json.loads(handler.last.content) == {"model": "m", "stream": True}
    assert handler.last.headers["Accept"] == "text/event-stream"


def test_stream_flag_in_path_params_streams(client, handler):
    handler.responder = lambda request: httpx.Response(200, content=_sse('{"n":1}', '{"n":2}', "[DONE]"))
    seen = []
    assert client.call("createCompletion", {"stream": True}, {"model": "m"}, seen.append) is None
    assert seen == [{"n": 1}, {"n": 2}]


def test_options_stream_flag_overrides_path_params(client, handler):
    seen = []
    response = client.call("createCompletion", {"stream": True}, {"model": "m", "stream": False}, seen.append)
    assert response is not None and response.status_code == 200
    assert seen == []
    assert json.loads(handler.last.content)["stream"] is False
