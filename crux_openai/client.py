"""OpenAI REST client: one call path, many endpoints.

``OpenAIClient.call`` is the single dispatcher behind every operation:

1. look up the endpoint definition in the registry;
2. split parameters into path placeholders and leftovers (query string for
   GET, merged into the body for every other method);
3. strip ``customHeaders`` from the options and merge headers;
4. encode the body (JSON or multipart; streaming requests are always JSON);
5. send through the transport and normalize the outcome.

Every failure surfaces as :class:`~crux_openai.base.errors.OpenAIError`.
Responses with status >= 400 raise with ``kind=API`` and ``code`` set to the
status; transport exceptions raise with ``kind=TRANSPORT``. Successful
responses are returned unchanged for the caller to decode.

Streaming
---------
When a callback is supplied and the merged parameters (options plus
leftover path parameters) request ``"stream": True`` the response body is
decoded incrementally as server-sent events and each event is passed to the
callback, in order, before ``call`` returns. ``stream`` offers
the same pipeline as a lazy iterator.

The typed methods at the bottom (``create_chat_completion``, ``list_models``
and friends) are thin wrappers around ``call``.
"""
from __future__ import annotations

import contextlib
import uuid
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple

import httpx

from .base.body import build_body
from .base.client_config import ClientConfig
from .base.constants import CONTENT_TYPE_HEADER, CUSTOM_HEADERS_KEY
from .base.errors import ErrorKind, OpenAIError
from .base.errors_parts.factories import api_error, transport_error
from .base.http import Transport, create_http_client
from .base.logging import LogContext, get_logger, log_event
from .base.registry import DEFAULT_REGISTRY, EndpointDefinition, EndpointRegistry
from .base.streaming import StreamCallback, deliver, iter_sse_events
from .base.timeouts import TimeoutConfig, get_timeout_config
from .base.url_builder import SCALAR_TYPES, compose_url, resolve_path

__all__ = ["OpenAIClient"]

_SSE_ACCEPT = "text/event-stream"


class OpenAIClient:
    """Client bound to one immutable :class:`ClientConfig` and one transport.

    Parameters
    ----------
    config:
        Credentials and endpoint location.
    transport:
        Object with ``send(request, *, stream=False)``; typically an
        ``httpx.Client``. When omitted the client creates (and owns) one.
    registry:
        Endpoint table; defaults to the built-in catalog.
    timeouts:
        Base timeout configuration forwarded with every request. With an
        injected transport nothing is forwarded unless
        ``config.timeout_seconds`` is set, so the transport's own timeouts
        apply.
    """

    def __init__(
        self,
        config: ClientConfig,
        transport: Optional[Transport] = None,
        *,
        registry: EndpointRegistry = DEFAULT_REGISTRY,
        timeouts: Optional[TimeoutConfig] = None,
    ) -> None:
        self._config = config
        self._registry = registry
        self._timeouts = (timeouts or get_timeout_config()).with_http_timeout(config.timeout_seconds)
        self._owns_transport = transport is None
        self._forward_timeouts = self._owns_transport or config.timeout_seconds is not None
        self._transport: Transport = transport or create_http_client(
            config.timeout_seconds, config.proxy, self._timeouts
        )
        self._logger = get_logger("crux_openai.client")

    @classmethod
    def from_env(cls, transport: Optional[Transport] = None, *, admin: bool = False, **overrides: Any) -> "OpenAIClient":
        """Build a client from environment settings (see ``ClientConfig.from_env``)."""
        return cls(ClientConfig.from_env(admin=admin, **overrides), transport)

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def registry(self) -> EndpointRegistry:
        return self._registry

    # -------------------- Lifecycle --------------------

    def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_transport:
            close = getattr(self._transport, "close", None)
            if callable(close):
                close()

    def __enter__(self) -> "OpenAIClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # -------------------- Request construction --------------------

    def build_request(
        self,
        name: str,
        path_params: Optional[Mapping[str, Any]] = None,
        options: Optional[Mapping[str, Any]] = None,
        *,
        stream: bool = False,
    ) -> httpx.Request:
        """Build the ``httpx.Request`` for one call without sending it.

        Raises ``OpenAIError`` for unknown endpoints, bad path parameters and
        unencodable bodies; nothing touches the network.
        """
        definition, path, opts = self._resolve(name, path_params, options)
        return self._build(definition, path, opts, stream=stream)

    def _resolve(
        self,
        name: str,
        path_params: Optional[Mapping[str, Any]],
        options: Optional[Mapping[str, Any]],
    ) -> Tuple[EndpointDefinition, str, Dict[str, Any]]:
        """Resolve the path and merge leftover parameters under ``options``."""
        definition = self._registry.lookup(name)
        path, leftover = resolve_path(definition, path_params)
        return definition, path, {**leftover, **dict(options or {})}

    def _build(
        self, definition: EndpointDefinition, path: str, opts: Dict[str, Any], *, stream: bool
    ) -> httpx.Request:
        opts = dict(opts)
        custom_headers = opts.pop(CUSTOM_HEADERS_KEY, None) or {}

        if definition.is_read:
            url = compose_url(path, self._config.origin, self._config.base_path, opts)
            opts = {}
        else:
            url = compose_url(path, self._config.origin, self._config.base_path)

        body = build_body(opts, force_json=stream)

        headers = httpx.Headers(dict(self._config.default_headers))
        headers.update(self._config.auth_headers())
        headers.update({str(k): str(v) for k, v in dict(custom_headers).items()})
        if body.content_type:
            headers[CONTENT_TYPE_HEADER] = body.content_type
        if stream:
            headers.setdefault("Accept", _SSE_ACCEPT)

        return httpx.Request(
            definition.http_method.value,
            url,
            headers=headers,
            content=body.content or None,
            extensions=self._timeout_extensions(stream),
        )

    # -------------------- Dispatch --------------------

    def call(
        self,
        name: str,
        path_params: Optional[Mapping[str, Any]] = None,
        options: Optional[Mapping[str, Any]] = None,
        stream_callback: Optional[StreamCallback] = None,
    ) -> Optional[httpx.Response]:
        """Call endpoint ``name``.

        Returns the response for ordinary calls. For streaming calls (callback
        given and ``"stream": True`` in the options or the leftover path
        parameters) every decoded event is passed to ``stream_callback`` and
        ``None`` is returned.
        """
        definition, path, opts = self._resolve(name, path_params, options)
        streaming = stream_callback is not None and opts.get("stream") is True
        request = self._build(definition, path, opts, stream=streaming)
        ctx = LogContext(endpoint=name, method=request.method, request_id=uuid.uuid4().hex[:12])

        if streaming:
            with contextlib.closing(self._iter_stream(request, ctx)) as events:
                deliver(events, stream_callback)
            return None

        log_event(self._logger, "request.start", ctx, path=request.url.path, streaming=False)
        response = self._send(request, ctx, stream=False)
        self._raise_for_status(response, ctx)
        log_event(self._logger, "request.end", ctx, status=response.status_code)
        return response

    def stream(
        self,
        name: str,
        path_params: Optional[Mapping[str, Any]] = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> Iterator[Any]:
        """Pull-style streaming: return a lazy iterator of decoded events.

        ``"stream": True`` is added to the body. The request is validated
        immediately but only sent on the first ``next()``; the response is
        closed when the iterator is exhausted or closed.
        """
        opts = {**dict(options or {}), "stream": True}
        request = self.build_request(name, path_params, opts, stream=True)
        ctx = LogContext(endpoint=name, method=request.method, request_id=uuid.uuid4().hex[:12])
        return self._iter_stream(request, ctx)

    def invoke(self, name: str, *args: Any) -> Optional[httpx.Response]:
        """Call ``name`` with loosely shaped positional arguments.

        Accepted shapes::

            invoke("listModels")
            invoke("retrieveModel", "gpt-4o")                    # scalar -> sole placeholder
            invoke("createRun", {"thread_id": "t"}, {"assistant_id": "a"})
            invoke("createChatCompletion", {}, {...}, callback)

        A single mapping is treated as path parameters; entries that match no
        placeholder flow on to the query string or body.
        """
        path_params, options, callback = self._split_invoke_args(name, args)
        return self.call(name, path_params, options, callback)

    def _split_invoke_args(
        self, name: str, args: Tuple[Any, ...]
    ) -> Tuple[Optional[Mapping[str, Any]], Optional[Mapping[str, Any]], Optional[StreamCallback]]:
        rest = list(args)
        callback = rest.pop() if rest and callable(rest[-1]) else None
        if not rest:
            return None, None, callback
        first = rest[0]
        options = rest[1] if len(rest) > 1 else None
        if isinstance(first, SCALAR_TYPES):
            definition = self._registry.lookup(name)
            if not definition.placeholders:
                raise OpenAIError(
                    f'Endpoint "{name}" takes no path parameter.', kind=ErrorKind.INVALID_PARAMETER_TYPE
                )
            return {definition.placeholders[0]: first}, options, callback
        return first, options, callback

    # -------------------- Internals --------------------

    def _timeout_extensions(self, stream: bool) -> Dict[str, Any]:
        """Per-request timeout; an injected transport keeps its own unless one is configured."""
        if not self._forward_timeouts:
            return {}
        return {"timeout": self._timeouts.to_httpx(stream=stream).as_dict()}

    def _send(self, request: httpx.Request, ctx: LogContext, *, stream: bool) -> httpx.Response:
        try:
            return self._transport.send(request, stream=stream)
        except OpenAIError:
            raise
        except Exception as exc:
            err = transport_error(exc)
            log_event(self._logger, "request.error", ctx, error_kind=err.kind.value, code=err.code, error=err.message)
            raise err from exc

    def _raise_for_status(self, response: httpx.Response, ctx: LogContext) -> None:
        if response.status_code < 400:
            return
        try:
            response.read()
        except httpx.HTTPError as exc:
            raise transport_error(exc) from exc
        err = api_error(response.text, response.status_code)
        log_event(
            self._logger,
            "request.error",
            ctx,
            error_kind=ErrorKind.API.value,
            code=err.code,
            category=err.category.value,
            error=err.message,
        )
        raise err

    def _iter_text(self, response: httpx.Response) -> Iterator[str]:
        try:
            yield from response.iter_text()
        except httpx.HTTPError as exc:
            raise transport_error(exc) from exc

    def _iter_stream(self, request: httpx.Request, ctx: LogContext) -> Iterator[Any]:
        log_event(self._logger, "request.start", ctx, path=request.url.path, streaming=True)
        response = self._send(request, ctx, stream=True)
        emitted = 0
        try:
            self._raise_for_status(response, ctx)
            log_event(self._logger, "stream.start", ctx, status=response.status_code)
            for event in iter_sse_events(self._iter_text(response)):
                emitted += 1
                yield event
        finally:
            response.close()
            log_event(self._logger, "stream.end", ctx, emitted=emitted)

    def _with_default_model(self, options: Optional[Mapping[str, Any]], model: str) -> Dict[str, Any]:
        opts = dict(options or {})
        if not opts.get("model"):
            opts["model"] = model
        return opts

    # -------------------- Typed operations --------------------

    def create_chat_completion(
        self, options: Optional[Mapping[str, Any]] = None, stream_callback: Optional[StreamCallback] = None
    ) -> Optional[httpx.Response]:
        return self.call(
            "createChatCompletion", None, self._with_default_model(options, self._config.chat_model), stream_callback
        )

    def create_completion(
        self, options: Optional[Mapping[str, Any]] = None, stream_callback: Optional[StreamCallback] = None
    ) -> Optional[httpx.Response]:
        return self.call(
            "createCompletion", None, self._with_default_model(options, self._config.completion_model), stream_callback
        )

    def create_embedding(self, options: Optional[Mapping[str, Any]] = None) -> httpx.Response:
        return self.call("createEmbedding", None, self._with_default_model(options, self._config.embedding_model))

    def create_speech(self, options: Mapping[str, Any]) -> httpx.Response:
        """Text to speech; the audio bytes are in ``response.content``."""
        return self.call("createSpeech", None, options)

    def create_transcription(self, options: Mapping[str, Any]) -> httpx.Response:
        return self.call("createTranscription", None, options)

    def create_translation(self, options: Mapping[str, Any]) -> httpx.Response:
        return self.call("createTranslation", None, options)

    def create_image(self, options: Mapping[str, Any]) -> httpx.Response:
        return self.call("createImage", None, options)

    def create_moderation(self, options: Mapping[str, Any]) -> httpx.Response:
        return self.call("createModeration", None, options)

    def list_models(self) -> httpx.Response:
        return self.call("listModels")

    def retrieve_model(self, model: str) -> httpx.Response:
        return self.call("retrieveModel", {"model": model})

    def delete_model(self, model: str) -> httpx.Response:
        return self.call("deleteModel", {"model": model})

    def create_file(self, options: Mapping[str, Any]) -> httpx.Response:
        """Upload a file; ``options["file"]`` is a local path."""
        return self.call("createFile", None, options)

    def list_files(self, options: Optional[Mapping[str, Any]] = None) -> httpx.Response:
        return self.call("listFiles", None, options)

    def retrieve_file(self, file_id: str) -> httpx.Response:
        return self.call("retrieveFile", {"file_id": file_id})

    def delete_file(self, file_id: str) -> httpx.Response:
        return self.call("deleteFile", {"file_id": file_id})

    def download_file(self, file_id: str) -> httpx.Response:
        """Raw file content in ``response.content``."""
        return self.call("downloadFile", {"file_id": file_id})
