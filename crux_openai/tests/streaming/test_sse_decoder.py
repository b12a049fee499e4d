"""Server-sent events decoding over arbitrary chunk boundaries."""

from __future__ import annotations

import pytest

from crux_openai.base.errors import ErrorKind, OpenAIError
from crux_openai.base.streaming import SSELineDecoder, deliver, iter_sse_events


def _collect(chunks):
    return list(iter_sse_events(chunks))


def test_single_frame_then_done():
    events = _collect(['data: {"id":"c1","choices":[]}\n\n', "data: [DONE]\n\n"])
    assert events == [{"id": "c1", "choices": []}], "exactly one event expected before [DONE]"


def test_lines_split_across_chunks():
    chunks = ["da", 'ta: {"a"', ":1}\n", '\ndata: {"b":', "2}\n\n"]
    assert _collect(chunks) == [{"a": 1}, {"b": 2}]


def test_input_after_done_is_ignored():
    chunks = ['data: {"a":1}\n\ndata: [DONE]\n\ndata: {"b":2}\n\n', 'data: {"c":3}\n\n']
    assert _collect(chunks) == [{"a": 1}]


def test_crlf_blank_and_non_data_lines():
    text = ': keep-alive\r\n\r\nevent: message\r\nid: 7\r\ndata: {"a":1}\r\n\r\n'
    assert _collect([text]) == [{"a": 1}]


def test_data_prefix_without_space():
    assert _collect(['data:{"a":1}\n']) == [{"a": 1}]


def test_non_object_payloads_are_delivered():
    assert _collect(['data: "x"\n', "data: 42\n"]) == ["x", 42]


def test_trailing_line_without_newline_is_flushed():
    decoder = SSELineDecoder()
    assert list(decoder.feed('data: {"a":1}')) == []
    assert decoder.pending == 'data: {"a":1}'
    assert list(decoder.flush()) == [{"a": 1}]
    assert decoder.pending == ""
    assert decoder.events_decoded == 1


def test_empty_stream_yields_nothing():
    assert _collect([]) == []
    assert _collect(["", "\n\n"]) == []


def test_malformed_payload_raises_after_earlier_events():
    received = []
    with pytest.raises(OpenAIError) as ei:
        for event in iter_sse_events(['data: {"a":1}\n\ndata: {oops\n\ndata: {"b":2}\n\n']):
            received.append(event)
    assert received == [{"a": 1}]
    assert ei.value.kind is ErrorKind.STREAM_DECODE
    assert ei.value.body == "data: {oops"


def test_done_marks_decoder_finished():
    decoder = SSELineDecoder()
    list(decoder.feed("data: [DONE]\n"))
    assert decoder.done
    assert list(decoder.feed('data: {"a":1}\n')) == []
    assert list(decoder.flush()) == []


def test_deliver_invokes_callback_in_order():
    seen = []
    count = deliver(iter_sse_events(['data: {"n":1}\n\ndata: {"n":2}\n\n']), seen.append)
    assert count == 2
    assert seen == [{"n": 1}, {"n": 2}]
