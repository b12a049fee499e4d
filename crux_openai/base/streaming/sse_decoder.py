"""Incremental decoder for Server-Sent-Events ``data:`` framing.

Text arrives in arbitrary chunks; complete lines are cut at ``\\n`` and the
remainder is carried over to the next chunk. For every complete line:

- blank lines are skipped;
- ``data: [DONE]`` ends the stream, later input is ignored;
- other ``data:`` lines are JSON-decoded and yielded;
- anything else (``event:``, ``id:``, ``:`` comments) is ignored.

A ``data:`` payload that is not valid JSON raises ``STREAM_DECODE`` at the
point it is reached; events decoded before it have already been yielded and
nothing after it is.
"""
from __future__ import annotations

from typing import Any, Iterator, Optional

from ..constants import SSE_DATA_PREFIX, SSE_DONE_SENTINEL
from ..errors_parts.factories import stream_decode_error
from ..errors_parts.json_parsing import try_parse_json

_FIELD = SSE_DATA_PREFIX.rstrip()


class SSELineDecoder:
    """Stateful line splitter and event decoder for one stream."""

    def __init__(self) -> None:
        self._buffer = ""
        self.done = False
        self.events_decoded = 0

    @property
    def pending(self) -> str:
        """Text received after the last newline."""
        return self._buffer

    def feed(self, chunk: str) -> Iterator[Any]:
        """Consume ``chunk`` and yield the events completed by it.

        Lazy: the chunk is only consumed while the returned iterator is
        iterated.
        """
        if self.done or not chunk:
            return
        self._buffer += chunk
        while not self.done:
            idx = self._buffer.find("\n")
            if idx < 0:
                break
            line = self._buffer[:idx]
            self._buffer = self._buffer[idx + 1 :]
            event = self._process_line(line)
            if event is not None:
                yield event
        if self.done:
            self._buffer = ""

    def flush(self) -> Iterator[Any]:
        """Process a final line left without a trailing newline."""
        if self.done or not self._buffer:
            return
        line, self._buffer = self._buffer, ""
        event = self._process_line(line)
        if event is not None:
            yield event

    def _process_line(self, line: str) -> Optional[Any]:
        line = line.rstrip("\r")
        if not line.strip() or not line.startswith(_FIELD):
            return None
        payload = line[len(_FIELD) :]
        if payload.startswith(" "):
            payload = payload[1:]
        payload = payload.strip()
        if payload == SSE_DONE_SENTINEL:
            self.done = True
            return None
        parsed = try_parse_json(payload)
        if not parsed.ok:
            raise stream_decode_error(line)
        self.events_decoded += 1
        return parsed.value


__all__ = ["SSELineDecoder"]
