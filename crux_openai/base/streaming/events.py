"""Iterator helpers over decoded stream events."""
from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator

from .sse_decoder import SSELineDecoder

StreamCallback = Callable[[Any], None]


def iter_sse_events(chunks: Iterable[str], decoder: SSELineDecoder | None = None) -> Iterator[Any]:
    """Yield decoded events from text chunks until ``[DONE]`` or exhaustion.

    Single pass: events are produced lazily in arrival order and never
    buffered beyond the current chunk.
    """
    decoder = decoder or SSELineDecoder()
    for chunk in chunks:
        yield from decoder.feed(chunk)
        if decoder.done:
            return
    yield from decoder.flush()


def deliver(events: Iterable[Any], callback: StreamCallback) -> int:
    """Invoke ``callback`` once per event, in order. Returns the count."""
    count = 0
    for event in events:
        callback(event)
        count += 1
    return count


__all__ = ["StreamCallback", "iter_sse_events", "deliver"]
