"""Server-sent events decoding for streamed responses."""

from .events import StreamCallback, deliver, iter_sse_events
from .sse_decoder import SSELineDecoder

__all__ = ["SSELineDecoder", "StreamCallback", "deliver", "iter_sse_events"]
