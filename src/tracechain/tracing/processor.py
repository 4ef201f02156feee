"""Span processor fan-out with a shared flush deadline."""

from __future__ import annotations

import math
import time

from opentelemetry.sdk.trace import SynchronousMultiSpanProcessor


class DeadlineMultiSpanProcessor(SynchronousMultiSpanProcessor):
    """Calls processors in order and flushes them against one deadline.

    Every processor is asked to flush, each with whatever is left of the
    budget (possibly zero), so processors with nothing pending report
    success even when the deadline is already spent.
    """

    def force_flush(self, timeout_millis: int = 30000) -> bool:
        deadline = time.monotonic() + timeout_millis / 1000
        for processor in self._span_processors:
            remaining = max(math.ceil((deadline - time.monotonic()) * 1000), 0)
            if not processor.force_flush(remaining):
                return False
        return True
