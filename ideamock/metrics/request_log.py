"""Bounded in-memory log of recent mock service calls."""

from collections import deque

import structlog

from ideamock.schemas.mock import RequestLogEntry

logger = structlog.get_logger(__name__)

DEFAULT_CAPACITY = 100


class RequestLogger:
    """Ring buffer of RequestLogEntry, oldest evicted first.

    Appends are single non-suspending steps, so interleaved coroutines on one
    event loop cannot corrupt the buffer. Guard with a lock if shared across threads.
    """

    def __init__(self, enabled: bool, capacity: int = DEFAULT_CAPACITY, service: str = "mock"):
        self.enabled = enabled
        self.capacity = capacity
        self.service = service
        self._entries: deque[RequestLogEntry] = deque(maxlen=capacity)

    def log(self, entry: RequestLogEntry) -> None:
        if not self.enabled:
            return

        self._entries.append(entry)
        logger.info(
            "mock_request",
            service=self.service,
            operation=entry.operation,
            scenario=entry.scenario.value,
            latency_ms=round(entry.latency_ms, 2),
            simulated_latency_ms=entry.simulated_latency_ms,
            success=entry.success,
            error=entry.error,
        )

    def get_logs(self) -> list[RequestLogEntry]:
        """Logged entries, oldest first."""
        return list(self._entries)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
