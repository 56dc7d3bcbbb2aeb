"""Per-operation running statistics for mock service calls.

Uses a running mean (new_avg = old_avg + (duration - old_avg) / count) so memory
stays O(1) per operation regardless of suite length.
"""

from ideamock.schemas.mock import PerformanceMetrics


class PerformanceAggregator:
    def __init__(self):
        self._metrics: dict[str, PerformanceMetrics] = {}

    def record_duration(self, operation: str, duration_ms: float, success: bool = True) -> PerformanceMetrics:
        """Fold one call's duration into the operation's statistics.

        Args:
            operation: Façade operation name
            duration_ms: Wall-clock duration of the call
            success: False when the call produced a failure result

        Returns:
            The updated metrics for the operation
        """
        current = self._metrics.get(operation) or PerformanceMetrics()
        count = current.total_requests + 1

        updated = PerformanceMetrics(
            total_requests=count,
            failed_requests=current.failed_requests + (0 if success else 1),
            average_duration_ms=current.average_duration_ms
            + (duration_ms - current.average_duration_ms) / count,
            min_duration_ms=duration_ms if count == 1 else min(current.min_duration_ms, duration_ms),
            max_duration_ms=max(current.max_duration_ms, duration_ms),
        )
        self._metrics[operation] = updated
        return updated

    def get_metrics(self, operation: str | None = None) -> PerformanceMetrics | dict[str, PerformanceMetrics]:
        """Statistics for one operation, or a mapping over all recorded operations."""
        if operation is not None:
            return self._metrics.get(operation, PerformanceMetrics()).model_copy()
        return {name: metrics.model_copy() for name, metrics in self._metrics.items()}

    def clear(self) -> None:
        """Reset every operation's counters to zero."""
        for operation in self._metrics:
            self._metrics[operation] = PerformanceMetrics()
