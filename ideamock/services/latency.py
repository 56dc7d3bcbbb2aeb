"""Artificial network latency for exercising loading states and timeouts."""

import asyncio
import random


class LatencySimulator:
    """Draws and awaits a uniformly random delay within [min_ms, max_ms].

    When disabled, simulate() returns 0 immediately without yielding to the loop.
    """

    def __init__(self, min_ms: int, max_ms: int, enabled: bool = True, rng: random.Random | None = None):
        if min_ms < 0 or min_ms > max_ms:
            raise ValueError(f"Invalid latency range: [{min_ms}, {max_ms}]")
        self.min_ms = min_ms
        self.max_ms = max_ms
        self.enabled = enabled
        self._rng = rng or random.Random()
        self.last_latency_ms = 0

    def draw(self) -> int:
        return self._rng.randint(self.min_ms, self.max_ms)

    async def simulate(self) -> int:
        """Await the drawn delay and return it in milliseconds."""
        if not self.enabled:
            self.last_latency_ms = 0
            return 0

        latency = self.draw()
        self.last_latency_ms = latency
        await asyncio.sleep(latency / 1000)
        return latency
