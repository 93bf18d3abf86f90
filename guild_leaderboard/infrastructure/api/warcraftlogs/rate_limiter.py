"""
Warcraft Logs Rate Limiting

Inter-batch delay policy and the bounded batch runner that applies it.
"""

import asyncio
import logging
import time
from typing import Awaitable, Callable, List, Optional, Sequence, TypeVar, Dict, Any

logger = logging.getLogger(__name__)

T = TypeVar('T')
R = TypeVar('R')


class InterBatchDelayPolicy:
    """Fixed pause between consecutive batches of upstream requests."""

    DEFAULT_DELAY_SECONDS = 0.5

    def __init__(
        self,
        delay_seconds: float = DEFAULT_DELAY_SECONDS,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep
    ):
        """
        Initialize delay policy.

        Args:
            delay_seconds: Pause between batches
            sleep: Awaitable sleep function, replaceable in tests
        """
        if delay_seconds < 0:
            raise ValueError("delay_seconds must be >= 0")

        self.delay_seconds = delay_seconds
        self._sleep = sleep

        # Statistics
        self.total_pauses = 0
        self.total_wait_time = 0.0

    async def pause(self) -> None:
        """Wait before the next batch."""
        if self.delay_seconds <= 0:
            return

        logger.debug(f"Rate limit pause: {self.delay_seconds:.2f}s")
        start_time = time.monotonic()
        await self._sleep(self.delay_seconds)

        self.total_pauses += 1
        self.total_wait_time += time.monotonic() - start_time

    def get_statistics(self) -> Dict[str, Any]:
        return {
            "delay_seconds": self.delay_seconds,
            "total_pauses": self.total_pauses,
            "total_wait_time": self.total_wait_time,
        }


class BatchRunner:
    """
    Bounded-concurrency work pool.

    Items are processed in consecutive batches of ``batch_size``. Every item
    of a batch runs concurrently, the runner waits for the whole batch, then
    asks the delay policy to pause before starting the next one. There is no
    pause after the last batch.
    """

    DEFAULT_BATCH_SIZE = 5

    def __init__(
        self,
        batch_size: int = DEFAULT_BATCH_SIZE,
        policy: Optional[InterBatchDelayPolicy] = None
    ):
        if batch_size < 1:
            raise ValueError("batch_size must be >= 1")

        self.batch_size = batch_size
        self.policy = policy or InterBatchDelayPolicy()

    def batches(self, items: Sequence[T]) -> List[List[T]]:
        return [
            list(items[i:i + self.batch_size])
            for i in range(0, len(items), self.batch_size)
        ]

    async def run(
        self,
        items: Sequence[T],
        worker: Callable[[T], Awaitable[R]]
    ) -> List[R]:
        """
        Run ``worker`` over ``items``.

        Args:
            items: Work items, processed in order
            worker: Coroutine function applied to each item

        Returns:
            Results in the same order as ``items``
        """
        results: List[R] = []
        batches = self.batches(items)

        for index, batch in enumerate(batches):
            logger.debug(
                f"Processing batch {index + 1}/{len(batches)} "
                f"({len(batch)} items)"
            )
            results.extend(
                await asyncio.gather(*(worker(item) for item in batch))
            )

            if index + 1 < len(batches):
                await self.policy.pause()

        return results
