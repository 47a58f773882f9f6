"""Bounded worker pool for route probes."""

import asyncio
import logging
from collections.abc import Sequence

from src.config.constants import ERROR_STATUS_CODE, ERROR_STATUS_MESSAGE
from src.services.routes.models import RouteDescriptor, RouteOutcome
from src.services.routes.probe import RouteProbe

logger = logging.getLogger(__name__)


class ConcurrentRunner:
    """
    Fans route probes out over a fixed set of worker tasks.

    A dispatcher pushes one descriptor at a time onto a bounded task queue,
    workers pull from it and push outcomes onto a results queue, and the
    collector waits for exactly one outcome per descriptor. Outcomes come
    back in completion order.
    """

    def __init__(self, probe: RouteProbe):
        self.probe = probe

    async def run(
        self,
        descriptors: Sequence[RouteDescriptor],
        base_url: str,
        max_concurrent: int,
        timeout: float,
    ) -> list[RouteOutcome]:
        """
        Probe every descriptor with at most max_concurrent requests in flight.

        Args:
            descriptors: Routes to test
            base_url: Base URL prepended to every route path
            max_concurrent: Worker pool size
            timeout: Per-request timeout in seconds

        Returns:
            One outcome per descriptor, in completion order
        """
        if not descriptors:
            return []
        if max_concurrent < 1:
            raise ValueError(f"max_concurrent must be positive, got {max_concurrent}")

        tasks: asyncio.Queue[RouteDescriptor] = asyncio.Queue(maxsize=max_concurrent)
        results: asyncio.Queue[RouteOutcome] = asyncio.Queue()

        worker_count = min(max_concurrent, len(descriptors))
        workers = [
            asyncio.create_task(self._worker(tasks, results, base_url, timeout))
            for _ in range(worker_count)
        ]
        dispatcher = asyncio.create_task(self._dispatch(descriptors, tasks))
        logger.debug("Started %s workers for %s routes", worker_count, len(descriptors))

        try:
            outcomes = [await results.get() for _ in range(len(descriptors))]
        finally:
            dispatcher.cancel()
            for worker in workers:
                worker.cancel()
            await asyncio.gather(dispatcher, *workers, return_exceptions=True)

        return outcomes

    @staticmethod
    async def _dispatch(
        descriptors: Sequence[RouteDescriptor],
        tasks: asyncio.Queue[RouteDescriptor],
    ) -> None:
        for descriptor in descriptors:
            await tasks.put(descriptor)

    async def _worker(
        self,
        tasks: asyncio.Queue[RouteDescriptor],
        results: asyncio.Queue[RouteOutcome],
        base_url: str,
        timeout: float,
    ) -> None:
        while True:
            descriptor = await tasks.get()
            try:
                outcome = await self.probe.probe(descriptor, base_url, timeout)
            except Exception as e:
                # Keeps the one-outcome-per-descriptor count intact for the collector
                logger.error("Worker failed on route %s: %s", descriptor.path, e, exc_info=True)
                outcome = RouteOutcome(
                    route=descriptor.path,
                    url=base_url + descriptor.path,
                    status_code=ERROR_STATUS_CODE,
                    status_message=ERROR_STATUS_MESSAGE,
                    response_time_ms=0,
                    success=False,
                    error_message=str(e) or type(e).__name__,
                )
            results.put_nowait(outcome)
            tasks.task_done()
