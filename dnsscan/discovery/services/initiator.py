import asyncio
import time
from typing import AsyncIterator, Iterator, List

from loguru import logger

from dnsscan.discovery.models import HostOutcome, HostTarget, ScanConfig


def generate_targets(config: ScanConfig) -> Iterator[HostTarget]:
    """One target per index in [lower_bound, upper_bound), in ascending order"""
    for index in range(config.lower_bound, config.upper_bound):
        yield HostTarget(index=index, hostname=config.hostname_for(index))


class ScanOrchestrator:
    def __init__(self, host_scanner):
        self.host_scanner = host_scanner
        self._tasks: List[asyncio.Task] = []
        self.cancelled = False

    async def scan(self, config: ScanConfig) -> AsyncIterator[HostOutcome]:
        """
        Probe every target concurrently and yield outcomes in index order.

        All host probes are started up front with no concurrency limit. An
        outcome is yielded once its own probe and every earlier one have
        finished, so a slow host holds back later ones but the caller never
        waits for the whole range before seeing the first result.

        Leaving the iteration early cancels whatever is still running. Every
        host task is awaited before the generator finishes, so no task result
        or exception is left uncollected.
        """
        targets = list(generate_targets(config))
        logger.info("Starting scan of {} hosts ({} ports each)", len(targets), len(config.ports))
        start_time = time.time()

        tasks = [
            asyncio.create_task(self.host_scanner.probe_host(target, config.ports))
            for target in targets
        ]
        self._tasks = tasks
        self.cancelled = False

        try:
            for task in tasks:
                yield await task
        finally:
            pending = [task for task in tasks if not task.done()]
            for task in pending:
                task.cancel()
            if pending:
                logger.info("Scan stopped early, cancelled {} pending hosts", len(pending))
            await asyncio.gather(*tasks, return_exceptions=True)
            self._tasks = []

        logger.info("All {} host probes finished in {:.2f}s", len(targets), time.time() - start_time)

    def cancel(self):
        """
        Cancel every in-flight host probe, including its port probes.

        Only affects a scan that is running; calling it before scan() starts
        or after it finished does nothing.
        """
        if self._tasks:
            self.cancelled = True
        for task in self._tasks:
            task.cancel()
