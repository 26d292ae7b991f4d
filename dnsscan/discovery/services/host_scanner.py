import asyncio
import time

from loguru import logger

from dnsscan.discovery.models import HostOutcome, HostTarget


class HostScanner:
    def __init__(self, host_resolver, port_scanner):
        self.host_resolver = host_resolver
        self.port_scanner = port_scanner

    async def probe_host(self, target: HostTarget, ports) -> HostOutcome:
        """Resolve one host, then probe all of its ports concurrently"""
        host_start_time = time.time()

        resolution = await self.host_resolver.resolve(target.hostname)
        if not resolution.succeeded:
            return HostOutcome(target=target, resolution=resolution)

        # gather keeps the input port order
        port_results = await asyncio.gather(
            *(self.port_scanner.probe(resolution.addresses, port) for port in ports))

        outcome = HostOutcome(target=target, resolution=resolution, port_results=tuple(port_results))
        host_duration = time.time() - host_start_time
        logger.debug("Host scan completed: {} ({} of {} ports open, {:.2f}s)",
                     target.hostname, len(outcome.open_ports), len(port_results), host_duration)
        return outcome
