import asyncio
import socket
import time

from loguru import logger

from dnsscan.discovery.models import ResolutionResult
from dnsscan.discovery.utils.errors import ResolutionError


class HostResolver:
    """
    Resolves hostnames to host entries through the platform resolver.

    The lookup runs on an executor thread; pass a ThreadPoolExecutor to
    control where, or None for the loop's default executor.
    """

    def __init__(self, lookup=socket.gethostbyname_ex, executor=None):
        self.lookup = lookup
        self.executor = executor

    async def resolve(self, hostname: str) -> ResolutionResult:
        """Single host-entry lookup, never retried"""
        logger.debug("Resolving {}", hostname)
        loop = asyncio.get_running_loop()

        start_dns = time.time()
        try:
            canonical_name, aliases, addresses = await loop.run_in_executor(
                self.executor, self.lookup, hostname)
        except (OSError, ValueError) as e:
            # ValueError covers names the IDNA codec rejects (empty or oversized labels)
            logger.debug("DNS lookup failed for {}: {}", hostname, e)
            return ResolutionResult.failure(hostname, ResolutionError.from_os_error(e))

        dns_duration = time.time() - start_dns
        logger.debug("Resolved {} -> {} ({} addresses, took {:.2f}s)",
                     hostname, canonical_name, len(addresses), dns_duration)
        return ResolutionResult.success(hostname, canonical_name, aliases, addresses)
