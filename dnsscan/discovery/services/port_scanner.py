import asyncio
import errno
import os

from loguru import logger

from dnsscan.discovery.models import PortProbeResult
from dnsscan.discovery.utils.errors import PortConnectionError


class PortScanner:
    """Single-attempt TCP connect probes"""

    async def probe(self, addresses, port: int) -> PortProbeResult:
        """
        Attempt one TCP connection to port on the first reachable address.

        Addresses are tried in order and the first established connection
        wins; when all of them fail the last error is reported. The
        connection is closed straight away without exchanging data.

        Args:
            addresses: Resolved addresses of the host, in resolver order
            port: TCP port number

        Returns:
            PortProbeResult with the captured error on failure
        """
        last_error = OSError(errno.EDESTADDRREQ, os.strerror(errno.EDESTADDRREQ))

        for address in addresses:
            try:
                await self._connect(str(address), port)
            except OSError as e:
                logger.debug("Connect to {}:{} failed: {}", address, port, e)
                last_error = e
                continue

            logger.debug("Port open: {}:{}", address, port)
            return PortProbeResult.opened(port)

        return PortProbeResult.failed(port, PortConnectionError.from_os_error(last_error))

    async def _connect(self, host: str, port: int):
        _, writer = await asyncio.open_connection(host, port)
        writer.close()
        try:
            await writer.wait_closed()
        except OSError as e:
            # The connection was established, a reset on close does not count
            logger.debug("Error closing probe connection to {}:{}: {}", host, port, e)
