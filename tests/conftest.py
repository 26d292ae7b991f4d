import asyncio
import socket

import pytest

from dnsscan.discovery.models import ResolutionResult
from dnsscan.discovery.services import HostResolver
from dnsscan.discovery.utils.errors import ResolutionError


class FakeLookup:
    """Stands in for socket.gethostbyname_ex with a fixed table of host entries."""

    def __init__(self, entries):
        self.entries = entries
        self.calls = []

    def __call__(self, hostname):
        self.calls.append(hostname)
        if hostname not in self.entries:
            raise socket.gaierror(socket.EAI_NONAME, "Name or service not known")
        canonical, aliases, addresses = self.entries[hostname]
        return canonical, list(aliases), list(addresses)


@pytest.fixture
def fake_lookup():
    return FakeLookup({
        "host0.example.com": ("host0.example.com", [], ["127.0.0.1"]),
        "host1.example.com": ("srv1.example.com", ["host1.example.com", "www1.example.com"], ["127.0.0.1"]),
        "host2.example.com": ("host2.example.com", [], ["127.0.0.1", "127.0.0.2"]),
    })


@pytest.fixture
def fake_resolver(fake_lookup):
    return HostResolver(lookup=fake_lookup)


@pytest.fixture
def open_port():
    listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    listener.bind(("127.0.0.1", 0))
    listener.listen(16)
    yield listener.getsockname()[1]
    listener.close()


@pytest.fixture
def closed_port():
    s = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    s.bind(("127.0.0.1", 0))
    port = s.getsockname()[1]
    s.close()
    return port


class GatedResolver:
    """Resolves every host, holding selected hosts until their gate opens."""

    def __init__(self, gated=(), broken=()):
        self.gates = {hostname: asyncio.Event() for hostname in gated}
        self.broken = set(broken)
        self.cancelled = []

    async def resolve(self, hostname):
        try:
            if hostname in self.gates:
                await self.gates[hostname].wait()
        except asyncio.CancelledError:
            self.cancelled.append(hostname)
            raise
        if hostname in self.broken:
            raise RuntimeError(f"resolver crashed on {hostname}")
        if hostname.startswith("bad"):
            return ResolutionResult.failure(hostname, ResolutionError("EAI_NONAME", "Name or service not known"))
        return ResolutionResult.success(hostname, hostname, (), ["127.0.0.1"])


@pytest.fixture
def gated_resolver():
    # Instances must be created inside the running event loop
    return GatedResolver
