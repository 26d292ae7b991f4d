"""
Data model for hostname range scans.

All result objects are frozen; they are created once by the service that
owns them and passed along unchanged.
"""
from dataclasses import dataclass
from typing import Optional, Tuple

from netaddr import IPAddress

from dnsscan.discovery.utils.errors import PortConnectionError, ResolutionError

MIN_PORT = 1
MAX_PORT = 65535


@dataclass(frozen=True)
class HostTarget:
    index: int
    hostname: str


@dataclass(frozen=True)
class ResolutionResult:
    """
    Outcome of one host-entry lookup.

    Either the canonical name, aliases and addresses are set, or error is.
    Use success() / failure() rather than building instances directly.
    """
    requested_hostname: str
    canonical_name: Optional[str] = None
    aliases: Tuple[str, ...] = ()
    addresses: Tuple[IPAddress, ...] = ()
    error: Optional[ResolutionError] = None

    def __post_init__(self):
        if self.error is not None:
            if self.canonical_name is not None or self.aliases or self.addresses:
                raise ValueError("failed resolution must not carry host entry data")
        elif self.canonical_name is None:
            raise ValueError("successful resolution requires a canonical name")

    @classmethod
    def success(cls, requested_hostname: str, canonical_name: str, aliases=(), addresses=()):
        return cls(
            requested_hostname=requested_hostname,
            canonical_name=canonical_name,
            aliases=tuple(aliases),
            addresses=tuple(IPAddress(a) for a in addresses),
        )

    @classmethod
    def failure(cls, requested_hostname: str, error: ResolutionError):
        return cls(requested_hostname=requested_hostname, error=error)

    @property
    def succeeded(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class PortProbeResult:
    port: int
    error: Optional[PortConnectionError] = None

    @classmethod
    def opened(cls, port: int):
        return cls(port=port)

    @classmethod
    def failed(cls, port: int, error: PortConnectionError):
        return cls(port=port, error=error)

    @property
    def succeeded(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class HostOutcome:
    target: HostTarget
    resolution: ResolutionResult
    port_results: Tuple[PortProbeResult, ...] = ()

    @property
    def open_ports(self) -> Tuple[int, ...]:
        return tuple(r.port for r in self.port_results if r.succeeded)

    @property
    def failed_ports(self) -> Tuple[PortProbeResult, ...]:
        return tuple(r for r in self.port_results if not r.succeeded)

    @property
    def all_ports_open(self) -> bool:
        # Vacuously true when no ports were probed
        return all(r.succeeded for r in self.port_results)


@dataclass(frozen=True)
class ScanConfig:
    """
    Validated scan settings handed over by the command line layer.

    Args:
        hostname_format: str.format template with one integer placeholder
        lower_bound: First index, inclusive
        upper_bound: Last index, exclusive
        ports: TCP ports to probe on every resolved host, in probe order
        require_ports: Drop hosts that do not accept every port
        show_failures: Also report failed lookups and connection attempts
        omit_aliases / omit_addresses / omit_ports: Trim the success line
    """
    hostname_format: str
    lower_bound: int
    upper_bound: int
    ports: Tuple[int, ...] = ()
    require_ports: bool = False
    show_failures: bool = False
    omit_aliases: bool = False
    omit_addresses: bool = False
    omit_ports: bool = False

    def __post_init__(self):
        object.__setattr__(self, "ports", tuple(self.ports))
        if self.lower_bound < 0:
            raise ValueError("lower_bound must be non-negative")
        if self.upper_bound < self.lower_bound:
            raise ValueError("upper_bound must not be less than lower_bound")
        for port in self.ports:
            if not MIN_PORT <= port <= MAX_PORT:
                raise ValueError(f"port out of range: {port}")

    @property
    def host_count(self) -> int:
        return self.upper_bound - self.lower_bound

    def hostname_for(self, index: int) -> str:
        return self.hostname_format.format(index)


@dataclass(frozen=True)
class FormatOptions:
    """Explicit formatting settings; the list separator splits and joins lists."""
    list_separator: str = ","

    @property
    def joiner(self) -> str:
        return self.list_separator.strip() + " "


@dataclass
class ScanSummary:
    hosts_scanned: int = 0
    hosts_resolved: int = 0
    hosts_failed: int = 0
    hosts_reported: int = 0
    open_ports: int = 0
    duration_seconds: float = 0.0
