import pytest
from netaddr import IPAddress

from dnsscan.discovery.models import (HostOutcome, HostTarget, PortProbeResult, ResolutionResult,
                                      ScanConfig)
from dnsscan.discovery.utils.errors import PortConnectionError, ResolutionError


def test_resolution_success_converts_addresses():
    result = ResolutionResult.success("a", "a.example.com", ["b"], ["10.0.0.1", "::1"])
    assert result.succeeded
    assert result.addresses == (IPAddress("10.0.0.1"), IPAddress("::1"))
    assert result.aliases == ("b",)


def test_resolution_success_may_have_no_addresses():
    result = ResolutionResult.success("a", "a.example.com")
    assert result.succeeded
    assert result.addresses == ()


def test_resolution_failure_carries_no_host_entry():
    result = ResolutionResult.failure("a", ResolutionError("EAI_NONAME", "unknown"))
    assert not result.succeeded
    assert result.canonical_name is None
    assert result.aliases == ()
    assert result.addresses == ()


def test_resolution_rejects_mixed_state():
    with pytest.raises(ValueError):
        ResolutionResult("a", canonical_name="a", error=ResolutionError("EAI_NONAME", "unknown"))
    with pytest.raises(ValueError):
        ResolutionResult("a")


def test_host_outcome_port_helpers():
    failure = PortConnectionError("ECONNREFUSED", "Connection refused")
    outcome = HostOutcome(
        target=HostTarget(0, "a"),
        resolution=ResolutionResult.success("a", "a"),
        port_results=(PortProbeResult.opened(22), PortProbeResult.failed(80, failure)),
    )
    assert outcome.open_ports == (22,)
    assert outcome.failed_ports == (PortProbeResult.failed(80, failure),)
    assert not outcome.all_ports_open


def test_host_outcome_without_ports_counts_as_all_open():
    outcome = HostOutcome(target=HostTarget(0, "a"), resolution=ResolutionResult.success("a", "a"))
    assert outcome.all_ports_open


def test_scan_config_hostname_and_count():
    config = ScanConfig("host{0}.example.com", 3, 7, ports=[80])
    assert config.host_count == 4
    assert config.hostname_for(5) == "host5.example.com"
    assert config.ports == (80,)


@pytest.mark.parametrize("kwargs", [
    dict(lower_bound=-1, upper_bound=2),
    dict(lower_bound=5, upper_bound=2),
    dict(lower_bound=0, upper_bound=2, ports=[0]),
    dict(lower_bound=0, upper_bound=2, ports=[65536]),
])
def test_scan_config_rejects_invalid_values(kwargs):
    with pytest.raises(ValueError):
        ScanConfig("h{0}", **kwargs)
