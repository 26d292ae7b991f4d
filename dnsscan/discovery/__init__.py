from .models import FormatOptions, HostOutcome, HostTarget, PortProbeResult, ResolutionResult, ScanConfig
from .scan import DnsRangeScanner

__all__ = [
    'FormatOptions',
    'HostOutcome',
    'HostTarget',
    'PortProbeResult',
    'ResolutionResult',
    'ScanConfig',
    'DnsRangeScanner'
]
