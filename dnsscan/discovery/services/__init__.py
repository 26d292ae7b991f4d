from .host_resolver import HostResolver
from .port_scanner import PortScanner
from .host_scanner import HostScanner
from .initiator import ScanOrchestrator, generate_targets
from .formatter import ResultFormatter

__all__ = [
    'HostResolver',
    'PortScanner',
    'HostScanner',
    'ScanOrchestrator',
    'generate_targets',
    'ResultFormatter'
]
