"""
Hostname range scanner: resolves numbered hostnames and probes their TCP ports.
"""

__version__ = "1.0.0"
