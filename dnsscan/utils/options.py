"""
Command line value parsing for the scanner.
"""
import re
import string
from typing import List, Optional

from loguru import logger

from dnsscan.discovery.models import MAX_PORT, MIN_PORT, FormatOptions
from dnsscan.discovery.utils.errors import ConfigurationError

MAX_BOUND = 2 ** 31 - 1
_INTEGER = re.compile(r"^[+]?\d{1,3}(?:[,_]?\d{3})*$|^[+]?\d+$")


class OptionParser:
    """
    Turns raw option strings into validated scan settings.

    Example:
        parser = OptionParser(FormatOptions())
        lower = parser.parse_bound("lower", "10")
        ports = parser.parse_ports("22,80")
    """

    def __init__(self, format_options: FormatOptions = FormatOptions()):
        self.format_options = format_options

    def parse_bound(self, option: str, value: str) -> int:
        """
        Parse a host index bound.

        Surrounding whitespace and digit grouping ("1,000", "1_000") are
        accepted.

        Raises:
            ConfigurationError: value is not an integer in [0, 2**31 - 1]
        """
        text = value.strip()
        if not _INTEGER.match(text) or int(text.replace(",", "").replace("_", "")) > MAX_BOUND:
            raise ConfigurationError(option, value,
                                     "Specified value could not be parsed as a non-negative 32-bit integer value.")
        return int(text.replace(",", "").replace("_", ""))

    def check_bounds(self, lower: int, upper: int, upper_value: Optional[str] = None):
        if upper < lower:
            raise ConfigurationError(
                "upper", upper_value if upper_value is not None else str(upper),
                f"Specified value is less than {lower}, the value used for the lower inclusive bound.",
                exit_code=-2)

    def parse_hostname_format(self, value: str) -> str:
        """
        Check that the template has exactly one placeholder and renders with one integer.

        Raises:
            ConfigurationError: template is malformed or does not have exactly one placeholder
        """
        try:
            fields = [name for _, name, _, _ in string.Formatter().parse(value) if name is not None]
            value.format(0)
        except (ValueError, IndexError, KeyError, AttributeError) as e:
            raise ConfigurationError("format", value, f"Specified value is not a valid host format: {e}")

        if not fields:
            raise ConfigurationError("format", value, "Specified value contains no placeholder for the host number.")
        if len(fields) > 1:
            raise ConfigurationError("format", value,
                                     "Specified value contains more than one placeholder for the host number.")
        return value

    def parse_ports(self, value: str) -> List[int]:
        """
        Split a port list on the list separator.

        Entries that are not integers or fall outside the valid port range are
        reported and skipped. Duplicates keep their first position.

        Returns:
            Port numbers in the order given
        """
        ports = []
        for entry in value.split(self.format_options.list_separator):
            entry = entry.strip()
            if not entry:
                continue

            if not _INTEGER.match(entry):
                self._ignore(entry, "The specified value could not be parsed as a non-negative 32-bit integer value.")
                continue

            port = int(entry.replace(",", "").replace("_", ""))
            if port < MIN_PORT:
                self._ignore(entry, f"The specified value is less than the minimum allowed port value: {MIN_PORT}")
                continue
            if port > MAX_PORT:
                self._ignore(entry, f"The specified value is greater than the maximum allowed port value: {MAX_PORT}")
                continue

            if port not in ports:
                ports.append(port)

        logger.debug("Parsed {} TCP ports from '{}'", len(ports), value)
        return ports

    def _ignore(self, entry: str, reason: str):
        logger.warning("Invalid TCP port number specified: {}. {} The specified value will be ignored.", entry, reason)
