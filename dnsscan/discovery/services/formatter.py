from typing import List

from dnsscan.discovery.models import FormatOptions, HostOutcome, ScanConfig


class ResultFormatter:
    """
    Renders host outcomes as output lines.

    Example:
        formatter = ResultFormatter(FormatOptions(list_separator=";"))
        for line in formatter.format(outcome, config):
            print(line)
    """

    def __init__(self, options: FormatOptions = FormatOptions()):
        self.options = options

    def format(self, outcome: HostOutcome, config: ScanConfig) -> List[str]:
        """
        Render one outcome.

        Failed lookups are only shown with show_failures. A resolved host
        gets a success line unless require_ports is set and a port failed.
        Per-port failure lines depend on show_failures alone, so they are
        emitted even for a host whose success line was dropped.

        Returns:
            Zero or more lines, without trailing newlines
        """
        resolution = outcome.resolution
        if not resolution.succeeded:
            if not config.show_failures:
                return []
            error = resolution.error
            return [f"{resolution.requested_hostname}: Socket error: {error.code}, {error.message}"]

        lines = []
        if self.should_report(outcome, config):
            lines.append(self.success_line(outcome, config))

        if config.show_failures:
            for result in outcome.failed_ports:
                lines.append(f"\tUnable to connect to port {result.port}: "
                             f"Socket error: {result.error.code}: {result.error.message}")
        return lines

    def should_report(self, outcome: HostOutcome, config: ScanConfig) -> bool:
        if not outcome.resolution.succeeded:
            return False
        return not config.require_ports or outcome.all_ports_open

    def success_line(self, outcome: HostOutcome, config: ScanConfig) -> str:
        resolution = outcome.resolution
        joiner = self.options.joiner
        line = resolution.canonical_name

        aliases = self.visible_aliases(resolution.canonical_name, resolution.aliases)
        if not config.omit_aliases and aliases:
            line += ' ("{}")'.format('", "'.join(aliases))

        if not config.omit_addresses and resolution.addresses:
            line += ": " + joiner.join(str(a) for a in resolution.addresses)

        open_ports = outcome.open_ports
        if not config.omit_ports and open_ports:
            line += " TCP: " + joiner.join(str(p) for p in open_ports)

        return line

    @staticmethod
    def visible_aliases(canonical_name: str, aliases) -> List[str]:
        canonical = canonical_name.casefold()
        return [alias for alias in aliases if alias.casefold() != canonical]
