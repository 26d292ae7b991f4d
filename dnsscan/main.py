"""CLI entrypoint for hostname range scans."""

import argparse
import sys

from loguru import logger

from dnsscan import __version__
from dnsscan.discovery.models import FormatOptions, ScanConfig
from dnsscan.discovery.scan import DnsRangeScanner
from dnsscan.discovery.utils.errors import ConfigurationError
from dnsscan.discovery.utils.logger import configure_logging
from dnsscan.utils.options import OptionParser

HOST_FORMAT_DEFAULT = "ifilab{0}.stud.cs.uit.no"
HOST_LOWER_DEFAULT = 0
HOST_UPPER_DEFAULT = 255


def parse_args(argv=None):
    p = argparse.ArgumentParser(prog="dnsscan",
                                description="Resolves a numbered range of hostnames and probes their TCP ports")
    p.add_argument("-v", "--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("-f", "--format", metavar="HOSTFORMAT", default=HOST_FORMAT_DEFAULT,
                   help="Python format string for the hostnames to lookup. Default: " + HOST_FORMAT_DEFAULT)
    p.add_argument("-l", "--lower", metavar="LOWER", default=str(HOST_LOWER_DEFAULT),
                   help=f"Lower inclusive integer bound to apply to the host format. Default: {HOST_LOWER_DEFAULT}")
    p.add_argument("-u", "--upper", metavar="UPPER", default=str(HOST_UPPER_DEFAULT),
                   help=f"Upper exclusive integer bound to apply to the host format. Default: {HOST_UPPER_DEFAULT}")
    p.add_argument("-t", "--tcp", metavar="PORTS",
                   help="A list of TCP port numbers to attempt to open a TCP connection to, "
                        "separated by the list separator")
    p.add_argument("--tcp-reqd", action="store_true",
                   help="Causes hosts that do not listen on all specified ports to be classified as failures")
    p.add_argument("--show-failures", action="store_true",
                   help="Also includes failed lookups and connection attempts in the output")
    p.add_argument("--no-alias", action="store_true", help="Omits the host aliases in the output")
    p.add_argument("--no-address", action="store_true", help="Omits the host IP address list in the output")
    p.add_argument("--no-port", action="store_true", help="Omits the host's verified open TCP ports in the output")
    p.add_argument("--list-separator", metavar="SEP", default=",",
                   help="Separator used to split the port list and to join output lists. Default: ,")
    p.add_argument("--log-level", default="WARNING",
                   choices=["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"],
                   help="Log level for diagnostics written to stderr. Default: WARNING")
    return p.parse_args(argv)


def build_config(args, option_parser: OptionParser) -> ScanConfig:
    hostname_format = option_parser.parse_hostname_format(args.format)
    lower = option_parser.parse_bound("lower", args.lower)
    upper = option_parser.parse_bound("upper", args.upper)
    option_parser.check_bounds(lower, upper, args.upper)
    ports = option_parser.parse_ports(args.tcp) if args.tcp else []

    return ScanConfig(
        hostname_format=hostname_format,
        lower_bound=lower,
        upper_bound=upper,
        ports=ports,
        require_ports=args.tcp_reqd,
        show_failures=args.show_failures,
        omit_aliases=args.no_alias,
        omit_addresses=args.no_address,
        omit_ports=args.no_port,
    )


def main(argv=None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level)

    format_options = FormatOptions(list_separator=args.list_separator)
    try:
        config = build_config(args, OptionParser(format_options))
    except ConfigurationError as e:
        print(f"Invalid option value for option '{e.option}': {e.value}", file=sys.stderr)
        print(f"\t{e.reason}", file=sys.stderr)
        return e.exit_code

    logger.info("Scanning {} for indices {} to {}", config.hostname_format, config.lower_bound, config.upper_bound)
    scanner = DnsRangeScanner(config, format_options)
    scanner.run_scan()
    return 0


if __name__ == "__main__":
    sys.exit(main())
