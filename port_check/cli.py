from __future__ import annotations

import argparse
import re
from dataclasses import dataclass
from typing import NoReturn, Optional

from port_check.config import DEFAULT_TIMEOUT_SECONDS, MAX_TIMEOUT_SECONDS
from port_check.errors import UsageError

_DIGITS_RE = re.compile(r"[0-9]+")
MAX_PORT = 65535

EXAMPLES = """\
examples:
  %(prog)s google.com 80
  %(prog)s google.com 443 --timeout 10
  %(prog)s localhost 22 --timeout 1
  %(prog)s 192.168.1.1 3389 --timeout 15
"""


@dataclass(frozen=True)
class CheckRequest:
    hostname: str
    port: int
    timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS


class _UsageRaisingParser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


class _StoreOnce(argparse.Action):
    def __call__(self, parser, namespace, values, option_string=None):
        if getattr(namespace, self.dest) is not None:
            raise argparse.ArgumentError(self, "may only be given once")
        setattr(namespace, self.dest, values)


def parse_port(value: str) -> int:
    if _DIGITS_RE.fullmatch(value) is None or not 1 <= int(value) <= MAX_PORT:
        raise argparse.ArgumentTypeError(f"Invalid port number '{value}' (expected 1-{MAX_PORT})")
    return int(value)


def parse_timeout(value: str) -> int:
    if _DIGITS_RE.fullmatch(value) is None or not 1 <= int(value) <= MAX_TIMEOUT_SECONDS:
        raise argparse.ArgumentTypeError(f"Timeout must be a positive number, got '{value}'")
    return int(value)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = _UsageRaisingParser(
        prog="port-check",
        usage="%(prog)s <hostname> <port> [--timeout <seconds>] [--config <path>] [-v]",
        description="Check whether a TCP port on a host accepts connections within a timeout.",
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )
    parser.add_argument("hostname", metavar="<hostname>", help="The hostname or IP address to check")
    parser.add_argument("port", metavar="<port>", type=parse_port, help="The TCP port number to test")
    parser.add_argument(
        "--timeout",
        metavar="<seconds>",
        type=parse_timeout,
        action=_StoreOnce,
        default=None,
        help=f"Connection timeout in seconds, per address (default: {DEFAULT_TIMEOUT_SECONDS})",
    )
    parser.add_argument("--config", metavar="<path>", help="YAML/JSON file with default settings.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log each connection attempt to stderr.")
    return parser


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    return build_arg_parser().parse_args(argv)


def build_request(args: argparse.Namespace, default_timeout: Optional[int] = None) -> CheckRequest:
    timeout = args.timeout
    if timeout is None:
        timeout = default_timeout or DEFAULT_TIMEOUT_SECONDS
    return CheckRequest(hostname=args.hostname, port=args.port, timeout_seconds=timeout)


def usage_text() -> str:
    return build_arg_parser().format_help()
