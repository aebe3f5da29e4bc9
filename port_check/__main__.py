from __future__ import annotations

import sys
from typing import Optional

from port_check.cli import build_request, parse_args, usage_text
from port_check.config import AppConfig, ConfigError, load_config
from port_check.errors import ResolutionError, UsageError
from port_check.logging_utils import build_logger
from port_check.prober import probe_addresses
from port_check.reporting import EXIT_FAILURE, print_checking, report_fatal, report_outcome
from port_check.resolver import resolve_addresses


def main(argv: Optional[list[str]] = None) -> int:
    try:
        args = parse_args(argv)
    except UsageError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        print(file=sys.stderr)
        print(usage_text(), file=sys.stderr, end="")
        return EXIT_FAILURE

    try:
        cfg = load_config(args.config) if args.config else AppConfig()
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_FAILURE

    level = "DEBUG" if args.verbose else cfg.logging.level
    try:
        logger = build_logger(level, cfg.logging.file)
    except OSError as exc:
        print(f"Error: Could not open log file {cfg.logging.file}: {exc}", file=sys.stderr)
        return EXIT_FAILURE
    request = build_request(args, cfg.timeout_seconds)
    logger.debug(
        "Starting check hostname=%s port=%s timeout_seconds=%s config=%s",
        request.hostname,
        request.port,
        request.timeout_seconds,
        args.config or "<none>",
    )

    try:
        addresses = resolve_addresses(request.hostname, request.port, logger=logger)
    except ResolutionError as exc:
        logger.debug("Resolution failed hostname=%s error=%s", exc.hostname, exc)
        return report_fatal(str(exc))

    primary = addresses[0]
    print_checking(request, primary)
    outcome = probe_addresses(addresses, request.timeout_seconds, logger=logger)
    return report_outcome(request, primary, outcome)


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
