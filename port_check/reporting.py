from __future__ import annotations

import sys
from typing import Optional, TextIO

from port_check.cli import CheckRequest
from port_check.prober import CheckOutcome
from port_check.resolver import ResolvedAddress

EXIT_OK = 0
EXIT_FAILURE = 1


def checking_line(request: CheckRequest, primary: ResolvedAddress) -> str:
    return (
        f"Checking {request.hostname}:{request.port} ({primary.ip}) "
        f"(timeout: {request.timeout_seconds}s)"
    )


def outcome_line(request: CheckRequest, primary: ResolvedAddress, outcome: CheckOutcome) -> str:
    target = f"{request.hostname}:{request.port}"
    if outcome.succeeded_address is not None:
        return f"✓ Connection to {target} ({outcome.succeeded_address.ip}) succeeded - port is open"
    return f"✗ Connection to {target} ({primary.ip}) failed - {outcome.failure_reason}"


def print_checking(request: CheckRequest, primary: ResolvedAddress, out: Optional[TextIO] = None) -> None:
    print(checking_line(request, primary), file=out or sys.stdout, flush=True)


def report_outcome(
    request: CheckRequest,
    primary: ResolvedAddress,
    outcome: CheckOutcome,
    out: Optional[TextIO] = None,
) -> int:
    print(outcome_line(request, primary, outcome), file=out or sys.stdout)
    return EXIT_OK if outcome.ok else EXIT_FAILURE


def report_fatal(message: str, err: Optional[TextIO] = None) -> int:
    print(f"✗ {message}", file=err or sys.stderr)
    return EXIT_FAILURE
