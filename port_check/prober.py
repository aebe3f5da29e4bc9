from __future__ import annotations

import logging
import socket
import time
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from port_check.logging_utils import LOGGER_NAME
from port_check.resolver import ResolvedAddress

ALL_ATTEMPTS_FAILED = "All connection attempts failed"


@dataclass(frozen=True)
class CheckOutcome:
    succeeded_address: Optional[ResolvedAddress] = None
    failure_reason: Optional[str] = None

    def __post_init__(self) -> None:
        if (self.succeeded_address is None) == (self.failure_reason is None):
            raise ValueError("CheckOutcome needs exactly one of succeeded_address or failure_reason")

    @property
    def ok(self) -> bool:
        return self.succeeded_address is not None


def connect_once(address: ResolvedAddress, timeout_seconds: float) -> None:
    """Open a TCP connection to `address` and close it straight away."""
    with socket.socket(address.family, socket.SOCK_STREAM) as sock:
        sock.settimeout(timeout_seconds)
        sock.connect(address.connect_target())


def probe_addresses(
    addresses: Sequence[ResolvedAddress],
    timeout_seconds: float,
    *,
    logger: Optional[logging.Logger] = None,
    connect: Callable[[ResolvedAddress, float], None] = connect_once,
) -> CheckOutcome:
    """
    Try each address in order until one accepts a TCP connection.

    The timeout bounds every attempt separately, so the worst case is
    timeout_seconds * len(addresses). A failed address is never retried; the
    reason reported on overall failure comes from the last attempt.
    """
    log = logger or logging.getLogger(LOGGER_NAME)
    for index, address in enumerate(addresses):
        started = time.monotonic()
        log.debug(
            "Connect attempt %s/%s address=%s port=%s timeout_seconds=%s",
            index + 1,
            len(addresses),
            address.ip,
            address.port,
            timeout_seconds,
        )
        try:
            connect(address, timeout_seconds)
        except OSError as exc:
            log.debug(
                "Connect failed address=%s error=%s elapsed_seconds=%.2f",
                address.ip,
                exc,
                time.monotonic() - started,
            )
            if index == len(addresses) - 1:
                return CheckOutcome(failure_reason=f"port closed or unreachable ({exc})")
            continue

        log.debug("Connect succeeded address=%s elapsed_seconds=%.2f", address.ip, time.monotonic() - started)
        return CheckOutcome(succeeded_address=address)

    return CheckOutcome(failure_reason=ALL_ATTEMPTS_FAILED)
