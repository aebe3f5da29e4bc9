from __future__ import annotations

import logging
import socket
from dataclasses import dataclass
from typing import Any, Optional

from port_check.errors import ResolutionError


@dataclass(frozen=True)
class ResolvedAddress:
    ip: str
    port: int
    family: int = socket.AF_INET
    # full getaddrinfo sockaddr; IPv6 entries also carry flowinfo and scope id
    sockaddr: tuple[Any, ...] = ()

    def connect_target(self) -> tuple[Any, ...]:
        return self.sockaddr or (self.ip, self.port)

    def __str__(self) -> str:
        return self.ip


def resolve_addresses(
    hostname: str,
    port: int,
    *,
    logger: Optional[logging.Logger] = None,
) -> list[ResolvedAddress]:
    """
    Resolve `hostname` to every stream-socket address for `port`.

    Order is whatever the system resolver returns; the first entry is the primary
    address used in status output.
    """
    try:
        infos = socket.getaddrinfo(hostname, port, type=socket.SOCK_STREAM)
    except (OSError, UnicodeError) as exc:
        raise ResolutionError(hostname, f"Failed to resolve hostname '{hostname}': {exc}") from exc

    addresses = [
        ResolvedAddress(ip=sockaddr[0], port=sockaddr[1], family=family, sockaddr=tuple(sockaddr))
        for family, _type, _proto, _canonname, sockaddr in infos
    ]
    if not addresses:
        raise ResolutionError(hostname, f"No addresses found for hostname '{hostname}'")

    if logger is not None:
        logger.debug(
            "Resolved hostname=%s port=%s addresses=%s",
            hostname,
            port,
            ", ".join(a.ip for a in addresses),
        )
    return addresses
