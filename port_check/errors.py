from __future__ import annotations


class PortCheckError(Exception):
    pass


class UsageError(PortCheckError):
    """Malformed command-line invocation."""


class ResolutionError(PortCheckError):
    def __init__(self, hostname: str, message: str):
        super().__init__(message)
        self.hostname = hostname
