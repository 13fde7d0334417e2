#!/usr/bin/env python3
"""
Error taxonomy for domain checks.

None of these reach callers of is_taken(): every source swallows its own
errors and answers "not taken". They exist so diagnostics can tell a refused
connection from a slow reader from a registry that said "No match".
"""


class DomainRaceError(Exception):
    """Base class for all domain_race errors."""


class ConfigError(DomainRaceError):
    """Invalid configuration value."""


class WhoisError(DomainRaceError):
    """A single WHOIS server gave no conclusive answer."""

    def __init__(self, server: str, detail: str = ""):
        self.server = server
        self.detail = detail
        super().__init__(f"{server}: {detail}" if detail else server)


class ConnectError(WhoisError):
    """Connection refused, unreachable, or connect deadline exceeded."""


class WriteError(WhoisError):
    """Sending the query line failed."""


class ReadError(WhoisError):
    """Reading the response failed or the read deadline was exceeded."""


class Inconclusive(WhoisError):
    """Server answered, but the response does not look like a registration."""


class ResolutionError(DomainRaceError):
    """The system resolver could not be invoked or failed."""
