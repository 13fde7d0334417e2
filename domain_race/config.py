#!/usr/bin/env python3
"""
Checker configuration.

All tunables for one checker chain live in CheckerConfig. Defaults match the
classic behaviour (1s fan-out, 3000 byte threshold, "No match" marker) and
every field can be overridden from the environment.

Environment Variables:
    DOMAIN_RACE_SERVERS: Comma-separated WHOIS server hostnames
    DOMAIN_RACE_TAKEN_THRESHOLD: Response length above which a reply counts as a record
    DOMAIN_RACE_NOT_FOUND_MARKER: Text that marks a "not registered" reply
    DOMAIN_RACE_FANOUT_TIMEOUT: Seconds to wait for the first conclusive reply
    DOMAIN_RACE_CONNECT_TIMEOUT: Per-connection deadline (clamped to the fan-out timeout)
    DOMAIN_RACE_WHOIS_PORT: WHOIS port
    DOMAIN_RACE_DNS: Enable the nslookup probe (1/0)
    DOMAIN_RACE_DNS_COMMAND: Resolver utility to run
    DOMAIN_RACE_DNS_MARKER: Resolver output that means the name resolves
    DOMAIN_RACE_DNS_TIMEOUT: Seconds before the resolver is abandoned
    DOMAIN_RACE_RDAP: Enable the RDAP source (1/0)
    DOMAIN_RACE_RDAP_TIMEOUT: RDAP request timeout in seconds
"""

import math
import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from .errors import ConfigError
from .servers import DEFAULT_SERVERS

# any more than this means it's probably a real whois record
TAKEN_THRESHOLD = 3000
NOT_FOUND_MARKER = "No match"
FANOUT_TIMEOUT = 1.0
WHOIS_PORT = 43

DNS_COMMAND = "nslookup"
DNS_MARKER = "Non-authoritative answer"
DNS_TIMEOUT = 5.0

RDAP_TIMEOUT = 10.0

_ENV_PREFIX = "DOMAIN_RACE_"
_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class CheckerConfig:
    """Configuration for a checker chain."""
    # WHOIS fan-out
    servers: tuple[str, ...] = DEFAULT_SERVERS
    taken_threshold: int = TAKEN_THRESHOLD
    not_found_marker: str = NOT_FOUND_MARKER
    fanout_timeout: float = FANOUT_TIMEOUT
    connect_timeout: Optional[float] = None  # None: same as fanout_timeout
    whois_port: int = WHOIS_PORT

    # DNS probe
    dns_enabled: bool = True
    dns_command: str = DNS_COMMAND
    dns_marker: str = DNS_MARKER
    dns_timeout: float = DNS_TIMEOUT

    # RDAP (opt-in)
    rdap_enabled: bool = False
    rdap_timeout: float = RDAP_TIMEOUT

    def __post_init__(self):
        # Lists are accepted but stored as tuples so the inventory stays read-only
        object.__setattr__(self, "servers", tuple(self.servers))

        if self.taken_threshold < 0:
            raise ConfigError(f"taken_threshold must be >= 0, got {self.taken_threshold}")
        _check_duration("fanout_timeout", self.fanout_timeout)
        if self.connect_timeout is not None:
            _check_duration("connect_timeout", self.connect_timeout)
        if not 0 < self.whois_port < 65536:
            raise ConfigError(f"whois_port out of range: {self.whois_port}")
        _check_duration("dns_timeout", self.dns_timeout)
        _check_duration("rdap_timeout", self.rdap_timeout)

    @property
    def connection_deadline(self) -> float:
        """Per-connection deadline, never looser than the fan-out timeout."""
        if self.connect_timeout is None:
            return self.fanout_timeout
        return min(self.connect_timeout, self.fanout_timeout)

    def with_overrides(self, **changes) -> "CheckerConfig":
        """Copy with the given fields replaced; None values are ignored."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "CheckerConfig":
        """Build a config from DOMAIN_RACE_* environment variables."""
        env = os.environ if environ is None else environ
        values = {}

        servers = _get(env, "SERVERS")
        if servers is not None:
            values["servers"] = tuple(s.strip() for s in servers.split(",") if s.strip())

        for field_name, key, parse in (
            ("taken_threshold", "TAKEN_THRESHOLD", _parse_int),
            ("not_found_marker", "NOT_FOUND_MARKER", _parse_str),
            ("fanout_timeout", "FANOUT_TIMEOUT", _parse_float),
            ("connect_timeout", "CONNECT_TIMEOUT", _parse_float),
            ("whois_port", "WHOIS_PORT", _parse_int),
            ("dns_enabled", "DNS", _parse_bool),
            ("dns_command", "DNS_COMMAND", _parse_str),
            ("dns_marker", "DNS_MARKER", _parse_str),
            ("dns_timeout", "DNS_TIMEOUT", _parse_float),
            ("rdap_enabled", "RDAP", _parse_bool),
            ("rdap_timeout", "RDAP_TIMEOUT", _parse_float),
        ):
            raw = _get(env, key)
            if raw is not None:
                values[field_name] = parse(_ENV_PREFIX + key, raw)

        return cls(**values)


def _check_duration(name: str, value: float):
    if not math.isfinite(value) or value <= 0:
        raise ConfigError(f"{name} must be a finite number > 0, got {value}")


def _get(env: Mapping[str, str], key: str) -> Optional[str]:
    return env.get(_ENV_PREFIX + key)


def _parse_int(name: str, raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name}: expected an integer, got {raw!r}") from None


def _parse_float(name: str, raw: str) -> float:
    try:
        return float(raw)
    except ValueError:
        raise ConfigError(f"{name}: expected a number, got {raw!r}") from None


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ConfigError(f"{name}: expected a boolean, got {raw!r}")


def _parse_str(name: str, raw: str) -> str:
    if not raw:
        raise ConfigError(f"{name}: must not be empty")
    return raw
