# Domain Race - Core Components
from .config import CheckerConfig
from .dns_probe import nslookup, nslookup_taken
from .errors import (
    ConfigError,
    ConnectError,
    DomainRaceError,
    Inconclusive,
    ReadError,
    ResolutionError,
    WhoisError,
    WriteError,
)
from .multi_checker import Checker, CheckerFunc, MultiChecker, is_taken, new_checker
from .rdap_checker import RDAPChecker
from .servers import DEFAULT_SERVERS
from .whois_checker import RaceResult, WHOISChecker, looks_taken
from .whois_client import whois

__all__ = [
    'CheckerConfig',
    'DEFAULT_SERVERS',
    'WHOISChecker',
    'RaceResult',
    'looks_taken',
    'whois',
    'nslookup',
    'nslookup_taken',
    'RDAPChecker',
    'Checker',
    'CheckerFunc',
    'MultiChecker',
    'new_checker',
    'is_taken',
    'DomainRaceError',
    'ConfigError',
    'WhoisError',
    'ConnectError',
    'WriteError',
    'ReadError',
    'Inconclusive',
    'ResolutionError',
]
