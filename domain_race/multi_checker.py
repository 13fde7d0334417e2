#!/usr/bin/env python3
"""
Composite checker.

Sources are asked in registration order and the first one that says "taken"
wins; later sources are never invoked. A domain is available only when every
source says so.

Default chain (new_checker):
1. DNS probe (cheap, answers for anything that resolves)
2. WHOIS fan-out
3. RDAP, when enabled
"""

import asyncio
import functools
import inspect
import logging
from typing import Awaitable, Callable, Iterable, Optional, Protocol, Union

from .config import CheckerConfig
from .dns_probe import nslookup_taken
from .rdap_checker import RDAPChecker
from .whois_checker import WHOISChecker

logger = logging.getLogger(__name__)

Predicate = Callable[[str], Union[bool, Awaitable[bool]]]


class Checker(Protocol):
    """Anything that can tell whether a domain is taken."""

    async def is_taken(self, domain: str) -> bool:
        ...


class CheckerFunc:
    """Adapts a plain or async predicate function to the Checker interface."""

    def __init__(self, fn: Predicate):
        self.fn = fn

    async def is_taken(self, domain: str) -> bool:
        result = self.fn(domain)
        if inspect.isawaitable(result):
            result = await result
        return bool(result)

    def __repr__(self) -> str:
        name = getattr(self.fn, "__name__", None) or repr(self.fn)
        return f"CheckerFunc({name})"


class MultiChecker:
    """Short-circuiting OR over an ordered list of checkers."""

    def __init__(self, checkers: Iterable[Checker] = ()):
        self.checkers: list[Checker] = list(checkers)

    def add_checker(self, checker: Checker):
        self.checkers.append(checker)

    def add_func(self, fn: Predicate):
        self.checkers.append(CheckerFunc(fn))

    async def is_taken(self, domain: str) -> bool:
        for checker in self.checkers:
            if await checker.is_taken(domain):
                logger.debug("%s: taken according to %r", domain, checker)
                return True
        return False

    def __len__(self) -> int:
        return len(self.checkers)


def new_checker(config: Optional[CheckerConfig] = None) -> MultiChecker:
    """Build the standard checker chain from a config."""
    config = config or CheckerConfig()
    m = MultiChecker()

    if config.dns_enabled:
        m.add_func(functools.partial(
            nslookup_taken,
            command=config.dns_command,
            marker=config.dns_marker,
            timeout=config.dns_timeout
        ))

    m.add_checker(WHOISChecker.from_config(config))

    if config.rdap_enabled:
        m.add_checker(RDAPChecker.from_config(config))

    return m


def is_taken(domain: str, config: Optional[CheckerConfig] = None) -> bool:
    """Blocking entry point: run the standard chain on a fresh event loop."""
    return asyncio.run(new_checker(config).is_taken(domain))
