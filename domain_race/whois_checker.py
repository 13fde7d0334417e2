#!/usr/bin/env python3
"""
WHOIS fan-out checker.

Races one query per server and takes the first reply that looks like a real
registration record. Replies are classified with a crude heuristic:

- Length: a registration record is long, a not-found notice is short
- Marker: any reply containing the not-found marker ("No match") is rejected

A round ends on the first conclusive reply or when the fan-out timeout
expires, whichever comes first. Stragglers are cancelled so their
connections are closed before the round returns.
"""

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Iterable, Optional

from .config import (
    FANOUT_TIMEOUT,
    NOT_FOUND_MARKER,
    TAKEN_THRESHOLD,
    WHOIS_PORT,
    CheckerConfig,
)
from .errors import DomainRaceError, Inconclusive
from .whois_client import whois

logger = logging.getLogger(__name__)

PROBE_DOMAIN = "hello.com"
PROBE_TIMEOUT = 10.0


def looks_taken(
    response: bytes,
    taken_threshold: int = TAKEN_THRESHOLD,
    not_found_marker: str = NOT_FOUND_MARKER
) -> bool:
    """True when a reply is long enough and free of the not-found marker."""
    if len(response) <= taken_threshold:
        return False
    return not_found_marker.encode() not in response


@dataclass
class RaceResult:
    """Outcome of one fan-out round."""
    domain: str
    payload: Optional[bytes] = None
    server: Optional[str] = None  # winner
    elapsed: float = 0.0
    errors: int = 0
    inconclusive: int = 0
    abandoned: int = 0

    @property
    def taken(self) -> bool:
        return self.payload is not None


class WHOISChecker:
    """Races a WHOIS query against every server in the inventory."""

    def __init__(
        self,
        servers: Iterable[str],
        taken_threshold: int = TAKEN_THRESHOLD,
        not_found_marker: str = NOT_FOUND_MARKER,
        fanout_timeout: float = FANOUT_TIMEOUT,
        connect_timeout: Optional[float] = None,
        port: int = WHOIS_PORT
    ):
        self.servers = tuple(servers)
        self.taken_threshold = taken_threshold
        self.not_found_marker = not_found_marker
        self.fanout_timeout = fanout_timeout
        # A connection may never outlive the round
        if connect_timeout is None:
            self.connect_timeout = fanout_timeout
        else:
            self.connect_timeout = min(connect_timeout, fanout_timeout)
        self.port = port

    @classmethod
    def from_config(cls, config: CheckerConfig) -> "WHOISChecker":
        return cls(
            config.servers,
            taken_threshold=config.taken_threshold,
            not_found_marker=config.not_found_marker,
            fanout_timeout=config.fanout_timeout,
            connect_timeout=config.connection_deadline,
            port=config.whois_port
        )

    def looks_taken(self, response: bytes) -> bool:
        return looks_taken(response, self.taken_threshold, self.not_found_marker)

    async def query(self, domain: str, server: str) -> bytes:
        """
        Query one server and return its reply if it is conclusive.

        Raises a WhoisError subclass on transport failure and Inconclusive
        when the reply does not look like a registration record.
        """
        response = await whois(domain, server, port=self.port, timeout=self.connect_timeout)
        if not self.looks_taken(response):
            raise Inconclusive(server, f"{len(response)} bytes")
        return response

    async def _attempt(self, domain: str, server: str, found: asyncio.Future) -> bytes:
        response = await self.query(domain, server)
        # First publisher wins; later ones are dropped instead of blocking
        if not found.done():
            found.set_result((server, response))
        return response

    async def race(self, domain: str) -> RaceResult:
        """Run one fan-out round for a domain."""
        loop = asyncio.get_running_loop()
        found = loop.create_future()
        result = RaceResult(domain)
        start = time.perf_counter()

        tasks = [
            asyncio.create_task(self._attempt(domain, server, found))
            for server in self.servers
        ]

        try:
            result.server, result.payload = await asyncio.wait_for(found, timeout=self.fanout_timeout)
        except asyncio.TimeoutError:
            logger.debug("no conclusive answer for %s within %.2fs", domain, self.fanout_timeout)
        finally:
            result.elapsed = time.perf_counter() - start
            await self._settle(tasks, result)

        if result.taken:
            logger.debug(
                "%s: %s answered first (%d bytes, %.3fs)",
                domain, result.server, len(result.payload), result.elapsed
            )
        return result

    async def _settle(self, tasks: list[asyncio.Task], result: RaceResult):
        """Cancel stragglers, wait for their connections to close, tally outcomes."""
        pending = [t for t in tasks if not t.done()]
        for task in pending:
            task.cancel()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)
        result.abandoned = len(pending)

        for task in tasks:
            if task.cancelled():
                continue
            exc = task.exception()
            if exc is None:
                continue
            if isinstance(exc, Inconclusive):
                result.inconclusive += 1
                logger.debug("inconclusive: %s", exc)
            elif isinstance(exc, DomainRaceError):
                result.errors += 1
                logger.debug("%s: %s", type(exc).__name__, exc)
            else:
                result.errors += 1
                logger.warning("unexpected error from WHOIS task: %r", exc)

    async def whois_any(self, domain: str) -> Optional[bytes]:
        """First conclusive reply from any server, or None."""
        return (await self.race(domain)).payload

    async def is_taken(self, domain: str) -> bool:
        return (await self.whois_any(domain)) is not None

    async def responding_servers(
        self,
        probe_domain: str = PROBE_DOMAIN,
        timeout: float = PROBE_TIMEOUT
    ) -> list[str]:
        """Servers in the inventory that answer at all within the timeout."""

        async def probe(server: str) -> bytes:
            return await asyncio.wait_for(
                whois(probe_domain, server, port=self.port, timeout=timeout),
                timeout=timeout
            )

        results = await asyncio.gather(
            *(probe(server) for server in self.servers),
            return_exceptions=True
        )

        responding = []
        for server, res in zip(self.servers, results):
            if isinstance(res, BaseException):
                logger.debug("%s not responding: %r", server, res)
            else:
                responding.append(server)
        return responding
