#!/usr/bin/env python3
"""
RDAP source.

RDAP answers with plain HTTP status codes, so no response parsing is needed:
200 means the registry holds a record, 404 means it does not.
Only TLDs with a known registry endpoint are checked.
"""

import logging
from typing import Optional

import httpx

from .config import RDAP_TIMEOUT, CheckerConfig

logger = logging.getLogger(__name__)

# RDAP endpoints for common TLDs
RDAP_ENDPOINTS = {
    "com": "https://rdap.verisign.com/com/v1/domain/",
    "net": "https://rdap.verisign.com/net/v1/domain/",
    "org": "https://rdap.publicinterestregistry.org/rdap/domain/",
    "io": "https://rdap.nic.io/domain/",
    "co": "https://rdap.nic.co/domain/",
}


class RDAPChecker:
    """Asks the TLD's RDAP service whether a domain is registered."""

    def __init__(
        self,
        endpoints: Optional[dict[str, str]] = None,
        timeout: float = RDAP_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.endpoints = dict(RDAP_ENDPOINTS if endpoints is None else endpoints)
        self.timeout = timeout
        self.transport = transport

    @classmethod
    def from_config(cls, config: CheckerConfig) -> "RDAPChecker":
        return cls(timeout=config.rdap_timeout)

    def url_for(self, domain: str) -> Optional[str]:
        tld = domain.rstrip(".").rsplit(".", 1)[-1].lower()
        base_url = self.endpoints.get(tld)
        if not base_url:
            return None
        return f"{base_url}{domain}"

    async def is_taken(self, domain: str) -> bool:
        url = self.url_for(domain)
        if url is None:
            logger.debug("rdap: no endpoint for %s", domain)
            return False

        try:
            async with httpx.AsyncClient(transport=self.transport, timeout=self.timeout) as client:
                response = await client.get(url)
        except httpx.TimeoutException:
            logger.debug("rdap: timeout for %s", domain)
            return False
        except httpx.HTTPError as e:
            logger.debug("rdap: %s for %s", e, domain)
            return False

        if response.status_code == 200:
            return True
        if response.status_code != 404:
            logger.debug("rdap: HTTP %d for %s", response.status_code, domain)
        return False
