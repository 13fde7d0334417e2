#!/usr/bin/env python3
"""
DNS probe via the system resolver utility.

Runs `nslookup <domain>` and looks for the answer marker in its combined
output. A name that resolves is registered. Any failure to run the resolver
counts as "not taken".
"""

import asyncio
import logging
from typing import Optional

from .config import DNS_COMMAND, DNS_MARKER, DNS_TIMEOUT
from .errors import ResolutionError

logger = logging.getLogger(__name__)


async def nslookup(
    domain: str,
    command: str = DNS_COMMAND,
    timeout: Optional[float] = DNS_TIMEOUT
) -> bytes:
    """Run the resolver and return stdout+stderr. Raises ResolutionError."""
    try:
        proc = await asyncio.create_subprocess_exec(
            command, domain,
            stdin=asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.STDOUT
        )
    except OSError as e:
        raise ResolutionError(f"cannot run {command}: {e}") from e

    try:
        output, _ = await asyncio.wait_for(proc.communicate(), timeout=timeout)
    except asyncio.TimeoutError:
        raise ResolutionError(f"{command} {domain}: timed out after {timeout}s") from None
    finally:
        if proc.returncode is None:
            try:
                proc.kill()
            except ProcessLookupError:
                pass
            await proc.wait()

    if proc.returncode != 0:
        raise ResolutionError(f"{command} {domain}: exit status {proc.returncode}")
    return output


async def nslookup_taken(
    domain: str,
    command: str = DNS_COMMAND,
    marker: str = DNS_MARKER,
    timeout: Optional[float] = DNS_TIMEOUT
) -> bool:
    """True if the resolver output carries the answer marker."""
    try:
        output = await nslookup(domain, command=command, timeout=timeout)
    except ResolutionError as e:
        logger.debug("dns probe failed: %s", e)
        return False

    found = marker.encode() in output
    logger.debug("dns probe for %s: %s", domain, "answer" if found else "no answer")
    return found
