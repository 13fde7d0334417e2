#!/usr/bin/env python3
"""
WHOIS transport.

One query = one connection: WHOIS servers close the socket after answering,
so there is no reuse. The whole response is read until the peer closes.

Each stage (connect, write, read) gets its own deadline so a hanging server
cannot outlive the fan-out round that asked it.
"""

import asyncio
import logging
from typing import Optional

from .config import WHOIS_PORT
from .errors import ConnectError, ReadError, WriteError

logger = logging.getLogger(__name__)


def split_endpoint(server: str, default_port: int = WHOIS_PORT) -> tuple[str, int]:
    """
    Split "host" or "host:port" ("[v6addr]:port" for IPv6) into host and port.
    A bare IPv6 address keeps the default port.
    """
    if server.startswith("[") and "]" in server:
        host, _, rest = server[1:].partition("]")
        if rest.startswith(":") and rest[1:].isdigit():
            return host, int(rest[1:])
        return host, default_port

    if server.count(":") == 1:
        host, _, port = server.partition(":")
        if port.isdigit():
            return host, int(port)

    return server, default_port


async def whois(
    domain: str,
    server: str,
    port: int = WHOIS_PORT,
    timeout: Optional[float] = None
) -> bytes:
    """
    Query a single WHOIS server and return its raw response.

    Raises ConnectError, WriteError or ReadError; the connection is closed on
    every path, including cancellation.
    """
    host, port = split_endpoint(server, port)
    try:
        reader, writer = await asyncio.wait_for(
            asyncio.open_connection(host, port),
            timeout=timeout
        )
    except asyncio.TimeoutError:
        raise ConnectError(server, "connect timeout") from None
    except OSError as e:
        raise ConnectError(server, str(e)) from e

    finished = False
    try:
        # Send query
        query = f"{domain}\r\n"
        try:
            writer.write(query.encode())
            await asyncio.wait_for(writer.drain(), timeout=timeout)
        except asyncio.TimeoutError:
            raise WriteError(server, "write timeout") from None
        except OSError as e:
            raise WriteError(server, str(e)) from e

        # Read until the server closes
        try:
            response = await asyncio.wait_for(reader.read(), timeout=timeout)
        except asyncio.TimeoutError:
            raise ReadError(server, "read timeout") from None
        except OSError as e:
            raise ReadError(server, str(e)) from e

        logger.debug("%s answered %d bytes for %s", server, len(response), domain)
        finished = True
        return response

    finally:
        if finished:
            writer.close()
            try:
                await writer.wait_closed()
            except OSError:
                # peer already reset
                pass
        else:
            # unsent data may never drain; drop it with the socket
            writer.transport.abort()
