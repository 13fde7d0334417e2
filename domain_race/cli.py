#!/usr/bin/env python3
"""
Command-line entry point.

    domain-race example.com          -> "available" / "not available"
    domain-race --whois example.com  -> first conclusive WHOIS record
    domain-race --probe-servers      -> servers in the inventory that answer
"""

import argparse
import asyncio
import logging
import os
import sys
from typing import Optional

try:
    import uvloop
    UVLOOP = True
except ImportError:
    UVLOOP = False

from .config import CheckerConfig
from .errors import ConfigError
from .multi_checker import new_checker
from .whois_checker import PROBE_DOMAIN, PROBE_TIMEOUT, WHOISChecker

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    log_level = "DEBUG" if verbose else os.environ.get("LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.WARNING),
        format="%(asctime)s - %(levelname)s - %(message)s",
        stream=sys.stderr
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="domain-race",
        description="Check whether a domain is registered by racing WHOIS servers and DNS"
    )
    parser.add_argument("domain", nargs="?", help="Domain to check")
    parser.add_argument("--timeout", type=float, help="Fan-out timeout in seconds")
    parser.add_argument("--threshold", type=int, help="Response length that counts as a record")
    parser.add_argument("--marker", help="Not-found marker text")
    parser.add_argument("--servers", help="Comma-separated WHOIS servers to use instead of the inventory")
    parser.add_argument("--no-dns", action="store_true", help="Skip the nslookup probe")
    parser.add_argument("--rdap", action="store_true", help="Also ask RDAP")
    parser.add_argument("--whois", action="store_true", help="Print the first conclusive WHOIS record")
    parser.add_argument("--probe-servers", action="store_true", help="List servers that respond")
    parser.add_argument("--probe-timeout", type=float, default=PROBE_TIMEOUT, help="Timeout for --probe-servers")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log per-source diagnostics")
    return parser


def load_config(args: argparse.Namespace) -> CheckerConfig:
    config = CheckerConfig.from_env()
    servers = None
    if args.servers:
        servers = tuple(s.strip() for s in args.servers.split(",") if s.strip())
    return config.with_overrides(
        servers=servers,
        fanout_timeout=args.timeout,
        taken_threshold=args.threshold,
        not_found_marker=args.marker,
        dns_enabled=False if args.no_dns else None,
        rdap_enabled=True if args.rdap else None
    )


async def run(args: argparse.Namespace, config: CheckerConfig) -> int:
    if args.probe_servers:
        checker = WHOISChecker.from_config(config)
        for server in await checker.responding_servers(PROBE_DOMAIN, args.probe_timeout):
            print(server)
        return 0

    if args.whois:
        result = await WHOISChecker.from_config(config).race(args.domain)
        logger.info(
            "%s: winner=%s errors=%d inconclusive=%d abandoned=%d in %.2fs",
            args.domain, result.server, result.errors, result.inconclusive,
            result.abandoned, result.elapsed
        )
        if result.payload is not None:
            sys.stdout.write(result.payload.decode("utf-8", errors="replace"))
        return 0

    if await new_checker(config).is_taken(args.domain):
        print("not available")
    else:
        print("available")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    if not args.domain and not args.probe_servers:
        print("usage: <domain>")
        return 0

    try:
        config = load_config(args)
    except ConfigError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    logger.debug("uvloop: %s", "enabled" if UVLOOP else "not available")
    if not UVLOOP:
        return asyncio.run(run(args, config))

    # Runner (3.11+) takes a loop factory
    if hasattr(asyncio, "Runner"):
        with asyncio.Runner(loop_factory=uvloop.new_event_loop) as runner:
            return runner.run(run(args, config))
    asyncio.set_event_loop_policy(uvloop.EventLoopPolicy())
    return asyncio.run(run(args, config))


if __name__ == "__main__":
    sys.exit(main())
