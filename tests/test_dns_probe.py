"""
DNS probe tests using fake resolver scripts in place of nslookup.
"""

import asyncio
import sys
import textwrap
import time

import pytest

from domain_race.errors import ResolutionError
from domain_race.dns_probe import nslookup, nslookup_taken

pytestmark = pytest.mark.skipif(sys.platform == "win32", reason="needs a POSIX shell")

RESOLVED = """\
Server:\t\t127.0.0.53
Address:\t127.0.0.53#53

Non-authoritative answer:
Name:\texample.com
Address: 93.184.215.14
"""

NXDOMAIN = """\
Server:\t\t127.0.0.53
Address:\t127.0.0.53#53

** server can't find nope.example: NXDOMAIN
"""


def fake_resolver(tmp_path, body: str, name: str = "fake-nslookup") -> str:
    script = tmp_path / name
    script.write_text("#!/bin/sh\n" + textwrap.dedent(body))
    script.chmod(0o755)
    return str(script)


def test_marker_in_output_means_taken(tmp_path):
    command = fake_resolver(tmp_path, f"cat <<'EOF'\n{RESOLVED}EOF\n")
    assert asyncio.run(nslookup_taken("example.com", command=command)) is True


def test_marker_on_stderr_counts(tmp_path):
    command = fake_resolver(tmp_path, "echo 'Non-authoritative answer:' >&2\n")
    assert asyncio.run(nslookup_taken("example.com", command=command)) is True


def test_no_marker_means_not_taken(tmp_path):
    command = fake_resolver(tmp_path, "echo 'Name: example.com'\n")
    assert asyncio.run(nslookup_taken("example.com", command=command)) is False


def test_failing_resolver_means_not_taken(tmp_path):
    # nslookup exits 1 on NXDOMAIN
    command = fake_resolver(tmp_path, f"cat <<'EOF'\n{NXDOMAIN}EOF\nexit 1\n")
    assert asyncio.run(nslookup_taken("nope.example", command=command)) is False

    with pytest.raises(ResolutionError):
        asyncio.run(nslookup("nope.example", command=command))


def test_missing_resolver_means_not_taken(tmp_path):
    command = str(tmp_path / "does-not-exist")
    assert asyncio.run(nslookup_taken("example.com", command=command)) is False

    with pytest.raises(ResolutionError):
        asyncio.run(nslookup("example.com", command=command))


def test_slow_resolver_is_abandoned(tmp_path):
    command = fake_resolver(tmp_path, "exec sleep 5\n")

    start = time.perf_counter()
    taken = asyncio.run(nslookup_taken("example.com", command=command, timeout=0.2))
    elapsed = time.perf_counter() - start

    assert taken is False
    assert elapsed < 3.0


def test_domain_is_passed_as_argument(tmp_path):
    command = fake_resolver(tmp_path, 'echo "query=$1"\n')
    output = asyncio.run(nslookup("example.com", command=command))
    assert output.strip() == b"query=example.com"


def test_custom_marker(tmp_path):
    command = fake_resolver(tmp_path, "echo 'Authoritative answers can be found from:'\n")
    assert asyncio.run(nslookup_taken("example.com", command=command, marker="Authoritative answers")) is True
