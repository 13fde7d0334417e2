"""
Configuration defaults, validation and environment overrides.
"""

import pytest

from domain_race.config import CheckerConfig
from domain_race.errors import ConfigError
from domain_race.servers import DEFAULT_SERVERS


def test_defaults():
    config = CheckerConfig()
    assert config.servers == DEFAULT_SERVERS
    assert config.taken_threshold == 3000
    assert config.not_found_marker == "No match"
    assert config.fanout_timeout == 1.0
    assert config.connection_deadline == 1.0
    assert config.whois_port == 43
    assert config.dns_enabled is True
    assert config.dns_command == "nslookup"
    assert config.dns_marker == "Non-authoritative answer"
    assert config.rdap_enabled is False


def test_inventory_is_immutable_and_unique():
    assert isinstance(DEFAULT_SERVERS, tuple)
    assert len(DEFAULT_SERVERS) > 100
    assert len(set(DEFAULT_SERVERS)) == len(DEFAULT_SERVERS)
    assert all(s.startswith("whois.") for s in DEFAULT_SERVERS)


def test_server_list_is_stored_as_tuple():
    assert CheckerConfig(servers=["a", "b"]).servers == ("a", "b")


def test_connection_deadline_is_clamped():
    assert CheckerConfig(fanout_timeout=1.0, connect_timeout=3.0).connection_deadline == 1.0
    assert CheckerConfig(fanout_timeout=1.0, connect_timeout=0.5).connection_deadline == 0.5


@pytest.mark.parametrize("kwargs", [
    {"taken_threshold": -1},
    {"fanout_timeout": 0},
    {"connect_timeout": -1.0},
    {"whois_port": 0},
    {"whois_port": 70000},
    {"dns_timeout": 0},
    {"rdap_timeout": -5},
    {"fanout_timeout": float("inf")},
    {"fanout_timeout": float("nan")},
    {"connect_timeout": float("nan")},
    {"dns_timeout": float("inf")},
])
def test_invalid_values(kwargs):
    with pytest.raises(ConfigError):
        CheckerConfig(**kwargs)


def test_from_env():
    config = CheckerConfig.from_env({
        "DOMAIN_RACE_SERVERS": "whois.a.example, whois.b.example,,",
        "DOMAIN_RACE_TAKEN_THRESHOLD": "1500",
        "DOMAIN_RACE_NOT_FOUND_MARKER": "NOT FOUND",
        "DOMAIN_RACE_FANOUT_TIMEOUT": "2.5",
        "DOMAIN_RACE_CONNECT_TIMEOUT": "0.5",
        "DOMAIN_RACE_WHOIS_PORT": "4343",
        "DOMAIN_RACE_DNS": "off",
        "DOMAIN_RACE_RDAP": "yes",
        "DOMAIN_RACE_RDAP_TIMEOUT": "4",
    })
    assert config.servers == ("whois.a.example", "whois.b.example")
    assert config.taken_threshold == 1500
    assert config.not_found_marker == "NOT FOUND"
    assert config.fanout_timeout == 2.5
    assert config.connection_deadline == 0.5
    assert config.whois_port == 4343
    assert config.dns_enabled is False
    assert config.rdap_enabled is True
    assert config.rdap_timeout == 4.0


def test_from_env_without_variables_is_default():
    assert CheckerConfig.from_env({}) == CheckerConfig()


@pytest.mark.parametrize("key, value", [
    ("DOMAIN_RACE_TAKEN_THRESHOLD", "lots"),
    ("DOMAIN_RACE_FANOUT_TIMEOUT", "soon"),
    ("DOMAIN_RACE_FANOUT_TIMEOUT", "inf"),
    ("DOMAIN_RACE_CONNECT_TIMEOUT", "nan"),
    ("DOMAIN_RACE_DNS", "maybe"),
    ("DOMAIN_RACE_NOT_FOUND_MARKER", ""),
])
def test_from_env_rejects_bad_values(key, value):
    with pytest.raises(ConfigError):
        CheckerConfig.from_env({key: value})


def test_with_overrides_ignores_none():
    config = CheckerConfig().with_overrides(fanout_timeout=None, taken_threshold=10)
    assert config.fanout_timeout == 1.0
    assert config.taken_threshold == 10
