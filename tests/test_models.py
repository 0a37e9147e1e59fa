"""Tests for IP validation and hosts-line parsing."""

import pytest

from dnshosts.models import HostEntry, HostsLine, is_valid_ip


@pytest.mark.parametrize("ip", ["127.0.0.1", "10.0.0.1", "255.255.255.255", "::1", "fe80::1", "2001:db8::8a2e:370:7334"])
def test_valid_ip_literals(ip):
    assert is_valid_ip(ip)


@pytest.mark.parametrize(
    "ip",
    ["", "999.999.1.1", "not-an-ip", "10.0.0", "localhost", "1.2.3.4.5", " 10.0.0.1", "fe80::1%eth0", "::g"],
)
def test_invalid_ip_literals(ip):
    assert not is_valid_ip(ip)


def test_entry_renders_tab_separated_line():
    entry = HostEntry(ip_address="10.0.0.1", domain="example.com")
    assert entry.to_hosts_line() == "10.0.0.1\texample.com"
    assert str(entry) == "example.com -> 10.0.0.1"


class TestHostsLineParse:
    """Lines keep their raw text; only IP records get parsed fields."""

    def test_record_with_aliases(self):
        line = HostsLine.parse("::1 localhost ip6-localhost")
        assert line.is_record
        assert line.ip == "::1"
        assert line.hostnames == ("localhost", "ip6-localhost")

    def test_trailing_comment_is_not_a_hostname(self):
        line = HostsLine.parse("10.0.0.1\texample.com # dev box")
        assert line.hostnames == ("example.com",)
        assert line.raw == "10.0.0.1\texample.com # dev box"

    @pytest.mark.parametrize("raw", ["", "# 10.0.0.1 example.com", "garbage line", "10.0.0.1"])
    def test_non_records_are_preserved(self, raw):
        line = HostsLine.parse(raw)
        assert not line.is_record
        assert line.raw == raw
        assert line.hostnames == ()
