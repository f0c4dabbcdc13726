import pytest

from konnectivity.header import (
    IdentifierParseError,
    IdentifierType,
    Identifiers,
    gen_agent_identifiers,
)


@pytest.mark.parametrize(
    "idents, want",
    [
        ("invalid=1.2.3.4", Identifiers()),
        ("ipv4=1.2.3.4", Identifiers(ipv4=["1.2.3.4"])),
        ("ipv6=100::", Identifiers(ipv6=["100::"])),
        ("host=node1.mydomain.com", Identifiers(host=["node1.mydomain.com"])),
        ("cidr=127.0.0.1/16", Identifiers(cidr=["127.0.0.1/16"])),
        ("default-route=true", Identifiers(default_route=True)),
        ("default-route=false", Identifiers()),
        ("default-route=invalid", Identifiers()),
        ("default-route=true&default-route=false", Identifiers(default_route=True)),
        (
            "host=localhost&host=node1.mydomain.com&cidr=10.0.0.0/8&cidr=100::/64"
            "&ipv4=1.2.3.4&ipv4=5.6.7.8&ipv6=100::&ipv6=100::1&default-route=true",
            Identifiers(
                ipv4=["1.2.3.4", "5.6.7.8"],
                ipv6=["100::", "100::1"],
                host=["localhost", "node1.mydomain.com"],
                cidr=["10.0.0.0/8", "100::/64"],
                default_route=True,
            ),
        ),
        ("uid=value", Identifiers()),
    ],
    ids=[
        "invalid identifier type",
        "ipv4",
        "ipv6",
        "host",
        "cidr",
        "default route true",
        "default route false",
        "default route invalid",
        "multiple default route",
        "success with multiple",
        "ignore uid",
    ],
)
def test_gen_agent_identifiers(idents, want):
    assert gen_agent_identifiers(idents) == want


def test_invalid_url_encoding_semicolon():
    with pytest.raises(IdentifierParseError):
        gen_agent_identifiers(";")


def test_invalid_percent_escape():
    with pytest.raises(IdentifierParseError):
        gen_agent_identifiers("host=abc%zz")


def test_truncated_percent_escape():
    with pytest.raises(IdentifierParseError):
        gen_agent_identifiers("host=abc%4")


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        gen_agent_identifiers("ipv4=1.2.3.4;x")


def test_percent_and_plus_decoding():
    got = gen_agent_identifiers("cidr=10.0.0.0%2F8&host=a+b")
    assert got == Identifiers(cidr=["10.0.0.0/8"], host=["a b"])


def test_default_route_accepts_numeric_true():
    assert gen_agent_identifiers("default-route=1").default_route is True


def test_default_route_first_value_false_wins():
    assert gen_agent_identifiers("default-route=false&default-route=true").default_route is False


def test_empty_input_gives_empty_identifiers():
    assert gen_agent_identifiers("") == Identifiers()


def test_identifier_type_values():
    assert IdentifierType("default-route") is IdentifierType.DEFAULT_ROUTE
    assert IdentifierType("uid") is IdentifierType.UID