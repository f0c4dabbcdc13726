"""Header names and agent identifier parsing shared by the proxy server and agents."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum

SERVER_COUNT = "serverCount"
SERVER_ID = "serverID"
AGENT_ID = "agentID"
AGENT_IDENTIFIERS = "agentIdentifiers"

# Key under which an authentication token travels with a call.
AUTHENTICATION_TOKEN_CONTEXT_KEY = "Authorization"
# Prefix of the authentication token's content.
AUTHENTICATION_TOKEN_CONTEXT_SCHEME_PREFIX = "Bearer "

# Carries the client information in a proxy request.
USER_AGENT = "user-agent"

_TRUE_WORDS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_WORDS = frozenset({"0", "f", "F", "FALSE", "false", "False"})
_PERCENT = re.compile(r"%(.{0,2})", re.DOTALL)
_HEX_PAIR = re.compile(r"[0-9A-Fa-f]{2}")


class IdentifierParseError(ValueError):
    """Raised when an agent identifier string is not valid URL encoding."""


class IdentifierType(str, Enum):
    """Kinds of identifier an agent can advertise."""

    IPV4 = "ipv4"
    IPV6 = "ipv6"
    HOST = "host"
    CIDR = "cidr"
    UID = "uid"
    DEFAULT_ROUTE = "default-route"


@dataclass
class Identifiers:
    """Agent identifiers the server uses when choosing an agent."""

    ipv4: list[str] = field(default_factory=list)
    ipv6: list[str] = field(default_factory=list)
    host: list[str] = field(default_factory=list)
    cidr: list[str] = field(default_factory=list)
    default_route: bool = False


def _unescape(text: str) -> str:
    """Decode a query component: '+' is a space, '%XX' a byte."""

    def check(match: re.Match[str]) -> str:
        digits = match.group(1)
        if not _HEX_PAIR.fullmatch(digits):
            raise IdentifierParseError(
                f"fail to parse url encoded string: invalid URL escape {match.group(0)!r}"
            )
        return match.group(0)

    _PERCENT.sub(check, text)
    raw = bytearray()
    pos = 0
    text = text.replace("+", " ")
    while pos < len(text):
        char = text[pos]
        if char == "%":
            raw.append(int(text[pos + 1 : pos + 3], 16))
            pos += 3
        else:
            raw.extend(char.encode("utf-8"))
            pos += 1
    return raw.decode("utf-8", errors="replace")


def _parse_query(query: str) -> dict[str, list[str]]:
    """Parse a URL query into a mapping of keys to their values in order."""
    values: dict[str, list[str]] = {}
    for part in query.split("&"):
        if not part:
            continue
        if ";" in part:
            raise IdentifierParseError(
                "fail to parse url encoded string: invalid semicolon separator in query"
            )
        key, _, value = part.partition("=")
        values.setdefault(_unescape(key), []).append(_unescape(value))
    return values


def _parse_bool(text: str) -> bool | None:
    if text in _TRUE_WORDS:
        return True
    if text in _FALSE_WORDS:
        return False
    return None


def gen_agent_identifiers(addrs: str) -> Identifiers:
    """Build Identifiers from a URL encoded mapping of identifier type to values.

    Unknown identifier types are ignored so that agents sending newer types
    are still accepted.
    """
    idents = Identifiers()
    for id_type, ids in _parse_query(addrs).items():
        try:
            kind = IdentifierType(id_type)
        except ValueError:
            continue
        if kind is IdentifierType.IPV4:
            idents.ipv4.extend(ids)
        elif kind is IdentifierType.IPV6:
            idents.ipv6.extend(ids)
        elif kind is IdentifierType.HOST:
            idents.host.extend(ids)
        elif kind is IdentifierType.CIDR:
            idents.cidr.extend(ids)
        elif kind is IdentifierType.DEFAULT_ROUTE:
            if _parse_bool(ids[0]):
                idents.default_route = True
    return idents