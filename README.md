# konnectivity

Helpers for the metadata headers that proxy agents send when they register
with a proxy server. An agent can list the addresses, host names and CIDR
ranges it can reach. It can also say whether it serves as a default route.
It sends this list as a URL-encoded query string, and this package turns
that string into a structured value.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from konnectivity.header import (
    IdentifierParseError,
    IdentifierType,
    gen_agent_identifiers,
)

idents = gen_agent_identifiers(
    "host=localhost&ipv4=1.2.3.4&cidr=10.0.0.0/8&default-route=true"
)
print(idents.host)           # ['localhost']
print(idents.ipv4)           # ['1.2.3.4']
print(idents.cidr)           # ['10.0.0.0/8']
print(idents.default_route)  # True

print(IdentifierType.IPV6.value)  # 'ipv6'
```

`gen_agent_identifiers` returns an `Identifiers` dataclass with the fields
`ipv4`, `ipv6`, `host`, `cidr` (lists of strings) and `default_route` (a
bool).

### Parsing rules

- The keys `ipv4`, `ipv6`, `host` and `cidr` collect every value given for
  them, in the order in which they appear.
- `default-route` is true only when its first value is one of `1`, `t`, `T`,
  `TRUE`, `true` or `True`. A false or unrecognised value leaves it false.
- Unknown keys, `uid` among them, are ignored. A newer agent can therefore
  send identifier types that the server does not know.
- `+` decodes to a space and `%XX` to a byte.
- A string that is not valid URL encoding raises `IdentifierParseError`, a
  subclass of `ValueError`. This covers a `;` in the query and a `%` that
  is not followed by two hex digits.

```python
try:
    gen_agent_identifiers(";")
except IdentifierParseError as exc:
    print(exc)
```

### Header names

The module also defines the metadata key names used between the proxy
server and its agents: `SERVER_COUNT`, `SERVER_ID`, `AGENT_ID`,
`AGENT_IDENTIFIERS`, `AUTHENTICATION_TOKEN_CONTEXT_KEY` (`"Authorization"`),
`AUTHENTICATION_TOKEN_CONTEXT_SCHEME_PREFIX` (`"Bearer "`) and `USER_AGENT`.

## What this package does not do

This package contains only the header names and the identifier parser. It
has no proxy server, no agent and no tunnel client, and it opens no network
connections. It also provides no command-line program.