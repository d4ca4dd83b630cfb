"""
Client address resolution from proxy headers and the transport peer address.

The resolver is a pure function of its inputs: it performs no I/O, keeps no
state and never raises for malformed input. An unresolvable request yields
None, exactly as a request with no headers and no peer would.
"""

from typing import Mapping, NamedTuple, Optional

from starlette.datastructures import Headers
from starlette.requests import Request

from clientip.headers import ALTERNATIVE_HEADERS, FORWARDED_FOR_HEADER, PEER_SOURCE
from clientip.utils.network import IPAddress, parse_ip, split_host_port


class Resolution(NamedTuple):
    """A resolved client address and the header (or "peer") it came from."""

    address: IPAddress
    source: str


def _normalize_headers(headers: Optional[Mapping[str, str]]) -> Mapping[str, str]:
    if headers is None:
        return {}
    if isinstance(headers, Headers):
        return headers
    return {
        key.lower(): value
        for key, value in headers.items()
        if isinstance(key, str)
    }


def _header_value(headers: Mapping[str, str], name: str) -> str:
    value = headers.get(name)
    return value if isinstance(value, str) else ""


def parse_chain(raw_value: str) -> Optional[IPAddress]:
    """
    Return the left-most valid address in a comma-separated forwarding chain.

    Tokens are trimmed and may carry a port. Sentinels such as "unknown"
    (inserted by some proxies in place of the client) are skipped.
    """
    if not isinstance(raw_value, str):
        return None

    for token in raw_value.split(","):
        token = token.strip()
        host = split_host_port(token)
        if host is not None:
            token = host

        address = parse_ip(token)
        if address is not None:
            return address

    return None


def _from_peer(peer_address: str) -> Optional[IPAddress]:
    # The raw string is only parsed when it is not a host/port pair
    host = split_host_port(peer_address)
    if host is not None:
        return parse_ip(host)
    return parse_ip(peer_address)


def resolve_source(
    headers: Optional[Mapping[str, str]],
    peer_address: Optional[str],
) -> Optional[Resolution]:
    """
    Resolve the client address and report which source supplied it.

    Priority: the X-Forwarded-For chain, then each of ALTERNATIVE_HEADERS in
    order, then the peer address (with any port stripped).
    """
    headers = _normalize_headers(headers)

    address = parse_chain(_header_value(headers, FORWARDED_FOR_HEADER))
    if address is not None:
        return Resolution(address, FORWARDED_FOR_HEADER)

    for header in ALTERNATIVE_HEADERS:
        address = parse_ip(_header_value(headers, header))
        if address is not None:
            return Resolution(address, header)

    address = _from_peer(peer_address if isinstance(peer_address, str) else "")
    if address is not None:
        return Resolution(address, PEER_SOURCE)

    return None


def resolve(
    headers: Optional[Mapping[str, str]],
    peer_address: Optional[str],
) -> Optional[IPAddress]:
    """Resolve the client address, or None if no source yields one."""
    resolution = resolve_source(headers, peer_address)
    if resolution is None:
        return None
    return resolution.address


def peer_host(request: Request) -> str:
    """Transport peer host of a request, or "" when the server reports none."""
    return request.client.host if request.client else ""


def resolution_from_request(request: Request) -> Optional[Resolution]:
    return resolve_source(request.headers, peer_host(request))


def from_request(request: Request) -> Optional[IPAddress]:
    """Return the client address for a Starlette/FastAPI request."""
    resolution = resolution_from_request(request)
    if resolution is None:
        return None
    return resolution.address
