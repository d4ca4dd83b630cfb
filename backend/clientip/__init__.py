# clientip: client address resolution behind proxies
from clientip.headers import ALTERNATIVE_HEADERS, FORWARDED_FOR_HEADER
from clientip.resolver import (
    Resolution,
    from_request,
    parse_chain,
    resolve,
    resolve_source,
)
from clientip.utils.network import IPAddress, parse_ip, split_host_port

__all__ = [
    "ALTERNATIVE_HEADERS", "FORWARDED_FOR_HEADER",
    "IPAddress", "Resolution",
    "from_request", "parse_chain", "parse_ip",
    "resolve", "resolve_source", "split_host_port",
]
