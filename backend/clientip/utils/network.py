"""
Network helper utilities for address parsing and host/port splitting.
"""

from ipaddress import IPv4Address, IPv6Address, ip_address
from typing import Optional, Union

IPAddress = Union[IPv4Address, IPv6Address]


def parse_ip(value: str) -> Optional[IPAddress]:
    """Parse an IPv4/IPv6 literal, returning None for anything else."""
    if not isinstance(value, str) or not value:
        return None
    try:
        address = ip_address(value)
    except ValueError:
        return None
    # ::ffff:a.b.c.d is reported as the IPv4 address it carries
    if isinstance(address, IPv6Address) and address.ipv4_mapped is not None:
        return address.ipv4_mapped
    return address


def split_host_port(addr: str) -> Optional[str]:
    """
    Split "host:port" or "[host]:port" and return the host.

    Returns None when addr is not a well-formed host/port pair or the host
    part is empty. The port itself is not validated.
    """
    if not isinstance(addr, str):
        return None

    i = addr.rfind(":")
    if i < 0:
        return None

    j = k = 0
    if addr.startswith("["):
        end = addr.find("]")
        if end < 0:
            return None
        # "]" must be immediately followed by the port separator
        if end + 1 != i:
            return None
        host = addr[1:end]
        j, k = 1, end + 1
    else:
        host = addr[:i]
        if ":" in host:
            return None

    if "[" in addr[j:]:
        return None
    if "]" in addr[k:]:
        return None

    return host or None
