"""
Header names consulted when resolving the client address, in priority order.
"""

# Comma-separated chain, client first, proxies appended to the right.
FORWARDED_FOR_HEADER = "x-forwarded-for"

# Single-value headers set by CDNs and proxies. Order is significant.
ALTERNATIVE_HEADERS = (
    "x-client-ip",
    "cf-connecting-ip",
    "fastly-client-ip",
    "true-client-ip",
    "x-real-ip",
    "x-cluster-client-ip",
    "x-forwarded",
    "forwarded-for",
)

# Reported as the source when the transport-level peer address wins.
PEER_SOURCE = "peer"
