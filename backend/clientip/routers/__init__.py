# clientip API Routers
from clientip.routers import health, client

__all__ = ["health", "client"]
