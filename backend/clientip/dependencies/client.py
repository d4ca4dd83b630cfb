"""
Client address dependency for FastAPI routes
"""

from typing import Optional

from fastapi import Request

from clientip.resolver import Resolution, resolution_from_request


async def get_client_resolution(request: Request) -> Optional[Resolution]:
    """
    Dependency to resolve the client address of the current request.

    Usage:
        @router.get("/endpoint")
        async def endpoint(client: Optional[Resolution] = Depends(get_client_resolution)):
            ...

    Returns None when no header or peer address yields a valid address.
    """
    return resolution_from_request(request)
