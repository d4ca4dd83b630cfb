"""
Client address endpoints
"""

from typing import Optional

from fastapi import APIRouter, Depends, Request

from clientip.config import settings
from clientip.dependencies.client import get_client_resolution
from clientip.logging_config import log_client_resolved, log_client_unresolved
from clientip.resolver import Resolution, peer_host
from clientip.schemas.client import ClientAddressResponse

router = APIRouter()


@router.get("/whoami", response_model=ClientAddressResponse)
async def whoami(
    request: Request,
    resolution: Optional[Resolution] = Depends(get_client_resolution),
):
    """
    Report the resolved client address.

    An unresolvable client is not an error: address, version and source
    are all null.
    """
    if resolution is None:
        log_client_unresolved(peer_host(request))
        return ClientAddressResponse()

    log_client_resolved(str(resolution.address), resolution.source)
    return ClientAddressResponse(
        address=str(resolution.address),
        version=resolution.address.version,
        source=resolution.source if settings.EXPOSE_RESOLUTION_SOURCE else None,
    )
