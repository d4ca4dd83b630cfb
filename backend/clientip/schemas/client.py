"""
Client address schemas.
"""

from typing import Literal, Optional

from pydantic import BaseModel


class ClientAddressResponse(BaseModel):
    address: Optional[str] = None
    version: Optional[Literal[4, 6]] = None
    source: Optional[str] = None
