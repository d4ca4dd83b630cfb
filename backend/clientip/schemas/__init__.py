# clientip Pydantic Schemas
from clientip.schemas.client import ClientAddressResponse

__all__ = ["ClientAddressResponse"]
