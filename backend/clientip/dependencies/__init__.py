# clientip Dependencies
from clientip.dependencies.client import get_client_resolution

__all__ = ["get_client_resolution"]
