from .polling import follow
from .origin import OriginClient
from .service import ServiceClient

__all__ = ["ServiceClient", "OriginClient", "follow"]
