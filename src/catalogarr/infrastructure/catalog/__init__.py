from .decoder import PydanticCatalogDecoder
from .transport import DEFAULT_BASE_URL, HttpxCatalogTransport

__all__ = ["DEFAULT_BASE_URL", "HttpxCatalogTransport", "PydanticCatalogDecoder"]
