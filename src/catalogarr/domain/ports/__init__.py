from .fetch import FetchStrategyPort
from .transport import CatalogContext, CatalogDecoderPort, CatalogTransportPort

__all__ = [
    "CatalogContext",
    "CatalogDecoderPort",
    "CatalogTransportPort",
    "FetchStrategyPort",
]
