from .catalog_browse import CatalogBrowseUseCase
from .catalog_search import CatalogSearchUseCase, QueryResults

__all__ = ["CatalogBrowseUseCase", "CatalogSearchUseCase", "QueryResults"]
