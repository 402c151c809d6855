from .browse import (
    BROWSE_OPTION_DEFAULTS,
    DEFAULT_BROWSE_SORT,
    BrowseOptions,
    compile_filters,
)
from .catalog import (
    BrowseSortType,
    Category,
    Episode,
    Locale,
    MediaCollection,
    MediaType,
    MovieListing,
    SearchFacet,
    Series,
    SimulcastSeason,
    SimulcastSeasonLocalization,
)
from .errors import CatalogDecodeError, CatalogError, CatalogTransportError
from .pagination import (
    DEFAULT_PAGE_SIZE,
    Cursor,
    FacetBucket,
    FilterEntry,
    Page,
    PageRequest,
    SearchQuery,
)

__all__ = [
    "BROWSE_OPTION_DEFAULTS",
    "DEFAULT_BROWSE_SORT",
    "DEFAULT_PAGE_SIZE",
    "BrowseOptions",
    "BrowseSortType",
    "CatalogDecodeError",
    "CatalogError",
    "CatalogTransportError",
    "Category",
    "Cursor",
    "Episode",
    "FacetBucket",
    "FilterEntry",
    "Locale",
    "MediaCollection",
    "MediaType",
    "MovieListing",
    "Page",
    "PageRequest",
    "SearchFacet",
    "SearchQuery",
    "Series",
    "SimulcastSeason",
    "SimulcastSeasonLocalization",
    "compile_filters",
]
