"""Browse option set and its compilation into an ordered filter list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .catalog import BrowseSortType, Category, Locale, MediaType
from .pagination import FilterEntry

DEFAULT_BROWSE_SORT = BrowseSortType.NEWLY_ADDED

# field name -> (wire key, default). Order here is the order of the compiled list.
BROWSE_OPTION_DEFAULTS: dict[str, tuple[str, Any]] = {
    "categories": ("categories", ()),
    "is_dubbed": ("is_dubbed", None),
    "is_subbed": ("is_subbed", None),
    "simulcast_season": ("season_tag", None),
    "sort": ("sort", DEFAULT_BROWSE_SORT),
    "media_type": ("type", None),
    "preferred_audio_language": ("preferred_audio_language", None),
}


@dataclass(frozen=True)
class BrowseOptions:
    """Filters for catalog browsing.

    Every field except ``sort`` defaults to "absent" and is left out of the
    compiled filter list. ``sort`` defaults to ``NEWLY_ADDED`` and is always
    sent, which changes what the service returns compared to omitting it.
    """

    categories: tuple[Category, ...] = ()
    is_dubbed: bool | None = None
    is_subbed: bool | None = None
    simulcast_season: str | None = None  # Tag from simulcast_seasons(), e.g. "fall-2023"
    sort: BrowseSortType = DEFAULT_BROWSE_SORT
    media_type: MediaType | None = None
    preferred_audio_language: Locale | None = None

    def __post_init__(self) -> None:
        # Accept any iterable of categories but store an immutable tuple.
        object.__setattr__(self, "categories", tuple(self.categories))


def _bool_wire(value: bool) -> str:
    return "true" if value else "false"


def compile_filters(options: BrowseOptions) -> list[FilterEntry]:
    """Translate *options* into the ordered ``(key, value)`` list sent to browse.

    Pure and deterministic: identical options always give an identical list.
    """
    keys = {name: key for name, (key, _) in BROWSE_OPTION_DEFAULTS.items()}
    filters: list[FilterEntry] = []

    for category in options.categories:
        filters.append((keys["categories"], category.to_wire()))
    if options.is_dubbed is not None:
        filters.append((keys["is_dubbed"], _bool_wire(options.is_dubbed)))
    if options.is_subbed is not None:
        filters.append((keys["is_subbed"], _bool_wire(options.is_subbed)))
    if options.simulcast_season is not None:
        filters.append((keys["simulcast_season"], options.simulcast_season))
    filters.append((keys["sort"], options.sort.to_wire()))
    if options.media_type is not None:
        filters.append((keys["media_type"], options.media_type.to_wire()))
    if options.preferred_audio_language is not None:
        filters.append(
            (
                keys["preferred_audio_language"],
                options.preferred_audio_language.to_wire(),
            )
        )

    return filters
