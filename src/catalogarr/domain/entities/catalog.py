"""Domain entities for the remote video catalog.

Pure value objects without framework dependencies or I/O.

Every string-tagged enumeration carries an exhaustive wire mapping: the enum
value *is* the wire string, and ``from_wire`` rejects anything outside the
table with a ``CatalogDecodeError``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Literal, TypeVar, Union

from .errors import CatalogDecodeError

_E = TypeVar("_E", bound="WireEnum")


class WireEnum(str, Enum):
    """String enum whose values are the exact strings used on the wire."""

    def to_wire(self) -> str:
        return self.value

    @classmethod
    def from_wire(cls: type[_E], value: str) -> _E:
        try:
            return cls(value)
        except ValueError:
            raise CatalogDecodeError(
                f"Unknown {cls.__name__} value: {value!r}"
            ) from None


class BrowseSortType(WireEnum):
    """Sort order for catalog browsing."""

    POPULARITY = "popularity"
    NEWLY_ADDED = "newly_added"
    ALPHABETICAL = "alphabetical"


class MediaType(WireEnum):
    """Top-level media kinds the browse endpoint can filter by."""

    SERIES = "series"
    MOVIE_LISTING = "movie_listing"


class Category(WireEnum):
    """Genre categories known to the catalog service."""

    ACTION = "action"
    ADVENTURE = "adventure"
    COMEDY = "comedy"
    DRAMA = "drama"
    FANTASY = "fantasy"
    MUSIC = "music"
    ROMANCE = "romance"
    SCI_FI = "sci-fi"
    SEINEN = "seinen"
    SHOJO = "shojo"
    SHONEN = "shonen"
    SLICE_OF_LIFE = "slice-of-life"
    SPORTS = "sports"
    SUPERNATURAL = "supernatural"
    THRILLER = "thriller"


class Locale(WireEnum):
    """Locale tags accepted by the catalog service."""

    AR_ME = "ar-ME"
    AR_SA = "ar-SA"
    CA_ES = "ca-ES"
    DE_DE = "de-DE"
    EN_IN = "en-IN"
    EN_US = "en-US"
    ES_419 = "es-419"
    ES_ES = "es-ES"
    ES_LA = "es-LA"
    FR_FR = "fr-FR"
    HI_IN = "hi-IN"
    ID_ID = "id-ID"
    IT_IT = "it-IT"
    JA_JP = "ja-JP"
    KO_KR = "ko-KR"
    MS_MY = "ms-MY"
    PL_PL = "pl-PL"
    PT_BR = "pt-BR"
    PT_PT = "pt-PT"
    RU_RU = "ru-RU"
    TA_IN = "ta-IN"
    TE_IN = "te-IN"
    TH_TH = "th-TH"
    TR_TR = "tr-TR"
    VI_VN = "vi-VN"
    ZH_CN = "zh-CN"
    ZH_HK = "zh-HK"
    ZH_TW = "zh-TW"


class SearchFacet(WireEnum):
    """Discriminants of the multi-facet search envelope."""

    TOP_RESULTS = "top_results"
    SERIES = "series"
    MOVIE_LISTING = "movie_listing"
    EPISODE = "episode"


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Series:
    """A series as returned by browse and search."""

    id: str
    type: Literal["series"] = "series"
    title: str = ""
    slug_title: str = ""
    description: str = ""
    series_metadata: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class MovieListing:
    """A movie listing (container of one or more movies)."""

    id: str
    type: Literal["movie_listing"] = "movie_listing"
    title: str = ""
    slug_title: str = ""
    description: str = ""
    movie_listing_metadata: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Episode:
    """A single episode search hit."""

    id: str
    type: Literal["episode"] = "episode"
    title: str = ""
    slug_title: str = ""
    description: str = ""
    episode_metadata: dict[str, Any] = field(default_factory=dict)


# Mixed record list (top results, browse). Tagged by ``type``.
MediaCollection = Union[Series, MovieListing, Episode]


@dataclass(frozen=True)
class SimulcastSeasonLocalization:
    """Human readable name of a simulcast season."""

    title: str = ""
    description: str = ""


@dataclass(frozen=True)
class SimulcastSeason:
    """A simulcast season; ``id`` is the tag accepted by ``BrowseOptions``."""

    id: str
    localization: SimulcastSeasonLocalization = field(
        default_factory=SimulcastSeasonLocalization
    )
