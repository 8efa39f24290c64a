"""Enumerations accepted by the search endpoint."""

from __future__ import annotations

from enum import Enum, unique


@unique
class SortField(str, Enum):
    """Fields the service can sort results by. Default is ``bumped_at``."""

    BUMPED_AT = "bumped_at"
    CREATED_AT = "created_at"
    SEEDERS = "seeders"
    LEECHERS = "leechers"
    TIMES_COMPLETED = "times_completed"
    SIZE = "size"
    NAME = "name"
    IMDB_RATING = "imdb_rating"
    TMDB_RATING = "tmdb_rating"
    BHD_RATING = "bhd_rating"


@unique
class SortOrder(str, Enum):
    """Direction of the result sort. Default is ``desc``."""

    ASC = "asc"
    DESC = "desc"
