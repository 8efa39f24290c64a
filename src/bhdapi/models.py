"""Frozen Pydantic models for search requests and responses."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, PlainValidator, StrictBool, StrictFloat, StrictInt, StrictStr, model_validator

from bhdapi.enums import SortField, SortOrder
from bhdapi.exceptions import ServiceError
from bhdapi.scalars import Flag, Timestamp


def search(*query: str) -> SearchParams:
    """Create search parameters from free-text query tokens joined by spaces."""
    return SearchParams(search=" ".join(query))


class SearchParams(BaseModel):
    """Parameters of a torrent search.

    Instances are immutable: every ``with_*`` setter returns a new value, so
    intermediate builders can be branched without sharing state. Fields left
    at their zero value are omitted from the request body.
    """

    model_config = {"frozen": True, "populate_by_name": True}

    # The torrent name. Supports !negative searching. Example: Christmas Movie
    search: str = ""
    # Exact match on the torrent info_hash.
    info_hash: str = ""
    # Exact match on the torrent folder name.
    folder_name: str = ""
    # Exact match on an included file name.
    file_name: str = ""
    # Exact match on the torrent size in bytes.
    size: int = 0
    # Uploader username. Only non-anonymous results are returned.
    uploaded_by: str = ""
    imdb_id: str = ""
    tmdb_id: str = ""
    # TV, Movies
    categories: tuple[str, ...] = ()
    # BD Remux, 1080p, etc.
    types: tuple[str, ...] = ()
    # Blu-ray, WEB, DVD, etc.
    sources: tuple[str, ...] = ()
    # Action, Anime, Stand-Up, Western, etc.
    genres: tuple[str, ...] = ()
    # Internal release groups: FraMeSToR, BHDStudio, BeyondHD, RPG, ...
    groups: tuple[str, ...] = ()
    freeleech: Flag = False
    limited: Flag = False
    promo25: Flag = False
    promo50: Flag = False
    promo75: Flag = False
    refund: Flag = False
    rescue: Flag = False
    rewind: Flag = False
    # Stream Optimized
    stream: Flag = False
    sd: Flag = False
    # TV pack
    pack: Flag = False
    h264: Flag = Field(default=False, alias="h_264")
    h265: Flag = Field(default=False, alias="h_265")
    # DV, HDR10, HDR10P, Commentary
    features: tuple[str, ...] = ()
    # At least 1 seeder.
    alive: Flag = False
    # Less than 3 seeders.
    dying: Flag = False
    # No seeders.
    dead: Flag = False
    # No seeders and an active reseed request.
    reseed: Flag = False
    # The following five flags are relative to the api key's owner.
    seeding: Flag = False
    leeching: Flag = False
    completed: Flag = False
    incomplete: Flag = False
    not_downloaded: Flag = Field(default=False, alias="notdownloaded")
    min_bhd: int = 0
    vote_bhd: int = 0
    min_imdb: int = 0
    vote_imdb: int = 0
    min_tmdb: int = 0
    vote_tmdb: int = 0
    min_year: int = 0
    max_year: int = 0
    # France, Japan, etc.
    countries: tuple[str, ...] = ()
    # Spoken languages: French, English, etc.
    languages: tuple[str, ...] = ()
    # Audio tracks: English, Japanese, etc.
    audios: tuple[str, ...] = ()
    # Dutch, Finnish, Swedish, etc.
    subtitles: tuple[str, ...] = ()
    sort: SortField | None = None
    order: SortOrder | None = None
    # 1-based; only meaningful when the result set exceeds one page.
    page: int = 0

    def _replace(self, **changes: Any) -> SearchParams:
        return self.model_copy(update=changes)

    def with_search(self, *query: str) -> SearchParams:
        return self._replace(search=" ".join(query))

    def with_info_hash(self, info_hash: str) -> SearchParams:
        return self._replace(info_hash=info_hash)

    def with_folder_name(self, folder_name: str) -> SearchParams:
        return self._replace(folder_name=folder_name)

    def with_file_name(self, file_name: str) -> SearchParams:
        return self._replace(file_name=file_name)

    def with_size(self, size: int) -> SearchParams:
        return self._replace(size=int(size))

    def with_uploaded_by(self, uploaded_by: str) -> SearchParams:
        return self._replace(uploaded_by=uploaded_by)

    def with_imdb_id(self, imdb_id: str) -> SearchParams:
        return self._replace(imdb_id=imdb_id)

    def with_tmdb_id(self, tmdb_id: str) -> SearchParams:
        return self._replace(tmdb_id=tmdb_id)

    def with_categories(self, *categories: str) -> SearchParams:
        return self._replace(categories=tuple(categories))

    def with_types(self, *types: str) -> SearchParams:
        return self._replace(types=tuple(types))

    def with_sources(self, *sources: str) -> SearchParams:
        return self._replace(sources=tuple(sources))

    def with_genres(self, *genres: str) -> SearchParams:
        return self._replace(genres=tuple(genres))

    def with_groups(self, *groups: str) -> SearchParams:
        return self._replace(groups=tuple(groups))

    def with_freeleech(self, freeleech: bool = True) -> SearchParams:
        return self._replace(freeleech=bool(freeleech))

    def with_limited(self, limited: bool = True) -> SearchParams:
        return self._replace(limited=bool(limited))

    def with_promo25(self, promo25: bool = True) -> SearchParams:
        return self._replace(promo25=bool(promo25))

    def with_promo50(self, promo50: bool = True) -> SearchParams:
        return self._replace(promo50=bool(promo50))

    def with_promo75(self, promo75: bool = True) -> SearchParams:
        return self._replace(promo75=bool(promo75))

    def with_refund(self, refund: bool = True) -> SearchParams:
        return self._replace(refund=bool(refund))

    def with_rescue(self, rescue: bool = True) -> SearchParams:
        return self._replace(rescue=bool(rescue))

    def with_rewind(self, rewind: bool = True) -> SearchParams:
        return self._replace(rewind=bool(rewind))

    def with_stream(self, stream: bool = True) -> SearchParams:
        return self._replace(stream=bool(stream))

    def with_sd(self, sd: bool = True) -> SearchParams:
        return self._replace(sd=bool(sd))

    def with_pack(self, pack: bool = True) -> SearchParams:
        return self._replace(pack=bool(pack))

    def with_h264(self, h264: bool = True) -> SearchParams:
        return self._replace(h264=bool(h264))

    def with_h265(self, h265: bool = True) -> SearchParams:
        return self._replace(h265=bool(h265))

    def with_features(self, *features: str) -> SearchParams:
        return self._replace(features=tuple(features))

    def with_alive(self, alive: bool = True) -> SearchParams:
        return self._replace(alive=bool(alive))

    def with_dying(self, dying: bool = True) -> SearchParams:
        return self._replace(dying=bool(dying))

    def with_dead(self, dead: bool = True) -> SearchParams:
        return self._replace(dead=bool(dead))

    def with_reseed(self, reseed: bool = True) -> SearchParams:
        return self._replace(reseed=bool(reseed))

    def with_seeding(self, seeding: bool = True) -> SearchParams:
        return self._replace(seeding=bool(seeding))

    def with_leeching(self, leeching: bool = True) -> SearchParams:
        return self._replace(leeching=bool(leeching))

    def with_completed(self, completed: bool = True) -> SearchParams:
        return self._replace(completed=bool(completed))

    def with_incomplete(self, incomplete: bool = True) -> SearchParams:
        return self._replace(incomplete=bool(incomplete))

    def with_not_downloaded(self, not_downloaded: bool = True) -> SearchParams:
        return self._replace(not_downloaded=bool(not_downloaded))

    def with_min_bhd(self, min_bhd: int) -> SearchParams:
        return self._replace(min_bhd=int(min_bhd))

    def with_vote_bhd(self, vote_bhd: int) -> SearchParams:
        return self._replace(vote_bhd=int(vote_bhd))

    def with_min_imdb(self, min_imdb: int) -> SearchParams:
        return self._replace(min_imdb=int(min_imdb))

    def with_vote_imdb(self, vote_imdb: int) -> SearchParams:
        return self._replace(vote_imdb=int(vote_imdb))

    def with_min_tmdb(self, min_tmdb: int) -> SearchParams:
        return self._replace(min_tmdb=int(min_tmdb))

    def with_vote_tmdb(self, vote_tmdb: int) -> SearchParams:
        return self._replace(vote_tmdb=int(vote_tmdb))

    def with_min_year(self, min_year: int) -> SearchParams:
        return self._replace(min_year=int(min_year))

    def with_max_year(self, max_year: int) -> SearchParams:
        return self._replace(max_year=int(max_year))

    def with_countries(self, *countries: str) -> SearchParams:
        return self._replace(countries=tuple(countries))

    def with_languages(self, *languages: str) -> SearchParams:
        return self._replace(languages=tuple(languages))

    def with_audios(self, *audios: str) -> SearchParams:
        return self._replace(audios=tuple(audios))

    def with_subtitles(self, *subtitles: str) -> SearchParams:
        return self._replace(subtitles=tuple(subtitles))

    def with_sort(self, sort: SortField | str) -> SearchParams:
        """Set the sort field. Raises ``ValueError`` for unknown fields."""
        return self._replace(sort=SortField(sort))

    def with_order(self, order: SortOrder | str) -> SearchParams:
        """Set the sort direction. Raises ``ValueError`` unless asc or desc."""
        return self._replace(order=SortOrder(order))

    def with_page(self, page: int) -> SearchParams:
        return self._replace(page=int(page))


class _WireModel(BaseModel):
    """Base for decoded service payloads: unknown keys are rejected."""

    model_config = {"frozen": True, "extra": "forbid", "populate_by_name": True}

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        # null keeps the zero default, except for flags and timestamps
        if isinstance(data, dict):
            checked = cls._null_checked_keys()
            return {key: value for key, value in data.items() if value is not None or key in checked}
        return data

    @classmethod
    def _null_checked_keys(cls) -> set[str]:
        keys: set[str] = set()
        for name, info in cls.model_fields.items():
            if any(isinstance(meta, PlainValidator) for meta in info.metadata):
                keys.update((name, info.alias or name))
        return keys


class Torrent(_WireModel):
    """A single search result."""

    id: StrictInt = 0
    name: StrictStr = ""
    folder_name: StrictStr = ""
    info_hash: StrictStr = ""
    size: StrictInt = 0
    uploaded_by: StrictStr = ""
    category: StrictStr = ""
    type: StrictStr = ""
    seeders: StrictInt = 0
    leechers: StrictInt = 0
    times_completed: StrictInt = 0
    imdb_id: StrictStr = ""
    tmdb_id: StrictStr = ""
    bhd_rating: StrictFloat = 0.0
    tmdb_rating: StrictFloat = 0.0
    imdb_rating: StrictFloat = 0.0
    tv_pack: Flag = False
    promo25: Flag = False
    promo50: Flag = False
    promo75: Flag = False
    freeleech: Flag = False
    rewind: Flag = False
    refund: Flag = False
    limited: Flag = False
    rescue: Flag = False
    # Dolby Vision
    dv: Flag = False
    hdr10: Flag = False
    hdr10_plus: Flag = Field(default=False, alias="hdr10+")
    hlg: Flag = False
    commentary: Flag = False
    internal: Flag = False
    bumped_at: Timestamp = None
    created_at: Timestamp = None
    url: StrictStr = ""
    download_url: StrictStr = ""


class ApiResponse(_WireModel):
    """Status envelope shared by every API response."""

    # 0 = failed, 1 = success
    status_code: StrictInt = 0
    success: StrictBool = False
    status_message: StrictStr = ""

    def raise_for_status(self) -> None:
        """Raise ``ServiceError`` if the service reported a failed call."""
        if self.status_message:
            raise ServiceError(self.status_message)
        if not self.success:
            raise ServiceError("success != true")


class SearchResponse(ApiResponse):
    """One page of search results."""

    page: StrictInt = 0
    results: list[Torrent] = Field(default_factory=list)
    total_pages: StrictInt = 0
    total_results: StrictInt = 0
