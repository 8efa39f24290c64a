"""Tests for the request body encoder."""

from __future__ import annotations

import json
from typing import Any

import pytest
from pydantic import BaseModel, Field

from bhdapi.encoder import encode_params
from bhdapi.enums import SortField, SortOrder
from bhdapi.exceptions import EncodeError
from bhdapi.models import SearchParams, search

ALL_FIELDS: dict[str, Any] = {
    "search": "fight club",
    "info_hash": "abc",
    "folder_name": "Fight.Club",
    "file_name": "fc.mkv",
    "size": 123456789012,
    "uploaded_by": "someone",
    "imdb_id": "tt0137523",
    "tmdb_id": "550",
    "categories": ["Movies"],
    "types": ["BD Remux", "1080p"],
    "sources": ["Blu-ray"],
    "genres": ["Drama"],
    "groups": ["FraMeSToR"],
    "freeleech": True,
    "limited": True,
    "promo25": True,
    "promo50": True,
    "promo75": True,
    "refund": True,
    "rescue": True,
    "rewind": True,
    "stream": True,
    "sd": True,
    "pack": True,
    "h_264": True,
    "h_265": True,
    "features": ["DV", "HDR10"],
    "alive": True,
    "dying": True,
    "dead": True,
    "reseed": True,
    "seeding": True,
    "leeching": True,
    "completed": True,
    "incomplete": True,
    "notdownloaded": True,
    "min_bhd": 5,
    "vote_bhd": 10,
    "min_imdb": 6,
    "vote_imdb": 100,
    "min_tmdb": 7,
    "vote_tmdb": 50,
    "min_year": 1990,
    "max_year": 2000,
    "countries": ["United States of America"],
    "languages": ["English"],
    "audios": ["English", "French"],
    "subtitles": ["Dutch", "Finnish"],
    "sort": "seeders",
    "order": "asc",
    "page": 2,
}


class TestEncodeParams:
    def test_empty_params(self) -> None:
        assert encode_params(SearchParams(), "search") == {"action": "search"}

    def test_empty_params_with_rss_key(self) -> None:
        assert encode_params(SearchParams(), "search", rss_key="rss") == {"action": "search", "rsskey": "rss"}

    def test_empty_rss_key_not_injected(self) -> None:
        assert encode_params(SearchParams(), "search", rss_key="") == {"action": "search"}

    def test_mixed_kinds(self) -> None:
        params = SearchParams(search="x", categories=["TV", "Movies"], freeleech=True, min_year=2020)
        assert encode_params(params, "search") == {
            "action": "search",
            "search": "x",
            "categories": "TV,Movies",
            "freeleech": 1,
            "min_year": 2020,
        }

    def test_flag_is_json_number(self) -> None:
        body = json.dumps(encode_params(SearchParams().with_freeleech(), "search"))
        assert '"freeleech": 1' in body

    def test_every_field_uses_wire_name(self) -> None:
        params = SearchParams.model_validate(ALL_FIELDS)
        body = encode_params(params, "search")

        expected = {"action": "search"}
        for key, value in ALL_FIELDS.items():
            if isinstance(value, list):
                value = ",".join(value)
            elif value is True:
                value = 1
            expected[key] = value
        assert body == expected

    def test_zero_fields_absent(self) -> None:
        zeroed = {"categories": [], "size": 0, "freeleech": False, "search": ""}
        params = SearchParams.model_validate({**ALL_FIELDS, **zeroed})
        body = encode_params(params, "search")
        for key in ("categories", "size", "freeleech", "search"):
            assert key not in body
        assert body["types"] == "BD Remux,1080p"

    def test_size_zero_omitted_one_emitted(self) -> None:
        assert "size" not in encode_params(SearchParams().with_size(0), "search")
        assert encode_params(SearchParams().with_size(1), "search")["size"] == 1

    def test_empty_list_omitted(self) -> None:
        assert "genres" not in encode_params(SearchParams().with_genres(), "search")

    def test_enums_use_value(self) -> None:
        body = encode_params(search("x").with_sort(SortField.BHD_RATING).with_order(SortOrder.DESC), "search")
        assert body["sort"] == "bhd_rating"
        assert body["order"] == "desc"
        assert json.dumps(body)

    def test_unknown_type_raises(self) -> None:
        class Ratios(BaseModel):
            ratio: float = 1.5

        with pytest.raises(EncodeError, match="unknown type float"):
            encode_params(Ratios(), "search")

    def test_skipped_fields(self) -> None:
        class Custom(BaseModel):
            visible: str = "yes"
            hidden: str = Field(default="no", alias="-")
            internal: str = Field(default="no", exclude=True)

        assert encode_params(Custom(), "custom") == {"action": "custom", "visible": "yes"}

    def test_rejects_non_model(self) -> None:
        with pytest.raises(EncodeError):
            encode_params({"search": "x"}, "search")  # type: ignore[arg-type]
