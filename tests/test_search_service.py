# /tests/test_search_service.py

from api.services.search_service import SearchService


def names(results):
    return [artist.name for artist in results]


def test_search_by_name_is_case_insensitive(artists):
    assert names(SearchService.search_artists(artists, "queen")) == ["Queen"]
    assert names(SearchService.search_artists(artists, "PINK")) == ["Pink Floyd"]


def test_search_by_member(artists):
    assert names(SearchService.search_artists(artists, "gilmour")) == ["Pink Floyd"]


def test_search_by_locations_url(artists):
    assert names(SearchService.search_artists(artists, "locations/2")) == ["SOJA"]


def test_search_by_concert_dates_url(artists):
    assert names(SearchService.search_artists(artists, "dates/3")) == ["Pink Floyd"]


def test_search_by_creation_year_requires_exact_match(artists):
    assert names(SearchService.search_artists(artists, "1997")) == ["SOJA"]
    assert SearchService.search_artists(artists, "199") == []


def test_artist_matching_several_fields_is_listed_once(artists):
    # "roger" matches a Queen member and a Pink Floyd member; "o" matches nearly everything
    assert names(SearchService.search_artists(artists, "roger")) == ["Queen", "Pink Floyd"]
    assert names(SearchService.search_artists(artists, "o")) == ["Queen", "SOJA", "Pink Floyd"]


def test_search_without_match_is_empty(artists):
    assert SearchService.search_artists(artists, "metallica") == []


def test_search_dates_first_album(artists):
    results = SearchService.search_dates(artists, "1973")
    assert [(r.name, r.type) for r in results] == [("Queen", "first album date")]


def test_search_dates_creation_date_substring(artists):
    results = SearchService.search_dates(artists, "196")
    assert [(r.name, r.type) for r in results] == [
        ("Pink Floyd", "first album date"),
        ("Pink Floyd", "creation date"),
    ]


def test_search_dates_can_match_both_fields(artists):
    results = SearchService.search_dates(artists, "19")
    assert len(results) == 5
    assert {r.type for r in results} == {"first album date", "creation date"}


def test_search_dates_without_match(artists):
    assert SearchService.search_dates(artists, "2050") == []
