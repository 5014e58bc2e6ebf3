import pytest

from soundshelf.core.catalog import resolve_playlist_tracks, tracks_by_artist_name
from soundshelf.core.filters import (
    filter_playlists_by_name,
    filter_tracks,
    filter_tracks_by_artist,
    filter_tracks_by_genre,
    search_catalog,
)



def ids(records):
    return [r.id for r in records]


def test_genre_filter_is_case_insensitive_exact(catalog):
    assert ids(filter_tracks_by_genre(catalog.tracks, "POP")) == [1, 2, 3]
    assert ids(filter_tracks_by_genre(catalog.tracks, "po")) == []


def test_genre_filter_is_idempotent(catalog):
    once = filter_tracks_by_genre(catalog.tracks, "pop")
    twice = filter_tracks_by_genre(once, "pop")
    assert once == twice


def test_artist_filter_matches_substring(catalog):
    assert ids(filter_tracks_by_artist(catalog.tracks, "weeknd")) == [1, 2]
    assert ids(filter_tracks_by_artist(catalog.tracks, "QUEEN")) == [4]


def test_filters_compose_with_and(catalog):
    assert ids(filter_tracks(catalog.tracks, genre="pop", artist="dua")) == [3]
    assert ids(filter_tracks(catalog.tracks, genre="rock", artist="dua")) == []


def test_empty_filters_are_ignored(catalog):
    assert ids(filter_tracks(catalog.tracks, genre="", artist=None)) == [1, 2, 3, 4, 5]


def test_playlist_name_filter(catalog):
    assert ids(filter_playlists_by_name(catalog.playlists, "ROCK")) == [2]


def test_search_matches_across_resources(catalog):
    result = search_catalog(catalog, "Weeknd")
    assert ids(result.tracks) == [1, 2]
    assert ids(result.artists) == [1]
    assert result.playlists == ()


def test_search_matches_artist_genre_and_playlist_name(catalog):
    result = search_catalog(catalog, "rock")
    assert ids(result.artists) == [3]
    assert ids(result.playlists) == [2]
    assert result.tracks == ()


@pytest.mark.parametrize("query", ["", "   ", None])
def test_search_requires_query(catalog, query):
    with pytest.raises(ValueError):
        search_catalog(catalog, query)


def test_artist_join_uses_exact_name(catalog):
    assert ids(tracks_by_artist_name(catalog, "The Weeknd")) == [1, 2]
    assert tracks_by_artist_name(catalog, "the weeknd") == ()


def test_playlist_resolution_keeps_unknown_ids_as_none(catalog):
    playlist = catalog.get_playlist(3)
    resolved = resolve_playlist_tracks(catalog, playlist)
    assert [t.id if t else None for t in resolved] == [3, None, 1]
