"""
Soundshelf Query Filters
Pure narrowing functions over catalog collections
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from .catalog import ArtistMeta, CatalogRegistry, PlaylistMeta, TrackMeta


@dataclass(frozen=True)
class SearchResult:
    """Global search hits, grouped per resource"""
    tracks: Tuple[TrackMeta, ...]
    artists: Tuple[ArtistMeta, ...]
    playlists: Tuple[PlaylistMeta, ...]


def _normalize_text(text: str) -> str:
    """Text normalization for matching"""
    return text.lower()


def filter_tracks_by_genre(tracks: Sequence[TrackMeta], genre: str) -> Tuple[TrackMeta, ...]:
    """Case-insensitive exact genre match"""
    wanted = _normalize_text(genre)
    return tuple(t for t in tracks if _normalize_text(t.genre) == wanted)


def filter_tracks_by_artist(tracks: Sequence[TrackMeta], artist: str) -> Tuple[TrackMeta, ...]:
    """Case-insensitive substring match on the track's artist name"""
    wanted = _normalize_text(artist)
    return tuple(t for t in tracks if wanted in _normalize_text(t.artist))


def filter_playlists_by_name(playlists: Sequence[PlaylistMeta], name: str) -> Tuple[PlaylistMeta, ...]:
    """Case-insensitive substring match on the playlist name"""
    wanted = _normalize_text(name)
    return tuple(p for p in playlists if wanted in _normalize_text(p.name))


def filter_tracks(
    tracks: Sequence[TrackMeta],
    genre: Optional[str] = None,
    artist: Optional[str] = None
) -> Tuple[TrackMeta, ...]:
    """
    Apply the track listing filters.

    Empty or missing values are ignored; when both are given both must match.
    """
    result = tuple(tracks)
    if genre:
        result = filter_tracks_by_genre(result, genre)
    if artist:
        result = filter_tracks_by_artist(result, artist)
    return result


def search_catalog(registry: CatalogRegistry, query: str) -> SearchResult:
    """
    Free-text search across all resources.

    - tracks: title or artist contains the query
    - artists: name or genre contains the query
    - playlists: name contains the query

    Raises:
        ValueError: query is empty or whitespace
    """
    q = _normalize_text(query or "").strip()
    if not q:
        raise ValueError("Search query is required")

    tracks = tuple(
        t for t in registry.tracks
        if q in _normalize_text(t.title) or q in _normalize_text(t.artist)
    )
    artists = tuple(
        a for a in registry.artists
        if q in _normalize_text(a.name) or q in _normalize_text(a.genre)
    )
    playlists = tuple(p for p in registry.playlists if q in _normalize_text(p.name))

    return SearchResult(tracks=tracks, artists=artists, playlists=playlists)
