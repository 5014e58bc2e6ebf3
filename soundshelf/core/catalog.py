"""
Soundshelf Catalog Registry
Read-only in-memory records for tracks, artists and playlists
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class TrackMeta:
    """Track record"""
    id: int
    title: str
    artist: str  # artist name, soft reference to ArtistMeta.name
    genre: str
    duration: int  # seconds
    file_url: str = ""
    stream_url: str = ""
    thumbnail_url: str = ""
    download_url: str = ""
    format: str = ""
    bitrate: int = 0  # kbps
    size: int = 0  # bytes


@dataclass(frozen=True)
class ArtistMeta:
    """Artist record"""
    id: int
    name: str
    genre: str
    country: str
    profile_image: str = ""
    social_links: Optional[Dict[str, str]] = None


@dataclass(frozen=True)
class PlaylistMeta:
    """Playlist record"""
    id: int
    name: str
    tracks: Tuple[int, ...]  # ordered track ids
    created_by: str
    cover_image: str = ""
    total_duration: int = 0  # seconds
    track_count: int = 0  # stored as given, not recomputed


@dataclass(frozen=True)
class CatalogRegistry:
    """
    Immutable catalog held for the whole process lifetime.

    Collections are small, so lookups are linear scans in catalog order.
    """
    tracks: Tuple[TrackMeta, ...] = field(default_factory=tuple)
    artists: Tuple[ArtistMeta, ...] = field(default_factory=tuple)
    playlists: Tuple[PlaylistMeta, ...] = field(default_factory=tuple)

    def get_track(self, track_id: int) -> Optional[TrackMeta]:
        return next((t for t in self.tracks if t.id == track_id), None)

    def get_artist(self, artist_id: int) -> Optional[ArtistMeta]:
        return next((a for a in self.artists if a.id == artist_id), None)

    def get_playlist(self, playlist_id: int) -> Optional[PlaylistMeta]:
        return next((p for p in self.playlists if p.id == playlist_id), None)


def tracks_by_artist_name(registry: CatalogRegistry, artist_name: str) -> Tuple[TrackMeta, ...]:
    """
    Join an artist to its tracks.

    Tracks reference artists by name, so this is an exact name match.
    Handlers go through here only, keeping the join swappable for id-based keys.
    """
    return tuple(t for t in registry.tracks if t.artist == artist_name)


def resolve_playlist_tracks(
    registry: CatalogRegistry,
    playlist: PlaylistMeta
) -> Tuple[Optional[TrackMeta], ...]:
    """
    Expand a playlist's track ids into track records.

    Ids with no matching track become None so positions stay aligned with the id list.
    """
    return tuple(registry.get_track(track_id) for track_id in playlist.tracks)
