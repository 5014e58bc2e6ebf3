"""
Soundshelf Catalog Schemas
Track, artist and playlist response models
"""

from typing import Dict, List, Optional
from pydantic import BaseModel

from ..core.catalog import ArtistMeta, PlaylistMeta, TrackMeta
from .common import PaginationInfo


class TrackItem(BaseModel):
    """Track"""
    id: int
    title: str
    artist: str
    genre: str
    duration: int
    fileUrl: str
    streamUrl: str
    thumbnailUrl: str
    downloadUrl: str
    format: str
    bitrate: int
    size: int

    @classmethod
    def from_meta(cls, meta: TrackMeta) -> "TrackItem":
        return cls(
            id=meta.id,
            title=meta.title,
            artist=meta.artist,
            genre=meta.genre,
            duration=meta.duration,
            fileUrl=meta.file_url,
            streamUrl=meta.stream_url,
            thumbnailUrl=meta.thumbnail_url,
            downloadUrl=meta.download_url,
            format=meta.format,
            bitrate=meta.bitrate,
            size=meta.size
        )


class ArtistItem(BaseModel):
    """Artist"""
    id: int
    name: str
    genre: str
    country: str
    profileImage: str
    socialLinks: Optional[Dict[str, str]] = None

    @classmethod
    def from_meta(cls, meta: ArtistMeta) -> "ArtistItem":
        return cls(
            id=meta.id,
            name=meta.name,
            genre=meta.genre,
            country=meta.country,
            profileImage=meta.profile_image,
            socialLinks=dict(meta.social_links) if meta.social_links else None
        )


class PlaylistItem(BaseModel):
    """Playlist as listed (raw track ids)"""
    id: int
    name: str
    tracks: List[int]
    createdBy: str
    coverImage: str
    totalDuration: int
    trackCount: int

    @classmethod
    def from_meta(cls, meta: PlaylistMeta) -> "PlaylistItem":
        return cls(
            id=meta.id,
            name=meta.name,
            tracks=list(meta.tracks),
            createdBy=meta.created_by,
            coverImage=meta.cover_image,
            totalDuration=meta.total_duration,
            trackCount=meta.track_count
        )


class PlaylistDetail(BaseModel):
    """Playlist with track ids expanded; unknown ids are null"""
    id: int
    name: str
    tracks: List[Optional[TrackItem]]
    createdBy: str
    coverImage: str
    totalDuration: int
    trackCount: int


class StreamInfo(BaseModel):
    """Stream lookup result"""
    streamUrl: str


class SearchData(BaseModel):
    """Global search hits"""
    tracks: List[TrackItem]
    artists: List[ArtistItem]
    playlists: List[PlaylistItem]


# Envelopes

class TrackListResponse(BaseModel):
    success: bool
    data: List[TrackItem]
    version: str
    pagination: PaginationInfo


class TrackResponse(BaseModel):
    success: bool
    data: TrackItem
    version: str


class StreamResponse(BaseModel):
    success: bool
    data: StreamInfo
    version: str


class ArtistListResponse(BaseModel):
    success: bool
    data: List[ArtistItem]
    version: str
    pagination: PaginationInfo


class ArtistResponse(BaseModel):
    success: bool
    data: ArtistItem
    version: str


class ArtistTracksResponse(BaseModel):
    success: bool
    data: List[TrackItem]
    version: str


class PlaylistListResponse(BaseModel):
    success: bool
    data: List[PlaylistItem]
    version: str
    pagination: PaginationInfo


class PlaylistResponse(BaseModel):
    success: bool
    data: PlaylistDetail
    version: str


class SearchResponse(BaseModel):
    success: bool
    data: SearchData
    version: str
