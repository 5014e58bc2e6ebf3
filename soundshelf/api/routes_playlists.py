"""
Soundshelf Playlists API
"""

from typing import Optional

from fastapi import APIRouter, Query, Request, status

from ..core.catalog import resolve_playlist_tracks
from ..core.envelope import success_envelope
from ..core.filters import filter_playlists_by_name
from ..core.pagination import page_info, paginate
from ..schemas.catalog import PlaylistDetail, PlaylistItem, PlaylistListResponse, PlaylistResponse, TrackItem
from ..schemas.common import ErrorResponse
from .deps import error_response, get_api_version, get_catalog, page_params, parse_id

router = APIRouter(prefix="/playlists", tags=["playlists"])

PLAYLIST_NOT_FOUND = "Playlist not found"


@router.get("", response_model=PlaylistListResponse)
@router.get("/", response_model=PlaylistListResponse, include_in_schema=False)
async def list_playlists(
    request: Request,
    name: Optional[str] = Query(default=None, description="Name substring (case-insensitive)"),
    page: Optional[str] = Query(default=None, description="1-based page number"),
    limit: Optional[str] = Query(default=None, description="Page size")
):
    catalog = get_catalog(request)
    page_no, page_size = page_params(request, page, limit)

    filtered = tuple(catalog.playlists)
    if name:
        filtered = filter_playlists_by_name(filtered, name)
    items = paginate(filtered, page_no, page_size)

    return success_envelope(
        [PlaylistItem.from_meta(p) for p in items],
        get_api_version(request),
        page_info(len(filtered), page_no, page_size)
    )


@router.get(
    "/{playlist_id}",
    response_model=PlaylistResponse,
    responses={404: {"model": ErrorResponse, "description": "Playlist not found"}}
)
async def get_playlist(request: Request, playlist_id: str):
    """
    Single playlist with its track ids expanded to track records

    Ids that match no track are returned as null in their position.
    """
    version = get_api_version(request)
    catalog = get_catalog(request)
    pid = parse_id(playlist_id)
    playlist = catalog.get_playlist(pid) if pid is not None else None
    if playlist is None:
        return error_response(PLAYLIST_NOT_FOUND, version, status.HTTP_404_NOT_FOUND)

    resolved = resolve_playlist_tracks(catalog, playlist)
    detail = PlaylistDetail(
        id=playlist.id,
        name=playlist.name,
        tracks=[TrackItem.from_meta(t) if t is not None else None for t in resolved],
        createdBy=playlist.created_by,
        coverImage=playlist.cover_image,
        totalDuration=playlist.total_duration,
        trackCount=playlist.track_count
    )
    return success_envelope(detail, version)
