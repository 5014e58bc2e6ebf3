"""
Soundshelf Search API
Free-text search across tracks, artists and playlists
"""

from typing import Optional

from fastapi import APIRouter, Query, Request, status

from ..core.envelope import success_envelope
from ..core.filters import search_catalog
from ..schemas.catalog import ArtistItem, PlaylistItem, SearchData, SearchResponse, TrackItem
from ..schemas.common import ErrorResponse
from .deps import error_response, get_api_version, get_catalog

router = APIRouter(tags=["search"])


@router.get(
    "/search",
    response_model=SearchResponse,
    responses={400: {"model": ErrorResponse, "description": "Search query is required"}}
)
async def search(
    request: Request,
    q: Optional[str] = Query(default=None, description="Search text (case-insensitive)")
):
    """
    Global search

    - tracks: title or artist
    - artists: name or genre
    - playlists: name
    """
    version = get_api_version(request)

    try:
        result = search_catalog(get_catalog(request), q or "")
    except ValueError as e:
        return error_response(str(e), version, status.HTTP_400_BAD_REQUEST)

    data = SearchData(
        tracks=[TrackItem.from_meta(t) for t in result.tracks],
        artists=[ArtistItem.from_meta(a) for a in result.artists],
        playlists=[PlaylistItem.from_meta(p) for p in result.playlists]
    )
    return success_envelope(data, version)
