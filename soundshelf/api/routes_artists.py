"""
Soundshelf Artists API
"""

from typing import Optional

from fastapi import APIRouter, Query, Request, status

from ..core.catalog import tracks_by_artist_name
from ..core.envelope import success_envelope
from ..core.pagination import page_info, paginate
from ..schemas.catalog import ArtistItem, ArtistListResponse, ArtistResponse, ArtistTracksResponse, TrackItem
from ..schemas.common import ErrorResponse
from .deps import error_response, get_api_version, get_catalog, page_params, parse_id

router = APIRouter(prefix="/artists", tags=["artists"])

ARTIST_NOT_FOUND = "Artist not found"


@router.get("", response_model=ArtistListResponse)
@router.get("/", response_model=ArtistListResponse, include_in_schema=False)
async def list_artists(
    request: Request,
    page: Optional[str] = Query(default=None, description="1-based page number"),
    limit: Optional[str] = Query(default=None, description="Page size")
):
    catalog = get_catalog(request)
    page_no, page_size = page_params(request, page, limit)

    items = paginate(catalog.artists, page_no, page_size)

    return success_envelope(
        [ArtistItem.from_meta(a) for a in items],
        get_api_version(request),
        page_info(len(catalog.artists), page_no, page_size)
    )


@router.get(
    "/{artist_id}",
    response_model=ArtistResponse,
    responses={404: {"model": ErrorResponse, "description": "Artist not found"}}
)
async def get_artist(request: Request, artist_id: str):
    version = get_api_version(request)
    aid = parse_id(artist_id)
    artist = get_catalog(request).get_artist(aid) if aid is not None else None
    if artist is None:
        return error_response(ARTIST_NOT_FOUND, version, status.HTTP_404_NOT_FOUND)

    return success_envelope(ArtistItem.from_meta(artist), version)


@router.get(
    "/{artist_id}/tracks",
    response_model=ArtistTracksResponse,
    responses={404: {"model": ErrorResponse, "description": "Artist not found"}}
)
async def get_artist_tracks(request: Request, artist_id: str):
    """
    Tracks by an artist

    Tracks are matched on the exact artist name (not paginated).
    """
    version = get_api_version(request)
    catalog = get_catalog(request)
    aid = parse_id(artist_id)
    artist = catalog.get_artist(aid) if aid is not None else None
    if artist is None:
        return error_response(ARTIST_NOT_FOUND, version, status.HTTP_404_NOT_FOUND)

    tracks = tracks_by_artist_name(catalog, artist.name)
    return success_envelope([TrackItem.from_meta(t) for t in tracks], version)
