"""
Soundshelf Tracks API
Track listing, lookup and stream URL routes
"""

from typing import Optional

from fastapi import APIRouter, Query, Request, status

from ..core.envelope import success_envelope
from ..core.filters import filter_tracks
from ..core.pagination import page_info, paginate
from ..schemas.catalog import StreamInfo, StreamResponse, TrackItem, TrackListResponse, TrackResponse
from ..schemas.common import ErrorResponse
from .deps import (
    PrettyJSONResponse,
    error_response,
    get_api_version,
    get_catalog,
    page_params,
    parse_id,
    wants_pretty,
)

router = APIRouter(prefix="/tracks", tags=["tracks"])

TRACK_NOT_FOUND = "Track not found"


@router.get("", response_model=TrackListResponse)
@router.get("/", response_model=TrackListResponse, include_in_schema=False)
async def list_tracks(
    request: Request,
    genre: Optional[str] = Query(default=None, description="Exact genre (case-insensitive)"),
    artist: Optional[str] = Query(default=None, description="Artist name substring (case-insensitive)"),
    page: Optional[str] = Query(default=None, description="1-based page number"),
    limit: Optional[str] = Query(default=None, description="Page size")
):
    """
    Track listing

    - genre and artist filters combine (AND)
    - pagination totals count the filtered tracks
    - ?pretty returns indented JSON
    """
    catalog = get_catalog(request)
    page_no, page_size = page_params(request, page, limit)

    filtered = filter_tracks(catalog.tracks, genre=genre, artist=artist)
    items = paginate(filtered, page_no, page_size)

    body = success_envelope(
        [TrackItem.from_meta(t) for t in items],
        get_api_version(request),
        page_info(len(filtered), page_no, page_size)
    )
    if wants_pretty(request):
        return PrettyJSONResponse(content=TrackListResponse(**body).model_dump())
    return body


@router.get(
    "/{track_id}",
    response_model=TrackResponse,
    responses={404: {"model": ErrorResponse, "description": "Track not found"}}
)
async def get_track(request: Request, track_id: str):
    version = get_api_version(request)
    tid = parse_id(track_id)
    track = get_catalog(request).get_track(tid) if tid is not None else None
    if track is None:
        return error_response(TRACK_NOT_FOUND, version, status.HTTP_404_NOT_FOUND)

    return success_envelope(TrackItem.from_meta(track), version)


@router.get(
    "/{track_id}/stream",
    response_model=StreamResponse,
    responses={404: {"model": ErrorResponse, "description": "Track not found"}}
)
async def get_track_stream(request: Request, track_id: str):
    """Stream URL lookup only; no bytes are served"""
    version = get_api_version(request)
    tid = parse_id(track_id)
    track = get_catalog(request).get_track(tid) if tid is not None else None
    if track is None:
        return error_response(TRACK_NOT_FOUND, version, status.HTTP_404_NOT_FOUND)

    return success_envelope(StreamInfo(streamUrl=track.stream_url), version)
