"""
Soundshelf Catalog Loader
Builds the read-only CatalogRegistry from a JSON file or the sample dataset
"""

import json
import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, TypeVar

from .catalog import ArtistMeta, CatalogRegistry, PlaylistMeta, TrackMeta
from .pagination import parse_int_text
from .sample_data import SAMPLE_CATALOG
from ..utils.timing import Timer

logger = logging.getLogger(__name__)

R = TypeVar("R")


def _parse_id(value: Any) -> Optional[int]:
    """
    Integer id parsing (None if not an integer)

    Integral floats (2.0) are accepted; fractional ones (1.9) are not truncated.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        return parse_int_text(value)
    return None


def _as_int(value: Any, default: int = 0) -> int:
    try:
        return int(value)
    except (ValueError, TypeError):
        return default


def _as_str(value: Any, default: str = "") -> str:
    return str(value) if value is not None else default


def _parse_track(item: Dict[str, Any], track_id: int) -> TrackMeta:
    return TrackMeta(
        id=track_id,
        title=_as_str(item.get("title"), "Unknown"),
        artist=_as_str(item.get("artist"), "Unknown"),
        genre=_as_str(item.get("genre")),
        duration=_as_int(item.get("duration")),
        file_url=_as_str(item.get("fileUrl")),
        stream_url=_as_str(item.get("streamUrl")),
        thumbnail_url=_as_str(item.get("thumbnailUrl")),
        download_url=_as_str(item.get("downloadUrl")),
        format=_as_str(item.get("format")),
        bitrate=_as_int(item.get("bitrate")),
        size=_as_int(item.get("size"))
    )


def _parse_artist(item: Dict[str, Any], artist_id: int) -> ArtistMeta:
    links = item.get("socialLinks")
    social_links = None
    if isinstance(links, dict) and links:
        social_links = {str(k): str(v) for k, v in links.items()}
    return ArtistMeta(
        id=artist_id,
        name=_as_str(item.get("name"), "Unknown"),
        genre=_as_str(item.get("genre")),
        country=_as_str(item.get("country")),
        profile_image=_as_str(item.get("profileImage")),
        social_links=social_links
    )


def _parse_playlist(item: Dict[str, Any], playlist_id: int) -> PlaylistMeta:
    raw_tracks = item.get("tracks") or []
    track_ids = []
    for raw in raw_tracks if isinstance(raw_tracks, list) else []:
        tid = _parse_id(raw)
        if tid is None:
            logger.warning(f"Playlist {playlist_id}: skipping non-integer track id {raw!r}")
            continue
        track_ids.append(tid)
    return PlaylistMeta(
        id=playlist_id,
        name=_as_str(item.get("name"), "Untitled"),
        tracks=tuple(track_ids),
        created_by=_as_str(item.get("createdBy")),
        cover_image=_as_str(item.get("coverImage")),
        total_duration=_as_int(item.get("totalDuration")),
        track_count=_as_int(item.get("trackCount"), default=len(track_ids))
    )


def _parse_records(
    items: Any,
    kind: str,
    parse: Callable[[Dict[str, Any], int], R]
) -> List[R]:
    """Parse one collection, skipping invalid entries and duplicate ids"""
    records: List[R] = []
    seen = set()
    if not isinstance(items, list):
        if items is not None:
            logger.warning(f"'{kind}' is not a list, ignoring")
        return records

    for item in items:
        if not isinstance(item, dict):
            continue

        record_id = _parse_id(item.get("id"))
        if record_id is None:
            logger.debug(f"Skipping {kind} without integer id: {item.get('id')!r}")
            continue

        # duplicate ids keep the first occurrence
        if record_id in seen:
            logger.debug(f"Skipping duplicate {kind} id: {record_id}")
            continue
        seen.add(record_id)

        records.append(parse(item, record_id))
    return records


def build_catalog(data: Dict[str, Any]) -> CatalogRegistry:
    """
    Build a registry from a {tracks, artists, playlists} document.

    Args:
        data: decoded JSON with camelCase record keys

    Returns:
        CatalogRegistry: immutable catalog
    """
    registry = CatalogRegistry(
        tracks=tuple(_parse_records(data.get("tracks"), "track", _parse_track)),
        artists=tuple(_parse_records(data.get("artists"), "artist", _parse_artist)),
        playlists=tuple(_parse_records(data.get("playlists"), "playlist", _parse_playlist))
    )
    check_soft_references(registry)
    return registry


def check_soft_references(registry: CatalogRegistry) -> int:
    """
    Report (never enforce) catalog soft invariants.

    Returns:
        Number of warnings logged
    """
    warnings = 0
    artist_names = {a.name for a in registry.artists}
    track_ids = {t.id for t in registry.tracks}

    for track in registry.tracks:
        if track.artist not in artist_names:
            logger.warning(f"Track {track.id} artist '{track.artist}' matches no artist name")
            warnings += 1

    for playlist in registry.playlists:
        if playlist.track_count != len(playlist.tracks):
            logger.warning(
                f"Playlist {playlist.id} trackCount={playlist.track_count} "
                f"but lists {len(playlist.tracks)} tracks"
            )
            warnings += 1
        missing = [tid for tid in playlist.tracks if tid not in track_ids]
        if missing:
            logger.warning(f"Playlist {playlist.id} references unknown track ids: {missing}")
            warnings += 1

    return warnings


def load_sample_catalog() -> CatalogRegistry:
    """Built-in sample catalog"""
    return build_catalog(SAMPLE_CATALOG)


def _read_catalog(path: str, sample_fallback: bool) -> CatalogRegistry:
    file_path = Path(path) if path else None

    if file_path and file_path.exists():
        try:
            logger.info(f"Loading catalog: {file_path}")
            with open(file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError("catalog root must be an object")
            return build_catalog(data)
        except Exception as e:
            logger.error(f"Catalog load failed: {e}")
            if not sample_fallback:
                raise RuntimeError(f"Catalog load failed: {e}") from e
    elif file_path:
        logger.warning(f"Catalog file not found: {path}")
        if not sample_fallback:
            raise RuntimeError(f"Catalog file not found: {path}")
    elif not sample_fallback:
        raise RuntimeError("CATALOG_PATH is not set and sample fallback is disabled")

    logger.warning("Serving built-in sample catalog")
    return load_sample_catalog()


def load_catalog(path: str, sample_fallback: bool) -> CatalogRegistry:
    """
    Load the catalog once at startup.

    Args:
        path: JSON file path (may be empty)
        sample_fallback: serve the sample dataset if the file is unset or unreadable

    Returns:
        CatalogRegistry
    """
    with Timer() as timer:
        registry = _read_catalog(path, sample_fallback)
    logger.info(
        f"Catalog loaded in {timer}: tracks={len(registry.tracks)}, "
        f"artists={len(registry.artists)}, playlists={len(registry.playlists)}"
    )
    return registry
