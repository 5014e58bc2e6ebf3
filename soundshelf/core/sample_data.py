"""
Soundshelf Sample Catalog
Built-in dataset served when no catalog file is configured
"""

from typing import Any, Dict

_CDN = "https://cdn.soundshelf.local"


def _track(track_id: int, title: str, artist: str, genre: str, duration: int,
           bitrate: int = 320) -> Dict[str, Any]:
    slug = f"track-{track_id}"
    return {
        "id": track_id,
        "title": title,
        "artist": artist,
        "genre": genre,
        "duration": duration,
        "fileUrl": f"{_CDN}/files/{slug}.mp3",
        "streamUrl": f"{_CDN}/stream/{slug}",
        "thumbnailUrl": f"{_CDN}/thumbs/{slug}.jpg",
        "downloadUrl": f"{_CDN}/download/{slug}.mp3",
        "format": "mp3",
        "bitrate": bitrate,
        # bytes = kbps * 1000 / 8 * seconds
        "size": bitrate * 125 * duration,
    }


SAMPLE_CATALOG: Dict[str, Any] = {
    "tracks": [
        _track(1, "Blinding Lights", "The Weeknd", "Pop", 200),
        _track(2, "Save Your Tears", "The Weeknd", "Pop", 215),
        _track(3, "Levitating", "Dua Lipa", "Pop", 203),
        _track(4, "Bohemian Rhapsody", "Queen", "Rock", 354),
        _track(5, "Don't Stop Me Now", "Queen", "Rock", 209),
        _track(6, "Lose Yourself", "Eminem", "Hip-Hop", 326),
        _track(7, "So What", "Miles Davis", "Jazz", 562, bitrate=256),
        _track(8, "Starboy", "The Weeknd", "R&B", 230),
        _track(9, "Physical", "Dua Lipa", "Pop", 193),
        _track(10, "Blue in Green", "Miles Davis", "Jazz", 337, bitrate=256),
        _track(11, "Under Pressure", "Queen", "Rock", 248),
        _track(12, "Mockingbird", "Eminem", "Hip-Hop", 251),
    ],
    "artists": [
        {
            "id": 1,
            "name": "The Weeknd",
            "genre": "R&B",
            "country": "Canada",
            "profileImage": f"{_CDN}/artists/the-weeknd.jpg",
            "socialLinks": {
                "instagram": "https://instagram.com/theweeknd",
                "twitter": "https://twitter.com/theweeknd",
            },
        },
        {
            "id": 2,
            "name": "Dua Lipa",
            "genre": "Pop",
            "country": "United Kingdom",
            "profileImage": f"{_CDN}/artists/dua-lipa.jpg",
            "socialLinks": {"instagram": "https://instagram.com/dualipa"},
        },
        {
            "id": 3,
            "name": "Queen",
            "genre": "Rock",
            "country": "United Kingdom",
            "profileImage": f"{_CDN}/artists/queen.jpg",
        },
        {
            "id": 4,
            "name": "Eminem",
            "genre": "Hip-Hop",
            "country": "United States",
            "profileImage": f"{_CDN}/artists/eminem.jpg",
        },
        {
            "id": 5,
            "name": "Miles Davis",
            "genre": "Jazz",
            "country": "United States",
            "profileImage": f"{_CDN}/artists/miles-davis.jpg",
        },
    ],
    "playlists": [
        {
            "id": 1,
            "name": "Late Night Drive",
            "tracks": [1, 2, 8],
            "createdBy": "soundshelf",
            "coverImage": f"{_CDN}/playlists/late-night-drive.jpg",
            "totalDuration": 645,
            "trackCount": 3,
        },
        {
            "id": 2,
            "name": "Classic Rock Anthems",
            "tracks": [4, 5, 11],
            "createdBy": "soundshelf",
            "coverImage": f"{_CDN}/playlists/classic-rock.jpg",
            "totalDuration": 811,
            "trackCount": 3,
        },
        {
            "id": 3,
            "name": "Jazz Evenings",
            "tracks": [7, 10],
            "createdBy": "soundshelf",
            "coverImage": f"{_CDN}/playlists/jazz-evenings.jpg",
            "totalDuration": 899,
            "trackCount": 2,
        },
        {
            "id": 4,
            "name": "Pop Workout",
            "tracks": [3, 9, 1, 6],
            "createdBy": "soundshelf",
            "coverImage": f"{_CDN}/playlists/pop-workout.jpg",
            "totalDuration": 922,
            "trackCount": 4,
        },
    ],
}
