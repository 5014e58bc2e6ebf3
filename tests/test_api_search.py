import pytest


@pytest.mark.asyncio
async def test_search_finds_artist_and_tracks(client):
    response = await client.get("/api/v1/search", params={"q": "weeknd"})
    assert response.status_code == 200
    data = response.json()["data"]
    assert [t["id"] for t in data["tracks"]] == [1, 2]
    assert [a["name"] for a in data["artists"]] == ["The Weeknd"]
    assert data["playlists"] == []


@pytest.mark.asyncio
async def test_search_playlists_and_artist_genre(client):
    response = await client.get("/api/v1/search", params={"q": "Rock"})
    data = response.json()["data"]
    assert [a["id"] for a in data["artists"]] == [3]
    assert [p["name"] for p in data["playlists"]] == ["Rock Classics"]


@pytest.mark.asyncio
@pytest.mark.parametrize("params", [{}, {"q": ""}, {"q": "   "}])
async def test_search_without_query_is_400(client, params):
    response = await client.get("/api/v1/search", params=params)
    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "Search query is required", "version": "1.0"}


@pytest.mark.asyncio
async def test_search_with_no_hits(client):
    response = await client.get("/api/v1/search", params={"q": "zzzz"})
    assert response.status_code == 200
    assert response.json()["data"] == {"tracks": [], "artists": [], "playlists": []}
