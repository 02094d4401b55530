import httpx
import pytest
from fastapi.testclient import TestClient

from playlist_grid.config import Settings
from playlist_grid.main import app, get_http_client, get_settings


def make_playlist_item(video_id, title=None, description="", published_at="2024-03-05T10:00:00Z"):
    return {
        "id": f"item-{video_id}",
        "snippet": {
            "title": title or f"Video {video_id}",
            "description": description,
            "publishedAt": published_at,
            "thumbnails": {"high": {"url": f"https://i.ytimg.com/vi/{video_id}/hqdefault.jpg"}},
        },
        "contentDetails": {"videoId": video_id},
    }


def make_video(video_id, duration="PT4M13S", view_count="1234"):
    return {
        "id": video_id,
        "contentDetails": {"duration": duration},
        "statistics": {"viewCount": view_count},
    }


class FakeYouTube:
    """Serves playlistItems pages and videos lookups through httpx.MockTransport.

    Args:
        pages: list of pages, each a list of raw playlistItems resources
        videos: raw videos resources, returned when their id is requested
        failures: maps ("playlistItems", page_index) or ("videos", call_index) to a status code
        raw_bodies: same keys as failures, mapped to a non-JSON body served with status 200
    """

    def __init__(self, pages=None, videos=None, failures=None):
        self.pages = pages or [[]]
        self.videos = {v["id"]: v for v in (videos or [])}
        self.failures = failures or {}
        self.raw_bodies = {}
        self.requests = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        endpoint = request.url.path.rsplit("/", 1)[-1]

        if endpoint == "playlistItems":
            token = request.url.params.get("pageToken")
            index = int(token.split("-")[1]) if token else 0
            if ("playlistItems", index) in self.raw_bodies:
                return httpx.Response(200, text=self.raw_bodies[("playlistItems", index)])
            status = self.failures.get(("playlistItems", index))
            if status:
                return httpx.Response(status, json={"error": {"code": status}})
            body = {"items": self.pages[index]}
            if index + 1 < len(self.pages):
                body["nextPageToken"] = f"page-{index + 1}"
            return httpx.Response(200, json=body)

        if endpoint == "videos":
            index = len(self.video_requests) - 1
            if ("videos", index) in self.raw_bodies:
                return httpx.Response(200, text=self.raw_bodies[("videos", index)])
            status = self.failures.get(("videos", index))
            if status:
                return httpx.Response(status, json={"error": {"code": status}})
            ids = request.url.params["id"].split(",")
            return httpx.Response(200, json={"items": [self.videos[i] for i in ids if i in self.videos]})

        return httpx.Response(404)

    @property
    def playlist_requests(self):
        return [r for r in self.requests if r.url.path.endswith("/playlistItems")]

    @property
    def video_requests(self):
        return [r for r in self.requests if r.url.path.endswith("/videos")]

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def settings():
    return Settings(youtube_api_key="test-key", youtube_playlist_id="PL123")


@pytest.fixture
def fake_youtube():
    items = [make_playlist_item(f"vid{i}") for i in range(1, 4)]
    videos = [make_video(f"vid{i}") for i in range(1, 4)]
    return FakeYouTube(pages=[items], videos=videos)


@pytest.fixture
def client(settings, fake_youtube):
    async def override_http_client():
        async with fake_youtube.client() as http_client:
            yield http_client

    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_http_client] = override_http_client
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
