import logging
from typing import Dict, List, Optional

import httpx

from ..errors import NetworkFetchFailed
from ..models import (
    DEFAULT_DURATION,
    DEFAULT_VIEW_COUNT,
    EnrichedVideo,
    PlaylistItem,
    VideoDetails,
)

logger = logging.getLogger(__name__)

YOUTUBE_API_BASE = "https://www.googleapis.com/youtube/v3"
PAGE_SIZE = 50
# videos.list rejects more ids than this in a single call
DETAIL_BATCH_SIZE = 50


async def _get(client: httpx.AsyncClient, endpoint: str, params: dict, stage: str) -> dict:
    url = f"{YOUTUBE_API_BASE}/{endpoint}"
    try:
        response = await client.get(url, params=params)
    except httpx.HTTPError as e:
        logger.error(f"Request to {endpoint} failed: {e}")
        raise NetworkFetchFailed(None, stage, str(e)) from e

    if not response.is_success:
        logger.error(f"{endpoint} returned {response.status_code} {response.reason_phrase}")
        raise NetworkFetchFailed(response.status_code, stage, response.reason_phrase)

    try:
        return response.json()
    except ValueError as e:
        # Captive portals and proxies answer 200 with an HTML page
        logger.error(f"{endpoint} returned a body that is not JSON")
        raise NetworkFetchFailed(None, stage, "invalid JSON response") from e


async def fetch_playlist_items(
    client: httpx.AsyncClient, playlist_id: str, api_key: str
) -> List[PlaylistItem]:
    """Fetches every entry of the playlist, following nextPageToken until the last page."""
    items = []
    next_page_token: Optional[str] = None
    pages = 0

    while True:
        params = {
            "part": "snippet,contentDetails",
            "maxResults": PAGE_SIZE,
            "playlistId": playlist_id,
            "key": api_key,
        }
        if next_page_token:
            params["pageToken"] = next_page_token

        data = await _get(client, "playlistItems", params, NetworkFetchFailed.MEMBERSHIP)
        pages += 1

        for item in data.get("items", []):
            items.append(PlaylistItem.from_api(item))

        next_page_token = data.get("nextPageToken")
        if not next_page_token:
            break

    logger.info(f"Fetched {len(items)} items from playlist {playlist_id} in {pages} page(s)")
    return items


async def fetch_video_details(
    client: httpx.AsyncClient, video_ids: List[str], api_key: str
) -> Dict[str, VideoDetails]:
    """Looks up duration and view count for the given video IDs, keyed by ID."""
    details = {}
    # Batch in 50s
    for i in range(0, len(video_ids), DETAIL_BATCH_SIZE):
        batch = video_ids[i:i + DETAIL_BATCH_SIZE]
        params = {
            "part": "contentDetails,statistics",
            "id": ",".join(batch),
            "key": api_key,
        }
        data = await _get(client, "videos", params, NetworkFetchFailed.DETAIL)
        for item in data.get("items", []):
            record = VideoDetails.from_api(item)
            details[record.video_id] = record

    missing = len(set(video_ids) - details.keys())
    if missing:
        logger.warning(f"No details returned for {missing} video(s), likely deleted or private")
    return details


def join_video_details(
    items: List[PlaylistItem], details: Dict[str, VideoDetails]
) -> List[EnrichedVideo]:
    """Pairs each playlist entry with its details; entries without details keep the defaults."""
    videos = []
    for item in items:
        record = details.get(item.video_id)
        videos.append(EnrichedVideo(
            **item.model_dump(),
            duration=record.duration if record else DEFAULT_DURATION,
            view_count=record.view_count if record else DEFAULT_VIEW_COUNT,
        ))
    return videos


async def fetch_playlist_videos(
    client: httpx.AsyncClient, playlist_id: str, api_key: str
) -> List[EnrichedVideo]:
    """Orchestrate the playlist fetch and the detail lookup."""
    items = await fetch_playlist_items(client, playlist_id, api_key)
    # A playlist can hold the same video twice; look each one up once
    video_ids = list(dict.fromkeys(item.video_id for item in items))
    details = await fetch_video_details(client, video_ids, api_key)
    return join_video_details(items, details)
