from pydantic import BaseModel

DEFAULT_DURATION = "PT0S"
DEFAULT_VIEW_COUNT = "0"


class PlaylistItem(BaseModel):
    video_id: str
    title: str = ""
    description: str = ""
    thumbnail_url: str = ""
    published_at: str = ""

    @classmethod
    def from_api(cls, item: dict) -> "PlaylistItem":
        """Builds a record from a raw playlistItems resource."""
        snippet = item.get("snippet", {})
        thumbnails = snippet.get("thumbnails", {})
        # Deleted and private entries come back without thumbnails
        thumbnail = (
            thumbnails.get("high")
            or thumbnails.get("medium")
            or thumbnails.get("default")
            or {}
        )
        return cls(
            video_id=item["contentDetails"]["videoId"],
            title=snippet.get("title", ""),
            description=snippet.get("description", ""),
            thumbnail_url=thumbnail.get("url", ""),
            published_at=snippet.get("publishedAt", ""),
        )


class VideoDetails(BaseModel):
    video_id: str
    duration: str = DEFAULT_DURATION
    view_count: str = DEFAULT_VIEW_COUNT

    @classmethod
    def from_api(cls, item: dict) -> "VideoDetails":
        """Builds a record from a raw videos resource."""
        return cls(
            video_id=item["id"],
            duration=item.get("contentDetails", {}).get("duration") or DEFAULT_DURATION,
            # Channels can hide their view counts
            view_count=item.get("statistics", {}).get("viewCount") or DEFAULT_VIEW_COUNT,
        )


class EnrichedVideo(PlaylistItem):
    duration: str = DEFAULT_DURATION
    view_count: str = DEFAULT_VIEW_COUNT


class VideoCard(BaseModel):
    video_id: str
    title: str
    watch_url: str
    thumbnail_url: str
    duration: str
    description: str
    views: str
    published: str
