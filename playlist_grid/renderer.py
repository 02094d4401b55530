"""Renderer capability used by the playlist loader.

The loader only reports state changes through the ``Renderer`` protocol.
``PageRenderer`` turns those changes into the context consumed by
``templates/playlist.html``.
"""

from typing import List, Optional, Protocol

from .models import EnrichedVideo, VideoCard
from .services.formatting import (
    format_duration,
    format_published_date,
    format_video_count,
    format_view_count,
    truncate_text,
)

WATCH_URL = "https://www.youtube.com/watch?v={video_id}"


class Renderer(Protocol):
    def show_loading(self) -> None: ...

    def show_error(self, message: str, fallback_link: Optional[str] = None) -> None: ...

    def show_videos(self, videos: List[EnrichedVideo], count: int) -> None: ...


class PageRenderer:
    """Collects the current page state for the playlist template."""

    LOADING = "loading"
    ERROR = "error"
    VIDEOS = "videos"

    def __init__(self, locale: str = "en", description_max_length: int = 120):
        self.locale = locale
        self.description_max_length = description_max_length
        self.state = None
        self.error_message = None
        self.fallback_link = None
        self.cards: List[VideoCard] = []
        self.summary = None

    def show_loading(self) -> None:
        self.state = self.LOADING

    def show_error(self, message: str, fallback_link: Optional[str] = None) -> None:
        self.state = self.ERROR
        self.error_message = message
        self.fallback_link = fallback_link

    def show_videos(self, videos: List[EnrichedVideo], count: int) -> None:
        self.state = self.VIDEOS
        self.cards = [self.build_card(video) for video in videos]
        # An empty playlist gets its own message and no summary
        self.summary = format_video_count(count) if count else None

    def build_card(self, video: EnrichedVideo) -> VideoCard:
        return VideoCard(
            video_id=video.video_id,
            title=video.title,
            watch_url=WATCH_URL.format(video_id=video.video_id),
            thumbnail_url=video.thumbnail_url,
            duration=format_duration(video.duration),
            description=truncate_text(video.description, self.description_max_length),
            views=format_view_count(video.view_count, self.locale),
            published=format_published_date(video.published_at, self.locale),
        )

    @property
    def context(self) -> dict:
        return {
            "state": self.state,
            "error_message": self.error_message,
            "fallback_link": self.fallback_link,
            "cards": self.cards,
            "summary": self.summary,
        }
