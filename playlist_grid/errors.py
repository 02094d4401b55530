"""Errors raised while loading a playlist page."""

from typing import Optional


class PlaylistLoadError(Exception):
    """Base class for everything that stops a playlist load."""


class ConfigurationMissing(PlaylistLoadError):
    def __init__(self):
        super().__init__(
            "Configuration not found. Create a .env file based on .env.example."
        )


class CredentialMissing(PlaylistLoadError):
    def __init__(self):
        super().__init__(
            "API key not configured. Set YOUTUBE_API_KEY in your .env file."
        )


class PlaylistIdMissing(PlaylistLoadError):
    def __init__(self):
        super().__init__(
            "Playlist ID not defined. Set YOUTUBE_PLAYLIST_ID before loading the page."
        )


class NetworkFetchFailed(PlaylistLoadError):
    """A YouTube API request failed during the given stage.

    Args:
        status_code: HTTP status of the failed response, None for transport errors
        stage: "membership" for playlistItems pages, "detail" for the videos lookup
        reason: Reason phrase or transport error text
    """

    MEMBERSHIP = "membership"
    DETAIL = "detail"

    def __init__(self, status_code: Optional[int], stage: str, reason: str = ""):
        self.status_code = status_code
        self.stage = stage
        self.reason = reason

        if stage == self.MEMBERSHIP:
            prefix = "Error fetching playlist"
        else:
            prefix = "Error fetching video details"

        if status_code is None:
            message = f"{prefix}: {reason}"
        elif stage == self.MEMBERSHIP and reason:
            message = f"{prefix}: {status_code} {reason}"
        else:
            message = f"{prefix}: {status_code}"
        super().__init__(message)
