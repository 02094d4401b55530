import logging
from typing import Optional

import httpx

from ..config import Settings
from ..errors import (
    ConfigurationMissing,
    CredentialMissing,
    PlaylistIdMissing,
    PlaylistLoadError,
)
from ..renderer import Renderer
from .youtube import fetch_playlist_videos

logger = logging.getLogger(__name__)

PLAYLIST_URL = "https://www.youtube.com/playlist?list={playlist_id}"
LOAD_ERROR_PREFIX = "Error loading YouTube videos. "


def playlist_link(playlist_id: Optional[str]) -> Optional[str]:
    if not playlist_id:
        return None
    return PLAYLIST_URL.format(playlist_id=playlist_id)


def check_preconditions(settings: Optional[Settings], playlist_id: Optional[str]) -> str:
    """Validates the configuration before any request is made.

    Returns:
        The playlist ID to load

    Raises:
        ConfigurationMissing: If no settings were provided
        CredentialMissing: If the API key is empty or still the placeholder
        PlaylistIdMissing: If no playlist ID was supplied
    """
    if settings is None:
        raise ConfigurationMissing()
    if not settings.has_api_key:
        raise CredentialMissing()
    if not playlist_id:
        raise PlaylistIdMissing()
    return playlist_id


async def initialize_playlist(
    settings: Optional[Settings],
    renderer: Renderer,
    client: httpx.AsyncClient,
    playlist_id: Optional[str] = None,
) -> None:
    """Loads the playlist and reports the outcome to the renderer.

    This is the only place where load errors become visible to the user:
    either the full list of videos is shown or an error state is.
    """
    if not playlist_id and settings is not None:
        playlist_id = settings.youtube_playlist_id

    try:
        playlist_id = check_preconditions(settings, playlist_id)
    except PlaylistLoadError as e:
        logger.warning(f"Not loading playlist: {e}")
        renderer.show_error(str(e), playlist_link(playlist_id))
        return

    renderer.show_loading()

    try:
        videos = await fetch_playlist_videos(client, playlist_id, settings.youtube_api_key)
    except PlaylistLoadError as e:
        logger.error(f"Error loading playlist {playlist_id}: {e}")
        renderer.show_error(LOAD_ERROR_PREFIX + str(e), playlist_link(playlist_id))
        return
    except Exception as e:
        logger.exception(f"Unexpected error loading playlist {playlist_id}")
        renderer.show_error(LOAD_ERROR_PREFIX + str(e), playlist_link(playlist_id))
        return

    renderer.show_videos(videos, len(videos))
