import logging
from pathlib import Path
from typing import AsyncIterator, Optional

import httpx
from fastapi import Depends, FastAPI, HTTPException, Query, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from playlist_grid.config import Settings, load_settings
from playlist_grid.errors import NetworkFetchFailed, PlaylistLoadError
from playlist_grid.renderer import PageRenderer
from playlist_grid.services.loader import check_preconditions, initialize_playlist
from playlist_grid.services.youtube import fetch_playlist_videos

logger = logging.getLogger(__name__)

app = FastAPI()

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))


def get_settings() -> Optional[Settings]:
    return load_settings()


async def get_http_client() -> AsyncIterator[httpx.AsyncClient]:
    async with httpx.AsyncClient() as client:
        yield client


@app.get("/favicon.ico", include_in_schema=False)
async def favicon():
    return HTMLResponse("")


@app.get("/")
async def playlist_page(
    request: Request,
    list_id: Optional[str] = Query(None, alias="list"),
    settings: Optional[Settings] = Depends(get_settings),
    client: httpx.AsyncClient = Depends(get_http_client),
):
    display = settings or Settings()
    renderer = PageRenderer(
        locale=display.display_locale,
        description_max_length=display.description_max_length,
    )
    await initialize_playlist(settings, renderer, client, playlist_id=list_id)
    return templates.TemplateResponse(request=request, name="playlist.html", context=renderer.context)


@app.get("/api/videos")
async def list_videos(
    list_id: Optional[str] = Query(None, alias="list"),
    settings: Optional[Settings] = Depends(get_settings),
    client: httpx.AsyncClient = Depends(get_http_client),
):
    if not list_id and settings is not None:
        list_id = settings.youtube_playlist_id

    try:
        playlist_id = check_preconditions(settings, list_id)
    except PlaylistLoadError as e:
        raise HTTPException(status_code=503, detail=str(e))

    try:
        videos = await fetch_playlist_videos(client, playlist_id, settings.youtube_api_key)
    except NetworkFetchFailed as e:
        logger.error(f"Error fetching videos for {playlist_id}: {e}")
        raise HTTPException(status_code=500, detail=str(e))
    except Exception as e:
        logger.exception(f"Unexpected error fetching videos for {playlist_id}")
        raise HTTPException(status_code=500, detail=f"Error loading YouTube videos. {e}")
    return videos
