import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# False when no .env file (or an empty one) was found
ENV_FILE_LOADED = load_dotenv()

# Value shipped in .env.example; treated as "no key configured"
API_KEY_PLACEHOLDER = "TU_API_KEY_AQUI"

SUPPORTED_LOCALES = ("en", "es")
DEFAULT_DESCRIPTION_MAX_LENGTH = 120


@dataclass(frozen=True)
class Settings:
    youtube_api_key: str = ""
    youtube_playlist_id: str = ""
    display_locale: str = "en"
    description_max_length: int = DEFAULT_DESCRIPTION_MAX_LENGTH

    @classmethod
    def from_env(cls) -> "Settings":
        locale = os.getenv("DISPLAY_LOCALE", "en").lower()
        if locale not in SUPPORTED_LOCALES:
            locale = "en"

        raw_length = os.getenv("DESCRIPTION_MAX_LENGTH", str(DEFAULT_DESCRIPTION_MAX_LENGTH))
        try:
            description_max_length = int(raw_length)
        except ValueError:
            logger.warning(f"Ignoring non-numeric DESCRIPTION_MAX_LENGTH {raw_length!r}")
            description_max_length = DEFAULT_DESCRIPTION_MAX_LENGTH

        return cls(
            youtube_api_key=os.getenv("YOUTUBE_API_KEY", "").strip(),
            youtube_playlist_id=os.getenv("YOUTUBE_PLAYLIST_ID", "").strip(),
            display_locale=locale,
            description_max_length=description_max_length,
        )

    @property
    def has_api_key(self) -> bool:
        return bool(self.youtube_api_key) and self.youtube_api_key != API_KEY_PLACEHOLDER


def load_settings() -> Optional[Settings]:
    """Returns None when there is neither a .env file nor a YOUTUBE_API_KEY in the environment."""
    if not ENV_FILE_LOADED and "YOUTUBE_API_KEY" not in os.environ:
        return None
    return Settings.from_env()
