import re
from datetime import datetime

DURATION_PATTERN = re.compile(r'P(?:(\d+)D)?T?(?:(\d+)H)?(?:(\d+)M)?(?:(\d+)S)?')

MONTH_NAMES = {
    "en": [
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ],
    "es": [
        "enero", "febrero", "marzo", "abril", "mayo", "junio",
        "julio", "agosto", "septiembre", "octubre", "noviembre", "diciembre",
    ],
}

THOUSANDS_SEPARATORS = {"en": ",", "es": "."}

ELLIPSIS = "..."


def format_duration(duration: str) -> str:
    """Converts a YouTube duration (e.g., PT1H2M10S) to a clock string (1:02:10)."""
    if not duration:
        return "0:00"
    match = DURATION_PATTERN.fullmatch(duration)
    if not match:
        return "0:00"

    days, hours, minutes, seconds = match.groups()

    # Long streams report whole days before the T separator
    if days and int(days):
        hours = str(int(days) * 24 + int(hours or 0))

    seconds = int(seconds or 0)
    if hours:
        return f"{int(hours)}:{int(minutes or 0):02d}:{seconds:02d}"
    return f"{int(minutes or 0)}:{seconds:02d}"


def format_published_date(timestamp: str, locale: str = "en") -> str:
    """Long-form date for a publishedAt timestamp, e.g. 'March 5, 2024'."""
    if not timestamp:
        return ""
    # publishedAt is like "2023-10-25T10:00:00Z"
    if timestamp.endswith('Z'):
        timestamp = timestamp[:-1] + '+00:00'
    try:
        published = datetime.fromisoformat(timestamp)
    except ValueError:
        return ""

    if locale == "es":
        month = MONTH_NAMES["es"][published.month - 1]
        return f"{published.day} de {month} de {published.year}"
    month = MONTH_NAMES["en"][published.month - 1]
    return f"{month} {published.day}, {published.year}"


def truncate_text(text: str, max_length: int) -> str:
    if len(text) <= max_length:
        return text
    return text[:max_length].rstrip() + ELLIPSIS


def format_view_count(view_count: str, locale: str = "en") -> str:
    try:
        count = int(view_count)
    except (TypeError, ValueError):
        count = 0
    separator = THOUSANDS_SEPARATORS.get(locale, ",")
    return f"{count:,}".replace(",", separator)


def format_video_count(count: int) -> str:
    return f"{count} video{'s' if count != 1 else ''} in this playlist"
