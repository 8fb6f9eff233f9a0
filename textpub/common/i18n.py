"""Localized labels and timestamp formatting for rendered pages."""

from datetime import datetime, timezone
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


DEFAULT_LOCALE = "cs"

MESSAGES = {
    "cs": {
        "html_lang": "cs",
        "page_title": "Publikovaný text",
        "qr_heading": "QR kód této stránky",
        "qr_alt": "QR kód",
        "published": "Publikováno",
        "not_found": "Stránka nenalezena",
    },
    "en": {
        "html_lang": "en",
        "page_title": "Published text",
        "qr_heading": "QR code for this page",
        "qr_alt": "QR code",
        "published": "Published",
        "not_found": "Page not found",
    },
}


def normalize_locale(locale: Optional[str]) -> str:
    """Map 'cs-CZ', 'en_US', 'EN' ... to a catalog key, defaulting to Czech."""
    if not locale:
        return DEFAULT_LOCALE
    language = locale.replace("_", "-").split("-")[0].lower()
    return language if language in MESSAGES else DEFAULT_LOCALE


def get_message(key: str, locale: Optional[str] = None) -> str:
    """Look up a localized label.

    Raises:
        KeyError: If ``key`` is not in the catalog
    """
    return MESSAGES[normalize_locale(locale)][key]


def get_messages(locale: Optional[str] = None) -> dict:
    """All labels for a locale, for template contexts."""
    return dict(MESSAGES[normalize_locale(locale)])


def to_display_timezone(value: datetime, tz_name: Optional[str] = None) -> datetime:
    """Convert ``value`` to ``tz_name``; naive values are taken as UTC.

    An unknown timezone name leaves the value in UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    if not tz_name:
        return value
    try:
        return value.astimezone(ZoneInfo(tz_name))
    except (ZoneInfoNotFoundError, ValueError):
        return value.astimezone(timezone.utc)


def format_timestamp(
    value: datetime,
    locale: Optional[str] = None,
    tz_name: Optional[str] = None,
) -> str:
    """Format a timestamp the way browsers print it for the locale.

    cs: ``19. 10. 2026 14:03:05``
    en: ``10/19/2026, 2:03:05 PM``
    """
    local = to_display_timezone(value, tz_name)
    if normalize_locale(locale) == "en":
        hour = local.hour % 12 or 12
        meridiem = "AM" if local.hour < 12 else "PM"
        return (
            f"{local.month}/{local.day}/{local.year}, "
            f"{hour}:{local.minute:02d}:{local.second:02d} {meridiem}"
        )
    return (
        f"{local.day}. {local.month}. {local.year} "
        f"{local.hour}:{local.minute:02d}:{local.second:02d}"
    )
