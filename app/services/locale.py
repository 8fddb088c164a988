"""Locale negotiation: path prefix, then cookie, then ``Accept-Language``."""

from typing import Optional, Tuple

LOCALES: Tuple[str, ...] = ("es", "en")
DEFAULT_LOCALE = "es"
LOCALE_COOKIE = "locale"


def is_valid_locale(value: Optional[str]) -> bool:
    return value in LOCALES


def locale_from_accept_language(header: Optional[str]) -> Optional[str]:
    """Return the first supported primary language tag in an ``Accept-Language`` header.

    Tags are taken in header order; quality values are ignored.
    """
    if not header:
        return None
    for entry in header.split(","):
        tag = entry.split(";")[0].strip().split("-")[0].lower()
        if is_valid_locale(tag):
            return tag
    return None


def negotiate_locale(
    path_locale: Optional[str] = None,
    cookie: Optional[str] = None,
    accept_language: Optional[str] = None,
) -> str:
    """Pick the locale for a request; invalid or absent values fall through to the default."""
    for candidate in (path_locale, cookie):
        if is_valid_locale(candidate):
            return candidate
    return locale_from_accept_language(accept_language) or DEFAULT_LOCALE
