"""Share links, outbound map search links and clipboard hand-off."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Protocol
from urllib.parse import parse_qsl, quote, urlencode, urlsplit, urlunsplit

from ..config import settings
from ..models.domain import School

logger = logging.getLogger(__name__)

UNSUPPORTED_MESSAGE = "المتصفح لا يدعم النسخ التلقائي"
FAILED_MESSAGE = "فشل النسخ، يرجى النسخ يدوياً"
APP_COPIED_MESSAGE = "تم نسخ رابط التطبيق بنجاح!"


class ClipboardUnavailable(Exception):
    """The client has no programmatic clipboard."""


class ClipboardWriteError(Exception):
    """The clipboard rejected the write."""


class Clipboard(Protocol):
    def write_text(self, text: str) -> None: ...


class CapturingClipboard:
    """Keeps the copied text so the API can hand it back to the browser."""

    def __init__(self) -> None:
        self.text: Optional[str] = None

    def write_text(self, text: str) -> None:
        self.text = text


@dataclass(frozen=True)
class ShareResult:
    url: str
    message: str
    copied: bool


def app_url(base_url: str | None = None) -> str:
    """Base URL without query string or fragment."""

    parts = urlsplit(base_url or settings.public_base_url)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, "", ""))


def with_query_param(url: str, name: str, value: Optional[str]) -> str:
    """Set (or remove, when ``value`` is None) one query parameter on ``url``."""

    parts = urlsplit(url)
    params = [(key, val) for key, val in parse_qsl(parts.query, keep_blank_values=True) if key != name]
    if value is not None:
        params.append((name, value))
    return urlunsplit((parts.scheme, parts.netloc, parts.path, urlencode(params), parts.fragment))


def school_url(school: School, base_url: str | None = None) -> str:
    return with_query_param(base_url or settings.public_base_url, settings.share_param, school.id)


def map_search_url(school: School) -> str:
    query = quote(f"{school.name} {school.wilayat.value} {settings.country_label}")
    return f"{settings.map_search_base_url}&query={query}"


def _copy(clipboard: Optional[Clipboard], url: str, success_message: str) -> ShareResult:
    if clipboard is None:
        return ShareResult(url=url, message=UNSUPPORTED_MESSAGE, copied=False)
    try:
        clipboard.write_text(url)
    except ClipboardUnavailable:
        return ShareResult(url=url, message=UNSUPPORTED_MESSAGE, copied=False)
    except (ClipboardWriteError, OSError) as exc:
        logger.warning(f"Clipboard write failed: {exc}")
        return ShareResult(url=url, message=FAILED_MESSAGE, copied=False)
    return ShareResult(url=url, message=success_message, copied=True)


def share_app(clipboard: Optional[Clipboard], base_url: str | None = None) -> ShareResult:
    return _copy(clipboard, app_url(base_url), APP_COPIED_MESSAGE)


def share_school(clipboard: Optional[Clipboard], school: School, base_url: str | None = None) -> ShareResult:
    return _copy(clipboard, school_url(school, base_url), f"تم نسخ رابط {school.name}")
