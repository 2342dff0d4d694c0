"""Pure helpers: HTML stripping, truncation, URL scheme upgrade, stable hashing."""

import hashlib
import html
import re
from typing import Any

# Display bounds for normalized episode text
TITLE_MAX_LENGTH = 200
DESCRIPTION_MAX_LENGTH = 500
ELLIPSIS = "..."

_TAG_PATTERN = re.compile(r"<[^>]*>?")
_WHITESPACE_PATTERN = re.compile(r"\s+")


def strip_html(value: Any) -> str:
    """Remove markup tags, collapse whitespace runs to one space, trim."""
    if not value:
        return ""
    text = _TAG_PATTERN.sub("", str(value))
    return _WHITESPACE_PATTERN.sub(" ", text).strip()


def safe_truncate(value: Any, limit: int = 320) -> str:
    """Strip markup and cut to `limit` characters, appending an ellipsis when cut."""
    text = strip_html(value)
    if len(text) > limit:
        return text[:limit] + ELLIPSIS
    return text


def normalize_to_https(url: Any) -> str:
    """Upgrade http:// to https://. Other schemes pass through unchanged."""
    if not url:
        return ""
    url = str(url)
    if url.startswith("http://"):
        return "https://" + url[len("http://"):]
    return url


def stable_hash(value: Any) -> str:
    """SHA-256 of the UTF-8 string form, first 16 hex chars. Stable across runs."""
    return hashlib.sha256(str(value).encode("utf-8")).hexdigest()[:16]


def escape_html(value: Any) -> str:
    if not value:
        return ""
    return html.escape(str(value), quote=True)
