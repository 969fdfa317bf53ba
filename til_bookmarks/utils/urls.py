"""URL parsing helpers shared by classification, normalization and search."""

import re
from typing import Optional
from urllib.parse import SplitResult, urlsplit

SCHEME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.\-]*$")
HTTP_PREFIX_RE = re.compile(r"^https?://", re.IGNORECASE)

# Schemes that are meaningless without a host.
HOST_REQUIRED_SCHEMES = {"http", "https", "ftp", "ws", "wss"}


def parse_absolute_url(url: object) -> Optional[SplitResult]:
    if not isinstance(url, str):
        return None
    candidate = url.strip()
    if not candidate:
        return None

    try:
        parsed = urlsplit(candidate)
        parsed.port
    except ValueError:
        return None

    if not parsed.scheme or not SCHEME_RE.match(parsed.scheme):
        return None
    host = parsed.hostname or ""
    if any(ch.isspace() for ch in host):
        return None
    if parsed.scheme.lower() in HOST_REQUIRED_SCHEMES and not host:
        return None
    if not parsed.netloc and not parsed.path:
        return None
    return parsed


def is_absolute_url(url: object) -> bool:
    return parse_absolute_url(url) is not None


def has_http_scheme(url: str) -> bool:
    return bool(HTTP_PREFIX_RE.match(url))


def display_hostname(url: str) -> str:
    parsed = parse_absolute_url(url)
    if parsed is None:
        return url
    host = (parsed.hostname or "").lower()
    if host.startswith("www."):
        host = host[4:]
    return host


def host_matches_base(host: str, base: str) -> bool:
    host = (host or "").strip().lower()
    base = (base or "").strip().lower()
    if not host or not base:
        return False
    if host == base:
        return True
    return host.endswith("." + base)
