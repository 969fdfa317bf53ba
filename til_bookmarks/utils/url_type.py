"""Classify a bookmark URL into one of a closed set of link types."""

from typing import Callable, Tuple

from .urls import host_matches_base, parse_absolute_url

GOOGLE_DOC = "Google Doc"
GOOGLE_SHEET = "Google Sheet"
MIRO_BOARD = "Miro Board"
GITHUB = "GitHub"
SERVICENOW = "ServiceNow"
RED_HAT_SOURCE = "Red Hat Source"
GENERIC = "Generic"

URL_TYPES = (
    GOOGLE_DOC,
    GOOGLE_SHEET,
    MIRO_BOARD,
    GITHUB,
    SERVICENOW,
    RED_HAT_SOURCE,
    GENERIC,
)

# Evaluated top to bottom, first match wins. Rules that share a host must list
# the path-specific rule before any host-only rule.
URL_TYPE_RULES: Tuple[Tuple[str, Callable[[str, str], bool]], ...] = (
    (GOOGLE_DOC, lambda host, path: host == "docs.google.com" and path.startswith("/document/")),
    (GOOGLE_SHEET, lambda host, path: host == "docs.google.com" and path.startswith("/spreadsheets/")),
    (MIRO_BOARD, lambda host, path: host_matches_base(host, "miro.com") and path.startswith("/app/board/")),
    (GITHUB, lambda host, path: host == "github.com"),
    (SERVICENOW, lambda host, path: host.endswith(".service-now.com")),
    (RED_HAT_SOURCE, lambda host, path: host == "source.redhat.com"),
)


def classify(url: str) -> str:
    parsed = parse_absolute_url(url)
    if parsed is None:
        return GENERIC

    host = (parsed.hostname or "").lower()
    path = parsed.path or "/"
    for name, matches in URL_TYPE_RULES:
        if matches(host, path):
            return name
    return GENERIC
