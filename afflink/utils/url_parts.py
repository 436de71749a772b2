"""Small URL helpers shared by the classifier, assigner and scanner."""

import re
from urllib.parse import urlsplit

_HTTP_PATTERN = re.compile(r"^https?://", re.IGNORECASE)


def is_http_url(url: str) -> bool:
    """True if the URL starts with an http:// or https:// scheme."""
    return bool(_HTTP_PATTERN.match(url or ""))


def bare_host(url: str) -> str | None:
    """Lowercased host without a leading ``www.``, or None if the URL has no parsable host."""
    try:
        hostname = urlsplit(url).hostname
    except ValueError:
        return None
    if not hostname:
        return None
    hostname = hostname.lower()
    return hostname[4:] if hostname.startswith("www.") else hostname


def host_label(url: str) -> str | None:
    """First label of the host, e.g. ``amazon`` for https://www.amazon.co.uk/x."""
    host = bare_host(url)
    if not host:
        return None
    return host.split(".")[0] or None


def first_path_segment(url: str) -> str:
    try:
        path = urlsplit(url).path
    except ValueError:
        return ""
    segments = [segment for segment in path.split("/") if segment]
    return segments[0] if segments else ""
