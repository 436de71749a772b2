"""Decide whether a link leaves the site."""

from urllib.parse import urlsplit

_INTERNAL_PREFIXES = ("/", "#", ".")
_NON_WEB_SCHEMES = ("mailto:", "tel:")


def is_external(url: str, site_host: str) -> bool:
    """True for absolute URLs whose host differs from the site's host.

    Relative paths, anchors, mailto: and tel: links are never external.
    """
    if not url or url.startswith(_INTERNAL_PREFIXES):
        return False
    if url.lower().startswith(_NON_WEB_SCHEMES):
        return False
    try:
        parts = urlsplit(url)
        hostname = parts.hostname
    except ValueError:
        return False
    if not parts.scheme or not hostname:
        return False
    return hostname.lower() != site_host.lower()
