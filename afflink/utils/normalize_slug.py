"""Normalize free text into a URL-safe slug."""

from slugify import slugify

MAX_SLUG_LENGTH = 50

SLUG_REPLACEMENTS = [["&", "and"]]


def normalize_slug(text: str, max_length: int = MAX_SLUG_LENGTH) -> str:
    """Lowercase, strip to URL-safe characters, truncate and trim trailing separators.

    Returns an empty string when nothing URL-safe is left.

    Examples:
        >>> normalize_slug("Best Blender!")
        'best-blender'
        >>> normalize_slug("Salt & Pepper")
        'salt-and-pepper'
    """
    return slugify(text or "", lowercase=True, replacements=SLUG_REPLACEMENTS)[:max_length].rstrip("-")
