"""Slug derivation from canonical URLs"""

from urllib.parse import urlsplit


def _url_path(url: str) -> str | None:
    """Return the path of url if it parses as an absolute URL, else None."""
    try:
        parts = urlsplit(url)
    except ValueError:
        return None
    if not parts.scheme:
        return None
    return parts.path


def _last_segment(path: str) -> str | None:
    """Return the last non-empty '/'-separated segment of path, else None."""
    segments = [s for s in path.split('/') if s]
    return segments[-1] if segments else None


def slug_from_url(url: str) -> str | None:
    """Return the last path segment of url (absolute URL or bare path), or None."""
    path = _url_path(url)
    if path is not None:
        return _last_segment(path)
    # Bare paths like "/blog/my-post" are not absolute URLs; split the raw string.
    return _last_segment(url)
