"""URL parsing shared by sanitizers, validators and the URI parser.

Parsing follows the WHATWG URL standard through pydantic's ``AnyUrl``:
any scheme is accepted, a host is not required, and relative references
are rejected.
"""

from __future__ import annotations

from pydantic import AnyUrl, ValidationError


def parse_url(text: str) -> AnyUrl | None:
    """Parse *text* as an absolute URL, or return None if it is not one."""
    try:
        return AnyUrl(text)
    except (ValidationError, TypeError):
        return None


def is_url(text: str) -> bool:
    return parse_url(text) is not None


def normalize_url(text: str) -> str | None:
    """Return the serialized form of *text*, or None if it is not a URL.

    Examples:
        >>> normalize_url("https://example.com")
        'https://example.com/'
        >>> normalize_url("not a url") is None
        True
    """
    url = parse_url(text)
    return None if url is None else str(url)
