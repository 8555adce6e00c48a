"""Object kinds and wire-level enumerations.

Enum values are part of the protocol and appear verbatim in JSON payloads.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated

from pydantic import Field


class ResourceKind(StrEnum):
    """Addressable object kinds, plus the ``unknown`` catch-all."""

    PROFILE = "profile"
    LAST_READ = "last_read"
    POST = "post"
    FOLLOW = "follow"
    MUTE = "mute"
    BOOKMARK = "bookmark"
    TAG = "tag"
    FILE = "file"
    BLOB = "blob"
    FEED = "feed"
    UNKNOWN = "unknown"


class IdScheme(StrEnum):
    """How an object kind is identified inside its path."""

    NONE = "none"
    TIMESTAMP = "timestamp"
    HASH = "hash"
    OWNER = "owner"


class PostKind(StrEnum):
    """Display kind of a post or embed."""

    SHORT = "short"
    LONG = "long"
    IMAGE = "image"
    VIDEO = "video"
    LINK = "link"
    FILE = "file"


class FeedReach(StrEnum):
    """Whose posts a feed includes."""

    FOLLOWING = "following"
    FOLLOWERS = "followers"
    FRIENDS = "friends"
    ALL = "all"


class FeedLayout(StrEnum):
    COLUMNS = "columns"
    WIDE = "wide"
    VISUAL = "visual"


class FeedSort(StrEnum):
    RECENT = "recent"
    POPULARITY = "popularity"


# Integer fields travel as signed 64-bit values.
I64_MIN = -(2**63)
I64_MAX = 2**63 - 1

WireInt = Annotated[int, Field(ge=I64_MIN, le=I64_MAX)]
