"""Resource path registry: segment table plus path building and parsing.

Each object kind declares one fixed segment. Three path shapes exist::

    /pub/pubky.app/posts/<id>          id-bearing (post, tag, bookmark, file, blob, feed)
    /pub/pubky.app/follows/<owner-id>  owner-id-bearing (follow, mute)
    /pub/pubky.app/profile.json        singleton (profile, last_read)

New kinds are added by extending :data:`PATH_REGISTRY`; the parser never
branches on individual kinds.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum

from pubky_app_specs.config.models import DEFAULT_CONFIG, SpecsConfig
from pubky_app_specs.domain.errors import (
    FieldValidationError,
    InvalidUriError,
    UnrecognizedResourceError,
)
from pubky_app_specs.domain.owner import OwnerId
from pubky_app_specs.domain.resources import ResourceRef
from pubky_app_specs.domain.types import ResourceKind


class PathShape(StrEnum):
    ID = "id"
    OWNER_ID = "owner_id"
    SINGLETON = "singleton"


@dataclass(frozen=True)
class PathSpec:
    """Path convention for one resource kind."""

    kind: ResourceKind
    segment: str  # "posts/" for id-bearing kinds, full file name for singletons
    shape: PathShape

    @property
    def name(self) -> str:
        """Segment without its trailing slash, as it appears between slashes."""
        return self.segment.rstrip("/")


PATH_REGISTRY: dict[ResourceKind, PathSpec] = {
    spec.kind: spec
    for spec in (
        PathSpec(ResourceKind.PROFILE, "profile.json", PathShape.SINGLETON),
        PathSpec(ResourceKind.LAST_READ, "last_read", PathShape.SINGLETON),
        PathSpec(ResourceKind.POST, "posts/", PathShape.ID),
        PathSpec(ResourceKind.FOLLOW, "follows/", PathShape.OWNER_ID),
        PathSpec(ResourceKind.MUTE, "mutes/", PathShape.OWNER_ID),
        PathSpec(ResourceKind.BOOKMARK, "bookmarks/", PathShape.ID),
        PathSpec(ResourceKind.TAG, "tags/", PathShape.ID),
        PathSpec(ResourceKind.FILE, "files/", PathShape.ID),
        PathSpec(ResourceKind.BLOB, "blobs/", PathShape.ID),
        PathSpec(ResourceKind.FEED, "feeds/", PathShape.ID),
    )
}

_SPECS_BY_NAME: dict[str, PathSpec] = {spec.name: spec for spec in PATH_REGISTRY.values()}


def get_path_spec(kind: ResourceKind) -> PathSpec:
    """Look up the path convention for *kind*.

    Raises:
        UnrecognizedResourceError: For ``unknown`` or unregistered kinds.
    """
    spec = PATH_REGISTRY.get(kind)
    if spec is None:
        msg = f"Unrecognized resource {kind!s}"
        raise UnrecognizedResourceError(msg)
    return spec


def resource_name(kind: ResourceKind) -> str:
    """Display name of a kind: its segment without trailing slash.

    Examples:
        >>> resource_name(ResourceKind.POST)
        'posts'
        >>> resource_name(ResourceKind.UNKNOWN)
        'unknown'
    """
    spec = PATH_REGISTRY.get(kind)
    return "unknown" if spec is None else spec.name


def build_path(
    kind: ResourceKind,
    object_id: str | OwnerId | None = None,
    *,
    config: SpecsConfig = DEFAULT_CONFIG,
) -> str:
    """Build the storage path of an object of *kind*.

    Raises:
        UnrecognizedResourceError: For the ``unknown`` kind.
        FieldValidationError: If an id is missing for an id-bearing kind,
            given for a singleton, or contains a path separator.
        InvalidIdentifierError: If a follow/mute id is not a valid OwnerId.
    """
    spec = get_path_spec(kind)
    prefix = config.paths.prefix

    if spec.shape is PathShape.SINGLETON:
        if object_id is not None:
            msg = f"Path for {spec.name} does not take an id"
            raise FieldValidationError("id", msg)
        return f"{prefix}{spec.segment}"

    if object_id is None or not str(object_id):
        msg = f"Path for {spec.name} requires an id"
        raise FieldValidationError("id", msg)
    if spec.shape is PathShape.ID and "/" in str(object_id):
        msg = f"Path for {spec.name} id cannot contain '/': {object_id}"
        raise FieldValidationError("id", msg)
    if spec.shape is PathShape.OWNER_ID and not isinstance(object_id, OwnerId):
        object_id = OwnerId(object_id)
    return f"{prefix}{spec.segment}{object_id}"


def build_resource_path(ref: ResourceRef, *, config: SpecsConfig = DEFAULT_CONFIG) -> str:
    """Build the storage path addressed by *ref*."""
    return build_path(ref.kind, ref.id, config=config)


def resolve_segments(segments: Sequence[str]) -> ResourceRef:
    """Resolve the segments below the app root into a :class:`ResourceRef`.

    Unrecognized structure resolves to ``unknown``; only an invalid owner id
    under ``follows/`` or ``mutes/`` raises (InvalidIdentifierError).
    """
    if not segments:
        return ResourceRef.unknown()

    if len(segments) == 1:
        spec = _SPECS_BY_NAME.get(segments[0])
        if spec is not None and spec.shape is PathShape.SINGLETON:
            return ResourceRef(spec.kind)
        return ResourceRef.unknown()

    name, object_id = segments[0], segments[1]
    if not object_id:
        return ResourceRef.unknown()

    spec = _SPECS_BY_NAME.get(name)
    if spec is None or spec.shape is PathShape.SINGLETON:
        return ResourceRef.unknown()
    if spec.shape is PathShape.OWNER_ID:
        return ResourceRef(spec.kind, OwnerId(object_id))
    return ResourceRef(spec.kind, object_id)


def strip_prefix(segments: Sequence[str], *, source: str, config: SpecsConfig) -> list[str]:
    """Check the fixed public/app root segments and return what follows them.

    Raises:
        InvalidUriError: If fewer than two segments exist or the roots differ.
    """
    public = config.paths.public_root.strip("/")
    app = config.paths.app_root.strip("/")
    if len(segments) < 2:
        msg = f"Not enough path segments in URI: {source}"
        raise InvalidUriError(msg)
    if segments[0] != public:
        msg = (
            f"Expected public path '{config.paths.public_root}' "
            f"but got '{segments[0]}' in URI: {source}"
        )
        raise InvalidUriError(msg)
    if segments[1] != app:
        msg = (
            f"Expected app path '{config.paths.app_root}' "
            f"but got '{segments[1]}' in URI: {source}"
        )
        raise InvalidUriError(msg)
    return list(segments[2:])


def split_path(path: str, *, source: str | None = None) -> list[str]:
    """Split an absolute path into its segments (without the leading slash).

    Raises:
        InvalidUriError: If *path* is not absolute.
    """
    if not path.startswith("/"):
        msg = f"Cannot parse path segments from URI: {source or path}"
        raise InvalidUriError(msg)
    return path[1:].split("/")


def parse_path(path: str, *, config: SpecsConfig = DEFAULT_CONFIG) -> ResourceRef:
    """Parse a storage path built by :func:`build_path` back into a reference."""
    segments = strip_prefix(split_path(path), source=path, config=config)
    return resolve_segments(segments)
