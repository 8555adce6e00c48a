"""URI parser: ``pubky://<owner>/pub/pubky.app/<segment>[/<id>]``.

Malformed scheme, host, or fixed path prefix is a hard error
(:class:`InvalidUriError`). Structure below the fixed prefix that matches no
registered kind is never an error: it resolves to an ``unknown`` resource.
"""

from __future__ import annotations

from pubky_app_specs.config.models import DEFAULT_CONFIG, SpecsConfig
from pubky_app_specs.domain.errors import InvalidIdentifierError, InvalidUriError
from pubky_app_specs.domain.owner import OwnerId
from pubky_app_specs.domain.paths import (
    build_resource_path,
    resolve_segments,
    split_path,
    strip_prefix,
)
from pubky_app_specs.domain.resources import ParsedLocation, ResourceRef
from pubky_app_specs.domain.types import ResourceKind
from pubky_app_specs.domain.urls import parse_url


def parse_uri(uri: str, *, config: SpecsConfig = DEFAULT_CONFIG) -> ParsedLocation:
    """Parse *uri* into its owner and typed resource reference.

    Raises:
        InvalidUriError: If the URI is not a URL, or its scheme, owner host,
            or public/app root segments are wrong.
        InvalidIdentifierError: If a follow/mute target is not a valid OwnerId.
    """
    url = parse_url(uri)
    if url is None:
        msg = f"Invalid URL: {uri}"
        raise InvalidUriError(msg)

    if url.scheme != config.paths.scheme:
        msg = f"Invalid URI, must start with '{config.paths.protocol}': {uri}"
        raise InvalidUriError(msg)

    host = url.host
    if not host:
        msg = f"Missing user ID in URI: {uri}"
        raise InvalidUriError(msg)
    try:
        owner = OwnerId(host)
    except InvalidIdentifierError as exc:
        msg = f"Invalid user ID in URI: {uri}: {exc.message}"
        raise InvalidUriError(msg) from exc

    segments = strip_prefix(split_path(url.path or "", source=uri), source=uri, config=config)
    return ParsedLocation(owner=owner, resource=resolve_segments(segments))


def build_uri(location: ParsedLocation, *, config: SpecsConfig = DEFAULT_CONFIG) -> str:
    """Rebuild the canonical URI of *location*.

    Raises:
        UnrecognizedResourceError: If the resource is ``unknown``.
    """
    path = build_resource_path(location.resource, config=config)
    return f"{config.paths.protocol}{location.owner}{path}"


def _uri(
    owner: str | OwnerId,
    kind: ResourceKind,
    object_id: str | None = None,
    config: SpecsConfig = DEFAULT_CONFIG,
) -> str:
    owner_id = owner if isinstance(owner, OwnerId) else OwnerId(owner)
    return build_uri(ParsedLocation(owner_id, ResourceRef(kind, object_id)), config=config)


def user_uri(owner: str | OwnerId, *, config: SpecsConfig = DEFAULT_CONFIG) -> str:
    return _uri(owner, ResourceKind.PROFILE, config=config)


def last_read_uri(owner: str | OwnerId, *, config: SpecsConfig = DEFAULT_CONFIG) -> str:
    return _uri(owner, ResourceKind.LAST_READ, config=config)


def post_uri(owner: str | OwnerId, post_id: str, *, config: SpecsConfig = DEFAULT_CONFIG) -> str:
    return _uri(owner, ResourceKind.POST, post_id, config)


def follow_uri(owner: str | OwnerId, followee: str, *, config: SpecsConfig = DEFAULT_CONFIG) -> str:
    return _uri(owner, ResourceKind.FOLLOW, followee, config)


def mute_uri(owner: str | OwnerId, mutee: str, *, config: SpecsConfig = DEFAULT_CONFIG) -> str:
    return _uri(owner, ResourceKind.MUTE, mutee, config)


def bookmark_uri(
    owner: str | OwnerId, bookmark_id: str, *, config: SpecsConfig = DEFAULT_CONFIG
) -> str:
    return _uri(owner, ResourceKind.BOOKMARK, bookmark_id, config)


def tag_uri(owner: str | OwnerId, tag_id: str, *, config: SpecsConfig = DEFAULT_CONFIG) -> str:
    return _uri(owner, ResourceKind.TAG, tag_id, config)


def file_uri(owner: str | OwnerId, file_id: str, *, config: SpecsConfig = DEFAULT_CONFIG) -> str:
    return _uri(owner, ResourceKind.FILE, file_id, config)


def blob_uri(owner: str | OwnerId, blob_id: str, *, config: SpecsConfig = DEFAULT_CONFIG) -> str:
    return _uri(owner, ResourceKind.BLOB, blob_id, config)


def feed_uri(owner: str | OwnerId, feed_id: str, *, config: SpecsConfig = DEFAULT_CONFIG) -> str:
    return _uri(owner, ResourceKind.FEED, feed_id, config)
