"""Object import dispatcher: URI plus bytes in, validated object out.

The kind resolved from the URI selects the model class through
:data:`OBJECT_REGISTRY`; the resolved id (when the kind has one) is checked
against the decoded object.
"""

from __future__ import annotations

from dataclasses import dataclass

from pubky_app_specs.config.models import DEFAULT_CONFIG, SpecsConfig
from pubky_app_specs.domain.base import AppObject
from pubky_app_specs.domain.bookmark import Bookmark
from pubky_app_specs.domain.errors import UnrecognizedResourceError
from pubky_app_specs.domain.feed import Feed
from pubky_app_specs.domain.files import Blob, FileMeta
from pubky_app_specs.domain.last_read import LastRead
from pubky_app_specs.domain.post import Post
from pubky_app_specs.domain.profile import UserProfile
from pubky_app_specs.domain.relations import Follow, Mute
from pubky_app_specs.domain.resources import ResourceRef
from pubky_app_specs.domain.tags import Tag
from pubky_app_specs.domain.types import ResourceKind
from pubky_app_specs.domain.uri import parse_uri

# Populated by _register_models() at module load time.
OBJECT_REGISTRY: dict[ResourceKind, type[AppObject]] = {}


def get_object_model(kind: ResourceKind) -> type[AppObject]:
    """Look up the model class for *kind*.

    Raises:
        UnrecognizedResourceError: If no model is registered for *kind*.
    """
    model = OBJECT_REGISTRY.get(kind)
    if model is None:
        msg = f"Unrecognized resource {kind!s}: no object model registered"
        raise UnrecognizedResourceError(msg)
    return model


def decode_and_validate(
    kind: ResourceKind,
    data: bytes,
    object_id: str | None = None,
    *,
    config: SpecsConfig = DEFAULT_CONFIG,
) -> AppObject:
    """Decode *data* as a *kind* object, sanitize it and validate it."""
    return get_object_model(kind).decode_and_validate(data, object_id, config=config)


@dataclass(frozen=True)
class ImportedObject:
    """A validated object together with the kind it was imported as."""

    kind: ResourceKind
    value: AppObject


def import_object_from_resource(
    resource: ResourceRef,
    data: bytes,
    *,
    config: SpecsConfig = DEFAULT_CONFIG,
) -> ImportedObject:
    """Decode and validate *data* as the object addressed by *resource*.

    Raises:
        UnrecognizedResourceError: For an ``unknown`` resource; *data* is
            not decoded.
        MalformedInputError: If *data* does not decode.
        InvalidIdentifierError: If the resource id does not match the object.
        FieldValidationError: On the first violated field rule.
    """
    if resource.is_unknown:
        msg = "Unrecognized resource: cannot import an unknown resource"
        raise UnrecognizedResourceError(msg)
    value = decode_and_validate(resource.kind, data, resource.id_str, config=config)
    return ImportedObject(kind=resource.kind, value=value)


def import_object(uri: str, data: bytes, *, config: SpecsConfig = DEFAULT_CONFIG) -> ImportedObject:
    """Parse *uri* and import *data* as the object it addresses."""
    location = parse_uri(uri, config=config)
    return import_object_from_resource(location.resource, data, config=config)


def _builtin_model_map() -> dict[ResourceKind, type[AppObject]]:
    """Return the built-in object model registry."""
    return {
        ResourceKind.PROFILE: UserProfile,
        ResourceKind.LAST_READ: LastRead,
        ResourceKind.POST: Post,
        ResourceKind.FOLLOW: Follow,
        ResourceKind.MUTE: Mute,
        ResourceKind.BOOKMARK: Bookmark,
        ResourceKind.TAG: Tag,
        ResourceKind.FILE: FileMeta,
        ResourceKind.BLOB: Blob,
        ResourceKind.FEED: Feed,
    }


def _register_models() -> None:
    """Populate :data:`OBJECT_REGISTRY` with the built-in object models."""
    OBJECT_REGISTRY.update(_builtin_model_map())


_register_models()
