"""SpecsService: URI, path, identifier, import and create operations."""

from __future__ import annotations

from typing import Any

import structlog
from pydantic import ValidationError

from pubky_app_specs.domain.builder import BuiltObject, SpecsBuilder
from pubky_app_specs.domain.errors import (
    MalformedInputError,
    SpecsError,
    UnrecognizedResourceError,
)
from pubky_app_specs.domain.ids import (
    generate_hash_id,
    generate_timestamp_id,
    timestamp_from_id,
    validate_timestamp_id,
)
from pubky_app_specs.domain.importer import import_object
from pubky_app_specs.domain.owner import OwnerId
from pubky_app_specs.domain.paths import build_path, parse_path
from pubky_app_specs.domain.resources import ParsedLocation, ResourceRef
from pubky_app_specs.domain.types import ResourceKind
from pubky_app_specs.domain.uri import build_uri, parse_uri
from pubky_app_specs.services.base import BaseService
from pubky_app_specs.services.result import ServiceResult
from pubky_app_specs.services.telemetry import traced

log = structlog.get_logger(__name__)

# Builder method per creatable kind.
_CREATORS: dict[ResourceKind, str] = {
    ResourceKind.PROFILE: "create_user",
    ResourceKind.LAST_READ: "create_last_read",
    ResourceKind.POST: "create_post",
    ResourceKind.FOLLOW: "create_follow",
    ResourceKind.MUTE: "create_mute",
    ResourceKind.BOOKMARK: "create_bookmark",
    ResourceKind.TAG: "create_tag",
    ResourceKind.FILE: "create_file",
    ResourceKind.BLOB: "create_blob",
    ResourceKind.FEED: "create_feed",
}


def _resource_data(ref: ResourceRef) -> dict[str, Any]:
    return {"kind": str(ref.kind), "resource": ref.name, "id": ref.id_str}


class SpecsService(BaseService):
    """Operations exposed by the ``pubky-specs`` CLI."""

    # ------------------------------------------------------------------
    # URIs and paths
    # ------------------------------------------------------------------

    @traced
    def parse_uri(self, uri: str) -> ServiceResult:
        """Parse a ``pubky://`` URI into its owner and resource."""
        op = "parse_uri"
        try:
            location = parse_uri(uri, config=self._config)
        except SpecsError as exc:
            return self._failure(op, exc)

        log.debug("uri.parsed", uri=uri, kind=str(location.resource.kind))
        data = {"uri": uri, "owner": str(location.owner), **_resource_data(location.resource)}
        return ServiceResult(ok=True, op=op, data=data)

    @traced
    def build_uri(
        self,
        owner: str,
        kind: ResourceKind,
        object_id: str | None = None,
    ) -> ServiceResult:
        """Build the canonical URI of an owner's resource."""
        op = "build_uri"
        try:
            location = ParsedLocation(OwnerId(owner), ResourceRef(kind, object_id))
            uri = build_uri(location, config=self._config)
        except SpecsError as exc:
            return self._failure(op, exc)

        log.debug("uri.built", uri=uri)
        return ServiceResult(
            ok=True,
            op=op,
            data={"uri": uri, "owner": owner, **_resource_data(location.resource)},
        )

    @traced
    def build_path(self, kind: ResourceKind, object_id: str | None = None) -> ServiceResult:
        op = "build_path"
        try:
            path = build_path(kind, object_id, config=self._config)
        except SpecsError as exc:
            return self._failure(op, exc)
        return ServiceResult(
            ok=True, op=op, data={"path": path, "kind": str(kind), "id": object_id}
        )

    @traced
    def parse_path(self, path: str) -> ServiceResult:
        op = "parse_path"
        try:
            ref = parse_path(path, config=self._config)
        except SpecsError as exc:
            return self._failure(op, exc)
        return ServiceResult(ok=True, op=op, data={"path": path, **_resource_data(ref)})

    # ------------------------------------------------------------------
    # Identifiers
    # ------------------------------------------------------------------

    @traced
    def generate_id(self, timestamp: int | None = None) -> ServiceResult:
        """Generate a time-derived ID (default: from the current time)."""
        op = "generate_id"
        try:
            object_id = generate_timestamp_id(timestamp)
        except SpecsError as exc:
            return self._failure(op, exc)
        return ServiceResult(
            ok=True,
            op=op,
            data={"id": object_id, "timestamp": timestamp_from_id(object_id)},
        )

    @traced
    def validate_id(self, object_id: str) -> ServiceResult:
        """Check a time-derived ID against the epoch and clock-skew bounds."""
        op = "validate_id"
        try:
            validate_timestamp_id(object_id, config=self._config)
        except SpecsError as exc:
            return self._failure(op, exc)
        return ServiceResult(
            ok=True,
            op=op,
            data={"id": object_id, "timestamp": timestamp_from_id(object_id)},
        )

    @traced
    def hash_id(self, text: str) -> ServiceResult:
        """Content-hash ID of *text*, as used by tags, bookmarks and feeds."""
        return ServiceResult(
            ok=True, op="hash_id", data={"id": generate_hash_id(text), "data": text}
        )

    # ------------------------------------------------------------------
    # Objects
    # ------------------------------------------------------------------

    @traced
    def import_object(self, uri: str, data: bytes) -> ServiceResult:
        """Decode, sanitize and validate *data* as the object at *uri*."""
        op = "import_object"
        try:
            imported = import_object(uri, data, config=self._config)
        except SpecsError as exc:
            return self._failure(op, exc)

        log.debug("object.imported", uri=uri, kind=str(imported.kind))
        return ServiceResult(
            ok=True,
            op=op,
            data={"uri": uri, "kind": str(imported.kind), "object": imported.value.to_wire()},
        )

    @traced
    def create(self, owner: str, resource_kind: ResourceKind, **fields: Any) -> ServiceResult:
        """Create a validated *resource_kind* object for *owner* from field values.

        *fields* are the keyword arguments of the matching
        :class:`SpecsBuilder` ``create_*`` method.
        """
        op = f"create_{resource_kind}"
        method = _CREATORS.get(resource_kind)
        if method is None:
            msg = f"Unrecognized resource {resource_kind!s}: cannot create it"
            return self._failure(op, UnrecognizedResourceError(msg))

        try:
            builder = SpecsBuilder(owner, config=self._config)
            built: BuiltObject[Any] = getattr(builder, method)(**fields)
        except SpecsError as exc:
            return self._failure(op, exc)
        except ValidationError as exc:
            msg = f"Invalid {resource_kind} fields: {exc}"
            return self._failure(op, MalformedInputError(msg))

        log.debug(
            "object.created",
            kind=str(resource_kind),
            id=built.meta.id,
            path=built.meta.path,
        )
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "kind": str(resource_kind),
                "id": built.meta.id,
                "path": built.meta.path,
                "url": built.meta.url,
                "object": built.value.to_wire(),
            },
        )
