"""File metadata and the blob it points at.

URIs: ``/pub/pubky.app/files/:file_id`` (time-derived ID) and
``/pub/pubky.app/blobs/:blob_id`` (content-hash ID of the blob bytes).
"""

from __future__ import annotations

import re
from typing import ClassVar, Self

from pubky_app_specs.config.models import DEFAULT_CONFIG, SpecsConfig
from pubky_app_specs.domain.base import AppObject, crop
from pubky_app_specs.domain.errors import FieldValidationError, MalformedInputError
from pubky_app_specs.domain.ids import BLOB_ID_SCHEME, now_micros
from pubky_app_specs.domain.types import IdScheme, ResourceKind, WireInt
from pubky_app_specs.domain.urls import is_url

# RFC 2045 token characters for the type and subtype of a media type.
_TOKEN = r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+"
_MEDIA_TYPE_RE = re.compile(rf"^\s*({_TOKEN})/({_TOKEN})\s*(?:;.*)?$", re.DOTALL)


def mime_essence(content_type: str) -> str | None:
    """Lowercased ``type/subtype`` of *content_type* without parameters.

    Returns None when *content_type* is not a media type.

    Examples:
        >>> mime_essence("Text/HTML; charset=utf-8")
        'text/html'
        >>> mime_essence("not a mime") is None
        True
    """
    match = _MEDIA_TYPE_RE.match(content_type)
    if match is None:
        return None
    return f"{match.group(1)}/{match.group(2)}".lower()


class FileMeta(AppObject):
    """Metadata of an uploaded file; ``src`` points at its blob."""

    resource_kind: ClassVar[ResourceKind] = ResourceKind.FILE
    id_scheme: ClassVar[IdScheme] = IdScheme.TIMESTAMP

    name: str
    created_at: WireInt
    src: str
    content_type: str
    size: WireInt

    @classmethod
    def create(
        cls,
        name: str,
        src: str,
        content_type: str,
        size: int,
        *,
        created_at: int | None = None,
        config: SpecsConfig = DEFAULT_CONFIG,
    ) -> Self:
        stamp = now_micros() if created_at is None else created_at
        file = cls(name=name, created_at=stamp, src=src, content_type=content_type, size=size)
        return file.sanitize(config=config)

    def sanitize(self, *, config: SpecsConfig = DEFAULT_CONFIG) -> Self:
        limits = config.files
        src = crop(self.src, limits.max_src_length)
        return self.model_copy(
            update={
                "name": crop(self.name, limits.max_name_length),
                "src": src if is_url(src) else "",
                "content_type": self.content_type.strip(),
            }
        )

    def _check(self, config: SpecsConfig) -> None:
        limits = config.files

        if not limits.min_name_length <= len(self.name) <= limits.max_name_length:
            raise FieldValidationError("name", "Validation Error: Invalid name length")

        if not self.src:
            raise FieldValidationError("src", "Validation Error: Invalid src")
        if len(self.src) > limits.max_src_length:
            raise FieldValidationError("src", "Validation Error: src exceeds maximum length")

        if mime_essence(self.content_type) not in limits.mime_types:
            raise FieldValidationError("content_type", "Validation Error: Invalid content type")

        if not 0 < self.size <= limits.max_size:
            raise FieldValidationError("size", "Validation Error: Invalid size")


class Blob(AppObject):
    """Raw binary payload. The wire form is the bytes themselves."""

    resource_kind: ClassVar[ResourceKind] = ResourceKind.BLOB
    id_scheme: ClassVar[IdScheme] = IdScheme.HASH
    id_scheme_version: ClassVar[str] = BLOB_ID_SCHEME

    data: bytes

    @classmethod
    def create(cls, data: bytes) -> Self:
        return cls(data=data)

    @classmethod
    def decode(cls, data: bytes) -> Self:
        """Wrap raw bytes verbatim."""
        if not isinstance(data, bytes | bytearray | memoryview):
            msg = f"Invalid blob payload: expected bytes, got {type(data).__name__}"
            raise MalformedInputError(msg)
        return cls(data=bytes(data))

    def encode(self) -> bytes:
        return self.data

    def to_wire(self) -> dict[str, int | str]:
        # Payloads can be large; describe them rather than embedding them.
        return {"size": len(self.data), "id_scheme": self.id_scheme_version}

    def id_data(self) -> bytes:
        return self.data

    def verify(
        self,
        object_id: str | None = None,
        *,
        config: SpecsConfig = DEFAULT_CONFIG,
        now: int | None = None,
    ) -> None:
        """Size limits first, then the content-hash ID."""
        self._check(config)
        if object_id is not None:
            self.verify_id(object_id, config=config, now=now)

    def _check(self, config: SpecsConfig) -> None:
        if not self.data:
            raise FieldValidationError("data", "Validation Error: Blob size cannot be zero")
        if len(self.data) > config.blobs.max_size:
            raise FieldValidationError(
                "data", "Validation Error: Blob size exceeds maximum limit of 100MB"
            )
