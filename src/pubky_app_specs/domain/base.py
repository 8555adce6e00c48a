"""Validation pipeline: the capability shared by every object kind.

State progression is linear::

    raw bytes --decode--> value --sanitize--> sanitized --verify--> validated

- ``decode()``: wire bytes into the model; structural errors surface here.
- ``sanitize()``: pure, total, idempotent normalization. Never raises.
- ``verify()``: rule checks on a sanitized value; raises on the first
  violated rule. A validated object is a sanitized object that passed
  ``verify()``; there is no separate type for it.

Kinds subclass :class:`AppObject` and override ``sanitize``, ``_check``
and, for content-hash kinds, ``id_data``. Lookup by kind goes through the
registry in :mod:`pubky_app_specs.domain.importer`.
"""

from __future__ import annotations

from typing import Any, ClassVar, Self

from pydantic import BaseModel, ValidationError

from pubky_app_specs.config.models import DEFAULT_CONFIG, SpecsConfig
from pubky_app_specs.domain.errors import MalformedInputError
from pubky_app_specs.domain.ids import (
    generate_hash_id,
    generate_timestamp_id,
    validate_hash_id,
    validate_timestamp_id,
)
from pubky_app_specs.domain.owner import OwnerId
from pubky_app_specs.domain.paths import build_path
from pubky_app_specs.domain.types import IdScheme, ResourceKind

# Content marker clients use for deleted objects that still have relationships.
# Never valid as user-supplied content.
DELETED_KEYWORD = "[DELETED]"


class AppObject(BaseModel):
    """Base model for every Pubky App object. Attributes are wire fields."""

    model_config = {"frozen": True}

    resource_kind: ClassVar[ResourceKind] = ResourceKind.UNKNOWN
    id_scheme: ClassVar[IdScheme] = IdScheme.NONE

    # --- Wire format ---

    @classmethod
    def decode(cls, data: bytes) -> Self:
        """Decode JSON wire bytes into an (unsanitized) instance.

        Decoding is strict: numbers must be JSON numbers within the signed
        64-bit range and strings must be JSON strings.

        Raises:
            MalformedInputError: If the bytes are not a valid encoding.
        """
        try:
            return cls.model_validate_json(data, strict=True)
        except ValidationError as exc:
            msg = f"Invalid {cls.resource_kind} payload: {exc}"
            raise MalformedInputError(msg) from exc

    def encode(self) -> bytes:
        """Encode as compact JSON wire bytes."""
        return self.model_dump_json().encode("utf-8")

    def to_wire(self) -> dict[str, Any]:
        """JSON-compatible dict of the wire fields."""
        return self.model_dump(mode="json")

    # --- Pipeline ---

    def sanitize(self, *, config: SpecsConfig = DEFAULT_CONFIG) -> Self:
        """Return a normalized copy. Base implementation is the identity."""
        return self

    def verify(
        self,
        object_id: str | None = None,
        *,
        config: SpecsConfig = DEFAULT_CONFIG,
        now: int | None = None,
    ) -> None:
        """Check the identifier (when given) and then the field rules.

        Raises:
            InvalidIdentifierError: If *object_id* does not belong to this object.
            FieldValidationError: On the first violated field rule.
        """
        if object_id is not None:
            self.verify_id(object_id, config=config, now=now)
        self._check(config)

    @classmethod
    def decode_and_validate(
        cls,
        data: bytes,
        object_id: str | None = None,
        *,
        config: SpecsConfig = DEFAULT_CONFIG,
    ) -> Self:
        """Decode, sanitize and verify *data*; return the sanitized object."""
        instance = cls.decode(data).sanitize(config=config)
        instance.verify(object_id, config=config)
        return instance

    def _check(self, config: SpecsConfig) -> None:
        """Field rules for the kind. Base implementation accepts everything."""

    # --- Identifiers and paths ---

    def id_data(self) -> str | bytes:
        """Canonical content hashed into a content-hash ID."""
        msg = f"{self.resource_kind} objects are not content-addressed"
        raise TypeError(msg)

    def create_id(self, *, now: int | None = None) -> str:
        """Generate this object's ID (time-derived or content-hash)."""
        if self.id_scheme is IdScheme.TIMESTAMP:
            return generate_timestamp_id(now)
        if self.id_scheme is IdScheme.HASH:
            return generate_hash_id(self.id_data())
        msg = f"{self.resource_kind} objects have no generated ID"
        raise TypeError(msg)

    def verify_id(
        self,
        object_id: str,
        *,
        config: SpecsConfig = DEFAULT_CONFIG,
        now: int | None = None,
    ) -> None:
        """Check *object_id* according to the kind's ID scheme."""
        if self.id_scheme is IdScheme.TIMESTAMP:
            validate_timestamp_id(object_id, now=now, config=config)
        elif self.id_scheme is IdScheme.HASH:
            validate_hash_id(self.id_data(), object_id)
        elif self.id_scheme is IdScheme.OWNER:
            OwnerId(object_id)

    @classmethod
    def create_path(
        cls,
        object_id: str | None = None,
        *,
        config: SpecsConfig = DEFAULT_CONFIG,
    ) -> str:
        """Storage path of an object of this kind with *object_id*."""
        return build_path(cls.resource_kind, object_id, config=config)


def sanitize_object(obj: AppObject, *, config: SpecsConfig = DEFAULT_CONFIG) -> AppObject:
    return obj.sanitize(config=config)


def validate_object(
    obj: AppObject,
    object_id: str | None = None,
    *,
    config: SpecsConfig = DEFAULT_CONFIG,
) -> None:
    obj.verify(object_id, config=config)


def crop(text: str, limit: int) -> str:
    """Trim surrounding whitespace and keep at most *limit* characters.

    Whitespace exposed by the cut is trimmed too, so cropping is idempotent.
    """
    return text.strip()[:limit].rstrip()
