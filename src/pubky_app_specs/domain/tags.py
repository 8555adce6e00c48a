"""Tag: a short label attached by the owner to any URI.

URI: ``/pub/pubky.app/tags/:tag_id`` where ``tag_id`` is the content-hash
ID of ``"{uri}:{label}"``.
"""

from __future__ import annotations

from typing import ClassVar, Self

from pubky_app_specs.config.models import DEFAULT_CONFIG, SpecsConfig
from pubky_app_specs.domain.base import AppObject
from pubky_app_specs.domain.errors import FieldValidationError
from pubky_app_specs.domain.ids import now_micros
from pubky_app_specs.domain.types import IdScheme, ResourceKind, WireInt
from pubky_app_specs.domain.urls import is_url, normalize_url


def sanitize_tag_label(label: str) -> str:
    """Trim and lowercase a tag label."""
    return label.strip().lower()


def validate_tag_label(
    label: str, *, field: str = "label", config: SpecsConfig = DEFAULT_CONFIG
) -> None:
    """Check a (sanitized) tag label.

    Raises:
        FieldValidationError: If the label is empty, too long, or contains
            whitespace or a reserved character.
    """
    limits = config.tags
    if len(label) > limits.max_label_length:
        raise FieldValidationError(field, "Validation Error: Tag label exceeds maximum length")
    if len(label) < limits.min_label_length:
        raise FieldValidationError(
            field, "Validation Error: Tag label is shorter than minimum length"
        )
    if any(char.isspace() for char in label):
        raise FieldValidationError(field, "Validation Error: Tag label cannot contain whitespace")
    for char in limits.invalid_label_chars:
        if char in label:
            raise FieldValidationError(
                field, f"Validation Error: Tag label has invalid char: {char}"
            )


def sanitize_target_uri(uri: str) -> str:
    """Normalize *uri* when it parses, otherwise only trim it."""
    stripped = uri.strip()
    return normalize_url(stripped) or stripped


class Tag(AppObject):
    resource_kind: ClassVar[ResourceKind] = ResourceKind.TAG
    id_scheme: ClassVar[IdScheme] = IdScheme.HASH

    uri: str
    label: str
    created_at: WireInt

    @classmethod
    def create(
        cls,
        uri: str,
        label: str,
        *,
        created_at: int | None = None,
        config: SpecsConfig = DEFAULT_CONFIG,
    ) -> Self:
        """Build a sanitized tag stamped with the current time."""
        stamp = now_micros() if created_at is None else created_at
        return cls(uri=uri, label=label, created_at=stamp).sanitize(config=config)

    def id_data(self) -> str:
        return f"{self.uri}:{self.label}"

    def sanitize(self, *, config: SpecsConfig = DEFAULT_CONFIG) -> Self:
        return self.model_copy(
            update={
                "uri": sanitize_target_uri(self.uri),
                "label": sanitize_tag_label(self.label),
            }
        )

    def _check(self, config: SpecsConfig) -> None:
        validate_tag_label(self.label, config=config)
        if not is_url(self.uri):
            raise FieldValidationError("uri", f"Validation Error: Invalid URI format: {self.uri}")
