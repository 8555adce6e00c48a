"""Bookmark: a saved reference to any URI.

URI: ``/pub/pubky.app/bookmarks/:bookmark_id`` where ``bookmark_id`` is the
content-hash ID of the bookmarked URI.
"""

from __future__ import annotations

from typing import ClassVar, Self

from pubky_app_specs.config.models import DEFAULT_CONFIG, SpecsConfig
from pubky_app_specs.domain.base import AppObject
from pubky_app_specs.domain.errors import FieldValidationError
from pubky_app_specs.domain.ids import now_micros
from pubky_app_specs.domain.tags import sanitize_target_uri
from pubky_app_specs.domain.types import IdScheme, ResourceKind, WireInt
from pubky_app_specs.domain.urls import is_url


class Bookmark(AppObject):
    resource_kind: ClassVar[ResourceKind] = ResourceKind.BOOKMARK
    id_scheme: ClassVar[IdScheme] = IdScheme.HASH

    uri: str
    created_at: WireInt

    @classmethod
    def create(
        cls,
        uri: str,
        *,
        created_at: int | None = None,
        config: SpecsConfig = DEFAULT_CONFIG,
    ) -> Self:
        stamp = now_micros() if created_at is None else created_at
        return cls(uri=uri, created_at=stamp).sanitize(config=config)

    def id_data(self) -> str:
        return self.uri

    def sanitize(self, *, config: SpecsConfig = DEFAULT_CONFIG) -> Self:
        return self.model_copy(update={"uri": sanitize_target_uri(self.uri)})

    def _check(self, config: SpecsConfig) -> None:
        if not is_url(self.uri):
            raise FieldValidationError("uri", f"Validation Error: Invalid URI format: {self.uri}")
