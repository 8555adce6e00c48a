"""Follow and mute: relationships keyed by the target user's ID.

URIs: ``/pub/pubky.app/follows/:user_id`` and ``/pub/pubky.app/mutes/:user_id``.
"""

from __future__ import annotations

from typing import ClassVar, Self

from pubky_app_specs.config.models import SpecsConfig
from pubky_app_specs.domain.base import AppObject
from pubky_app_specs.domain.errors import FieldValidationError
from pubky_app_specs.domain.ids import now_micros
from pubky_app_specs.domain.types import IdScheme, ResourceKind, WireInt


class _Relation(AppObject):
    id_scheme: ClassVar[IdScheme] = IdScheme.OWNER

    created_at: WireInt

    @classmethod
    def create(cls, *, created_at: int | None = None) -> Self:
        return cls(created_at=now_micros() if created_at is None else created_at)

    def _check(self, config: SpecsConfig) -> None:
        if self.created_at <= 0:
            raise FieldValidationError(
                "created_at", "Validation Error: created_at must be a positive timestamp"
            )


class Follow(_Relation):
    """Follow of the user named by the object ID."""

    resource_kind: ClassVar[ResourceKind] = ResourceKind.FOLLOW


class Mute(_Relation):
    """Mute of the user named by the object ID."""

    resource_kind: ClassVar[ResourceKind] = ResourceKind.MUTE
