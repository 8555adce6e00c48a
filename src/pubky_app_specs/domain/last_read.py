"""Last-read marker for notifications.

URI: ``/pub/pubky.app/last_read``
"""

from __future__ import annotations

from typing import ClassVar, Self

from pubky_app_specs.config.models import SpecsConfig
from pubky_app_specs.domain.base import AppObject
from pubky_app_specs.domain.errors import FieldValidationError
from pubky_app_specs.domain.ids import now_micros
from pubky_app_specs.domain.types import ResourceKind, WireInt


class LastRead(AppObject):
    resource_kind: ClassVar[ResourceKind] = ResourceKind.LAST_READ

    timestamp: WireInt  # milliseconds since the UNIX epoch

    @classmethod
    def create(cls, timestamp: int | None = None) -> Self:
        """Marker at *timestamp* (default: now, in milliseconds)."""
        return cls(timestamp=now_micros() // 1_000 if timestamp is None else timestamp)

    def _check(self, config: SpecsConfig) -> None:
        if self.timestamp <= 0:
            raise FieldValidationError(
                "timestamp", "Validation Error: Timestamp must be a positive integer"
            )
