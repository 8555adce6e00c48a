"""Typed resource references and parsed locations."""

from __future__ import annotations

from dataclasses import dataclass

from pubky_app_specs.domain.errors import FieldValidationError
from pubky_app_specs.domain.owner import OwnerId
from pubky_app_specs.domain.types import ResourceKind

SINGLETON_KINDS: frozenset[ResourceKind] = frozenset(
    {ResourceKind.PROFILE, ResourceKind.LAST_READ, ResourceKind.UNKNOWN}
)
OWNER_KINDS: frozenset[ResourceKind] = frozenset({ResourceKind.FOLLOW, ResourceKind.MUTE})


@dataclass(frozen=True)
class ResourceRef:
    """What a URI or path addresses: a kind and, where the kind has one, its id.

    Profile, last-read and unknown references carry no id. Follow and mute
    carry an :class:`OwnerId`; every other kind carries a non-empty opaque
    string.
    """

    kind: ResourceKind
    id: str | OwnerId | None = None

    def __post_init__(self) -> None:
        if self.kind in SINGLETON_KINDS:
            if self.id is not None:
                msg = f"Resource {self.kind} does not take an id"
                raise FieldValidationError("id", msg)
        elif self.kind in OWNER_KINDS:
            if isinstance(self.id, str):
                object.__setattr__(self, "id", OwnerId(self.id))
            elif not isinstance(self.id, OwnerId):
                msg = f"Resource {self.kind} requires an owner id"
                raise FieldValidationError("id", msg)
        elif not isinstance(self.id, str) or not self.id:
            msg = f"Resource {self.kind} requires a non-empty id"
            raise FieldValidationError("id", msg)
        elif "/" in self.id:
            msg = f"Resource {self.kind} id cannot contain '/': {self.id}"
            raise FieldValidationError("id", msg)

    @property
    def id_str(self) -> str | None:
        """The id as a plain string, or None for id-less resources."""
        return None if self.id is None else str(self.id)

    @property
    def name(self) -> str:
        """Segment name of the kind, e.g. ``posts`` or ``profile.json``."""
        from pubky_app_specs.domain.paths import resource_name

        return resource_name(self.kind)

    @property
    def is_unknown(self) -> bool:
        return self.kind is ResourceKind.UNKNOWN

    @classmethod
    def profile(cls) -> ResourceRef:
        return cls(ResourceKind.PROFILE)

    @classmethod
    def last_read(cls) -> ResourceRef:
        return cls(ResourceKind.LAST_READ)

    @classmethod
    def unknown(cls) -> ResourceRef:
        return cls(ResourceKind.UNKNOWN)


@dataclass(frozen=True)
class ParsedLocation:
    """An owner plus the resource addressed inside the owner's namespace."""

    owner: OwnerId
    resource: ResourceRef
