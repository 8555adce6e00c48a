"""OwnerId: the validated public key naming a namespace owner."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from pubky_app_specs.domain.codec import Alphabet, decode
from pubky_app_specs.domain.errors import InvalidIdentifierError

if TYPE_CHECKING:
    from pubky_app_specs.domain.resources import ParsedLocation

OWNER_ID_LENGTH = 52


@dataclass(frozen=True, order=True)
class OwnerId:
    """A 52-character z-base-32 encoded public key.

    INVARIANT: an OwnerId instance always holds a valid key. Invalid strings
    raise :class:`InvalidIdentifierError` at construction.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or len(self.value) != OWNER_ID_LENGTH:
            msg = f"Validation Error: the string is not {OWNER_ID_LENGTH} utf chars"
            raise InvalidIdentifierError(msg)
        try:
            decode(self.value, Alphabet.ZBASE32)
        except ValueError as exc:
            msg = "Validation Error: invalid public key encoding"
            raise InvalidIdentifierError(msg) from exc

    def __str__(self) -> str:
        return self.value

    def to_location(self) -> ParsedLocation:
        """Return the location of this owner's profile."""
        from pubky_app_specs.domain.resources import ParsedLocation, ResourceRef

        return ParsedLocation(owner=self, resource=ResourceRef.profile())


def is_owner_id(value: str) -> bool:
    """Check whether *value* would construct a valid :class:`OwnerId`."""
    try:
        OwnerId(value)
    except InvalidIdentifierError:
        return False
    return True
