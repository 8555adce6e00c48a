"""Error kinds raised by the core.

Every failure of a validate, parse or import operation is one of these.
``code`` is stable and is what the service layer reports to callers.
"""

from __future__ import annotations


class SpecsError(Exception):
    """Base class for all pubky-app-specs errors."""

    code = "SPECS_ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MalformedInputError(SpecsError):
    """Bytes could not be decoded into the object's wire representation."""

    code = "MALFORMED_INPUT"


class InvalidIdentifierError(SpecsError):
    """Identifier has the wrong length, alphabet, time bounds, or hash."""

    code = "INVALID_IDENTIFIER"


class InvalidUriError(SpecsError):
    """URI has a bad scheme, owner host, or fixed path prefix."""

    code = "INVALID_URI"


class UnrecognizedResourceError(SpecsError):
    """Resource reference does not name a concrete object kind."""

    code = "UNRECOGNIZED_RESOURCE"


class FieldValidationError(SpecsError):
    """A per-field rule was violated."""

    code = "FIELD_VALIDATION"

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
