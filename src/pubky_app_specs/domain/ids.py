"""ID generation and validation contracts.

Two ID strategies:
- Time-derived (posts, files): microseconds since the UNIX epoch as an
  8-byte big-endian integer, Crockford base-32 encoded (13 chars).
- Content-hash (tags, bookmarks, feeds, blobs): BLAKE3 of a canonical
  per-kind string, first half of the digest, Crockford base-32 (26 chars).

INVARIANT: IDs are permanent. The same input always yields the same
content-hash ID; two time-derived IDs taken in the same microsecond are
identical and are deliberately not deduplicated.
"""

from __future__ import annotations

import time

import blake3

from pubky_app_specs.config.models import DEFAULT_CONFIG, SpecsConfig
from pubky_app_specs.domain.codec import Alphabet, decode, encode
from pubky_app_specs.domain.errors import InvalidIdentifierError
from pubky_app_specs.domain.types import I64_MAX, I64_MIN

TIMESTAMP_ID_LENGTH = 13
HASH_ID_LENGTH = 26

# Protocol decision for blob identifiers: hash the full payload.
BLOB_ID_SCHEME = "blake3-full-v1"


def now_micros() -> int:
    """Current wall-clock time in microseconds since the UNIX epoch."""
    return time.time_ns() // 1_000


# ---------------------------------------------------------------------------
# Time-derived IDs
# ---------------------------------------------------------------------------


def generate_timestamp_id(timestamp: int | None = None) -> str:
    """Encode *timestamp* (default: now) as a 13-character Crockford ID.

    Raises:
        InvalidIdentifierError: If *timestamp* does not fit a signed 64-bit
            integer.
    """
    micros = now_micros() if timestamp is None else timestamp
    if not I64_MIN <= micros <= I64_MAX:
        msg = f"Validation Error: Timestamp out of range for an ID: {micros}"
        raise InvalidIdentifierError(msg)
    return encode(micros.to_bytes(8, "big", signed=True), Alphabet.CROCKFORD)


def timestamp_from_id(object_id: str) -> int:
    """Decode a time-derived ID back into microseconds since the epoch.

    Raises:
        InvalidIdentifierError: If the ID is not 13 characters or does not
            decode to exactly 8 bytes.
    """
    if len(object_id) != TIMESTAMP_ID_LENGTH:
        msg = f"Validation Error: Invalid ID length: must be {TIMESTAMP_ID_LENGTH} characters"
        raise InvalidIdentifierError(msg)
    try:
        raw = decode(object_id, Alphabet.CROCKFORD)
    except ValueError as exc:
        msg = f"Failed to decode Crockford Base32 ID: {object_id!r}"
        raise InvalidIdentifierError(msg) from exc
    if len(raw) != 8:
        msg = "Validation Error: Invalid ID length after decoding"
        raise InvalidIdentifierError(msg)
    return int.from_bytes(raw, "big", signed=True)


def validate_timestamp_id(
    object_id: str,
    *,
    now: int | None = None,
    config: SpecsConfig = DEFAULT_CONFIG,
) -> None:
    """Check a time-derived ID against the protocol epoch and clock skew.

    Args:
        object_id: The 13-character ID to check.
        now: Current time in microseconds (default: the wall clock).
        config: Supplies the epoch and the allowed future skew.

    Raises:
        InvalidIdentifierError: On bad length, encoding, or time bounds.
    """
    micros = timestamp_from_id(object_id)
    current = now_micros() if now is None else now

    if micros < config.ids.epoch_micros:
        msg = "Validation Error: Invalid ID, timestamp must be after October 1st, 2024"
        raise InvalidIdentifierError(msg)
    if micros > current + config.ids.max_future_micros:
        msg = "Validation Error: Invalid ID, timestamp is too far in the future"
        raise InvalidIdentifierError(msg)


# ---------------------------------------------------------------------------
# Content-hash IDs
# ---------------------------------------------------------------------------


def generate_hash_id(data: str | bytes) -> str:
    """Return the 26-character content-hash ID of *data*.

    Strings are hashed as UTF-8.
    """
    raw = data.encode("utf-8") if isinstance(data, str) else data
    digest = blake3.blake3(raw).digest()
    return encode(digest[: len(digest) // 2], Alphabet.CROCKFORD)


def validate_hash_id(data: str | bytes, object_id: str) -> None:
    """Recompute the content-hash ID of *data* and compare with *object_id*.

    Raises:
        InvalidIdentifierError: If the IDs differ.
    """
    expected = generate_hash_id(data)
    if expected != object_id:
        msg = f"Invalid ID: expected {expected}, found {object_id}"
        raise InvalidIdentifierError(msg)
