"""Tests for LastRead."""

import pytest

from pubky_app_specs.domain.errors import FieldValidationError, MalformedInputError
from pubky_app_specs.domain.last_read import LastRead


class TestLastRead:
    def test_create_uses_milliseconds(self) -> None:
        # Millisecond timestamps for current dates have 13 digits.
        assert len(str(LastRead.create().timestamp)) == 13

    def test_explicit_timestamp(self) -> None:
        assert LastRead.create(1_700_000_000_000).timestamp == 1_700_000_000_000

    def test_valid(self) -> None:
        LastRead.create().verify()

    @pytest.mark.parametrize("timestamp", [0, -5])
    def test_non_positive_rejected(self, timestamp: int) -> None:
        with pytest.raises(FieldValidationError, match="positive integer"):
            LastRead(timestamp=timestamp).verify()

    def test_decode_and_validate(self) -> None:
        assert LastRead.decode_and_validate(b'{"timestamp": 1700000000000}').timestamp == (
            1700000000000
        )

    @pytest.mark.parametrize(
        "payload",
        [
            b'{"timestamp": "5"}',
            b'{"timestamp": 5.0}',
            b'{"timestamp": 99999999999999999999999}',
            b'{"timestamp": 9223372036854775808}',
        ],
    )
    def test_decode_rejects_non_i64_timestamp(self, payload: bytes) -> None:
        with pytest.raises(MalformedInputError):
            LastRead.decode(payload)

    def test_decode_accepts_i64_max(self) -> None:
        assert LastRead.decode(b'{"timestamp": 9223372036854775807}').timestamp == 2**63 - 1

    def test_create_path(self) -> None:
        assert LastRead.create_path() == "/pub/pubky.app/last_read"
