"""Tests for OwnerId validation."""

import pytest

from pubky_app_specs.domain.errors import InvalidIdentifierError
from pubky_app_specs.domain.owner import OWNER_ID_LENGTH, OwnerId, is_owner_id
from pubky_app_specs.domain.types import ResourceKind


class TestOwnerId:
    def test_valid_key_round_trips(self, user_id: str) -> None:
        owner = OwnerId(user_id)
        assert str(owner) == user_id

    def test_length_constant(self, user_id: str) -> None:
        assert len(user_id) == OWNER_ID_LENGTH

    def test_rejects_wrong_length(self) -> None:
        with pytest.raises(InvalidIdentifierError, match="52"):
            OwnerId("abc")

    def test_rejects_foreign_symbols(self) -> None:
        with pytest.raises(InvalidIdentifierError, match="encoding"):
            OwnerId("0" * OWNER_ID_LENGTH)

    def test_accepts_uppercase(self, user_id: str) -> None:
        assert str(OwnerId(user_id.upper())) == user_id.upper()

    def test_equality_and_hash(self, user_id: str) -> None:
        assert OwnerId(user_id) == OwnerId(user_id)
        assert len({OwnerId(user_id), OwnerId(user_id)}) == 1

    def test_frozen(self, user_id: str) -> None:
        owner = OwnerId(user_id)
        with pytest.raises(Exception):
            owner.value = "x"  # type: ignore[misc]

    def test_to_location_is_profile(self, user_id: str) -> None:
        location = OwnerId(user_id).to_location()
        assert location.owner == OwnerId(user_id)
        assert location.resource.kind is ResourceKind.PROFILE


class TestIsOwnerId:
    def test_true_for_valid(self, user_id: str) -> None:
        assert is_owner_id(user_id) is True

    def test_false_for_invalid(self) -> None:
        assert is_owner_id("user_id") is False
