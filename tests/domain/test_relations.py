"""Tests for Follow and Mute."""

import pytest

from pubky_app_specs.domain.errors import FieldValidationError, InvalidIdentifierError
from pubky_app_specs.domain.relations import Follow, Mute


@pytest.mark.parametrize("model", [Follow, Mute])
class TestRelation:
    def test_create_stamps_time(self, model: type[Follow]) -> None:
        assert model.create().created_at > 0

    def test_explicit_created_at(self, model: type[Follow]) -> None:
        assert model.create(created_at=42).created_at == 42

    def test_verify_with_owner_id(self, model: type[Follow], other_user_id: str) -> None:
        model.create().verify(other_user_id)

    def test_non_owner_id_rejected(self, model: type[Follow]) -> None:
        with pytest.raises(InvalidIdentifierError):
            model.create().verify("0032SSN7Q4EVG")

    def test_non_positive_created_at(self, model: type[Follow]) -> None:
        with pytest.raises(FieldValidationError, match="created_at"):
            model(created_at=0).verify()

    def test_wire_format(self, model: type[Follow]) -> None:
        assert model(created_at=7).encode() == b'{"created_at":7}'

    def test_decode_and_validate(self, model: type[Follow], other_user_id: str) -> None:
        relation = model.decode_and_validate(b'{"created_at": 1700000000000000}', other_user_id)
        assert relation.created_at == 1700000000000000


class TestPaths:
    def test_follow_path(self, other_user_id: str) -> None:
        assert Follow.create_path(other_user_id) == f"/pub/pubky.app/follows/{other_user_id}"

    def test_mute_path(self, other_user_id: str) -> None:
        assert Mute.create_path(other_user_id) == f"/pub/pubky.app/mutes/{other_user_id}"
