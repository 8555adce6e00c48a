"""Tests for Feed."""

import pytest

from pubky_app_specs.domain.errors import (
    FieldValidationError,
    InvalidIdentifierError,
    MalformedInputError,
)
from pubky_app_specs.domain.feed import Feed, FeedConfig
from pubky_app_specs.domain.types import FeedLayout, FeedReach, FeedSort, PostKind


def _feed(**overrides) -> Feed:
    fields = {
        "name": "Rust Bitcoiners",
        "reach": FeedReach.ALL,
        "layout": FeedLayout.COLUMNS,
        "sort": FeedSort.RECENT,
        "tags": ["bitcoin", "rust"],
        "created_at": 1,
    }
    fields.update(overrides)
    name = fields.pop("name")
    reach = fields.pop("reach")
    layout = fields.pop("layout")
    sort = fields.pop("sort")
    return Feed.create(name, reach, layout, sort, **fields)


class TestIdentity:
    def test_id_data_is_compact_config_json(self) -> None:
        assert _feed().id_data() == (
            '{"tags":["bitcoin","rust"],"reach":"all","layout":"columns",'
            '"sort":"recent","content":null}'
        )

    def test_id_ignores_name_and_time(self) -> None:
        assert _feed().create_id() == _feed(name="Other", created_at=99).create_id()

    def test_id_depends_on_config(self) -> None:
        assert _feed().create_id() != _feed(sort=FeedSort.POPULARITY).create_id()

    def test_tags_normalized_before_hashing(self) -> None:
        assert _feed(tags=[" Bitcoin ", "RUST"]).create_id() == _feed().create_id()

    def test_verify_with_id(self) -> None:
        feed = _feed()
        feed.verify(feed.create_id())

    def test_wrong_id(self) -> None:
        with pytest.raises(InvalidIdentifierError):
            _feed().verify(_feed(layout=FeedLayout.WIDE).create_id())


class TestSanitizeAndValidate:
    def test_name_trimmed(self) -> None:
        assert _feed(name="  Mine  ").name == "Mine"

    def test_no_tags(self) -> None:
        feed = _feed(tags=None)
        assert feed.feed.tags is None
        feed.verify()

    def test_content_kind(self) -> None:
        assert _feed(content=PostKind.IMAGE).feed.content is PostKind.IMAGE

    def test_empty_name(self) -> None:
        with pytest.raises(FieldValidationError, match="name cannot be empty"):
            _feed(name="   ").verify()

    def test_invalid_tag(self) -> None:
        with pytest.raises(FieldValidationError) as exc_info:
            _feed(tags=["two words"]).verify()
        assert exc_info.value.field == "feed.tags"


class TestWireFormat:
    def test_decode_and_validate(self) -> None:
        data = (
            b'{"feed": {"tags": ["Rust"], "reach": "following", "layout": "wide", '
            b'"sort": "popularity", "content": "video"}, "name": "Videos", "created_at": 1}'
        )
        feed = Feed.decode_and_validate(data)
        assert feed.feed == FeedConfig(
            tags=["rust"],
            reach=FeedReach.FOLLOWING,
            layout=FeedLayout.WIDE,
            sort=FeedSort.POPULARITY,
            content=PostKind.VIDEO,
        )

    def test_unknown_reach_is_malformed(self) -> None:
        data = (
            b'{"feed": {"reach": "everyone", "layout": "wide", "sort": "recent"}, '
            b'"name": "x", "created_at": 1}'
        )
        with pytest.raises(MalformedInputError):
            Feed.decode(data)
