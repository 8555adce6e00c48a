"""Feed: a saved timeline view (tags, reach, layout, sort, content kind).

URI: ``/pub/pubky.app/feeds/:feed_id`` where ``feed_id`` is the content-hash
ID of the compact JSON of the feed configuration.
"""

from __future__ import annotations

from typing import ClassVar, Self

from pydantic import BaseModel

from pubky_app_specs.config.models import DEFAULT_CONFIG, SpecsConfig
from pubky_app_specs.domain.base import AppObject
from pubky_app_specs.domain.errors import FieldValidationError
from pubky_app_specs.domain.ids import now_micros
from pubky_app_specs.domain.tags import sanitize_tag_label, validate_tag_label
from pubky_app_specs.domain.types import (
    FeedLayout,
    FeedReach,
    FeedSort,
    IdScheme,
    PostKind,
    ResourceKind,
    WireInt,
)


class FeedConfig(BaseModel):
    """Feed parameters. Field order is the hashed key order."""

    model_config = {"frozen": True}

    tags: list[str] | None = None
    reach: FeedReach
    layout: FeedLayout
    sort: FeedSort
    content: PostKind | None = None


class Feed(AppObject):
    resource_kind: ClassVar[ResourceKind] = ResourceKind.FEED
    id_scheme: ClassVar[IdScheme] = IdScheme.HASH

    feed: FeedConfig
    name: str
    created_at: WireInt

    @classmethod
    def create(
        cls,
        name: str,
        reach: FeedReach,
        layout: FeedLayout,
        sort: FeedSort,
        *,
        tags: list[str] | None = None,
        content: PostKind | None = None,
        created_at: int | None = None,
        config: SpecsConfig = DEFAULT_CONFIG,
    ) -> Self:
        feed_config = FeedConfig(tags=tags, reach=reach, layout=layout, sort=sort, content=content)
        stamp = now_micros() if created_at is None else created_at
        return cls(feed=feed_config, name=name, created_at=stamp).sanitize(config=config)

    def id_data(self) -> str:
        return self.feed.model_dump_json()

    def sanitize(self, *, config: SpecsConfig = DEFAULT_CONFIG) -> Self:
        tags = self.feed.tags
        if tags is not None:
            tags = [sanitize_tag_label(tag) for tag in tags]
        return self.model_copy(
            update={
                "name": self.name.strip(),
                "feed": self.feed.model_copy(update={"tags": tags}),
            }
        )

    def _check(self, config: SpecsConfig) -> None:
        if not self.name.strip():
            raise FieldValidationError("name", "Validation Error: Feed name cannot be empty")
        for tag in self.feed.tags or ():
            validate_tag_label(tag, field="feed.tags", config=config)
