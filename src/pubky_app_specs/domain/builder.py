"""Specs builder: create objects on behalf of one owner.

Every ``create_*`` method builds the object, sanitizes it, derives its ID,
validates it, and returns it with the :class:`Meta` a client needs to store
it: the ID, the storage path and the full ``pubky://`` URL.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from pubky_app_specs.config.models import DEFAULT_CONFIG, SpecsConfig
from pubky_app_specs.domain.base import AppObject
from pubky_app_specs.domain.bookmark import Bookmark
from pubky_app_specs.domain.feed import Feed
from pubky_app_specs.domain.files import Blob, FileMeta
from pubky_app_specs.domain.last_read import LastRead
from pubky_app_specs.domain.owner import OwnerId
from pubky_app_specs.domain.post import Post, PostEmbed
from pubky_app_specs.domain.profile import UserLink, UserProfile
from pubky_app_specs.domain.relations import Follow, Mute
from pubky_app_specs.domain.tags import Tag
from pubky_app_specs.domain.types import FeedLayout, FeedReach, FeedSort, PostKind

T = TypeVar("T", bound=AppObject)


@dataclass(frozen=True)
class Meta:
    """Where a built object lives. ``id`` is empty for singletons."""

    id: str
    path: str
    url: str


@dataclass(frozen=True)
class BuiltObject(Generic[T]):
    value: T
    meta: Meta


class SpecsBuilder:
    """Builds validated objects for *owner_id*.

    Raises:
        InvalidIdentifierError: If *owner_id* is not a valid OwnerId.
    """

    def __init__(self, owner_id: str | OwnerId, *, config: SpecsConfig = DEFAULT_CONFIG) -> None:
        self._owner = owner_id if isinstance(owner_id, OwnerId) else OwnerId(owner_id)
        self._config = config

    @property
    def owner(self) -> OwnerId:
        return self._owner

    def _meta(self, obj: AppObject, object_id: str | None) -> Meta:
        path = obj.create_path(object_id, config=self._config)
        return Meta(
            id=object_id or "",
            path=path,
            url=f"{self._config.paths.protocol}{self._owner}{path}",
        )

    def _finish(self, obj: T, object_id: str | None = None) -> BuiltObject[T]:
        obj.verify(object_id, config=self._config)
        return BuiltObject(value=obj, meta=self._meta(obj, object_id))

    # --- Singletons ---

    def create_user(
        self,
        name: str,
        *,
        bio: str | None = None,
        image: str | None = None,
        links: list[UserLink] | None = None,
        status: str | None = None,
    ) -> BuiltObject[UserProfile]:
        user = UserProfile.create(
            name, bio=bio, image=image, links=links, status=status, config=self._config
        )
        return self._finish(user)

    def create_last_read(self, timestamp: int | None = None) -> BuiltObject[LastRead]:
        return self._finish(LastRead.create(timestamp))

    # --- Time-derived IDs ---

    def create_post(
        self,
        content: str,
        kind: PostKind = PostKind.SHORT,
        *,
        parent: str | None = None,
        embed: PostEmbed | None = None,
        attachments: list[str] | None = None,
    ) -> BuiltObject[Post]:
        post = Post.create(
            content,
            kind,
            parent=parent,
            embed=embed,
            attachments=attachments,
            config=self._config,
        )
        return self._finish(post, post.create_id())

    def edit_post(self, original: Post, post_id: str, new_content: str) -> BuiltObject[Post]:
        """Replace the content of *original*, keeping its ID.

        The edited post is sanitized and validated again against *post_id*.
        """
        post = original.model_copy(update={"content": new_content}).sanitize(config=self._config)
        return self._finish(post, post_id)

    def create_file(
        self,
        name: str,
        src: str,
        content_type: str,
        size: int,
    ) -> BuiltObject[FileMeta]:
        file = FileMeta.create(name, src, content_type, size, config=self._config)
        return self._finish(file, file.create_id(now=file.created_at))

    # --- Content-hash IDs ---

    def create_tag(self, uri: str, label: str) -> BuiltObject[Tag]:
        tag = Tag.create(uri, label, config=self._config)
        return self._finish(tag, tag.create_id())

    def create_bookmark(self, uri: str) -> BuiltObject[Bookmark]:
        bookmark = Bookmark.create(uri, config=self._config)
        return self._finish(bookmark, bookmark.create_id())

    def create_blob(self, data: bytes) -> BuiltObject[Blob]:
        blob = Blob.create(data)
        return self._finish(blob, blob.create_id())

    def create_feed(
        self,
        name: str,
        reach: FeedReach,
        layout: FeedLayout,
        sort: FeedSort,
        *,
        tags: list[str] | None = None,
        content: PostKind | None = None,
    ) -> BuiltObject[Feed]:
        feed = Feed.create(
            name, reach, layout, sort, tags=tags, content=content, config=self._config
        )
        return self._finish(feed, feed.create_id())

    # --- Owner-ID relations ---

    def create_follow(self, followee_id: str) -> BuiltObject[Follow]:
        return self._finish(Follow.create(), followee_id)

    def create_mute(self, mutee_id: str) -> BuiltObject[Mute]:
        return self._finish(Mute.create(), mutee_id)
