"""Post: short/long text or media, identified by a time-derived ID.

URI: ``/pub/pubky.app/posts/:post_id`` where ``post_id`` is the Crockford
base-32 encoding of the creation timestamp, e.g. ``00321FCW75ZFY``.
"""

from __future__ import annotations

from typing import ClassVar, Self

from pydantic import BaseModel

from pubky_app_specs.config.models import DEFAULT_CONFIG, SpecsConfig
from pubky_app_specs.domain.base import DELETED_KEYWORD, AppObject, crop
from pubky_app_specs.domain.errors import FieldValidationError
from pubky_app_specs.domain.types import IdScheme, PostKind, ResourceKind
from pubky_app_specs.domain.urls import normalize_url, parse_url


class PostEmbed(BaseModel):
    """Content embedded in a post, e.g. a reposted post URI."""

    model_config = {"frozen": True}

    kind: PostKind
    uri: str


class Post(AppObject):
    resource_kind: ClassVar[ResourceKind] = ResourceKind.POST
    id_scheme: ClassVar[IdScheme] = IdScheme.TIMESTAMP

    content: str
    kind: PostKind = PostKind.SHORT
    parent: str | None = None  # URI of the parent post when this is a reply
    embed: PostEmbed | None = None
    attachments: list[str] | None = None

    @classmethod
    def create(
        cls,
        content: str,
        kind: PostKind = PostKind.SHORT,
        *,
        parent: str | None = None,
        embed: PostEmbed | None = None,
        attachments: list[str] | None = None,
        config: SpecsConfig = DEFAULT_CONFIG,
    ) -> Self:
        """Build a sanitized post from field values."""
        post = cls(
            content=content, kind=kind, parent=parent, embed=embed, attachments=attachments
        )
        return post.sanitize(config=config)

    def max_content_length(self, config: SpecsConfig = DEFAULT_CONFIG) -> int:
        """Content cap for this post's kind; only long posts get the long cap."""
        if self.kind is PostKind.LONG:
            return config.post.max_long_content_length
        return config.post.max_short_content_length

    def sanitize(self, *, config: SpecsConfig = DEFAULT_CONFIG) -> Self:
        """Trim and crop content, drop unparseable URIs, normalize the rest.

        The reserved ``[DELETED]`` keyword is left in place so validation can
        reject it.
        """
        parent = None if self.parent is None else normalize_url(self.parent.strip())

        embed = None
        if self.embed is not None:
            embed_uri = normalize_url(self.embed.uri.strip())
            if embed_uri is not None:
                embed = PostEmbed(kind=self.embed.kind, uri=embed_uri)

        attachments = None
        if self.attachments is not None:
            normalized = (normalize_url(item.strip()) for item in self.attachments)
            attachments = [item for item in normalized if item is not None]

        return self.model_copy(
            update={
                "content": crop(self.content, self.max_content_length(config)),
                "parent": parent,
                "embed": embed,
                "attachments": attachments,
            }
        )

    def _check(self, config: SpecsConfig) -> None:
        if self.content == DELETED_KEYWORD:
            raise FieldValidationError(
                "content",
                f"Validation Error: Content cannot be the reserved keyword {DELETED_KEYWORD}",
            )

        if len(self.content) > self.max_content_length(config):
            raise FieldValidationError(
                "content",
                f"Validation Error: Post content exceeds maximum length for {self.kind} kind",
            )

        if self.parent is not None and parse_url(self.parent) is None:
            raise FieldValidationError(
                "parent", f"Validation Error: Invalid parent URI: {self.parent}"
            )
        if self.embed is not None and parse_url(self.embed.uri) is None:
            raise FieldValidationError(
                "embed", f"Validation Error: Invalid embed URI: {self.embed.uri}"
            )

        if self.attachments is not None:
            limit = config.post.max_attachments
            if len(self.attachments) > limit:
                raise FieldValidationError(
                    "attachments",
                    f"Validation Error: Too many attachments (maximum is {limit})",
                )
            for attachment in self.attachments:
                url = parse_url(attachment)
                if url is None or url.scheme not in config.post.attachment_schemes:
                    raise FieldValidationError(
                        "attachments",
                        f"Validation Error: Invalid attachment URL: {attachment}",
                    )
