"""Command group: object creation for an owner (user, post, tag, ...)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, BinaryIO

import click

from pubky_app_specs.commands._base import SpecsGroup
from pubky_app_specs.domain.types import FeedLayout, FeedReach, FeedSort, PostKind, ResourceKind

if TYPE_CHECKING:
    from pubky_app_specs.commands._context import AppContext


def _choice(enum: type[Any]) -> click.Choice:
    return click.Choice([member.value for member in enum], case_sensitive=False)


def _emit_created(app: AppContext, resource_kind: ResourceKind, **fields: Any) -> None:
    """Create *resource_kind* for the group's owner and emit the result."""
    if app.owner is None:
        msg = "Missing owner: pass -o/--owner or set PUBKY_SPECS_OWNER."
        raise click.UsageError(msg)
    app.emit(app.service.create(app.owner, resource_kind, **fields))


_CREATE_EXAMPLES = """\
  pubky-specs create -o <owner> user "Alice" --bio "Hi" --link Site https://example.com
  pubky-specs create -o <owner> post "Hello world"
  pubky-specs create -o <owner> tag pubky://<owner>/pub/pubky.app/posts/<id> cool
  pubky-specs create -o <owner> feed "Rust" --reach all --layout columns --sort recent
  pubky-specs create -o <owner> blob photo.png"""


@click.group(cls=SpecsGroup, examples=_CREATE_EXAMPLES)
@click.option(
    "-o",
    "--owner",
    envvar="PUBKY_SPECS_OWNER",
    default=None,
    help="Owner public key (52-char z-base-32).",
)
@click.pass_obj
def create(app: AppContext, owner: str | None) -> None:
    """Create validated objects with their id, path and URL."""
    app.owner = owner


@create.command()
@click.argument("name")
@click.option("--bio", default=None, help="Short biography.")
@click.option("--image", default=None, help="Avatar URL.")
@click.option(
    "--link",
    "links",
    nargs=2,
    multiple=True,
    metavar="TITLE URL",
    help="Profile link (repeatable).",
)
@click.option("--status", default=None, help="Status line.")
@click.pass_obj
def user(
    app: AppContext,
    name: str,
    bio: str | None,
    image: str | None,
    links: tuple[tuple[str, str], ...],
    status: str | None,
) -> None:
    """Create the owner's profile."""
    from pubky_app_specs.domain.profile import UserLink

    _emit_created(
        app,
        ResourceKind.PROFILE,
        name=name,
        bio=bio,
        image=image,
        links=[UserLink(title=title, url=url) for title, url in links] if links else None,
        status=status,
    )


@create.command()
@click.argument("content")
@click.option("--kind", type=_choice(PostKind), default=PostKind.SHORT.value, help="Post kind.")
@click.option("--parent", default=None, help="URI of the post this replies to.")
@click.option("--embed", "embed_uri", default=None, help="URI of an embedded post.")
@click.option(
    "--embed-kind",
    type=_choice(PostKind),
    default=PostKind.SHORT.value,
    help="Kind of the embedded post.",
)
@click.option("--attachment", "attachments", multiple=True, help="Attachment URI (repeatable).")
@click.pass_obj
def post(
    app: AppContext,
    content: str,
    kind: str,
    parent: str | None,
    embed_uri: str | None,
    embed_kind: str,
    attachments: tuple[str, ...],
) -> None:
    """Create a post."""
    from pubky_app_specs.domain.post import PostEmbed

    embed = None
    if embed_uri is not None:
        embed = PostEmbed(kind=PostKind(embed_kind.lower()), uri=embed_uri)
    _emit_created(
        app,
        ResourceKind.POST,
        content=content,
        kind=PostKind(kind.lower()),
        parent=parent,
        embed=embed,
        attachments=list(attachments) if attachments else None,
    )


@create.command()
@click.argument("uri")
@click.argument("label")
@click.pass_obj
def tag(app: AppContext, uri: str, label: str) -> None:
    """Tag URI with LABEL."""
    _emit_created(app, ResourceKind.TAG, uri=uri, label=label)


@create.command()
@click.argument("uri")
@click.pass_obj
def bookmark(app: AppContext, uri: str) -> None:
    """Bookmark URI."""
    _emit_created(app, ResourceKind.BOOKMARK, uri=uri)


@create.command()
@click.argument("user_id")
@click.pass_obj
def follow(app: AppContext, user_id: str) -> None:
    """Follow USER_ID."""
    _emit_created(app, ResourceKind.FOLLOW, followee_id=user_id)


@create.command()
@click.argument("user_id")
@click.pass_obj
def mute(app: AppContext, user_id: str) -> None:
    """Mute USER_ID."""
    _emit_created(app, ResourceKind.MUTE, mutee_id=user_id)


@create.command("last-read")
@click.option(
    "--timestamp",
    type=int,
    default=None,
    help="Milliseconds since the UNIX epoch (default: now).",
)
@click.pass_obj
def last_read(app: AppContext, timestamp: int | None) -> None:
    """Mark notifications as read."""
    _emit_created(app, ResourceKind.LAST_READ, timestamp=timestamp)


@create.command("file")
@click.argument("name")
@click.argument("src")
@click.argument("content_type")
@click.argument("size", type=int)
@click.pass_obj
def file_cmd(app: AppContext, name: str, src: str, content_type: str, size: int) -> None:
    """Create file metadata pointing at the blob SRC."""
    _emit_created(
        app, ResourceKind.FILE, name=name, src=src, content_type=content_type, size=size
    )


@create.command()
@click.argument("payload", metavar="FILE", type=click.File("rb"))
@click.pass_obj
def blob(app: AppContext, payload: BinaryIO) -> None:
    """Create a blob from the bytes of FILE (``-`` for stdin)."""
    _emit_created(app, ResourceKind.BLOB, data=payload.read())


@create.command()
@click.argument("name")
@click.option("--reach", type=_choice(FeedReach), required=True, help="Whose posts to include.")
@click.option("--layout", type=_choice(FeedLayout), required=True, help="Display layout.")
@click.option("--sort", type=_choice(FeedSort), required=True, help="Sort order.")
@click.option("--tag", "tags", multiple=True, help="Tag filter (repeatable).")
@click.option("--content", type=_choice(PostKind), default=None, help="Post kind filter.")
@click.pass_obj
def feed(
    app: AppContext,
    name: str,
    reach: str,
    layout: str,
    sort: str,
    tags: tuple[str, ...],
    content: str | None,
) -> None:
    """Create a saved feed."""
    _emit_created(
        app,
        ResourceKind.FEED,
        name=name,
        reach=FeedReach(reach.lower()),
        layout=FeedLayout(layout.lower()),
        sort=FeedSort(sort.lower()),
        tags=list(tags) if tags else None,
        content=PostKind(content.lower()) if content else None,
    )
