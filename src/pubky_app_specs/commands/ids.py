"""Command group: identifiers (generate, validate, hash)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from pubky_app_specs.commands._base import SpecsGroup

if TYPE_CHECKING:
    from pubky_app_specs.commands._context import AppContext


@click.group(
    "id",
    cls=SpecsGroup,
    examples="""\
  pubky-specs id generate
  pubky-specs id validate 0032SSN7Q4EVG
  pubky-specs id hash 'pubky://<owner>/pub/pubky.app/posts/0032SSN7Q4EVG:cool'""",
)
def id_group() -> None:
    """Generate and check object identifiers."""


@id_group.command()
@click.option(
    "--timestamp",
    type=int,
    default=None,
    help="Microseconds since the UNIX epoch (default: now).",
)
@click.pass_obj
def generate(app: AppContext, timestamp: int | None) -> None:
    """Generate a time-derived ID (posts, files)."""
    app.emit(app.service.generate_id(timestamp))


@id_group.command()
@click.argument("object_id", metavar="ID")
@click.pass_obj
def validate(app: AppContext, object_id: str) -> None:
    """Check a time-derived ID against the protocol epoch and clock skew."""
    app.emit(app.service.validate_id(object_id))


@id_group.command("hash")
@click.argument("text")
@click.pass_obj
def hash_cmd(app: AppContext, text: str) -> None:
    """Content-hash ID of TEXT (tags, bookmarks, feeds)."""
    app.emit(app.service.hash_id(text))
