"""Standalone command: import an object payload addressed by a URI."""

from __future__ import annotations

from typing import TYPE_CHECKING, BinaryIO

import click

from pubky_app_specs.commands._base import SpecsCommand

if TYPE_CHECKING:
    from pubky_app_specs.commands._context import AppContext


@click.command(
    "import",
    cls=SpecsCommand,
    examples="""\
  pubky-specs import pubky://<owner>/pub/pubky.app/profile.json profile.json
  pubky-specs import pubky://<owner>/pub/pubky.app/blobs/<id> photo.png
  cat post.json | pubky-specs --json import pubky://<owner>/pub/pubky.app/posts/<id> -""",
)
@click.argument("uri")
@click.argument("payload", metavar="FILE", type=click.File("rb"))
@click.pass_obj
def import_cmd(app: AppContext, uri: str, payload: BinaryIO) -> None:
    """Decode, sanitize and validate FILE as the object at URI.

    FILE is JSON for every kind except blobs, which are raw bytes.
    Use ``-`` to read from stdin.
    """
    app.emit(app.service.import_object(uri, payload.read()))
