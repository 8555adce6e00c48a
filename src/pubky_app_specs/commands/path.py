"""Command group: storage paths (build, parse)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from pubky_app_specs.commands._base import KIND_CHOICE, SpecsGroup
from pubky_app_specs.domain.types import ResourceKind

if TYPE_CHECKING:
    from pubky_app_specs.commands._context import AppContext


@click.group(
    cls=SpecsGroup,
    examples="""\
  pubky-specs path build post 0032SSN7Q4EVG
  pubky-specs path build last_read
  pubky-specs path parse /pub/pubky.app/bookmarks/8Z8CWH8NVYQY39ZEBFGKQWP7CG""",
)
def path() -> None:
    """Build and parse /pub/pubky.app/ storage paths."""


@path.command("build")
@click.argument("kind", type=KIND_CHOICE)
@click.argument("object_id", metavar="[ID]", required=False)
@click.pass_obj
def build_cmd(app: AppContext, kind: str, object_id: str | None) -> None:
    """Build the storage path of a KIND object with ID."""
    app.emit(app.service.build_path(ResourceKind(kind.lower()), object_id))


@path.command("parse")
@click.argument("value", metavar="PATH")
@click.pass_obj
def parse_cmd(app: AppContext, value: str) -> None:
    """Resolve PATH into a resource kind and id."""
    app.emit(app.service.parse_path(value))
