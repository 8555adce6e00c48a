"""Command group: pubky:// URIs (parse, build)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from pubky_app_specs.commands._base import KIND_CHOICE, SpecsGroup
from pubky_app_specs.domain.types import ResourceKind

if TYPE_CHECKING:
    from pubky_app_specs.commands._context import AppContext

_OWNER = "operrr8wsbpr3ue9d4qj41ge1kcc6r7fdiy6o3ugjrrhi4y77rdo"

_URI_EXAMPLES = f"""\
  pubky-specs uri parse pubky://{_OWNER}/pub/pubky.app/posts/0032SSN7Q4EVG
  pubky-specs uri build {_OWNER} post 0032SSN7Q4EVG
  pubky-specs --json uri parse pubky://{_OWNER}/pub/pubky.app/profile.json"""


@click.group(cls=SpecsGroup, examples=_URI_EXAMPLES)
def uri() -> None:
    """Parse and build pubky:// URIs."""


@uri.command(
    examples=f"""\
  pubky-specs uri parse pubky://{_OWNER}/pub/pubky.app/profile.json
  pubky-specs uri parse pubky://{_OWNER}/pub/pubky.app/follows/{_OWNER}"""
)
@click.argument("value", metavar="URI")
@click.pass_obj
def parse(app: AppContext, value: str) -> None:
    """Parse URI into its owner, resource kind and id."""
    app.emit(app.service.parse_uri(value))


@uri.command(
    examples=f"""\
  pubky-specs uri build {_OWNER} profile
  pubky-specs uri build {_OWNER} tag 8Z8CWH8NVYQY39ZEBFGKQWP7CG"""
)
@click.argument("owner")
@click.argument("kind", type=KIND_CHOICE)
@click.argument("object_id", metavar="[ID]", required=False)
@click.pass_obj
def build(app: AppContext, owner: str, kind: str, object_id: str | None) -> None:
    """Build the URI of OWNER's KIND resource with ID."""
    app.emit(app.service.build_uri(owner, ResourceKind(kind.lower()), object_id))
