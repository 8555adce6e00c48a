"""Subcommand modules for pubky-specs.

Provides register_commands() which uses deferred imports to keep
``pubky-specs --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root CLI group.

    4 groups (have subcommands) + 1 standalone command.
    """
    # --- Groups ---
    from pubky_app_specs.commands.create import create
    from pubky_app_specs.commands.ids import id_group
    from pubky_app_specs.commands.path import path
    from pubky_app_specs.commands.uri import uri

    cli.add_command(uri)
    cli.add_command(path)
    cli.add_command(id_group)
    cli.add_command(create)

    # --- Standalone commands ---
    from pubky_app_specs.commands.import_cmd import import_cmd

    cli.add_command(import_cmd)
