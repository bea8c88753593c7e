"""Subcommand modules for selkit.

Provides register_commands() which uses deferred imports to keep
``selkit --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the ``json`` group and the standalone commands on the root group."""
    from selkit.commands.json_cmd import json_group
    from selkit.commands.rect import rect
    from selkit.commands.select import select

    cli.add_command(json_group)
    cli.add_command(select)
    cli.add_command(rect)
