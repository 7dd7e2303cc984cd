"""Subcommand modules for bookctl.

Provides register_commands(), which uses deferred imports so that
``bookctl --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the inventory commands on the root CLI group."""
    from bookctl.commands.buy import buy
    from bookctl.commands.get import get
    from bookctl.commands.restock import restock

    cli.add_command(get)
    cli.add_command(buy)
    cli.add_command(restock)
