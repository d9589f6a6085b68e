"""Subcommand modules for selectorkit.

Provides register_commands() which uses deferred imports to keep
``selectorkit --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from selectorkit.commands.build import build
    from selectorkit.commands.render import render

    cli.add_command(build)
    cli.add_command(render)
