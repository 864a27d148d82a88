"""Subcommand modules for medform.

Provides register_commands() which uses deferred imports to keep
``medform --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from medform.commands.rules import describe, rules
    from medform.commands.validate import validate

    cli.add_command(validate)
    cli.add_command(rules)
    cli.add_command(describe)
