"""Commands: inspect the rule catalog."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from medform.commands._base import ENTITY_CHOICE, MedformCommand

if TYPE_CHECKING:
    from medform.commands._context import AppContext


@click.command(
    cls=MedformCommand,
    examples="""\
  medform rules
  medform rules --entity appointment
  medform -q rules""",
)
@click.option("--entity", type=ENTITY_CHOICE, default=None, help="Only list one entity.")
@click.pass_obj
def rules(app: AppContext, entity: str | None) -> None:
    """List every (entity, action) rule specification."""
    app.emit(app.service().list_rules(entity.lower() if entity else None))


@click.command(
    cls=MedformCommand,
    examples="""\
  medform describe hospital create
  medform --json describe auth register""",
)
@click.argument("entity", type=ENTITY_CHOICE)
@click.argument("action")
@click.pass_obj
def describe(app: AppContext, entity: str, action: str) -> None:
    """Show the field constraints and refinements of one rule spec."""
    app.emit(app.service().describe(entity.lower(), action.lower()))
