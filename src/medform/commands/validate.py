"""Command: validate a JSON record against a catalog rule spec."""

from __future__ import annotations

import json
from datetime import datetime
from typing import TYPE_CHECKING, TextIO

import click

from medform.commands._base import ENTITY_CHOICE, MedformCommand

if TYPE_CHECKING:
    from medform.commands._context import AppContext


@click.command(
    cls=MedformCommand,
    examples="""\
  medform validate hospital create hospital.json
  cat appointment.json | medform validate appointment reschedule
  medform --json validate user create user.json
  medform validate appointment create booking.json --today 2026-10-18
  medform -q validate auth register signup.json""",
)
@click.argument("entity", type=ENTITY_CHOICE)
@click.argument("action")
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option(
    "--today",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    default=None,
    help="Evaluation day for past-date checks (default: configured clock).",
)
@click.pass_obj
def validate(
    app: AppContext,
    entity: str,
    action: str,
    source: TextIO,
    today: datetime | None,
) -> None:
    """Validate a JSON object from SOURCE (default: stdin) against ENTITY ACTION."""
    from medform.services.result import INVALID_INPUT, ServiceResult

    raw = source.read()
    try:
        candidate = json.loads(raw)
    except json.JSONDecodeError as exc:
        app.emit(ServiceResult.failure("validate", INVALID_INPUT, f"Invalid JSON input: {exc}"))
        return

    clock = today.date if today is not None else None
    app.emit(app.service(clock=clock).validate(entity.lower(), action.lower(), candidate))
