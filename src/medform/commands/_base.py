"""Shared pieces for medform's click commands.

``MedformCommand`` takes an ``examples`` string and exposes it through an
eager ``--examples`` flag, so sample payloads and invocations stay out of
``--help``. ``ENTITY_CHOICE`` is the record-family argument type.
"""

from __future__ import annotations

from typing import Any

import click

from medform.domain.types import Entity


def _add_examples_option(cmd: click.Command, examples: str) -> None:
    """Append the ``--examples`` option that prints *examples* and exits."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class MedformCommand(click.Command):
    """Command carrying optional usage examples."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


ENTITY_CHOICE = click.Choice([str(e) for e in Entity], case_sensitive=False)
