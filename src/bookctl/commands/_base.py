"""Shared click base class for bookctl subcommands."""

from __future__ import annotations

from typing import Any

import click


def _examples_callback(examples: str) -> Any:
    def callback(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    return callback


class BookCommand(click.Command):
    """A command whose usage samples live behind ``--examples``.

    The flag is eager, so ``bookctl buy --examples`` prints the samples
    even when the command's own options would not validate.
    """

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=_examples_callback(examples),
                    help="Show usage examples.",
                )
            )
