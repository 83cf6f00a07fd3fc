"""CLI command: question confirm -- exit 0 for yes, 1 for no."""

from __future__ import annotations

import sys

import click

from question.answer import Answer
from question.cli import EXIT_NO_ANSWER
from question.errors import QuestionError
from question.prompt import Question


@click.command()
@click.argument("text")
@click.option(
    "--default",
    "default",
    type=click.Choice(["yes", "no"], case_sensitive=False),
    default=None,
    help="Answer used for an empty reply",
)
@click.option("--show-defaults", is_flag=True, help="Show (Y/n) or (y/N) in the prompt")
@click.option("--clarification", default=None, help="Shown after a reply that is not yes/no")
def confirm(
    text: str,
    default: str | None,
    show_defaults: bool,
    clarification: str | None,
) -> None:
    """Ask the yes/no question TEXT; exit 0 for yes and 1 for no."""
    q = Question(text, source=sys.stdin, sink=sys.stderr)
    if default is not None:
        q.default(Answer.parse(default))
    if show_defaults:
        q.show_defaults()
    if clarification is not None:
        q.clarification(clarification)

    try:
        answer = q.confirm()
    except QuestionError as exc:
        click.echo(f"\nError: {exc}", err=True)
        sys.exit(EXIT_NO_ANSWER)

    sys.exit(0 if answer.is_yes else 1)
