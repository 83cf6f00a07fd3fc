"""CLI command: question ask -- print the user's answer."""

from __future__ import annotations

import sys

import click

from question.cli import EXIT_NO_ANSWER
from question.errors import QuestionError
from question.prompt import Question


@click.command()
@click.argument("text")
@click.option("--default", "default", default=None, help="Answer used for an empty reply")
@click.option("--show-defaults", is_flag=True, help="Show the default in the prompt")
@click.option(
    "--accept",
    "accepted",
    multiple=True,
    help="Acceptable answer (repeatable); other replies are asked again",
)
@click.option("--clarification", default=None, help="Shown after an unacceptable reply")
@click.option("--tries", type=click.IntRange(min=1), default=None, help="Give up after this many attempts")
def ask(
    text: str,
    default: str | None,
    show_defaults: bool,
    accepted: tuple[str, ...],
    clarification: str | None,
    tries: int | None,
) -> None:
    """Ask TEXT and print the answer on stdout.

    The prompt is written to stderr, so $(question ask ...) captures only
    the answer.
    """
    q = Question(text, source=sys.stdin, sink=sys.stderr)
    if default is not None:
        q.default(default)
    if show_defaults:
        q.show_defaults()
    if accepted:
        q.acceptable(accepted)
    if clarification is not None:
        q.clarification(clarification)

    try:
        if tries is not None:
            answer = q.accept(tries)
        elif accepted:
            answer = q.until_acceptable()
        else:
            answer = q.ask()
    except QuestionError as exc:
        click.echo(f"\nError: {exc}", err=True)
        sys.exit(EXIT_NO_ANSWER)

    click.echo(answer.text)
