"""question CLI entry point.

Exposes the prompt loop to shell scripts: ``question ask`` prints the
user's answer on stdout and ``question confirm`` reports yes/no through
the exit status, while prompts go to stderr.
"""

import click

from question import __version__


@click.group()
@click.version_option(version=__version__, prog_name="question")
def cli() -> None:
    """question - ask the user a question from a shell script.

    Use inside command substitution or as a condition, for example
    name=$(question ask "Name?") or question confirm "Deploy?" && make deploy.
    """


from question.cli.ask import ask  # noqa: E402
from question.cli.confirm import confirm  # noqa: E402

cli.add_command(ask)
cli.add_command(confirm)
