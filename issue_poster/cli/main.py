"""Main CLI entry point."""

import sys

import click
import typer
from dotenv import load_dotenv

from .post import post

# Load environment variables from .env file
load_dotenv()

PROG_NAME = "bitbucket-issue-poster"

# Exit code for command-line usage errors
USAGE_ERROR_EXIT_CODE = -1

app = typer.Typer(
    name=PROG_NAME,
    help="Create Bitbucket issues from a CSV file or a list of titles",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.command(name="post", context_settings={"help_option_names": ["-h", "--help"]})(
    post
)


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return its exit code.

    Usage errors are reported by click and mapped to ``-1`` without
    touching the network.
    """
    try:
        rv = app(args=argv, prog_name=PROG_NAME, standalone_mode=False)
    except click.UsageError as e:
        e.show()
        return USAGE_ERROR_EXIT_CODE
    except click.Abort:
        typer.echo("Aborted!", err=True)
        return 1
    return rv if isinstance(rv, int) else 0


def run() -> None:
    """Console-script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
