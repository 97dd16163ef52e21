"""Standardized CLI option definitions for the issue poster.

Short flags follow the long-standing ``-u -p -r -c -i -v`` layout.
"""

import typer

from .. import __version__


def validate_repository(value: str) -> str:
    """Check that a repository is given as ``owner/slug``."""
    if value is None:
        return value
    owner, sep, slug = value.partition("/")
    if not sep or not owner or not slug or "/" in slug:
        raise typer.BadParameter(f"expected owner/slug, got '{value}'")
    return value


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"Bitbucket Issue Poster v{__version__}")
        raise typer.Exit()


# Authentication options
USER_OPTION = typer.Option(
    ..., "--user", "-u", envvar="BITBUCKET_USER", help="Bitbucket username"
)

PASSWORD_OPTION = typer.Option(
    None,
    "--password",
    "-p",
    envvar="BITBUCKET_PASSWORD",
    help="Bitbucket password (prompt if not supplied)",
)

# Target options
REPOSITORY_OPTION = typer.Option(
    ...,
    "--repository",
    "-r",
    callback=validate_repository,
    help="Repository name (owner/repo-slug)",
)

# Input options - exactly one of these is required
CSVFILE_OPTION = typer.Option(
    None,
    "--csvfile",
    "-c",
    help=(
        "CSV file containing list of issues; file must have header row; "
        "valid fields are Title, Content, Responsible, Kind"
    ),
)

ISSUES_OPTION = typer.Option(
    None,
    "--issues",
    "-i",
    help="Comma-separated list of issue titles (can be used multiple times)",
)

# Behavior options
VERBOSE_OPTION = typer.Option(
    False, "--verbose", "-v", help="Prints all messages to console."
)

VERSION_OPTION = typer.Option(
    False,
    "--version",
    callback=version_callback,
    is_eager=True,
    help="Show version information and exit.",
)
