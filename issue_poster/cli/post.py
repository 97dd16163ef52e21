"""CLI command for posting issues to a Bitbucket repository."""

import click
import httpx
import typer
from rich.console import Console
from rich.markup import escape

from ..bitbucket_client.client import BitbucketClient, BitbucketClientError
from ..bitbucket_client.models import IssueEntry
from ..config import BitbucketSettings
from ..utils.csv_reader import (
    IssueFileError,
    entries_from_titles,
    read_csv_entries,
    split_titles,
)
from ..utils.log import setup_logging
from ..utils.password import read_password
from .options import (
    CSVFILE_OPTION,
    ISSUES_OPTION,
    PASSWORD_OPTION,
    REPOSITORY_OPTION,
    USER_OPTION,
    VERBOSE_OPTION,
    VERSION_OPTION,
)

console = Console()


def submit_entries(
    client: BitbucketClient,
    repository: str,
    entries: list[IssueEntry],
    verbose: bool = False,
) -> int:
    """Create every entry in order, one request at a time.

    A rejected issue is reported by its reason phrase and the loop moves on
    to the next entry. Transport errors are not caught here.

    Returns:
        Number of issues the tracker accepted
    """
    created = 0
    for entry in entries:
        if verbose:
            console.print(f"Creating issue {escape(entry.title)}...", end="")
        try:
            client.create_issue(repository, entry)
        except BitbucketClientError as e:
            reason = e.reason or f"HTTP {e.status_code}"
            console.print(f"[red]{escape(reason)}[/red]")
            continue
        created += 1
        if verbose:
            console.print("Issue created")
    return created


def post(
    user: str = USER_OPTION,
    password: str | None = PASSWORD_OPTION,
    repository: str = REPOSITORY_OPTION,
    csvfile: str | None = CSVFILE_OPTION,
    issues: list[str] | None = ISSUES_OPTION,
    verbose: bool = VERBOSE_OPTION,
    version: bool = VERSION_OPTION,
) -> None:
    """Create issues in a Bitbucket repository.

    Issues come either from a CSV file (--csvfile) or from a comma-separated
    list of titles (--issues); exactly one of the two is required.

    Examples:
        bitbucket-issue-poster -u alice -r alice/widgets -i "Fix login,Add docs"

        bitbucket-issue-poster -u alice -r alice/widgets -c issues.csv -v
    """
    if csvfile is not None and issues is not None:
        raise click.UsageError("--csvfile and --issues are mutually exclusive")
    if csvfile is None and issues is None:
        raise click.UsageError("one of --csvfile or --issues is required")

    setup_logging(verbose)

    if not password:
        password = read_password()

    settings = BitbucketSettings.from_env()
    with BitbucketClient(user, password, settings=settings) as client:
        try:
            if csvfile is not None:
                entries = read_csv_entries(csvfile)
            else:
                entries = entries_from_titles(split_titles(issues or []))
        except IssueFileError as e:
            console.print(f"❌ Error: {escape(str(e))}")
            raise typer.Exit(1)

        if not entries:
            if verbose:
                console.print("No issues to create")
            return

        try:
            created = submit_entries(client, repository, entries, verbose=verbose)
        except httpx.TransportError as e:
            console.print(f"❌ Network error: {escape(str(e))}")
            console.print("Please check your network connection and proxy settings.")
            raise typer.Exit(1)

    if verbose:
        console.print(f"✨ Created {created} of {len(entries)} issue(s) in {repository}")
