"""Read issue entries from CSV files and inline title lists."""

import csv
import logging
from pathlib import Path

from pydantic import ValidationError

from ..bitbucket_client.models import IssueEntry

logger = logging.getLogger(__name__)

# Header name (lower-case) -> IssueEntry field
COLUMN_FIELDS = {
    "title": "title",
    "content": "content",
    "responsible": "responsible",
    "kind": "kind",
}


class IssueFileError(ValueError):
    """Raised when an issue file is missing or cannot be parsed."""


def _map_header(header: list[str]) -> dict[str, int]:
    """Map entry fields to column positions, ignoring unrecognized columns.

    When a recognized name appears more than once, the first column wins.
    """
    positions: dict[str, int] = {}
    for index, name in enumerate(header):
        field = COLUMN_FIELDS.get(name.strip().lower())
        if field is not None and field not in positions:
            positions[field] = index
    return positions


def read_csv_entries(path: str | Path) -> list[IssueEntry]:
    """Read all issue entries from a CSV file with a header row.

    Columns are matched by name, case-insensitively: Title, Content,
    Responsible, Kind. Other columns are ignored and empty cells are
    treated as absent. Every row is validated before anything is returned.

    Args:
        path: Path to the CSV file

    Returns:
        Entries in file row order

    Raises:
        IssueFileError: If the file is missing, unreadable, lacks a Title
            column, or contains an invalid row
    """
    path = Path(path)
    entries: list[IssueEntry] = []
    try:
        with path.open(newline="", encoding="utf-8-sig") as f:
            reader = csv.reader(f)
            header = next(reader, None)
            if header is None:
                logger.info("Issue file %s is empty", path)
                return []

            positions = _map_header(header)
            if "title" not in positions:
                raise IssueFileError(
                    f"{path}: header row has no Title column "
                    f"(found: {', '.join(header)})"
                )

            for row in reader:
                if not row:
                    continue
                values = {
                    field: row[index] if index < len(row) else None
                    for field, index in positions.items()
                }
                try:
                    entries.append(IssueEntry(**values))
                except ValidationError as e:
                    problems = "; ".join(
                        f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
                        for err in e.errors()
                    )
                    raise IssueFileError(
                        f"{path}, line {reader.line_num}: {problems}"
                    ) from e
    except FileNotFoundError as e:
        raise IssueFileError(f"Issue file not found: {path}") from e
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        raise IssueFileError(f"Could not read issue file {path}: {e}") from e

    logger.info("Read %d issue(s) from %s", len(entries), path)
    return entries


def split_titles(values: list[str]) -> list[str]:
    """Split comma-separated option values into individual titles.

    Whitespace around each title is stripped and blank titles are dropped.
    """
    titles = []
    for value in values:
        titles.extend(t.strip() for t in value.split(",") if t.strip())
    return titles


def entries_from_titles(titles: list[str]) -> list[IssueEntry]:
    """Wrap each title in an entry with no content, assignee or kind."""
    return [IssueEntry(title=title) for title in titles]
