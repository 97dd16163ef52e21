"""Pydantic models for Bitbucket issue data.

These models map to the form fields accepted by the Bitbucket 1.0 issues API.
API Reference: https://confluence.atlassian.com/bitbucket/issues-resource-296095191.html
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator


class IssueKind(str, Enum):
    """Issue kinds accepted by the tracker.

    The value is the lower-case name sent on the wire.
    """

    BUG = "bug"
    ENHANCEMENT = "enhancement"
    PROPOSAL = "proposal"
    TASK = "task"


class IssueEntry(BaseModel):
    """A single issue to be created.

    Built once per input record and submitted straight away.
    """

    title: str = Field(..., min_length=1, description="Issue title (string)")
    content: str | None = Field(
        None, description="Issue description in markdown (string)"
    )
    responsible: str | None = Field(
        None, description="Username of the assignee (string)"
    )
    kind: IssueKind | None = Field(
        None, description="One of: bug, enhancement, proposal, task"
    )

    @field_validator("title", mode="before")
    @classmethod
    def _strip_title(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("content", "responsible", mode="before")
    @classmethod
    def _blank_is_absent(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("kind", mode="before")
    @classmethod
    def _normalize_kind(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.strip().lower()
            return value or None
        return value

    def to_form(self) -> dict[str, str]:
        """Build the form payload, leaving out fields that are not set."""
        form = {"title": self.title}
        if self.content is not None:
            form["content"] = self.content
        if self.responsible is not None:
            form["responsible"] = self.responsible
        if self.kind is not None:
            form["kind"] = self.kind.value
        return form
