"""Bitbucket client package for API interaction."""

from .client import BitbucketClient, BitbucketClientError
from .models import IssueEntry, IssueKind

__all__ = [
    "BitbucketClient",
    "BitbucketClientError",
    "IssueEntry",
    "IssueKind",
]
