"""Value types passed between the search, history and reporting stages."""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from typing import List, NamedTuple, Optional


class MalformedRepositoryName(ValueError):
    """Raised when a repository full name is not of the form `owner/name`."""


class SearchMatch(NamedTuple):
    repository_full_name: str
    path: str


class TargetKey(NamedTuple):
    """Deduplicated (repository, path) pair; tuple ordering is lexicographic."""

    repository_full_name: str
    path: str


@dataclass(frozen=True)
class RepositoryRef:
    owner: str
    name: str

    @classmethod
    def from_full_name(cls, full_name: str) -> "RepositoryRef":
        """Split `owner/name`; anything other than exactly one separator is rejected."""
        parts = (full_name or "").split("/")
        if len(parts) != 2 or not all(part.strip() for part in parts):
            raise MalformedRepositoryName(f"malformed repository identifier: {full_name!r}")
        return cls(owner=parts[0], name=parts[1])

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"


@dataclass(frozen=True)
class SearchResult:
    """Parsed first page of a code search."""

    matches: List[SearchMatch] = field(default_factory=list)
    skipped: int = 0


@dataclass(frozen=True)
class CommitRecord:
    """Latest commit touching a path; every commit field may be absent."""

    repository_url: str
    author_login: Optional[str] = None
    author_name: Optional[str] = None
    sha: Optional[str] = None
    committed_at: Optional[dt.datetime] = None

    @property
    def has_commit(self) -> bool:
        return any(
            value is not None
            for value in (self.author_login, self.author_name, self.sha, self.committed_at)
        )

    @property
    def author(self) -> Optional[str]:
        """Preferred display identity: login, then git author name."""
        return self.author_login or self.author_name


def parse_github_timestamp(raw: Optional[str]) -> Optional[dt.datetime]:
    """Parse an ISO-8601 GitHub timestamp into an aware UTC datetime, or None."""
    if not raw or not isinstance(raw, str):
        return None
    try:
        value = dt.datetime.fromisoformat(raw.replace("Z", "+00:00"))
    except ValueError:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=dt.timezone.utc)
    return value.astimezone(dt.timezone.utc)


def github_timestamp_from_dt(value: dt.datetime) -> str:
    return value.astimezone(dt.timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


__all__ = [
    "MalformedRepositoryName",
    "SearchMatch",
    "TargetKey",
    "RepositoryRef",
    "SearchResult",
    "CommitRecord",
    "parse_github_timestamp",
    "github_timestamp_from_dt",
]
