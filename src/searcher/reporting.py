"""Line-oriented console output for search results."""

from __future__ import annotations

from typing import Optional

from .config import MISSING, SHORT_SHA_LENGTH
from .models import CommitRecord, TargetKey, github_timestamp_from_dt


def short_sha(sha: Optional[str], length: int = SHORT_SHA_LENGTH) -> Optional[str]:
    if not sha:
        return None
    return sha[:length] if length > 0 else sha


def _or_missing(value: Optional[str]) -> str:
    return value if value else MISSING


def format_summary(filename: str, match_count: int, target_count: int) -> str:
    return f"🔍 `{filename}`: {match_count} matches, {target_count} unique files"


def format_record(target: TargetKey, record: CommitRecord, *, failed: bool = False) -> str:
    """Render one target; absent fields show the MISSING placeholder."""
    date = github_timestamp_from_dt(record.committed_at) if record.committed_at else None
    line = " | ".join([
        f"📁 {target.repository_full_name}",
        f"📄 {target.path}",
        f"🌐 {_or_missing(record.repository_url)}",
        f"👤 {_or_missing(record.author)}",
        f"🔑 {_or_missing(short_sha(record.sha))}",
        f"📅 {_or_missing(date)}",
    ])
    if failed:
        return f"❌ {line}"
    if not record.has_commit:
        return f"⚠️ {line}"
    return line


def report(target: TargetKey, record: CommitRecord, *, failed: bool = False) -> None:
    print(format_record(target, record, failed=failed))


__all__ = ["short_sha", "format_summary", "format_record", "report"]
