"""Entry point wiring settings, GHES clients and the per-target search loop."""

from __future__ import annotations

import sys
import time
from dataclasses import dataclass
from typing import List, Optional

import requests

from .collectors import dedupe_matches, fetch_latest_commit, search_code, validate_default_branch
from .config import SearcherSettings, parse_args, resolve_settings
from .errors import ConfigError, GitHubAPIError
from .http_client import GHEClient
from .models import CommitRecord, MalformedRepositoryName, RepositoryRef, TargetKey
from .reporting import format_summary, report


@dataclass(frozen=True)
class PipelineRun:
    """Settings plus the two long-lived clients shared by every target."""

    settings: SearcherSettings
    rest: GHEClient
    graphql: GHEClient


def build_run(settings: SearcherSettings) -> PipelineRun:
    return PipelineRun(
        settings=settings,
        rest=GHEClient(settings.rest_url, settings.token),
        graphql=GHEClient(settings.graphql_url, settings.token),
    )


def process_target(run: PipelineRun, target: TargetKey) -> bool:
    """Check the branch, fetch history and print one line; False on per-target error."""
    full_name = target.repository_full_name
    try:
        ref = RepositoryRef.from_full_name(full_name)
    except MalformedRepositoryName as exc:
        print(f"[error] {exc}", file=sys.stderr)
        report(target, CommitRecord(repository_url=f"{run.settings.ghe_url}/{full_name}"), failed=True)
        return False

    fallback_url = run.settings.repository_html_url(ref.owner, ref.name)
    # Advisory only: history is queried against defaultBranchRef either way.
    validate_default_branch(run.rest, ref)

    try:
        record = fetch_latest_commit(run.graphql, ref, target.path, fallback_url)
    except (GitHubAPIError, requests.RequestException) as exc:
        print(f"[error] history lookup failed for {full_name}:{target.path} -> {exc}", file=sys.stderr)
        report(target, CommitRecord(repository_url=fallback_url), failed=True)
        return False

    if not record.has_commit:
        print(f"[warn] no commit touching {target.path} on the default branch of {full_name}", file=sys.stderr)
    report(target, record)
    return True


def execute(run: PipelineRun) -> int:
    """Search once, then walk the unique targets serially; returns the failure count."""
    settings = run.settings
    result = search_code(run.rest, settings.filename)
    targets = dedupe_matches(result.matches)
    print(format_summary(settings.filename, len(result.matches), len(targets)))

    failures = 0
    for target in targets:
        if not process_target(run, target):
            failures += 1
        # Stay under the server's request-rate ceiling.
        time.sleep(settings.delay)

    if failures:
        print(f"[info] {failures}/{len(targets)} targets failed", file=sys.stderr)
    return failures


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point; returns 0 on completion and 1 on fatal errors."""

    args = parse_args(argv)
    try:
        settings = resolve_settings(args)
        execute(build_run(settings))
    except ConfigError as exc:
        print(f"[error] {exc}", file=sys.stderr)
        return 1
    except (GitHubAPIError, requests.RequestException) as exc:
        print(f"[error] code search failed: {exc}", file=sys.stderr)
        return 1
    return 0


def cli() -> None:
    sys.exit(main())


__all__ = ["PipelineRun", "build_run", "process_target", "execute", "main", "cli"]


if __name__ == "__main__":
    cli()
