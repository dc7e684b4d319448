"""Search, deduplication, branch validation and history lookups against GHES."""

from __future__ import annotations

import sys
from typing import Iterable, List
from urllib.parse import quote

from .config import PER_PAGE
from .errors import GitHubAPIError
from .http_client import GHEClient
from .models import (
    CommitRecord,
    RepositoryRef,
    SearchMatch,
    SearchResult,
    TargetKey,
    parse_github_timestamp,
)
from .traverse import dig, dig_text

# GHES lacks object(expression:), so the last commit for a path comes from a
# one-entry history on the default branch.
LATEST_COMMIT_QUERY = """
query LatestCommitForPath($owner:String!, $name:String!, $path:String!) {
  repository(owner:$owner, name:$name) {
    url
    defaultBranchRef {
      name
      target {
        __typename
        ... on Commit {
          history(first:1, path:$path) {
            edges {
              node {
                oid
                committedDate
                author {
                  name
                  user { login }
                }
              }
            }
          }
        }
      }
    }
  }
}
"""


def search_code(client: GHEClient, filename: str) -> SearchResult:
    """Run one `filename:` code search and parse the first page of matches."""
    if not filename or not filename.strip():
        raise ValueError("filename must be a non-empty string")

    body = client.get_json(
        "search/code",
        params={"q": f"filename:{filename.strip()}", "per_page": PER_PAGE},
    )
    items = dig(body, "items")
    if not isinstance(items, list):
        raise GitHubAPIError("code search response has no items list")

    matches: List[SearchMatch] = []
    skipped = 0
    for item in items:
        repo_full = dig_text(item, "repository", "full_name")
        path = dig_text(item, "path")
        if not repo_full or not path:
            skipped += 1
            continue
        matches.append(SearchMatch(repo_full, path))

    if skipped:
        print(f"[warn] skipped {skipped} search results without repository or path", file=sys.stderr)

    total = dig(body, "total_count")
    if (isinstance(total, int) and total > len(items)) or dig(body, "incomplete_results") is True:
        print(f"[warn] search reported {total or 'more'} matches; only the first {len(items)} are processed",
              file=sys.stderr)
    return SearchResult(matches=matches, skipped=skipped)


def dedupe_matches(matches: Iterable[SearchMatch]) -> List[TargetKey]:
    """Collapse duplicate (repository, path) pairs into a sorted list of targets."""
    return sorted({TargetKey(m.repository_full_name, m.path) for m in matches})


def validate_default_branch(client: GHEClient, ref: RepositoryRef) -> bool:
    """Return True when repository metadata names a default branch; never raises."""
    try:
        meta = client.get_json(f"repos/{quote(ref.owner, safe='')}/{quote(ref.name, safe='')}")
    except Exception as exc:
        print(f"[warn] could not check default branch for {ref.full_name}: {exc}", file=sys.stderr)
        return False

    if dig_text(meta, "default_branch"):
        return True
    print(f"[warn] no default_branch reported for {ref.full_name}", file=sys.stderr)
    return False


def fetch_latest_commit(client: GHEClient,
                        ref: RepositoryRef,
                        path: str,
                        fallback_url: str) -> CommitRecord:
    """Return the newest default-branch commit touching `path`.

    Transport and status failures propagate; missing branches, empty history
    and anonymous authors only leave the matching record fields empty.
    """
    data = client.graphql(LATEST_COMMIT_QUERY, {
        "owner": ref.owner,
        "name": ref.name,
        "path": path,
    })
    repository = dig(data, "repository")
    if repository is None:
        print(f"[warn] GraphQL returned no repository for {ref.full_name}", file=sys.stderr)

    node = dig(repository, "defaultBranchRef", "target", "history", "edges", 0, "node")
    return CommitRecord(
        repository_url=dig_text(repository, "url") or fallback_url,
        author_login=dig_text(node, "author", "user", "login"),
        author_name=dig_text(node, "author", "name"),
        sha=dig_text(node, "oid"),
        committed_at=parse_github_timestamp(dig_text(node, "committedDate")),
    )


__all__ = [
    "LATEST_COMMIT_QUERY",
    "search_code",
    "dedupe_matches",
    "validate_default_branch",
    "fetch_latest_commit",
]
