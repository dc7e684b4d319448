"""Thin REST and GraphQL clients for a GitHub Enterprise Server instance."""

from __future__ import annotations

import sys
from typing import Any, Dict, Optional

import requests

from .config import REQUEST_TIMEOUT, USER_AGENT
from .errors import GitHubAPIError


def log_http_error(resp: requests.Response, url: str) -> None:
    """Print a short, human-readable message when the server returns an error."""
    try:
        body = resp.json()
    except Exception:
        body = {"text": (resp.text or "")[:300]}
    if not isinstance(body, dict):
        body = {"text": str(body)[:300]}
    msg = body.get("message") or body.get("error") or body.get("text")
    print(f"[error] HTTP {resp.status_code} for {url}\n  -> {msg}", file=sys.stderr)


class GHEClient:
    """One authenticated session bound to a base URL; no retries."""

    def __init__(self, base_url: str, token: str, timeout: int = REQUEST_TIMEOUT) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update(
            {
                "Accept": "application/vnd.github+json",
                "User-Agent": USER_AGENT,
                "Authorization": f"Bearer {token}",
            }
        )

    def _url(self, path: str) -> str:
        if not path:
            return self.base_url
        path = path if path.startswith("/") else f"/{path}"
        return f"{self.base_url}{path}"

    def _decode(self, resp: requests.Response, url: str) -> Any:
        if not 200 <= resp.status_code < 300:
            log_http_error(resp, url)
            raise GitHubAPIError(
                f"HTTP {resp.status_code} for {url}", status_code=resp.status_code, url=url
            )
        try:
            return resp.json()
        except ValueError as exc:
            raise GitHubAPIError(
                f"unparseable JSON body from {url}: {exc}", status_code=resp.status_code, url=url
            ) from exc

    def get_json(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """GET `path` and return the decoded JSON body."""
        url = self._url(path)
        resp = self.session.get(url, params=params, timeout=self.timeout)
        return self._decode(resp, url)

    def graphql(self, query: str, variables: Dict[str, Any]) -> Dict[str, Any]:
        """POST a GraphQL query and return its `data` object.

        Errors reported next to usable data are printed and the data returned;
        errors without data raise GitHubAPIError.
        """
        url = self._url("")
        resp = self.session.post(
            url, json={"query": query, "variables": variables}, timeout=self.timeout
        )
        body = self._decode(resp, url)
        if not isinstance(body, dict):
            raise GitHubAPIError(f"unexpected GraphQL body from {url}", status_code=resp.status_code, url=url)

        errors = body.get("errors") or []
        if not isinstance(errors, list):
            errors = [errors]
        messages = ", ".join(
            str(err.get("message")) for err in errors if isinstance(err, dict)
        ) or str(errors)
        data = body.get("data")
        if not isinstance(data, dict):
            raise GitHubAPIError(f"GraphQL error: {messages if errors else 'no data'}", url=url)
        if errors:
            print(f"[warn] GraphQL partial response: {messages}", file=sys.stderr)
        return data


__all__ = ["GitHubAPIError", "GHEClient", "log_http_error"]
