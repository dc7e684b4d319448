"""Configuration constants and CLI/environment settings for the file searcher."""

from __future__ import annotations

import argparse
import os
from dataclasses import dataclass
from typing import List, Optional

from src.secrets import load_local_env

from .errors import ConfigError

USER_AGENT = os.getenv("USER_AGENT", "git-searcher/1.0")
PER_PAGE = 100
REQUEST_TIMEOUT = int(os.getenv("REQUEST_TIMEOUT", "90"))
THROTTLE_SEC = float(os.getenv("THROTTLE_SEC", "1"))
SHORT_SHA_LENGTH = int(os.getenv("SHORT_SHA_LENGTH", "7"))  # 0 = full sha
MISSING = "n/a"

REST_API_PATH = "/api/v3"
GRAPHQL_API_PATH = "/api/graphql"


@dataclass(frozen=True)
class SearcherSettings:
    """Resolved runtime settings for one search run."""

    filename: str
    ghe_url: str
    token: str
    delay: float

    @property
    def rest_url(self) -> str:
        return f"{self.ghe_url}{REST_API_PATH}"

    @property
    def graphql_url(self) -> str:
        return f"{self.ghe_url}{GRAPHQL_API_PATH}"

    def repository_html_url(self, owner: str, name: str) -> str:
        return f"{self.ghe_url}/{owner}/{name}"


def build_arg_parser() -> argparse.ArgumentParser:
    """Return the CLI parser used by the searcher entry point."""

    parser = argparse.ArgumentParser(
        description=(
            "Find every repository on a GitHub Enterprise Server that contains a file "
            "and show the latest commit touching it."
        ),
    )
    parser.add_argument("filename", help="file name to search for, e.g. config.yml")
    parser.add_argument(
        "--delay",
        type=float,
        default=THROTTLE_SEC,
        help="seconds to pause after each repository (default: %(default)s)",
    )
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments; accepts argv overrides for testing."""

    parser = build_arg_parser()
    return parser.parse_args(argv)


def _require_env(name: str) -> str:
    value = (os.getenv(name) or "").strip()
    if not value:
        raise ConfigError(f"environment variable {name} is not set")
    return value


def resolve_settings(args: argparse.Namespace) -> SearcherSettings:
    """Combine CLI arguments with GHE_URL/GITHUB_TOKEN from the environment or `.env`."""

    filename = (args.filename or "").strip()
    if not filename:
        raise ConfigError("a non-empty filename is required")

    load_local_env()
    ghe_url = _require_env("GHE_URL").rstrip("/")
    token = _require_env("GITHUB_TOKEN")
    return SearcherSettings(
        filename=filename,
        ghe_url=ghe_url,
        token=token,
        delay=max(0.0, float(args.delay)),
    )


__all__ = [
    "USER_AGENT",
    "PER_PAGE",
    "REQUEST_TIMEOUT",
    "THROTTLE_SEC",
    "SHORT_SHA_LENGTH",
    "MISSING",
    "REST_API_PATH",
    "GRAPHQL_API_PATH",
    "SearcherSettings",
    "build_arg_parser",
    "parse_args",
    "resolve_settings",
]
