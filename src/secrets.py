"""Utilities for loading local (gitignored) credentials from a `.env` file."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, Optional

from dotenv import dotenv_values, load_dotenv

DEFAULT_ENV_FILENAME = ".env"


def _default_env_path() -> Path:
    root = Path(__file__).resolve().parents[1]
    return root / DEFAULT_ENV_FILENAME


def load_local_env(path: Optional[str | Path] = None) -> Dict[str, str]:
    """Load a `.env` file into os.environ; return its values ({} when unavailable).

    LOCAL_ENV_FILE overrides the default location. Variables already present
    in the process environment are left untouched.
    """

    candidate = path or os.getenv("LOCAL_ENV_FILE") or _default_env_path()
    env_path = Path(candidate).expanduser()
    if not env_path.is_file():
        return {}
    load_dotenv(env_path, override=False)
    values = dotenv_values(env_path)
    return {key: value for key, value in values.items() if value is not None}


__all__ = ["load_local_env", "DEFAULT_ENV_FILENAME"]
