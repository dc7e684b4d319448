"""Convenience shim to run the file searcher from a checkout."""

from __future__ import annotations

import sys

from src.searcher.runner import main as searcher_main


if __name__ == "__main__":
    sys.exit(searcher_main(sys.argv[1:]))
