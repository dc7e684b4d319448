"""Locate a file across a GitHub Enterprise Server and report its latest commit."""

from .runner import main

__all__ = ["main"]
