"""Tests for src.searcher.models covering identifiers, records and timestamps.

Run with coverage:
    pytest tests/test_models.py --maxfail=1 -v --cov=src.searcher.models --cov-report=term-missing
"""

import datetime as dt

import pytest

from src.searcher import models


def test_repository_ref_from_full_name():
    ref = models.RepositoryRef.from_full_name("org/repo1")
    assert ref.owner == "org"
    assert ref.name == "repo1"
    assert ref.full_name == "org/repo1"


@pytest.mark.parametrize("value", ["no-separator", "a/b/c", "/repo", "org/", "", None])
def test_repository_ref_rejects_malformed_names(value):
    with pytest.raises(models.MalformedRepositoryName, match="malformed repository identifier"):
        models.RepositoryRef.from_full_name(value)


def test_malformed_name_is_a_value_error():
    assert issubclass(models.MalformedRepositoryName, ValueError)


def test_target_keys_sort_lexicographically():
    keys = [
        models.TargetKey("org/b", "a.yml"),
        models.TargetKey("org/a", "z.yml"),
        models.TargetKey("org/a", "b.yml"),
    ]
    assert sorted(keys) == [
        models.TargetKey("org/a", "b.yml"),
        models.TargetKey("org/a", "z.yml"),
        models.TargetKey("org/b", "a.yml"),
    ]


def test_commit_record_defaults_have_no_commit():
    record = models.CommitRecord(repository_url="https://ghe/org/repo")
    assert record.has_commit is False
    assert record.author is None


def test_commit_record_author_prefers_login():
    record = models.CommitRecord(repository_url="u", author_login="alice", author_name="Alice A.")
    assert record.author == "alice"
    assert record.has_commit is True
    assert models.CommitRecord(repository_url="u", author_name="Alice A.").author == "Alice A."


def test_parse_github_timestamp_variants():
    parsed = models.parse_github_timestamp("2025-08-21T10:15:30Z")
    assert parsed == dt.datetime(2025, 8, 21, 10, 15, 30, tzinfo=dt.timezone.utc)

    offset = models.parse_github_timestamp("2025-08-21T19:15:30+09:00")
    assert offset == parsed

    assert models.parse_github_timestamp("not a date") is None
    assert models.parse_github_timestamp("") is None
    assert models.parse_github_timestamp(None) is None


def test_github_timestamp_from_dt():
    value = dt.datetime(2025, 8, 21, 10, 15, 30, tzinfo=dt.timezone.utc)
    assert models.github_timestamp_from_dt(value) == "2025-08-21T10:15:30Z"
