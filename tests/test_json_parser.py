"""Tests for the post export parser."""

import json
import logging
from pathlib import Path

import pytest

from blog_view.core.types import Post
from blog_view.input.json_parser import load_posts, parse_posts_json, sort_posts


def test_parse_posts_reads_fields():
    data = {
        "posts": [
            {
                "slug": "hello-world",
                "title": "Hello World",
                "date": "2024-01-05",
                "summary": "First post.",
                "tags": ["Python", "Static Sites"],
            }
        ]
    }

    posts = parse_posts_json(data)

    assert posts == [
        Post(
            slug="hello-world",
            title="Hello World",
            date="2024-01-05",
            summary="First post.",
            tags=("Python", "Static Sites"),
        )
    ]


def test_parse_posts_defaults_optional_fields():
    posts = parse_posts_json({"posts": [{"slug": "a", "title": "A", "date": "2024-01-01"}]})
    assert posts[0].summary == ""
    assert posts[0].tags == ()


def test_parse_posts_skips_drafts_and_incomplete_entries(caplog, monkeypatch):
    monkeypatch.setattr(logging.getLogger("blog_view"), "propagate", True)
    data = {
        "posts": [
            {"slug": "draft", "title": "Draft", "date": "2024-01-02", "draft": True},
            {"slug": "no-title", "date": "2024-01-03"},
            {"slug": "ok", "title": "OK", "date": "2024-01-04"},
        ]
    }

    with caplog.at_level("WARNING"):
        posts = parse_posts_json(data)

    assert [post.slug for post in posts] == ["ok"]
    assert "no-title" in caplog.text


def test_parse_posts_requires_posts_key():
    with pytest.raises(ValueError, match="missing 'posts' key"):
        parse_posts_json({"items": []})


def test_sort_posts_newest_first_and_stable():
    posts = [
        Post(slug="old", title="Old", date="2023-05-01"),
        Post(slug="new-a", title="New A", date="2024-02-01"),
        Post(slug="new-b", title="New B", date="2024-02-01"),
    ]
    assert [post.slug for post in sort_posts(posts)] == ["new-a", "new-b", "old"]


def test_load_posts_reads_and_sorts(tmp_path: Path) -> None:
    path = tmp_path / "posts.json"
    path.write_text(
        json.dumps(
            {
                "posts": [
                    {"slug": "first", "title": "First", "date": "2023-01-01"},
                    {"slug": "second", "title": "Second", "date": "2024-01-01"},
                ]
            }
        ),
        encoding="utf-8",
    )

    assert [post.slug for post in load_posts(path)] == ["second", "first"]


def test_parse_posts_skips_duplicate_slugs(caplog, monkeypatch):
    monkeypatch.setattr(logging.getLogger("blog_view"), "propagate", True)
    data = {
        "posts": [
            {"slug": "same", "title": "First", "date": "2024-01-01"},
            {"slug": "same", "title": "Second", "date": "2024-01-02"},
            {"slug": "other", "title": "Other", "date": "2024-01-03"},
        ]
    }

    with caplog.at_level("WARNING"):
        posts = parse_posts_json(data)

    assert [(post.slug, post.title) for post in posts] == [("same", "First"), ("other", "Other")]
    assert "duplicate slug" in caplog.text


def test_sort_posts_compares_instants_across_offsets():
    posts = [
        # 2024-03-01 01:00 UTC
        Post(slug="tokyo", title="Tokyo", date="2024-03-01T10:00:00+09:00"),
        # 2024-03-01 05:00 UTC
        Post(slug="utc", title="UTC", date="2024-03-01T05:00:00Z"),
    ]
    assert [post.slug for post in sort_posts(posts)] == ["utc", "tokyo"]


def test_sort_posts_mixes_date_only_and_datetime_values():
    posts = [
        Post(slug="morning", title="Morning", date="2024-03-01T08:00:00Z"),
        Post(slug="next-day", title="Next day", date="2024-03-02"),
        Post(slug="day-before", title="Day before", date="2024-02-29T23:00:00+00:00"),
    ]
    assert [post.slug for post in sort_posts(posts)] == ["next-day", "morning", "day-before"]


def test_sort_posts_puts_unparseable_dates_last():
    posts = [
        Post(slug="bad", title="Bad", date="sometime"),
        Post(slug="good", title="Good", date="2020-01-01"),
    ]
    assert [post.slug for post in sort_posts(posts)] == ["good", "bad"]
