"""Tests for summary truncation."""

from blog_view.core.text import ELLIPSIS, truncate


def test_short_summary_is_unchanged():
    assert truncate("short summary", 120) == "short summary"


def test_summary_at_limit_is_unchanged():
    text = "x" * 120
    assert truncate(text, 120) == text


def test_long_summary_is_cut_to_limit_with_ellipsis():
    result = truncate("a" * 150, 120)
    assert result == "a" * 119 + "…"
    assert len(result) == 120


def test_default_limit_is_120():
    assert len(truncate("b" * 500)) == 120


def test_non_positive_limit_returns_ellipsis():
    assert truncate("anything", 0) == ELLIPSIS
    assert truncate("anything", -3) == ELLIPSIS


def test_limit_of_one_keeps_only_ellipsis():
    assert truncate("ab", 1) == ELLIPSIS
