from __future__ import annotations


ELLIPSIS = "…"
DEFAULT_SUMMARY_LIMIT = 120


def truncate(summary: str, limit: int = DEFAULT_SUMMARY_LIMIT) -> str:
    """Shorten a summary to at most ``limit`` characters.

    Summaries that fit are returned unchanged. Longer ones keep their first
    ``limit - 1`` characters followed by a single ellipsis, so the result is
    exactly ``limit`` characters long. A non-positive limit leaves only the
    ellipsis.
    """
    if len(summary) <= limit:
        return summary
    if limit <= 0:
        return ELLIPSIS
    return summary[: limit - 1] + ELLIPSIS
