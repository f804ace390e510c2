"""JSON parser for the post export consumed by the home page.

The export mirrors what the content pipeline produces for each published
post:

    {
        "posts": [
            {
                "slug": "hello-world",
                "title": "Hello World",
                "date": "2024-01-05",
                "summary": "First post.",
                "tags": ["Python", "Static Sites"],
                "draft": false
            }
        ]
    }
"""

from __future__ import annotations

import json
import logging
from datetime import timezone
from pathlib import Path
from typing import Any, Iterable

from ..core.dates import parse_timestamp
from ..core.types import Post

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = ("slug", "title", "date")


def parse_posts_json(data: dict[str, Any]) -> list[Post]:
    """Parse a post export into Post objects.

    Entries missing a required field (slug, title, date) are skipped with a
    warning, as are drafts and later entries reusing an earlier slug. Order
    is preserved.

    Raises:
        ValueError: If the JSON is missing the 'posts' key
    """
    if "posts" not in data:
        raise ValueError("Invalid JSON format: missing 'posts' key")

    posts: list[Post] = []
    seen_slugs: set[str] = set()
    for item in data["posts"]:
        missing = [name for name in _REQUIRED_FIELDS if not item.get(name)]
        if missing:
            logger.warning(
                "Skipping post %s: missing required fields (%s)",
                item.get("slug", "unknown"),
                ", ".join(missing),
            )
            continue

        if item.get("draft"):
            logger.debug("Skipping draft post %s", item["slug"])
            continue

        if item["slug"] in seen_slugs:
            logger.warning("Skipping post %s: duplicate slug", item["slug"])
            continue
        seen_slugs.add(item["slug"])

        posts.append(
            Post(
                slug=item["slug"],
                title=item["title"],
                date=item["date"],
                summary=item.get("summary") or "",
                tags=tuple(item.get("tags") or ()),
            )
        )

    return posts


def sort_posts(posts: Iterable[Post]) -> list[Post]:
    """Order posts newest-first; posts sharing a date keep their order.

    Dates are compared as instants: naive and date-only values count as UTC.
    Posts whose date does not parse go last, ordered by the raw string.
    """
    return sorted(posts, key=_date_key, reverse=True)


def _date_key(post: Post) -> tuple[int, float, str]:
    moment = parse_timestamp(post.date)
    if moment is None:
        return (0, 0.0, post.date)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return (1, moment.timestamp(), "")


def load_posts(path: Path) -> list[Post]:
    """Read a post export from disk, returning published posts newest-first."""
    data = json.loads(path.read_text(encoding="utf-8"))
    return sort_posts(parse_posts_json(data))
