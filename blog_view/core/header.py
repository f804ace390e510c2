from __future__ import annotations

from collections.abc import Iterable

from .types import NavLink


HOME_HREF = "/"


def header_title(current_path: str) -> str:
    """Section title for the header, taken from the first path segment.

    >>> header_title("/blog/my-post")
    'Blog'
    >>> header_title("/")
    ''
    """
    segment = current_path.lstrip("/").split("/", 1)[0]
    if not segment:
        return ""
    return segment[0].upper() + segment[1:]


def visible_nav_links(nav_links: Iterable[NavLink]) -> list[NavLink]:
    """Navigation entries shown in the header; the home link is the brand."""
    return [link for link in nav_links if link.href != HOME_HREF]
