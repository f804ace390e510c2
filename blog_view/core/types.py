"""
Core data types for the blog front-end.

- Post: one published post as handed over by the content pipeline
- NavLink: one entry of the primary navigation
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Post:
    """A blog post as consumed by the view layer.

    Attributes:
        slug: Unique URL-safe identifier, used for ``/blog/{slug}``
        title: The post headline
        date: ISO 8601 publication date
        summary: Short plain-text summary shown on the listing
        tags: Tag names in display order
        draft: Unpublished posts are dropped by the post source
    """
    slug: str
    title: str
    date: str
    summary: str = ""
    tags: tuple[str, ...] = field(default_factory=tuple)
    draft: bool = False


@dataclass(frozen=True)
class NavLink:
    """A primary navigation link.

    Attributes:
        title: Link label
        href: Target path, unique across the navigation
    """
    title: str
    href: str
