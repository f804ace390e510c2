"""
Pure building blocks shared by the view components.

Nothing in this package performs I/O; every function is a plain
computation over its arguments.
"""

from .dates import format_date
from .header import header_title, visible_nav_links
from .slug import slugify, tag_label
from .text import ELLIPSIS, truncate
from .types import NavLink, Post

__all__ = [
    "ELLIPSIS",
    "NavLink",
    "Post",
    "format_date",
    "header_title",
    "slugify",
    "tag_label",
    "truncate",
    "visible_nav_links",
]
