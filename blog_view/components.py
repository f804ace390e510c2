"""
View components callable from Python.

Each function renders one macro of ``templates/components.html`` and
returns ``markupsafe.Markup``, so results can be embedded in other
templates without double escaping.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Sequence

from markupsafe import Markup

from .core.text import DEFAULT_SUMMARY_LIMIT
from .core.types import NavLink, Post
from .renderer import build_environment

DISPLAY_CAP = 5


@lru_cache(maxsize=1)
def _macros() -> Any:
    return build_environment().get_template("components.html").module


def render_circle() -> Markup:
    return Markup(_macros().circle())


def render_post_tag(text: str) -> Markup:
    """Compact tag link used inside post listings."""
    return Markup(_macros().post_tag(text))


def render_tag_badge(text: str) -> Markup:
    """Bordered tag badge used on tag clouds and post pages."""
    return Markup(_macros().tag_badge(text))


def render_post_list_item(
    post: Post,
    *,
    locale: str = "en-US",
    summary_limit: int = DEFAULT_SUMMARY_LIMIT,
) -> Markup:
    return Markup(_macros().post_list_item(post, locale, summary_limit))


def render_post_list(
    posts: Sequence[Post],
    *,
    display_cap: int = DISPLAY_CAP,
    locale: str = "en-US",
    summary_limit: int = DEFAULT_SUMMARY_LIMIT,
) -> Markup:
    """Render the home page listing.

    Shows at most ``display_cap`` posts in the given order, adds the
    "All Posts" link when more are available and renders the empty-state
    message when there are none.
    """
    return Markup(_macros().post_list(list(posts), display_cap, locale, summary_limit))


def render_site_header(
    current_path: str,
    nav_links: Sequence[NavLink],
    *,
    brand_label: str = "",
) -> Markup:
    return Markup(_macros().site_header(current_path, list(nav_links), brand_label))
