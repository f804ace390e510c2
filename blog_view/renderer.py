"""
Home page rendering.

Builds the Jinja2 environment shared by every view component and renders
the home page (header, intro and post listing) to an HTML document.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from jinja2 import Environment, FileSystemLoader, select_autoescape

from .config import AppConfig
from .core.dates import format_date
from .core.header import header_title, visible_nav_links
from .core.slug import slugify, tag_label
from .core.text import truncate
from .core.types import Post


def build_environment() -> Environment:
    """Create the template environment with the view filters registered.

    Filters:
        slugify: tag text -> ``/tags/`` slug
        tag_label: tag text -> display label
        summary: summary truncation, ``{{ text | summary(120) }}``
        format_date: ISO date -> display date, ``{{ date | format_date(locale) }}``
    """
    env = Environment(
        loader=FileSystemLoader(str(Path(__file__).parent / "templates")),
        autoescape=select_autoescape(["html"]),
    )
    env.filters["slugify"] = slugify
    env.filters["tag_label"] = tag_label
    env.filters["summary"] = truncate
    env.filters["format_date"] = format_date
    env.globals["header_title"] = header_title
    env.globals["visible_nav_links"] = visible_nav_links
    return env


def render_home_page(posts: Sequence[Post], cfg: AppConfig, current_path: str = "/") -> str:
    """Render the full home page document.

    ``posts`` is expected newest-first; the listing does not re-sort it.
    """
    template = build_environment().get_template("home.html")
    return template.render(
        site=cfg.site,
        nav_links=cfg.nav_links,
        posts=list(posts),
        current_path=current_path,
    )


def write_home_page(posts: Sequence[Post], cfg: AppConfig, output_path: Path) -> Path:
    """Render the home page and write it to ``output_path``."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(render_home_page(posts, cfg), encoding="utf-8")
    return output_path
