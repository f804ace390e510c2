"""
Blog View - static rendering of a personal blog's home page.

This package renders the blog's view components (post listing, tag links,
site header) with Jinja2 templates from a JSON post export and a YAML site
configuration.

Main entry point is the CLI via `blog-view build` command.

Example:
    $ blog-view build -p posts.json -o out/
"""

__all__ = ["__version__", "NavLink", "Post", "slugify", "truncate", "render_home_page"]
__version__ = "0.1.0"

from .core.slug import slugify
from .core.text import truncate
from .core.types import NavLink, Post
from .renderer import render_home_page
