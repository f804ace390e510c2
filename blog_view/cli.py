"""
Command-line interface for the blog front-end.

Uses Typer to expose the home page build and a header preview for a
route path.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from .config import load_config
from .core.header import header_title, visible_nav_links
from .input.json_parser import load_posts
from .logging_utils import log_event, setup_logging
from .renderer import write_home_page

app = typer.Typer(add_completion=False)
console = Console()


@app.command()
def build(
    posts: Path = typer.Option(..., "--posts", "-p", exists=True, readable=True),
    output: Path = typer.Option(Path("out"), "--output", "-o"),
    config: Path | None = typer.Option(None, "--config", "-c", exists=True),
    display_cap: int | None = typer.Option(
        None, "--display-cap", min=0, help="Maximum number of posts on the home page."
    ),
    locale: str | None = typer.Option(None, "--locale", help="Locale for post dates."),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
    log_file: bool | None = typer.Option(
        None, "--log-file/--no-log-file", help="Enable or disable file logging."
    ),
):
    """Render the home page from a post export.

    Args:
        posts: Path to the JSON post export
        output: Directory for the rendered page
        config: Optional path to YAML config file
        display_cap: Override the number of listed posts
        locale: Override the date locale
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Enable/disable file logging
    """
    cfg = load_config(str(config) if config else None)

    if display_cap is not None:
        cfg.site.display_cap = display_cap
    if locale:
        cfg.site.locale = locale
    if log_level:
        cfg.logging.level = log_level
    if log_file is not None:
        cfg.logging.file = log_file

    logger = setup_logging(cfg.logging, output)
    loaded = load_posts(posts)
    log_event(logger, "Loaded posts", count=len(loaded), source=str(posts))

    output_path = write_home_page(loaded, cfg, output / cfg.output.filename)
    log_event(
        logger,
        "Rendered home page",
        path=str(output_path),
        listed=min(len(loaded), max(cfg.site.display_cap, 0)),
        total=len(loaded),
    )
    console.print(f"Home page generated: {output_path}")


@app.command()
def header(
    path: str = typer.Argument("/", help="Route path, e.g. /blog/my-post."),
    config: Path | None = typer.Option(None, "--config", "-c", exists=True),
):
    """Show the header title and navigation for a route path."""
    cfg = load_config(str(config) if config else None)
    console.print(f"~/{header_title(path)}", markup=False)
    for link in visible_nav_links(cfg.nav_links):
        console.print(f"{link.title}\t{link.href}", markup=False)


if __name__ == "__main__":
    app()
