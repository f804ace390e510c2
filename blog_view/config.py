"""
Configuration management using YAML files and dataclasses.

This module defines all configuration dataclasses and provides loading
from YAML files with defaults. Configuration sections:
- SiteConfig: Site metadata and listing behaviour
- nav_links: Primary navigation entries (list of NavLink)
- OutputConfig: Output file settings
- LoggingConfig: Logging behavior
- AppConfig: Root configuration container
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import yaml

from .core.types import NavLink


@dataclass
class SiteConfig:
    """Site metadata used by the header and the home page.

    Attributes:
        title: Page title used in the <title> element
        header_title: Accessible label of the brand link in the header
        author: Name shown in the intro greeting
        author_url: Link target for the author name (optional)
        description: Secondary intro line (optional)
        locale: Locale passed to the date formatter
        display_cap: Maximum number of posts listed on the home page
        summary_limit: Character budget for post summaries on the listing
    """

    title: str = "Blog"
    header_title: str = "Blog"
    author: str = "Author"
    author_url: str | None = None
    description: str | None = None
    locale: str = "en-US"
    display_cap: int = 5
    summary_limit: int = 120


@dataclass
class OutputConfig:
    """Configuration for output generation.

    Attributes:
        filename: Name of the rendered home page inside the output directory
    """

    filename: str = "index.html"


@dataclass
class LoggingConfig:
    """Configuration for logging behavior.

    Attributes:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR")
        console: Whether to log to console
        file: Whether to log to file
        format: Log file format ("jsonl" or "plain")
        filename: Name of the log file
    """

    level: str = "INFO"
    console: bool = True
    file: bool = False
    format: str = "jsonl"
    filename: str = "build.jsonl"


def _default_nav_links() -> list[NavLink]:
    return [
        NavLink(title="Home", href="/"),
        NavLink(title="Blog", href="/blog"),
        NavLink(title="Tags", href="/tags"),
        NavLink(title="Projects", href="/projects"),
        NavLink(title="About", href="/about"),
    ]


@dataclass
class AppConfig:
    """Root configuration container aggregating all config sections."""

    site: SiteConfig = field(default_factory=SiteConfig)
    nav_links: list[NavLink] = field(default_factory=_default_nav_links)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: str | None) -> AppConfig:
    """Load configuration from a YAML file with defaults."""
    if not path:
        return AppConfig()

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        raw = {}

    return _merge_config(AppConfig(), raw)


def _merge_config(base: AppConfig, raw: dict[str, Any]) -> AppConfig:
    """Merge raw YAML config into base AppConfig.

    Unknown keys, at the top level or inside a section, are ignored, as are
    section values that are not mappings (e.g. ``site: null``).
    """
    data = _asdict(base)
    for key, value in raw.items():
        if key not in data:
            continue
        if key == "nav_links":
            if isinstance(value, list):
                data[key] = [
                    {"title": item["title"], "href": item["href"]}
                    for item in value
                    if isinstance(item, dict) and "title" in item and "href" in item
                ]
            continue
        if isinstance(value, dict):
            section = data[key]
            section.update((name, v) for name, v in value.items() if name in section)
    return _fromdict(data)


def _asdict(cfg: AppConfig) -> dict[str, Any]:
    """Convert AppConfig to nested dictionary."""
    return {
        "site": {
            "title": cfg.site.title,
            "header_title": cfg.site.header_title,
            "author": cfg.site.author,
            "author_url": cfg.site.author_url,
            "description": cfg.site.description,
            "locale": cfg.site.locale,
            "display_cap": cfg.site.display_cap,
            "summary_limit": cfg.site.summary_limit,
        },
        "nav_links": [{"title": link.title, "href": link.href} for link in cfg.nav_links],
        "output": {
            "filename": cfg.output.filename,
        },
        "logging": {
            "level": cfg.logging.level,
            "console": cfg.logging.console,
            "file": cfg.logging.file,
            "format": cfg.logging.format,
            "filename": cfg.logging.filename,
        },
    }


def _fromdict(data: dict[str, Any]) -> AppConfig:
    """Reconstruct AppConfig from nested dictionary."""
    return AppConfig(
        site=SiteConfig(**data["site"]),
        nav_links=[NavLink(**link) for link in data["nav_links"]],
        output=OutputConfig(**data["output"]),
        logging=LoggingConfig(**data["logging"]),
    )
