"""Post source: reads the content pipeline's export into Post values."""

from .json_parser import load_posts, parse_posts_json, sort_posts

__all__ = ["load_posts", "parse_posts_json", "sort_posts"]
