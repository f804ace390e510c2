from __future__ import annotations

import unicodedata


def slugify(text: str) -> str:
    """Convert tag text to the slug used in ``/tags/{slug}`` URLs.

    Follows the github-slugger convention so that tag links agree with the
    tag index: lower-case, drop everything except letters, marks, numbers,
    connector punctuation, spaces and hyphens, then turn each space into a
    hyphen. Runs of spaces are not collapsed.

    Examples:
        >>> slugify("Hello World")
        'hello-world'
        >>> slugify("Next.js")
        'nextjs'
    """
    kept = []
    for ch in text.lower():
        if ch in (" ", "-"):
            kept.append(ch)
            continue
        category = unicodedata.category(ch)
        # L* letters, M* marks, N* numbers, Pc connectors such as "_"
        if category[0] in "LMN" or category == "Pc":
            kept.append(ch)
    return "".join(kept).replace(" ", "-")


def tag_label(text: str) -> str:
    """Display label for a tag: spaces become hyphens, nothing else changes."""
    return text.replace(" ", "-")
