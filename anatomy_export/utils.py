"""
Utility functions for component metadata export.
"""

import re

# Whitespace runs, stripped from names used as type identifiers
_WHITESPACE_PATTERN = re.compile(r"\s+")

# Characters not allowed in file names on common filesystems
_INVALID_FILENAME_PATTERN = re.compile(r'[/\\:*?"<>|]')

# Characters dropped when building a Markdown heading anchor
_ANCHOR_STRIP_PATTERN = re.compile(r"[^\w\- ]")

MAX_FILENAME_LENGTH = 255


def sanitize_component_name(name: str) -> str:
    """Strip whitespace from a component name for use in type names.

    Examples:
        "Icon Button" -> "IconButton"
        " Card\\tHeader " -> "CardHeader"
    """
    return _WHITESPACE_PATTERN.sub("", name)


def sanitize_filename(name: str) -> str:
    """Make a component name safe to use as a file name.

    Removes characters that filesystems reject, replaces whitespace runs with
    hyphens and truncates to 255 characters.
    """
    cleaned = _INVALID_FILENAME_PATTERN.sub("", name)
    cleaned = _WHITESPACE_PATTERN.sub("-", cleaned)
    return cleaned[:MAX_FILENAME_LENGTH]


def unique_filenames(names: list[str]) -> list[str]:
    """Sanitize names and suffix duplicates with -2, -3, ... in order."""
    used: set[str] = set()
    result = []
    for name in names:
        base = sanitize_filename(name)
        candidate = base
        counter = 2
        while candidate in used:
            candidate = f"{base}-{counter}"
            counter += 1
        used.add(candidate)
        result.append(candidate)
    return result


def markdown_anchor(title: str) -> str:
    """GitHub-style heading anchor, e.g. "Icon Button" -> "icon-button"."""
    return _ANCHOR_STRIP_PATTERN.sub("", title.strip().lower()).replace(" ", "-")
