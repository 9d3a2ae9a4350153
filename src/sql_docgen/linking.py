"""Cross-reference links from type spellings to type reference pages."""

from __future__ import annotations

import re

LINKED_TYPES = frozenset(
    {
        "int",
        "decimal",
        "float",
        "bool",
        "date",
        "timestamp",
        "interval",
        "string",
        "bytes",
        "inet",
        "uuid",
        "collatedstring",
    }
)

_TYPE_ALIASES = {"timestamptz": "timestamp"}

_LINK_RE = re.compile(r"([a-z]+)([.\[\]]*)\Z")


def _strip_suffix(value: str, suffix: str) -> str:
    if value.endswith(suffix):
        return value[: -len(suffix)]
    return value


def link_type_name(name: str) -> str:
    """Return *name* linked to its type page, or *name* itself if unknown.

    The link text keeps the requested spelling (``int[]``, ``timestamptz``);
    the target resolves aliases, then drops the array suffix.
    """
    visible = _strip_suffix(name, "{}")
    target = _TYPE_ALIASES.get(visible, visible)
    target = _strip_suffix(target, "[]")
    if target not in LINKED_TYPES:
        return name
    return f'<a href="{target}.html">{visible}</a>'


def _link_match(match: re.Match[str]) -> str:
    return link_type_name(match.group(1)) + match.group(2)


def link_arguments(text: str) -> str:
    """Link every type in a ``", "``-separated list, keeping trailing punctuation."""
    tokens = text.split(", ")
    return ", ".join(_LINK_RE.sub(_link_match, token) for token in tokens)
