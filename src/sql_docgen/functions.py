"""Collection and grouping of scalar and aggregate function signatures."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

import markdown
from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor

from .catalog import CatalogError, FunctionCatalog, FunctionOverload
from .linking import link_arguments

logger = logging.getLogger(__name__)

NOT_USABLE_INFO = "Not usable; exposed only for compatibility with PostgreSQL."
COMPATIBILITY_CATEGORY = "Compatibility"


@dataclass(frozen=True)
class FunctionGroup:
    """Rendered table rows of one documentation category."""

    name: str
    rows: tuple[str, ...]


class _NofollowTreeprocessor(Treeprocessor):
    def run(self, root):
        for link in root.iter("a"):
            link.set("rel", "nofollow")


class NofollowExtension(Extension):
    """Mark every link in rendered descriptions with ``rel="nofollow"``."""

    def extendMarkdown(self, md):
        md.treeprocessors.register(_NofollowTreeprocessor(md), "nofollow", 5)


def _new_converter() -> markdown.Markdown:
    return markdown.Markdown(output_format="xhtml", extensions=[NofollowExtension()])


def render_description(info: str, converter: markdown.Markdown | None = None) -> str:
    """Render a Markdown description as an HTML fragment wrapped in a styling span.

    Table cells are not Markdown-processed by the documentation site, so the
    conversion happens here.
    """
    if not info:
        return ""
    md = converter if converter is not None else _new_converter()
    md.reset()
    return f'<span class="funcdesc">{md.convert(info)}</span>'


def _category(overload: FunctionOverload, categorize: bool) -> str:
    if not categorize:
        return ""
    return overload.category or overload.return_type


def _render_row(name: str, overload: FunctionOverload, description: str) -> str:
    args = link_arguments(str(overload.types))
    ret = link_arguments(overload.return_type)
    return (
        f"<tr><td><code>{name}({args}) &rarr; {ret}</code></td>"
        f"<td>{description}</td></tr>"
    )


def order_categories(names: Iterable[str]) -> list[str]:
    """Sort category names, moving ``Compatibility`` to the end."""
    ordered = sorted(names)
    if COMPATIBILITY_CATEGORY in ordered:
        ordered.remove(COMPATIBILITY_CATEGORY)
        ordered.append(COMPATIBILITY_CATEGORY)
    return ordered


def collect_functions(catalog: FunctionCatalog, categorize: bool) -> tuple[FunctionGroup, ...]:
    """Build the sorted, categorized table rows for every function in *catalog*.

    Names are case-folded and only the first spelling of each name is
    documented. Overloads marked as not usable are dropped, as are window
    functions when *categorize* is set.
    """
    converter = _new_converter()
    rows: dict[str, list[str]] = {}
    seen: set[str] = set()

    for raw_name, overloads in catalog.items():
        name = raw_name.lower()
        if name in seen:
            logger.debug("skipping alias '%s' of '%s'", raw_name, name)
            continue
        seen.add(name)

        for overload in overloads:
            if not isinstance(overload, FunctionOverload):
                raise CatalogError(f"function '{raw_name}' has invalid overload {overload!r}")
            if overload.info == NOT_USABLE_INFO:
                logger.debug("skipping unusable overload of '%s'", name)
                continue
            if categorize and overload.window:
                logger.debug("skipping window overload of '%s'", name)
                continue
            description = render_description(overload.info, converter)
            row = _render_row(name, overload, description)
            rows.setdefault(_category(overload, categorize), []).append(row)

    groups = tuple(
        FunctionGroup(name=category, rows=tuple(sorted(rows[category])))
        for category in order_categories(rows)
    )
    logger.debug("collected %d functions into %d categories", len(seen), len(groups))
    return groups
