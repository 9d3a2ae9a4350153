"""HTML reference document rendering."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from .catalog import BinaryCatalog, Catalogs, ComparisonCatalog, FunctionCatalog, UnaryCatalog
from .config import DocgenConfig
from .functions import FunctionGroup, collect_functions
from .linking import link_type_name
from .operators import OperatorGroup, collect_operators

logger = logging.getLogger(__name__)

_TEMPLATE_ENV = Environment(
    loader=FileSystemLoader(Path(__file__).resolve().parent / "templates"),
    trim_blocks=True,
    lstrip_blocks=False,
    keep_trailing_newline=True,
    undefined=StrictUndefined,
)
_TEMPLATE_ENV.filters["link_type"] = link_type_name


def render_operators(groups: Iterable[OperatorGroup]) -> bytes:
    """Render one signature table per operator symbol."""
    rendered = _TEMPLATE_ENV.get_template("operators.html.j2").render(groups=list(groups))
    return rendered.encode("utf-8")


def render_functions(groups: Iterable[FunctionGroup], categorize: bool) -> bytes:
    """Render one table per category, headed by the category name if *categorize*."""
    rendered = _TEMPLATE_ENV.get_template("functions.html.j2").render(
        groups=list(groups),
        categorize=categorize,
    )
    return rendered.encode("utf-8")


def generate_operators(
    unary: UnaryCatalog,
    binary: BinaryCatalog,
    comparison: ComparisonCatalog,
) -> bytes:
    """Generate the operator reference."""
    return render_operators(collect_operators(unary, binary, comparison))


def generate_functions(catalog: FunctionCatalog, categorize: bool) -> bytes:
    """Generate the function reference for *catalog*."""
    return render_functions(collect_functions(catalog, categorize), categorize)


def generate_all(catalogs: Catalogs, config: DocgenConfig | None = None) -> dict[str, bytes]:
    """Generate every reference document, keyed by output file name.

    Parameters
    ----------
    catalogs:
        Function, aggregate and operator catalogs to document.
    config:
        Output names and categorization flags; defaults to :class:`DocgenConfig`.
    """
    config = config or DocgenConfig()
    documents = {
        config.functions_output: generate_functions(
            catalogs.functions, config.categorize_functions
        ),
        config.aggregates_output: generate_functions(
            catalogs.aggregates, config.categorize_aggregates
        ),
        config.operators_output: generate_operators(
            catalogs.unary_ops, catalogs.binary_ops, catalogs.comparison_ops
        ),
    }
    for name, content in documents.items():
        logger.debug("generated %s (%d bytes)", name, len(content))
    return documents
