"""Tests for reference document rendering."""

from __future__ import annotations

import dataclasses
import importlib
import sys
from pathlib import Path

import pytest

from sql_docgen.catalog import (
    ArgTypes,
    BinaryOperator,
    BinaryOverload,
    Catalogs,
    ComparisonOperator,
    ComparisonOverload,
    FunctionOverload,
    UnaryOperator,
    UnaryOverload,
)
from sql_docgen.config import DocgenConfig


def _import_render():
    root = Path(__file__).resolve().parents[1]
    src = root / "src"
    sys.path.insert(0, str(src))
    try:
        module = importlib.import_module("sql_docgen.render")
    finally:
        sys.path.pop(0)
    return module


def _function_catalog() -> dict[str, list[FunctionOverload]]:
    return {
        "lower": [FunctionOverload(ArgTypes(("string",)), "string")],
        "now": [
            FunctionOverload(
                ArgTypes(), "timestamptz", category="Date and Time", info="Current time."
            )
        ],
        "Lower": [FunctionOverload(ArgTypes(("bytes",)), "bytes")],
        "version": [FunctionOverload(ArgTypes(), "string", category="Compatibility")],
    }


def test_generate_functions_end_to_end() -> None:
    render = _import_render()
    output = render.generate_functions(
        {"lower": [FunctionOverload(ArgTypes(("string",)), "string")]}, True
    )
    assert output == (
        b"### string Functions\n\n"
        b"<table>\n"
        b"<thead><tr><th>Function &rarr; Returns</th><th>Description</th></tr></thead>\n"
        b"<tbody>\n"
        b'<tr><td><code>lower(<a href="string.html">string</a>) &rarr; '
        b'<a href="string.html">string</a></code></td><td></td></tr>'
        b"</tbody>\n"
        b"</table>\n\n"
    )


def test_generate_functions_category_order() -> None:
    render = _import_render()
    output = render.generate_functions(_function_catalog(), True).decode()
    headings = [line for line in output.splitlines() if line.startswith("### ")]
    assert headings == [
        "### Date and Time Functions",
        "### string Functions",
        "### Compatibility Functions",
    ]
    assert "bytes" not in output
    assert (
        '<tr><td><code>now() &rarr; <a href="timestamp.html">timestamptz</a></code></td>'
        '<td><span class="funcdesc"><p>Current time.</p></span></td></tr>'
    ) in output


def test_generate_functions_without_categories_has_no_headings() -> None:
    render = _import_render()
    output = render.generate_functions(_function_catalog(), False).decode()
    assert "###" not in output
    assert output.count("<table>") == 1
    rows = [line for line in output.splitlines() if line.startswith("<tr><td><code>")]
    assert [row.split("(")[0] for row in rows] == [
        "<tr><td><code>lower",
        "<tr><td><code>now",
        "<tr><td><code>version",
    ]
    assert output.endswith("</td></tr></tbody>\n</table>\n\n")


def test_generate_functions_empty_catalog() -> None:
    render = _import_render()
    assert render.generate_functions({}, True) == b""


def test_generate_operators_end_to_end() -> None:
    render = _import_render()
    output = render.generate_operators(
        {UnaryOperator.MINUS: [UnaryOverload("int", "int")]},
        {BinaryOperator.MINUS: [BinaryOverload("int", "string", "bool")]},
        {},
    )
    assert output == (
        b"<table><thead>\n"
        b"<tr><td><code>-</code></td><td>Return</td></tr>\n"
        b"</thead><tbody>\n"
        b'<tr><td><code>-</code><a href="int.html">int</a></td>'
        b'<td><a href="int.html">int</a></td></tr>\n'
        b'<tr><td><a href="int.html">int</a> <code>-</code> <a href="string.html">string</a>'
        b'</td><td><a href="bool.html">bool</a></td></tr>\n'
        b"</tbody></table>\n"
    )


def test_generate_operators_tables_in_symbol_order() -> None:
    render = _import_render()
    output = render.generate_operators(
        {},
        {BinaryOperator.PLUS: [BinaryOverload("int", "int", "int")]},
        {ComparisonOperator.EQ: [ComparisonOverload("inet", "inet")]},
    ).decode()
    assert output.count("<table><thead>") == 2
    assert output.index("<code>+</code></td><td>Return") < output.index(
        "<code>=</code></td><td>Return"
    )
    assert '<td><a href="bool.html">bool</a></td>' in output


def test_output_is_deterministic() -> None:
    render = _import_render()
    catalogs = Catalogs(
        functions=_function_catalog(),
        aggregates={"count": [FunctionOverload(ArgTypes(("int",)), "int")]},
        unary_ops={UnaryOperator.COMPLEMENT: [UnaryOverload("int", "int")]},
        binary_ops={
            BinaryOperator.MULT: [
                BinaryOverload("int", "int", "int"),
                BinaryOverload("float", "float", "float"),
            ]
        },
        comparison_ops={ComparisonOperator.LT: [ComparisonOverload("date", "date")]},
    )
    assert render.generate_all(catalogs) == render.generate_all(catalogs)


def test_generate_all_uses_config_names() -> None:
    render = _import_render()
    catalogs = Catalogs(
        functions={"rank": [FunctionOverload(ArgTypes(), "int", window=True)]},
        aggregates={"rank": [FunctionOverload(ArgTypes(), "int", window=True)]},
    )

    documents = render.generate_all(catalogs)
    assert list(documents) == ["functions.md", "aggregates.md", "operators.md"]
    assert documents["functions.md"] == b""
    assert b"rank() &rarr;" in documents["aggregates.md"]
    assert documents["operators.md"] == b""

    config = DocgenConfig.from_mapping(
        {"functions_output": "builtins.html", "categorize_aggregates": True}
    )
    documents = render.generate_all(catalogs, config)
    assert set(documents) == {"builtins.html", "aggregates.md", "operators.md"}
    assert documents["aggregates.md"] == b""


def test_catalogs_bundle_is_frozen() -> None:
    catalogs = Catalogs()
    with pytest.raises(dataclasses.FrozenInstanceError):
        catalogs.functions = {}
