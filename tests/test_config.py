"""Tests for docgen configuration."""

from __future__ import annotations

import pytest

from sql_docgen.config import DocgenConfig


def test_defaults_match_reference_layout() -> None:
    config = DocgenConfig.from_mapping({})
    assert config == DocgenConfig()
    assert config.functions_output == "functions.md"
    assert config.categorize_functions is True
    assert config.categorize_aggregates is False


def test_rejects_unknown_key() -> None:
    with pytest.raises(ValueError, match="unknown docgen config key"):
        DocgenConfig.from_mapping({"output_dir": "docs"})


@pytest.mark.parametrize(
    ("data", "message"),
    [
        ({"categorize_functions": "yes"}, "must be a boolean"),
        ({"operators_output": ""}, "must be a non-empty string"),
        ({"aggregates_output": "functions.md"}, "must be distinct"),
    ],
)
def test_rejects_invalid_values(data: dict, message: str) -> None:
    with pytest.raises(ValueError, match=message):
        DocgenConfig.from_mapping(data)


def test_rejects_non_table() -> None:
    with pytest.raises(ValueError, match="must be a table"):
        DocgenConfig.from_mapping(["functions.md"])
