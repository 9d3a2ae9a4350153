"""Configuration for generating the complete reference bundle."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping


@dataclass(frozen=True)
class DocgenConfig:
    """Output names and categorization flags for :func:`generate_all`."""

    functions_output: str = "functions.md"
    aggregates_output: str = "aggregates.md"
    operators_output: str = "operators.md"
    categorize_functions: bool = True
    categorize_aggregates: bool = False

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> DocgenConfig:
        """Build a config from a parsed table such as a TOML section."""
        if not isinstance(data, Mapping):
            raise ValueError("docgen config must be a table")
        known = {item.name for item in fields(cls)}
        values: dict[str, Any] = {}
        for key, value in data.items():
            if key not in known:
                raise ValueError(f"unknown docgen config key '{key}'")
            if key.startswith("categorize_"):
                if not isinstance(value, bool):
                    raise ValueError(f"docgen config '{key}' must be a boolean")
            elif not isinstance(value, str) or not value.strip():
                raise ValueError(f"docgen config '{key}' must be a non-empty string")
            values[key] = value

        config = cls(**values)
        outputs = [config.functions_output, config.aggregates_output, config.operators_output]
        if len(set(outputs)) != len(outputs):
            raise ValueError("docgen config output names must be distinct")
        return config
