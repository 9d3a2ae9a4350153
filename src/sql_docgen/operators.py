"""Collection and ordering of operator signatures."""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass
from typing import Iterable

from .catalog import (
    BinaryCatalog,
    BinaryOverload,
    CatalogError,
    ComparisonCatalog,
    ComparisonOverload,
    UnaryCatalog,
    UnaryOverload,
)
from .linking import link_type_name

logger = logging.getLogger(__name__)

COMPARISON_RETURN_TYPE = "bool"


@dataclass(frozen=True)
class Operation:
    """A single operator signature; an empty ``right`` marks a unary operator."""

    left: str
    right: str
    ret: str
    op: str

    @property
    def is_unary(self) -> bool:
        return self.right == ""

    def display(self) -> str:
        """Render the operand side of the signature with linked types."""
        if self.is_unary:
            return f"<code>{self.op}</code>{link_type_name(self.left)}"
        left = link_type_name(self.left)
        right = link_type_name(self.right)
        return f"{left} <code>{self.op}</code> {right}"


@dataclass(frozen=True)
class OperatorGroup:
    symbol: str
    operations: tuple[Operation, ...]


def _cmp(a: str, b: str) -> int:
    return (a > b) - (a < b)


def compare_operations(first: Operation, second: Operation) -> int:
    """Three-way comparison: unary before binary, then left, right and return type."""
    if first.is_unary != second.is_unary:
        return -1 if first.is_unary else 1
    if first.left != second.left:
        return _cmp(first.left, second.left)
    if first.right != second.right:
        return _cmp(first.right, second.right)
    return _cmp(first.ret, second.ret)


operation_sort_key = functools.cmp_to_key(compare_operations)


def _checked(overload: object, expected: type, symbol: str) -> None:
    if not isinstance(overload, expected):
        raise CatalogError(
            f"operator '{symbol}' expects {expected.__name__} overloads, got {overload!r}"
        )


def _unary_operations(catalog: UnaryCatalog) -> Iterable[Operation]:
    for kind, overloads in catalog.items():
        symbol = str(kind)
        for overload in overloads:
            _checked(overload, UnaryOverload, symbol)
            yield Operation(left=overload.typ, right="", ret=overload.return_type, op=symbol)


def _binary_operations(catalog: BinaryCatalog) -> Iterable[Operation]:
    for kind, overloads in catalog.items():
        symbol = str(kind)
        for overload in overloads:
            _checked(overload, BinaryOverload, symbol)
            yield Operation(
                left=overload.left_type,
                right=overload.right_type,
                ret=overload.return_type,
                op=symbol,
            )


def _comparison_operations(catalog: ComparisonCatalog) -> Iterable[Operation]:
    for kind, overloads in catalog.items():
        symbol = str(kind)
        for overload in overloads:
            _checked(overload, ComparisonOverload, symbol)
            yield Operation(
                left=overload.left_type,
                right=overload.right_type,
                ret=COMPARISON_RETURN_TYPE,
                op=symbol,
            )


def collect_operators(
    unary: UnaryCatalog,
    binary: BinaryCatalog,
    comparison: ComparisonCatalog,
) -> tuple[OperatorGroup, ...]:
    """Group operator overloads by symbol, each group and the symbols sorted."""
    grouped: dict[str, list[Operation]] = {}
    for source in (
        _unary_operations(unary),
        _binary_operations(binary),
        _comparison_operations(comparison),
    ):
        for operation in source:
            grouped.setdefault(operation.op, []).append(operation)

    groups = tuple(
        OperatorGroup(
            symbol=symbol,
            operations=tuple(sorted(grouped[symbol], key=operation_sort_key)),
        )
        for symbol in sorted(grouped)
    )
    logger.debug("collected %d operator symbols", len(groups))
    return groups
