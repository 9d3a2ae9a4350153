"""In-memory catalog model for builtin functions and operators."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Sequence, Union


class CatalogError(ValueError):
    """Raised when a catalog entry violates a documentation precondition."""


def _require_type(value: Any, what: str) -> str:
    if not isinstance(value, str) or not value:
        raise CatalogError(f"{what} must be a non-empty type spelling, got {value!r}")
    return value


@dataclass(frozen=True)
class ArgTypes:
    """Fixed positional argument types."""

    types: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        for index, typ in enumerate(self.types):
            _require_type(typ, f"argument {index}")

    def __str__(self) -> str:
        return ", ".join(self.types)


@dataclass(frozen=True)
class VariadicType:
    """Any number of arguments of a single type."""

    typ: str

    def __post_init__(self) -> None:
        _require_type(self.typ, "variadic argument")

    def __str__(self) -> str:
        return f"{self.typ}..."


@dataclass(frozen=True)
class HomogeneousType:
    """Any number of arguments sharing one (unspecified) type."""

    def __str__(self) -> str:
        return "anyelement..."


ArgumentSpec = Union[ArgTypes, VariadicType, HomogeneousType]


@dataclass(frozen=True)
class FunctionOverload:
    """One overload of a scalar or aggregate function.

    Parameters
    ----------
    types:
        Declared argument list.
    return_type:
        Spelling of the fixed return type.
    category:
        Explicit documentation category; empty to fall back to the return type.
    info:
        Markdown description; empty when undocumented.
    window:
        Whether the overload is a window function.
    """

    types: ArgumentSpec
    return_type: str
    category: str = ""
    info: str = ""
    window: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.types, (ArgTypes, VariadicType, HomogeneousType)):
            raise CatalogError(f"unsupported argument list {self.types!r}")
        _require_type(self.return_type, "return type")


@dataclass(frozen=True)
class UnaryOverload:
    typ: str
    return_type: str

    def __post_init__(self) -> None:
        _require_type(self.typ, "operand type")
        _require_type(self.return_type, "return type")


@dataclass(frozen=True)
class BinaryOverload:
    left_type: str
    right_type: str
    return_type: str

    def __post_init__(self) -> None:
        _require_type(self.left_type, "left operand type")
        _require_type(self.right_type, "right operand type")
        _require_type(self.return_type, "return type")


@dataclass(frozen=True)
class ComparisonOverload:
    """A comparison overload; the result is always ``bool``."""

    left_type: str
    right_type: str

    def __post_init__(self) -> None:
        _require_type(self.left_type, "left operand type")
        _require_type(self.right_type, "right operand type")


class _Symbol(Enum):
    def __str__(self) -> str:
        return self.value


class UnaryOperator(_Symbol):
    PLUS = "+"
    MINUS = "-"
    COMPLEMENT = "~"


class BinaryOperator(_Symbol):
    BITAND = "&"
    BITOR = "|"
    BITXOR = "#"
    PLUS = "+"
    MINUS = "-"
    MULT = "*"
    DIV = "/"
    FLOORDIV = "//"
    MOD = "%"
    POW = "^"
    CONCAT = "||"
    LSHIFT = "<<"
    RSHIFT = ">>"


class ComparisonOperator(_Symbol):
    EQ = "="
    LT = "<"
    LE = "<="
    IN = "IN"
    LIKE = "LIKE"
    ILIKE = "ILIKE"
    SIMILAR_TO = "SIMILAR TO"
    REG_MATCH = "~"
    REG_IMATCH = "~*"
    IS_DISTINCT_FROM = "IS DISTINCT FROM"
    CONTAINS = "@>"
    CONTAINED_BY = "<@"


FunctionCatalog = Mapping[str, Sequence[FunctionOverload]]
UnaryCatalog = Mapping[Any, Sequence[UnaryOverload]]
BinaryCatalog = Mapping[Any, Sequence[BinaryOverload]]
ComparisonCatalog = Mapping[Any, Sequence[ComparisonOverload]]


@dataclass(frozen=True)
class Catalogs:
    """All catalogs needed to render the complete reference."""

    functions: FunctionCatalog = field(default_factory=dict)
    aggregates: FunctionCatalog = field(default_factory=dict)
    unary_ops: UnaryCatalog = field(default_factory=dict)
    binary_ops: BinaryCatalog = field(default_factory=dict)
    comparison_ops: ComparisonCatalog = field(default_factory=dict)
