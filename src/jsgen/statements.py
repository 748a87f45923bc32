"""
Statement Model for jsgen

Every construct that can appear inside a generated JavaScript block is
represented as a Statement node, never as an ad-hoc string concatenation.

The statement set is closed:
    - Raw           verbatim line of code
    - Literal       pre-formatted literal token
    - VarDecl       let / const / var declaration
    - Binary        binary expression
    - BlockStatement  nested block (function bodies, conditionals, ...)

ARCHITECTURAL RULE:
    Statements are structure only.
    Rendering belongs in jsgen.backends.
"""

import math
from abc import ABC
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from functools import singledispatch
from typing import TYPE_CHECKING, Optional, Union

if TYPE_CHECKING:
    from jsgen.model import Block


class Statement(ABC):
    """
    Base class for all statement nodes.

    DO NOT:
        - Add rendering logic here (belongs in backends)
        - Add validation here (belongs in analyzer)
    """
    pass


class VarKind(Enum):
    """Declaration keyword of a variable declaration."""

    LET = "let"
    CONST = "const"
    VAR = "var"


class BinaryOperator(Enum):
    """
    Operator tokens supported by binary expressions.

    Binary.operator stores the token text, so members of this enum
    are a convenience for constructing nodes, not a requirement.
    """

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    MOD = "%"
    EQUALS = "=="
    NOT_EQUALS = "!="
    STRICT_EQUALS = "==="
    STRICT_NOT_EQUALS = "!=="
    LESS_THAN = "<"


@dataclass(frozen=True)
class Raw(Statement):
    """
    Opaque code emitted verbatim.

    Example:
        Raw("console.log(foo);")
    """

    text: str


@dataclass(frozen=True)
class Literal(Statement):
    """
    Pre-formatted literal token.

    Strings are already quoted and numbers already formatted, so
    Literal("'foo'") and Literal("42") render exactly as given.
    Use to_literal() to build one from a Python value.
    """

    text: str


@dataclass(frozen=True)
class VarDecl(Statement):
    """
    Variable declaration.

    Example:
        let foo = 42

    Becomes:
        VarDecl(kind=VarKind.LET, name="foo", initializer=Literal("42"))

    Properties:
        kind: VarKind enum
        name: Identifier (not validated)
        initializer: Optional child statement
    """

    kind: VarKind
    name: str
    initializer: Optional[Statement] = None


@dataclass(frozen=True)
class Binary(Statement):
    """
    Binary expression.

    Example:
        (1 + 2)

    Becomes:
        Binary(left=Literal("1"), operator="+", right=Literal("2"))

    A BinaryOperator member may be passed as operator; it is stored
    as its token text.
    """

    left: Statement
    operator: str
    right: Statement

    def __post_init__(self):
        if isinstance(self.operator, BinaryOperator):
            object.__setattr__(self, "operator", self.operator.value)


@dataclass(frozen=True)
class BlockStatement(Statement):
    """
    Statement owning a nested Block.

    IMPORTANT:
        The nested block carries its own indent. Nothing derives it
        from the nesting depth.

        The owned Block stays mutable, so block statements compare by
        value but are not hashable.
    """

    block: "Block"

    __hash__ = None


@singledispatch
def to_literal(value) -> Literal:
    """
    Convert a Python value into a Literal statement.

    Each registered kind maps to exactly one textual form. Register
    new kinds with ``to_literal.register``.

    Raises:
        TypeError: If no conversion is registered for the value's type
    """
    raise TypeError(f"Cannot convert {type(value).__name__} to a literal")


@to_literal.register
def _(value: str) -> Literal:
    # Embedded quotes are not escaped
    return Literal(f"'{value}'")


@to_literal.register
def _(value: bool) -> Literal:
    return Literal("true" if value else "false")


@to_literal.register
def _(value: int) -> Literal:
    return Literal(str(value))


@to_literal.register
def _(value: float) -> Literal:
    if math.isnan(value):
        return Literal("NaN")
    if math.isinf(value):
        return Literal("Infinity" if value > 0 else "-Infinity")

    # Plain decimal notation, no exponent, no trailing ".0"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return Literal(text)


StatementLike = Union[Statement, str, int, float, bool]


def as_statement(value: StatementLike) -> Statement:
    """Return value unchanged if it is a Statement, otherwise convert it to a Literal."""
    if isinstance(value, Statement):
        return value
    return to_literal(value)


__all__ = [
    "Statement",
    "VarKind",
    "BinaryOperator",
    "Raw",
    "Literal",
    "VarDecl",
    "Binary",
    "BlockStatement",
    "StatementLike",
    "to_literal",
    "as_statement",
]
