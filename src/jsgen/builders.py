"""
Terse constructors for jsgen statements and dependencies.

These produce exactly the same nodes as direct construction:

    let("foo", 42)          == VarDecl(VarKind.LET, "foo", Literal("42"))
    add(1, 2)               == Binary(Literal("1"), "+", Literal("2"))
    import_from("baz", "foo", "bar")
                            == Dependency(["foo", "bar"], "baz")

Plain Python values are converted with to_literal().
"""

from typing import Optional

from jsgen.model import Dependency
from jsgen.statements import (
    Binary,
    BinaryOperator,
    StatementLike,
    VarDecl,
    VarKind,
    as_statement,
)


def import_from(path: str, *names: str) -> Dependency:
    """Build `import { <names> } from '<path>'`."""
    return Dependency(imports=list(names), path=path)


def _declare(kind: VarKind, name: str, initializer: Optional[StatementLike]) -> VarDecl:
    if initializer is not None:
        initializer = as_statement(initializer)
    return VarDecl(kind=kind, name=name, initializer=initializer)


def let(name: str, initializer: Optional[StatementLike] = None) -> VarDecl:
    return _declare(VarKind.LET, name, initializer)


def const(name: str, initializer: StatementLike) -> VarDecl:
    # const always needs an initializer in JavaScript
    return _declare(VarKind.CONST, name, initializer)


def var(name: str, initializer: Optional[StatementLike] = None) -> VarDecl:
    return _declare(VarKind.VAR, name, initializer)


def binary(operator, left: StatementLike, right: StatementLike) -> Binary:
    """Build a binary expression in prefix order, e.g. binary("+", 1, 2)."""
    if isinstance(operator, BinaryOperator):
        operator = operator.value
    return Binary(left=as_statement(left), operator=operator, right=as_statement(right))


def add(left: StatementLike, right: StatementLike) -> Binary:
    return binary(BinaryOperator.ADD, left, right)


def sub(left: StatementLike, right: StatementLike) -> Binary:
    return binary(BinaryOperator.SUB, left, right)


def mul(left: StatementLike, right: StatementLike) -> Binary:
    return binary(BinaryOperator.MUL, left, right)


def div(left: StatementLike, right: StatementLike) -> Binary:
    return binary(BinaryOperator.DIV, left, right)


def mod(left: StatementLike, right: StatementLike) -> Binary:
    return binary(BinaryOperator.MOD, left, right)


def eq(left: StatementLike, right: StatementLike) -> Binary:
    return binary(BinaryOperator.EQUALS, left, right)


def ne(left: StatementLike, right: StatementLike) -> Binary:
    return binary(BinaryOperator.NOT_EQUALS, left, right)


def strict_eq(left: StatementLike, right: StatementLike) -> Binary:
    return binary(BinaryOperator.STRICT_EQUALS, left, right)


def strict_ne(left: StatementLike, right: StatementLike) -> Binary:
    return binary(BinaryOperator.STRICT_NOT_EQUALS, left, right)


def lt(left: StatementLike, right: StatementLike) -> Binary:
    return binary(BinaryOperator.LESS_THAN, left, right)


__all__ = [
    "import_from",
    "let",
    "const",
    "var",
    "binary",
    "add",
    "sub",
    "mul",
    "div",
    "mod",
    "eq",
    "ne",
    "strict_eq",
    "strict_ne",
    "lt",
]
