"""
Core Module Model Objects

Defines the containers that statements are assembled into:
    - Blocks (ordered statements at one indentation level)
    - Dependencies (import descriptors)
    - Modules (root container, one generated .js file)

ARCHITECTURAL RULE:
    These objects:
        - Are append-only while being built
        - Are read-only while being rendered
        - Know nothing about text output (see jsgen.backends)
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from .statements import (
    Binary,
    BinaryOperator,
    BlockStatement,
    Literal,
    Raw,
    Statement,
    StatementLike,
    VarDecl,
    VarKind,
    as_statement,
)


@dataclass
class Block:
    """
    An ordered sequence of statements rendered at one indentation level.

    Properties:
        indent:
            Nesting depth used only for rendering.
            Nested blocks must set their own indent explicitly;
            the renderer never infers it.

        statements:
            Statements in emission order.

    All append methods return the block itself so calls can be chained,
    except block(), which returns the newly nested block.
    """

    indent: int = 0
    statements: List[Statement] = field(default_factory=list)

    def __post_init__(self):
        if not isinstance(self.indent, int) or self.indent < 0:
            raise ValueError(f"Block indent must be a non-negative integer, got {self.indent!r}")

    def stmt(self, statement: Statement) -> "Block":
        """Append a statement."""
        self.statements.append(statement)
        return self

    def raw(self, code: str) -> "Block":
        """Append a line of raw code."""
        return self.stmt(Raw(code))

    def var_decl(
        self,
        kind: VarKind,
        name: str,
        initializer: Optional[StatementLike] = None,
    ) -> "Block":
        """
        Append a variable declaration.

        Args:
            kind: Declaration keyword
            name: Variable identifier
            initializer: Statement or plain value (converted to a Literal)
        """
        if initializer is not None:
            initializer = as_statement(initializer)
        return self.stmt(VarDecl(kind=kind, name=name, initializer=initializer))

    def literal(self, value: StatementLike) -> "Block":
        """
        Append a literal.

        Raises:
            TypeError: If value is a statement other than a Literal
        """
        statement = as_statement(value)
        if not isinstance(statement, Literal):
            raise TypeError(f"Expected a literal statement, got {type(statement).__name__}")
        return self.stmt(statement)

    def binary(self, left: StatementLike, operator, right: StatementLike) -> "Block":
        """Append a binary expression. Plain operands are converted to literals."""
        if isinstance(operator, BinaryOperator):
            operator = operator.value
        return self.stmt(Binary(left=as_statement(left), operator=operator, right=as_statement(right)))

    def block(self, indent: Optional[int] = None) -> "Block":
        """
        Append a nested block and return it.

        Args:
            indent: Indent of the nested block. Defaults to one level
                deeper than this block.
        """
        inner = Block(indent=self.indent + 1 if indent is None else indent)
        self.stmt(BlockStatement(inner))
        return inner


@dataclass
class Dependency:
    """
    An import descriptor.

    Example:
        import { foo, bar } from 'baz'

    Becomes:
        Dependency(imports=["foo", "bar"], path="baz")

    IMPORTANT:
        Duplicate names or duplicate dependencies are not detected.
        See jsgen.analyzer for diagnostics.
    """

    imports: List[str]
    path: str

    def __post_init__(self):
        self.imports = list(self.imports)
        if not self.imports:
            raise ValueError(f"Dependency on '{self.path}' must import at least one name")


@dataclass
class Module:
    """
    Root container for one generated JavaScript file.

    Properties:
        name:
            Module name (file name without extension)

        dependencies:
            Import descriptors, in emission order

        main_block:
            Top-level block, indent 0

    Statement append methods (stmt, raw, var_decl, ...) are forwarded
    to the main block.
    """

    name: str
    dependencies: List[Dependency] = field(default_factory=list)
    main_block: Block = field(default_factory=Block)

    def __post_init__(self):
        if self.main_block.indent != 0:
            raise ValueError(f"Main block of module '{self.name}' must have indent 0, got {self.main_block.indent}")

    def dep(self, dependency: Dependency) -> "Module":
        """Add a dependency to the module."""
        self.dependencies.append(dependency)
        return self

    def deps(self, dependencies: Iterable[Dependency]) -> "Module":
        """Add multiple dependencies to the module."""
        self.dependencies.extend(dependencies)
        return self

    def stmt(self, statement: Statement) -> Block:
        return self.main_block.stmt(statement)

    def raw(self, code: str) -> Block:
        return self.main_block.raw(code)

    def var_decl(self, kind: VarKind, name: str, initializer: Optional[StatementLike] = None) -> Block:
        return self.main_block.var_decl(kind, name, initializer)

    def literal(self, value: StatementLike) -> Block:
        return self.main_block.literal(value)

    def binary(self, left: StatementLike, operator, right: StatementLike) -> Block:
        return self.main_block.binary(left, operator, right)

    def block(self, indent: Optional[int] = None) -> Block:
        return self.main_block.block(indent)


__all__ = ["Block", "Dependency", "Module"]
