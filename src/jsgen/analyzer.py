"""
Module Analyzer: diagnostics and inventory of jsgen modules.

This module provides lightweight analysis of Module objects:
    - Dependency and import inventory
    - Statement counts per kind
    - Nesting and expression depth
    - Warning flags for output the generator will emit verbatim
      (duplicate imports, bad identifiers, unescaped quotes, ...)

IMPORTANT: The generator accepts all of the above silently. The analyzer
does NOT modify the module or change its rendering. It only produces
read-only reports.
"""

from __future__ import annotations

import re
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, List, Set

from jsgen.model import Block, Module
from jsgen.statements import (
    Binary,
    BinaryOperator,
    BlockStatement,
    Literal,
    Raw,
    Statement,
    VarDecl,
)

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")
_KNOWN_OPERATORS = {op.value for op in BinaryOperator}


def is_valid_identifier(name: str) -> bool:
    """Check that name is a plain JavaScript identifier."""
    return bool(_IDENTIFIER_RE.match(name))


def has_unescaped_quote(text: str) -> bool:
    """Check whether a single-quoted string literal contains an unescaped quote."""
    if len(text) < 2 or not (text.startswith("'") and text.endswith("'")):
        return False
    inner = text[1:-1]
    escaped = False
    for ch in inner:
        if escaped:
            escaped = False
        elif ch == "\\":
            escaped = True
        elif ch == "'":
            return True
    return False


def _expression_depth(stmt: Statement | None) -> int:
    """Depth of nested binary expressions below a statement."""
    if isinstance(stmt, Binary):
        return 1 + max(_expression_depth(stmt.left), _expression_depth(stmt.right))
    if isinstance(stmt, VarDecl):
        return _expression_depth(stmt.initializer)
    return 0


@dataclass
class ModuleReport:
    """Analysis report for a module."""

    module_name: str
    total_dependencies: int = 0
    total_imports: int = 0
    total_statements: int = 0

    # Inventory
    statement_counts: Dict[str, int] = field(default_factory=dict)
    declared_names: List[str] = field(default_factory=list)
    imported_names: List[str] = field(default_factory=list)

    # Findings
    duplicate_imports: Set[str] = field(default_factory=set)
    duplicate_paths: Set[str] = field(default_factory=set)
    duplicate_declarations: Set[str] = field(default_factory=set)
    invalid_identifiers: Set[str] = field(default_factory=set)
    unknown_operators: Set[str] = field(default_factory=set)
    unescaped_literals: List[str] = field(default_factory=list)
    misindented_blocks: int = 0

    # Structure
    max_block_depth: int = 0
    max_expression_depth: int = 0

    warnings: List[str] = field(default_factory=list)

    def add_warning(self, msg: str) -> None:
        """Add a warning to the report."""
        if msg not in self.warnings:
            self.warnings.append(msg)


class _Walker:
    """Collects statement facts into a report."""

    def __init__(self, report: ModuleReport):
        self.report = report
        self.counts: Dict[str, int] = defaultdict(int)

    def walk_block(self, block: Block, depth: int) -> None:
        self.report.max_block_depth = max(self.report.max_block_depth, depth)
        for stmt in block.statements:
            self.report.total_statements += 1
            self.report.max_expression_depth = max(
                self.report.max_expression_depth, _expression_depth(stmt)
            )
            self.walk_statement(stmt, block, depth)

    def walk_statement(self, stmt: Statement | None, parent: Block, depth: int) -> None:
        if stmt is None:
            return
        self.counts[type(stmt).__name__] += 1

        if isinstance(stmt, VarDecl):
            self.report.declared_names.append(stmt.name)
            if not is_valid_identifier(stmt.name):
                self.report.invalid_identifiers.add(stmt.name)
            self.walk_statement(stmt.initializer, parent, depth)

        elif isinstance(stmt, Binary):
            if stmt.operator not in _KNOWN_OPERATORS:
                self.report.unknown_operators.add(stmt.operator)
            self.walk_statement(stmt.left, parent, depth)
            self.walk_statement(stmt.right, parent, depth)

        elif isinstance(stmt, Literal):
            if has_unescaped_quote(stmt.text):
                self.report.unescaped_literals.append(stmt.text)

        elif isinstance(stmt, BlockStatement):
            if stmt.block.indent <= parent.indent:
                self.report.misindented_blocks += 1
            self.walk_block(stmt.block, depth + 1)

        elif isinstance(stmt, Raw):
            # Raw code is opaque
            pass


def _duplicates(items: List[str]) -> Set[str]:
    seen: Set[str] = set()
    dupes: Set[str] = set()
    for item in items:
        if item in seen:
            dupes.add(item)
        seen.add(item)
    return dupes


def analyze_module(module: Module) -> ModuleReport:
    """
    Perform analysis of a Module.

    Checks for:
    - Duplicate imports and dependency paths
    - Duplicate or malformed declarations
    - Operators outside the supported set
    - String literals with unescaped quotes
    - Nested blocks not indented deeper than their parent

    Returns a ModuleReport with metrics and warnings.
    """
    report = ModuleReport(module_name=module.name)

    # =========================================================================
    # 1. DEPENDENCIES
    # =========================================================================

    report.total_dependencies = len(module.dependencies)
    for dep in module.dependencies:
        report.imported_names.extend(dep.imports)
    report.total_imports = len(report.imported_names)

    report.duplicate_imports = _duplicates(report.imported_names)
    report.duplicate_paths = _duplicates([dep.path for dep in module.dependencies])
    for name in report.imported_names:
        if not is_valid_identifier(name):
            report.invalid_identifiers.add(name)

    # =========================================================================
    # 2. STATEMENTS
    # =========================================================================

    walker = _Walker(report)
    walker.walk_block(module.main_block, 0)
    report.statement_counts = dict(walker.counts)
    report.duplicate_declarations = _duplicates(report.declared_names)

    # =========================================================================
    # 3. WARNING FLAGS
    # =========================================================================

    if report.duplicate_imports:
        report.add_warning(f"Duplicate imports: {', '.join(sorted(report.duplicate_imports))}")

    if report.duplicate_paths:
        report.add_warning(f"Duplicate dependency paths: {', '.join(sorted(report.duplicate_paths))}")

    if report.duplicate_declarations:
        report.add_warning(
            f"Duplicate declarations: {', '.join(sorted(report.duplicate_declarations))}"
        )

    if report.invalid_identifiers:
        report.add_warning(
            f"Invalid identifiers: {', '.join(repr(n) for n in sorted(report.invalid_identifiers))}"
        )

    if report.unknown_operators:
        report.add_warning(f"Unknown operators: {', '.join(sorted(report.unknown_operators))}")

    if report.unescaped_literals:
        report.add_warning(
            f"String literals with unescaped quotes: {', '.join(report.unescaped_literals)}"
        )

    if report.misindented_blocks:
        report.add_warning(
            f"Nested blocks not indented deeper than their parent: {report.misindented_blocks}"
        )

    return report
