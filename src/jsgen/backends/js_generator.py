"""
JavaScript source generator for jsgen modules.

Converts Statement / Block / Module trees into JavaScript text.

Rendering rules:
    - Raw and Literal text is emitted unchanged
    - Declarations render as "<kind> <name>[ = <initializer>]"
    - Binary expressions are always fully parenthesized
    - Each block statement gets INDENT_UNIT * block.indent, then a newline
    - Modules emit one import line per dependency, then the main block

Generation is pure: rendering the same tree twice yields identical text.
"""

import logging
from pathlib import Path
from typing import BinaryIO, Union

from jsgen.model import Block, Dependency, Module
from jsgen.statements import (
    Binary,
    BlockStatement,
    Literal,
    Raw,
    Statement,
    VarDecl,
)

logger = logging.getLogger(__name__)

INDENT_UNIT = "    "
FILE_EXTENSION = ".js"


class ModuleWriteError(OSError):
    """Raised when a generated module cannot be written to disk."""
    pass


def _block_items(block: Block, indent_unit: str) -> list:
    prefix = indent_unit * block.indent
    items = []
    for statement in block.statements:
        items.extend(((prefix,), statement, ("\n",)))
    return items


def _render(items: list, indent_unit: str) -> str:
    """
    Render a sequence of statements and text pieces.

    Text pieces are 1-tuples. The tree is walked with an explicit stack,
    so deeply nested expressions do not hit the recursion limit.
    """
    parts = []
    stack = list(reversed(items))

    while stack:
        item = stack.pop()

        if isinstance(item, tuple):
            parts.append(item[0])

        elif isinstance(item, (Raw, Literal)):
            parts.append(item.text)

        elif isinstance(item, VarDecl):
            if item.initializer is not None:
                stack.append(item.initializer)
                stack.append((" = ",))
            stack.append((f"{item.kind.value} {item.name}",))

        elif isinstance(item, Binary):
            stack.extend((
                (")",),
                item.right,
                (f" {item.operator} ",),
                item.left,
                ("(",),
            ))

        elif isinstance(item, BlockStatement):
            stack.extend(reversed(_block_items(item.block, indent_unit)))

        else:
            raise TypeError(f"Unsupported Statement type: {type(item)}")

    return "".join(parts)


def generate_statement(statement: Statement, indent_unit: str = INDENT_UNIT) -> str:
    """
    Generate JavaScript code for a single statement.

    Args:
        statement: Statement to render
        indent_unit: Indentation string, used by nested blocks

    Returns:
        Rendered code, without a trailing newline (except for nested blocks)
    """
    return _render([statement], indent_unit)


def generate_block(block: Block, indent_unit: str = INDENT_UNIT) -> str:
    """
    Generate JavaScript code for a block.

    Every statement is prefixed with the block's indentation and
    terminated by a newline. Nested blocks are indented by their own
    indent value only.
    """
    return _render(_block_items(block, indent_unit), indent_unit)


def generate_import(dependency: Dependency) -> str:
    """Render the import line for a dependency, newline included."""
    return f"import {{ {', '.join(dependency.imports)} }} from '{dependency.path}';\n"


def generate_module(module: Module, indent_unit: str = INDENT_UNIT) -> str:
    """
    Generate the full JavaScript source of a module.

    Args:
        module: Module to render
        indent_unit: Indentation string

    Returns:
        Import lines followed by the main block
    """
    imports = "".join(generate_import(dependency) for dependency in module.dependencies)
    return imports + generate_block(module.main_block, indent_unit)


def generate(node: Union[Module, Block, Statement], indent_unit: str = INDENT_UNIT) -> str:
    """Generate JavaScript code for a module, block or statement."""
    if isinstance(node, Module):
        return generate_module(node, indent_unit)
    if isinstance(node, Block):
        return generate_block(node, indent_unit)
    return generate_statement(node, indent_unit)


def generate_module_to(
    module: Module,
    output: BinaryIO,
    encoding: str = "utf-8",
    indent_unit: str = INDENT_UNIT,
) -> None:
    """
    Generate a module and write it to a binary sink.

    Import lines are written one at a time, followed by the main block.

    Args:
        module: Module to render
        output: Any object with a write(bytes) method
        encoding: Text encoding of the output
        indent_unit: Indentation string
    """
    for dependency in module.dependencies:
        output.write(generate_import(dependency).encode(encoding))
    output.write(generate_block(module.main_block, indent_unit).encode(encoding))


def resolve_module_path(module: Module, path: Union[str, Path]) -> Path:
    """Return path itself, or path/<module name>.js when path is a directory."""
    path = Path(path)
    if path.is_dir():
        return path / f"{module.name}{FILE_EXTENSION}"
    return path


def save_module_file(
    module: Module,
    path: Union[str, Path],
    encoding: str = "utf-8",
    indent_unit: str = INDENT_UNIT,
) -> Path:
    """
    Generate a module and save it to a file.

    The code is fully rendered before the file is opened.

    Args:
        module: Module to render
        path: Output file, or a directory to place <module name>.js in
        encoding: Text encoding of the output
        indent_unit: Indentation string

    Returns:
        Path of the file that was written

    Raises:
        ModuleWriteError: If the file cannot be created or written
    """
    target = resolve_module_path(module, path)
    code = generate_module(module, indent_unit)

    try:
        with open(target, "w", encoding=encoding, newline="") as f:
            f.write(code)
    except OSError as e:
        logger.warning(f"Could not write module '{module.name}' to {target}: {e}")
        raise ModuleWriteError(f"Could not write module '{module.name}' to {target}: {e}") from e

    logger.debug(f"Wrote module '{module.name}' to {target}")
    return target


__all__ = [
    "INDENT_UNIT",
    "FILE_EXTENSION",
    "ModuleWriteError",
    "generate",
    "generate_statement",
    "generate_block",
    "generate_import",
    "generate_module",
    "generate_module_to",
    "resolve_module_path",
    "save_module_file",
]
