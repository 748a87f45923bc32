"""Backends for jsgen output generation."""

from .js_generator import (
    ModuleWriteError,
    generate,
    generate_block,
    generate_module,
    generate_module_to,
    generate_statement,
    save_module_file,
)

__all__ = [
    "ModuleWriteError",
    "generate",
    "generate_block",
    "generate_module",
    "generate_module_to",
    "generate_statement",
    "save_module_file",
]
