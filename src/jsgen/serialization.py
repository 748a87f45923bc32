"""
Serialization helpers for jsgen objects (Module, Block, Statement, etc.).

Provides lossless JSON/YAML round-trip via intermediate dict representation.
This module intentionally keeps serialization structure stable and explicit.
"""
from __future__ import annotations

import json
from typing import Any, Dict

import yaml

from jsgen.model import Block, Dependency, Module
from jsgen.statements import (
    Binary,
    BlockStatement,
    Literal,
    Raw,
    Statement,
    VarDecl,
    VarKind,
)


def statement_to_dict(stmt: Statement | None) -> Any:
    if stmt is None:
        return None
    if isinstance(stmt, Raw):
        return {"type": "raw", "text": stmt.text}
    if isinstance(stmt, Literal):
        return {"type": "lit", "text": stmt.text}
    if isinstance(stmt, VarDecl):
        return {
            "type": "var_decl",
            "kind": stmt.kind.value,
            "name": stmt.name,
            "initializer": statement_to_dict(stmt.initializer),
        }
    if isinstance(stmt, Binary):
        return {
            "type": "binary",
            "operator": stmt.operator,
            "left": statement_to_dict(stmt.left),
            "right": statement_to_dict(stmt.right),
        }
    if isinstance(stmt, BlockStatement):
        return {"type": "block", "block": block_to_dict(stmt.block)}
    raise TypeError(f"Unsupported Statement type: {type(stmt)}")


def statement_from_dict(d: Any) -> Statement | None:
    if d is None:
        return None
    t = d.get("type")
    if t == "raw":
        return Raw(d["text"])
    if t == "lit":
        return Literal(d["text"])
    if t == "var_decl":
        return VarDecl(
            kind=VarKind(d["kind"]),
            name=d["name"],
            initializer=statement_from_dict(d.get("initializer")),
        )
    if t == "binary":
        return Binary(
            left=statement_from_dict(d["left"]),
            operator=d["operator"],
            right=statement_from_dict(d["right"]),
        )
    if t == "block":
        return BlockStatement(block_from_dict(d["block"]))
    raise TypeError(f"Unsupported statement dict type: {t}")


def block_to_dict(b: Block) -> Dict[str, Any]:
    return {"indent": b.indent, "statements": [statement_to_dict(s) for s in b.statements]}


def block_from_dict(d: Dict[str, Any]) -> Block:
    return Block(
        indent=d.get("indent", 0),
        statements=[statement_from_dict(s) for s in d.get("statements", [])],
    )


def dependency_to_dict(dep: Dependency) -> Dict[str, Any]:
    return {"imports": list(dep.imports), "path": dep.path}


def dependency_from_dict(d: Dict[str, Any]) -> Dependency:
    return Dependency(imports=d["imports"], path=d["path"])


def module_to_dict(m: Module) -> Dict[str, Any]:
    return {
        "name": m.name,
        "dependencies": [dependency_to_dict(dep) for dep in m.dependencies],
        "main_block": block_to_dict(m.main_block),
    }


def module_from_dict(d: Dict[str, Any]) -> Module:
    main_block = d.get("main_block")
    return Module(
        name=d.get("name", ""),
        dependencies=[dependency_from_dict(dep) for dep in d.get("dependencies", [])],
        main_block=block_from_dict(main_block) if main_block is not None else Block(),
    )


def module_to_json(m: Module) -> str:
    return json.dumps(module_to_dict(m), sort_keys=True)


def module_from_json(s: str) -> Module:
    d = json.loads(s)
    return module_from_dict(d)


def module_to_yaml(m: Module) -> str:
    return yaml.safe_dump(module_to_dict(m))


def module_from_yaml(s: str) -> Module:
    d = yaml.safe_load(s)
    return module_from_dict(d)
