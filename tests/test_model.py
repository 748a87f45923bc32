"""
Tests for jsgen Core Model Objects

These tests verify:
    - Block construction and append order
    - Dependency and Module construction
    - Module forwarding to its main block
    - Construction-time misuse errors
"""

import pytest
from jsgen.model import Block, Dependency, Module
from jsgen.statements import (
    Raw,
    Literal,
    VarDecl,
    VarKind,
    Binary,
    BinaryOperator,
    BlockStatement,
)


class TestBlock:
    """Test Block objects."""

    def test_default_block(self):
        block = Block()
        assert block.indent == 0
        assert block.statements == []

    def test_statements_keep_insertion_order(self):
        block = Block()
        block.raw("a").raw("b").raw("c")
        assert block.statements == [Raw("a"), Raw("b"), Raw("c")]

    def test_negative_indent_rejected(self):
        with pytest.raises(ValueError):
            Block(indent=-1)

    def test_var_decl_converts_initializer(self):
        block = Block()
        block.var_decl(VarKind.LET, "foo", 42)
        assert block.statements == [VarDecl(VarKind.LET, "foo", Literal("42"))]

    def test_var_decl_without_initializer(self):
        block = Block()
        block.var_decl(VarKind.VAR, "foo")
        assert block.statements == [VarDecl(VarKind.VAR, "foo", None)]

    def test_literal_from_value(self):
        block = Block()
        block.literal("foo").literal(1)
        assert block.statements == [Literal("'foo'"), Literal("1")]

    def test_literal_from_literal_statement(self):
        block = Block()
        block.literal(Literal("0x10"))
        assert block.statements == [Literal("0x10")]

    def test_literal_rejects_non_literal_statement(self):
        """Passing a non-literal statement to literal() is a programming error."""
        block = Block()
        with pytest.raises(TypeError):
            block.literal(Raw("foo"))
        assert block.statements == []

    def test_binary_converts_operands(self):
        block = Block()
        block.binary(1, "+", Raw("x"))
        assert block.statements == [Binary(Literal("1"), "+", Raw("x"))]

    def test_binary_accepts_enum_operator(self):
        block = Block()
        block.binary(1, BinaryOperator.MOD, 2)
        assert block.statements[0].operator == "%"

    def test_nested_block_default_indent(self):
        """block() nests one level deeper unless told otherwise."""
        outer = Block(indent=2)
        inner = outer.block()
        assert inner.indent == 3
        assert outer.statements == [BlockStatement(inner)]

    def test_nested_block_explicit_indent(self):
        outer = Block()
        inner = outer.block(indent=0)
        assert inner.indent == 0

    def test_nested_block_returned_is_owned(self):
        outer = Block()
        inner = outer.block()
        inner.raw("x")
        assert outer.statements[0].block.statements == [Raw("x")]


class TestDependency:
    """Test Dependency objects."""

    def test_create_dependency(self):
        dep = Dependency(imports=["foo", "bar"], path="baz")
        assert dep.imports == ["foo", "bar"]
        assert dep.path == "baz"

    def test_imports_copied_to_list(self):
        dep = Dependency(imports=("foo",), path="bar")
        assert dep.imports == ["foo"]

    def test_empty_imports_rejected(self):
        with pytest.raises(ValueError):
            Dependency(imports=[], path="bar")

    def test_duplicates_accepted(self):
        """Duplicate names are the caller's responsibility."""
        dep = Dependency(imports=["foo", "foo"], path="bar")
        assert dep.imports == ["foo", "foo"]


class TestModule:
    """Test Module objects."""

    def test_new_module_is_empty(self):
        module = Module(name="foo")
        assert module.name == "foo"
        assert module.dependencies == []
        assert module.main_block == Block(indent=0)

    def test_modules_do_not_share_state(self):
        a = Module(name="a")
        b = Module(name="b")
        a.raw("x")
        a.dep(Dependency(["x"], "y"))
        assert b.main_block.statements == []
        assert b.dependencies == []

    def test_dep_and_deps_keep_order(self):
        module = Module(name="foo")
        module.dep(Dependency(["a"], "1"))
        module.deps([Dependency(["b"], "2"), Dependency(["c"], "3")])
        assert [d.path for d in module.dependencies] == ["1", "2", "3"]

    def test_statements_forwarded_to_main_block(self):
        module = Module(name="foo")
        module.raw("a")
        module.stmt(Raw("b"))
        module.var_decl(VarKind.CONST, "c", 1)
        module.literal(2)
        module.binary(1, "<", 2)
        assert module.main_block.statements == [
            Raw("a"),
            Raw("b"),
            VarDecl(VarKind.CONST, "c", Literal("1")),
            Literal("2"),
            Binary(Literal("1"), "<", Literal("2")),
        ]

    def test_main_block_must_have_zero_indent(self):
        with pytest.raises(ValueError):
            Module(name="foo", main_block=Block(indent=3))

    def test_main_block_can_be_supplied(self):
        block = Block()
        block.raw("x")
        assert Module(name="foo", main_block=block).main_block is block

    def test_forwarded_block_returns_nested(self):
        module = Module(name="foo")
        inner = module.block()
        assert inner.indent == 1
        assert module.main_block.statements == [BlockStatement(inner)]
