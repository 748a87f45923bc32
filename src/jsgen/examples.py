"""
Example module builder.

Builds a small module exercising every statement kind: imports,
declarations with literal and expression initializers, and one
nested block whose indent is set explicitly.
"""
from jsgen.backends.js_generator import generate_statement
from jsgen.builders import add, const, import_from, let, lt, mul
from jsgen.model import Module
from jsgen.statements import Raw, VarKind


def build_example_module(name: str = "example", limit: int = 10) -> Module:
    module = Module(name=name)

    module.deps([
        import_from("./math.js", "square", "cube"),
        import_from("./log.js", "info"),
    ])

    module.stmt(const("limit", limit))
    module.stmt(const("greeting", "hello"))
    module.stmt(let("total", add(mul(Raw("limit"), 2), 0.5)))
    module.var_decl(VarKind.VAR, "ready")

    module.raw(f"if {generate_statement(lt(Raw('total'), Raw('limit')))} {{")
    body = module.block(indent=1)
    body.raw("info(greeting);")
    body.stmt(let("sq", Raw("square(total)")))
    module.raw("}")

    return module
