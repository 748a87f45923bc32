"""
jsgen - JavaScript Module Generation Package

Build an in-memory model of a JavaScript file (imports, declarations,
binary expressions, nested blocks) and render it to source text.

ARCHITECTURAL GUARANTEE:
------------------------
This package never parses or validates JavaScript.
It only guarantees syntactically well-formed output for the
constructs it models.

Model objects live in jsgen.statements and jsgen.model.
All text output lives in jsgen.backends.
"""

__version__ = "0.1.0"
