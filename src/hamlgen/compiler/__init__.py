from hamlgen.compiler.compiler import Compiler
from hamlgen.compiler.exceptions import HamlgenError, TemplateSyntaxError, TreeFormatError
from hamlgen.compiler.options import CompilerOptions, Format

__all__ = [
    "Compiler",
    "CompilerOptions",
    "Format",
    "HamlgenError",
    "TemplateSyntaxError",
    "TreeFormatError",
]
