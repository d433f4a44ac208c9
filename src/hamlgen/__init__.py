from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("hamlgen")
except PackageNotFoundError:
    __version__ = "unknown"

from hamlgen.compiler.compiler import Compiler
from hamlgen.compiler.exceptions import (
    HamlgenError,
    TemplateSyntaxError,
    TreeFormatError,
)
from hamlgen.compiler.nodes import Node, WhitespaceRemoval
from hamlgen.compiler.options import CompilerOptions, Format

__all__ = [
    "Compiler",
    "CompilerOptions",
    "Format",
    "Node",
    "WhitespaceRemoval",
    "HamlgenError",
    "TemplateSyntaxError",
    "TreeFormatError",
]
