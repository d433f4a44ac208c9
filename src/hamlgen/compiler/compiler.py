"""Compiler facade: renders node trees and wraps them in Python modules."""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from jinja2 import Environment, PackageLoader, StrictUndefined

from hamlgen.compiler.nodes import BUFFER_NAME, ESCAPE_HELPER, Node
from hamlgen.compiler.options import CompilerOptions
from hamlgen.compiler.tree import build_tree, load_tree_file

logger = logging.getLogger(__name__)

# Templates for generated modules; they are Python source, never HTML
_env = Environment(
    loader=PackageLoader("hamlgen", "templates"),
    autoescape=False,
    keep_trailing_newline=True,
    undefined=StrictUndefined,
)


class Compiler:
    """Turns a node tree into Python source.

    ``render`` returns the bare statements; ``compile_module`` places them
    in a function that fills ``_buf`` and returns the finished document.
    """

    def __init__(self, options: Optional[CompilerOptions] = None) -> None:
        self.options = options or CompilerOptions()

    def _root_options(self, module: bool) -> CompilerOptions:
        return self.options.nested(code=1) if module else self.options

    def new_root(self, module: bool = True) -> Node:
        """Create an empty root node.

        Roots meant for ``compile_module`` start one code level deep so
        their statements land inside the generated function body.
        """
        return Node("", None, self._root_options(module))

    def build(self, data: Union[Dict[str, Any], list], module: bool = True) -> Node:
        """Build a tree from a description (see ``hamlgen.compiler.tree``)."""
        return build_tree(data, self._root_options(module))

    def load(self, path: Path, module: bool = True) -> Node:
        return load_tree_file(path, self._root_options(module))

    def render(self, root: Node) -> str:
        logger.debug("Rendering tree with %d top-level nodes", len(root.children))
        return root.render()

    def compile_module(self, root: Node, function_name: str = "render") -> str:
        if not function_name.isidentifier():
            raise ValueError(f"Invalid function name: {function_name!r}")
        if root.options.code_block_level < 1:
            raise ValueError(
                "Module roots must start one code level deep; use Compiler.new_root()"
            )
        body = self.render(root)
        template = _env.get_template("module.py.jinja")
        source = template.render(
            function_name=function_name,
            buffer_name=BUFFER_NAME,
            escape_helper=ESCAPE_HELPER,
            indent=root.code_indent,
            body=body,
            format=self.options.format.value,
        )
        logger.info("Compiled module with function %s()", function_name)
        return source
