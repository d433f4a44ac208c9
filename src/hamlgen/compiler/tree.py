"""Build node trees from structured (JSON) descriptions.

A description is either a list of node objects or an object with a
``children`` list. Each node object looks like::

    {"type": "element", "expression": "div.box", "children": [...]}
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Type, Union

from hamlgen.compiler.exceptions import TemplateSyntaxError, TreeFormatError
from hamlgen.compiler.nodes import NODE_TYPES, Node
from hamlgen.compiler.options import CompilerOptions

logger = logging.getLogger(__name__)

_NODE_KEYS = {"type", "expression", "children"}


def load_tree_file(path: Path, options: Optional[CompilerOptions] = None) -> Node:
    """Read a JSON tree description and build its node tree."""
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise TreeFormatError(f"Invalid JSON: {e}", path=str(path)) from e
    logger.debug("Loaded tree description from %s", path)
    return build_tree(data, options)


def build_tree(
    data: Union[Dict[str, Any], list], options: Optional[CompilerOptions] = None
) -> Node:
    """Build a root node holding the described nodes."""
    if isinstance(data, list):
        data = {"children": data}
    if not isinstance(data, dict):
        raise TreeFormatError("Tree description must be a list or an object")
    unknown = set(data) - {"children"}
    if unknown:
        raise TreeFormatError(f"Unknown keys on root: {', '.join(sorted(unknown))}")

    root = Node("", None, options or CompilerOptions())
    _build_children(root, data.get("children", []), "$")
    return root


def _build_children(parent: Node, children: Any, path: str) -> None:
    if not isinstance(children, list):
        raise TreeFormatError("'children' must be a list", path=path)
    for index, item in enumerate(children):
        _build_node(parent, item, f"{path}[{index}]")


def _build_node(parent: Node, item: Any, path: str) -> None:
    if not isinstance(item, dict):
        raise TreeFormatError("Node must be an object", path=path)
    unknown = set(item) - _NODE_KEYS
    if unknown:
        raise TreeFormatError(f"Unknown keys: {', '.join(sorted(unknown))}", path=path)
    if "type" not in item:
        raise TreeFormatError("Node is missing 'type'", path=path)

    node_class: Optional[Type[Node]] = NODE_TYPES.get(item["type"])
    if node_class is None:
        raise TreeFormatError(f"Unknown node type: {item['type']!r}", path=path)
    expression = item.get("expression", "")
    if not isinstance(expression, str):
        raise TreeFormatError("'expression' must be a string", path=path)

    try:
        node = parent.add(node_class, expression)
    except TemplateSyntaxError as e:
        raise TemplateSyntaxError(e.message, path=path) from e
    _build_children(node, item.get("children", []), f"{path}.children")
