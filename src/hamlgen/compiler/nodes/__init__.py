"""Template tree nodes and the registry of node types."""

from typing import Dict, Type

from hamlgen.compiler.nodes.base import (
    BUFFER_NAME,
    ESCAPE_HELPER,
    MarkupNode,
    Node,
    WhitespaceRemoval,
    quote_literal,
)
from hamlgen.compiler.nodes.comment import CommentNode, SilentCommentNode
from hamlgen.compiler.nodes.doctype import DoctypeNode
from hamlgen.compiler.nodes.element import ElementNode
from hamlgen.compiler.nodes.filter import FilterNode
from hamlgen.compiler.nodes.text import (
    CodeNode,
    EscapedOutputNode,
    OutputNode,
    RawOutputNode,
    TextNode,
)

NODE_TYPES: Dict[str, Type[Node]] = {
    cls.type_name: cls
    for cls in (
        Node,
        ElementNode,
        TextNode,
        CodeNode,
        OutputNode,
        EscapedOutputNode,
        RawOutputNode,
        CommentNode,
        SilentCommentNode,
        DoctypeNode,
        FilterNode,
    )
}

__all__ = [
    "BUFFER_NAME",
    "ESCAPE_HELPER",
    "NODE_TYPES",
    "MarkupNode",
    "Node",
    "WhitespaceRemoval",
    "quote_literal",
    "ElementNode",
    "TextNode",
    "CodeNode",
    "OutputNode",
    "EscapedOutputNode",
    "RawOutputNode",
    "CommentNode",
    "SilentCommentNode",
    "DoctypeNode",
    "FilterNode",
]
