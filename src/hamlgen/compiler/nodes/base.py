"""Generic template tree node and its code-generation algorithm."""

import logging
import weakref
from dataclasses import dataclass
from typing import List, Optional, Type, TypeVar

from hamlgen.compiler.exceptions import TemplateSyntaxError
from hamlgen.compiler.options import CompilerOptions, Format
from hamlgen.runtime.whitespace import LEFT_TRIM, RIGHT_TRIM

logger = logging.getLogger(__name__)

# Name of the output list in generated code and of the escaping helper
# imported by the generated module.
BUFFER_NAME = "_buf"
ESCAPE_HELPER = "escape_html"

_LITERAL_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}
_LITERAL_ESCAPES.update(
    {chr(i): f"\\x{i:02x}" for i in range(0x20) if chr(i) not in _LITERAL_ESCAPES}
)

N = TypeVar("N", bound="Node")


def quote_literal(text: str) -> str:
    """Return ``text`` as a double-quoted Python string literal.

    Only characters that would break the literal are escaped; trim
    sentinels and other non-ASCII text pass through verbatim.
    """
    return '"' + "".join(_LITERAL_ESCAPES.get(ch, ch) for ch in text) + '"'


@dataclass(frozen=True)
class WhitespaceRemoval:
    """Whitespace trimming requested by a node.

    ``around`` trims outside the tag pair, ``inside`` trims between the tags
    and the node's content.
    """

    around: bool = False
    inside: bool = False


class Node:
    """A template directive in the tree.

    The constructor runs ``evaluate()`` exactly once; variants override it to
    derive ``opener``, ``closer``, ``silent``, ``preserve`` and
    ``whitespace_removal`` from the expression. ``render()`` only looks at
    those derived fields and the shape of the tree.
    """

    #: Type name used by tree descriptions and the CLI.
    type_name = "node"
    accepts_children = True

    def __init__(
        self,
        expression: str = "",
        parent: Optional["Node"] = None,
        options: Optional[CompilerOptions] = None,
    ) -> None:
        if options is None:
            options = parent.child_options() if parent is not None else CompilerOptions()
        self.expression = expression
        self._parent = weakref.ref(parent) if parent is not None else None
        self.children: List[Node] = []
        self.options = options
        self.code_indent = options.code_indent
        self.html_indent = options.html_indent

        self.opener = ""
        self.closer = ""
        self.silent = False
        self.preserve = False
        self.whitespace_removal = WhitespaceRemoval()

        self._evaluated = False
        self.evaluate()
        self._evaluated = True

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.expression!r})"

    @property
    def parent(self) -> Optional["Node"]:
        return self._parent() if self._parent is not None else None

    @property
    def escape_html(self) -> bool:
        return self.options.escape_html

    @property
    def escape_attributes(self) -> bool:
        return self.options.escape_attributes

    @property
    def format(self) -> Format:
        return self.options.format

    # Construction

    def evaluate(self) -> None:
        """Derive markup and flags from the expression. Plain nodes set nothing."""

    def child_options(self) -> CompilerOptions:
        """Options for nodes nested directly under this one."""
        return self.options

    def append(self, child: "Node") -> "Node":
        """Attach ``child`` and return ``self`` so builds can be chained."""
        if not self.accepts_children:
            raise TemplateSyntaxError(f"{self.type_name} nodes can't have nested content")
        if child.parent is not self:
            raise ValueError(f"{child!r} was not constructed as a child of {self!r}")
        if any(existing is child for existing in self.children):
            raise ValueError(f"{child!r} is already attached to {self!r}")
        self.children.append(child)
        return self

    def add(self, node_class: Type[N], expression: str = "") -> N:
        """Construct a child of ``node_class``, attach it and return it."""
        child = node_class(expression, self, self.child_options())
        self.append(child)
        return child

    # Markup

    @property
    def opener_markup(self) -> str:
        ws = self.whitespace_removal
        return (
            (LEFT_TRIM if ws.around else "")
            + self.opener
            + (RIGHT_TRIM if ws.inside else "")
        )

    @property
    def closer_markup(self) -> str:
        ws = self.whitespace_removal
        return (
            (LEFT_TRIM if ws.inside else "")
            + self.closer
            + (RIGHT_TRIM if ws.around else "")
        )

    def is_preserved(self) -> bool:
        if self.preserve:
            return True
        parent = self.parent
        return parent.is_preserved() if parent is not None else False

    def output_indent(self) -> str:
        """HTML indentation for emitted lines; none inside preserved regions."""
        return "" if self.is_preserved() else self.html_indent

    # Code emission

    def emit_static_text(self, text: str) -> str:
        literal = quote_literal(self.output_indent() + text)
        return f"{self.code_indent}{BUFFER_NAME}.append({literal})\n"

    def emit_running_code(self, code: str) -> str:
        return f"{self.code_indent}{code}\n"

    def emit_computed_value(self, code: str, escape: bool) -> str:
        value = f"{ESCAPE_HELPER}({code})" if escape else f"str({code})"
        indent = self.output_indent()
        if indent:
            value = f"{quote_literal(indent)} + {value}"
        return f"{self.code_indent}{BUFFER_NAME}.append({value})\n"

    # Rendering

    def render(self) -> str:
        """Return the generated code for this node and its subtree."""
        assert self._evaluated, f"{self!r} rendered before evaluation"

        has_tag_pair = bool(self.opener) and bool(self.closer)

        if not self.children:
            if has_tag_pair:
                return self.emit_static_text(self.opener_markup + self.closer_markup)
            if self.opener:
                if not self.preserve and self.is_preserved():
                    # Folded into the preserving ancestor's literal
                    return self.opener_markup
                return self.emit_static_text(self.opener_markup)
            return ""

        if has_tag_pair:
            if self.preserve:
                content = "\n".join(child.render() for child in self.children)
                return self.emit_static_text(
                    self.opener_markup + content + self.closer_markup
                )
            return (
                self.emit_static_text(self.opener_markup)
                + "".join(child.render() for child in self.children)
                + self.emit_static_text(self.closer_markup)
            )

        if self.silent:
            logger.debug("Skipping silent subtree %r", self)
            return ""
        return "".join(child.render() for child in self.children)


class MarkupNode(Node):
    """Base for variants that produce HTML markup (elements, comments, filters).

    Below a preserving ancestor the node and its subtree become raw text
    that the ancestor folds into its own literal.
    """

    def render(self) -> str:
        parent = self.parent
        if parent is not None and parent.is_preserved():
            content = "\n".join(child.render() for child in self.children)
            return self.opener_markup + content + self.closer_markup
        return super().render()
