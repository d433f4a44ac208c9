"""Plain text, Python code and output nodes."""

from typing import Optional, Tuple

from hamlgen.compiler.exceptions import TemplateSyntaxError
from hamlgen.compiler.nodes.base import Node
from hamlgen.compiler.options import CompilerOptions


def strip_sigil(expression: str, sigils: Tuple[str, ...]) -> str:
    """Remove a leading line sigil (``-``, ``=``, ...) left by the parser."""
    text = expression.strip()
    for sigil in sigils:
        if text.startswith(sigil):
            return text[len(sigil) :].strip()
    return text


def reject_preserved(node: Node) -> None:
    if node.is_preserved():
        raise TemplateSyntaxError(
            f"{node.type_name} node {node.expression!r} can't appear inside a preserved element"
        )


class TextNode(Node):
    """Literal markup or text, written to the output unchanged."""

    type_name = "text"
    accepts_children = False

    def evaluate(self) -> None:
        # A leading backslash escapes a character that would otherwise start
        # another kind of line, e.g. "\= not code".
        self.text = self.expression[1:] if self.expression.startswith("\\") else self.expression

    def render(self) -> str:
        if self.is_preserved():
            return self.text
        return self.emit_static_text(self.text)


class CodeNode(Node):
    """A Python statement; nested nodes become its block body."""

    type_name = "code"

    def evaluate(self) -> None:
        self.statement = strip_sigil(self.expression, ("-",))
        if not self.statement:
            raise TemplateSyntaxError("Empty code line")

    def child_options(self) -> CompilerOptions:
        return self.options.nested(code=1)

    def render(self) -> str:
        reject_preserved(self)
        body = super().render() if self.children else ""
        if not body and self.statement.endswith(":"):
            # Children that render nothing still leave the block needing a body
            body = f"{self.child_options().code_indent}pass\n"
        return self.emit_running_code(self.statement) + body


class OutputNode(Node):
    """A Python expression whose value is written to the output.

    Escaping follows the compiler's ``escape_html`` option unless the
    subclass forces it one way or the other.
    """

    type_name = "output"
    accepts_children = False
    sigils: Tuple[str, ...] = ("=",)
    force_escape: Optional[bool] = None

    def evaluate(self) -> None:
        self.code = strip_sigil(self.expression, self.sigils)
        if not self.code:
            raise TemplateSyntaxError("Empty output expression")

    @property
    def escapes(self) -> bool:
        return self.escape_html if self.force_escape is None else self.force_escape

    def render(self) -> str:
        reject_preserved(self)
        return self.emit_computed_value(self.code, self.escapes)


class EscapedOutputNode(OutputNode):
    type_name = "escaped_output"
    sigils = ("&=", "=")
    force_escape = True


class RawOutputNode(OutputNode):
    type_name = "raw_output"
    sigils = ("!=", "=")
    force_escape = False
