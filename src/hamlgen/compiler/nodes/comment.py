"""HTML comments and silent comments."""

import re

from hamlgen.compiler.nodes.base import MarkupNode, Node
from hamlgen.compiler.nodes.text import strip_sigil
from hamlgen.compiler.options import CompilerOptions

_CONDITIONAL_RE = re.compile(r"^\[(?P<condition>[^\]]+)\]$")


class CommentNode(MarkupNode):
    """An HTML comment.

    A comment with inline text renders on one line and takes no nested
    content. A bare comment wraps its children, and ``[if IE]`` style text
    produces a conditional comment around them.
    """

    type_name = "comment"

    def evaluate(self) -> None:
        text = strip_sigil(self.expression, ("/",))
        conditional = _CONDITIONAL_RE.match(text)
        if conditional:
            self.opener = f"<!--[{conditional.group('condition')}]>"
            self.closer = "<![endif]-->"
        elif text:
            self.opener = f"<!-- {text} -->"
            self.accepts_children = False
        else:
            self.opener = "<!--"
            self.closer = "-->"

    def child_options(self) -> CompilerOptions:
        return self.options.nested(html=1)


class SilentCommentNode(Node):
    """A comment that never reaches the output, nested lines included."""

    type_name = "silent_comment"

    def evaluate(self) -> None:
        self.silent = True
