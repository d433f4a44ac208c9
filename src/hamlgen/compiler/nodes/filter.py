"""Filter blocks (``:plain``, ``:javascript``, ``:css``, ``:cdata``)."""

from hamlgen.compiler.exceptions import TemplateSyntaxError
from hamlgen.compiler.nodes.base import MarkupNode
from hamlgen.compiler.nodes.text import strip_sigil
from hamlgen.compiler.options import CompilerOptions, Format

FILTERS = ("plain", "javascript", "css", "cdata")


class FilterNode(MarkupNode):
    """Wraps its nested text in the markup a filter calls for."""

    type_name = "filter"

    def evaluate(self) -> None:
        self.filter_name = strip_sigil(self.expression, (":",)).lower()
        if self.filter_name not in FILTERS:
            raise TemplateSyntaxError(f"Unknown filter: {self.filter_name!r}")

        xhtml = self.format.is_xhtml
        if self.filter_name == "javascript":
            if self.format is Format.HTML5:
                self.opener, self.closer = "<script>", "</script>"
            else:
                self.opener = '<script type="text/javascript">'
                self.closer = "</script>"
            if xhtml:
                self.opener += "//<![CDATA["
                self.closer = "//]]>" + self.closer
        elif self.filter_name == "css":
            if self.format is Format.HTML5:
                self.opener, self.closer = "<style>", "</style>"
            else:
                self.opener = '<style type="text/css">'
                self.closer = "</style>"
            if xhtml:
                self.opener += "/*<![CDATA[*/"
                self.closer = "/*]]>*/" + self.closer
        elif self.filter_name == "cdata":
            self.opener, self.closer = "<![CDATA[", "]]>"

    def child_options(self) -> CompilerOptions:
        if self.filter_name == "plain":
            return self.options
        return self.options.nested(html=1)
