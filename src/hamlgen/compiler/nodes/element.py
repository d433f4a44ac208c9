"""HTML element nodes (``%tag.class#id(attr="value")<>/``)."""

import re
from typing import Dict, List, Optional

from hamlgen.compiler.exceptions import TemplateSyntaxError
from hamlgen.compiler.nodes.base import MarkupNode, Node, WhitespaceRemoval
from hamlgen.compiler.options import CompilerOptions
from hamlgen.runtime.escape import escape_attribute

# HTML void elements that don't have closing tags
VOID_ELEMENTS = {
    "area",
    "base",
    "br",
    "col",
    "embed",
    "hr",
    "img",
    "input",
    "link",
    "meta",
    "param",
    "source",
    "track",
    "wbr",
}

_ELEMENT_RE = re.compile(
    r"""
    ^%?
    (?P<tag>[\w:-]+)?
    (?P<shortcuts>(?:[.\#][\w-]+)*)
    (?:\((?P<attributes>[^)]*)\))?
    (?P<modifiers>[<>/]*)
    $
    """,
    re.VERBOSE,
)
_SHORTCUT_RE = re.compile(r"([.#])([\w-]+)")
_ATTRIBUTE_RE = re.compile(
    r"""
    \s*
    (?P<name>[\w:.@-]+)
    (?:\s*=\s*(?:"(?P<double>[^"]*)"|'(?P<single>[^']*)'))?
    \s*
    """,
    re.VERBOSE,
)


def parse_attributes(source: str) -> Dict[str, Optional[str]]:
    """Parse ``name="value" flag`` pairs. Valueless names map to ``None``."""
    source = source.strip()
    attributes: Dict[str, Optional[str]] = {}
    pos = 0
    while pos < len(source):
        match = _ATTRIBUTE_RE.match(source, pos)
        if not match or match.end() == pos:
            raise TemplateSyntaxError(f"Invalid attribute list: ({source})")
        value = match.group("double")
        if value is None:
            value = match.group("single")
        attributes[match.group("name")] = value
        pos = match.end()
    return attributes


class ElementNode(MarkupNode):
    """An HTML tag with optional class/id shortcuts and static attributes.

    ``>`` removes whitespace around the tag, ``<`` removes whitespace inside
    it and ``/`` makes it self-closing.
    """

    type_name = "element"

    def evaluate(self) -> None:
        match = _ELEMENT_RE.match(self.expression.strip())
        if not match or not (match.group("tag") or match.group("shortcuts")):
            raise TemplateSyntaxError(f"Invalid element: {self.expression!r}")

        self.tag = match.group("tag") or "div"
        modifiers = match.group("modifiers")
        if len(set(modifiers)) != len(modifiers):
            raise TemplateSyntaxError(f"Repeated modifier in element: {self.expression!r}")

        self.self_closing = "/" in modifiers or self.tag.lower() in VOID_ELEMENTS
        self.whitespace_removal = WhitespaceRemoval(
            around=">" in modifiers, inside="<" in modifiers
        )
        self.preserve = self.tag in self.options.preserve_tags

        attributes = self._collect_attributes(
            match.group("shortcuts"), match.group("attributes") or ""
        )
        rendered = "".join(self._format_attribute(k, v) for k, v in attributes.items())
        if self.self_closing:
            self.opener = f"<{self.tag}{rendered}{' /' if self.format.is_xhtml else ''}>"
        else:
            self.opener = f"<{self.tag}{rendered}>"
            self.closer = f"</{self.tag}>"

    def _collect_attributes(
        self, shortcuts: str, attribute_source: str
    ) -> Dict[str, Optional[str]]:
        classes: List[str] = []
        ids: List[str] = []
        for kind, name in _SHORTCUT_RE.findall(shortcuts):
            if kind == ".":
                classes.append(name)
            else:
                ids = [name]

        explicit = parse_attributes(attribute_source)
        if explicit.get("class"):
            classes.append(explicit["class"])  # type: ignore[arg-type]
        if explicit.get("id"):
            ids.append(explicit["id"])  # type: ignore[arg-type]

        attributes: Dict[str, Optional[str]] = {}
        if classes:
            attributes["class"] = " ".join(classes)
        if ids:
            attributes["id"] = "_".join(ids)
        for name, value in explicit.items():
            if name not in ("class", "id"):
                attributes[name] = value
        return attributes

    def _format_attribute(self, name: str, value: Optional[str]) -> str:
        if value is None:
            if not self.format.is_xhtml:
                return f" {name}"
            value = name
        if self.escape_attributes:
            return f' {name}="{escape_attribute(value)}"'
        quote = "'" if '"' in value else '"'
        return f" {name}={quote}{value}{quote}"

    def child_options(self) -> CompilerOptions:
        return self.options.nested(html=1)

    def append(self, child: Node) -> Node:
        if self.self_closing:
            raise TemplateSyntaxError(
                f"Self-closing tag <{self.tag}> can't have nested content"
            )
        return super().append(child)
