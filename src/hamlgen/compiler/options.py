"""Compiler configuration shared by every node in a tree."""

import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Format(str, Enum):
    """Output document flavour."""

    XHTML = "xhtml"
    HTML4 = "html4"
    HTML5 = "html5"

    @property
    def is_xhtml(self) -> bool:
        return self is Format.XHTML


def indentation(level: int, width: int) -> str:
    """Return the indentation string for a nesting depth."""
    return " " * (level * width)


@dataclass(frozen=True)
class CompilerOptions:
    """Immutable configuration handed to each node at construction time.

    ``code_block_level`` and ``block_level`` are the nesting depths of the
    generated Python code and of the rendered HTML respectively. Nodes turn
    them into fixed indentation strings once, in their constructor.
    """

    escape_html: bool = True
    escape_attributes: bool = True
    format: Format = Format.HTML5
    code_block_level: int = 0
    block_level: int = 0
    code_indent_width: int = 4
    html_indent_width: int = 2
    preserve_tags: Tuple[str, ...] = ("pre", "textarea")

    def __post_init__(self) -> None:
        # Accept plain strings ("html5") from configuration files and the CLI
        if not isinstance(self.format, Format):
            object.__setattr__(self, "format", Format(self.format))
        for name in ("code_block_level", "block_level", "html_indent_width"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative, got {getattr(self, name)}")
        if self.code_indent_width < 1:
            raise ValueError(
                f"code_indent_width must be at least 1, got {self.code_indent_width}"
            )
        object.__setattr__(self, "preserve_tags", tuple(self.preserve_tags))

    @property
    def code_indent(self) -> str:
        return indentation(self.code_block_level, self.code_indent_width)

    @property
    def html_indent(self) -> str:
        return indentation(self.block_level, self.html_indent_width)

    def nested(self, code: int = 0, html: int = 0) -> "CompilerOptions":
        """Return a copy one or more levels deeper."""
        if not code and not html:
            return self
        return dataclasses.replace(
            self,
            code_block_level=self.code_block_level + code,
            block_level=self.block_level + html,
        )
