"""Helpers imported by generated template modules."""

from hamlgen.runtime.escape import escape_attribute, escape_html
from hamlgen.runtime.whitespace import LEFT_TRIM, RIGHT_TRIM, resolve_whitespace

__all__ = [
    "escape_html",
    "escape_attribute",
    "resolve_whitespace",
    "LEFT_TRIM",
    "RIGHT_TRIM",
]
