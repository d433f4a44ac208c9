"""HTML escaping helpers used by generated modules and by the compiler."""

from typing import Any


def escape_html(value: Any) -> str:
    """Escape HTML special characters in a computed value.

    Escapes: & < > " '

    Args:
        value: Any value to escape (will be converted to string first)

    Returns:
        HTML-escaped string safe for embedding in HTML content
    """
    s = str(value)
    return (
        s.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#39;")
    )


def escape_attribute(value: Any) -> str:
    """Escape a static attribute value at compile time.

    Unlike ``escape_html`` an existing entity reference is left alone, so
    ``title="&copy; 2024"`` is not turned into ``&amp;copy;``.
    """
    s = str(value)
    out = []
    for i, ch in enumerate(s):
        if ch == "&" and not _starts_entity(s, i):
            out.append("&amp;")
        elif ch == "<":
            out.append("&lt;")
        elif ch == ">":
            out.append("&gt;")
        elif ch == '"':
            out.append("&quot;")
        elif ch == "'":
            out.append("&#39;")
        else:
            out.append(ch)
    return "".join(out)


def _starts_entity(s: str, i: int) -> bool:
    end = s.find(";", i + 1)
    if end == -1:
        return False
    body = s[i + 1 : end]
    if body.startswith("#"):
        digits = body[1:]
        if digits[:1] in ("x", "X"):
            digits = digits[1:]
            return bool(digits) and all(c in "0123456789abcdefABCDEF" for c in digits)
        return digits.isdigit()
    return body.isalnum() and body.isascii()
