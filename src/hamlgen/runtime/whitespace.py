"""Whitespace-control sentinels and the pass that resolves them.

Nodes that request whitespace removal embed two private-use code points in
their markup. ``LEFT_TRIM`` swallows the whitespace before it and
``RIGHT_TRIM`` swallows the whitespace after it. The sentinels travel
through the generated code inside ordinary string literals and are removed
from the rendered document by ``resolve_whitespace``.
"""

import re

LEFT_TRIM = "\ue000"
RIGHT_TRIM = "\ue001"

_LEFT_TRIM_RE = re.compile(r"\s*" + LEFT_TRIM)
_RIGHT_TRIM_RE = re.compile(RIGHT_TRIM + r"\s*")


def resolve_whitespace(text: str) -> str:
    """Strip whitespace adjacent to trim sentinels and drop the sentinels."""
    if LEFT_TRIM not in text and RIGHT_TRIM not in text:
        return text
    text = _LEFT_TRIM_RE.sub("", text)
    return _RIGHT_TRIM_RE.sub("", text)
