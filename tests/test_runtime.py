from hamlgen.runtime import (
    LEFT_TRIM,
    RIGHT_TRIM,
    escape_attribute,
    escape_html,
    resolve_whitespace,
)


def test_escape_html() -> None:
    assert escape_html("<a href=\"x\">'&'</a>") == (
        "&lt;a href=&quot;x&quot;&gt;&#39;&amp;&#39;&lt;/a&gt;"
    )
    assert escape_html(42) == "42"


def test_escape_attribute_keeps_entities() -> None:
    assert escape_attribute("&copy; & &#169; &#xA9; &nope") == (
        "&copy; &amp; &#169; &#xA9; &amp;nope"
    )
    assert escape_attribute('"quoted"') == "&quot;quoted&quot;"


def test_resolve_whitespace_left_trim() -> None:
    assert resolve_whitespace(f"a \n  {LEFT_TRIM}b") == "ab"


def test_resolve_whitespace_right_trim() -> None:
    assert resolve_whitespace(f"a{RIGHT_TRIM}\n   b") == "ab"


def test_resolve_whitespace_inside_pair() -> None:
    text = f"<li>{RIGHT_TRIM}\n    one\n  {LEFT_TRIM}</li>"
    assert resolve_whitespace(text) == "<li>one</li>"


def test_resolve_whitespace_without_sentinels() -> None:
    text = "  keep\n  this  "
    assert resolve_whitespace(text) is text
