import json
from pathlib import Path

import pytest

from hamlgen.compiler.exceptions import TemplateSyntaxError, TreeFormatError
from hamlgen.compiler.nodes import CodeNode, ElementNode, Node, TextNode
from hamlgen.compiler.options import CompilerOptions, Format
from hamlgen.compiler.tree import build_tree, load_tree_file


def test_build_from_list() -> None:
    root = build_tree(
        [
            {
                "type": "element",
                "expression": "ul",
                "children": [
                    {
                        "type": "code",
                        "expression": "for x in xs:",
                        "children": [{"type": "element", "expression": "li"}],
                    }
                ],
            },
            {"type": "text", "expression": "done"},
        ]
    )
    assert type(root) is Node
    ul, done = root.children
    assert isinstance(ul, ElementNode)
    assert isinstance(done, TextNode)
    loop = ul.children[0]
    assert isinstance(loop, CodeNode)
    li = loop.children[0]
    assert li.options.code_block_level == 1
    assert li.options.block_level == 1


def test_build_from_object_with_options() -> None:
    root = build_tree(
        {"children": [{"type": "element", "expression": "br"}]},
        CompilerOptions(format=Format.XHTML),
    )
    assert root.render() == '_buf.append("<br />")\n'


def test_empty_description() -> None:
    assert build_tree([]).render() == ""


@pytest.mark.parametrize(
    "data,message",
    [
        ("nope", "must be a list or an object"),
        ({"kids": []}, "Unknown keys on root"),
        ([{"expression": "div"}], "missing 'type'"),
        ([{"type": "widget"}], "Unknown node type"),
        ([{"type": "text", "expression": 3}], "'expression' must be a string"),
        ([{"type": "element", "expression": "p", "children": {}}], "must be a list"),
        ([{"type": "text", "expression": "x", "colour": "red"}], "Unknown keys: colour"),
        (["div"], "Node must be an object"),
    ],
)
def test_invalid_descriptions(data: object, message: str) -> None:
    with pytest.raises(TreeFormatError, match=message):
        build_tree(data)  # type: ignore[arg-type]


def test_errors_carry_the_node_path() -> None:
    data = [
        {
            "type": "element",
            "expression": "div",
            "children": [
                {"type": "text", "expression": "ok"},
                {"type": "mystery"},
            ],
        }
    ]
    with pytest.raises(TreeFormatError) as excinfo:
        build_tree(data)
    assert excinfo.value.path == "$[0].children[1]"


def test_node_syntax_errors_carry_the_node_path() -> None:
    data = [{"type": "element", "expression": "br", "children": [{"type": "text"}]}]
    with pytest.raises(TemplateSyntaxError) as excinfo:
        build_tree(data)
    assert excinfo.value.path == "$[0].children[0]"
    assert "Self-closing" in str(excinfo.value)


def test_load_tree_file(tmp_path: Path) -> None:
    path = tmp_path / "page.json"
    path.write_text(json.dumps([{"type": "element", "expression": "p"}]), encoding="utf-8")
    root = load_tree_file(path)
    assert root.render() == '_buf.append("<p></p>")\n'


def test_load_tree_file_with_bad_json(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("[{", encoding="utf-8")
    with pytest.raises(TreeFormatError, match="Invalid JSON") as excinfo:
        load_tree_file(path)
    assert excinfo.value.path == str(path)
