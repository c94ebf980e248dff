# -*- coding: utf-8 -*-
"""
Дерево документа: виды узлов, обход, mdast-словарь.
Запуск:
  pytest -q
"""

import pytest

from mdtypo.tree import Node, NodeKind, kind_from_mdast, walk


def sample() -> dict:
    return {
        "type": "root",
        "children": [
            {"type": "heading", "depth": 1, "children": [{"type": "text", "value": "Title"}]},
            {"type": "paragraph", "children": [
                {"type": "text", "value": "Use "},
                {"type": "inlineCode", "value": "x"},
                {"type": "inlineMath", "value": "a^2"},
            ]},
            {"type": "code", "lang": "py", "value": "print(1)"},
            {"type": "math", "value": "E = mc^2"},
            {"type": "thematicBreak"},
        ],
    }


def test_kind_mapping():
    assert kind_from_mdast("text") is NodeKind.TEXT
    assert kind_from_mdast("inlineCode") is NodeKind.INLINE_CODE
    assert kind_from_mdast("code") is NodeKind.CODE_BLOCK
    assert kind_from_mdast("inlineMath") is NodeKind.INLINE_MATH
    assert kind_from_mdast("math") is NodeKind.MATH_BLOCK
    assert kind_from_mdast("tableCell") is NodeKind.CONTAINER


def test_walk_is_document_order():
    tree = Node.from_dict(sample())
    names = [n.name for n, _ in walk(tree)]
    assert names == [
        "root", "heading", "text", "paragraph", "text", "inlineCode", "inlineMath",
        "code", "math", "thematicBreak",
    ]


def test_walk_yields_parent():
    tree = Node.from_dict(sample())
    parents = {n.name: (p.name if p else None) for n, p in walk(tree)}
    assert parents["root"] is None
    assert parents["inlineCode"] == "paragraph"
    assert parents["heading"] == "root"


def test_roundtrip_keeps_extra_fields():
    raw = sample()
    tree = Node.from_dict(raw)
    assert tree.to_dict()["children"][0]["depth"] == 1
    assert tree.to_dict()["children"][2]["lang"] == "py"
    assert tree.to_dict()["children"][4] == {"type": "thematicBreak"}


def test_leaf_defaults():
    node = Node(kind=NodeKind.TEXT)
    assert node.text == ""
    assert node.name == "text"
    assert Node.container().text is None
    assert Node.container().name == "container"


def test_count():
    assert Node.from_dict(sample()).count() == 10


def test_deep_tree_does_not_recurse():
    root = Node.container()
    cur = root
    for _ in range(5000):
        nxt = Node.container()
        cur.children.append(nxt)
        cur = nxt
    cur.children.append(Node.leaf(NodeKind.TEXT, "deep"))
    assert root.count() == 5002


@pytest.mark.parametrize("bad", [[], "text", {"value": "no type"}])
def test_from_dict_rejects_garbage(bad):
    with pytest.raises(ValueError):
        Node.from_dict(bad)


def test_leaf_children_survive_roundtrip():
    raw = {"type": "inlineCode", "value": "c", "children": [{"type": "text", "value": "t"}]}
    node = Node.from_dict(raw)
    assert node.count() == 2
    assert node.to_dict() == raw


def test_children_key_kept_only_when_present():
    assert Node.from_dict({"type": "thematicBreak"}).to_dict() == {"type": "thematicBreak"}
    assert Node.from_dict({"type": "list", "children": []}).to_dict() == {"type": "list", "children": []}


@pytest.mark.parametrize("value", [None, 42, ["a"]])
def test_leaf_value_must_be_string(value):
    with pytest.raises(ValueError, match="string 'value'"):
        Node.from_dict({"type": "text", "value": value})


def test_leaf_without_value_rejected():
    with pytest.raises(ValueError):
        Node.from_dict({"type": "code"})
