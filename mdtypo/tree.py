# -*- coding: utf-8 -*-
"""
tree.py — дерево документа, над которым работает типограф.

Узел имеет вид (kind) из закрытого набора NodeKind:
- TEXT         — обычный текст (лист, text: str)
- INLINE_CODE  — `код` в строке (лист)
- CODE_BLOCK   — блок кода ``` (лист)
- INLINE_MATH  — $формула$ (лист)
- MATH_BLOCK   — $$формула$$ (лист)
- CONTAINER    — всё остальное: абзацы, заголовки, ссылки, неизвестные типы

Формат обмена (mdast-подобный dict):
{
  "type": "paragraph",
  "children": [
    {"type": "text", "value": "Hello"},
    {"type": "inlineCode", "value": "x = 1"}
  ]
}
Неизвестные типы становятся CONTAINER и проходят без изменений.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple


# -----------------------------
# Виды узлов
# -----------------------------

class NodeKind(Enum):
    TEXT = "text"
    INLINE_CODE = "inline_code"
    CODE_BLOCK = "code_block"
    INLINE_MATH = "inline_math"
    MATH_BLOCK = "math_block"
    CONTAINER = "container"

    @property
    def is_leaf(self) -> bool:
        return self is not NodeKind.CONTAINER


# mdast type -> NodeKind
MDAST_KINDS: Dict[str, NodeKind] = {
    "text": NodeKind.TEXT,
    "inlineCode": NodeKind.INLINE_CODE,
    "code": NodeKind.CODE_BLOCK,
    "inlineMath": NodeKind.INLINE_MATH,
    "math": NodeKind.MATH_BLOCK,
}

_MDAST_NAMES: Dict[NodeKind, str] = {v: k for k, v in MDAST_KINDS.items()}


def kind_from_mdast(type_name: str) -> NodeKind:
    return MDAST_KINDS.get(type_name, NodeKind.CONTAINER)


# -----------------------------
# Узел
# -----------------------------

@dataclass
class Node:
    kind: NodeKind
    text: Optional[str] = None
    children: List["Node"] = field(default_factory=list)
    name: str = ""                # исходный тип хоста: "paragraph", "code_inline", ...
    extra: Dict[str, Any] = field(default_factory=dict)
    children_key: bool = field(default=False, repr=False)   # был ли ключ "children" во входном dict

    def __post_init__(self) -> None:
        if not self.name:
            self.name = _MDAST_NAMES.get(self.kind, self.kind.value)
        if self.kind.is_leaf and self.text is None:
            self.text = ""

    # --- конструкторы для удобства ---

    @staticmethod
    def leaf(kind: NodeKind, text: str, name: str = "") -> "Node":
        return Node(kind=kind, text=text, name=name)

    @staticmethod
    def container(*children: "Node", name: str = "") -> "Node":
        return Node(kind=NodeKind.CONTAINER, children=list(children), name=name)

    # --- mdast ---

    @staticmethod
    def from_dict(raw: Mapping[str, Any]) -> "Node":
        if not isinstance(raw, Mapping):
            raise ValueError(f"Node must be a mapping, got {type(raw).__name__}")
        type_name = raw.get("type")
        if not type_name:
            raise ValueError("Node mapping has no 'type'")
        kind = kind_from_mdast(str(type_name))
        extra = {k: v for k, v in raw.items() if k not in ("type", "value", "children")}
        node = Node(kind=kind, name=str(type_name), extra=extra)
        if kind.is_leaf:
            value = raw.get("value")
            if not isinstance(value, str):
                raise ValueError(f"'{type_name}' node must have a string 'value', got {type(value).__name__}")
            node.text = value
        elif "value" in raw:
            # value у неизвестных типов (html, yaml, ...) сохраняем как есть
            node.extra["value"] = raw["value"]
        # дети бывают и у листьев (текст внутри code) — форму дерева не трогаем
        node.children_key = "children" in raw
        node.children = [Node.from_dict(c) for c in raw.get("children") or []]
        return node

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"type": self.name}
        out.update(self.extra)
        if self.kind.is_leaf:
            out["value"] = self.text
        if self.children or self.children_key:
            out["children"] = [c.to_dict() for c in self.children]
        return out

    def count(self) -> int:
        return sum(1 for _ in walk(self))


# -----------------------------
# Обход
# -----------------------------

def walk(root: Node) -> Iterator[Tuple[Node, Optional[Node]]]:
    """Обход в порядке документа (родитель раньше детей). Выдаёт (node, parent)."""
    stack: List[Tuple[Node, Optional[Node]]] = [(root, None)]
    while stack:
        node, parent = stack.pop()
        yield node, parent
        # дети в обратном порядке, чтобы первый ребёнок был снят со стека первым
        for child in reversed(node.children):
            stack.append((child, node))
