# -*- coding: utf-8 -*-
"""
markdown.py — типограф как плагин markdown-it-py.

Поток токенов markdown-it превращается в дерево Node (через SyntaxTreeNode),
дерево проходит через Rewriter, изменённый текст записывается обратно
в token.content. Рендерер markdown-it дальше работает с теми же токенами.

Соответствие типов токенов:
- text                                   -> TEXT
- code_inline                            -> INLINE_CODE
- fence, code_block                      -> CODE_BLOCK
- math_inline, math_inline_double        -> INLINE_MATH   (mdit_py_plugins.dollarmath)
- math_block, math_block_label, amsmath  -> MATH_BLOCK
- всё остальное                          -> CONTAINER

Использование:
  md = MarkdownIt("commonmark").use(dollarmath_plugin).use(typography_plugin, corrector=fix, locale="de-de")
  html = md.render(text)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from markdown_it import MarkdownIt
from markdown_it.rules_core import StateCore
from markdown_it.token import Token
from markdown_it.tree import SyntaxTreeNode
from mdit_py_plugins.dollarmath import dollarmath_plugin

from mdtypo.config import TypoConfig, resolve_config
from mdtypo.rewriter import Corrector, Rewriter
from mdtypo.tree import Node, NodeKind

TOKEN_KINDS: Dict[str, NodeKind] = {
    "text": NodeKind.TEXT,
    "code_inline": NodeKind.INLINE_CODE,
    "fence": NodeKind.CODE_BLOCK,
    "code_block": NodeKind.CODE_BLOCK,
    "math_inline": NodeKind.INLINE_MATH,
    "math_inline_double": NodeKind.INLINE_MATH,
    "math_block": NodeKind.MATH_BLOCK,
    "math_block_label": NodeKind.MATH_BLOCK,
    "amsmath": NodeKind.MATH_BLOCK,
}


# -----------------------------
# Токены -> дерево
# -----------------------------

@dataclass
class TokenTree:
    root: Node
    bindings: List[Tuple[Node, Token]] = field(default_factory=list)

    def commit(self) -> int:
        """Записывает изменённый текст листьев обратно в токены. Возвращает число обновлённых токенов."""
        updated = 0
        for node, token in self.bindings:
            if node.text is not None and node.text != token.content:
                token.content = node.text
                updated += 1
        return updated


def build_tree(tokens: Sequence[Token]) -> TokenTree:
    out = TokenTree(root=Node.container(name="root"))
    syntax_root = SyntaxTreeNode(tokens)
    stack: List[Tuple[SyntaxTreeNode, Node]] = [(syntax_root, out.root)]
    while stack:
        src, dst = stack.pop()
        for child in src.children:
            kind = TOKEN_KINDS.get(child.type, NodeKind.CONTAINER)
            if kind.is_leaf and child.token is not None:
                node = Node.leaf(kind, child.token.content, name=child.type)
                out.bindings.append((node, child.token))
            else:
                node = Node.container(name=child.type)
                stack.append((child, node))
            dst.children.append(node)
    return out


# -----------------------------
# Плагин
# -----------------------------

def typography_plugin(
    md: MarkdownIt,
    corrector: Corrector,
    config: Union[TypoConfig, Mapping[str, Any], None] = None,
    logger: Optional[logging.Logger] = None,
    **options: Any,
) -> None:
    """Добавляет core-правило "typography" в конец цепочки (после text_join/smartquotes)."""
    log = logger or logging.getLogger("mdtypo.markdown")
    base = config.to_dict() if isinstance(config, TypoConfig) else config
    rewriter = Rewriter(resolve_config(base, logger=log, **options), corrector, log)

    def typography(state: StateCore) -> None:
        doc = build_tree(state.tokens)
        rewriter.run(doc.root)
        updated = doc.commit()
        log.debug("Typography: tokens updated=%d", updated)

    md.core.ruler.push("typography", typography)


def create_parser(
    corrector: Corrector,
    config: Union[TypoConfig, Mapping[str, Any], None] = None,
    math: bool = True,
    logger: Optional[logging.Logger] = None,
) -> MarkdownIt:
    md = MarkdownIt("commonmark")
    if math:
        md.use(dollarmath_plugin)
    md.use(typography_plugin, corrector=corrector, config=config, logger=logger)
    return md


def render_markdown(
    source: str,
    corrector: Corrector,
    config: Union[TypoConfig, Mapping[str, Any], None] = None,
) -> str:
    return create_parser(corrector, config).render(source)
