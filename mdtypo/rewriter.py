# -*- coding: utf-8 -*-
"""
rewriter.py — обход дерева и замена текста в подходящих листьях.

Корректор (внешняя функция типографа) вызывается только на содержимом
без ведущих/хвостовых пробелов: пробелы вокруг текста структурно значимы
(например, пробел перед *выделением*) и должны остаться байт-в-байт.

Набор пробельных символов зафиксирован явно и совпадает с `\\s` из
ECMAScript, а не с `\\s` из Python (там есть U+001C..U+001F и U+0085,
но нет U+FEFF).
"""

from __future__ import annotations

import logging
import re
from typing import Any, Callable, Dict, Mapping, Optional, Union

from mdtypo.config import TypoConfig, resolve_config
from mdtypo.policy import is_verbatim, should_skip
from mdtypo.tree import Node, NodeKind, walk

# corrector(content, locale, options) -> corrected content
Corrector = Callable[[str, str, Mapping[str, Any]], str]

WHITESPACE = (
    "\t\n\x0b\x0c\r \u00a0\u1680"
    + "".join(chr(c) for c in range(0x2000, 0x200B))
    + "\u2028\u2029\u202f\u205f\u3000\ufeff"
)

_WS = "[" + re.escape(WHITESPACE) + "]"
_SPLIT_RE = re.compile(f"({_WS}*)(.*?)({_WS}*)", re.S)


# -----------------------------
# Обёртка над корректором
# -----------------------------

def split_whitespace(text: str) -> tuple[str, str, str]:
    """(leading, content, trailing); leading и trailing — максимальные пробельные серии."""
    m = _SPLIT_RE.fullmatch(text)
    if not m:
        return "", text, ""
    return m.group(1), m.group(2), m.group(3)


def is_blank(text: Optional[str]) -> bool:
    return not (text or "").strip(WHITESPACE)


def apply_correction(text: str, locale: str, corrector: Corrector) -> str:
    leading, content, trailing = split_whitespace(text)
    return leading + corrector(content, locale, {}) + trailing


# -----------------------------
# Обход дерева
# -----------------------------

class Rewriter:
    def __init__(
        self,
        config: Union[TypoConfig, Mapping[str, Any], None],
        corrector: Corrector,
        logger: Optional[logging.Logger] = None,
    ):
        self.log = logger or logging.getLogger("mdtypo.rewriter")
        if isinstance(config, TypoConfig):
            self.config = config
        else:
            self.config = resolve_config(config)
        self.corrector = corrector
        self.stats: Dict[str, int] = {}

    def _rewrite(self, node: Node) -> None:
        node.text = apply_correction(node.text or "", self.config.locale, self.corrector)

    def run(self, tree: Node) -> None:
        stats = {"visited": 0, "corrected": 0, "skipped": 0, "blank": 0}

        for node, parent in walk(tree):
            stats["visited"] += 1

            if node.kind is NodeKind.TEXT:
                if is_blank(node.text):
                    stats["blank"] += 1
                    continue
                # текст внутри кода/формулы наследует решение родителя
                if parent is not None and should_skip(parent.kind, self.config):
                    stats["skipped"] += 1
                    continue
                self._rewrite(node)
                stats["corrected"] += 1

            elif is_verbatim(node.kind):
                if should_skip(node.kind, self.config):
                    stats["skipped"] += 1
                    continue
                self._rewrite(node)
                stats["corrected"] += 1

        self.stats = stats
        self.log.debug(
            "Typography done: locale=%s visited=%d corrected=%d skipped=%d blank=%d",
            self.config.locale, stats["visited"], stats["corrected"], stats["skipped"], stats["blank"],
        )


def process(
    tree: Node,
    config: Union[TypoConfig, Mapping[str, Any], None],
    corrector: Corrector,
    logger: Optional[logging.Logger] = None,
) -> None:
    """Меняет text у подходящих листьев дерева на месте. Форма дерева не меняется."""
    Rewriter(config, corrector, logger).run(tree)
