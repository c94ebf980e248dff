# -*- coding: utf-8 -*-
"""
policy.py — какие узлы типограф не трогает.

Код пропускается по умолчанию (включается опциями allow_in_*),
формулы пропускаются всегда.
"""

from __future__ import annotations

from mdtypo.config import TypoConfig
from mdtypo.tree import NodeKind

VERBATIM_KINDS = frozenset({
    NodeKind.INLINE_CODE,
    NodeKind.CODE_BLOCK,
    NodeKind.INLINE_MATH,
    NodeKind.MATH_BLOCK,
})


def is_verbatim(kind: NodeKind) -> bool:
    return kind in VERBATIM_KINDS


def should_skip(kind: NodeKind, config: TypoConfig) -> bool:
    if kind is NodeKind.CODE_BLOCK:
        return not config.allow_in_code_blocks
    if kind is NodeKind.INLINE_CODE:
        return not config.allow_in_inline_code
    if kind is NodeKind.MATH_BLOCK:
        return True
    if kind is NodeKind.INLINE_MATH:
        return True
    return False
