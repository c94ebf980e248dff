# -*- coding: utf-8 -*-
"""
mdtypo — микротипографика для дерева документа (Markdown).

  from mdtypo import Node, process
  process(tree, {"locale": "de-de"}, corrector)
"""

from mdtypo.config import DEFAULTS, TypoConfig, resolve_config
from mdtypo.markdown import build_tree, create_parser, render_markdown, typography_plugin
from mdtypo.policy import is_verbatim, should_skip
from mdtypo.rewriter import Corrector, Rewriter, apply_correction, process
from mdtypo.tree import Node, NodeKind, walk

__all__ = [
    "DEFAULTS",
    "Corrector",
    "Node",
    "NodeKind",
    "Rewriter",
    "TypoConfig",
    "apply_correction",
    "build_tree",
    "create_parser",
    "is_verbatim",
    "process",
    "render_markdown",
    "resolve_config",
    "should_skip",
    "typography_plugin",
    "walk",
]
