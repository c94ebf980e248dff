# -*- coding: utf-8 -*-
"""
config.py — настройки типографа.

Вход:
- mapping опций (как их передаёт хост-конвейер) или config/typography.json

Формат файла:
{
  "typography": {
    "locale": "de-de",
    "allowInCodeBlocks": false,
    "allowInInlineCode": true
  }
}

Ключи принимаются и в camelCase, и в snake_case.
Устаревшие опции (removeLines, removeWhitespacesBeforeMarkdownList,
keepMarkdownCodeBlocks) ничего не делают: принимаем, пишем warning, игнорируем.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

DEFAULT_LOCALE = "en-us"

DEFAULTS: Dict[str, Any] = {
    "locale": DEFAULT_LOCALE,
    "allow_in_code_blocks": False,
    "allow_in_inline_code": False,
}

# camelCase -> snake_case
_ALIASES: Dict[str, str] = {
    "allowInCodeBlocks": "allow_in_code_blocks",
    "allowInInlineCode": "allow_in_inline_code",
    "removeLines": "remove_lines",
    "removeWhitespacesBeforeMarkdownList": "remove_whitespaces_before_markdown_list",
    "keepMarkdownCodeBlocks": "keep_markdown_code_blocks",
}

# Не влияют на результат
LEGACY_OPTIONS = frozenset({
    "remove_lines",
    "remove_whitespaces_before_markdown_list",
    "keep_markdown_code_blocks",
})


@dataclass(frozen=True)
class TypoConfig:
    locale: str = DEFAULT_LOCALE
    allow_in_code_blocks: bool = False
    allow_in_inline_code: bool = False

    @staticmethod
    def load(path: Path, logger: Optional[logging.Logger] = None) -> "TypoConfig":
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
        if not isinstance(raw, dict):
            raise ValueError(f"{path}: top level must be a JSON object")
        section = raw.get("typography", raw)
        if not isinstance(section, dict):
            raise ValueError(f"{path}: 'typography' must be a JSON object")
        return resolve_config(section, logger=logger)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _canonical_key(key: str) -> str:
    return _ALIASES.get(key, key)


def resolve_config(
    options: Optional[Mapping[str, Any]] = None,
    logger: Optional[logging.Logger] = None,
    **overrides: Any,
) -> TypoConfig:
    """Сливает опции с DEFAULTS и возвращает полностью заполненный TypoConfig."""
    log = logger or logging.getLogger("mdtypo.config")
    given: Dict[str, Any] = {}
    for src in (options or {}), overrides:
        for key, value in src.items():
            given[_canonical_key(str(key))] = value

    settings = dict(DEFAULTS)
    for key, value in given.items():
        if key in LEGACY_OPTIONS:
            log.warning("Option %r has no effect and is ignored", key)
            continue
        if key not in DEFAULTS:
            raise ValueError(f"Unknown typography option: {key!r}")
        if value is None:
            # None -> значение по умолчанию, как у отсутствующего ключа
            continue
        if key == "locale":
            # локаль не проверяем
            settings[key] = value
            continue
        if not isinstance(value, bool):
            raise TypeError(f"Option {key!r} must be a bool, got {type(value).__name__}")
        settings[key] = value

    return TypoConfig(**settings)
