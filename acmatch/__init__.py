"""
多模式字符串匹配（Aho-Corasick）：
- 一次扫描找出全部关键词命中（偏移单位为 code point）
- 命中去重叠 / 去包含
- 按命中切分文本、打码替换
"""

from acmatch.automaton.trie import Trie
from acmatch.core.exceptions import AcMatchError, InvalidArgumentError
from acmatch.emits.filters import remove_contains, remove_overlaps
from acmatch.emits.models import Emit, Token
from acmatch.services.mask_service import MaskDecision, MaskService
from acmatch.text.replacer import replace
from acmatch.text.tokenizer import tokenize

__all__ = [
    "AcMatchError",
    "Emit",
    "InvalidArgumentError",
    "MaskDecision",
    "MaskService",
    "Token",
    "Trie",
    "remove_contains",
    "remove_overlaps",
    "replace",
    "tokenize",
]
