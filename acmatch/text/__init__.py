"""
文本后处理：基于命中结果的切分与打码。
"""

from acmatch.text.replacer import replace
from acmatch.text.tokenizer import tokenize

__all__ = ["replace", "tokenize"]
