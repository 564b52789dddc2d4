from __future__ import annotations

from typing import Iterable, List

from acmatch.emits.filters import remove_contains
from acmatch.emits.models import Emit, Token


def tokenize(emits: Iterable[Emit], text: str) -> List[Token]:
    """
    按命中结果把原文切分为 Token 序列（命中片段 + 中间的未命中片段）。

    只会先去掉被包含的命中；部分重叠的命中会导致切分错位，
    调用方需要自行先执行 remove_overlaps。
    """
    kept = remove_contains(emits)
    if not kept:
        return [Token(text)]

    tokens: List[Token] = []
    index = 0
    for emit in kept:
        if index < emit.begin:
            tokens.append(Token(text[index:emit.begin]))
        tokens.append(Token(text[emit.begin:emit.end], emit))
        index = emit.end

    if kept[-1].end < len(text):
        tokens.append(Token(text[kept[-1].end:]))
    return tokens
