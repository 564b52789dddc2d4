"""
匹配结果数据模型

Emit 表示一次命中（半开区间 [begin, end)，单位为 code point），
Token 表示对原文的一段切分（带或不带命中）。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Emit:
    begin: int
    end: int  # exclusive
    keyword: str

    @property
    def length(self) -> int:
        return self.end - self.begin

    def overlaps(self, other: "Emit") -> bool:
        return self.begin < other.end and self.end > other.begin

    def contains(self, other: "Emit") -> bool:
        return self.begin <= other.begin and self.end >= other.end

    def to_dict(self) -> Dict[str, Any]:
        return {"begin": self.begin, "end": self.end, "keyword": self.keyword}

    def __str__(self) -> str:
        return f"{self.begin}:{self.end}={self.keyword}"


@dataclass(frozen=True)
class Token:
    fragment: str
    emit: Optional[Emit] = None  # None for text between matches

    @property
    def is_match(self) -> bool:
        return self.emit is not None

    def __str__(self) -> str:
        if self.emit is None:
            return self.fragment
        return f"{self.fragment}({self.emit})"
