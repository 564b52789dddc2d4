from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

ROOT = 0


@dataclass(frozen=True)
class Keyword:
    value: str
    length: int

    @classmethod
    def of(cls, value: str) -> "Keyword":
        return cls(value=value, length=len(value))


@dataclass
class State:
    """One node of the automaton.

    `transitions` maps a code point to the index of the child state (goto).
    `failure` is the index of the longest proper suffix state; it never owns.
    `keywords` holds what was registered on this node, `outputs` the same
    followed by everything reachable through the failure chain.
    """

    depth: int
    transitions: Dict[str, int] = field(default_factory=dict)
    failure: int = ROOT
    keywords: List[Keyword] = field(default_factory=list)
    outputs: List[Keyword] = field(default_factory=list)

    @property
    def is_root(self) -> bool:
        return self.depth == 0

    def register(self, keyword: Keyword) -> bool:
        if keyword in self.keywords:
            return False
        self.keywords.append(keyword)
        return True

    def get(self, c: str, ignore_case: bool) -> Optional[int]:
        nxt = self.transitions.get(c)
        if nxt is not None or not ignore_case:
            return nxt
        cc = toggle_case(c)
        if cc == c:
            return None
        return self.transitions.get(cc)

    def next(self, c: str, ignore_case: bool) -> Optional[int]:
        """Goto on `c`; root loops back to itself instead of failing."""
        nxt = self.get(c, ignore_case)
        if nxt is not None:
            return nxt
        if self.is_root:
            return ROOT
        return None


def toggle_case(c: str) -> str:
    """Simple upper<->lower toggle of one code point.

    Mappings that expand to several code points (e.g. 'ß'.upper() == 'SS')
    are treated as having no counterpart.
    """
    if c.islower():
        cc = c.upper()
    elif c.isupper():
        cc = c.lower()
    else:
        return c
    if len(cc) != 1:
        return c
    return cc
