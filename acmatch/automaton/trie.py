from __future__ import annotations

from collections import deque
from typing import Iterable, Iterator, List, Optional

from loguru import logger

from acmatch.automaton.state import ROOT, Keyword, State
from acmatch.core.exceptions import InvalidArgumentError
from acmatch.emits.models import Emit

# 匹配算法（Aho–Corasick）


class Trie:
    """Aho-Corasick automaton over code points.

    States live in an arena (`self._states`), addressed by index; the root is
    index 0. Keywords can be loaded in several batches; once matching starts
    the automaton should be treated as read-only.

    Usage::

        trie = Trie("he", "she").load("his", "hers")
        trie.find_all("ushers")  # [1:4=she, 2:4=he, 2:6=hers]
    """

    def __init__(self, *keywords: str) -> None:
        self._states: List[State] = [State(depth=0)]
        self._keywords: List[str] = []
        self.load(*keywords)

    @property
    def keyword_count(self) -> int:
        return len(self._keywords)

    @property
    def state_count(self) -> int:
        return len(self._states)

    @property
    def keywords(self) -> List[str]:
        return list(self._keywords)

    def __len__(self) -> int:
        return len(self._keywords)

    def __contains__(self, keyword: object) -> bool:
        if not isinstance(keyword, str) or not keyword:
            return False
        index = ROOT
        for c in keyword:
            nxt = self._states[index].transitions.get(c)
            if nxt is None:
                return False
            index = nxt
        return any(k.value == keyword for k in self._states[index].keywords)

    def load(self, *keywords: str) -> "Trie":
        """Insert a batch of keywords and refresh failure links and outputs.

        Empty strings are skipped; a keyword already present is not added again.
        """
        for keyword in keywords:
            if not isinstance(keyword, str):
                raise InvalidArgumentError(f"keyword must be str, got {type(keyword).__name__}")

        states_before = len(self._states)
        added = 0
        for keyword in keywords:
            if not keyword:
                continue
            if self._insert(keyword):
                added += 1

        if added or len(self._states) != states_before:
            self._build()
        logger.debug(
            f"Trie batch loaded: {added} new keywords, "
            f"{len(self._states) - states_before} new states (total {len(self._keywords)} keywords)"
        )
        return self

    def _insert(self, keyword: str) -> bool:
        index = ROOT
        for c in keyword:
            state = self._states[index]
            nxt = state.transitions.get(c)
            if nxt is None:
                nxt = len(self._states)
                state.transitions[c] = nxt
                self._states.append(State(depth=state.depth + 1))
            index = nxt
        if not self._states[index].register(Keyword.of(keyword)):
            return False
        self._keywords.append(keyword)
        return True

    def _build(self) -> None:
        # Build failure links (BFS)
        # A newly appended state may be a longer suffix of an existing path,
        # so every state is revisited, not only the new ones.
        states = self._states
        root = states[ROOT]
        root.outputs = list(root.keywords)

        queue: deque[int] = deque()
        for nxt in root.transitions.values():
            child = states[nxt]
            child.failure = ROOT
            child.outputs = list(child.keywords)
            queue.append(nxt)

        while queue:
            state = states[queue.popleft()]
            for c, nxt in state.transitions.items():
                f = state.failure
                fn = states[f].next(c, False)
                while fn is None:
                    f = states[f].failure
                    fn = states[f].next(c, False)
                child = states[nxt]
                child.failure = fn
                child.outputs = _merge(child.keywords, states[fn].outputs)
                queue.append(nxt)

    def _next_state(self, index: int, c: str, ignore_case: bool) -> int:
        nxt = self._states[index].next(c, ignore_case)
        while nxt is None:
            index = self._states[index].failure
            nxt = self._states[index].next(c, ignore_case)
        return nxt

    def iter_emits(self, text: str, ignore_case: bool = False) -> Iterator[Emit]:
        if not isinstance(text, str):
            raise InvalidArgumentError(f"text must be str, got {type(text).__name__}")
        index = ROOT
        for i, c in enumerate(text):
            index = self._next_state(index, c, ignore_case)
            for kw in self._states[index].outputs:
                yield Emit(i + 1 - kw.length, i + 1, kw.value)

    def find_all(self, text: str, ignore_case: bool = False) -> List[Emit]:
        """All matches, possibly overlapping or nested, by ascending end."""
        return list(self.iter_emits(text, ignore_case))

    def find_first(self, text: str, ignore_case: bool = False) -> Optional[Emit]:
        """
        返回最早结束的命中。

        同一位置有多个命中时取输出集合中的第一个（本节点登记的关键词优先，
        其次按失败链传播顺序），不保证最长或字典序最小。
        """
        return next(self.iter_emits(text, ignore_case), None)

    def contains_any(self, text: str, ignore_case: bool = False) -> bool:
        return self.find_first(text, ignore_case) is not None


def _merge(own: Iterable[Keyword], inherited: Iterable[Keyword]) -> List[Keyword]:
    merged: List[Keyword] = []
    seen = set()
    for kw in (*own, *inherited):
        if kw.value in seen:
            continue
        seen.add(kw.value)
        merged.append(kw)
    return merged
