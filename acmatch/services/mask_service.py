from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from loguru import logger

from acmatch.automaton.trie import Trie
from acmatch.core.config import settings
from acmatch.core.exceptions import InvalidArgumentError
from acmatch.emits.filters import remove_contains, remove_overlaps
from acmatch.emits.models import Emit, Token
from acmatch.text.replacer import replace
from acmatch.text.tokenizer import tokenize


@dataclass(frozen=True)
class MaskDecision:
    hit: bool
    masked_text: str
    emits: Sequence[Emit]


class MaskService:
    """Keyword masking on top of a `Trie`.

    Options left as None fall back to `settings`:
    - pattern => MASK_PATTERN
    - ignore_case => IGNORE_CASE
    - remove_overlaps => REMOVE_OVERLAPS (otherwise only nested hits are dropped)
    """

    def __init__(
        self,
        keywords: Sequence[str] = (),
        *,
        pattern: str | None = None,
        ignore_case: bool | None = None,
        remove_overlaps: bool | None = None,
    ) -> None:
        self.pattern = settings.MASK_PATTERN if pattern is None else pattern
        if not self.pattern:
            raise InvalidArgumentError("mask pattern must not be empty")
        self.ignore_case = settings.IGNORE_CASE if ignore_case is None else ignore_case
        self.remove_overlaps = settings.REMOVE_OVERLAPS if remove_overlaps is None else remove_overlaps
        self._trie = Trie(*keywords)

    @property
    def trie(self) -> Trie:
        return self._trie

    def add_keywords(self, *keywords: str) -> "MaskService":
        self._trie.load(*keywords)
        return self

    def _filtered(self, text: str) -> List[Emit]:
        emits = self._trie.find_all(text, self.ignore_case)
        if self.remove_overlaps:
            return remove_overlaps(emits)
        return remove_contains(emits)

    def check(self, text: str) -> MaskDecision:
        emits = self._filtered(text)
        if not emits:
            return MaskDecision(False, text, [])

        logger.debug(f"mask hit: {', '.join(str(e) for e in emits)}")
        return MaskDecision(True, replace(emits, text, self.pattern), emits)

    def tokenize(self, text: str) -> List[Token]:
        return tokenize(self._filtered(text), text)
