from __future__ import annotations

from typing import Iterable

from acmatch.core.exceptions import InvalidArgumentError
from acmatch.emits.filters import remove_contains
from acmatch.emits.models import Emit


def replace(emits: Iterable[Emit], text: str, replacement: str) -> str:
    """Mask every matched span with `replacement` repeated by absolute position.

    Position p of the text becomes replacement[p % len(replacement)], so the
    mask is a repeating pattern aligned to the text, not to each match.
    """
    if not isinstance(replacement, str) or not replacement:
        raise InvalidArgumentError("replacement must be a non-empty string")

    kept = remove_contains(emits)
    if not kept:
        return text

    chars = list(text)
    size = len(replacement)
    for emit in kept:
        for i in range(emit.begin, emit.end):
            chars[i] = replacement[i % size]
    return "".join(chars)
