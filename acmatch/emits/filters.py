from __future__ import annotations

from typing import Callable, Iterable, List

from acmatch.emits.models import Emit


def sort_emits(emits: Iterable[Emit]) -> List[Emit]:
    """Ascending begin; at equal begin the longer emit comes first."""
    return sorted(emits, key=lambda e: (e.begin, -e.end))


def remove_contains(emits: Iterable[Emit]) -> List[Emit]:
    """Drop every emit nested inside the last kept one.

    Emits that only partially overlap are all kept.
    """
    return _remove_emits(emits, lambda ref, e: ref.contains(e))


def remove_overlaps(emits: Iterable[Emit]) -> List[Emit]:
    """
    贪心区间选择：保留参考项，跳过所有与之相交的命中，再从下一个不相交的命中继续。

    结果两两不相交，但不保证保留数量或覆盖长度最大。
    """
    return _remove_emits(emits, lambda ref, e: ref.overlaps(e))


def _remove_emits(emits: Iterable[Emit], predicate: Callable[[Emit, Emit], bool]) -> List[Emit]:
    ordered = sort_emits(emits)
    if len(ordered) <= 1:
        return ordered

    ref = ordered[0]
    kept: List[Emit] = [ref]
    for emit in ordered[1:]:
        if predicate(ref, emit):
            continue
        kept.append(emit)
        ref = emit
    return kept
