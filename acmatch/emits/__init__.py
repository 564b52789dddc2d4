from acmatch.emits.filters import remove_contains, remove_overlaps, sort_emits
from acmatch.emits.models import Emit, Token

__all__ = ["Emit", "Token", "remove_contains", "remove_overlaps", "sort_emits"]
