from acmatch.automaton.trie import Trie

__all__ = ["Trie"]
