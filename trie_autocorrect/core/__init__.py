"""
trie_autocorrect.core

The suggestion engine itself.
Contains:
 - the prefix-tree dictionary (PrefixDictionary)
 - Levenshtein edit distance with an optional cutoff
 - candidate ranking (distance, then frequency)
 - the SuggestionEngine tying them together
"""

from .trie import PrefixDictionary, TrieNode, normalize
from .distance import levenshtein
from .ranking import SuggestionCandidate, rank_candidates
from .autocorrect import EngineConfig, SuggestionEngine

__all__ = [
    "PrefixDictionary",
    "TrieNode",
    "normalize",
    "levenshtein",
    "SuggestionCandidate",
    "rank_candidates",
    "EngineConfig",
    "SuggestionEngine",
]
