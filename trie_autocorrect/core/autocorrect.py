# autocorrect.py
"""
SuggestionEngine - trie-backed spelling suggestions.

Flow for get_suggestions(word, k):
 - empty query or k <= 0 -> []
 - exact dictionary hit -> [word] (no fuzzy search)
 - otherwise walk the trie depth-first (a..z), score every stored word by
   edit distance to the query, keep those within max_edit_distance
 - rank by (distance asc, frequency desc) and return the first k words

The walk stops descending once k * candidate_factor candidates are held.
That cap is a speed shortcut: results are best-effort and depend on
alphabetical traversal order, they are not a guaranteed global top-k.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from trie_autocorrect.core.distance import levenshtein
from trie_autocorrect.core.ranking import SuggestionCandidate, rank_candidates
from trie_autocorrect.core.trie import PrefixDictionary, TrieNode, normalize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EngineConfig:
    """Knobs for fuzzy matching."""
    max_edit_distance: int = 2
    candidate_factor: int = 10  # stop collecting at k * candidate_factor


class SuggestionEngine:
    """
    Spelling suggestion engine owning one PrefixDictionary.
    Public API:
      load_dictionary(words), add_word(word)
      get_suggestions(word, max_suggestions) -> list[str]
      contains_word(word), has_prefix(prefix), word_count

    Not thread-safe: callers sharing an engine across threads must guard
    inserts with a lock. Concurrent read-only queries are fine.
    """

    def __init__(self, config: Optional[EngineConfig] = None) -> None:
        self.cfg = config or EngineConfig()
        self._dictionary = PrefixDictionary()

    @property
    def dictionary(self) -> PrefixDictionary:
        return self._dictionary

    # loading -------------------------------------------------------------
    def load_dictionary(self, words: Iterable[str]) -> None:
        for word in words:
            self._dictionary.insert(word)
        logger.debug("dictionary now holds %d distinct words", self._dictionary.word_count)

    def add_word(self, word: str) -> None:
        self._dictionary.insert(word)

    # lookup --------------------------------------------------------------
    def contains_word(self, word: str) -> bool:
        return self._dictionary.contains_word(word)

    def has_prefix(self, prefix: str) -> bool:
        return self._dictionary.has_prefix(prefix)

    @property
    def word_count(self) -> int:
        return self._dictionary.word_count

    # suggestions ---------------------------------------------------------
    def get_suggestions(self, word: str, max_suggestions: int = 5) -> List[str]:
        """
        Up to `max_suggestions` dictionary words closest to `word`.
        Returns [word] (normalized) when it is already in the dictionary.
        """
        query = normalize(word)
        if not query or max_suggestions <= 0:
            return []

        if self._dictionary.contains_word(query):
            logger.debug("exact hit for %r", query)
            return [query]

        candidates = self.collect_candidates(query, max_suggestions)
        logger.debug("%d candidates for %r", len(candidates), query)
        return rank_candidates(candidates, max_suggestions)

    def collect_candidates(self, query: str, max_suggestions: int) -> List[SuggestionCandidate]:
        """
        Bounded DFS over the whole trie.
        `query` must already be normalized.
        """
        found: List[SuggestionCandidate] = []
        cap = max_suggestions * self.cfg.candidate_factor
        max_dist = self.cfg.max_edit_distance

        # explicit stack, children pushed z..a so they pop a..z (pre-order)
        stack: List[Tuple[TrieNode, str]] = [(self._dictionary.root, "")]
        while stack:
            node, path = stack.pop()
            if node.is_word:
                d = levenshtein(path, query, max_dist)
                if d <= max_dist:
                    found.append(SuggestionCandidate(path, d, node.freq))

            # cap is checked after scoring this node, before any child is queued
            if len(found) >= cap:
                continue
            for ch, child in reversed(list(node.sorted_children())):
                stack.append((child, path + ch))
        return found
