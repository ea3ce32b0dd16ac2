# ranking.py
# Ordering of fuzzy-match candidates, kept apart from the trie walk so it
# can be tested on plain lists.

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List


@dataclass(frozen=True)
class SuggestionCandidate:
    """One dictionary word found during a query."""
    word: str
    distance: int
    frequency: int

    def sort_key(self):
        # closer first, then more common
        return (self.distance, -self.frequency)


def rank_candidates(candidates: Iterable[SuggestionCandidate], limit: int) -> List[str]:
    """
    Return up to `limit` words ordered by distance ascending, then frequency
    descending. The sort is stable: candidates that tie on both keep the
    order they were collected in (alphabetical for a trie walk).
    """
    if limit <= 0:
        return []
    ranked = sorted(candidates, key=SuggestionCandidate.sort_key)
    return [c.word for c in ranked[:limit]]
