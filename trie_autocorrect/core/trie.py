# trie.py
# Prefix tree over the 26 lowercase letters, used as the spelling dictionary.
# Keeps per-word insertion counts so suggestions can break ties by popularity.

from __future__ import annotations
from collections import defaultdict
from typing import Dict, Iterator, List, Optional, Tuple

Word = str
Freq = int
Entry = Tuple[Word, Freq]


def normalize(word: object) -> str:
    """
    Lowercase and keep only a..z.
    Anything else (digits, punctuation, accented letters) is skipped, so
    "a1b" and "ab" walk the same path.
    """
    if not word or not isinstance(word, str):
        return ""
    return "".join(ch for ch in word.lower() if "a" <= ch <= "z")


class TrieNode:
    """
    A single node in the trie.
    children: letter -> TrieNode
    is_word: True if an inserted word ends exactly here
    freq: how many times that word was inserted
    """

    __slots__ = ("children", "is_word", "freq")

    def __init__(self) -> None:
        self.children: Dict[str, TrieNode] = defaultdict(TrieNode)
        self.is_word = False
        self.freq = 0

    def sorted_children(self) -> Iterator[Tuple[str, "TrieNode"]]:
        """Children in alphabetical order (a..z)."""
        for ch in sorted(self.children):
            yield ch, self.children[ch]


class PrefixDictionary:
    """
    Trie storing the dictionary.
    Bad input never raises: empty or letter-less words are ignored on insert
    and simply don't match on lookup.
    """

    def __init__(self) -> None:
        self._root = TrieNode()
        self._word_count = 0

    @property
    def root(self) -> TrieNode:
        return self._root

    # insertion -----------------------------------------------------
    def insert(self, word: str) -> None:
        """
        Insert a word, creating nodes as needed.
        Counts a new distinct word only the first time; freq grows every time.
        """
        key = normalize(word)
        if not key:
            return

        node = self._root
        for ch in key:
            node = node.children[ch]
        if not node.is_word:
            node.is_word = True
            self._word_count += 1
        node.freq += 1

    # lookup ---------------------------------------------------------
    def _find(self, text: str) -> Optional[TrieNode]:
        key = normalize(text)
        if not key:
            return None
        node = self._root
        for ch in key:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def contains_word(self, word: str) -> bool:
        node = self._find(word)
        return node is not None and node.is_word

    def has_prefix(self, prefix: str) -> bool:
        return self._find(prefix) is not None

    def frequency(self, word: str) -> int:
        """Insertion count of `word`, 0 when it isn't stored."""
        node = self._find(word)
        if node is None or not node.is_word:
            return 0
        return node.freq

    @property
    def word_count(self) -> int:
        return self._word_count

    # convenience/debugging -----------------------------------------------------
    def words(self, prefix: str = "") -> List[Entry]:
        """
        All stored words starting with `prefix`, alphabetically, as (word, freq).
        An empty prefix lists the whole dictionary.
        """
        if prefix:
            start = self._find(prefix)
            if start is None:
                return []
            base = normalize(prefix)
        else:
            start, base = self._root, ""

        out: List[Entry] = []
        self._collect(start, base, out)
        return out

    def _collect(self, node: TrieNode, prefix: str, results: List[Entry]) -> None:
        """DFS collecting words under a node, alphabetically."""
        stack = [(node, prefix)]
        while stack:
            n, p = stack.pop()
            if n.is_word:
                results.append((p, n.freq))
            for ch, child in reversed(list(n.sorted_children())):
                stack.append((child, p + ch))

    def __len__(self) -> int:
        return self._word_count

    def __contains__(self, word: str) -> bool:
        return self.contains_word(word)
