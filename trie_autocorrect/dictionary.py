# dictionary.py - word sources for the engine: the synthetic demo vocabulary and plain word files

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Union

from trie_autocorrect.core.trie import normalize
from trie_autocorrect.errors import DictionaryLoadError

logger = logging.getLogger(__name__)

BASE_WORDS = [
    "program", "algorithm", "structure", "performance", "optimization", "database",
    "application", "implementation", "efficiency", "scalability", "development",
    "architecture", "framework", "integration", "deployment", "configuration",
    "authentication", "authorization", "encryption", "validation", "testing",
    "debugging", "refactoring", "maintenance", "documentation", "repository",
    "version", "control", "pipeline", "container", "orchestration", "microservice",
    "middleware", "interface", "protocol", "network", "security", "infrastructure",
    "monitoring", "logging", "analytics", "processing", "computing", "storage",
    "memory", "cache", "queue", "stream", "batch", "real", "time", "synchronous",
    "asynchronous", "concurrent", "parallel", "distributed", "scalable", "reliable",
    "available", "consistent", "durable", "transaction", "isolation", "atomicity",
    "consistency", "durability", "serializable", "snapshot", "commit", "rollback",
    "recovery", "backup", "restore", "migration", "replication", "sharding",
    "partitioning", "indexing", "query", "execution", "planning", "optimization",
    "normalization", "denormalization", "schema", "model", "entity", "relationship",
    "attribute", "constraint", "foreign", "primary", "unique", "composite",
    "clustered", "nonclustered",
]

# misspellings used by the demo run and the benchmark
DEMO_QUERIES = [
    "progrm", "algoritm", "strutcure", "performnce", "optimiztion",
    "datbase", "applicaton", "implmentation", "efficency", "scalabilty",
]


def generate_large_dictionary(size: int) -> List[str]:
    """
    Synthetic dictionary of `size` entries.
    The first len(BASE_WORDS) entries are the base words; later ones are
    base words with their index appended ("program96"). Digits are skipped
    on insert, so the suffixed entries only raise base-word frequencies.
    """
    if size <= 0:
        return []
    n = len(BASE_WORDS)
    return [BASE_WORDS[i] if i < n else f"{BASE_WORDS[i % n]}{i}" for i in range(size)]


def load_word_file(path: Union[str, Path]) -> List[str]:
    """
    Read whitespace separated words from a text file.
    Each token is lowercased and stripped down to letters; tokens with no
    letters are dropped.
    """
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8", errors="replace")
    except FileNotFoundError as e:
        raise DictionaryLoadError(f"could not open dictionary file: {p}") from e

    words = [w for w in (normalize(tok) for tok in text.split()) if w]
    logger.info("loaded %d words from %s", len(words), p)
    return words
