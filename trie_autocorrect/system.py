# system.py
"""
SpellCheckerSystem - usage bookkeeping around a SuggestionEngine.

Tracks how many queries were served, how many produced at least one
suggestion (reported as "accuracy") and per-query latency. Only the
engine's public operations are used; trie internals stay private.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from trie_autocorrect.core.autocorrect import EngineConfig, SuggestionEngine
from trie_autocorrect.utils.logger_utils import Log
from trie_autocorrect.utils.metrics_tracker import Metrics

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BenchmarkResult:
    queries: int
    total_ms: float

    @property
    def avg_ms(self) -> float:
        return self.total_ms / self.queries if self.queries else 0.0

    @property
    def queries_per_second(self) -> float:
        if self.total_ms <= 0:
            return 0.0
        return self.queries / (self.total_ms / 1000.0)


class SpellCheckerSystem:
    def __init__(
        self,
        engine: Optional[SuggestionEngine] = None,
        *,
        config: Optional[EngineConfig] = None,
        max_suggestions: int = 5,
        metrics: Optional[Metrics] = None,
    ) -> None:
        self.engine = engine or SuggestionEngine(config)
        self.max_suggestions = max_suggestions
        self.metrics = metrics or Metrics()
        self._total = 0
        self._successful = 0

    def initialize(self, words: Sequence[str]) -> float:
        """Load `words` into the engine; returns the load time in ms."""
        t0 = time.perf_counter()
        self.engine.load_dictionary(words)
        dt_ms = (time.perf_counter() - t0) * 1000.0
        logger.info("Dictionary loaded: %d words in %d ms", len(words), int(dt_ms))
        self.metrics.record("load_ms", dt_ms)
        return dt_ms

    def add_word(self, word: str) -> None:
        self.engine.add_word(word)

    def process_query(self, word: str, max_suggestions: Optional[int] = None) -> List[str]:
        k = self.max_suggestions if max_suggestions is None else max_suggestions
        self._total += 1
        t0 = time.perf_counter()
        out = self.engine.get_suggestions(word, k)
        self.metrics.record("query_ms", (time.perf_counter() - t0) * 1000.0)
        if out:
            self._successful += 1
        return out

    def benchmark(self, queries: Sequence[str], iterations: int = 1000) -> BenchmarkResult:
        """Run `iterations` queries cycling through `queries`; counted in the stats like any query."""
        if not queries or iterations <= 0:
            return BenchmarkResult(0, 0.0)
        with Log.time_block("benchmark") as timer:
            for i in range(iterations):
                self.process_query(queries[i % len(queries)])
        return BenchmarkResult(iterations, timer.elapsed_ms)

    # stats -------------------------------------------------------------
    @property
    def total_queries(self) -> int:
        return self._total

    @property
    def successful_queries(self) -> int:
        return self._successful

    @property
    def accuracy(self) -> float:
        """Percentage of queries that returned at least one suggestion."""
        if self._total == 0:
            return 0.0
        return self._successful * 100.0 / self._total

    def stats(self) -> Dict[str, Any]:
        return {
            "total_queries": self._total,
            "successful_results": self._successful,
            "accuracy": round(self.accuracy, 2),
            "avg_query_ms": round(self.metrics.avg("query_ms"), 3),
            "dictionary_words": self.engine.word_count,
        }
