# tests/test_system.py
import pytest
from trie_autocorrect.system import BenchmarkResult, SpellCheckerSystem


@pytest.fixture
def system():
    s = SpellCheckerSystem()
    s.initialize(["program", "problem", "algorithm"])
    return s


def test_initialize_loads_words(system):
    assert system.engine.word_count == 3
    assert system.metrics.count("load_ms") == 1


def test_accuracy_starts_at_zero():
    assert SpellCheckerSystem().accuracy == 0.0


def test_queries_are_counted(system):
    assert system.process_query("progrm") == ["program"]
    assert system.process_query("zzzzzzzz") == []
    assert system.total_queries == 2
    assert system.successful_queries == 1
    assert system.accuracy == pytest.approx(50.0)
    assert system.metrics.count("query_ms") == 2


def test_max_suggestions_override(system):
    system.add_word("programs")
    assert len(system.process_query("progrems", 1)) == 1


def test_stats_snapshot(system):
    system.process_query("algoritm")
    st = system.stats()
    assert st["total_queries"] == 1
    assert st["successful_results"] == 1
    assert st["accuracy"] == 100.0
    assert st["dictionary_words"] == 3
    assert st["avg_query_ms"] >= 0.0


def test_benchmark_runs_and_counts(system):
    res = system.benchmark(["progrm", "algoritm"], 10)
    assert res.queries == 10
    assert res.total_ms >= 0.0
    assert system.total_queries == 10


def test_benchmark_without_queries():
    res = SpellCheckerSystem().benchmark([], 100)
    assert res.queries == 0
    assert res.avg_ms == 0.0
    assert res.queries_per_second == 0.0


def test_benchmark_result_math():
    res = BenchmarkResult(queries=10, total_ms=20.0)
    assert res.avg_ms == pytest.approx(2.0)
    assert res.queries_per_second == pytest.approx(500.0)
