# tests/test_utils.py - metrics tracker and logging helpers
import logging

import pytest
from trie_autocorrect.utils.logger_utils import LOGGER_NAME, Log
from trie_autocorrect.utils.metrics_tracker import Metrics


def test_metrics_avg_and_count():
    m = Metrics()
    assert m.avg("q") == 0.0
    assert m.count("q") == 0
    m.record("q", 1.0)
    m.record("q", 3.0)
    assert m.avg("q") == pytest.approx(2.0)
    assert m.count("q") == 2
    assert m.snapshot() == {"q": {"avg": pytest.approx(2.0), "count": 2}}


def test_metrics_save_and_reload(tmp_path):
    p = tmp_path / "metrics.json"
    m = Metrics(str(p))
    m.record("load_ms", 10.0)
    m.save()
    again = Metrics(str(p))
    assert again.avg("load_ms") == pytest.approx(10.0)


def test_time_block_measures_elapsed():
    with Log.time_block("noop") as t:
        sum(range(1000))
    assert t.elapsed_ms >= 0.0


def test_setup_writes_log_file(tmp_path):
    p = tmp_path / "run.log"
    try:
        Log.setup("DEBUG", str(p), console=False)
        logging.getLogger(f"{LOGGER_NAME}.test").warning("disk is fine")
        Log.metric("queries", 3)
        text = p.read_text(encoding="utf-8")
        assert "WARNING" in text and "disk is fine" in text
        assert "queries: 3" in text
    finally:
        Log.setup("WARNING", console=False)
