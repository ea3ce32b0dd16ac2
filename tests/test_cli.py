# tests/test_cli.py - CLI smoke checks against an in-memory console
import io

import pytest
from rich.console import Console

from trie_autocorrect.cli import CLI, build_system, main, run_demo
from trie_autocorrect.system import SpellCheckerSystem
from trie_autocorrect.utils.config_manager import Config


def _console():
    return Console(file=io.StringIO(), width=120, color_system=None)


@pytest.fixture
def cli():
    system = SpellCheckerSystem()
    system.initialize(["program", "program", "problem"])
    return CLI(system, Config(), console=_console())


def output(cli):
    return cli.console.file.getvalue()


def test_correct_word(cli):
    cli.handle("program")
    assert "Correct spelling!" in output(cli)


def test_misspelled_word(cli):
    cli.handle("progrm")
    assert "Did you mean: program" in output(cli)


def test_no_suggestions(cli):
    cli.handle("zzzzzzzzz")
    assert "No suggestions found." in output(cli)


def test_add_check_and_prefix(cli):
    cli.handle("/add compiler")
    cli.handle("/check compiler")
    cli.handle("/prefix comp")
    out = output(cli)
    assert "dictionary has 3" in out
    assert "compiler: in dictionary" in out
    assert "prefix comp: yes" in out


def test_suggest_command(cli):
    cli.handle("/suggest proglem 1")
    out = output(cli)
    assert "problem" in out
    assert cli.system.total_queries == 1


def test_config_updates_running_system(cli):
    cli.handle("/config max_suggestions 2")
    assert cli.system.max_suggestions == 2
    cli.handle("/config max_edit_distance 1")
    assert cli.system.engine.cfg.max_edit_distance == 1
    cli.handle("/config nope 1")
    assert "no such option" in output(cli)


def test_stats_and_bench(cli):
    cli.handle("/bench 5")
    cli.handle("/stats")
    out = output(cli)
    assert "Benchmark Results" in out
    assert "Total Queries" in out
    assert cli.system.total_queries == 5


def test_help_and_unknown(cli):
    cli.handle("/help")
    cli.handle("/frobnicate")
    out = output(cli)
    assert "/suggest" in out
    assert "unknown cmd" in out


def test_quit(cli):
    cli.handle("exit")
    assert cli.running is False


def test_build_system_with_missing_file(tmp_path):
    console = _console()
    system = build_system(Config(), str(tmp_path / "missing.txt"), None, console)
    assert system.engine.word_count == 0
    assert "Dictionary not loaded properly" in console.file.getvalue()


def test_build_system_from_file(tmp_path):
    p = tmp_path / "words.txt"
    p.write_text("alpha beta gamma", encoding="utf-8")
    system = build_system(Config(), str(p), None, _console())
    assert system.engine.word_count == 3


def test_run_demo():
    console = _console()
    system = build_system(Config(), None, 300, console)
    run_demo(system, console, bench_queries=20)
    out = console.file.getvalue()
    assert "Query: 'progrm' -> Suggestions: ['program']" in out
    assert "System Statistics" in out
    assert system.total_queries == 30


def test_main_demo(capsys):
    assert main(["--demo", "--size", "200", "--bench", "0"]) == 0
    assert "Processing test queries" in capsys.readouterr().out


def test_build_system_with_string_typed_config_file(tmp_path):
    p = tmp_path / "config.json"
    p.write_text('{"max_suggestions": "3", "dictionary_size": "200"}', encoding="utf8")
    system = build_system(Config(str(p)), None, None, _console())
    assert system.max_suggestions == 3
    assert system.process_query("progrm") == ["program"]


def test_metrics_file_is_saved_and_reloaded(tmp_path):
    p = tmp_path / "metrics.json"
    system = build_system(Config(), None, 200, _console(), metrics_path=str(p))
    cli = CLI(system, Config(), console=_console())
    cli.handle("progrm")
    cli.handle("/quit")
    assert p.exists()

    again = build_system(Config(), None, 200, _console(), metrics_path=str(p))
    assert again.metrics.count("query_ms") == 1
    assert again.metrics.count("load_ms") == 2


def test_stats_table_lists_recorded_metrics(cli):
    cli.handle("progrm")
    cli.handle("/stats")
    assert "query_ms (avg of 1)" in output(cli)


def test_main_saves_metrics_after_demo(tmp_path, capsys):
    p = tmp_path / "metrics.json"
    assert main(["--demo", "--size", "200", "--bench", "0", "--metrics", str(p)]) == 0
    assert p.exists()
