"""
cli.py - command line front end for the spelling engine
Features:
- Interactive loop: type a word, get "Correct spelling!" or "Did you mean: ..."
- Slash commands for adding words, prefix checks, stats, benchmarks and config
- Demo run over the synthetic dictionary with a batch of misspellings
- Uses Rich for tables and formatting
"""

import argparse
import shlex
import sys
import time
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt
from rich.table import Table
from rich import box

from trie_autocorrect.dictionary import DEMO_QUERIES, generate_large_dictionary, load_word_file
from trie_autocorrect.errors import ConfigError, DictionaryLoadError
from trie_autocorrect.system import SpellCheckerSystem
from trie_autocorrect.utils.config_manager import Config
from trie_autocorrect.utils.logger_utils import Log
from trie_autocorrect.utils.metrics_tracker import Metrics

HELP = [
    ("<word>", "check a word / get suggestions"),
    ("/suggest <word> [k]", "top-k suggestions (default from config)"),
    ("/add <word>", "add a word to the dictionary"),
    ("/check <word>", "exact dictionary lookup"),
    ("/prefix <prefix>", "does any word start with prefix"),
    ("/stats", "query statistics"),
    ("/bench [n]", "run n benchmark queries (default 1000)"),
    ("/config [key val]", "show or change settings"),
    ("/quit", "leave"),
]


class CLI:
    """Interactive shell around a SpellCheckerSystem."""

    def __init__(self, system: SpellCheckerSystem, cfg: Config, console: Optional[Console] = None):
        self.system = system
        self.cfg = cfg
        self.console = console or Console()
        self.running = True

    def run(self):
        self.console.rule("[bold magenta]Trie Autocorrect[/bold magenta]")
        self.console.print(
            f"[cyan]{self.system.engine.word_count} words loaded. Type a word, /help for commands.[/cyan]"
        )
        while self.running:
            try:
                line = Prompt.ask("[green]Enter word[/green]", default="", console=self.console)
            except (EOFError, KeyboardInterrupt):
                self.console.print("\nbye.")
                self.system.metrics.save()
                break
            self.handle(line)

    def handle(self, line: str) -> None:
        line = line.strip()
        if not line:
            return
        if line.lower() in ("exit", "quit"):
            self._quit()
            return
        if line.lower() == "benchmark":
            self.bench(1000)
            return
        if line.startswith("/"):
            self.command(line)
            return
        self.check(line)

    # COMMAND HANDLING -----------------------------------------------------------
    def command(self, line: str) -> None:
        try:
            p = shlex.split(line)
        except ValueError as e:
            self.console.print(f"[red]bad input: {escape(str(e))}[/red]")
            return
        c, args = p[0].lower(), p[1:]

        if c in ("/q", "/quit", "/exit"):
            self._quit()
        elif c == "/help":
            self._show_help()
        elif c == "/suggest" and args:
            k = self.cfg.get("max_suggestions")
            if len(args) > 1:
                try:
                    k = int(args[1])
                except ValueError:
                    self.console.print("[red]k must be an integer[/red]")
                    return
            self._show_suggestions(args[0], self.system.process_query(args[0], k))
        elif c == "/add" and args:
            for w in args:
                self.system.add_word(w)
            self.console.print(f"added {len(args)} word(s); dictionary has {self.system.engine.word_count}")
        elif c == "/check" and args:
            found = self.system.engine.contains_word(args[0])
            self.console.print(f"{escape(args[0])}: {'[green]in dictionary[/green]' if found else '[red]not found[/red]'}")
        elif c == "/prefix" and args:
            found = self.system.engine.has_prefix(args[0])
            self.console.print(f"prefix {escape(args[0])}: {'[green]yes[/green]' if found else '[red]no[/red]'}")
        elif c == "/stats":
            self.show_stats()
        elif c == "/bench":
            n = 1000
            if args:
                try:
                    n = int(args[0])
                except ValueError:
                    self.console.print("[red]n must be an integer[/red]")
                    return
            self.bench(n)
        elif c == "/config":
            self._config(args)
        else:
            self.console.print("[yellow]unknown cmd (try /help)[/yellow]")

    def check(self, word: str) -> None:
        """Check one word: confirm it, offer corrections, or report nothing found."""
        t0 = time.perf_counter()
        out = self.system.process_query(word)
        dt = (time.perf_counter() - t0) * 1000.0
        if not out:
            self.console.print("No suggestions found.")
        elif self.system.engine.contains_word(word):
            self.console.print("[green]Correct spelling![/green]")
        else:
            self.console.print(f"Did you mean: [bold]{', '.join(out)}[/bold]")
        self.console.print(f"[dim]Response time: {dt:.3f} ms[/dim]")

    def bench(self, n: int) -> None:
        res = self.system.benchmark(DEMO_QUERIES, n)
        table = Table(title="Benchmark Results", box=box.SIMPLE)
        table.add_column("metric")
        table.add_column("value", justify="right")
        table.add_row("Total Queries", str(res.queries))
        table.add_row("Total Time", f"{res.total_ms:.1f} ms")
        table.add_row("Average Time per Query", f"{res.avg_ms:.4f} ms")
        table.add_row("Queries per Second", f"{res.queries_per_second:.2f}")
        self.console.print(table)

    def show_stats(self) -> None:
        render_stats(self.system, self.console)

    # helpers -----------------------------------------------------------
    def _show_suggestions(self, word: str, out: List[str]) -> None:
        if not out:
            self.console.print(f"no suggestions for {escape(word)}")
            return
        table = Table(title=f"Suggestions for '{escape(word)}'", box=box.SIMPLE)
        table.add_column("#", justify="right")
        table.add_column("word")
        for i, s in enumerate(out, 1):
            table.add_row(str(i), s)
        self.console.print(table)

    def _show_help(self) -> None:
        table = Table(box=box.SIMPLE, show_header=False)
        for cmd, desc in HELP:
            table.add_row(f"[cyan]{escape(cmd)}[/cyan]", desc)
        self.console.print(table)

    def _config(self, args: List[str]) -> None:
        if not args:
            for k, v in self.cfg.data.items():
                self.console.print(f"{k:18} = {escape(str(v))}")
            return
        if len(args) != 2:
            self.console.print("usage: /config [key val]")
            return
        try:
            self.cfg.set(args[0], args[1])
        except ConfigError as e:
            self.console.print(f"[red]{escape(str(e))}[/red]")
            return
        if args[0] == "max_suggestions":
            self.system.max_suggestions = self.cfg.get("max_suggestions")
        elif args[0] in ("max_edit_distance", "candidate_factor"):
            self.system.engine.cfg = self.cfg.engine_config()
        self.console.print(f"{args[0]} = {escape(str(self.cfg.get(args[0])))}")

    def _quit(self) -> None:
        self.running = False
        self.system.metrics.save()
        self.console.print("bye.")


def render_stats(system: SpellCheckerSystem, console: Console) -> None:
    st = system.stats()
    table = Table(title="System Statistics", box=box.SIMPLE)
    table.add_column("stat")
    table.add_column("value", justify="right")
    table.add_row("Total Queries", str(st["total_queries"]))
    table.add_row("Successful Results", str(st["successful_results"]))
    table.add_row("Accuracy", f"{st['accuracy']:.2f}%")
    table.add_row("Avg query time", f"{st['avg_query_ms']:.3f} ms")
    table.add_row("Dictionary words", str(st["dictionary_words"]))
    for key, m in system.metrics.snapshot().items():
        table.add_row(f"{key} (avg of {m['count']})", f"{m['avg']:.3f}")
    console.print(table)


def run_demo(system: SpellCheckerSystem, console: Console, bench_queries: int = 1000) -> None:
    """Batch of known misspellings, a throughput run, then the stats table."""
    console.print("\n[bold]Processing test queries:[/bold]")
    for q in DEMO_QUERIES:
        t0 = time.perf_counter()
        out = system.process_query(q)
        dt = (time.perf_counter() - t0) * 1000.0
        console.print(f"Query: '{q}' -> Suggestions: {out} (Response time: {dt:.3f} ms)")

    if bench_queries > 0:
        console.print(f"\nRunning performance test with {bench_queries} queries...")
        res = system.benchmark(DEMO_QUERIES, bench_queries)
        console.print(f"Performance: {res.queries_per_second:.2f} queries/second")

    render_stats(system, console)


def build_system(
    cfg: Config,
    dictionary_file: Optional[str],
    size: Optional[int],
    console: Console,
    metrics_path: Optional[str] = None,
) -> SpellCheckerSystem:
    """metrics_path: JSON file the latency metrics are read from and saved back to."""
    system = SpellCheckerSystem(
        config=cfg.engine_config(),
        max_suggestions=cfg.get("max_suggestions"),
        metrics=Metrics(metrics_path),
    )
    path = dictionary_file or cfg.get("dictionary_file")
    if path:
        try:
            words = load_word_file(path)
        except DictionaryLoadError as e:
            console.print(f"[red]Error: {escape(str(e))}[/red]")
            console.print("[yellow]Warning: Dictionary not loaded properly.[/yellow]")
            words = []
    else:
        words = generate_large_dictionary(size if size is not None else cfg.get("dictionary_size"))
    ms = system.initialize(words)
    console.print(f"Dictionary loaded: {len(words)} words in {int(ms)} ms")
    return system


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Trie-based autocorrect with edit distance")
    parser.add_argument("dictionary", nargs="?", default=None, help="word file (whitespace separated)")
    parser.add_argument("--size", type=int, default=None, help="synthetic dictionary size when no file is given")
    parser.add_argument("--config", type=str, default=None, help="JSON config file")
    parser.add_argument("--demo", action="store_true", help="run the demo queries and exit")
    parser.add_argument("--bench", type=int, default=1000, help="benchmark queries for --demo (0 to skip)")
    parser.add_argument("--log-level", type=str, default="WARNING")
    parser.add_argument("--log-file", type=str, default=None)
    parser.add_argument("--metrics", type=str, default=None, help="JSON file to keep latency metrics across runs")
    args = parser.parse_args(argv)

    Log.setup(args.log_level, args.log_file)
    console = Console()
    cfg = Config(args.config)
    system = build_system(cfg, args.dictionary, args.size, console, args.metrics)

    if args.demo:
        run_demo(system, console, args.bench)
        system.metrics.save()
        return 0
    CLI(system, cfg, console=console).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
