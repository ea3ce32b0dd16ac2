#!/usr/bin/env python3
"""
evaluation.py - Evaluation harness

- Builds a SuggestionEngine from a word file (or the synthetic dictionary).
- Runs every misspelling from a pairs file ("misspelling correct" per line).
- Counts top-1 and top-k hits, plus timing.
- Writes a JSON summary report.

Usage:
python -m trie_autocorrect.evaluation pairs.txt --dictionary words.txt --out results.json
"""
from __future__ import annotations

import argparse
import json
import time
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

from trie_autocorrect.core.autocorrect import SuggestionEngine
from trie_autocorrect.core.trie import normalize
from trie_autocorrect.dictionary import generate_large_dictionary, load_word_file

Pair = Tuple[str, str]


def load_pairs(path: Path) -> List[Pair]:
    """Lines of "misspelling correct"; blank lines and lines starting with # are skipped."""
    pairs: List[Pair] = []
    with path.open("r", encoding="utf-8") as fh:
        for ln in fh:
            parts = ln.split()
            if len(parts) < 2 or parts[0].startswith("#"):
                continue
            pairs.append((parts[0], parts[1]))
    return pairs


def evaluate(engine: SuggestionEngine, pairs: Iterable[Pair], top_k: int = 5) -> Dict:
    """
    Query every misspelling and check where the expected word lands.
    top1: expected word ranked first; topk: anywhere in the first top_k.
    """
    stats = {"total": 0, "top1": 0, "topk": 0, "empty": 0, "time": 0.0, "k": top_k}
    t0 = time.perf_counter()
    for wrong, right in pairs:
        expected = normalize(right)
        out = engine.get_suggestions(wrong, top_k)
        stats["total"] += 1
        if not out:
            stats["empty"] += 1
            continue
        if out[0] == expected:
            stats["top1"] += 1
        if expected in out:
            stats["topk"] += 1
    stats["time"] = time.perf_counter() - t0
    return stats


def summarize_and_write(stats: Dict, out_path: Optional[Path]) -> None:
    """Print summary to stdout and optionally write the JSON report."""
    if out_path is not None:
        with out_path.open("w", encoding="utf-8") as fh:
            json.dump(stats, fh, indent=2)

    def pct(h, t):
        return f"{(100.0 * h / t):.2f}%" if t else "N/A"

    tot = stats["total"]
    print("=== Evaluation Summary ===")
    print(f"Top-1  | hits: {stats['top1']}/{tot} | acc: {pct(stats['top1'], tot)}")
    print(f"Top-{stats['k']:<2} | hits: {stats['topk']}/{tot} | acc: {pct(stats['topk'], tot)}")
    print(f"Empty  | {stats['empty']}/{tot}")
    print(f"Time   | {stats['time']:.3f}s | avg time/query: {(stats['time']/tot if tot else 0):.6f}s")
    print("==========================")
    if out_path is not None:
        print(f"Full JSON written to: {out_path}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Evaluate suggestions on misspelling/correct pairs")
    parser.add_argument("pairs", type=str, help="Path to pairs file (misspelling correct per line)")
    parser.add_argument("--dictionary", type=str, default=None, help="Word file; synthetic dictionary if omitted")
    parser.add_argument("--size", type=int, default=100000, help="Synthetic dictionary size")
    parser.add_argument("--top-k", type=int, default=5)
    parser.add_argument("--out", type=str, default=None, help="Output JSON file")
    args = parser.parse_args(argv)

    pairs_path = Path(args.pairs)
    if not pairs_path.exists():
        print(f"Pairs file not found: {pairs_path}")
        return 1

    words = load_word_file(args.dictionary) if args.dictionary else generate_large_dictionary(args.size)
    engine = SuggestionEngine()
    engine.load_dictionary(words)
    pairs = load_pairs(pairs_path)
    print(f"Loaded {len(pairs)} pairs, dictionary has {engine.word_count} words")

    stats = evaluate(engine, pairs, top_k=args.top_k)
    summarize_and_write(stats, Path(args.out) if args.out else None)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
