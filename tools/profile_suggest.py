# tools/profile_suggest.py
"""
Small profiling harness for SuggestionEngine.get_suggestions.
Usage:
  python tools/profile_suggest.py --size 500000 --warm 50 --iters 1000 --word progrm

Prints mean/median/std latency and a sample of the suggestions.
"""
import argparse
import statistics
import time

from trie_autocorrect.core.autocorrect import SuggestionEngine
from trie_autocorrect.dictionary import generate_large_dictionary


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--size", type=int, default=500000, help="synthetic dictionary size")
    parser.add_argument("--warm", type=int, default=50, help="warmup iterations")
    parser.add_argument("--iters", type=int, default=500, help="measured iterations")
    parser.add_argument("--word", type=str, default="progrm", help="query word")
    parser.add_argument("-k", type=int, default=5, help="suggestions per query")
    args = parser.parse_args()

    engine = SuggestionEngine()
    t0 = time.perf_counter()
    engine.load_dictionary(generate_large_dictionary(args.size))
    print(f"Loaded {args.size} entries ({engine.word_count} distinct) in {time.perf_counter() - t0:.2f}s")

    print("Warming up...")
    for _ in range(args.warm):
        engine.get_suggestions(args.word, args.k)

    latencies = []
    print("Measuring...")
    for _ in range(args.iters):
        t0 = time.perf_counter()
        engine.get_suggestions(args.word, args.k)
        t1 = time.perf_counter()
        latencies.append((t1 - t0) * 1000.0)  # ms

    print("Stats (ms): mean=%.3f median=%.3f stdev=%.3f min=%.3f max=%.3f" % (
        statistics.mean(latencies),
        statistics.median(latencies),
        statistics.pstdev(latencies),
        min(latencies),
        max(latencies),
    ))

    print("Sample output:", engine.get_suggestions(args.word, args.k))


if __name__ == "__main__":
    main()
