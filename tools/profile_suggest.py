# tools/profile_suggest.py
"""
Small profiling harness for Autocompleter.predict_completions.
Usage:
  python tools/profile_suggest.py --warm 100 --iters 1000 --prefix th
  python tools/profile_suggest.py --dictionary words.txt --prefix pre

Prints mean/median/std latency and a sample of completions.
"""
import argparse
import random
import statistics
import string
import time

from trie_autocompleter.core.autocompleter import Autocompleter
from trie_autocompleter.utils.logger_utils import Log, setup_logging


def synthetic_words(n=50_000, seed=7):
    """Random lowercase words, Zipf-ish repeats so frequencies differ."""
    rng = random.Random(seed)
    vocab = [
        "".join(rng.choice(string.ascii_lowercase) for _ in range(rng.randint(2, 10)))
        for _ in range(n // 5)
    ]
    return [vocab[min(int(rng.paretovariate(1.2)) - 1, len(vocab) - 1)] for _ in range(n)] + vocab


def build(args) -> Autocompleter:
    with Log.time_block("build"):
        if args.dictionary:
            return Autocompleter.from_file(args.dictionary)
        ac = Autocompleter()
        ac.add_words(synthetic_words(args.words))
        return ac


def benchmark(ac: Autocompleter, prefixes, iterations=200):
    times = []
    for _ in range(iterations):
        p = random.choice(prefixes)
        t0 = time.perf_counter()
        _ = ac.predict_completions(p)
        t1 = time.perf_counter()
        times.append((t1 - t0) * 1000.0)  # ms
    return times


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--dictionary", type=str, default=None, help="dictionary file to load")
    parser.add_argument("--words", type=int, default=50_000, help="synthetic word count")
    parser.add_argument("--warm", type=int, default=50, help="warmup iterations")
    parser.add_argument("--iters", type=int, default=500, help="measured iterations")
    parser.add_argument("--prefix", type=str, action="append", help="prefix to query (repeatable)")
    args = parser.parse_args()

    setup_logging("INFO")
    ac = build(args)
    prefixes = args.prefix or list(string.ascii_lowercase)

    print("Warming up...")
    benchmark(ac, prefixes, iterations=args.warm)

    print("Measuring...")
    latencies = benchmark(ac, prefixes, iterations=args.iters)

    print("Stats (ms): mean=%.3f median=%.3f stdev=%.3f min=%.3f max=%.3f" % (
        statistics.mean(latencies),
        statistics.median(latencies),
        statistics.pstdev(latencies),
        min(latencies),
        max(latencies),
    ))
    print(f"{len(ac)} distinct words")
    print("Sample completions:", ac.predict_completions(prefixes[0]))


if __name__ == "__main__":
    main()
