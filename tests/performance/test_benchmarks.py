"""Performance benchmarks for sortkey."""

import random
import time

import pytest

from sortkey import ALPHA, BASE62, OrderedSequence, new_keyset


@pytest.fixture
def keyset():
    return new_keyset(ALPHA, BASE62)


def test_append_performance(keyset):
    """Benchmark sequential appends."""
    num_records = 10000
    seq = OrderedSequence(keyset)

    start_time = time.time()
    for i in range(num_records):
        seq.append(i)
    duration = time.time() - start_time

    ops_per_second = num_records / duration if duration > 0 else float("inf")
    print(f"\nAppends: {ops_per_second:.0f} ops/sec")

    assert ops_per_second > 1000  # At least 1K ops/sec
    # Appends only grow the integer, one digit per band
    assert max(len(k) for k in seq.keys()) <= 4


def test_random_insert_performance(keyset):
    """Benchmark inserts at random positions."""
    num_records = 5000
    rng = random.Random(42)
    seq = OrderedSequence(keyset)
    keys = [seq.append(0)]

    start_time = time.time()
    for i in range(num_records):
        keys.append(seq.insert_after(rng.choice(keys), i))
    duration = time.time() - start_time

    ops_per_second = num_records / duration if duration > 0 else float("inf")
    lengths = [len(k) for k in keys]
    print(f"\nRandom inserts: {ops_per_second:.0f} ops/sec")
    print(f"Max key length: {max(lengths)}, mean: {sum(lengths) / len(lengths):.2f}")

    assert ops_per_second > 1000


def test_between_throughput(keyset):
    """Benchmark raw between() calls on short keys."""
    num_calls = 20000
    pairs = [("a0", "a1"), ("", "a0"), ("a0", ""), ("a05", "a06")]

    start_time = time.time()
    for i in range(num_calls):
        a, b = pairs[i % len(pairs)]
        keyset.between(a, b)
    duration = time.time() - start_time

    calls_per_second = num_calls / duration if duration > 0 else float("inf")
    print(f"\nbetween(): {calls_per_second:.0f} calls/sec")

    assert calls_per_second > 5000
