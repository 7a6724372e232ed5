# Minimal CLI using argparse for generating, checking and stress-testing keys.
from __future__ import annotations

import argparse
import csv
import logging
import random
import statistics
import sys
import time
from pathlib import Path

from sortkey.components.sequence import OrderedSequence
from sortkey.core.config import KeySetConfig
from sortkey.core.errors import SortKeyError
from sortkey.core.keyset import KeySet
from sortkey.interfaces.sequence import KeyedSequence

WORKLOAD_MODES = ("random", "append", "prepend", "hotspot")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="sortkey", description="Generate lexicographically ordered keys"
    )
    p.add_argument("--config", type=Path, help="TOML file with a [sortkey] table")
    p.add_argument("--sigils", help="Sigil alphabet (overrides config)")
    p.add_argument("--digits", help="Digit alphabet (overrides config)")
    p.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    sub = p.add_subparsers(dest="command", required=True)

    between = sub.add_parser("between", help="Print a key between two keys")
    between.add_argument("a", nargs="?", default="", help="Lower bound ('' = none)")
    between.add_argument("b", nargs="?", default="", help="Upper bound ('' = none)")

    spread = sub.add_parser("spread", help="Print N keys between two keys")
    spread.add_argument("n", type=int, help="Number of keys")
    spread.add_argument("--after", default="", help="Lower bound")
    spread.add_argument("--before", default="", help="Upper bound")

    check = sub.add_parser("check", help="Validate keys")
    check.add_argument("keys", nargs="+", help="Keys to validate")

    workload = sub.add_parser("workload", help="Run an insertion workload")
    workload.add_argument("--inserts", type=int, default=10_000, help="Insert count")
    workload.add_argument(
        "--mode", choices=WORKLOAD_MODES, default="random", help="Insert position"
    )
    workload.add_argument("--seed", type=int, help="Random seed")
    workload.add_argument("--out-csv", type=Path, help="Write per-insert key lengths")
    return p


def load_config(args: argparse.Namespace) -> KeySetConfig:
    cfg = KeySetConfig.from_toml(args.config) if args.config else KeySetConfig()
    if args.sigils is not None:
        cfg.sigils = args.sigils
    if args.digits is not None:
        cfg.digits = args.digits
    return cfg


def run_workload(
    seq: KeyedSequence, inserts: int, mode: str, rng: random.Random
) -> list[int]:
    """Insert ``inserts`` items and return the length of each new key."""
    lengths = []
    keys: list[str] = []
    hot = None
    for i in range(inserts):
        if mode == "append" or not keys:
            key = seq.append(i)
        elif mode == "prepend":
            key = seq.prepend(i)
        elif mode == "hotspot":
            # Always insert right after the same anchor
            hot = hot or keys[0]
            key = seq.insert_after(hot, i)
        else:
            key = seq.insert_after(rng.choice(keys), i)
        keys.append(key)
        lengths.append(len(key))
    return lengths


def cmd_workload(args: argparse.Namespace, keyset: KeySet, cfg: KeySetConfig) -> int:
    seq = OrderedSequence(keyset, long_key_warning=cfg.long_key_warning)
    rng = random.Random(args.seed)

    start = time.perf_counter()
    lengths = run_workload(seq, args.inserts, args.mode, rng)
    duration = time.perf_counter() - start

    if args.out_csv:
        with open(args.out_csv, "w", newline="") as f:
            w = csv.writer(f)
            w.writerow(["insert", "key_length"])
            w.writerows(enumerate(lengths))
        print(f"Wrote key lengths to {args.out_csv}")

    if lengths:
        print(f"Inserts: {len(lengths)} ({args.mode}) in {duration:.3f}s")
        print(
            f"Key length: min={min(lengths)} max={max(lengths)} "
            f"mean={statistics.fmean(lengths):.2f}"
        )
    return 0


def main(argv: list[str] | None = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=args.log_level, format="%(levelname)s %(name)s: %(message)s"
    )

    try:
        cfg = load_config(args)
        keyset = KeySet.from_config(cfg)

        if args.command == "between":
            print(keyset.between(args.a, args.b))
        elif args.command == "spread":
            for key in keyset.between_n(args.after, args.before, args.n):
                print(key)
        elif args.command == "check":
            bad = [key for key in args.keys if not keyset.is_valid(key)]
            for key in bad:
                print(f"invalid: {key}", file=sys.stderr)
            return 1 if bad else 0
        elif args.command == "workload":
            return cmd_workload(args, keyset, cfg)
    except (SortKeyError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
