"""
Hash table command-line interface (CLI)

Builds a plain or sorted hash table from KEY=VALUE pairs and prints it,
looks a key up, or shows how the keys landed in the buckets. Pairs come
from the command line or, when none are given there, from stdin (one
KEY=VALUE per line).

Usage examples:
    python -m hashtables.cli print --sorted b=2 a=1 c=3
    python -m hashtables.cli print --reverse b=2 a=1 c=3
    python -m hashtables.cli get --key a a=1 b=2
    python -m hashtables.cli buckets --size 8 a=1 b=2 c=3
    printf 'a=1\\nb=2\\n' | python -m hashtables.cli print --sorted
"""

import argparse
import logging
import sys

from .datastructures.hash_map import DEFAULT_CAPACITY, HashTable
from .datastructures.render import format_pairs
from .datastructures.sorted_hash_map import SortedHashTable

logger = logging.getLogger(__name__)

# Exit status for malformed input.
EXIT_USAGE = 2


class PairError(ValueError):
    """A KEY=VALUE argument that cannot be loaded into a table."""


# -------------------------------------------------------------------
# Utility: parse pairs and build tables
# -------------------------------------------------------------------
def parse_pair(text):
    """Split ``KEY=VALUE`` on the first ``=``."""
    key, sep, value = text.partition("=")
    if not sep:
        raise PairError(f"expected KEY=VALUE, got {text!r}")
    return key, value


def read_pairs(args):
    """Return the raw pair strings from argv, falling back to stdin."""
    if args.pairs:
        return args.pairs
    return [line.rstrip("\r\n") for line in sys.stdin if line.strip()]


def build_table(args):
    """Create the table selected by the flags and load every pair into it."""
    sorted_table = getattr(args, "sorted", False) or getattr(args, "reverse", False)
    table = SortedHashTable(args.size) if sorted_table else HashTable(args.size)
    for raw in read_pairs(args):
        key, value = parse_pair(raw)
        if not table.set(key, value):
            raise PairError(f"invalid key in {raw!r}")
    return table


# -------------------------------------------------------------------
# Command handlers
# -------------------------------------------------------------------
def cmd_print(args):
    """Print the table; sorted tables can print in reverse."""
    table = build_table(args)
    if args.reverse:
        table.print_rev()
    else:
        table.print()
    table.delete()
    return 0


def cmd_get(args):
    """Print the value for --key, or (nil) with exit status 1."""
    table = build_table(args)
    value = table.get(args.key)
    table.delete()
    if value is None:
        print("(nil)")
        return 1
    print(value)
    return 0


def cmd_buckets(args):
    """Show each non-empty bucket and its chain, head first."""
    table = build_table(args)
    print(f"size={table.capacity} keys={len(table)}")
    for idx, chain in table.chains():
        print(f"  [{idx}] {format_pairs(chain.items())}")
    table.delete()
    return 0


# -------------------------------------------------------------------
# CLI parser setup
# -------------------------------------------------------------------
def positive_int(text):
    """argparse type for --size: an integer >= 1."""
    try:
        n = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid size: {text!r}")
    if n < 1:
        raise argparse.ArgumentTypeError("size must be >= 1")
    return n


def build_parser():
    """Build the argparse command-line parser with subcommands."""
    p = argparse.ArgumentParser(prog="python -m hashtables.cli", description="Hash table CLI")
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                   help="Logging level for diagnostics on stderr")
    sub = p.add_subparsers(dest="cmd", required=True)

    # --- printing ---
    s = sub.add_parser("print", help="Build a table and print it")
    s.add_argument("--size", type=positive_int, default=DEFAULT_CAPACITY)
    s.add_argument("--sorted", action="store_true", help="Use a sorted hash table")
    s.add_argument("--reverse", action="store_true", help="Print in descending key order (implies --sorted)")
    s.add_argument("pairs", nargs="*", metavar="KEY=VALUE")
    s.set_defaults(func=cmd_print)

    # --- lookup ---
    s = sub.add_parser("get", help="Look a key up")
    s.add_argument("--size", type=positive_int, default=DEFAULT_CAPACITY)
    s.add_argument("--sorted", action="store_true")
    s.add_argument("--key", required=True)
    s.add_argument("pairs", nargs="*", metavar="KEY=VALUE")
    s.set_defaults(func=cmd_get, reverse=False)

    # --- inspection ---
    s = sub.add_parser("buckets", help="Show bucket chains")
    s.add_argument("--size", type=positive_int, default=DEFAULT_CAPACITY)
    s.add_argument("pairs", nargs="*", metavar="KEY=VALUE")
    s.set_defaults(func=cmd_buckets, sorted=False, reverse=False)

    return p


# -------------------------------------------------------------------
# Entry point
# -------------------------------------------------------------------
def main(argv=None):
    """CLI entry point when invoked via `python -m hashtables.cli`."""
    argv = argv or sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), stream=sys.stderr,
                        format="%(levelname)s %(name)s: %(message)s")
    try:
        return args.func(args)
    except PairError as exc:
        logger.debug("rejected input", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_USAGE


if __name__ == "__main__":
    sys.exit(main())
