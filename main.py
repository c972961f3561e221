#!/usr/bin/env python3
"""
VN Amount Words — Entry Point
=============================

Reads amounts in Vietnamese words, the way they are printed on receipts.

Usage:
    python main.py                      # Built-in sample amounts
    python main.py 1250000 21 15.5      # Your own amounts
"""

from __future__ import annotations

import sys

from vn_amount_words.converter import INVALID_PHRASE, read_money
from vn_amount_words.receipts import format_number

# ─── Load .env if available (optional dependency) ────────────────────
try:
    from dotenv import load_dotenv

    load_dotenv()
except ImportError:
    pass


# ─── Sample Amounts — Each Exercises a Reading Rule ─────────────────

SAMPLE_AMOUNTS = [
    "0",
    "15",
    "21",
    "105",
    "1000000",
    "1002000",
    "1250000",
    "999999999999999999",
    "-50",
    "abc",
]


# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_GREEN = "\033[92m"
_CYAN = "\033[96m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"
_WIDTH = 72


# ─── Pretty Printer ─────────────────────────────────────────────────


def print_amounts(amounts: list[str]) -> int:
    """Print each amount next to its reading.

    Returns:
        0 if every amount was readable, 1 otherwise.
    """
    print(f"\n{'=' * _WIDTH}")
    print(f"{_BOLD}{_CYAN}  AMOUNT IN WORDS{_RESET}")
    print(f"{'=' * _WIDTH}")

    failures = 0
    for raw in amounts:
        words = read_money(raw)
        if words == INVALID_PHRASE:
            failures += 1
            color, figure = _RED, raw
        else:
            color, figure = _GREEN, format_number(raw, 0)
        print(f"  {_DIM}{figure:>26}{_RESET}  {color}{words}{_RESET}")

    print(f"{'=' * _WIDTH}\n")
    return 0 if failures == 0 else 1


# ─── Main ────────────────────────────────────────────────────────────


def main():
    """Read the amounts given on the command line, or the samples."""
    amounts = sys.argv[1:] or SAMPLE_AMOUNTS
    sys.exit(print_amounts(amounts))


if __name__ == "__main__":
    main()
