#!/usr/bin/env python3
"""
Katapayadi — Entry Point
========================

Runs the full pipeline on the phrases given on the command line, or on a
built-in sample set when none are given.

Usage:
    python main.py                        # Sample phrases
    python main.py kamal "general electric"
    KATAPAYADI_LOG_LEVEL=DEBUG python main.py kamal
"""

from __future__ import annotations

import logging
import os
import sys

from katapayadi.models import AnalysisReport, DigitStatus
from katapayadi.pipeline import KatapayadiPipeline

# ─── Load .env if available (optional dependency) ────────────────────
try:
    from dotenv import load_dotenv

    load_dotenv()
except ImportError:
    pass


SAMPLE_PHRASES = ["bjp", "kamal", "microsoft", "krishna"]


# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_YELLOW = "\033[93m"
_GREEN = "\033[92m"
_CYAN = "\033[96m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"
_WIDTH = 60

_STATUS_COLORS = {
    DigitStatus.KEPT: _GREEN,
    DigitStatus.WARNED: _YELLOW,
    DigitStatus.DROPPED: _RED,
}


# ─── Pretty Printer ─────────────────────────────────────────────────


def _print_digit_log(report: AnalysisReport) -> None:
    """Print one line per decoded symbol group."""
    for entry in report.numeral.log:
        color = _STATUS_COLORS[entry.status]
        value = "-" if entry.value is None else str(entry.value)
        print(f"    {entry.text:<6} {_BOLD}{value:>2}{_RESET}  {color}{entry.status.value}{_RESET}")


def print_report(report: AnalysisReport) -> None:
    """Pretty-print one analysis report with ANSI color codes."""
    numeral = report.numeral
    print(f"\n{'=' * _WIDTH}")
    print(f"{_BOLD}{_CYAN}  {report.text}{_RESET}")
    print(f"{'─' * _WIDTH}")
    print(f"  Symbolic:    {_BOLD}{report.transliteration.symbolic}{_RESET}")
    print(f"  Method:      {_DIM}{report.transliteration.method.value}{_RESET}")
    print(f"{'─' * _WIDTH}")
    _print_digit_log(report)
    print(f"{'─' * _WIDTH}")
    digits = " ".join(str(d) for d in numeral.reversed_digits) or "-"
    print(f"  Reversed:    {digits}")
    print(f"  Number:      {numeral.number}")
    print(f"  Rashi:       {_BOLD}{numeral.rashi}{_RESET} ({numeral.rashi_name})")
    print(f"{'=' * _WIDTH}")


# ─── Main ────────────────────────────────────────────────────────────


def main() -> None:
    """Analyse each phrase and print its report."""
    logging.basicConfig(
        level=os.environ.get("KATAPAYADI_LOG_LEVEL", "WARNING").upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    phrases = sys.argv[1:] or SAMPLE_PHRASES
    pipeline = KatapayadiPipeline(os.environ.get("KATAPAYADI_OVERRIDES_PATH"))

    for phrase in phrases:
        print_report(pipeline.run(phrase))
    print()


if __name__ == "__main__":
    main()
