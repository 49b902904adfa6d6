"""
Symbolic string → Katapayadi numeral → rashi.

Positional rules, applied left to right:

  - independent vowel           → digit 0
  - consonant + Ri sign (ृ)     → digit 2, by convention, whatever the consonant
  - consonant + virama + syllable → first consonant's digit; the next
                                    plain consonant of the cluster is swallowed
  - consonant + virama at end   → dead consonant, dropped
  - consonant (inherent vowel)  → its digit; trailing signs are skipped

The collected digits are read in REVERSE order ("aṅkānāṃ vāmato gatiḥ":
numbers run right to left) to form the integer, which is reduced mod 12
into the closed range 1..12.

Unknown symbols are skipped, so decoding never fails.
"""

from __future__ import annotations

import logging

from .models import DigitLogEntry, DigitStatus, NumeralResult
from .tables import (
    CONSONANT_DIGITS,
    MULTI_CHAR_UNITS,
    RASHI_NAMES,
    RI_SIGN,
    VIRAMA,
    VOWELS,
    is_plain_consonant,
    is_syllable_start,
)

logger = logging.getLogger(__name__)

# Fixed digit for a consonant carrying the Ri vowel sign
RI_DIGIT = 2


def calculate(symbolic: str) -> NumeralResult:
    """Decode a symbolic string into its numeral and rashi.

    Args:
        symbolic: Devanagari text, usually the output of ``transliterate``.

    Returns:
        NumeralResult with the per-symbol log, the reversed digit sequence,
        the assembled number and the rashi (1..12).
    """
    log = _decode(split_units(symbolic))

    reversed_digits = tuple(e.value for e in reversed(log) if e.value is not None)
    number = _assemble(reversed_digits)
    rashi = reduce_to_rashi(number)

    return NumeralResult(
        symbolic=symbolic,
        log=log,
        reversed_digits=reversed_digits,
        number=number,
        rashi=rashi,
        rashi_name=RASHI_NAMES[rashi - 1],
    )


def reduce_to_rashi(number: int) -> int:
    """``number mod 12``, with 0 mapped to 12."""
    return number % 12 or 12


# ─── Preprocessing ──────────────────────────────────────────────────


def split_units(text: str) -> list[str]:
    """Split text into symbol units.

    The conjuncts क्ष and ज्ञ are spelled consonant + virama + consonant, and
    अं / अः are vowel + mark; each is folded into one unit here so it is
    classified with its own table entry instead of as separate symbols.
    """
    units: list[str] = []
    pos = 0

    while pos < len(text):
        for unit in MULTI_CHAR_UNITS:
            if text.startswith(unit, pos):
                break
        else:
            unit = text[pos]
        units.append(unit)
        pos += len(unit)

    return units


# ─── Scanner ────────────────────────────────────────────────────────


def _decode(units: list[str]) -> tuple[DigitLogEntry, ...]:
    log: list[DigitLogEntry] = []
    i = 0

    while i < len(units):
        c = units[i]
        n = units[i + 1] if i + 1 < len(units) else ""

        if c in VOWELS:
            log.append(DigitLogEntry(text=c, value=0, status=DigitStatus.KEPT))
            i += 1
            continue

        if c not in CONSONANT_DIGITS:
            i += 1
            continue

        if n == RI_SIGN:
            log.append(
                DigitLogEntry(text=c + n, value=RI_DIGIT, status=DigitStatus.WARNED)
            )
            i += 2
            continue

        if n == VIRAMA:
            nn = units[i + 2] if i + 2 < len(units) else ""
            if nn and is_syllable_start(nn):
                log.append(
                    DigitLogEntry(
                        text=c + VIRAMA,
                        value=CONSONANT_DIGITS[c],
                        status=DigitStatus.KEPT,
                    )
                )
                i += 2
                # Only the first consonant of a conjunct counts
                if is_plain_consonant(units[i]):
                    i += 1
            else:
                logger.debug("Dead consonant %r dropped", c)
                log.append(
                    DigitLogEntry(text=c + VIRAMA, status=DigitStatus.DROPPED)
                )
                i += 2
            continue

        log.append(
            DigitLogEntry(text=c, value=CONSONANT_DIGITS[c], status=DigitStatus.KEPT)
        )
        i += 1
        # Vowel signs and marks ride on the consonant
        while i < len(units) and not is_syllable_start(units[i]):
            i += 1

    return tuple(log)


# ─── Assembly ───────────────────────────────────────────────────────


def _assemble(digits: tuple[int, ...]) -> int:
    """Read the digits as one decimal number; no digits reads as 0.

    Cost grows with the square of the digit count: each step rebuilds a
    larger big integer.
    """
    number = 0
    for d in digits:
        number = number * 10 + d
    return number
