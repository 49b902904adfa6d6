"""
Pydantic models for engine results.

Every result is a frozen value built fresh for a single call.  Nothing here
holds state between calls.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


# ─── Enumerations ───────────────────────────────────────────────────


class TransliterationMethod(str, Enum):
    """Which path produced a transliteration."""

    DICTIONARY = "dictionary"  # Whole-phrase override hit
    HEURISTIC = "heuristic"  # Greedy phonetic tokenizer


class DigitStatus(str, Enum):
    """Fate of one symbol group during decoding."""

    KEPT = "kept"
    WARNED = "warned"  # Digit fixed by convention (Ri vowel sign)
    DROPPED = "dropped"  # Dead consonant, no digit


# ─── Transliteration ────────────────────────────────────────────────


class Transliteration(BaseModel):
    """Symbolic rendering of a Latin-letter phrase."""

    model_config = {"frozen": True}

    source: str  # Normalised (trimmed, lower-cased) input
    symbolic: str
    method: TransliterationMethod


# ─── Decoding ───────────────────────────────────────────────────────


class DigitLogEntry(BaseModel):
    """One decoded (or dropped) symbol group."""

    model_config = {"frozen": True}

    text: str  # The matched span, e.g. "क्"
    value: Optional[int] = None  # None only for dropped entries
    status: DigitStatus


class NumeralResult(BaseModel):
    """Everything the decoder derived from one symbolic string."""

    model_config = {"frozen": True}

    symbolic: str
    log: tuple[DigitLogEntry, ...] = ()
    reversed_digits: tuple[int, ...] = ()
    number: int = 0  # reversed_digits read as a decimal integer
    rashi: int = Field(default=12, ge=1, le=12)
    rashi_name: str = "Meena"


# ─── Combined Report ────────────────────────────────────────────────


class AnalysisReport(BaseModel):
    """Output of the full text → symbols → numeral pipeline."""

    model_config = {"frozen": True}

    text: str
    transliteration: Transliteration
    numeral: NumeralResult
