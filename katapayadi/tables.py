"""
Static symbol tables for the Katapayadi scheme.

Everything here is reference data, not logic: the consonant → digit table,
the vowel inventory, the Latin phonetic units and the whole-phrase override
dictionary.  The tables are built once at import time and never mutated.

The override dictionary lives in ``overrides.json`` next to this module so it
can be extended (or swapped via ``load_overrides(path)``) without touching code.
"""

from __future__ import annotations

import json
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from .exceptions import OverrideTableError

# ─── Marks ───────────────────────────────────────────────────────────

VIRAMA = "\u094d"  # suppresses the inherent vowel
RI_SIGN = "\u0943"
ANUSVARA = "\u0902"

# ─── Consonant → Digit (ka-ṭa-pa-ya-ādi) ─────────────────────────────

CONSONANT_DIGITS: Mapping[str, int] = MappingProxyType({
    # ka-varga + ca-varga
    "क": 1, "ख": 2, "ग": 3, "घ": 4, "ङ": 5,
    "च": 6, "छ": 7, "ज": 8, "झ": 9, "ञ": 0,
    # ṭa-varga + ta-varga
    "ट": 1, "ठ": 2, "ड": 3, "ढ": 4, "ण": 5,
    "त": 6, "थ": 7, "द": 8, "ध": 9, "न": 0,
    # pa-varga
    "प": 1, "फ": 2, "ब": 3, "भ": 4, "म": 5,
    # ya-ādi
    "य": 1, "र": 2, "ल": 3, "व": 4, "श": 5, "ष": 6, "स": 7, "ह": 8,
    # Atomic conjuncts
    "क्ष": 6, "ज्ञ": 0,
})

# Carry their own digit but never count as plain consonants
ATOMIC_CONJUNCTS: frozenset[str] = frozenset({"क्ष", "ज्ञ"})

# ─── Independent Vowels (digit 0) ────────────────────────────────────

VOWELS: frozenset[str] = frozenset({
    "अ", "आ", "इ", "ई", "उ", "ऊ", "ए", "ऐ", "ओ", "औ", "अं", "अः", "ऋ",
})

# Symbols longer than one code point that must be read as a single unit
MULTI_CHAR_UNITS: tuple[str, ...] = tuple(
    sorted(
        (s for s in (*CONSONANT_DIGITS, *VOWELS) if len(s) > 1),
        key=len,
        reverse=True,
    )
)

# ─── Latin Phonetic Unit → Symbol ────────────────────────────────────
# "a" emits nothing: it only confirms the inherent vowel of the consonant
# before it.

PHONETIC_UNITS: Mapping[str, str] = MappingProxyType({
    # Vowel signs
    "aa": "ा", "ai": "ै", "au": "ौ", "a": "", "i": "ि", "ee": "ी",
    "u": "ु", "oo": "ू", "e": "े", "o": "ो",
    # Clusters and nasal
    "ksh": "क्ष", "tra": "त्र", "gy": "ज्ञ", "jny": "ज्ञ", "ng": "ं",
    # Aspirates and digraphs
    "sh": "श", "ch": "च", "th": "थ", "ph": "फ", "gh": "घ",
    "jh": "झ", "dh": "ध", "bh": "भ", "kh": "ख",
    # Single consonants
    "k": "क", "g": "ग", "j": "ज", "t": "त", "d": "द", "n": "न",
    "p": "प", "f": "फ", "b": "ब", "m": "म", "y": "य", "r": "र",
    "l": "ल", "v": "व", "w": "व", "s": "स", "h": "ह",
})

# sorted() is stable, so equal-length units keep their table order
PHONETIC_UNITS_LONGEST_FIRST: tuple[tuple[str, str], ...] = tuple(
    sorted(PHONETIC_UNITS.items(), key=lambda item: len(item[0]), reverse=True)
)

BARE_VOWEL_UNIT = "a"

# ─── Rashi Names (1..12) ─────────────────────────────────────────────

RASHI_NAMES: tuple[str, ...] = (
    "Mesha", "Vrishabha", "Mithuna", "Karka", "Simha", "Kanya",
    "Tula", "Vrischika", "Dhanu", "Makara", "Kumbha", "Meena",
)


# ─── Classifiers ─────────────────────────────────────────────────────


def is_plain_consonant(symbol: str) -> bool:
    """A table consonant that is not one of the atomic conjuncts."""
    return symbol in CONSONANT_DIGITS and symbol not in ATOMIC_CONJUNCTS


def is_syllable_start(symbol: str) -> bool:
    """True for any symbol that opens a syllable (consonant or vowel)."""
    return symbol in CONSONANT_DIGITS or symbol in VOWELS


# ─── Override Dictionary ─────────────────────────────────────────────


def normalize_phrase(text: str) -> str:
    """Override keys and lookups are compared trimmed and lower-cased."""
    return text.strip().lower()


def normalize_overrides(overrides: Mapping[str, str]) -> Mapping[str, str]:
    """Read-only copy of ``overrides`` with every key normalised."""
    return MappingProxyType(
        {normalize_phrase(phrase): symbolic for phrase, symbolic in overrides.items()}
    )


def load_overrides(path: str | Path | None = None) -> Mapping[str, str]:
    """Load the whole-phrase override dictionary from a JSON file.

    Args:
        path: Path to a JSON object of ``phrase -> symbolic`` strings.
            Defaults to the ``overrides.json`` shipped with the package.

    Raises:
        OverrideTableError: If the file is missing, is not valid JSON, or is
            not a flat object of strings.
    """
    resolved = Path(__file__).parent / "overrides.json" if path is None else Path(path)

    try:
        with resolved.open(encoding="utf-8") as f:
            raw = json.load(f)
    except OSError as e:
        raise OverrideTableError(
            f"Cannot read override dictionary: {resolved}",
            details={"path": str(resolved), "reason": str(e)},
        ) from e
    except json.JSONDecodeError as e:
        raise OverrideTableError(
            f"Override dictionary is not valid JSON: {resolved}",
            details={"path": str(resolved), "line": e.lineno, "column": e.colno},
        ) from e

    if not isinstance(raw, dict):
        raise OverrideTableError(
            "Override dictionary must be a JSON object",
            details={"path": str(resolved), "type": type(raw).__name__},
        )

    for phrase, symbolic in raw.items():
        if not isinstance(symbolic, str):
            raise OverrideTableError(
                f"Override for {phrase!r} must be a string",
                details={"path": str(resolved), "phrase": phrase},
            )

    return normalize_overrides(raw)


DEFAULT_OVERRIDES: Mapping[str, str] = load_overrides()
