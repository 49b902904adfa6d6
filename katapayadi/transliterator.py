"""
Latin phonetic spelling → Devanagari symbols.

Two paths:
  1. Whole-phrase override dictionary (exact match after normalisation).
  2. Greedy longest-match tokenizer over the phonetic unit table.

The tokenizer tracks a single flag, whether the last emitted symbol was a
bare consonant, and uses it to place viramas:

    "kamal"  →  क + म + ल  →  "कमल्"      (trailing virama: final schwa deletion)
    "kmal"   →  क + ् + म + ल + ्  →  "क्मल्"

Unrecognised characters (digits, punctuation, spaces) are dropped silently.
"""

from __future__ import annotations

import logging
import re
from typing import Mapping, Optional

from .models import Transliteration, TransliterationMethod
from .tables import (
    ANUSVARA,
    BARE_VOWEL_UNIT,
    DEFAULT_OVERRIDES,
    PHONETIC_UNITS_LONGEST_FIRST,
    VIRAMA,
    is_plain_consonant,
    normalize_overrides,
    normalize_phrase,
)

logger = logging.getLogger(__name__)

# Dependent vowel signs (ा .. ौ)
_VOWEL_SIGN_RE = re.compile("[\u093e-\u094c]")


def transliterate(
    text: str, overrides: Optional[Mapping[str, str]] = None
) -> Transliteration:
    """Convert a Latin-letter phrase to its symbolic form.

    Args:
        text: Free-form input, e.g. "Kamal" or "  BJP ".
        overrides: Whole-phrase dictionary. Keys are compared trimmed and
            lower-cased, like the input. Defaults to the packaged override
            dictionary.

    Returns:
        Transliteration with ``method`` telling which path was taken.
    """
    overrides = DEFAULT_OVERRIDES if overrides is None else normalize_overrides(overrides)

    normalized = normalize_phrase(text)

    if normalized in overrides:
        logger.debug("Override dictionary hit for %r", normalized)
        return Transliteration(
            source=normalized,
            symbolic=overrides[normalized],
            method=TransliterationMethod.DICTIONARY,
        )

    return Transliteration(
        source=normalized,
        symbolic=_tokenize(normalized),
        method=TransliterationMethod.HEURISTIC,
    )


# ─── Tokenizer ──────────────────────────────────────────────────────


def _match_unit(text: str, pos: int) -> tuple[str, str] | None:
    """Return the longest phonetic unit starting at ``pos``, if any."""
    for unit, symbol in PHONETIC_UNITS_LONGEST_FIRST:
        if text.startswith(unit, pos):
            return unit, symbol
    return None


def _ends_consonant(unit: str, symbol: str) -> bool:
    """Does ``symbol`` leave a bare consonant awaiting a vowel?"""
    if unit == BARE_VOWEL_UNIT:
        return False
    if _VOWEL_SIGN_RE.search(symbol) or symbol == ANUSVARA:
        return False
    return is_plain_consonant(symbol)


def _tokenize(text: str) -> str:
    parts: list[str] = []
    previous_was_consonant = False
    pos = 0

    while pos < len(text):
        match = _match_unit(text, pos)
        if match is None:
            logger.debug("Dropping unrecognised character %r at %d", text[pos], pos)
            pos += 1
            continue

        unit, symbol = match

        # Two bare consonants in a row: break the implicit inherent vowel
        if is_plain_consonant(symbol) and previous_was_consonant:
            parts.append(VIRAMA)
        parts.append(symbol)

        previous_was_consonant = _ends_consonant(unit, symbol)
        pos += len(unit)

    if previous_was_consonant:
        parts.append(VIRAMA)

    return "".join(parts)
