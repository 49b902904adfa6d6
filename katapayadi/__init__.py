"""
Katapayadi — phrase to Vedic numeral and rashi.

Architecture: Transliterate (override dictionary | greedy tokenizer) → Decode (Katapayadi digits) → Rashi
Both phases are total: any input yields a result, never an exception.
"""

from .decoder import calculate
from .transliterator import transliterate

__version__ = "1.0.0"

__all__ = ["calculate", "transliterate", "__version__"]
