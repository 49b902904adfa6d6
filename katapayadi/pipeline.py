"""
Combined pipeline — text → symbols → numeral.

Flow:
  ┌────────────┐
  │ Raw phrase │
  └─────┬──────┘
        │
  ┌─────▼────────┐
  │ Transliterate │   ← Override dictionary, else greedy tokenizer
  └─────┬────────┘
        │
  ┌─────▼──────┐
  │  Calculate  │   ← Katapayadi digits, reversed → number → rashi
  └─────┬──────┘
        │
  ┌─────▼──────┐
  │   Report    │
  └────────────┘

The two phases share no state; the pipeline only owns the override
dictionary it was configured with.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .decoder import calculate
from .models import AnalysisReport, NumeralResult, Transliteration
from .tables import DEFAULT_OVERRIDES, load_overrides
from .transliterator import transliterate

logger = logging.getLogger(__name__)


class KatapayadiPipeline:
    """Runs transliteration and numeral decoding back to back.

    Usage:
        pipeline = KatapayadiPipeline()
        report = pipeline.run("kamal")
        print(report.numeral.number, report.numeral.rashi_name)
    """

    def __init__(self, overrides_path: str | Path | None = None):
        if overrides_path is None:
            self.overrides = DEFAULT_OVERRIDES
        else:
            self.overrides = load_overrides(overrides_path)

    def transliterate(self, text: str) -> Transliteration:
        return transliterate(text, self.overrides)

    def calculate(self, symbolic: str) -> NumeralResult:
        return calculate(symbolic)

    def run(self, text: str) -> AnalysisReport:
        """Transliterate ``text`` and decode the result."""
        logger.info("Transliterating %r", text)
        transliteration = self.transliterate(text)

        logger.info(
            "Decoding %r (%s)",
            transliteration.symbolic,
            transliteration.method.value,
        )
        numeral = self.calculate(transliteration.symbolic)

        return AnalysisReport(
            text=text,
            transliteration=transliteration,
            numeral=numeral,
        )
