"""
Exception hierarchy for the Katapayadi engine.

The transliterator and the decoder are total functions and never raise.
Only configuration problems (a broken override dictionary) surface as
exceptions, and only when the tables are loaded. The loader sets ``code`` to
a stable machine-readable tag and puts the offending file path, plus the
entry or parse position at fault, into ``details``.
"""

from __future__ import annotations


class KatapayadiError(Exception):
    """Base exception for all engine failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.details = details or {}
        super().__init__(message)


class OverrideTableError(KatapayadiError):
    """The whole-phrase override dictionary cannot be loaded."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("OVERRIDE_TABLE_INVALID", message, details)
