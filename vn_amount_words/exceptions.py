"""
Custom exception hierarchy for amount conversion.

These are raised by the Normalizer only. The public `read_money()` catches
them and maps each one to a fixed phrase; `read_money_strict()` lets them
propagate for callers (like the HTTP API) that must report the failure.
"""

from __future__ import annotations


class AmountError(Exception):
    """Base exception for all amount conversion failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.details = details or {}
        super().__init__(message)


class InvalidAmountError(AmountError):
    """The input is not a usable non-negative number."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_AMOUNT", message, details)


class AmountOutOfRangeError(AmountError):
    """The amount needs more digit groups than the scale table has."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("AMOUNT_OUT_OF_RANGE", message, details)
