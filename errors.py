# errors.py
from __future__ import annotations


class EnigmaError(ValueError):
    """Base class for every machine error."""


class InvalidWiringError(EnigmaError):
    """A wiring is not a bijection over the alphabet."""


class InvalidReflectorError(EnigmaError):
    """A reflector is not an involution without fixed points."""


class InvalidSymbolError(EnigmaError):
    """A symbol (or signal) outside the machine's alphabet."""
