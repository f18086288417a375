# -*- coding: utf-8 -*-

# pauli_strings/errors.py
"""
Exceptions raised by the Pauli string algebra.

Every error is raised where it is detected and propagates unchanged to the
caller; nothing in the package catches them.
"""

__all__ = [
    "PauliStringError",
    "InvalidSymbolError",
    "LengthMismatchError",
    "InvalidIndexError",
    "UsageError",
    "InternalInvariantError",
]


class PauliStringError(ValueError):
    """Base class for all errors raised by this package."""


class InvalidSymbolError(PauliStringError):
    """A Pauli string contains a character outside ``IXYZ``."""


class LengthMismatchError(PauliStringError):
    """Two operands that must share a qubit count do not."""


class InvalidIndexError(PauliStringError):
    """An embedding index list has the wrong length, duplicates, or out-of-range entries."""


class UsageError(PauliStringError):
    """A coefficient was requested where none can be carried."""


class InternalInvariantError(PauliStringError, AssertionError):
    """
    The symbol table was asked for a pair outside the Pauli alphabet.

    Unreachable through the public constructors, which validate every symbol.
    """
