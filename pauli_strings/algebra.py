# -*- coding: utf-8 -*-

# pauli_strings/algebra.py
"""
Multiplication of single-qubit Pauli symbols and of Pauli strings.

Phase contributions are tracked as two raw counters, one for factors of ``i``
and one for factors of ``-1``, and are only reduced to a :class:`Phase` once a
whole string has been multiplied.
"""

from __future__ import annotations
from typing import Dict, Tuple

from .errors import InternalInvariantError, LengthMismatchError
from .phase import Phase, phase_from_factors

__all__ = [
    "PAULI_SYMBOLS",
    "mul_symbols",
    "mul_strings",
]

PAULI_SYMBOLS = "IXYZ"

# (i factor, -1 factor)
_NO_PHASE = (0, 0)
_I_TURN = (1, 0)
_MINUS_I_TURN = (1, 1)

_CYCLIC: Dict[Tuple[str, str], Tuple[Tuple[int, int], str]] = {
    ("X", "Y"): (_I_TURN, "Z"),
    ("Y", "Z"): (_I_TURN, "X"),
    ("Z", "X"): (_I_TURN, "Y"),
    ("Y", "X"): (_MINUS_I_TURN, "Z"),
    ("Z", "Y"): (_MINUS_I_TURN, "X"),
    ("X", "Z"): (_MINUS_I_TURN, "Y"),
}


def mul_symbols(a: str, b: str) -> Tuple[Tuple[int, int], str]:
    """
    Multiply two single-qubit Pauli symbols.

    Parameters
    ----------
    a, b : str
        Symbols from ``"IXYZ"``.

    Returns
    -------
    Tuple[Tuple[int, int], str]
        ``((i_factor, minus_factor), symbol)``. The phase of the product is
        ``i**i_factor * (-1)**minus_factor``; it is not normalized here.

    Raises
    ------
    InternalInvariantError
        If ``(a, b)`` is not a pair of Pauli symbols.

    Examples
    --------
    >>> mul_symbols("X", "Y")
    ((1, 0), 'Z')
    >>> mul_symbols("Y", "X")
    ((1, 1), 'Z')
    """
    if a == b:
        return _NO_PHASE, "I"
    if a == "I":
        return _NO_PHASE, b
    if b == "I":
        return _NO_PHASE, a
    try:
        return _CYCLIC[(a, b)]
    except KeyError:
        raise InternalInvariantError(
            f"Invalid Pauli factors in multiplication {a!r}, {b!r}") from None


def mul_strings(a: str, b: str) -> Tuple[Phase, str]:
    """
    Multiply two Pauli strings qubit by qubit.

    Parameters
    ----------
    a, b : str
        Pauli strings of equal length.

    Returns
    -------
    Tuple[Phase, str]
        Global phase and the product string.

    Raises
    ------
    LengthMismatchError
        If the strings have different lengths.
    """
    n = len(a)
    if n != len(b):
        raise LengthMismatchError(
            f"Pauli string lengths differ: {n} and {len(b)}")

    out = [""] * n
    i_cnt = 0
    minus_cnt = 0
    for j in range(n):
        (i, minus), sym = mul_symbols(a[j], b[j])
        out[j] = sym
        i_cnt += i
        minus_cnt += minus
    return phase_from_factors(i_cnt, minus_cnt), "".join(out)
